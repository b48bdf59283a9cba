"""
Core module for Cavos SDK.

This module contains the configuration, request/record types, exceptions
and shared HTTP plumbing that form the foundation of the SDK.
"""

from .config import CavosConfig, DEFAULT_BASE_URL
from .types import (
    DeployRequest,
    ExecuteRequest,
    FormatAmountRequest,
    DeleteUserRequest,
    RegisterRequest,
    LoginRequest,
    RefreshRequest,
    LogoutRequest,
    OrganizationRecord,
    SessionTokens,
    AppleUserData,
)
from .exceptions import (
    CavosSDKError,
    ConfigurationError,
    TransportError,
    UpstreamError,
    DeploymentError,
    ExecutionError,
    QueryError,
    UserDeletionError,
    UnknownError,
    OrganizationNotFoundError,
    InvalidCredentialsError,
    WalletNotFoundError,
    AuthFlowError,
    SocialLoginError,
)
from .http import HttpClient

__all__ = [
    # Configuration
    "CavosConfig",
    "DEFAULT_BASE_URL",

    # Request and record types
    "DeployRequest",
    "ExecuteRequest",
    "FormatAmountRequest",
    "DeleteUserRequest",
    "RegisterRequest",
    "LoginRequest",
    "RefreshRequest",
    "LogoutRequest",
    "OrganizationRecord",
    "SessionTokens",
    "AppleUserData",

    # Exceptions
    "CavosSDKError",
    "ConfigurationError",
    "TransportError",
    "UpstreamError",
    "DeploymentError",
    "ExecutionError",
    "QueryError",
    "UserDeletionError",
    "UnknownError",
    "OrganizationNotFoundError",
    "InvalidCredentialsError",
    "WalletNotFoundError",
    "AuthFlowError",
    "SocialLoginError",

    # HTTP
    "HttpClient",
]

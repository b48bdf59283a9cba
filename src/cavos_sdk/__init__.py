"""
Cavos Service SDK for Python

A Python SDK for the Cavos wallet provider covering wallet deployment,
transaction execution and Auth0-based user registration and login.
"""

__version__ = "0.1.0"

# Core configuration and types
from .core.config import CavosConfig
from .core.types import (
    OrganizationRecord,
    SessionTokens,
    AppleUserData,
)

# Direct wallet operations
from .wallet.client import (
    WalletClient,
    deploy_wallet,
    execute_action,
    get_transaction_transfers,
    get_wallet_counts,
    format_amount,
    delete_user,
)

# Identity clients
from .identity.auth0 import Auth0Client
from .identity.gateway import GatewayAuthClient
from .identity.metadata import MetadataStore

# Identity flows
from .auth.orchestrator import CavosAuth

# Social login
from .social.apple import (
    AppleLogin,
    Navigator,
    BrowserNavigator,
    CallbackNavigator,
    default_navigator,
    parse_user_data,
)

# Exceptions
from .core.exceptions import (
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

# Main exports for public API
__all__ = [
    # Version info
    "__version__",

    # Configuration
    "CavosConfig",

    # Core types
    "OrganizationRecord",
    "SessionTokens",
    "AppleUserData",

    # Wallet operations
    "WalletClient",
    "deploy_wallet",
    "execute_action",
    "get_transaction_transfers",
    "get_wallet_counts",
    "format_amount",
    "delete_user",

    # Identity
    "Auth0Client",
    "GatewayAuthClient",
    "MetadataStore",
    "CavosAuth",

    # Social login
    "AppleLogin",
    "Navigator",
    "BrowserNavigator",
    "CallbackNavigator",
    "default_navigator",
    "parse_user_data",

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
]

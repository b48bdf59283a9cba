"""Custom exceptions for the Cavos SDK."""

from typing import Optional, Any, Dict


class CavosSDKError(Exception):
    """Base exception for all Cavos SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(CavosSDKError):
    """Configuration is invalid or missing."""
    pass


class TransportError(CavosSDKError):
    """The request never reached the server or no response was received."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.method = method
        self.url = url


class UpstreamError(CavosSDKError):
    """The remote service answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
        response_headers: Optional[Dict[str, str]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.response_data = response_data
        self.response_headers = response_headers or {}


class DeploymentError(UpstreamError):
    """Wallet deployment was rejected."""
    pass


class ExecutionError(UpstreamError):
    """Transaction execution was rejected."""
    pass


class QueryError(UpstreamError):
    """A read query against the wallet provider was rejected."""
    pass


class UserDeletionError(UpstreamError):
    """Organization user deletion was rejected."""
    pass


class UnknownError(CavosSDKError):
    """Any other local failure, e.g. a malformed response payload."""
    pass


class OrganizationNotFoundError(CavosSDKError):
    """No organization row, or the row lacks its Auth0 organization id."""

    def __init__(
        self,
        message: str,
        org_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.org_id = org_id


class InvalidCredentialsError(CavosSDKError):
    """The token exchange returned no usable access token."""
    pass


class WalletNotFoundError(CavosSDKError):
    """No wallet row exists for a resolved user."""

    def __init__(
        self,
        message: str,
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.user_id = user_id


class AuthFlowError(CavosSDKError):
    """An identity flow (sign up, sign in, ...) aborted.

    The message is prefixed with the operation name and embeds the
    message of the failing step, which is also chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.operation = operation


class SocialLoginError(CavosSDKError):
    """Social login redirect or callback failed."""
    pass

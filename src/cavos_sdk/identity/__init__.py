"""
Identity module for Cavos SDK.

Clients for the identity provider (Auth0), the organization metadata
store (Supabase) and the wallet provider's own auth endpoints.
"""

from .auth0 import Auth0Client
from .gateway import GatewayAuthClient
from .metadata import MetadataStore

__all__ = [
    "Auth0Client",
    "GatewayAuthClient",
    "MetadataStore",
]

"""Gateway-delegated authentication against the wallet provider's /auth endpoints.

The wallet provider performs identity creation, wallet deployment and
lookups server-side; each call here is a single request authenticated
with the organization secret.
"""

import logging
from typing import Dict, Any

from ..core.http import HttpClient, bearer
from ..core.types import RegisterRequest, LoginRequest, RefreshRequest, LogoutRequest

logger = logging.getLogger(__name__)


class GatewayAuthClient(HttpClient):
    """Async client for the wallet provider's auth endpoints."""

    async def register(
        self,
        email: str,
        password: str,
        org_secret: str,
        network: str = 'sepolia'
    ) -> Dict[str, Any]:
        """Register a user and deploy their wallet in one server-side call."""
        logger.info(f"Registering user through gateway on {network}")
        return await self._request(
            'POST',
            self._url('/auth/register'),
            operation='signUp',
            json_body={'email': email, 'password': password, 'network': network},
            body_model=RegisterRequest,
            headers=bearer(org_secret)
        )

    async def login(self, email: str, password: str, org_secret: str) -> Dict[str, Any]:
        """Log a user in; returns user data, wallet and tokens."""
        return await self._request(
            'POST',
            self._url('/auth/login'),
            operation='signIn',
            json_body={'email': email, 'password': password},
            body_model=LoginRequest,
            headers=bearer(org_secret)
        )

    async def logout(self, access_token: str) -> Dict[str, Any]:
        """Return the logout URL the caller should navigate to."""
        return await self._request(
            'POST',
            self._url('/auth/logout'),
            operation='signOut',
            json_body={'access_token': access_token},
            body_model=LogoutRequest
        )

    async def refresh(self, refresh_token: str, org_secret: str) -> Dict[str, Any]:
        """Exchange a refresh token for new tokens plus wallet info."""
        return await self._request(
            'POST',
            self._url('/auth/refresh'),
            operation='refreshToken',
            json_body={'refresh_token': refresh_token},
            body_model=RefreshRequest,
            headers=bearer(org_secret)
        )

"""Auth0 authentication and management API client."""

import logging
from typing import Dict, Any

from ..core.http import HttpClient, bearer
from ..core.types import SessionTokens
from ..core.exceptions import UnknownError

logger = logging.getLogger(__name__)

DATABASE_CONNECTION = 'Username-Password-Authentication'
PASSWORD_REALM_GRANT = 'http://auth0.com/oauth/grant-type/password-realm'
DEFAULT_SCOPE = 'openid profile email offline_access'


class Auth0Client(HttpClient):
    """Async client for the Auth0 endpoints used by the identity flows.

    Errors from Auth0 are raised as ``UpstreamError`` / ``TransportError``
    with a message prefixed by the step that failed, e.g.
    ``"Failed to create Auth0 user: 409 {...}"``.
    """

    def _url(self, path: str) -> str:
        return f"{self.config.auth0_base_url}{path}"

    async def get_management_token(self) -> str:
        """Obtain a Management API token with the machine-to-machine client.

        Returns:
            Management API access token

        Raises:
            ConfigurationError: M2M credentials are not configured
            UpstreamError: Auth0 rejected the request
            UnknownError: Response carried no access token
        """
        context = 'Failed to get Auth0 management token'
        client_id = self.config.require('auth0_m2m_client_id', 'auth0_m2m_client_secret')
        data = await self._request(
            'POST',
            self._url('/oauth/token'),
            context=context,
            json_body={
                'grant_type': 'client_credentials',
                'client_id': client_id,
                'client_secret': self.config.auth0_m2m_client_secret,
                'audience': f"{self.config.auth0_base_url}/api/v2/",
            }
        )
        if not isinstance(data, dict) or not data.get('access_token'):
            raise UnknownError(f"{context}: response did not include an access_token")
        return data['access_token']

    async def create_user(
        self,
        management_token: str,
        email: str,
        password: str,
        org_id: str
    ) -> Dict[str, Any]:
        """Create a database-connection user tagged with its organization."""
        logger.info(f"Creating Auth0 user for organization {org_id}")
        data = await self._request(
            'POST',
            self._url('/api/v2/users'),
            context='Failed to create Auth0 user',
            json_body={
                'email': email,
                'password': password,
                'connection': DATABASE_CONNECTION,
                'app_metadata': {'org_id': org_id},
            },
            headers=bearer(management_token)
        )
        if not isinstance(data, dict) or not data.get('user_id'):
            raise UnknownError("Failed to create Auth0 user: response did not include a user_id")
        return data

    async def add_organization_member(
        self,
        management_token: str,
        auth0_org_id: str,
        user_id: str
    ) -> Any:
        """Add a user to an Auth0 organization."""
        return await self._request(
            'POST',
            self._url(f'/api/v2/organizations/{auth0_org_id}/members'),
            context='Failed to add user to Auth0 organization',
            json_body={'members': [user_id]},
            headers=bearer(management_token)
        )

    async def delete_user(self, management_token: str, user_id: str) -> None:
        """Delete an Auth0 user."""
        await self._request(
            'DELETE',
            self._url(f'/api/v2/users/{user_id}'),
            context='Failed to delete Auth0 user',
            headers=bearer(management_token)
        )

    async def password_grant(
        self,
        email: str,
        password: str
    ) -> SessionTokens:
        """Exchange user credentials for tokens (password-realm grant).

        Returns:
            Session tokens; ``access_token`` is None when Auth0 issued none
        """
        client_id = self.config.require('auth0_client_id', 'auth0_client_secret')
        body = {
            'grant_type': PASSWORD_REALM_GRANT,
            'username': email,
            'password': password,
            'realm': DATABASE_CONNECTION,
            'client_id': client_id,
            'client_secret': self.config.auth0_client_secret,
            'scope': DEFAULT_SCOPE,
        }
        data = await self._request(
            'POST',
            self._url('/oauth/token'),
            context='Failed to authenticate with Auth0',
            json_body=body
        )
        return SessionTokens(**(data or {}))

    async def get_user_profile(self, access_token: str) -> Dict[str, Any]:
        """Fetch the OIDC profile of the token's subject.

        Raises:
            UnknownError: Response carried no ``sub``
        """
        context = 'Failed to get Auth0 user profile'
        data = await self._request(
            'GET',
            self._url('/userinfo'),
            context=context,
            headers=bearer(access_token)
        )
        if not isinstance(data, dict) or not data.get('sub'):
            raise UnknownError(f"{context}: response did not include a sub")
        return data

    async def revoke_token(self, token: str) -> Any:
        """Revoke a token with the application's client credentials."""
        client_id = self.config.require('auth0_client_id', 'auth0_client_secret')
        return await self._request(
            'POST',
            self._url('/oauth/revoke'),
            json_body={
                'token': token,
                'client_id': client_id,
                'client_secret': self.config.auth0_client_secret,
            }
        )

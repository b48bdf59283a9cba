"""Identity flows combining the metadata store, Auth0 and the wallet provider."""

import logging
from typing import Optional, Dict, Any

from ..core.config import CavosConfig
from ..core.exceptions import (
    CavosSDKError,
    AuthFlowError,
    InvalidCredentialsError,
)
from ..identity.auth0 import Auth0Client
from ..identity.gateway import GatewayAuthClient
from ..identity.metadata import MetadataStore
from ..wallet.client import WalletClient

logger = logging.getLogger(__name__)

SIGN_OUT_RESULT = {'success': True, 'message': 'User signed out successfully'}


class CavosAuth:
    """User registration, login and logout for an organization.

    Each flow runs its steps strictly in sequence and either returns the
    full aggregated result or raises a single ``AuthFlowError`` whose
    message reads ``"<operation> failed: <cause>"``. Nothing is cached
    between calls; token storage and refresh belong to the caller.
    """

    def __init__(
        self,
        config: Optional[CavosConfig] = None,
        wallet: Optional[WalletClient] = None,
        auth0: Optional[Auth0Client] = None,
        metadata: Optional[MetadataStore] = None,
        gateway: Optional[GatewayAuthClient] = None
    ):
        """Initialize the identity flows.

        Args:
            config: Cavos configuration, read from the environment if omitted
            wallet: Wallet provider client
            auth0: Auth0 client
            metadata: Supabase metadata store
            gateway: Wallet provider auth client used for token refresh
        """
        self.config = config or CavosConfig.from_env()
        self.wallet = wallet or WalletClient(self.config)
        self.auth0 = auth0 or Auth0Client(self.config)
        self.metadata = metadata or MetadataStore(self.config)
        self.gateway = gateway or GatewayAuthClient(self.config)

    async def __aenter__(self):
        """Async context manager entry."""
        for client in (self.wallet, self.auth0, self.gateway):
            await client._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the underlying HTTP sessions and the Supabase client."""
        for client in (self.wallet, self.auth0, self.gateway):
            await client.close()
        await self.metadata.close()

    @staticmethod
    def _flow_error(operation: str, error: Exception) -> AuthFlowError:
        cause = error.message if isinstance(error, CavosSDKError) else str(error)
        logger.error(f"{operation} failed: {cause}")
        return AuthFlowError(f"{operation} failed: {cause}", operation=operation)

    async def _discard_user(self, management_token: str, user_id: str) -> None:
        """Remove an Auth0 user left behind by an aborted sign up."""
        try:
            await self.auth0.delete_user(management_token, user_id)
            logger.info(f"Removed Auth0 user {user_id} after failed sign up")
        except CavosSDKError as e:
            logger.warning(f"Could not remove Auth0 user {user_id}: {e.message}")

    async def sign_up(
        self,
        email: str,
        password: str,
        org_id: str,
        network: str = 'sepolia'
    ) -> Dict[str, Any]:
        """Register a user in an organization and deploy their wallet.

        Steps: resolve the organization, mint a management token, create
        the Auth0 user, add it to the Auth0 organization, deploy a wallet
        keyed by ``org_id``. If either of the last two steps fails the
        new Auth0 user is deleted again before the error is raised.

        Args:
            email: User email
            password: User password
            org_id: Organization id (the ``uid`` of its metadata row)
            network: Network to deploy the wallet on

        Returns:
            Auth0 user record with ``wallet`` and ``organization`` merged in

        Raises:
            AuthFlowError: Any step failed
        """
        logger.info(f"Signing up user in organization {org_id} on {network}")
        try:
            organization = await self.metadata.get_organization(org_id)
            management_token = await self.auth0.get_management_token()
            user = await self.auth0.create_user(management_token, email, password, org_id)

            try:
                await self.auth0.add_organization_member(
                    management_token, organization.auth0_orgid, user['user_id']
                )
                wallet = await self.wallet.deploy_wallet(network, org_id)
            except Exception:
                await self._discard_user(management_token, user['user_id'])
                raise

            logger.info(f"Signed up user {user['user_id']} in organization {org_id}")
            return {
                **user,
                'wallet': wallet,
                'organization': organization.descriptor(),
            }

        except Exception as e:
            raise self._flow_error('signUp', e) from e

    async def sign_in(self, email: str, password: str, org_id: str) -> Dict[str, Any]:
        """Log a user in and collect their wallet and organization data.

        Args:
            email: User email
            password: User password
            org_id: Organization id (the ``uid`` of its metadata row)

        Returns:
            ``{user, wallet, external_wallet, organization}``; ``user`` is the
            Auth0 profile plus ``access_token``, ``id_token`` and
            ``refresh_token``, ``external_wallet`` may be None

        Raises:
            AuthFlowError: Any step failed
        """
        logger.info(f"Signing in user in organization {org_id}")
        try:
            organization = await self.metadata.get_organization(org_id)

            tokens = await self.auth0.password_grant(email, password)
            if not tokens.access_token:
                raise InvalidCredentialsError("Invalid credentials")

            profile = await self.auth0.get_user_profile(tokens.access_token)
            wallet = await self.metadata.get_wallet(profile['sub'])
            external_wallet = await self.metadata.get_external_wallet(organization.supabase_id)

            return {
                'user': {**profile, **tokens.user_fields()},
                'wallet': wallet,
                'external_wallet': external_wallet,
                'organization': organization.descriptor(include_internal_id=True),
            }

        except Exception as e:
            raise self._flow_error('signIn', e) from e

    async def sign_out(self, access_token: str) -> Dict[str, Any]:
        """Revoke a token with Auth0.

        Returns:
            ``{'success': True, 'message': 'User signed out successfully'}``

        Raises:
            AuthFlowError: Revocation failed
        """
        try:
            await self.auth0.revoke_token(access_token)
        except Exception as e:
            raise self._flow_error('signOut', e) from e
        logger.info("User signed out")
        return dict(SIGN_OUT_RESULT)

    async def refresh_token(self, refresh_token: str, org_secret: str) -> Dict[str, Any]:
        """Refresh tokens through the wallet provider; returns tokens plus wallet info."""
        return await self.gateway.refresh(refresh_token, org_secret)

    async def delete_user(self, user_id: str, org_secret: str) -> Dict[str, Any]:
        """Delete a user from the organization through the wallet provider."""
        return await self.wallet.delete_user(user_id, org_secret)

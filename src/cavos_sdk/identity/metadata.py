"""Supabase-backed organization and wallet metadata lookups."""

import logging
from typing import Optional, Dict, Any

from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from ..core.config import CavosConfig
from ..core.types import OrganizationRecord
from ..core.exceptions import OrganizationNotFoundError, WalletNotFoundError

logger = logging.getLogger(__name__)


class MetadataStore:
    """Read-only access to the ``org``, ``user_wallet`` and ``external_wallet`` tables.

    Nothing is cached: every call queries Supabase again.
    """

    ORG_TABLE = 'org'
    WALLET_TABLE = 'user_wallet'
    EXTERNAL_WALLET_TABLE = 'external_wallet'

    def __init__(self, config: CavosConfig, client: Optional[AsyncClient] = None):
        self.config = config
        self.client = client
        self._owns_client = client is None

    async def _ensure_client(self) -> AsyncClient:
        if self.client is None:
            url = self.config.require('supabase_url', 'supabase_anon_key')
            self.client = await acreate_client(url, self.config.supabase_anon_key)
            self._owns_client = True
        return self.client

    async def close(self):
        """Release the Supabase client's HTTP connections if this store created it."""
        if self._owns_client and self.client is not None:
            await self.client.postgrest.aclose()
            self.client = None

    async def _fetch_one(self, table: str, columns: str, column: str, value: Any) -> Optional[Dict[str, Any]]:
        """Return the single row where ``column == value``, or None."""
        client = await self._ensure_client()
        logger.debug(f"Supabase lookup {table}.{column}")
        try:
            response = await (
                client.table(table)
                .select(columns)
                .eq(column, value)
                .maybe_single()
                .execute()
            )
        except APIError as e:
            logger.debug(f"Supabase lookup on {table} returned error: {e.message}")
            return None
        if response is None:
            return None
        return response.data or None

    async def get_organization(self, org_id: str) -> OrganizationRecord:
        """Resolve an organization's Auth0 id and internal numeric id.

        Raises:
            OrganizationNotFoundError: No row, or the row has no auth0_orgid
        """
        row = await self._fetch_one(self.ORG_TABLE, 'auth0_orgid, id', 'uid', org_id)
        if not row or not row.get('auth0_orgid'):
            raise OrganizationNotFoundError(
                f"Organization not found or missing auth0_orgid for org_id: {org_id}",
                org_id=org_id
            )
        return OrganizationRecord(
            org_id=org_id,
            auth0_orgid=row['auth0_orgid'],
            supabase_id=row.get('id')
        )

    async def get_wallet(self, user_id: str) -> Dict[str, Any]:
        """Wallet row of an identity-provider user.

        Raises:
            WalletNotFoundError: The user has no wallet row
        """
        row = await self._fetch_one(self.WALLET_TABLE, '*', 'uid', user_id)
        if not row:
            raise WalletNotFoundError(f"Wallet not found for user: {user_id}", user_id=user_id)
        return row

    async def get_external_wallet(self, org_internal_id: Optional[int]) -> Optional[Dict[str, Any]]:
        """External wallet of an organization, None when it has none."""
        if org_internal_id is None:
            return None
        return await self._fetch_one(self.EXTERNAL_WALLET_TABLE, '*', 'org_id', org_internal_id)

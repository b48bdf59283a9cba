"""Client for the wallet provider's direct wallet endpoints."""

import logging
from typing import Optional, List, Any, Dict, Union

from ..core.config import CavosConfig
from ..core.http import HttpClient, bearer
from ..core.types import (
    DeployRequest,
    ExecuteRequest,
    FormatAmountRequest,
    DeleteUserRequest,
)
from ..core.exceptions import (
    DeploymentError,
    ExecutionError,
    QueryError,
    UserDeletionError,
)

logger = logging.getLogger(__name__)


class WalletClient(HttpClient):
    """Async client for wallet deployment, execution and queries.

    Every method performs exactly one request and returns the decoded
    JSON body as received.
    """

    async def deploy_wallet(self, network: str, api_key: str) -> Dict[str, Any]:
        """Deploy a new wallet.

        Args:
            network: Network to deploy the wallet on
            api_key: API key or organization id sent as bearer token

        Returns:
            Wallet record (address, public_key, private_key, ...)

        Raises:
            DeploymentError: Non-2xx response
            TransportError: No response received
            UnknownError: Any other failure
        """
        logger.info(f"Deploying wallet on {network}")
        data = await self._request(
            'POST',
            self._url('/deploy'),
            operation='deployWallet',
            error_cls=DeploymentError,
            json_body={'network': network},
            body_model=DeployRequest,
            headers=bearer(api_key)
        )
        logger.info(f"Wallet deployed on {network}")
        return data

    async def execute_action(
        self,
        network: str,
        calls: List[Any],
        address: str,
        hashed_pk: str,
        api_key: str
    ) -> Dict[str, Any]:
        """Execute a transaction from a wallet.

        Args:
            network: Network to execute on
            calls: Contract calls, forwarded as given
            address: Wallet address
            hashed_pk: Hashed private key
            api_key: API key sent as bearer token

        Returns:
            Transaction result

        Raises:
            ExecutionError: Non-2xx response
            TransportError: No response received
            UnknownError: Any other failure
        """
        logger.info(f"Executing calls from {address} on {network}")
        return await self._request(
            'POST',
            self._url('/execute'),
            operation='executeAction',
            error_cls=ExecutionError,
            json_body={
                'network': network,
                'calls': calls,
                'address': address,
                'hashedPk': hashed_pk,
            },
            body_model=ExecuteRequest,
            headers=bearer(api_key)
        )

    async def get_transaction_transfers(self, tx_hash: str, network: str = 'mainnet') -> Any:
        """Get token transfers for a transaction hash. No authentication."""
        return await self._request(
            'GET',
            self._url('/tx'),
            operation='getTransactionTransfers',
            error_cls=QueryError,
            params={'txHash': tx_hash, 'network': network}
        )

    async def get_wallet_counts(self) -> Dict[str, int]:
        """Get the number of wallets per network. No authentication."""
        return await self._request(
            'GET',
            self._url('/wallets/count'),
            operation='getWalletCounts',
            error_cls=QueryError
        )

    async def format_amount(self, amount: Union[str, int, float], decimals: int = 18) -> Dict[str, Any]:
        """Convert a decimal amount into its ``uint256`` low/high split.

        The conversion happens remotely; the SDK only forwards the values.
        """
        return await self._request(
            'POST',
            self._url('/format'),
            operation='formatAmount',
            error_cls=QueryError,
            json_body={'amount': amount, 'decimals': decimals},
            body_model=FormatAmountRequest
        )

    async def delete_user(self, user_id: str, org_secret: str) -> Dict[str, Any]:
        """Delete a user from the organization.

        Args:
            user_id: Identity-provider user id
            org_secret: Organization secret sent as bearer token

        Returns:
            Deletion result
        """
        logger.info(f"Deleting organization user {user_id}")
        return await self._request(
            'DELETE',
            self._url('/orgs/users'),
            operation='deleteUser',
            error_cls=UserDeletionError,
            json_body={'user_id': user_id},
            body_model=DeleteUserRequest,
            headers=bearer(org_secret)
        )


# Convenience functions for simple usage
async def deploy_wallet(network: str, api_key: str, config: Optional[CavosConfig] = None) -> Dict[str, Any]:
    """Convenience function for wallet deployment."""
    async with WalletClient(config or CavosConfig()) as client:
        return await client.deploy_wallet(network, api_key)


async def execute_action(
    network: str,
    calls: List[Any],
    address: str,
    hashed_pk: str,
    api_key: str,
    config: Optional[CavosConfig] = None
) -> Dict[str, Any]:
    """Convenience function for transaction execution."""
    async with WalletClient(config or CavosConfig()) as client:
        return await client.execute_action(network, calls, address, hashed_pk, api_key)


async def get_transaction_transfers(
    tx_hash: str,
    network: str = 'mainnet',
    config: Optional[CavosConfig] = None
) -> Any:
    """Convenience function for transaction transfer queries."""
    async with WalletClient(config or CavosConfig()) as client:
        return await client.get_transaction_transfers(tx_hash, network)


async def get_wallet_counts(config: Optional[CavosConfig] = None) -> Dict[str, int]:
    """Convenience function for wallet count queries."""
    async with WalletClient(config or CavosConfig()) as client:
        return await client.get_wallet_counts()


async def format_amount(
    amount: Union[str, int, float],
    decimals: int = 18,
    config: Optional[CavosConfig] = None
) -> Dict[str, Any]:
    """Convenience function for amount formatting."""
    async with WalletClient(config or CavosConfig()) as client:
        return await client.format_amount(amount, decimals)


async def delete_user(user_id: str, org_secret: str, config: Optional[CavosConfig] = None) -> Dict[str, Any]:
    """Convenience function for organization user deletion."""
    async with WalletClient(config or CavosConfig()) as client:
        return await client.delete_user(user_id, org_secret)

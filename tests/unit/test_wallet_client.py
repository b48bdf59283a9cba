"""Unit tests for WalletClient."""

import pytest
from unittest.mock import AsyncMock, patch

from aiohttp import ClientConnectionError

from cavos_sdk.wallet.client import WalletClient
from cavos_sdk.wallet import client as wallet_module
from cavos_sdk.core.exceptions import (
    DeploymentError,
    ExecutionError,
    QueryError,
    UserDeletionError,
    TransportError,
    UnknownError,
)

BASE_URL = "https://services.cavos.xyz/api/v1/external"

WALLET = {
    "address": "0x1234567890abcdef",
    "public_key": "test_public_key",
    "private_key": "test_private_key",
    "network": "sepolia",
}


def request_call(session, index=0):
    """(args, kwargs) of the n-th session.request call."""
    return session.request.call_args_list[index]


class TestDeployWallet:
    """Test wallet deployment."""

    @pytest.mark.asyncio
    async def test_deploy_wallet(self, config, make_session, make_response):
        session = make_session(make_response(200, WALLET))
        client = WalletClient(config, session=session)

        result = await client.deploy_wallet("sepolia", "api-key")

        assert result == WALLET
        session.request.assert_called_once()
        args, kwargs = request_call(session)
        assert args == ("POST", f"{BASE_URL}/deploy")
        assert kwargs["json"] == {"network": "sepolia"}
        assert kwargs["headers"] == {"Authorization": "Bearer api-key"}

    @pytest.mark.asyncio
    async def test_deploy_wallet_upstream_error(self, config, make_session, make_response):
        session = make_session(make_response(401, {"error": "Unauthorized"}))
        client = WalletClient(config, session=session)

        with pytest.raises(DeploymentError) as exc_info:
            await client.deploy_wallet("sepolia", "bad-key")

        message = str(exc_info.value)
        assert message.startswith("deployWallet failed: 401")
        assert '{"error":"Unauthorized"}' in message
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_deploy_wallet_no_response(self, config, make_session):
        client = WalletClient(config, session=make_session(ClientConnectionError()))

        with pytest.raises(TransportError) as exc_info:
            await client.deploy_wallet("sepolia", "api-key")

        assert "deployWallet failed: No response received" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_deploy_wallet_forwards_network_unchanged(self, config, make_session, make_response):
        session = make_session(make_response(400, {"error": "network is required"}))
        client = WalletClient(config, session=session)

        with pytest.raises(DeploymentError):
            await client.deploy_wallet(None, "api-key")

        _, kwargs = request_call(session)
        assert kwargs["json"] == {"network": None}

    @pytest.mark.asyncio
    async def test_deploy_wallet_body_failure(self, config, make_session):
        session = make_session()
        client = WalletClient(config, session=session)

        with patch.object(wallet_module, "DeployRequest", side_effect=ValueError("bad body")):
            with pytest.raises(UnknownError) as exc_info:
                await client.deploy_wallet("sepolia", "api-key")

        assert str(exc_info.value) == "deployWallet failed: bad body"
        session.request.assert_not_called()


class TestExecuteAction:
    """Test transaction execution."""

    @pytest.mark.asyncio
    async def test_execute_action(self, config, make_session, make_response):
        calls = [{"contractAddress": "0x1", "entrypoint": "transfer", "calldata": ["0x2", "10", "0"]}]
        tx_result = {"txHash": "0xdeadbeef"}
        session = make_session(make_response(200, tx_result))
        client = WalletClient(config, session=session)

        result = await client.execute_action("sepolia", calls, "0xabc", "hashed", "api-key")

        assert result == tx_result
        args, kwargs = request_call(session)
        assert args == ("POST", f"{BASE_URL}/execute")
        assert kwargs["json"] == {
            "network": "sepolia",
            "calls": calls,
            "address": "0xabc",
            "hashedPk": "hashed",
        }
        assert kwargs["headers"] == {"Authorization": "Bearer api-key"}

    @pytest.mark.asyncio
    async def test_execute_action_error(self, config, make_session, make_response):
        client = WalletClient(config, session=make_session(make_response(500, {"error": "reverted"})))

        with pytest.raises(ExecutionError) as exc_info:
            await client.execute_action("sepolia", [], "0xabc", "hashed", "api-key")

        assert str(exc_info.value).startswith('executeAction failed: 500 {"error":"reverted"}')


class TestQueries:
    """Test read-only queries."""

    @pytest.mark.asyncio
    async def test_get_transaction_transfers(self, config, make_session, make_response):
        transfers = [{"from": "0x1", "to": "0x2", "amount": "5"}]
        session = make_session(make_response(200, transfers))
        client = WalletClient(config, session=session)

        result = await client.get_transaction_transfers("0xhash")

        assert result == transfers
        args, kwargs = request_call(session)
        assert args == ("GET", f"{BASE_URL}/tx")
        assert kwargs["params"] == {"txHash": "0xhash", "network": "mainnet"}
        assert kwargs["headers"] is None

    @pytest.mark.asyncio
    async def test_get_transaction_transfers_error(self, config, make_session, make_response):
        client = WalletClient(config, session=make_session(make_response(404, {"error": "not found"})))

        with pytest.raises(QueryError) as exc_info:
            await client.get_transaction_transfers("0xhash", network="sepolia")

        assert str(exc_info.value).startswith("getTransactionTransfers failed: 404")

    @pytest.mark.asyncio
    async def test_get_wallet_counts(self, config, make_session, make_response):
        counts = {"mainnet": 10, "sepolia": 42}
        session = make_session(make_response(200, counts))
        client = WalletClient(config, session=session)

        result = await client.get_wallet_counts()

        assert result == counts
        args, kwargs = request_call(session)
        assert args == ("GET", f"{BASE_URL}/wallets/count")
        assert kwargs["headers"] is None
        assert kwargs["json"] is None

    @pytest.mark.asyncio
    async def test_format_amount(self, config, make_session, make_response):
        formatted = {"uint256": {"low": "1000000000000000000", "high": "0"}}
        session = make_session(make_response(200, formatted))
        client = WalletClient(config, session=session)

        result = await client.format_amount("1")

        assert result == formatted
        args, kwargs = request_call(session)
        assert args == ("POST", f"{BASE_URL}/format")
        assert kwargs["json"] == {"amount": "1", "decimals": 18}
        assert kwargs["headers"] is None

    @pytest.mark.asyncio
    async def test_format_amount_custom_decimals(self, config, make_session, make_response):
        session = make_session(make_response(200, {"uint256": {"low": "2500000", "high": "0"}}))
        client = WalletClient(config, session=session)

        await client.format_amount(2.5, decimals=6)

        _, kwargs = request_call(session)
        assert kwargs["json"] == {"amount": 2.5, "decimals": 6}

    @pytest.mark.asyncio
    async def test_format_amount_forwards_values_unchanged(self, config, make_session, make_response):
        session = make_session(make_response(200, {"uint256": {"low": "1500000", "high": "0"}}))
        client = WalletClient(config, session=session)

        await client.format_amount("1.5", decimals="6")

        _, kwargs = request_call(session)
        assert kwargs["json"] == {"amount": "1.5", "decimals": "6"}


class TestDeleteUser:
    """Test organization user deletion."""

    @pytest.mark.asyncio
    async def test_delete_user(self, config, make_session, make_response):
        session = make_session(make_response(200, {"deleted": True}))
        client = WalletClient(config, session=session)

        result = await client.delete_user("auth0|123", "org-secret")

        assert result == {"deleted": True}
        args, kwargs = request_call(session)
        assert args == ("DELETE", f"{BASE_URL}/orgs/users")
        assert kwargs["json"] == {"user_id": "auth0|123"}
        assert kwargs["headers"] == {"Authorization": "Bearer org-secret"}

    @pytest.mark.asyncio
    async def test_delete_user_error(self, config, make_session, make_response):
        client = WalletClient(config, session=make_session(make_response(403, {"error": "forbidden"})))

        with pytest.raises(UserDeletionError):
            await client.delete_user("auth0|123", "org-secret")


class TestConvenienceFunctions:
    """Test module-level convenience functions."""

    @pytest.mark.asyncio
    async def test_deploy_wallet_function(self, config):
        with patch.object(WalletClient, "deploy_wallet", AsyncMock(return_value=WALLET)) as mock_deploy:
            result = await wallet_module.deploy_wallet("sepolia", "api-key", config=config)

        assert result == WALLET
        mock_deploy.assert_awaited_once_with("sepolia", "api-key")

    @pytest.mark.asyncio
    async def test_get_wallet_counts_function(self, config):
        with patch.object(WalletClient, "get_wallet_counts", AsyncMock(return_value={"mainnet": 1})):
            result = await wallet_module.get_wallet_counts(config=config)

        assert result == {"mainnet": 1}

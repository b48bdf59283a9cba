#!/usr/bin/env python3
"""
Wallet Example: Direct Wallet Operations

This example demonstrates the wallet provider endpoints:
- Public wallet statistics and transaction transfer lookups
- Amount formatting for Starknet uint256 calldata
- Wallet deployment and transaction execution with an API key

Requirements:
- CAVOS_API_KEY set for the authenticated calls
- Network access to services.cavos.xyz
"""

import asyncio
import logging
import os
from pathlib import Path
import sys

# Add the src directory to the path so we can import the SDK modules
project_dir = Path(__file__).parent.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

from cavos_sdk.core.config import CavosConfig
from cavos_sdk.wallet.client import WalletClient, get_wallet_counts
from cavos_sdk.core.exceptions import CavosSDKError, DeploymentError, TransportError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# STRK token contract on Starknet
STRK_TOKEN = "0x04718f5a0fc34cc1af16a1cdee98ffb20c31f5cd61d6ab07201858f4287c938d"


async def example_public_queries():
    """Demonstrate unauthenticated queries."""
    print("\n=== Public Queries Example ===")

    counts = await get_wallet_counts()
    for network, count in counts.items():
        print(f"  {network}: {count} wallets")

    async with WalletClient(CavosConfig()) as client:
        formatted = await client.format_amount("1.5")
        print(f"1.5 STRK as uint256: {formatted['uint256']}")


async def example_deploy_and_execute(api_key: str):
    """Deploy a wallet and send a transfer from it."""
    print("\n=== Deploy & Execute Example ===")

    async with WalletClient(CavosConfig.from_env()) as client:
        try:
            wallet = await client.deploy_wallet("sepolia", api_key)
            print(f"✅ Deployed wallet {wallet['address']}")

            amount = await client.format_amount("0.01")
            calls = [{
                "contractAddress": STRK_TOKEN,
                "entrypoint": "transfer",
                "calldata": [
                    wallet["address"],
                    amount["uint256"]["low"],
                    amount["uint256"]["high"],
                ],
            }]
            result = await client.execute_action(
                "sepolia",
                calls,
                wallet["address"],
                wallet["private_key"],
                api_key
            )
            print(f"✅ Transaction submitted: {result}")

            transfers = await client.get_transaction_transfers(result.get("txHash", ""), "sepolia")
            print(f"Transfers: {transfers}")

        except DeploymentError as e:
            print(f"❌ Deployment rejected ({e.status_code}): {e.response_data}")
        except TransportError as e:
            print(f"❌ Wallet provider unreachable: {e}")
        except CavosSDKError as e:
            print(f"❌ Error: {e}")


async def main():
    """Run the wallet examples."""
    print("🚀 Cavos SDK Wallet Examples")
    print("=" * 50)

    try:
        await example_public_queries()

        api_key = os.environ.get('CAVOS_API_KEY')
        if api_key:
            await example_deploy_and_execute(api_key)
        else:
            print("\nSet CAVOS_API_KEY to run the deployment example")

    except Exception as e:
        print(f"\n❌ Example failed with error: {e}")
        logger.exception("Example execution failed")


if __name__ == "__main__":
    asyncio.run(main())

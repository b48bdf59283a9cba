"""
Wallet module for Cavos SDK.

This module provides the direct wallet operations of the Cavos wallet
provider: deployment, transaction execution and read-only queries.
"""

from .client import (
    WalletClient,
    deploy_wallet,
    execute_action,
    get_transaction_transfers,
    get_wallet_counts,
    format_amount,
    delete_user,
)

__all__ = [
    "WalletClient",
    "deploy_wallet",
    "execute_action",
    "get_transaction_transfers",
    "get_wallet_counts",
    "format_amount",
    "delete_user",
]

"""Typed results of rollup JSON-RPC calls."""

from zksync_client.models.account import AccountSnapshot, AccountState, DepositingBalance
from zksync_client.models.base import TxAction, TxType, to_big_int
from zksync_client.models.fee import Fee
from zksync_client.models.receipts import BlockInfo, PriorityOperationReceipt, TransactionReceipt
from zksync_client.models.registry import ContractAddress, Token, tokens_from_dict

__all__ = [
    "AccountSnapshot",
    "AccountState",
    "BlockInfo",
    "ContractAddress",
    "DepositingBalance",
    "Fee",
    "PriorityOperationReceipt",
    "Token",
    "TransactionReceipt",
    "TxAction",
    "TxType",
    "to_big_int",
    "tokens_from_dict",
]

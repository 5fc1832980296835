"""Account state model — committed, verified and depositing balances."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from zksync_client.models.base import to_big_int


@dataclass(frozen=True)
class AccountSnapshot:
    """Balances and nonce of an account at one settlement stage."""

    balances: dict[str, int] = field(default_factory=dict)
    nonce: int = 0
    pub_key_hash: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> AccountSnapshot:
        data = data or {}
        return cls(
            balances={
                symbol: to_big_int(amount)
                for symbol, amount in (data.get("balances") or {}).items()
            },
            nonce=int(data.get("nonce", 0)),
            pub_key_hash=data.get("pubKeyHash", ""),
        )


@dataclass(frozen=True)
class DepositingBalance:
    """A deposit seen on the base chain but not yet accepted by the rollup."""

    amount: int
    expected_accept_block: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DepositingBalance:
        return cls(
            amount=to_big_int(data.get("amount", 0)),
            expected_accept_block=int(data.get("expectedAcceptBlock", 0)),
        )


@dataclass(frozen=True)
class AccountState:
    """State of one account as reported by ``account_info``.

    Attributes:
        address: The account address.
        id: Rollup account id, ``None`` until the account exists in the tree.
        committed: State including committed but unverified blocks.
        verified: State as of the last verified block.
        depositing: Pending deposits keyed by token symbol.
    """

    address: str
    id: int | None = None
    committed: AccountSnapshot = field(default_factory=AccountSnapshot)
    verified: AccountSnapshot = field(default_factory=AccountSnapshot)
    depositing: dict[str, DepositingBalance] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AccountState:
        """Create from an ``account_info`` JSON result."""
        depositing = (data.get("depositing") or {}).get("balances") or {}
        return cls(
            address=data.get("address", ""),
            id=data.get("id"),
            committed=AccountSnapshot.from_dict(data.get("committed")),
            verified=AccountSnapshot.from_dict(data.get("verified")),
            depositing={
                symbol: DepositingBalance.from_dict(item) for symbol, item in depositing.items()
            },
        )

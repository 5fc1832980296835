"""Receipt models for transactions and priority operations.

Both carry an optional ``block`` whose ``committed`` and ``verified`` flags
only ever go from false to true.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from zksync_client.models.base import TxAction


@dataclass(frozen=True)
class BlockInfo:
    """The rollup block an event was included in."""

    block_number: int
    committed: bool = False
    verified: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> BlockInfo | None:
        if not data:
            return None
        return cls(
            block_number=int(data.get("blockNumber", 0)),
            committed=bool(data.get("committed", False)),
            verified=bool(data.get("verified", False)),
        )

    def reached(self, action: TxAction | str) -> bool:
        """Whether the block has passed the given milestone."""
        if TxAction(action) is TxAction.COMMIT:
            return self.committed
        return self.verified


@dataclass(frozen=True)
class _Receipt:
    executed: bool = False
    block: BlockInfo | None = None

    def reached(self, action: TxAction | str) -> bool:
        """Whether the event has reached ``action`` (COMMIT or VERIFY)."""
        return self.block is not None and self.block.reached(action)


@dataclass(frozen=True)
class TransactionReceipt(_Receipt):
    """Status of a rollup transaction (``tx_info``)."""

    success: bool | None = None
    fail_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransactionReceipt:
        return cls(
            executed=bool(data.get("executed", False)),
            block=BlockInfo.from_dict(data.get("block")),
            success=data.get("success"),
            fail_reason=data.get("failReason"),
        )


@dataclass(frozen=True)
class PriorityOperationReceipt(_Receipt):
    """Status of a base-chain priority operation (``ethop_info``)."""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PriorityOperationReceipt:
        return cls(
            executed=bool(data.get("executed", False)),
            block=BlockInfo.from_dict(data.get("block")),
        )

"""Transaction fee model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from zksync_client.models.base import to_big_int


@dataclass(frozen=True)
class Fee:
    """Fee breakdown returned by ``get_tx_fee``; amounts in base units."""

    fee_type: str
    gas_tx_amount: int
    gas_price_wei: int
    gas_fee: int
    zkp_fee: int
    total_fee: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Fee:
        """Decode a raw fee object; numeric fields may be decimal strings."""
        return cls(
            fee_type=data.get("feeType", ""),
            gas_tx_amount=to_big_int(data["gasTxAmount"]),
            gas_price_wei=to_big_int(data["gasPriceWei"]),
            gas_fee=to_big_int(data["gasFee"]),
            zkp_fee=to_big_int(data["zkpFee"]),
            total_fee=to_big_int(data["totalFee"]),
        )

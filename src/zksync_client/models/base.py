"""Shared enums and numeric coercion for rollup response models."""

from __future__ import annotations

import enum
from typing import Any


class TxAction(enum.StrEnum):
    """Settlement milestones of a transaction or priority operation.

    Lifecycle: submitted → COMMIT → VERIFY
    """

    COMMIT = "COMMIT"
    VERIFY = "VERIFY"


class TxType(enum.StrEnum):
    """Transaction kinds accepted by ``get_tx_fee``."""

    WITHDRAW = "Withdraw"
    TRANSFER = "Transfer"


def to_big_int(value: Any) -> int:
    """Coerce a JSON number, decimal string or ``0x`` hex string to ``int``.

    Raises:
        ValueError: If the value is not an integral number.
    """
    if isinstance(value, bool):
        msg = f"Expected an integer amount, got {value!r}"
        raise ValueError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            msg = f"Expected an integer amount, got {value!r}"
            raise ValueError(msg)
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith(("0x", "-0x")):
            return int(text, 16)
        return int(text, 10)
    msg = f"Expected an integer amount, got {type(value).__name__}"
    raise ValueError(msg)

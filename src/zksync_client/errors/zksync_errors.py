"""ZKSyncError — base exception class for all zksync-client errors."""

from __future__ import annotations


class ZKSyncError(Exception):
    """Base error for all rollup client operations.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "zksync-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code

"""Transport-level errors — connection, protocol and remote JSON-RPC failures."""

from __future__ import annotations

from typing import Any

from zksync_client.errors.zksync_errors import ZKSyncError


class TransportError(ZKSyncError):
    """Network failure, closed connection or malformed response."""

    def __init__(self, message: str, *, code: str = "transport-error") -> None:
        super().__init__(message, code=code)


class JSONRPCError(TransportError):
    """The remote service answered with a JSON-RPC ``error`` member.

    Attributes:
        rpc_code: The numeric JSON-RPC error code.
        data: Optional ``data`` member of the error object.
    """

    def __init__(self, message: str, *, rpc_code: int = 0, data: Any = None) -> None:
        super().__init__(message, code="jsonrpc-error")
        self.rpc_code = rpc_code
        self.data = data


class UnsupportedOperation(ZKSyncError):
    """The transport does not implement the requested capability."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="unsupported-operation")

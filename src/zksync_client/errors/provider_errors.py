"""Provider and registry errors."""

from __future__ import annotations

from zksync_client.errors.zksync_errors import ZKSyncError


class UnsupportedToken(ZKSyncError):
    """Token is unknown to the rollup token set or the governance registry."""

    def __init__(self, token: str, message: str | None = None) -> None:
        super().__init__(message or f"Token {token} is not supported", code="unsupported-token")
        self.token = token


class UnsupportedNetwork(ZKSyncError):
    """No endpoint is configured for the requested network / transport pair."""

    def __init__(self, network: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Ethereum network {network} is not supported",
            code="unsupported-network",
        )
        self.network = network

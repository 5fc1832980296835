"""HTTP JSON-RPC transport — plain request/response, no subscriptions."""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

from zksync_client.errors.transport_errors import TransportError
from zksync_client.transport.base import Transport
from zksync_client.transport.jsonrpc import build_request, decode_message, unwrap_result

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 30.0


class HTTPTransport(Transport):
    """Async JSON-RPC client over HTTP POST.

    Usage::

        transport = HTTPTransport("http://127.0.0.1:3030")
        await transport.connect()
        try:
            tokens = await transport.request("tokens", None)
        finally:
            await transport.disconnect()
    """

    def __init__(self, address: str, *, timeout: float = _DEFAULT_TIMEOUT) -> None:
        """Initialize the transport.

        Args:
            address: JSON-RPC endpoint URL.
            timeout: Per-request timeout in seconds.
        """
        self._address = address
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._ids = itertools.count(1)

    @property
    def address(self) -> str:
        """The JSON-RPC endpoint URL."""
        return self._address

    @property
    def is_connected(self) -> bool:
        """Check if the HTTP client is active."""
        return self._client is not None

    async def connect(self) -> None:
        """Create the underlying HTTP client."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=self._timeout,
        )
        logger.info("HTTP transport ready for %s", self._address)

    async def disconnect(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------
    # Transport API
    # ------------------------------------------------------------------

    async def request(self, method: str, params: Any = None) -> Any:
        """POST one JSON-RPC call and return its result.

        Raises:
            JSONRPCError: If the service returns an error object.
            TransportError: On HTTP failures or malformed responses.
        """
        client = self._ensure_connected()
        payload = build_request(next(self._ids), method, params)
        logger.debug("HTTP request %s %s", method, params)

        try:
            response = await client.post(self._address, json=payload)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} request failed: {exc}") from exc

        if response.status_code != 200:
            raise TransportError(
                f"{method} request failed ({response.status_code}): {response.text}"
            )
        return unwrap_result(decode_message(response.content))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ensure_connected(self) -> httpx.AsyncClient:
        """Return the HTTP client, raising if not connected."""
        if self._client is None:
            msg = "HTTP transport not connected. Call connect() first."
            raise TransportError(msg)
        return self._client

"""WebSocket JSON-RPC transport — correlated requests plus push subscriptions.

One reader task owns the socket's inbound side. Responses are matched to
pending requests by id, so they may arrive in any order. Messages carrying
``params.subscription`` are routed to the handler registered for that id;
anything else is discarded.
"""

from __future__ import annotations

import asyncio
import contextlib
import functools
import itertools
import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from zksync_client.errors.transport_errors import TransportError
from zksync_client.transport.base import Subscription, Transport
from zksync_client.transport.jsonrpc import (
    build_request,
    decode_message,
    parse_notification,
    unwrap_result,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass
class _PendingRequest:
    """An in-flight call awaiting its response."""

    method: str
    future: asyncio.Future[Any]
    # Runs inside the reader before the future resolves.
    on_result: Callable[[Any], None] | None = None
    # Runs if the response only arrives after the caller was cancelled.
    on_orphan: Callable[[Any], None] | None = None


class WSTransport(Transport):
    """Async JSON-RPC client over a persistent WebSocket.

    Usage::

        transport = await WSTransport.connect("ws://127.0.0.1:3031")
        try:
            sub = await transport.subscribe(
                "tx_subscribe", [tx_hash, "COMMIT"], "tx_unsubscribe", print
            )
            ...
            await sub.unsubscribe()
        finally:
            await transport.disconnect()
    """

    def __init__(
        self,
        address: str,
        *,
        open_timeout: float = 10.0,
        ping_interval: float | None = 20.0,
        ping_timeout: float | None = 20.0,
    ) -> None:
        """Initialize the transport without opening the socket.

        Args:
            address: ``ws://`` or ``wss://`` endpoint URL.
            open_timeout: Seconds allowed for the opening handshake.
            ping_interval: Keepalive ping interval, ``None`` to disable.
            ping_timeout: Seconds to wait for a pong, ``None`` to disable.
        """
        self._address = address
        self._open_timeout = open_timeout
        self._ping_interval = ping_interval
        self._ping_timeout = ping_timeout
        self._ws: Any = None
        self._reader: asyncio.Task[None] | None = None
        self._pending: dict[int, _PendingRequest] = {}
        self._handlers: dict[str, Callable[[Any], None]] = {}
        self._background: set[asyncio.Task[Any]] = set()
        self._ids = itertools.count(1)

    @classmethod
    async def connect(cls, address: str, **kwargs: Any) -> WSTransport:
        """Create a transport and open its connection."""
        transport = cls(address, **kwargs)
        await transport.open()
        return transport

    @property
    def address(self) -> str:
        """The WebSocket endpoint URL."""
        return self._address

    @property
    def is_connected(self) -> bool:
        """Whether the socket is open and the reader is running."""
        return self._ws is not None

    @property
    def active_subscriptions(self) -> int:
        """Number of registered notification handlers."""
        return len(self._handlers)

    async def open(self) -> None:
        """Open the WebSocket and start the reader task."""
        if self._ws is not None:
            return
        try:
            ws = await websockets.connect(
                self._address,
                open_timeout=self._open_timeout,
                ping_interval=self._ping_interval,
                ping_timeout=self._ping_timeout,
            )
        except (OSError, TimeoutError, WebSocketException) as exc:
            raise TransportError(f"Cannot connect to {self._address}: {exc}") from exc
        self._attach(ws)
        logger.info("WebSocket transport connected to %s", self._address)

    async def disconnect(self) -> None:
        """Close the socket, stop the reader and fail anything still pending."""
        ws, reader = self._ws, self._reader
        self._ws = None
        self._reader = None
        if ws is not None:
            await ws.close()
        if reader is not None:
            reader.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await reader
        for task in list(self._background):
            task.cancel()
        self._fail_pending("connection closed by client")
        logger.info("WebSocket transport to %s disconnected", self._address)

    # ------------------------------------------------------------------
    # Transport API
    # ------------------------------------------------------------------

    def subscriptions_supported(self) -> bool:
        return True

    async def request(self, method: str, params: Any = None) -> Any:
        """Send one JSON-RPC call and wait for the response with the same id.

        Raises:
            JSONRPCError: If the service returns an error object.
            TransportError: If the connection is closed or lost.
        """
        return await self._call(method, params)

    async def subscribe(
        self,
        subscribe_method: str,
        params: Any,
        unsubscribe_method: str,
        on_notify: Callable[[Any], None],
    ) -> Subscription:
        """Subscribe and route matching pushes to ``on_notify``.

        The handler is registered by the reader as soon as the subscribe
        response arrives, ahead of any message that follows it.
        """
        registered: list[Any] = []

        def _register(raw_id: Any) -> None:
            self._handlers[str(raw_id)] = on_notify
            registered.append(raw_id)

        def _release_orphan(raw_id: Any) -> None:
            logger.debug(
                "Releasing %s %s abandoned before its response", subscribe_method, raw_id
            )
            self._spawn(self._release(unsubscribe_method, raw_id))

        try:
            raw_id = await self._call(
                subscribe_method, params, on_result=_register, on_orphan=_release_orphan
            )
        except asyncio.CancelledError:
            # Response already processed but the caller went away.
            for leaked in registered:
                self._handlers.pop(str(leaked), None)
                self._spawn(self._release(unsubscribe_method, leaked))
            raise

        logger.debug("Subscribed %s %s as %s", subscribe_method, params, raw_id)
        return Subscription(
            str(raw_id),
            functools.partial(self._release, unsubscribe_method, raw_id),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _attach(self, ws: Any) -> None:
        """Adopt an open connection and start reading from it."""
        self._ws = ws
        self._reader = asyncio.create_task(self._read_loop(ws))

    def _ensure_connected(self) -> Any:
        if self._ws is None:
            msg = f"WebSocket transport to {self._address} is not connected"
            raise TransportError(msg)
        return self._ws

    async def _call(
        self,
        method: str,
        params: Any,
        *,
        on_result: Callable[[Any], None] | None = None,
        on_orphan: Callable[[Any], None] | None = None,
    ) -> Any:
        """Send one call and await its response.

        If the caller is cancelled before the response arrives and
        ``on_orphan`` is given, the slot stays registered so the late
        result is still handed to ``on_orphan``.
        """
        ws = self._ensure_connected()
        request_id = next(self._ids)
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._pending[request_id] = _PendingRequest(method, future, on_result, on_orphan)
        logger.debug("WS request #%d %s %s", request_id, method, params)
        keep_slot = False
        try:
            try:
                await ws.send(json.dumps(build_request(request_id, method, params)))
            except WebSocketException as exc:
                raise TransportError(f"{method} request failed: {exc}") from exc
            return await future
        except asyncio.CancelledError:
            keep_slot = on_orphan is not None and future.cancelled()
            raise
        finally:
            if not keep_slot:
                self._pending.pop(request_id, None)

    async def _release(self, unsubscribe_method: str, raw_id: Any) -> None:
        """Drop the local handler, then the server-side registration."""
        self._handlers.pop(str(raw_id), None)
        if self._ws is None:
            return
        await self._call(unsubscribe_method, [raw_id])

    def _spawn(self, coro: Any) -> None:
        task = asyncio.create_task(coro)
        self._background.add(task)
        task.add_done_callback(self._on_background_done)

    def _on_background_done(self, task: asyncio.Task[Any]) -> None:
        self._background.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.warning("Background unsubscribe failed: %s", task.exception())

    async def _read_loop(self, ws: Any) -> None:
        reason = "connection closed"
        try:
            async for raw in ws:
                self._dispatch(raw)
        except ConnectionClosed as exc:
            reason = f"connection lost: {exc}"
        finally:
            if self._ws is ws:
                self._ws = None
                logger.warning("WebSocket to %s: %s", self._address, reason)
            self._fail_pending(reason)

    def _dispatch(self, raw: str | bytes) -> None:
        try:
            message = decode_message(raw)
        except TransportError:
            logger.warning("Discarding malformed message from %s", self._address)
            return

        request_id = message.get("id")
        # Ids we issue are plain ints; anything else cannot match a request.
        if isinstance(request_id, int | str) and not isinstance(request_id, bool):
            pending = self._pending.get(request_id)
            if pending is not None:
                if pending.future.cancelled():
                    del self._pending[request_id]
                    self._resolve_orphan(pending, message)
                else:
                    self._resolve(pending, message)
                return

        notification = parse_notification(message)
        handler = self._handlers.get(notification.subscription) if notification else None
        if notification is None or handler is None:
            logger.debug("Discarding unmatched message %r", message)
            return
        try:
            handler(notification.result)
        except Exception:
            logger.exception("Subscription handler error for %s", notification.subscription)

    def _resolve(self, pending: _PendingRequest, message: dict[str, Any]) -> None:
        if pending.future.done():
            return
        try:
            result = unwrap_result(message)
        except TransportError as exc:
            pending.future.set_exception(exc)
            return
        if pending.on_result is not None:
            pending.on_result(result)
        pending.future.set_result(result)

    def _resolve_orphan(self, pending: _PendingRequest, message: dict[str, Any]) -> None:
        try:
            result = unwrap_result(message)
        except TransportError as exc:
            logger.debug("Late %s response was an error: %s", pending.method, exc)
            return
        if pending.on_orphan is not None:
            pending.on_orphan(result)

    def _fail_pending(self, reason: str) -> None:
        """Fail every in-flight request and forget every subscription."""
        for pending in self._pending.values():
            if not pending.future.done():
                pending.future.set_exception(
                    TransportError(f"{pending.method} aborted: {reason}")
                )
        self._pending.clear()
        if self._handlers:
            logger.debug("Dropping %d subscriptions: %s", len(self._handlers), reason)
        self._handlers.clear()

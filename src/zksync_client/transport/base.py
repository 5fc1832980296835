"""Transport interface — request/response with an optional subscription capability."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self

from zksync_client.errors.transport_errors import UnsupportedOperation

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from types import TracebackType

logger = logging.getLogger(__name__)


class Subscription:
    """An active push-stream registration.

    Released at most once: the first ``unsubscribe()`` call runs the release
    coroutine, later calls do nothing.
    """

    def __init__(
        self,
        subscription_id: str,
        release: Callable[[], Awaitable[None]],
    ) -> None:
        self._id = subscription_id
        self._release = release
        self._active = True

    @property
    def id(self) -> str:
        """Server-assigned subscription id."""
        return self._id

    @property
    def is_active(self) -> bool:
        """Whether ``unsubscribe()`` has not been called yet."""
        return self._active

    async def unsubscribe(self) -> None:
        """Deregister the handler and tell the server to drop the subscription."""
        if not self._active:
            return
        self._active = False
        logger.debug("Releasing subscription %s", self._id)
        await self._release()

    def __repr__(self) -> str:
        state = "active" if self._active else "released"
        return f"Subscription(id={self._id!r}, {state})"


class Transport(ABC):
    """Abstract JSON-RPC transport.

    Subclasses implement ``request`` and ``disconnect``. Transports with
    push support override ``subscriptions_supported`` and ``subscribe``.
    """

    @abstractmethod
    async def request(self, method: str, params: Any = None) -> Any:
        """Send one JSON-RPC call and return its result.

        Raises:
            TransportError: On network, protocol or remote errors.
        """

    def subscriptions_supported(self) -> bool:
        """Whether ``subscribe`` is available on this transport."""
        return False

    async def subscribe(
        self,
        subscribe_method: str,
        params: Any,
        unsubscribe_method: str,
        on_notify: Callable[[Any], None],
    ) -> Subscription:
        """Register ``on_notify`` for pushes produced by ``subscribe_method``.

        Raises:
            UnsupportedOperation: If the transport has no push support.
        """
        msg = f"{type(self).__name__} does not support subscriptions"
        raise UnsupportedOperation(msg)

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the underlying connection."""

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.disconnect()

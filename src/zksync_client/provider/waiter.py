"""Confirmation waiter — resolve once an event reaches a settlement milestone.

With a push-capable transport the waiter subscribes, takes the first
notification and releases the subscription in the background. Otherwise it
polls the receipt at a fixed interval until the ``reached`` predicate holds.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from zksync_client.errors.transport_errors import TransportError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from zksync_client.transport.base import Subscription, Transport

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 3.0

T = TypeVar("T")


class ConfirmationWaiter:
    """Waits for one settlement notification using the cheapest available path.

    Args:
        transport: Transport shared with the owning provider.
        poll_interval: Seconds between polls when subscriptions are unavailable.
        sleep: Coroutine used between polls; tests substitute a fake.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._transport = transport
        self._poll_interval = poll_interval
        self._sleep = sleep
        self._background: set[asyncio.Task[Any]] = set()

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    async def wait(
        self,
        *,
        subscribe_method: str,
        unsubscribe_method: str,
        params: list[Any],
        fetch: Callable[[], Awaitable[T]],
        reached: Callable[[T], bool],
    ) -> Any:
        """Block until the milestone is observed.

        Returns the raw notification payload on the subscription path and the
        fetched receipt on the polling path.

        Raises:
            TransportError: If a request fails. Polling never retries errors.
        """
        if self._transport.subscriptions_supported():
            return await self._wait_for_push(subscribe_method, unsubscribe_method, params)
        return await self._poll(fetch, reached)

    async def _wait_for_push(
        self, subscribe_method: str, unsubscribe_method: str, params: list[Any]
    ) -> Any:
        resolved: asyncio.Future[Any] = asyncio.get_running_loop().create_future()

        def _on_notify(payload: Any) -> None:
            if not resolved.done():
                resolved.set_result(payload)

        async with self._one_shot(subscribe_method, params, unsubscribe_method, _on_notify):
            return await resolved

    @contextlib.asynccontextmanager
    async def _one_shot(
        self,
        subscribe_method: str,
        params: list[Any],
        unsubscribe_method: str,
        on_notify: Callable[[Any], None],
    ) -> AsyncIterator[Subscription]:
        """Hold a subscription for the duration of the block.

        The release is detached once the block exits, so a resolved wait
        never blocks on the unsubscribe round trip.
        """
        subscription = await self._transport.subscribe(
            subscribe_method, params, unsubscribe_method, on_notify
        )
        try:
            yield subscription
        finally:
            self._spawn(self._release(subscription, unsubscribe_method, params))

    async def _release(
        self, subscription: Subscription, unsubscribe_method: str, params: list[Any]
    ) -> None:
        try:
            await subscription.unsubscribe()
        except TransportError as exc:
            logger.warning("%s for %s failed: %s", unsubscribe_method, params, exc)

    def _spawn(self, coro: Any) -> None:
        task = asyncio.create_task(coro)
        self._background.add(task)
        task.add_done_callback(self._on_background_done)

    def _on_background_done(self, task: asyncio.Task[Any]) -> None:
        self._background.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.warning("Background unsubscribe failed: %s", task.exception())

    async def _poll(self, fetch: Callable[[], Awaitable[T]], reached: Callable[[T], bool]) -> T:
        attempt = 0
        while True:
            attempt += 1
            receipt = await fetch()
            if reached(receipt):
                return receipt
            logger.debug(
                "Milestone not reached after poll %d, sleeping %.1fs",
                attempt,
                self._poll_interval,
            )
            await self._sleep(self._poll_interval)

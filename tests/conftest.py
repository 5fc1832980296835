"""Shared test fixtures for the zksync-client test suite."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from zksync_client.transport.base import Subscription, Transport

CONTRACT_ADDRESS = {
    "mainContract": "0x1111111111111111111111111111111111111111",
    "govContract": "0x2222222222222222222222222222222222222222",
}

TOKENS = {
    "ETH": {
        "address": "0x0000000000000000000000000000000000000000",
        "id": 0,
        "symbol": "ETH",
        "decimals": 18,
    },
    "DAI": {
        "address": "0x6B175474E89094C44Da98b954EedeAC495271d0F",
        "id": 1,
        "symbol": "DAI",
        "decimals": 18,
    },
    "USDC": {
        "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        "id": 2,
        "symbol": "USDC",
        "decimals": 6,
    },
}


class ScriptedTransport(Transport):
    """Request/response fake answering from a per-method script.

    A script value may be a plain result, an exception to raise, a callable
    taking the params, or a list consumed one item per call.
    """

    def __init__(self, script: dict[str, Any] | None = None) -> None:
        self.script: dict[str, Any] = {
            "contract_address": CONTRACT_ADDRESS,
            "tokens": TOKENS,
        }
        self.script.update(script or {})
        self.calls: list[tuple[str, Any]] = []
        self.disconnected = False

    def calls_to(self, method: str) -> list[Any]:
        return [params for name, params in self.calls if name == method]

    async def request(self, method: str, params: Any = None) -> Any:
        self.calls.append((method, params))
        value = self.script[method]
        if isinstance(value, list):
            value = value.pop(0)
        if callable(value):
            value = value(params)
        if isinstance(value, Exception):
            raise value
        return value

    async def disconnect(self) -> None:
        self.disconnected = True


class PushTransport(ScriptedTransport):
    """Scripted fake with subscriptions; tests drive pushes by hand."""

    def __init__(self, script: dict[str, Any] | None = None) -> None:
        super().__init__(script)
        self.subscribes: list[tuple[str, Any, str]] = []
        self.unsubscribes: list[tuple[str, Any]] = []
        self.unsubscribe_error: Exception | None = None
        self.unsubscribe_gate: asyncio.Event | None = None
        self.subscribed = asyncio.Event()
        self._handlers: dict[str, Any] = {}

    def subscriptions_supported(self) -> bool:
        return True

    async def subscribe(self, subscribe_method, params, unsubscribe_method, on_notify):
        sub_id = f"sub-{len(self.subscribes) + 1}"
        self.subscribes.append((subscribe_method, params, unsubscribe_method))
        self._handlers[sub_id] = on_notify

        async def _release() -> None:
            self._handlers.pop(sub_id, None)
            self.unsubscribes.append((unsubscribe_method, [sub_id]))
            if self.unsubscribe_gate is not None:
                await self.unsubscribe_gate.wait()
            if self.unsubscribe_error is not None:
                raise self.unsubscribe_error

        self.subscribed.set()
        return Subscription(sub_id, _release)

    def push(self, payload: Any) -> None:
        """Deliver a notification to every live subscription."""
        for handler in list(self._handlers.values()):
            handler(payload)


@pytest.fixture
def scripted_transport():
    """Factory for request-only fake transports."""
    return ScriptedTransport


@pytest.fixture
def push_transport():
    """Factory for subscription-capable fake transports."""
    return PushTransport


@pytest.fixture
def registry_rpc():
    """``request`` side effect answering the two construction-time calls."""

    def _answer(method: str, params: Any = None) -> Any:
        return {"contract_address": CONTRACT_ADDRESS, "tokens": TOKENS}[method]

    return _answer


@pytest.fixture
def settle():
    """Coroutine that lets detached background tasks run."""

    async def _settle(rounds: int = 5) -> None:
        for _ in range(rounds):
            await asyncio.sleep(0)

    return _settle

"""Tests for get_default_provider and the endpoint table."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from zksync_client.config.networks import ENDPOINTS, resolve_endpoint
from zksync_client.config.settings import ClientConfig, Network, TransportKind
from zksync_client.errors.provider_errors import UnsupportedNetwork
from zksync_client.provider.defaults import get_default_provider
from zksync_client.provider.provider import Provider
from zksync_client.transport.http import HTTPTransport
from zksync_client.transport.ws import WSTransport


# ---------------------------------------------------------------------------
# Endpoint table
# ---------------------------------------------------------------------------


class TestEndpointTable:
    def test_every_pair_has_an_endpoint(self):
        assert len(ENDPOINTS) == 8
        for network in Network:
            for kind in TransportKind:
                assert (network, kind) in ENDPOINTS

    def test_ws_endpoints_use_ws_scheme(self):
        for (_, kind), url in ENDPOINTS.items():
            if kind is TransportKind.WS:
                assert url.startswith(("ws://", "wss://"))
            else:
                assert url.startswith(("http://", "https://"))

    def test_resolve_mainnet(self):
        assert resolve_endpoint("mainnet", "HTTP") == (
            Network.MAINNET,
            TransportKind.HTTP,
            "https://api.zksync.io/jsrpc",
        )

    def test_unknown_network(self):
        with pytest.raises(UnsupportedNetwork) as exc_info:
            resolve_endpoint("unknown-network", "WS")
        assert exc_info.value.network == "unknown-network"
        assert exc_info.value.code == "unsupported-network"

    def test_unknown_transport(self):
        with pytest.raises(UnsupportedNetwork, match="Transport IPC"):
            resolve_endpoint("localhost", "IPC")


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


class TestGetDefaultProvider:
    async def test_localhost_http(self, registry_rpc):
        with patch.object(HTTPTransport, "request", new=AsyncMock(side_effect=registry_rpc)):
            provider = await get_default_provider("localhost", "HTTP")
        try:
            assert isinstance(provider.transport, HTTPTransport)
            assert provider.transport.address == "http://127.0.0.1:3030"
            assert provider.transport.subscriptions_supported() is False
            zero = "0x0000000000000000000000000000000000000000"
            assert provider.token_set.resolve_token_symbol(zero) == "ETH"
        finally:
            await provider.disconnect()

    async def test_localhost_ws(self, registry_rpc):
        with (
            patch.object(WSTransport, "open", new=AsyncMock()),
            patch.object(WSTransport, "request", new=AsyncMock(side_effect=registry_rpc)),
        ):
            provider = await get_default_provider("localhost", "WS")
        try:
            assert isinstance(provider.transport, WSTransport)
            assert provider.transport.address == "ws://127.0.0.1:3031"
            assert provider.transport.subscriptions_supported() is True
        finally:
            await provider.disconnect()

    async def test_transport_defaults_to_ws(self):
        with patch.object(Provider, "new_websocket_provider", new=AsyncMock()) as factory:
            await get_default_provider("rinkeby", config=ClientConfig())
        assert factory.await_args.args == ("wss://rinkeby-api.zksync.dev/jsrpc-ws",)

    async def test_network_from_config(self):
        config = ClientConfig(network=Network.ROPSTEN, transport=TransportKind.HTTP)
        with patch.object(Provider, "new_http_provider", new=AsyncMock()) as factory:
            await get_default_provider(config=config)
        factory.assert_awaited_once_with("https://ropsten-api.zksync.dev/jsrpc", config=config)

    async def test_unknown_network_fails(self):
        with pytest.raises(UnsupportedNetwork):
            await get_default_provider("unknown-network", "HTTP")

    async def test_unknown_network_opens_nothing(self):
        with (
            patch.object(Provider, "new_http_provider", new=AsyncMock()) as http_factory,
            patch.object(Provider, "new_websocket_provider", new=AsyncMock()) as ws_factory,
            pytest.raises(UnsupportedNetwork),
        ):
            await get_default_provider("goerli", "WS")
        http_factory.assert_not_awaited()
        ws_factory.assert_not_awaited()

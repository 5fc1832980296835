"""Tests for the error hierarchy."""

from __future__ import annotations

import pytest

from zksync_client.errors.provider_errors import UnsupportedNetwork, UnsupportedToken
from zksync_client.errors.transport_errors import (
    JSONRPCError,
    TransportError,
    UnsupportedOperation,
)
from zksync_client.errors.zksync_errors import ZKSyncError


class TestZKSyncError:
    def test_default_attributes(self) -> None:
        err = ZKSyncError("something broke")
        assert str(err) == "something broke"
        assert err.message == "something broke"
        assert err.code == "zksync-error"

    def test_custom_code(self) -> None:
        assert ZKSyncError("x", code="custom").code == "custom"


class TestTransportErrors:
    def test_transport_error(self) -> None:
        err = TransportError("socket closed")
        assert isinstance(err, ZKSyncError)
        assert err.code == "transport-error"

    def test_jsonrpc_error_is_transport_error(self) -> None:
        err = JSONRPCError("Invalid params", rpc_code=-32602, data={"field": "nonce"})
        assert isinstance(err, TransportError)
        assert err.code == "jsonrpc-error"
        assert err.rpc_code == -32602
        assert err.data == {"field": "nonce"}

    def test_jsonrpc_error_defaults(self) -> None:
        err = JSONRPCError("failed")
        assert err.rpc_code == 0
        assert err.data is None

    def test_unsupported_operation_is_not_transport_error(self) -> None:
        err = UnsupportedOperation("no subscriptions")
        assert isinstance(err, ZKSyncError)
        assert not isinstance(err, TransportError)
        assert err.code == "unsupported-operation"


class TestProviderErrors:
    def test_unsupported_token(self) -> None:
        err = UnsupportedToken("XYZ")
        assert str(err) == "Token XYZ is not supported"
        assert err.token == "XYZ"
        assert err.code == "unsupported-token"

    def test_unsupported_token_custom_message(self) -> None:
        err = UnsupportedToken("0xabc", "ERC20 token 0xabc is not supported")
        assert err.message == "ERC20 token 0xabc is not supported"

    def test_unsupported_network(self) -> None:
        err = UnsupportedNetwork("goerli")
        assert str(err) == "Ethereum network goerli is not supported"
        assert err.network == "goerli"
        assert err.code == "unsupported-network"

    def test_raise(self) -> None:
        with pytest.raises(ZKSyncError):
            raise UnsupportedNetwork("goerli")

"""Well-known rollup endpoints keyed by network and transport kind."""

from __future__ import annotations

from types import MappingProxyType

from zksync_client.config.settings import Network, TransportKind
from zksync_client.errors.provider_errors import UnsupportedNetwork

DEFAULT_HTTP_ADDRESS = "http://127.0.0.1:3030"
DEFAULT_WS_ADDRESS = "ws://127.0.0.1:3031"

ENDPOINTS: MappingProxyType[tuple[Network, TransportKind], str] = MappingProxyType(
    {
        (Network.LOCALHOST, TransportKind.WS): DEFAULT_WS_ADDRESS,
        (Network.LOCALHOST, TransportKind.HTTP): DEFAULT_HTTP_ADDRESS,
        (Network.ROPSTEN, TransportKind.WS): "wss://ropsten-api.zksync.dev/jsrpc-ws",
        (Network.ROPSTEN, TransportKind.HTTP): "https://ropsten-api.zksync.dev/jsrpc",
        (Network.RINKEBY, TransportKind.WS): "wss://rinkeby-api.zksync.dev/jsrpc-ws",
        (Network.RINKEBY, TransportKind.HTTP): "https://rinkeby-api.zksync.dev/jsrpc",
        (Network.MAINNET, TransportKind.WS): "wss://api.zksync.io/jsrpc-ws",
        (Network.MAINNET, TransportKind.HTTP): "https://api.zksync.io/jsrpc",
    }
)


def resolve_endpoint(
    network: Network | str, transport: TransportKind | str
) -> tuple[Network, TransportKind, str]:
    """Look up the endpoint for a network / transport pair.

    Args:
        network: Network name (``localhost``, ``ropsten``, ``rinkeby``, ``mainnet``).
        transport: ``WS`` or ``HTTP``.

    Returns:
        The parsed network, parsed transport kind and endpoint URL.

    Raises:
        UnsupportedNetwork: If either value is not in the table.
    """
    try:
        net = Network(network)
    except ValueError:
        raise UnsupportedNetwork(str(network)) from None
    try:
        kind = TransportKind(transport)
    except ValueError:
        raise UnsupportedNetwork(
            str(network), f"Transport {transport} is not supported for network {net}"
        ) from None
    return net, kind, ENDPOINTS[(net, kind)]

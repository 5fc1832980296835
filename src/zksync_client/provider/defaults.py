"""Default provider factory — pick a well-known endpoint by network name."""

from __future__ import annotations

import logging

from zksync_client.config.networks import resolve_endpoint
from zksync_client.config.settings import ClientConfig, Network, TransportKind
from zksync_client.provider.provider import Provider

logger = logging.getLogger(__name__)


async def get_default_provider(
    network: Network | str | None = None,
    transport: TransportKind | str | None = None,
    *,
    config: ClientConfig | None = None,
) -> Provider:
    """Connect to a well-known rollup endpoint.

    Args:
        network: ``localhost``, ``ropsten``, ``rinkeby`` or ``mainnet``;
            defaults to ``config.network``.
        transport: ``WS`` or ``HTTP``; defaults to ``config.transport`` (WS).
        config: Client settings; loaded from the environment when omitted.

    Raises:
        UnsupportedNetwork: If no endpoint exists for the pair.
    """
    config = config or ClientConfig()
    net, kind, address = resolve_endpoint(
        network if network is not None else config.network,
        transport if transport is not None else config.transport,
    )
    logger.info("Connecting to %s over %s (%s)", net, kind, address)
    if kind is TransportKind.WS:
        return await Provider.new_websocket_provider(address, config=config)
    return await Provider.new_http_provider(address, config=config)

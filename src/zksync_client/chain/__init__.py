"""Base-chain access — governance registry lookups."""

from zksync_client.chain.eth_proxy import ETHProxy

__all__ = ["ETHProxy"]

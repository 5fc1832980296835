"""zksync-client — async access layer for the rollup JSON-RPC API."""

from zksync_client.chain.eth_proxy import ETHProxy
from zksync_client.config.settings import ClientConfig, Network, TransportKind
from zksync_client.errors.provider_errors import UnsupportedNetwork, UnsupportedToken
from zksync_client.errors.transport_errors import (
    JSONRPCError,
    TransportError,
    UnsupportedOperation,
)
from zksync_client.errors.zksync_errors import ZKSyncError
from zksync_client.models import TxAction, TxType
from zksync_client.provider import ConfirmationWaiter, Provider, get_default_provider
from zksync_client.transport import HTTPTransport, Subscription, Transport, WSTransport
from zksync_client.utils.tokens import TokenSet, is_token_eth

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ConfirmationWaiter",
    "ETHProxy",
    "HTTPTransport",
    "JSONRPCError",
    "Network",
    "Provider",
    "Subscription",
    "TokenSet",
    "Transport",
    "TransportError",
    "TransportKind",
    "TxAction",
    "TxType",
    "UnsupportedNetwork",
    "UnsupportedOperation",
    "UnsupportedToken",
    "WSTransport",
    "ZKSyncError",
    "get_default_provider",
    "is_token_eth",
]

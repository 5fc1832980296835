"""Provider — rollup API façade, confirmation waiter and default endpoints."""

from zksync_client.provider.defaults import get_default_provider
from zksync_client.provider.provider import Provider
from zksync_client.provider.waiter import ConfirmationWaiter

__all__ = ["ConfirmationWaiter", "Provider", "get_default_provider"]

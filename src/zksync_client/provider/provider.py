"""Provider — typed façade over a rollup JSON-RPC transport.

Owns exactly one transport. The contract addresses and the token set are
fetched once while the provider is built; a provider whose construction
failed is never returned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from zksync_client.config.networks import DEFAULT_HTTP_ADDRESS
from zksync_client.config.settings import ClientConfig
from zksync_client.errors.transport_errors import TransportError
from zksync_client.models import (
    AccountState,
    ContractAddress,
    Fee,
    PriorityOperationReceipt,
    Token,
    TransactionReceipt,
    TxAction,
    TxType,
    tokens_from_dict,
)
from zksync_client.provider.waiter import DEFAULT_POLL_INTERVAL, ConfirmationWaiter
from zksync_client.transport.http import HTTPTransport
from zksync_client.transport.ws import WSTransport
from zksync_client.utils.tokens import TokenSet

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from zksync_client.transport.base import Transport

logger = logging.getLogger(__name__)


def _decode(method: str, decoder: Callable[[Any], Any], result: Any) -> Any:
    """Shape a raw result, reporting malformed payloads as transport errors."""
    try:
        return decoder(result)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise TransportError(f"Malformed {method} response: {result!r}") from exc


class Provider:
    """Async client for the rollup JSON-RPC API.

    Only the async constructors return a provider; each one loads the
    contract address and token set before handing it out.

    Usage::

        provider = await Provider.new_websocket_provider("ws://127.0.0.1:3031")
        async with provider:
            tx_hash = await provider.submit_tx(tx)
            receipt = await provider.notify_transaction(tx_hash, TxAction.COMMIT)
    """

    def __init__(self, transport: Transport, *, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        """Internal; build providers with ``from_transport`` or ``new_*_provider``.

        The instance holds no registry data until ``from_transport`` loads
        it, so ``contract_address`` and ``token_set`` raise until then.

        Args:
            transport: Transport owned by this provider from now on.
            poll_interval: Seconds between receipt polls on non-push transports.
        """
        self._transport = transport
        self._waiter = ConfirmationWaiter(transport, poll_interval=poll_interval)
        self._contract_address: ContractAddress | None = None
        self._token_set: TokenSet | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    async def from_transport(
        cls, transport: Transport, *, poll_interval: float = DEFAULT_POLL_INTERVAL
    ) -> Self:
        """Build a provider over an open transport and load the registry data.

        On failure the transport is disconnected and the error re-raised.
        """
        provider = cls(transport, poll_interval=poll_interval)
        try:
            provider._contract_address = await provider.get_contract_address()
            provider._token_set = TokenSet(await provider.get_tokens())
        except BaseException:
            await transport.disconnect()
            raise
        logger.info(
            "Provider ready: main contract %s, %d tokens",
            provider._contract_address.main_contract,
            len(provider._token_set),
        )
        return provider

    @classmethod
    async def new_websocket_provider(
        cls, address: str, *, config: ClientConfig | None = None
    ) -> Self:
        """Connect over WebSocket (push subscriptions available)."""
        config = config or ClientConfig()
        transport = await WSTransport.connect(
            address,
            open_timeout=config.ws.open_timeout,
            ping_interval=config.ws.ping_interval,
            ping_timeout=config.ws.ping_timeout,
        )
        return await cls.from_transport(transport, poll_interval=config.poll_interval)

    @classmethod
    async def new_http_provider(
        cls, address: str = DEFAULT_HTTP_ADDRESS, *, config: ClientConfig | None = None
    ) -> Self:
        """Connect over HTTP (confirmations are polled)."""
        config = config or ClientConfig()
        transport = HTTPTransport(address, timeout=config.http.timeout)
        await transport.connect()
        return await cls.from_transport(transport, poll_interval=config.poll_interval)

    # ------------------------------------------------------------------
    # Cached registry data
    # ------------------------------------------------------------------

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def contract_address(self) -> ContractAddress:
        """Contract addresses fetched at construction."""
        if self._contract_address is None:
            msg = "Provider was not initialised; use an async constructor"
            raise RuntimeError(msg)
        return self._contract_address

    @property
    def token_set(self) -> TokenSet:
        """Token set fetched at construction."""
        if self._token_set is None:
            msg = "Provider was not initialised; use an async constructor"
            raise RuntimeError(msg)
        return self._token_set

    # ------------------------------------------------------------------
    # RPC operations
    # ------------------------------------------------------------------

    async def submit_tx(self, tx: dict[str, Any], signature: Any = None) -> str:
        """Submit a transaction; returns its hash (e.g. ``sync-tx:dead..beef``)."""
        return await self._transport.request("tx_submit", [tx, signature])

    async def get_contract_address(self) -> ContractAddress:
        result = await self._transport.request("contract_address", None)
        return _decode("contract_address", ContractAddress.from_dict, result)

    async def get_tokens(self) -> dict[str, Token]:
        result = await self._transport.request("tokens", None)
        return _decode("tokens", tokens_from_dict, result)

    async def get_state(self, address: str) -> AccountState:
        result = await self._transport.request("account_info", [address])
        return _decode("account_info", AccountState.from_dict, result)

    async def get_tx_receipt(self, tx_hash: str) -> TransactionReceipt:
        """Get transaction status by its hash."""
        result = await self._transport.request("tx_info", [tx_hash])
        return _decode("tx_info", TransactionReceipt.from_dict, result)

    async def get_priority_op_status(self, serial_id: int) -> PriorityOperationReceipt:
        result = await self._transport.request("ethop_info", [serial_id])
        return _decode("ethop_info", PriorityOperationReceipt.from_dict, result)

    async def get_confirmations_for_eth_op_amount(self) -> int:
        """Base-chain confirmations required before a priority op is processed."""
        result = await self._transport.request("get_confirmations_for_eth_op_amount", [])
        return _decode("get_confirmations_for_eth_op_amount", int, result)

    async def get_transaction_fee(
        self, tx_type: TxType | str, address: str, token_like: str
    ) -> Fee:
        result = await self._transport.request(
            "get_tx_fee", [str(TxType(tx_type)), str(address), token_like]
        )
        return _decode("get_tx_fee", Fee.from_dict, result)

    async def get_token_price(self, token_like: str) -> float:
        result = await self._transport.request("get_token_price", [token_like])
        return _decode("get_token_price", float, result)

    # ------------------------------------------------------------------
    # Confirmations
    # ------------------------------------------------------------------

    async def notify_transaction(
        self, tx_hash: str, action: TxAction | str
    ) -> TransactionReceipt:
        """Wait until the transaction is committed or verified."""
        action = TxAction(action)
        result = await self._waiter.wait(
            subscribe_method="tx_subscribe",
            unsubscribe_method="tx_unsubscribe",
            params=[tx_hash, str(action)],
            fetch=lambda: self.get_tx_receipt(tx_hash),
            reached=lambda receipt: receipt.reached(action),
        )
        if isinstance(result, TransactionReceipt):
            return result
        return _decode("tx_subscribe", TransactionReceipt.from_dict, result)

    async def notify_priority_op(
        self, serial_id: int, action: TxAction | str
    ) -> PriorityOperationReceipt:
        """Wait until the priority operation is committed or verified."""
        action = TxAction(action)
        result = await self._waiter.wait(
            subscribe_method="ethop_subscribe",
            unsubscribe_method="ethop_unsubscribe",
            params=[serial_id, str(action)],
            fetch=lambda: self.get_priority_op_status(serial_id),
            reached=lambda receipt: receipt.reached(action),
        )
        if isinstance(result, PriorityOperationReceipt):
            return result
        return _decode("ethop_subscribe", PriorityOperationReceipt.from_dict, result)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def disconnect(self) -> None:
        await self._transport.disconnect()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.disconnect()

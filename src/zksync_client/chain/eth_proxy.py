"""ETHProxy — token id lookups against the rollup's governance contract."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from web3 import Web3

from zksync_client.chain.abi import SYNC_GOV_CONTRACT_ABI, SYNC_MAIN_CONTRACT_ABI
from zksync_client.errors.provider_errors import UnsupportedToken
from zksync_client.utils.tokens import ETH_TOKEN_ID, is_token_eth

if TYPE_CHECKING:
    from web3 import AsyncWeb3

    from zksync_client.models.registry import ContractAddress

logger = logging.getLogger(__name__)

# Governance registry value for an address it has never seen.
_UNKNOWN_TOKEN_ID = 0


class ETHProxy:
    """Reads rollup registry state from the base chain.

    Usage::

        w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url))
        proxy = ETHProxy(w3, provider.contract_address)
        token_id = await proxy.resolve_token_id(dai_address)
    """

    def __init__(self, web3: AsyncWeb3, contract_address: ContractAddress) -> None:
        """Bind the governance and main contracts.

        Args:
            web3: Base-chain client.
            contract_address: Addresses reported by the rollup provider.
        """
        self._web3 = web3
        self._contract_address = contract_address
        self._gov_contract = web3.eth.contract(
            address=Web3.to_checksum_address(contract_address.gov_contract),
            abi=SYNC_GOV_CONTRACT_ABI,
        )
        self._main_contract = web3.eth.contract(
            address=Web3.to_checksum_address(contract_address.main_contract),
            abi=SYNC_MAIN_CONTRACT_ABI,
        )

    @property
    def contract_address(self) -> ContractAddress:
        return self._contract_address

    @property
    def gov_contract(self) -> Any:
        return self._gov_contract

    @property
    def main_contract(self) -> Any:
        return self._main_contract

    async def resolve_token_id(self, token: str) -> int:
        """Return the rollup id of a base-chain token.

        The native asset always has id 0 and is answered without a call.

        Raises:
            UnsupportedToken: If the governance contract has no id for it.
        """
        if is_token_eth(token):
            return ETH_TOKEN_ID
        token_id = await self._gov_contract.functions.tokenIds(
            Web3.to_checksum_address(token)
        ).call()
        if token_id == _UNKNOWN_TOKEN_ID:
            raise UnsupportedToken(token, f"ERC20 token {token} is not supported")
        logger.debug("Token %s resolved to id %d", token, token_id)
        return int(token_id)

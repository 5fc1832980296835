"""Registry models — contract addresses and the rollup token list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ContractAddress:
    """Base-chain contracts backing the rollup.

    Attributes:
        main_contract: Address of the main rollup contract.
        gov_contract: Address of the governance (token registry) contract.
    """

    main_contract: str
    gov_contract: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContractAddress:
        """Create from a ``contract_address`` JSON result."""
        return cls(
            main_contract=data.get("mainContract", data.get("main_contract", "")),
            gov_contract=data.get("govContract", data.get("gov_contract", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire format."""
        return {"mainContract": self.main_contract, "govContract": self.gov_contract}


@dataclass(frozen=True)
class Token:
    """Metadata of one token known to the rollup."""

    address: str
    id: int
    symbol: str
    decimals: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        return cls(
            address=data.get("address", ""),
            id=int(data.get("id", 0)),
            symbol=data.get("symbol", ""),
            decimals=int(data.get("decimals", 18)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "id": self.id,
            "symbol": self.symbol,
            "decimals": self.decimals,
        }


def tokens_from_dict(data: dict[str, Any]) -> dict[str, Token]:
    """Decode a ``tokens`` result keyed by symbol."""
    return {key: Token.from_dict(value) for key, value in data.items()}

"""Token set — symbol/address/id resolution and unit conversion.

A ``token_like`` is either a token symbol (``"ETH"``, ``"DAI"``) or its
base-chain address; addresses match case-insensitively.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING

from zksync_client.errors.provider_errors import UnsupportedToken

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from zksync_client.models.registry import Token

ETH_ADDRESS = "0x0000000000000000000000000000000000000000"
ETH_SYMBOL = "ETH"
ETH_TOKEN_ID = 0


def is_token_eth(token: str) -> bool:
    """Whether ``token`` denotes the native asset (symbol or zero address)."""
    return token == ETH_SYMBOL or token.lower() == ETH_ADDRESS


class TokenSet:
    """Immutable view over the rollup's token list.

    Usage::

        tokens = TokenSet(await provider.get_tokens())
        tokens.resolve_token_id("DAI")
        tokens.parse_token("ETH", "1.5")  # 1500000000000000000
    """

    def __init__(self, tokens_by_symbol: Mapping[str, Token]) -> None:
        self._tokens = dict(tokens_by_symbol)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens.values())

    def __contains__(self, token_like: object) -> bool:
        if not isinstance(token_like, str):
            return False
        try:
            self._resolve(token_like)
        except UnsupportedToken:
            return False
        return True

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_token_id(self, token_like: str) -> int:
        return self._resolve(token_like).id

    def resolve_token_address(self, token_like: str) -> str:
        return self._resolve(token_like).address

    def resolve_token_symbol(self, token_like: str) -> str:
        return self._resolve(token_like).symbol

    def resolve_token_decimals(self, token_like: str) -> int:
        return self._resolve(token_like).decimals

    # ------------------------------------------------------------------
    # Unit conversion
    # ------------------------------------------------------------------

    def format_token(self, token_like: str, amount: int) -> str:
        """Render a base-unit amount as a decimal string, e.g. ``"1.5"``."""
        decimals = self.resolve_token_decimals(token_like)
        sign = "-" if amount < 0 else ""
        whole, fraction = divmod(abs(amount), 10**decimals)
        if decimals == 0:
            return f"{sign}{whole}"
        fraction_text = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
        return f"{sign}{whole}.{fraction_text}"

    def parse_token(self, token_like: str, amount: str) -> int:
        """Convert a decimal string to base units.

        Raises:
            ValueError: If the string is not a number or has more fractional
                digits than the token supports.
        """
        decimals = self.resolve_token_decimals(token_like)
        try:
            value = Decimal(amount.strip())
        except InvalidOperation:
            msg = f"Invalid {token_like} amount: {amount!r}"
            raise ValueError(msg) from None
        if not value.is_finite():
            msg = f"Invalid {token_like} amount: {amount!r}"
            raise ValueError(msg)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + decimals + 1)
            scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            msg = f"{token_like} supports at most {decimals} decimal places: {amount!r}"
            raise ValueError(msg)
        return int(scaled)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _resolve(self, token_like: str) -> Token:
        token = self._tokens.get(token_like)
        if token is not None:
            return token
        needle = token_like.lower()
        for candidate in self._tokens.values():
            if candidate.address.lower() == needle:
                return candidate
        raise UnsupportedToken(token_like)

"""Immutable swap form state with explicit recomputation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from priceswap.core.exceptions import SwapValidationError
from priceswap.core.logging import logger
from priceswap.core.models.swap import SwapConfirmation, SwapQuote
from priceswap.core.models.token import PriceTable
from priceswap.core.services.swap import quote_swap
from priceswap.core.validation.amount import FieldIssue, validate_swap_request


@dataclass(frozen=True, slots=True)
class SwapSession:
    """Snapshot of the swap form.

    Every edit returns a new session; :attr:`quote` is derived from the
    current fields each time it is read.
    """

    table: PriceTable
    from_symbol: str = ""
    to_symbol: str = ""
    amount: str = ""
    amount_decimals: int = 6
    usd_decimals: int = 2

    @classmethod
    def start(cls, table: PriceTable, *, amount_decimals: int = 6, usd_decimals: int = 2) -> SwapSession:
        """Open a session preselecting the first two tokens of ``table``."""
        from_symbol = table[0].symbol if len(table) > 0 else ""
        to_symbol = table[1].symbol if len(table) > 1 else ""
        return cls(
            table=tuple(table),
            from_symbol=from_symbol,
            to_symbol=to_symbol,
            amount_decimals=amount_decimals,
            usd_decimals=usd_decimals,
        )

    def with_amount(self, amount: str) -> SwapSession:
        return replace(self, amount=amount)

    def with_from(self, symbol: str) -> SwapSession:
        return replace(self, from_symbol=symbol)

    def with_to(self, symbol: str) -> SwapSession:
        return replace(self, to_symbol=symbol)

    def with_table(self, table: PriceTable) -> SwapSession:
        return replace(self, table=tuple(table))

    def flipped(self) -> SwapSession:
        return replace(self, from_symbol=self.to_symbol, to_symbol=self.from_symbol)

    @property
    def quote(self) -> SwapQuote:
        return quote_swap(
            self.amount,
            self.from_symbol,
            self.to_symbol,
            self.table,
            amount_decimals=self.amount_decimals,
            usd_decimals=self.usd_decimals,
        )

    def issues(self) -> list[FieldIssue]:
        return validate_swap_request(self.from_symbol, self.to_symbol, self.amount)

    def submit(self) -> SwapConfirmation:
        """Confirm the swap locally.

        Raises:
            SwapValidationError: if any field fails validation.
        """
        issues = self.issues()
        if issues:
            raise SwapValidationError(issues)

        quote = self.quote
        message = (
            f"Successfully swapped {self.amount} {self.from_symbol} "
            f"to {quote.output_display} {self.to_symbol}"
        )
        logger.info("Swap confirmed: {}", message, from_symbol=self.from_symbol, to_symbol=self.to_symbol)
        return SwapConfirmation(message=message, quote=quote)


__all__ = ["SwapSession"]

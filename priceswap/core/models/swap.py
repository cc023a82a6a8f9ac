"""Derived swap results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SwapQuote(BaseModel):
    """Result of one recomputation of the swap form."""

    model_config = ConfigDict(frozen=True)

    from_symbol: str | None = None
    to_symbol: str | None = None
    input_amount: float = 0.0
    output_amount: float = 0.0
    rate: float = 0.0
    input_value_usd: float = 0.0
    output_value_usd: float = 0.0
    amount_decimals: int = 6
    usd_decimals: int = 2

    @property
    def output_display(self) -> str:
        return f"{self.output_amount:.{self.amount_decimals}f}"

    @property
    def rate_display(self) -> str:
        return f"{self.rate:.{self.amount_decimals}f}"

    @property
    def input_value_display(self) -> str:
        return f"{self.input_value_usd:.{self.usd_decimals}f}"

    @property
    def output_value_display(self) -> str:
        return f"{self.output_value_usd:.{self.usd_decimals}f}"

    def rate_label(self) -> str:
        """Human readable rate, e.g. ``1 BTC ≈ 15.500000 ETH``."""
        if not self.from_symbol or not self.to_symbol:
            return "--"
        return f"1 {self.from_symbol} ≈ {self.rate_display} {self.to_symbol}"


class SwapConfirmation(BaseModel):
    """Acknowledgement returned after a successful (simulated) swap."""

    model_config = ConfigDict(frozen=True)

    message: str
    quote: SwapQuote


__all__ = ["SwapConfirmation", "SwapQuote"]

"""Swap arithmetic over resolved token prices."""

from __future__ import annotations

import math
from collections.abc import Sequence

from priceswap.core.models.swap import SwapQuote
from priceswap.core.models.token import ResolvedToken
from priceswap.core.services.search import find_token
from priceswap.core.validation.amount import AMOUNT_PATTERN

Number = int | float


def _is_degenerate(value: Number | None) -> bool:
    if value is None:
        return True
    if not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return value == 0 or math.isnan(value)


def compute_output(
    input_amount: Number | None,
    input_price: Number | None,
    output_price: Number | None,
) -> float:
    """Return how much of the output token ``input_amount`` buys.

    Zero, missing or NaN operands yield ``0.0`` instead of an error so a
    half-filled form always has a number to show. No rounding is applied.
    """

    if _is_degenerate(input_amount) or _is_degenerate(input_price) or _is_degenerate(output_price):
        return 0.0
    if input_price == output_price:
        # equal prices give back exactly the input amount
        return float(input_amount) if math.isfinite(input_amount) else 0.0
    result = (input_amount * input_price) / output_price
    if not math.isfinite(result):
        return 0.0
    return float(result)


def exchange_rate(input_price: Number | None, output_price: Number | None) -> float:
    """Units of the output token received for one unit of the input token."""
    return compute_output(1, input_price, output_price)


def usd_value(amount: Number | None, price: Number | None) -> float:
    if _is_degenerate(amount) or _is_degenerate(price):
        return 0.0
    value = amount * price
    return float(value) if math.isfinite(value) else 0.0


def format_amount(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def parse_amount(text: str | None) -> float:
    """Read a live-edited amount; text the amount gate calls malformed counts as zero."""
    if not text or AMOUNT_PATTERN.fullmatch(text) is None:
        return 0.0
    try:
        return float(text)
    except ValueError:
        # a lone "."
        return 0.0


def quote_swap(
    amount_text: str | None,
    from_symbol: str | None,
    to_symbol: str | None,
    table: Sequence[ResolvedToken],
    *,
    amount_decimals: int = 6,
    usd_decimals: int = 2,
) -> SwapQuote:
    """Derive the output amount, rate and USD values for the current form state.

    The output only moves when an amount and both tokens are present and
    resolvable; the rate and USD values follow whatever tokens resolve.
    """

    from_token = find_token(table, from_symbol) if from_symbol else None
    to_token = find_token(table, to_symbol) if to_symbol else None
    from_price = from_token.price if from_token else None
    to_price = to_token.price if to_token else None

    amount = parse_amount(amount_text)
    output = 0.0
    if amount_text and from_token and to_token:
        output = compute_output(amount, from_price, to_price)

    rate = exchange_rate(from_price, to_price) if from_symbol and to_symbol else 0.0

    return SwapQuote(
        from_symbol=from_symbol or None,
        to_symbol=to_symbol or None,
        input_amount=amount if math.isfinite(amount) else 0.0,
        output_amount=output,
        rate=rate,
        input_value_usd=usd_value(amount, from_price),
        output_value_usd=usd_value(float(format_amount(output, amount_decimals)), to_price),
        amount_decimals=amount_decimals,
        usd_decimals=usd_decimals,
    )


__all__ = [
    "compute_output",
    "exchange_rate",
    "format_amount",
    "parse_amount",
    "quote_swap",
    "usd_value",
]

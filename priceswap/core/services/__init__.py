"""Core pricing and swap services."""

from priceswap.core.services.loader import PriceTableOutcome, fetch_price_table, load_price_table
from priceswap.core.services.price_table import build_price_table, latest_records
from priceswap.core.services.search import filter_tokens, find_token
from priceswap.core.services.session import SwapSession
from priceswap.core.services.swap import (
    compute_output,
    exchange_rate,
    format_amount,
    parse_amount,
    quote_swap,
    usd_value,
)

__all__ = [
    "PriceTableOutcome",
    "SwapSession",
    "build_price_table",
    "compute_output",
    "exchange_rate",
    "fetch_price_table",
    "filter_tokens",
    "find_token",
    "format_amount",
    "latest_records",
    "load_price_table",
    "parse_amount",
    "quote_swap",
    "usd_value",
]

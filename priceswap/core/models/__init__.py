"""Data models module."""

from priceswap.core.models.catalog import DEFAULT_CATALOG, PRICES_URL, TokenCatalog
from priceswap.core.models.feed import RawPriceRecord
from priceswap.core.models.swap import SwapConfirmation, SwapQuote
from priceswap.core.models.token import PriceTable, ResolvedToken

__all__ = [
    "DEFAULT_CATALOG",
    "PRICES_URL",
    "PriceTable",
    "RawPriceRecord",
    "ResolvedToken",
    "SwapConfirmation",
    "SwapQuote",
    "TokenCatalog",
]

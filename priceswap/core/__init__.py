"""priceswap 核心模块"""

from priceswap.core.config.settings import ConfigManager, PriceSwapConfig
from priceswap.core.models import RawPriceRecord, ResolvedToken, SwapQuote, TokenCatalog
from priceswap.core.services import build_price_table, compute_output

__all__ = [
    "ConfigManager",
    "PriceSwapConfig",
    "RawPriceRecord",
    "ResolvedToken",
    "SwapQuote",
    "TokenCatalog",
    "build_price_table",
    "compute_output",
]

"""priceswap - 代币价格表与兑换计算

把上游价格源整理成每个代币一条的价格表，并据此计算兑换数量。
支持同步和异步获取价格表。
"""

import asyncio
from typing import Any

from priceswap.core.config.settings import ConfigManager, PriceSwapConfig
from priceswap.core.data.providers.price_feed import PriceFeedClient
from priceswap.core.exceptions import PriceTableUnavailableError, SwapValidationError
from priceswap.core.models import (
    DEFAULT_CATALOG,
    PriceTable,
    RawPriceRecord,
    ResolvedToken,
    SwapConfirmation,
    SwapQuote,
    TokenCatalog,
)
from priceswap.core.services import (
    PriceTableOutcome,
    SwapSession,
    build_price_table,
    compute_output,
    exchange_rate,
    filter_tokens,
    find_token,
    load_price_table,
    quote_swap,
)
from priceswap.core.validation import FieldIssue, validate_amount, validate_swap_request

# 全局配置管理器
_config_manager: ConfigManager | None = None


def get_config_manager() -> ConfigManager:
    """获取全局配置管理器实例"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def get_config() -> PriceSwapConfig:
    """获取全局配置"""
    return get_config_manager().get_config()


def configure(**config: Any) -> None:
    """配置全局设置

    Args:
        **config: 按节覆盖配置, 例如 ``feed={"timeout": 5}``
    """
    get_config_manager().update_config(**config)


async def get_async() -> PriceTable:
    """异步获取价格表

    Returns:
        按代币符号排序的价格表

    Raises:
        PriceTableUnavailableError: 价格源不可用

    Examples:
        >>> import asyncio
        >>> import priceswap
        >>> table = asyncio.run(priceswap.get_async())
        >>> priceswap.compute_output(2, table[0].price, table[1].price)
    """
    config = get_config()
    outcome = await load_price_table(PriceFeedClient(config.feed), config.catalog.to_catalog())
    return outcome.unwrap()


def get() -> PriceTable:
    """同步获取价格表"""
    return asyncio.run(get_async())


# 版本信息
__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CATALOG",
    "FieldIssue",
    "PriceTable",
    "PriceTableOutcome",
    "PriceTableUnavailableError",
    "RawPriceRecord",
    "ResolvedToken",
    "SwapConfirmation",
    "SwapQuote",
    "SwapSession",
    "SwapValidationError",
    "TokenCatalog",
    "build_price_table",
    "compute_output",
    "configure",
    "exchange_rate",
    "filter_tokens",
    "find_token",
    "get",
    "get_async",
    "get_config",
    "get_config_manager",
    "load_price_table",
    "quote_swap",
    "validate_amount",
    "validate_swap_request",
]

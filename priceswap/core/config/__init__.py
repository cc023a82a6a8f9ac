"""Configuration management module."""

from priceswap.core.config.settings import (
    CatalogConfig,
    ConfigManager,
    DisplayConfig,
    FeedConfig,
    LoggingConfig,
    PriceSwapConfig,
    get_default_config,
    load_config_from_env,
)

__all__ = [
    "CatalogConfig",
    "ConfigManager",
    "DisplayConfig",
    "FeedConfig",
    "LoggingConfig",
    "PriceSwapConfig",
    "get_default_config",
    "load_config_from_env",
]

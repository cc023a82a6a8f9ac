"""配置管理模块 - 处理priceswap的配置"""

import os
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from priceswap.core.logging import logger
from priceswap.core.models.catalog import (
    DEFAULT_CATALOG,
    PRICES_URL,
    TOKEN_ICON_EXTENSION,
    TOKEN_ICONS_BASE,
    TokenCatalog,
)


@dataclass
class FeedConfig:
    """价格源配置"""

    url: str = PRICES_URL
    timeout: float = 10.0
    user_agent: str = "priceswap/0.1.0"


@dataclass
class CatalogConfig:
    """代币元数据配置, 在内置表之上叠加"""

    icon_base_url: str = TOKEN_ICONS_BASE
    icon_extension: str = TOKEN_ICON_EXTENSION
    names: dict[str, str] = field(default_factory=dict)
    icons: dict[str, str] = field(default_factory=dict)

    def to_catalog(self) -> TokenCatalog:
        """Build an immutable catalog with configured entries over the defaults."""
        base = TokenCatalog(
            names=DEFAULT_CATALOG.names,
            icons=DEFAULT_CATALOG.icons,
            icon_base_url=self.icon_base_url,
            icon_extension=self.icon_extension,
        )
        return base.extend(names=self.names, icons=self.icons)


@dataclass
class DisplayConfig:
    """显示精度配置"""

    amount_decimals: int = 6
    usd_decimals: int = 2


@dataclass
class LoggingConfig:
    """日志配置"""

    level: str = "INFO"
    file: str | None = None


@dataclass
class PriceSwapConfig:
    """priceswap主配置"""

    feed: FeedConfig = field(default_factory=FeedConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "PriceSwapConfig":
        """从字典创建配置"""
        return cls(
            feed=FeedConfig(**config_dict.get("feed", {})),
            catalog=CatalogConfig(**config_dict.get("catalog", {})),
            display=DisplayConfig(**config_dict.get("display", {})),
            logging=LoggingConfig(**config_dict.get("logging", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "feed": asdict(self.feed),
            "catalog": asdict(self.catalog),
            "display": asdict(self.display),
            "logging": asdict(self.logging),
        }


def _deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = _deep_update(dict(d.get(k) or {}), v)
        else:
            d[k] = v
    return d


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_path: Path | None = None, *, use_env: bool = True):
        """初始化配置管理器

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
            use_env: 是否叠加 ``PRICESWAP_*`` 环境变量
        """
        self.config_path = config_path or Path.home() / ".priceswap" / "config.toml"
        self.use_env = use_env
        self.config = self._load_config()

    def _load_config(self) -> PriceSwapConfig:
        """加载配置"""
        config_dict: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    config_dict = tomllib.load(f)
                PriceSwapConfig.from_dict(config_dict)
            except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
                # 如果配置文件有问题，使用默认配置
                logger.warning("Failed to load config from {}: {}", self.config_path, e)
                config_dict = {}

        if self.use_env:
            _deep_update(config_dict, load_config_from_env())
        return PriceSwapConfig.from_dict(config_dict)

    def get_config(self) -> PriceSwapConfig:
        """获取当前配置"""
        return self.config

    def update_config(self, **updates: Any) -> None:
        """更新配置"""
        self.config = PriceSwapConfig.from_dict(_deep_update(self.config.to_dict(), updates))


def get_default_config() -> PriceSwapConfig:
    """获取默认配置"""
    return PriceSwapConfig()


def load_config_from_env() -> dict[str, Any]:
    """从环境变量加载配置"""
    config: dict[str, Any] = {}

    # 价格源配置
    feed_config: dict[str, Any] = {}
    feed_url = os.getenv("PRICESWAP_FEED_URL")
    if feed_url:
        feed_config["url"] = feed_url
    feed_timeout = os.getenv("PRICESWAP_FEED_TIMEOUT")
    if feed_timeout is not None:
        feed_config["timeout"] = float(feed_timeout)

    if feed_config:
        config["feed"] = feed_config

    # 日志配置
    logging_config: dict[str, Any] = {}
    logging_level = os.getenv("PRICESWAP_LOGGING_LEVEL")
    if logging_level is not None:
        logging_config["level"] = logging_level
    logging_file = os.getenv("PRICESWAP_LOGGING_FILE")
    if logging_file is not None:
        logging_config["file"] = logging_file

    if logging_config:
        config["logging"] = logging_config

    return config

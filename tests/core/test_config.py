"""
Tests for configuration management.

Covers loading from TOML files, environment overrides and the
conversion of catalog settings into a token catalog.
"""

from pathlib import Path

import pytest

from priceswap.core.config import (
    CatalogConfig,
    ConfigManager,
    FeedConfig,
    PriceSwapConfig,
    get_default_config,
    load_config_from_env,
)
from priceswap.core.models.catalog import PRICES_URL, TOKEN_ICONS_BASE

ENV_VARS = (
    "PRICESWAP_FEED_URL",
    "PRICESWAP_FEED_TIMEOUT",
    "PRICESWAP_LOGGING_LEVEL",
    "PRICESWAP_LOGGING_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestPriceSwapConfig:
    """Test the top-level configuration dataclass."""

    def test_defaults(self):
        """Defaults point at the public feed with UI precision."""
        config = get_default_config()

        assert config.feed.url == PRICES_URL
        assert config.feed.timeout == 10.0
        assert config.catalog.icon_base_url == TOKEN_ICONS_BASE
        assert config.display.amount_decimals == 6
        assert config.display.usd_decimals == 2
        assert config.logging.level == "INFO"
        assert config.logging.file is None

    def test_from_dict_round_trip(self):
        """to_dict output rebuilds an equal configuration."""
        config = PriceSwapConfig.from_dict(
            {
                "feed": {"url": "https://feed.test/prices.json", "timeout": 2.5},
                "display": {"amount_decimals": 4},
            }
        )

        assert config.feed == FeedConfig(url="https://feed.test/prices.json", timeout=2.5)
        assert config.display.amount_decimals == 4
        assert config.display.usd_decimals == 2
        assert PriceSwapConfig.from_dict(config.to_dict()) == config

    def test_unknown_keys_are_rejected(self):
        """Unknown keys in a section raise TypeError."""
        with pytest.raises(TypeError):
            PriceSwapConfig.from_dict({"feed": {"retries": 3}})


class TestCatalogConfig:
    """Test catalog overrides."""

    def test_to_catalog_layers_over_defaults(self):
        """Configured entries win while built-in entries stay available."""
        catalog = CatalogConfig(
            icon_base_url="https://icons.test/",
            icon_extension=".png",
            names={"FOO": "Foo Token"},
            icons={"FOO": "foo"},
        ).to_catalog()

        assert catalog.display_name("FOO") == "Foo Token"
        assert catalog.display_name("ETH") == "Ethereum"
        assert catalog.icon_ref("FOO") == "https://icons.test/foo.png"
        assert catalog.icon_ref("STATOM") == "https://icons.test/stATOM.png"


class TestConfigManager:
    """Test configuration file and environment loading."""

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        """A missing config file is not an error."""
        manager = ConfigManager(tmp_path / "absent.toml")

        assert manager.get_config() == get_default_config()

    def test_loads_toml_file(self, tmp_path: Path):
        """Values from the TOML file are applied."""
        path = tmp_path / "config.toml"
        path.write_text(
            '[feed]\nurl = "https://feed.test/prices.json"\ntimeout = 3.0\n\n'
            '[catalog.names]\nFOO = "Foo"\n\n'
            "[display]\nusd_decimals = 4\n",
            encoding="utf-8",
        )

        config = ConfigManager(path).get_config()

        assert config.feed.url == "https://feed.test/prices.json"
        assert config.feed.timeout == 3.0
        assert config.catalog.names == {"FOO": "Foo"}
        assert config.display.usd_decimals == 4

    @pytest.mark.parametrize("content", ["[feed\nurl = ", "[feed]\nretries = 3\n"])
    def test_invalid_file_falls_back_to_defaults(self, tmp_path: Path, content: str):
        """Broken or unexpected TOML falls back to defaults."""
        path = tmp_path / "config.toml"
        path.write_text(content, encoding="utf-8")

        assert ConfigManager(path).get_config() == get_default_config()

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch):
        """PRICESWAP_* variables override file values."""
        path = tmp_path / "config.toml"
        path.write_text('[feed]\nurl = "https://file.test"\ntimeout = 3.0\n', encoding="utf-8")
        monkeypatch.setenv("PRICESWAP_FEED_URL", "https://env.test")
        monkeypatch.setenv("PRICESWAP_LOGGING_LEVEL", "DEBUG")

        config = ConfigManager(path).get_config()

        assert config.feed.url == "https://env.test"
        assert config.feed.timeout == 3.0
        assert config.logging.level == "DEBUG"

    def test_environment_can_be_ignored(self, tmp_path: Path, monkeypatch):
        """use_env=False skips environment overrides."""
        monkeypatch.setenv("PRICESWAP_FEED_URL", "https://env.test")

        config = ConfigManager(tmp_path / "absent.toml", use_env=False).get_config()

        assert config.feed.url == PRICES_URL

    def test_update_config_merges_sections(self, tmp_path: Path):
        """update_config keeps untouched keys in the section."""
        manager = ConfigManager(tmp_path / "absent.toml")

        manager.update_config(feed={"timeout": 1.0})

        assert manager.get_config().feed.timeout == 1.0
        assert manager.get_config().feed.url == PRICES_URL


def test_load_config_from_env(monkeypatch):
    """Environment variables are converted to typed values."""
    monkeypatch.setenv("PRICESWAP_FEED_TIMEOUT", "4.5")
    monkeypatch.setenv("PRICESWAP_LOGGING_FILE", "/tmp/priceswap.log")

    assert load_config_from_env() == {
        "feed": {"timeout": 4.5},
        "logging": {"file": "/tmp/priceswap.log"},
    }


def test_load_config_from_env_empty():
    """No variables means no overrides."""
    assert load_config_from_env() == {}

"""Pytest configuration for priceswap test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from priceswap.core.logging import configure_logging


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--priceswap-run-integration",
        action="store_true",
        default=False,
        help="Run priceswap integration tests that hit the live price feed.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker for priceswap tests."""

    config.addinivalue_line(
        "markers",
        "integration: marks priceswap tests requiring network access",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--priceswap-run-integration"):
        return

    priceswap_skip_integration = pytest.mark.skip(
        reason="integration tests require --priceswap-run-integration",
    )
    for priceswap_item in items:
        if "integration" in priceswap_item.keywords:
            priceswap_item.add_marker(priceswap_skip_integration)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Point the global logger back at stderr after tests that redirect it."""

    yield
    configure_logging()

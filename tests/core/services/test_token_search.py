"""Tests for token lookup helpers."""

from __future__ import annotations

from priceswap.core.models.feed import RawPriceRecord
from priceswap.core.services.price_table import build_price_table
from priceswap.core.services.search import filter_tokens, find_token

TABLE = build_price_table(
    RawPriceRecord(currency=symbol, date="2024-01-01T00:00:00Z", price=price)
    for symbol, price in [("BTC", 31000.0), ("WBTC", 30900.0), ("ETH", 2000.0), ("STATOM", 11.0), ("ATOM", 9.0)]
)


def test_empty_query_returns_whole_table() -> None:
    assert filter_tokens(TABLE, "") == list(TABLE)
    assert filter_tokens(TABLE, None) == list(TABLE)


def test_query_matches_symbol_case_insensitively() -> None:
    assert [token.symbol for token in filter_tokens(TABLE, "btc")] == ["BTC", "WBTC"]


def test_query_matches_display_name() -> None:
    assert [token.symbol for token in filter_tokens(TABLE, "cosmos")] == ["ATOM"]
    assert [token.symbol for token in filter_tokens(TABLE, "Wrapped")] == ["WBTC"]


def test_query_without_match() -> None:
    assert filter_tokens(TABLE, "doge") == []


def test_find_token_is_exact() -> None:
    assert find_token(TABLE, "ETH") is not None
    assert find_token(TABLE, "eth") is None

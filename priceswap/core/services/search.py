"""Lookup helpers over a resolved price table."""

from __future__ import annotations

from collections.abc import Sequence

from priceswap.core.models.token import ResolvedToken


def find_token(table: Sequence[ResolvedToken], symbol: str) -> ResolvedToken | None:
    for token in table:
        if token.symbol == symbol:
            return token
    return None


def filter_tokens(table: Sequence[ResolvedToken], query: str | None) -> list[ResolvedToken]:
    """Tokens whose symbol or display name contains ``query``, ignoring case."""

    needle = (query or "").strip().lower()
    if not needle:
        return list(table)
    return [
        token
        for token in table
        if needle in token.symbol.lower() or needle in token.display_name.lower()
    ]


__all__ = ["filter_tokens", "find_token"]

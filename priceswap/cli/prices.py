"""Price table CLI commands."""

from __future__ import annotations

from typing import Mapping

import typer

from priceswap.core.models.token import ResolvedToken
from priceswap.core.services.search import filter_tokens

from .utils import load_price_context, prepare_output

PRICE_COLUMNS = ["symbol", "name", "price", "icon"]


def register(app: typer.Typer) -> None:
    """Register price commands on the root CLI application."""

    app.command("prices", help="List the latest valid price of every token.")(prices_command)


def prices_command(
    ctx: typer.Context,
    search: str | None = typer.Option(
        None,
        "--search",
        "-s",
        help="Only show tokens whose symbol or name contains this text.",
    ),
) -> None:
    """Fetch the feed once and print the resolved price table."""

    _, table = load_price_context(ctx)
    tokens = filter_tokens(table, search)

    formatter, stream, stack = prepare_output(ctx)
    try:
        formatter.render([_token_to_row(token) for token in tokens], stream=stream, columns=PRICE_COLUMNS)
    finally:
        stack.close()


def _token_to_row(token: ResolvedToken) -> Mapping[str, object]:
    return {
        "symbol": token.symbol,
        "name": token.display_name,
        "price": token.price,
        "icon": token.icon_ref,
    }


__all__ = ["PRICE_COLUMNS", "prices_command", "register"]

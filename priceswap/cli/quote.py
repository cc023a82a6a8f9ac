"""Swap quote CLI command."""

from __future__ import annotations

from typing import Mapping

import typer

from priceswap.core.models.swap import SwapQuote
from priceswap.core.services.search import find_token
from priceswap.core.services.session import SwapSession
from priceswap.core.validation.amount import FieldIssue

from .constants import VALIDATION_EXIT_CODE
from .utils import emit_error, load_price_context, prepare_output

QUOTE_COLUMNS = ["from", "to", "amount", "output", "rate", "input_usd", "output_usd"]


def register(app: typer.Typer) -> None:
    """Register the quote command on the root CLI application."""

    app.command("quote", help="Quote how much TO_TOKEN an AMOUNT of FROM_TOKEN buys.")(quote_command)


def quote_command(
    ctx: typer.Context,
    from_token: str = typer.Argument(..., help="Symbol to swap from."),
    to_token: str = typer.Argument(..., help="Symbol to swap to."),
    amount: str = typer.Argument(..., help="Amount of FROM_TOKEN."),
    flip: bool = typer.Option(False, "--flip", help="Swap the FROM and TO tokens before quoting."),
) -> None:
    """Validate the request, fetch prices once and print the quote."""

    config, table = load_price_context(ctx)
    session = SwapSession(
        table=table,
        from_symbol=from_token,
        to_symbol=to_token,
        amount=amount,
        amount_decimals=config.display.amount_decimals,
        usd_decimals=config.display.usd_decimals,
    )
    if flip:
        session = session.flipped()

    issues = session.issues() + _unknown_tokens(session)
    if issues:
        emit_error(
            "Invalid swap request",
            "VALIDATION",
            details={issue.field: issue.message for issue in issues},
        )
        raise typer.Exit(code=VALIDATION_EXIT_CODE)

    formatter, stream, stack = prepare_output(ctx)
    try:
        formatter.render([_quote_to_row(session.quote)], stream=stream, columns=QUOTE_COLUMNS)
    finally:
        stack.close()


def _unknown_tokens(session: SwapSession) -> list[FieldIssue]:
    issues: list[FieldIssue] = []
    for field_name, symbol in (("from_token", session.from_symbol), ("to_token", session.to_symbol)):
        if symbol and find_token(session.table, symbol) is None:
            issues.append(FieldIssue(field_name, "UNKNOWN_TOKEN", f"No price available for '{symbol}'"))
    return issues


def _quote_to_row(quote: SwapQuote) -> Mapping[str, object]:
    return {
        "from": quote.from_symbol,
        "to": quote.to_symbol,
        "amount": quote.input_amount,
        "output": quote.output_display,
        "rate": quote.rate_label(),
        "input_usd": quote.input_value_display,
        "output_usd": quote.output_value_display,
    }


__all__ = ["QUOTE_COLUMNS", "quote_command", "register"]

"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import asyncio
import json
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence, TextIO

import typer

from priceswap.core.config.settings import ConfigManager, PriceSwapConfig
from priceswap.core.data.providers.price_feed import PriceFeedClient
from priceswap.core.logging import configure_logging
from priceswap.core.models.token import PriceTable
from priceswap.core.services.loader import PriceTableOutcome, load_price_table

from .constants import FEED_UNAVAILABLE_EXIT_CODE, VALIDATION_EXIT_CODE
from .formatters import OutputFormatter, create_formatter


@dataclass(slots=True)
class CLIOptions:
    """Resolved options derived from the Typer context."""

    format: str = "table"
    output_path: Path | None = None
    no_color: bool = False


def get_cli_options(ctx: typer.Context) -> CLIOptions:
    """Extract :class:`CLIOptions` from the Typer context object."""

    ctx.ensure_object(dict)
    data = ctx.obj or {}
    return CLIOptions(
        format=str(data.get("format", "table")),
        output_path=data.get("output_path"),
        no_color=bool(data.get("no_color", False)),
    )


def prepare_output(ctx: typer.Context) -> tuple[OutputFormatter, TextIO, ExitStack]:
    """Resolve formatter and writable stream for the current command."""

    options = get_cli_options(ctx)
    formatter = create_formatter(options.format, no_color=options.no_color)

    stack = ExitStack()
    stream: TextIO
    if options.output_path is not None:
        try:
            stream = stack.enter_context(open(options.output_path, "w", encoding="utf-8"))
        except OSError as exc:
            stack.close()
            emit_error(f"Unable to open '{options.output_path}': {exc}", "OUTPUT_WRITE_ERROR")
            raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc
    else:
        stream = sys.stdout

    return formatter, stream, stack


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""

    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = _sanitize_details(details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


def _sanitize_details(details: Mapping[str, object]) -> Mapping[str, object]:
    sanitized: dict[str, object] = {}
    for key, value in details.items():
        if isinstance(value, (str, int, float, bool)) or value is None:
            sanitized[key] = value
        elif isinstance(value, Mapping):
            sanitized[key] = {str(k): str(v) for k, v in value.items()}
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            sanitized[key] = [str(item) for item in value]
        else:
            sanitized[key] = str(value)
    return sanitized


def get_config() -> PriceSwapConfig:
    """Factory hook returning the active configuration."""

    return ConfigManager().get_config()


def get_price_table(config: PriceSwapConfig) -> PriceTableOutcome:
    """Factory hook fetching the price table once for a command."""

    client = PriceFeedClient(config.feed)
    return asyncio.run(load_price_table(client, config.catalog.to_catalog()))


def load_price_context(ctx: typer.Context) -> tuple[PriceSwapConfig, PriceTable]:
    """Resolve configuration and fetch the table, exiting if the feed is down."""

    config = get_config()
    if config.logging.file:
        ctx.ensure_object(dict)
        level = str((ctx.obj or {}).get("log_level", "WARNING"))
        configure_logging(level=level, file_output=True, file_path=config.logging.file)
    outcome = get_price_table(config)
    if outcome.error is not None:
        error = outcome.error
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=FEED_UNAVAILABLE_EXIT_CODE)
    return config, outcome.unwrap()


__all__ = [
    "CLIOptions",
    "emit_error",
    "get_cli_options",
    "get_config",
    "get_price_table",
    "load_price_context",
    "prepare_output",
]

"""Main entry point for the priceswap command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from priceswap.core.logging import configure_logging

from .formatters import create_formatter
from .prices import register as register_price_commands
from .quote import register as register_quote_commands


def create_app() -> typer.Typer:
    """Create a Typer application instance for priceswap."""

    app = typer.Typer(add_completion=False, help="priceswap command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        log_level: str = typer.Option(
            "WARNING",
            "--log-level",
            help="Minimum level of structured log lines written to stderr.",
            show_default=True,
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            # Validate formatter eagerly for immediate feedback on invalid options
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "log_level": _configure_logging(log_level),
                "no_color": no_color,
            }
        )

    register_price_commands(app)
    register_quote_commands(app)
    return app


def _configure_logging(level_name: str) -> str:
    normalized = level_name.strip().upper()
    if normalized not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
        normalized = "INFO"
    configure_logging(level=normalized)
    return normalized


app = create_app()

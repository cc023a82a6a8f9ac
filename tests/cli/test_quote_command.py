from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from priceswap.cli import utils as utils_module
from priceswap.cli.main import create_app
from priceswap.core.config.settings import PriceSwapConfig
from priceswap.core.exceptions import PriceTableUnavailableError
from priceswap.core.models.token import ResolvedToken
from priceswap.core.services.loader import PriceTableOutcome

TABLE = (
    ResolvedToken(symbol="BTC", display_name="Bitcoin", price=31000.0, icon_ref="icons/BTC.svg"),
    ResolvedToken(symbol="ETH", display_name="Ethereum", price=2000.0, icon_ref="icons/ETH.svg"),
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def outcome(monkeypatch: pytest.MonkeyPatch) -> dict[str, PriceTableOutcome]:
    holder = {"value": PriceTableOutcome(table=TABLE)}
    monkeypatch.setattr(utils_module, "get_config", PriceSwapConfig)
    monkeypatch.setattr(utils_module, "get_price_table", lambda config: holder["value"])
    return holder


def _rows(text: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def test_quote_jsonl_output(runner: CliRunner, outcome) -> None:
    result = runner.invoke(create_app(), ["--format", "jsonl", "quote", "BTC", "ETH", "2"])

    assert result.exit_code == 0, result.output
    assert _rows(result.stdout) == [
        {
            "from": "BTC",
            "to": "ETH",
            "amount": 2.0,
            "output": "31.000000",
            "rate": "1 BTC ≈ 15.500000 ETH",
            "input_usd": "62000.00",
            "output_usd": "62000.00",
        }
    ]


def test_quote_table_output(runner: CliRunner, outcome) -> None:
    result = runner.invoke(create_app(), ["--no-color", "quote", "BTC", "ETH", "2"])

    assert result.exit_code == 0, result.output
    assert "31.000000" in result.output


def test_quote_flip(runner: CliRunner, outcome) -> None:
    result = runner.invoke(create_app(), ["--format", "jsonl", "quote", "BTC", "ETH", "31", "--flip"])

    assert result.exit_code == 0, result.output
    row = _rows(result.stdout)[0]
    assert (row["from"], row["to"], row["output"]) == ("ETH", "BTC", "2.000000")


@pytest.mark.parametrize(
    ("amount", "message"),
    [
        ("12.3.4", "Only numbers and one dot are allowed"),
        ("abc", "Only numbers and one dot are allowed"),
        (".", "Amount must be a valid number"),
        ("0", "Amount must be greater than 0"),
    ],
)
def test_quote_invalid_amount(runner: CliRunner, outcome, amount: str, message: str) -> None:
    result = runner.invoke(create_app(), ["quote", "BTC", "ETH", amount])

    assert result.exit_code == 10
    assert "VALIDATION" in result.output
    assert message in result.output


def test_quote_unknown_token(runner: CliRunner, outcome) -> None:
    result = runner.invoke(create_app(), ["quote", "BTC", "DOGE", "1"])

    assert result.exit_code == 10
    assert "No price available for 'DOGE'" in result.output


def test_quote_feed_unavailable(runner: CliRunner, outcome) -> None:
    outcome["value"] = PriceTableOutcome(error=PriceTableUnavailableError("Price feed unreachable: boom"))

    result = runner.invoke(create_app(), ["quote", "BTC", "ETH", "1"])

    assert result.exit_code == 20
    assert "Price feed unreachable" in result.output

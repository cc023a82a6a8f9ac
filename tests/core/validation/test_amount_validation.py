"""Tests for the swap form validation gate."""

from __future__ import annotations

import pytest

from priceswap.core.validation import (
    FieldIssue,
    is_valid_amount,
    validate_amount,
    validate_swap_request,
)


@pytest.mark.parametrize("text", ["5.5", "1", "0.0001", ".5", "5.", "00012"])
def test_valid_amounts(text: str) -> None:
    assert validate_amount(text) == []
    assert is_valid_amount(text)


@pytest.mark.parametrize(
    ("text", "code"),
    [
        ("", "AMOUNT_REQUIRED"),
        (None, "AMOUNT_REQUIRED"),
        ("12.3.4", "AMOUNT_FORMAT"),
        ("-1", "AMOUNT_FORMAT"),
        ("1e5", "AMOUNT_FORMAT"),
        ("1,5", "AMOUNT_FORMAT"),
        (" 5", "AMOUNT_FORMAT"),
        ("5\n", "AMOUNT_FORMAT"),
        ("١٢", "AMOUNT_FORMAT"),
        ("inf", "AMOUNT_FORMAT"),
        (".", "AMOUNT_NOT_NUMBER"),
        ("0", "AMOUNT_NOT_POSITIVE"),
        ("0.000", "AMOUNT_NOT_POSITIVE"),
    ],
)
def test_invalid_amounts(text: str | None, code: str) -> None:
    issues = validate_amount(text)

    assert [issue.code for issue in issues] == [code]
    assert not is_valid_amount(text)


def test_messages_are_field_scoped() -> None:
    assert validate_amount("12.3.4") == [
        FieldIssue("amount", "AMOUNT_FORMAT", "Only numbers and one dot are allowed")
    ]
    assert validate_amount("0", field="from_amount") == [
        FieldIssue("from_amount", "AMOUNT_NOT_POSITIVE", "Amount must be greater than 0")
    ]


def test_swap_request_reports_every_field() -> None:
    issues = validate_swap_request("", None, "")

    assert [(issue.field, issue.code) for issue in issues] == [
        ("from_token", "TOKEN_REQUIRED"),
        ("to_token", "TOKEN_REQUIRED"),
        ("amount", "AMOUNT_REQUIRED"),
    ]
    assert issues[0].message == "Please select a token"


def test_complete_swap_request_is_valid() -> None:
    assert validate_swap_request("BTC", "ETH", "5.5") == []

"""Field validation for the swap form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from math import isfinite

AMOUNT_PATTERN = re.compile(r"[0-9]*\.?[0-9]*")


@dataclass(slots=True, frozen=True)
class FieldIssue:
    """A single validation failure attached to a form field."""

    field: str
    code: str
    message: str


def validate_amount(text: str | None, *, field: str = "amount") -> list[FieldIssue]:
    """Validate a typed amount, returning at most one issue.

    An empty list means the amount can be handed to the calculator.
    """

    if not text:
        return [FieldIssue(field, "AMOUNT_REQUIRED", "Please enter an amount")]
    if AMOUNT_PATTERN.fullmatch(text) is None:
        return [FieldIssue(field, "AMOUNT_FORMAT", "Only numbers and one dot are allowed")]
    try:
        value = float(text)
    except ValueError:
        value = float("nan")
    if not isfinite(value):
        return [FieldIssue(field, "AMOUNT_NOT_NUMBER", "Amount must be a valid number")]
    if value <= 0:
        return [FieldIssue(field, "AMOUNT_NOT_POSITIVE", "Amount must be greater than 0")]
    return []


def is_valid_amount(text: str | None) -> bool:
    return not validate_amount(text)


def validate_swap_request(
    from_token: str | None,
    to_token: str | None,
    amount: str | None,
) -> list[FieldIssue]:
    """Validate every field of a swap request, keyed by field name."""

    issues: list[FieldIssue] = []
    for field_name, value in (("from_token", from_token), ("to_token", to_token)):
        if not value:
            issues.append(FieldIssue(field_name, "TOKEN_REQUIRED", "Please select a token"))
    issues.extend(validate_amount(amount))
    return issues


__all__ = ["AMOUNT_PATTERN", "FieldIssue", "is_valid_amount", "validate_amount", "validate_swap_request"]

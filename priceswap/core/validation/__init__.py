"""Data validation module."""

from priceswap.core.validation.amount import (
    FieldIssue,
    is_valid_amount,
    validate_amount,
    validate_swap_request,
)

__all__ = [
    "FieldIssue",
    "is_valid_amount",
    "validate_amount",
    "validate_swap_request",
]

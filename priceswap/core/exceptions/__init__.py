"""Exception handling module."""

from priceswap.core.exceptions.base import PriceSwapError
from priceswap.core.exceptions.codes import ErrorCode
from priceswap.core.exceptions.domain import (
    DomainError,
    PriceTableUnavailableError,
    SwapValidationError,
)

__all__ = [
    "PriceSwapError",
    "DomainError",
    "ErrorCode",
    "PriceTableUnavailableError",
    "SwapValidationError",
]

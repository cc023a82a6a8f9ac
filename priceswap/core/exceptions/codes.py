"""Standardised error codes shared across layers."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by :class:`DomainError` instances."""

    VALIDATION = "VALIDATION"
    FEED_UNAVAILABLE = "FEED_UNAVAILABLE"


__all__ = ["ErrorCode"]

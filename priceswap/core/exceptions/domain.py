"""Domain-level error hierarchy definitions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Mapping

from priceswap.core.exceptions.base import PriceSwapError
from priceswap.core.exceptions.codes import ErrorCode

if TYPE_CHECKING:
    from priceswap.core.validation.amount import FieldIssue


class DomainError(PriceSwapError):
    """领域错误基类，携带标准化错误上下文."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        layer: str,
        retryable: bool = False,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """构造领域错误实例."""

        payload = dict(context or {})
        details = {**payload, "layer": layer, "retryable": retryable}
        super().__init__(message, code.value, details)
        self.code = code
        self.layer = layer
        self.retryable = retryable
        self.context = payload

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.code.value,
            "message": self.message,
            "layer": self.layer,
            "retryable": self.retryable,
            "context": dict(self.context),
        }


class PriceTableUnavailableError(DomainError):
    """Raised when the price feed cannot be fetched or decoded."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        payload = dict(context or {})
        if url is not None:
            payload["url"] = url
        if status_code is not None:
            payload["status_code"] = status_code
        super().__init__(message, ErrorCode.FEED_UNAVAILABLE, layer="feed", retryable=True, context=payload)
        self.url = url
        self.status_code = status_code


class SwapValidationError(DomainError):
    """Raised when a swap is submitted with invalid fields."""

    def __init__(self, issues: Sequence[FieldIssue]) -> None:
        self.issues = tuple(issues)
        fields = {issue.field: issue.message for issue in self.issues}
        message = "; ".join(f"{field}: {text}" for field, text in fields.items()) or "invalid swap request"
        super().__init__(message, ErrorCode.VALIDATION, layer="validation", retryable=False, context={"fields": fields})

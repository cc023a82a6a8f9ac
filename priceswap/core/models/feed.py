"""Models describing raw observations from the upstream price feed."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class RawPriceRecord(BaseModel):
    """One ``{currency, date, price}`` observation as published by the feed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    currency: str = Field(min_length=1)
    observed_at: datetime = Field(alias="date")
    price: float | None = None

    @field_validator("observed_at", mode="before")
    @classmethod
    def _parse_observed_at(cls, value: Any) -> Any:
        if isinstance(value, str):
            return datetime.fromisoformat(value.strip())
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day)
        return value

    @field_validator("observed_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # date-only and naive feed values must still compare with aware ones
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> float | None:
        if isinstance(value, bool) or value is None:
            return None
        if not isinstance(value, (int, float, str)):
            return None
        try:
            return float(value)
        except (ValueError, OverflowError):
            # unparsable text or an integer beyond float range
            return None

    @field_serializer("observed_at", when_used="json")
    def serialize_observed_at(self, value: datetime) -> str:
        """Serialize the timestamp back to its isoformat string."""
        return value.isoformat()


__all__ = ["RawPriceRecord"]

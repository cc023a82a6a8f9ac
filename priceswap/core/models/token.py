"""Entries of the resolved price table."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResolvedToken(BaseModel):
    """Latest valid price of a symbol, decorated with display metadata."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(min_length=1)
    display_name: str
    price: float = Field(gt=0)
    icon_ref: str


PriceTable = tuple[ResolvedToken, ...]


__all__ = ["PriceTable", "ResolvedToken"]

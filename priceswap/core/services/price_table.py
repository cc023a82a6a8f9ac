"""Build the per-symbol price table from raw feed observations."""

from __future__ import annotations

import math
from collections.abc import Iterable

from priceswap.core.logging import logger
from priceswap.core.models.catalog import DEFAULT_CATALOG, TokenCatalog
from priceswap.core.models.feed import RawPriceRecord
from priceswap.core.models.token import PriceTable, ResolvedToken


def latest_records(records: Iterable[RawPriceRecord]) -> dict[str, RawPriceRecord]:
    """Select the freshest record per currency.

    Records sharing the newest timestamp resolve to the one seen last.
    Prices are not inspected here.
    """

    latest: dict[str, RawPriceRecord] = {}
    for record in records:
        existing = latest.get(record.currency)
        if existing is None or record.observed_at >= existing.observed_at:
            latest[record.currency] = record
    return latest


def _has_valid_price(record: RawPriceRecord) -> bool:
    # NaN fails the comparison
    return record.price is not None and record.price > 0 and math.isfinite(record.price)


def build_price_table(
    records: Iterable[RawPriceRecord],
    catalog: TokenCatalog = DEFAULT_CATALOG,
) -> PriceTable:
    """Deduplicate, validate and decorate feed records into a sorted table.

    The newest observation of a symbol is chosen before its price is
    checked, so a symbol whose newest price is non-positive is dropped even
    if an older observation was valid.

    Args:
        records: Raw feed observations, in feed order.
        catalog: Display-name and icon lookups.

    Returns:
        Tokens ordered by symbol (case-sensitive), one per symbol.
    """

    record_list = list(records)
    latest = latest_records(record_list)

    tokens = [
        ResolvedToken(
            symbol=record.currency,
            display_name=catalog.display_name(record.currency),
            price=record.price,
            icon_ref=catalog.icon_ref(record.currency),
        )
        for record in latest.values()
        if _has_valid_price(record)
    ]
    tokens.sort(key=lambda token: token.symbol)

    logger.debug(
        "Built price table with {} tokens from {} records",
        len(tokens),
        len(record_list),
        symbols=len(latest),
        dropped=len(latest) - len(tokens),
    )
    return tuple(tokens)


__all__ = ["build_price_table", "latest_records"]

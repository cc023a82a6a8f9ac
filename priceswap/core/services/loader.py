"""Fetch-then-build pipeline for the price table."""

from __future__ import annotations

from dataclasses import dataclass

from priceswap.core.data.providers.price_feed import PriceFeedClient
from priceswap.core.exceptions import PriceTableUnavailableError
from priceswap.core.logging import log_context, logger
from priceswap.core.models.catalog import DEFAULT_CATALOG, TokenCatalog
from priceswap.core.models.token import PriceTable
from priceswap.core.services.price_table import build_price_table


@dataclass(slots=True, frozen=True)
class PriceTableOutcome:
    """Either a freshly built table or the reason the feed was unavailable."""

    table: PriceTable | None = None
    error: PriceTableUnavailableError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> PriceTable:
        if self.error is not None:
            raise self.error
        return self.table or ()


async def fetch_price_table(
    client: PriceFeedClient | None = None,
    catalog: TokenCatalog = DEFAULT_CATALOG,
) -> PriceTable:
    """Fetch the feed once and build the table, raising if the feed fails."""

    feed_client = client or PriceFeedClient()
    with log_context(feed=feed_client.config.url):
        records = await feed_client.fetch_records()
        table = build_price_table(records, catalog)
        logger.info("Price table ready with {} tokens", len(table))
    return table


async def load_price_table(
    client: PriceFeedClient | None = None,
    catalog: TokenCatalog = DEFAULT_CATALOG,
) -> PriceTableOutcome:
    """Like :func:`fetch_price_table` but returns the failure as a value.

    An empty table is a successful outcome; only a failed fetch sets
    ``error``, in which case no table is built.
    """

    try:
        table = await fetch_price_table(client, catalog)
    except PriceTableUnavailableError as error:
        return PriceTableOutcome(error=error)
    return PriceTableOutcome(table=table)


__all__ = ["PriceTableOutcome", "fetch_price_table", "load_price_table"]

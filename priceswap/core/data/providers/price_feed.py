"""HTTP client for the upstream token price feed.

The feed is fetched once per table build: no retry, no caching. Any
transport-level problem is reported as :class:`PriceTableUnavailableError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from priceswap.core.config.settings import FeedConfig
from priceswap.core.exceptions import PriceTableUnavailableError
from priceswap.core.logging import logger
from priceswap.core.models.feed import RawPriceRecord


def parse_feed_payload(payload: Any, *, url: str | None = None) -> list[RawPriceRecord]:
    """Turn a decoded feed body into records, skipping unusable items."""

    if not isinstance(payload, list):
        raise PriceTableUnavailableError(
            f"Price feed returned {type(payload).__name__}, expected a JSON array",
            url=url,
        )

    records: list[RawPriceRecord] = []
    skipped = 0
    for item in payload:
        if not isinstance(item, Mapping):
            skipped += 1
            continue
        try:
            records.append(RawPriceRecord.model_validate(item))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.debug("Skipped {} malformed feed items", skipped, feed=url)
    return records


class PriceFeedClient:
    """Async one-shot reader of the price feed."""

    def __init__(
        self,
        config: FeedConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or FeedConfig()
        self._transport = transport

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent, "Accept": "application/json"},
            transport=self._transport,
        )

    async def fetch_records(self) -> list[RawPriceRecord]:
        """GET the feed and decode it into raw records.

        Raises:
            PriceTableUnavailableError: on network errors, non-2xx responses
                or a body that is not a JSON array.
        """

        url = self.config.url
        logger.info("Fetching price feed", feed=url)
        try:
            async with self._build_client() as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Price feed responded with HTTP {}", status, feed=url, error_code="FEED_UNAVAILABLE")
            raise PriceTableUnavailableError(
                f"Price feed responded with HTTP {status}", url=url, status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Price feed unreachable: {}", exc, feed=url, error_code="FEED_UNAVAILABLE")
            raise PriceTableUnavailableError(f"Price feed unreachable: {exc}", url=url) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise PriceTableUnavailableError("Price feed body is not valid JSON", url=url) from exc

        records = parse_feed_payload(payload, url=url)
        logger.info("Fetched {} price records", len(records), feed=url)
        return records


__all__ = ["PriceFeedClient", "parse_feed_payload"]

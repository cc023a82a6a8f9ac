"""Upstream data providers."""

from priceswap.core.data.providers.price_feed import PriceFeedClient, parse_feed_payload

__all__ = ["PriceFeedClient", "parse_feed_payload"]

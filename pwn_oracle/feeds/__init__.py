"""Feeds — lookup и чтение price feeds через Feed Registry."""

from .interfaces import FeedRegistry, PriceFeed, TokenDecimalsSource
from .reader import PriceReader
from .registry import StaticFeedRegistry, StaticPriceFeed, StaticTokenDecimals
from .resolver import FeedFound, FeedNotFound, FeedResolution, FeedResolver

__all__ = [
    "FeedRegistry",
    "PriceFeed",
    "TokenDecimalsSource",
    "PriceReader",
    "StaticFeedRegistry",
    "StaticPriceFeed",
    "StaticTokenDecimals",
    "FeedFound",
    "FeedNotFound",
    "FeedResolution",
    "FeedResolver",
]

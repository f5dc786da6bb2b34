"""
PriceReader — чтение и проверка последнего раунда price feed

Проверки (в этом порядке):
1. answer < 0 → NegativePrice(asset, denomination, answer)
2. now - updated_at > max_price_age → PriceTooOld(asset, updated_at)

Только после проверки знака answer расширяется до беззнаковой PriceQuote.
Повторных попыток чтения нет.
"""

import logging
from typing import Optional

from pwn_oracle.core.clock import Clock, system_clock
from pwn_oracle.core.domain.config import OracleConfig
from pwn_oracle.core.domain.quotes import PriceQuote
from pwn_oracle.core.errors import NegativePrice, PriceTooOld
from pwn_oracle.feeds.interfaces import PriceFeed
from pwn_oracle.feeds.resolver import FeedResolution

logger = logging.getLogger(__name__)


class PriceReader:
    """Чтение feed с проверкой знака и свежести."""

    def __init__(self, config: OracleConfig, clock: Clock = system_clock):
        self.config = config
        self.clock = clock

    def read(self, feed: PriceFeed, asset: str, denomination: str) -> PriceQuote:
        """
        Чтение latestRoundData() и decimals() одного feed.

        Args:
            feed: Price feed
            asset: Актив (для контекста ошибки)
            denomination: Знаменатель (для контекста ошибки)

        Returns:
            PriceQuote с неотрицательной ценой

        Raises:
            NegativePrice: answer < 0
            PriceTooOld: цена старше max_price_age_sec
        """
        round_data = feed.latest_round_data()

        if round_data.answer < 0:
            raise NegativePrice(asset, denomination, round_data.answer)

        if not round_data.is_fresh(self.clock(), self.config.max_price_age_sec):
            raise PriceTooOld(asset, round_data.updated_at)

        quote = PriceQuote(
            amount=round_data.answer,
            decimals=feed.decimals(),
            denomination=denomination,
            as_of=round_data.updated_at,
        )
        logger.debug(
            "Price %s/%s = %d (decimals=%d, as_of=%d)",
            asset,
            denomination,
            quote.amount,
            quote.decimals,
            quote.as_of,
        )
        return quote

    def read_resolved(self, resolution: FeedResolution) -> Optional[PriceQuote]:
        """
        Чтение по результату soft lookup.

        Returns:
            PriceQuote, либо None без чтения feed, если feed не найден
        """
        if not resolution.found:
            return None
        return self.read(resolution.feed, resolution.base, resolution.quote)

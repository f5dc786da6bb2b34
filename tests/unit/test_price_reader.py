"""
Тесты для PriceReader

Проверяет:
1. Отрицательный answer → NegativePrice (до проверки свежести)
2. now - updated_at > max_price_age → PriceTooOld, граница включительно допустима
3. Soft чтение без feed не делает внешних вызовов
"""

import pytest

from pwn_oracle.core.domain import USD, OracleConfig
from pwn_oracle.core.errors import NegativePrice, PriceTooOld
from pwn_oracle.feeds import FeedNotFound, FeedResolver, PriceReader
from tests.fakes import CREDIT, NOW, CountingPriceFeed


class TestRead:
    def test_valid_quote(self, config, clock) -> None:
        feed = CountingPriceFeed("credit/usd", 2000 * 10**8, 8, updated_at=NOW - 60)

        quote = PriceReader(config, clock).read(feed, CREDIT, USD)

        assert quote.amount == 2000 * 10**8
        assert quote.decimals == 8
        assert quote.denomination == USD
        assert quote.as_of == NOW - 60
        assert feed.round_reads == 1
        assert feed.decimals_reads == 1

    def test_negative_price(self, config, clock) -> None:
        feed = CountingPriceFeed("credit/usd", -1, 8)

        with pytest.raises(NegativePrice) as exc_info:
            PriceReader(config, clock).read(feed, CREDIT, USD)

        assert exc_info.value.asset == CREDIT
        assert exc_info.value.denomination == USD
        assert exc_info.value.answer == -1

    def test_negative_price_checked_before_staleness(self, config, clock) -> None:
        feed = CountingPriceFeed("credit/usd", -5, 8, updated_at=0)

        with pytest.raises(NegativePrice):
            PriceReader(config, clock).read(feed, CREDIT, USD)

    def test_zero_price_accepted(self, config, clock) -> None:
        feed = CountingPriceFeed("credit/usd", 0, 8)
        assert PriceReader(config, clock).read(feed, CREDIT, USD).amount == 0

    def test_stale_price(self, clock) -> None:
        config = OracleConfig(max_price_age_sec=3600)
        feed = CountingPriceFeed("credit/usd", 10**8, 8, updated_at=NOW - 3601)

        with pytest.raises(PriceTooOld) as exc_info:
            PriceReader(config, clock).read(feed, CREDIT, USD)

        assert exc_info.value.asset == CREDIT
        assert exc_info.value.updated_at == NOW - 3601
        assert feed.decimals_reads == 0

    def test_age_equal_to_max_is_fresh(self, clock) -> None:
        config = OracleConfig(max_price_age_sec=3600)
        feed = CountingPriceFeed("credit/usd", 10**8, 8, updated_at=NOW - 3600)

        assert PriceReader(config, clock).read(feed, CREDIT, USD).as_of == NOW - 3600


class TestReadResolved:
    def test_not_found_returns_none(self, config, clock) -> None:
        assert PriceReader(config, clock).read_resolved(FeedNotFound(CREDIT, USD)) is None

    def test_found_reads_once(self, registry, config, clock) -> None:
        feed = registry.add(CREDIT, USD, 10**8, 8)
        resolution = FeedResolver(registry, config).find(CREDIT, USD)

        quote = PriceReader(config, clock).read_resolved(resolution)

        assert quote.amount == 10**8
        assert feed.round_reads == 1

"""
DenominatorRouter — поиск пути конверсии между двумя активами

Два режима:

(a) Поиск общего знаменателя (путь не задан). Кандидаты перебираются строго
    в порядке COMMON_DENOMINATOR_CANDIDATES, первый успешный побеждает,
    следующие не проверяются:
      1. A в USD, B в USD
      2. A в ETH, B в ETH
      3. A в USD, B в ETH (B переводится в USD через ETH/USD feed)
      4. A в ETH, B в USD (B переводится в ETH через инвертированный ETH/USD feed)
    Кандидат сначала разрешает все свои feeds (soft lookup) и только потом
    читает цены, поэтому промах кандидата не читает ни одной цены.
    Все кандидаты исчерпаны → CommonDenominatorNotFound.

(b) Явный путь base → intermediaries → quote с флагами invert. Длины
    проверяются до внешних вызовов, hops читаются строго по порядку
    (hard lookup).

Оба режима возвращают точный Rate: hops комбинируются без округления.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pwn_oracle.core.clock import Clock, system_clock
from pwn_oracle.core.domain.config import OracleConfig
from pwn_oracle.core.domain.denominations import normalize_address
from pwn_oracle.core.domain.quotes import CommonDenominatorPrice, ConversionPath, Hop
from pwn_oracle.core.errors import CommonDenominatorNotFound
from pwn_oracle.core.math.denomination import Rate, convert_price_denomination
from pwn_oracle.feeds.interfaces import FeedRegistry
from pwn_oracle.feeds.reader import PriceReader
from pwn_oracle.feeds.resolver import FeedResolution, FeedResolver

logger = logging.getLogger(__name__)


# =============================================================================
# CANDIDATES
# =============================================================================


@dataclass(frozen=True)
class DenominatorCandidate:
    """Кандидат общего знаменателя.

    denomination_a / denomination_b — имена полей OracleConfig ("usd", "eth").
    Если знаменатели различаются, цена B переводится в denomination_a через
    bridge feed; bridge_invert задаёт направление.
    """

    name: str
    denomination_a: str
    denomination_b: str
    bridge_invert: bool = False

    @property
    def needs_bridge(self) -> bool:
        return self.denomination_a != self.denomination_b

    def resolve_denominations(self, config: OracleConfig) -> tuple[str, str]:
        return getattr(config, self.denomination_a), getattr(config, self.denomination_b)


COMMON_DENOMINATOR_CANDIDATES: tuple[DenominatorCandidate, ...] = (
    DenominatorCandidate("usd", "usd", "usd"),
    DenominatorCandidate("eth", "eth", "eth"),
    DenominatorCandidate("usd_via_eth_bridge", "usd", "eth", bridge_invert=False),
    DenominatorCandidate("eth_via_usd_bridge", "eth", "usd", bridge_invert=True),
)


@dataclass(frozen=True)
class DenominatorMatch:
    """Разрешившийся кандидат: точные цены A и B в общем знаменателе."""

    candidate: DenominatorCandidate
    denomination: str
    price_a: Rate
    price_b: Rate
    decimals: int

    def prices(self) -> CommonDenominatorPrice:
        """Цены с общими decimals (наибольшие decimals прочитанных feeds)."""
        return CommonDenominatorPrice(
            price_a=self.price_a.to_fixed(self.decimals),
            price_b=self.price_b.to_fixed(self.decimals),
            decimals=self.decimals,
            denomination=self.denomination,
        )

    def rate(self) -> Rate:
        """Курс A в единицах B.

        Raises:
            DivisionByZero: Если цена B равна 0
        """
        return self.price_a.divided_by(self.price_b)


# =============================================================================
# ROUTER
# =============================================================================


class DenominatorRouter:
    """Разрешение курса A→B через общий знаменатель или явный путь."""

    def __init__(
        self,
        resolver: FeedResolver,
        reader: PriceReader,
        candidates: tuple[DenominatorCandidate, ...] = COMMON_DENOMINATOR_CANDIDATES,
    ):
        self.resolver = resolver
        self.reader = reader
        self.config = resolver.config
        self.candidates = candidates

    # -------------------------------------------------------------------------
    # Soft conversion
    # -------------------------------------------------------------------------

    def try_convert_price_denomination(
        self,
        price: int,
        decimals: int,
        base: str,
        quote: str,
        invert: bool = False,
    ) -> tuple[bool, int, int]:
        """
        Перевод цены из base в quote через soft lookup.

        Returns:
            (found, price, decimals). При отсутствии feed — (False, price, decimals)
            с входными значениями без изменений.
        """
        hop = Hop(base=base, quote=quote, invert=invert)
        feed_quote = self.reader.read_resolved(self.resolver.find(*hop.feed_pair))
        if feed_quote is None:
            return False, price, decimals

        price, decimals = convert_price_denomination(
            price, decimals, feed_quote.amount, feed_quote.decimals, invert
        )
        return True, price, decimals

    # -------------------------------------------------------------------------
    # (a) Common denominator
    # -------------------------------------------------------------------------

    def _match_candidate(
        self,
        candidate: DenominatorCandidate,
        asset_a: str,
        asset_b: str,
    ) -> Optional[DenominatorMatch]:
        denomination_a, denomination_b = candidate.resolve_denominations(self.config)

        resolution_a = self.resolver.find(asset_a, denomination_a)
        if not resolution_a.found:
            return None

        resolution_b = self.resolver.find(asset_b, denomination_b)
        if not resolution_b.found:
            return None

        bridge: Optional[FeedResolution] = None
        if candidate.needs_bridge:
            hop = Hop(base=denomination_b, quote=denomination_a, invert=candidate.bridge_invert)
            bridge = self.resolver.find(*hop.feed_pair)
            if not bridge.found:
                return None

        quote_a = self.reader.read_resolved(resolution_a)
        quote_b = self.reader.read_resolved(resolution_b)
        price_b = Rate.from_price(quote_b.amount, quote_b.decimals)
        decimals = max(quote_a.decimals, quote_b.decimals)

        if bridge is not None:
            quote_bridge = self.reader.read_resolved(bridge)
            price_b = price_b.apply_hop(
                quote_bridge.amount, quote_bridge.decimals, candidate.bridge_invert
            )
            decimals = max(decimals, quote_bridge.decimals)

        return DenominatorMatch(
            candidate=candidate,
            denomination=denomination_a,
            price_a=Rate.from_price(quote_a.amount, quote_a.decimals),
            price_b=price_b,
            decimals=decimals,
        )

    def match_common_denominator(self, asset_a: str, asset_b: str) -> DenominatorMatch:
        """
        Первый разрешившийся кандидат общего знаменателя.

        Raises:
            CommonDenominatorNotFound: Ни один кандидат не разрешился
        """
        for candidate in self.candidates:
            match = self._match_candidate(candidate, asset_a, asset_b)
            if match is not None:
                logger.debug(
                    "Common denominator for %s/%s: %s (decimals=%d)",
                    asset_a,
                    asset_b,
                    candidate.name,
                    match.decimals,
                )
                return match

            logger.debug(
                "Common denominator candidate %s missed for %s/%s",
                candidate.name,
                asset_a,
                asset_b,
            )

        raise CommonDenominatorNotFound(asset_a, asset_b)

    def find_common_denominator_price(
        self,
        asset_a: str,
        asset_b: str,
    ) -> CommonDenominatorPrice:
        """Цены A и B в первом разрешившемся общем знаменателе."""
        return self.match_common_denominator(asset_a, asset_b).prices()

    def resolve_common_denominator_rate(self, asset_a: str, asset_b: str) -> Rate:
        """Точный курс A в единицах B через общий знаменатель."""
        return self.match_common_denominator(asset_a, asset_b).rate()

    # -------------------------------------------------------------------------
    # (b) Explicit path
    # -------------------------------------------------------------------------

    def walk_path(self, path: ConversionPath) -> Rate:
        """
        Курс base в единицах quote по явному пути.

        Hops читаются в порядке пути, начиная с нейтрального курса 1.
        Ошибки registry пробрасываются как есть.

        Raises:
            FeedNotRegistered: ошибка registry на любом hop
            DivisionByZero: нулевая цена на инвертированном hop
        """
        rate = Rate.unit()

        for hop in path.hops():
            feed_base, feed_quote = hop.feed_pair
            feed = self.resolver.get(feed_base, feed_quote)
            quote = self.reader.read(feed, feed_base, feed_quote)
            rate = rate.apply_hop(quote.amount, quote.decimals, hop.invert)

        logger.debug("Path %s: rate=%s", " -> ".join(path.denominations), rate)
        return rate


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def find_common_denominator_price(
    registry: FeedRegistry,
    asset_a: str,
    asset_b: str,
    config: Optional[OracleConfig] = None,
    clock: Clock = system_clock,
) -> CommonDenominatorPrice:
    """
    Поиск общего знаменателя для произвольного registry.

    Raises:
        CommonDenominatorNotFound: Ни один кандидат не разрешился
    """
    config = config or OracleConfig()
    router = DenominatorRouter(
        FeedResolver(registry, config),
        PriceReader(config, clock),
    )
    return router.find_common_denominator_price(
        normalize_address(asset_a, "asset_a"),
        normalize_address(asset_b, "asset_b"),
    )

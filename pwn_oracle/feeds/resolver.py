"""
FeedResolver — поиск feed для пары (asset, denomination) через Feed Registry

Два режима:
- hard (get): ошибка registry пробрасывается вызывающей стороне как есть
- soft (find): FeedNotRegistered превращается в результат FeedNotFound,
  который вызывающая сторона обрабатывает как ветку управления

Перед lookup wrapped native токен заменяется на ETH знаменатель.
Soft режим перехватывает только FeedNotRegistered: прочие сбои registry
пробрасываются в обоих режимах.
"""

import logging
from dataclasses import dataclass
from typing import Union

from pwn_oracle.core.domain.config import OracleConfig
from pwn_oracle.core.errors import FeedNotFoundError, FeedNotRegistered
from pwn_oracle.feeds.interfaces import FeedRegistry, PriceFeed

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class FeedFound:
    """Feed найден."""

    base: str
    quote: str
    feed: PriceFeed

    found = True

    def require(self) -> PriceFeed:
        return self.feed


@dataclass(frozen=True)
class FeedNotFound:
    """Feed для пары не зарегистрирован."""

    base: str
    quote: str

    found = False

    def require(self) -> PriceFeed:
        """
        Перевод промаха в ошибку для вызывающих сторон, где промах фатален.

        Raises:
            FeedNotFoundError
        """
        raise FeedNotFoundError(self.base, self.quote)


FeedResolution = Union[FeedFound, FeedNotFound]


# =============================================================================
# RESOLVER
# =============================================================================


class FeedResolver:
    """Lookup feeds в registry с подстановкой wrapped native токена."""

    def __init__(self, registry: FeedRegistry, config: OracleConfig):
        self.registry = registry
        self.config = config

    def _lookup_pair(self, base: str, quote: str) -> tuple[str, str]:
        return self.config.denomination_symbol(base), self.config.denomination_symbol(quote)

    def get(self, base: str, quote: str) -> PriceFeed:
        """
        Hard lookup: ошибка registry пробрасывается как есть.

        Raises:
            FeedNotRegistered: Если registry не знает пары
        """
        base, quote = self._lookup_pair(base, quote)
        logger.debug("Feed lookup (hard): %s/%s", base, quote)
        return self.registry.get_feed(base, quote)

    def find(self, base: str, quote: str) -> FeedResolution:
        """Soft lookup: промах registry возвращается как FeedNotFound."""
        base, quote = self._lookup_pair(base, quote)
        try:
            feed = self.registry.get_feed(base, quote)
        except FeedNotRegistered:
            logger.debug("Feed lookup (soft): %s/%s not registered", base, quote)
            return FeedNotFound(base=base, quote=quote)

        logger.debug("Feed lookup (soft): %s/%s found", base, quote)
        return FeedFound(base=base, quote=quote, feed=feed)

"""
Static Feeds — in-memory реализации Feed Registry, price feed и token decimals

Используются для fork/offline окружений: отображение пар на feeds
задаётся документом деплоя (feed_registry.json контракт), а сами feeds
создаются через feed_factory по адресу.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from pwn_oracle.core.contracts.validators import validate_feed_registry
from pwn_oracle.core.domain.denominations import normalize_address
from pwn_oracle.core.domain.quotes import RoundData
from pwn_oracle.core.errors import ContractCallReverted, FeedNotRegistered
from pwn_oracle.feeds.interfaces import PriceFeed

logger = logging.getLogger(__name__)


# =============================================================================
# PRICE FEED
# =============================================================================


class StaticPriceFeed:
    """Feed с фиксированным ответом latestRoundData()."""

    def __init__(
        self,
        answer: int,
        decimals: int,
        updated_at: int,
        started_at: Optional[int] = None,
        round_id: int = 1,
        address: Optional[str] = None,
    ):
        self.address = address
        self._decimals = decimals
        self._round = RoundData(
            round_id=round_id,
            answer=answer,
            started_at=updated_at if started_at is None else started_at,
            updated_at=updated_at,
            answered_in_round=round_id,
        )

    def latest_round_data(self) -> RoundData:
        return self._round

    def decimals(self) -> int:
        return self._decimals

    def __repr__(self) -> str:
        return (
            f"StaticPriceFeed(answer={self._round.answer}, decimals={self._decimals}, "
            f"updated_at={self._round.updated_at})"
        )


# =============================================================================
# FEED REGISTRY
# =============================================================================


class StaticFeedRegistry:
    """
    In-memory Feed Registry.

    get_feed() для неизвестной пары поднимает FeedNotRegistered, как
    on-chain registry делает revert.
    """

    def __init__(self, feeds: Optional[Mapping[tuple[str, str], PriceFeed]] = None):
        self._feeds: Dict[tuple[str, str], PriceFeed] = {}
        for (base, quote), feed in (feeds or {}).items():
            self.register(base, quote, feed)

    def register(self, base: str, quote: str, feed: PriceFeed) -> None:
        key = (normalize_address(base, "base"), normalize_address(quote, "quote"))
        self._feeds[key] = feed

    def get_feed(self, base: str, quote: str) -> PriceFeed:
        feed = self._feeds.get((base.lower(), quote.lower()))
        if feed is None:
            raise FeedNotRegistered(base, quote)
        return feed

    def __len__(self) -> int:
        return len(self._feeds)

    @classmethod
    def from_document(
        cls,
        document: Dict[str, Any],
        feed_factory: Callable[[str], PriceFeed],
    ) -> "StaticFeedRegistry":
        """
        Построение registry из документа деплоя.

        Args:
            document: {"chain": ..., "feeds": [{"base", "quote", "feed"}]}
            feed_factory: Создаёт PriceFeed по адресу feed

        Raises:
            jsonschema.ValidationError: Если документ нарушает контракт
        """
        validate_feed_registry(document)

        registry = cls()
        for entry in document["feeds"]:
            feed_address = normalize_address(entry["feed"], "feed")
            registry.register(entry["base"], entry["quote"], feed_factory(feed_address))

        logger.debug(
            "Loaded %d price feeds for chain %s",
            len(registry),
            document.get("chain", "<unspecified>"),
        )
        return registry


# =============================================================================
# TOKEN DECIMALS
# =============================================================================


class StaticTokenDecimals:
    """decimals() токенов из отображения; актив без записи ведёт себя как revert."""

    def __init__(self, decimals: Optional[Mapping[str, int]] = None):
        self._decimals = {
            normalize_address(asset, "asset"): value for asset, value in (decimals or {}).items()
        }

    def decimals(self, asset: str) -> int:
        value = self._decimals.get(asset.lower())
        if value is None:
            raise ContractCallReverted(asset, "decimals")
        return value

"""Collaborator interfaces — внешние контракты, которые движок только читает."""

from typing import Protocol

from pwn_oracle.core.domain.quotes import RoundData


class PriceFeed(Protocol):
    """Chainlink-совместимый aggregator."""

    def latest_round_data(self) -> RoundData: ...

    def decimals(self) -> int: ...


class FeedRegistry(Protocol):
    """
    Feed Registry: (base, quote) -> PriceFeed.

    Для незарегистрированной пары поднимает FeedNotRegistered.
    """

    def get_feed(self, base: str, quote: str) -> PriceFeed: ...


class TokenDecimalsSource(Protocol):
    """
    Источник decimals() токенов.

    Для актива без контракта или с revert поднимает ContractCallReverted.
    """

    def decimals(self, asset: str) -> int: ...

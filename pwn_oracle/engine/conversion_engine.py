"""
ConversionEngine — фасад ценового движка для loan proposal контрактов

Отвечает на два вопроса:
- сколько единиц quote asset стоит amount единиц base asset
- сколько collateral требуется под credit amount при заданном LTV

Порядок одного вызова (без retry, любая ошибка фатальна):
1. Валидация входа (длины путей) — до любых внешних вызовов
2. SequencerLivenessGuard — до любого чтения цен
3. DenominatorRouter — точный курс (Rate) через явный путь или общий знаменатель
4. decimals() обоих активов (отсутствие контракта или revert → 0)
5. quote_amount = floor(amount * rate * 10^quote_decimals / 10^base_decimals),
   одно округление на весь вызов
"""

import logging
from typing import Optional, Sequence

from pwn_oracle.core.clock import Clock, system_clock
from pwn_oracle.core.domain.config import OracleConfig
from pwn_oracle.core.domain.denominations import normalize_address
from pwn_oracle.core.domain.quotes import CommonDenominatorPrice, ConversionPath
from pwn_oracle.core.errors import ContractCallReverted, InvalidInputLengths
from pwn_oracle.core.math.denomination import (
    Rate,
    apply_loan_to_value,
    validate_loan_to_value,
)
from pwn_oracle.core.math.fixed_point import validate_uint256
from pwn_oracle.feeds.interfaces import FeedRegistry, PriceFeed, TokenDecimalsSource
from pwn_oracle.feeds.reader import PriceReader
from pwn_oracle.feeds.resolver import FeedResolver
from pwn_oracle.guards.sequencer_liveness import SequencerLivenessGuard
from pwn_oracle.routing.denominator_router import DenominatorRouter

logger = logging.getLogger(__name__)


class ConversionEngine:
    """
    Конверсия количеств между активами по ценам oracle.

    Не хранит состояния между вызовами: каждая операция заново читает
    sequencer, feeds и decimals.
    """

    def __init__(
        self,
        registry: FeedRegistry,
        tokens: Optional[TokenDecimalsSource] = None,
        config: Optional[OracleConfig] = None,
        sequencer_uptime_feed: Optional[PriceFeed] = None,
        clock: Clock = system_clock,
    ):
        self.config = config or OracleConfig()
        self.tokens = tokens
        self.guard = SequencerLivenessGuard(self.config, sequencer_uptime_feed, clock)
        self.router = DenominatorRouter(
            FeedResolver(registry, self.config),
            PriceReader(self.config, clock),
        )

    # =========================================================================
    # ВСПОМОГАТЕЛЬНЫЕ
    # =========================================================================

    def _asset_decimals(self, asset: str) -> int:
        """decimals() актива; отсутствие контракта или revert → 0."""
        if self.tokens is None:
            return 0
        try:
            return self.tokens.decimals(asset)
        except ContractCallReverted:
            logger.debug("decimals() unavailable for %s, using 0", asset)
            return 0

    def _scale(self, amount: int, rate: Rate, base: str, quote: str) -> int:
        base_decimals = self._asset_decimals(base)
        quote_decimals = self._asset_decimals(quote)
        result = rate.convert_amount(amount, base_decimals, quote_decimals)
        logger.debug(
            "Converted %d of %s (decimals=%d) to %d of %s (decimals=%d), rate=%s",
            amount,
            base,
            base_decimals,
            result,
            quote,
            quote_decimals,
            rate,
        )
        return result

    # =========================================================================
    # КОНВЕРСИЯ
    # =========================================================================

    def convert_denomination(
        self,
        amount: int,
        base_asset: str,
        quote_asset: str,
        intermediaries: Sequence[str],
        invert_flags: Sequence[bool],
    ) -> int:
        """
        Конверсия по явному пути.

        Args:
            amount: Количество base asset (в его native decimals)
            base_asset: Исходный актив
            quote_asset: Целевой актив
            intermediaries: Промежуточные знаменатели
            invert_flags: Флаг invert для каждого hop (len = len(intermediaries) + 1)

        Returns:
            Количество quote asset в его native decimals

        Raises:
            InvalidInputLengths, IntermediaryDenominationsOutOfBounds: до внешних вызовов
            SequencerDown, GracePeriodNotOver: до чтения цен
            FeedNotRegistered: ошибка registry на любом hop
            NegativePrice, PriceTooOld: некорректные данные feed
        """
        validate_uint256(amount, "amount")
        path = ConversionPath.explicit(
            base_asset,
            quote_asset,
            intermediaries,
            invert_flags,
            self.config.max_intermediary_denominations,
        )

        self.guard.check()

        rate = self.router.walk_path(path)
        return self._scale(amount, rate, path.base, path.quote)

    def convert_with_common_denominator(
        self,
        amount: int,
        base_asset: str,
        quote_asset: str,
    ) -> int:
        """
        Конверсия через автоматически найденный общий знаменатель.

        Raises:
            CommonDenominatorNotFound: Ни один кандидат не разрешился
        """
        validate_uint256(amount, "amount")
        base_asset = normalize_address(base_asset, "base_asset")
        quote_asset = normalize_address(quote_asset, "quote_asset")

        self.guard.check()

        rate = self.router.resolve_common_denominator_rate(base_asset, quote_asset)
        return self._scale(amount, rate, base_asset, quote_asset)

    def find_common_denominator_price(
        self,
        asset_a: str,
        asset_b: str,
    ) -> CommonDenominatorPrice:
        """Цены A и B в первом разрешившемся общем знаменателе."""
        asset_a = normalize_address(asset_a, "asset_a")
        asset_b = normalize_address(asset_b, "asset_b")

        self.guard.check()

        return self.router.find_common_denominator_price(asset_a, asset_b)

    # =========================================================================
    # COLLATERAL
    # =========================================================================

    def get_collateral_amount(
        self,
        credit_asset: str,
        credit_amount: int,
        collateral_asset: str,
        intermediaries: Optional[Sequence[str]] = None,
        invert_flags: Optional[Sequence[bool]] = None,
        loan_to_value_bps: int = 10_000,
    ) -> int:
        """
        Количество collateral для credit amount при заданном LTV.

        collateral_amount = convert(credit_amount) * loan_to_value_bps / 10000

        Путь не задан (оба аргумента None) → поиск общего знаменателя.
        Проверки нулевых значений и отсутствия курса — ответственность
        вызывающего proposal контракта.

        Raises:
            InvalidInputLengths: задан только один из intermediaries / invert_flags
            ValueError: loan_to_value_bps отрицательный
        """
        if (intermediaries is None) != (invert_flags is None):
            raise InvalidInputLengths()

        validate_loan_to_value(loan_to_value_bps)

        if intermediaries is None:
            converted = self.convert_with_common_denominator(
                credit_amount, credit_asset, collateral_asset
            )
        else:
            converted = self.convert_denomination(
                credit_amount, credit_asset, collateral_asset, intermediaries, invert_flags
            )

        return apply_loan_to_value(
            converted, loan_to_value_bps, self.config.loan_to_value_denominator
        )

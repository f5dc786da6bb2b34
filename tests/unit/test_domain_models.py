"""
Тесты для доменных моделей: адреса, OracleConfig, котировки, пути конверсии

Проверяет:
1. Нормализацию адресов знаменателей
2. OracleConfig: значения по умолчанию, immutability, wrapped native подстановку
3. RoundData / PriceQuote / LivenessState
4. ConversionPath: инвариант длин, порядок hops, feed_pair при invert
"""

import pytest
from pydantic import ValidationError

from pwn_oracle.core.domain import (
    BTC,
    ETH,
    USD,
    CommonDenominatorPrice,
    ConversionPath,
    Hop,
    LivenessState,
    OracleConfig,
    PriceQuote,
    RoundData,
    is_address,
    normalize_address,
    validate_path_lengths,
)
from pwn_oracle.core.errors import IntermediaryDenominationsOutOfBounds, InvalidInputLengths
from pwn_oracle.core.math.fixed_point import UINT256_MAX
from tests.fakes import COLLATERAL, CREDIT, NOW, WETH

# =============================================================================
# ADDRESSES
# =============================================================================


class TestAddresses:
    def test_well_known_denominations(self) -> None:
        assert USD == "0x0000000000000000000000000000000000000348"
        assert ETH == "0x" + "e" * 40
        assert BTC == "0x" + "b" * 40

    def test_normalize_lowercases(self) -> None:
        assert normalize_address("0x" + "AB" * 20) == "0x" + "ab" * 20

    @pytest.mark.parametrize("value", ["", "0x1234", "11" * 20, "0x" + "zz" * 20, None])
    def test_invalid_address_rejected(self, value) -> None:
        assert not is_address(value)
        with pytest.raises(ValueError, match="20-byte hex address"):
            normalize_address(value, "asset")


# =============================================================================
# ORACLE CONFIG
# =============================================================================


class TestOracleConfig:
    """Тесты для OracleConfig"""

    def test_defaults(self) -> None:
        config = OracleConfig()

        assert config.max_price_age_sec == 86400
        assert config.l2_grace_period_sec == 600
        assert config.max_intermediary_denominations == 2
        assert config.loan_to_value_denominator == 10_000
        assert config.usd == USD
        assert config.eth == ETH
        assert config.btc == BTC
        assert config.wrapped_native_token is None

    def test_frozen(self) -> None:
        config = OracleConfig()

        with pytest.raises(ValidationError):
            config.max_price_age_sec = 1

    def test_denominations_normalized(self) -> None:
        config = OracleConfig(wrapped_native_token="0x" + "C0" * 20)
        assert config.wrapped_native_token == "0x" + "c0" * 20

    def test_denominations_must_be_distinct(self) -> None:
        with pytest.raises(ValidationError, match="must be distinct"):
            OracleConfig(eth=USD)

    def test_non_positive_max_age_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OracleConfig(max_price_age_sec=0)

    def test_wrapped_native_substituted_with_eth(self) -> None:
        config = OracleConfig(wrapped_native_token=WETH)

        assert config.denomination_symbol(WETH) == ETH
        assert config.denomination_symbol(CREDIT) == CREDIT

    def test_no_substitution_without_wrapped_native(self) -> None:
        assert OracleConfig().denomination_symbol(WETH) == WETH


# =============================================================================
# QUOTES
# =============================================================================


class TestRoundData:
    def test_negative_answer_allowed(self) -> None:
        """Знак answer проверяет PriceReader, а не модель"""
        round_data = RoundData(answer=-1, started_at=NOW, updated_at=NOW)
        assert round_data.answer == -1
        assert round_data.round_id == 0

    def test_is_fresh_boundary(self) -> None:
        round_data = RoundData(answer=1, started_at=NOW - 100, updated_at=NOW - 100)

        assert round_data.is_fresh(NOW, 100)
        assert not round_data.is_fresh(NOW, 99)


class TestPriceQuote:
    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PriceQuote(amount=-1, decimals=8, denomination=USD, as_of=NOW)

    def test_amount_wider_than_uint256_rejected(self) -> None:
        with pytest.raises(ValidationError, match="256 bits"):
            PriceQuote(amount=UINT256_MAX + 1, decimals=8, denomination=USD, as_of=NOW)

    def test_decimals_fit_uint8(self) -> None:
        with pytest.raises(ValidationError):
            PriceQuote(amount=1, decimals=256, denomination=USD, as_of=NOW)


class TestLivenessState:
    def test_zero_answer_is_up(self) -> None:
        state = LivenessState.from_round(RoundData(answer=0, started_at=NOW - 5, updated_at=NOW))

        assert state.is_up
        assert state.started_at == NOW - 5

    def test_non_zero_answer_is_down(self) -> None:
        state = LivenessState.from_round(RoundData(answer=1, started_at=NOW, updated_at=NOW))
        assert not state.is_up


class TestCommonDenominatorPrice:
    def test_frozen(self) -> None:
        prices = CommonDenominatorPrice(price_a=1, price_b=2, decimals=8, denomination=USD)

        with pytest.raises(ValidationError):
            prices.price_a = 3


# =============================================================================
# CONVERSION PATH
# =============================================================================


class TestHop:
    def test_feed_pair_direct(self) -> None:
        assert Hop(base=CREDIT, quote=USD, invert=False).feed_pair == (CREDIT, USD)

    def test_feed_pair_inverted_reads_reverse_pair(self) -> None:
        assert Hop(base=USD, quote=COLLATERAL, invert=True).feed_pair == (COLLATERAL, USD)


class TestConversionPath:
    """Тесты для ConversionPath"""

    def test_direct_path(self) -> None:
        path = ConversionPath(base=CREDIT, quote=COLLATERAL)

        assert path.invert_flags == (False,)
        assert path.denominations == (CREDIT, COLLATERAL)
        assert path.hops() == [Hop(CREDIT, COLLATERAL, False)]

    def test_hops_follow_path_order(self) -> None:
        path = ConversionPath.explicit(CREDIT, COLLATERAL, [ETH, USD], [False, False, True], 2)

        assert path.hops() == [
            Hop(CREDIT, ETH, False),
            Hop(ETH, USD, False),
            Hop(USD, COLLATERAL, True),
        ]

    def test_mismatched_lengths_rejected_by_model(self) -> None:
        with pytest.raises(ValidationError, match="invert_flags length"):
            ConversionPath(base=CREDIT, quote=COLLATERAL, intermediaries=(USD,), invert_flags=(False,))

    def test_explicit_invalid_lengths(self) -> None:
        with pytest.raises(InvalidInputLengths) as exc_info:
            ConversionPath.explicit(CREDIT, COLLATERAL, [USD], [False], 2)

        assert exc_info.value.intermediaries == 1
        assert exc_info.value.invert_flags == 1

    def test_explicit_too_many_intermediaries(self) -> None:
        with pytest.raises(IntermediaryDenominationsOutOfBounds) as exc_info:
            ConversionPath.explicit(CREDIT, COLLATERAL, [USD, ETH, BTC], [False] * 4, 2)

        assert exc_info.value.provided == 3
        assert exc_info.value.maximum == 2

    def test_lengths_checked_before_bounds(self) -> None:
        with pytest.raises(InvalidInputLengths):
            validate_path_lengths([USD, ETH, BTC], [False], 2)

    def test_endpoints_normalized(self) -> None:
        path = ConversionPath(base="0x" + "AA" * 20, quote=USD)
        assert path.base == "0x" + "aa" * 20

"""
Denomination Math — комбинирование котировок и финальный пересчёт количества

Чистые функции без внешних вызовов:
- convert_price_denomination: применение одного hop к цене (умножение или деление на курс feed)
- Rate: точный курс пути как дробь numerator / denominator
- apply_loan_to_value: применение LTV в basis points

Курс пути и курс через общий знаменатель накапливаются как Rate без
промежуточного округления. Единственное округление (floor) выполняется
одним mul_div при переводе количества в quote asset.
"""

from dataclasses import dataclass
from typing import Final

from pwn_oracle.core.errors import DivisionByZero
from pwn_oracle.core.math.fixed_point import (
    mul_div,
    pow10,
    sync_decimals_up,
    validate_decimals,
    validate_uint256,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Знаменатель LTV: 10000 bps = 100%
LOAN_TO_VALUE_DENOMINATOR: Final[int] = 10_000


# =============================================================================
# HOP
# =============================================================================


def convert_price_denomination(
    price: int,
    price_decimals: int,
    feed_price: int,
    feed_decimals: int,
    invert: bool,
) -> tuple[int, int]:
    """
    Применение одного hop к цене с фиксированными decimals.

    Перед комбинированием оба значения приводятся к общему decimals.
    invert=False: price * feed_price (feed читается как base-per-quote).
    invert=True: price / feed_price (feed читается как quote-per-base).

    Args:
        price: Накопленная цена
        price_decimals: decimals накопленной цены
        feed_price: Цена из feed
        feed_decimals: decimals feed
        invert: Делить на курс вместо умножения

    Returns:
        (new_price, new_decimals)

    Raises:
        DivisionByZero: Если invert=True и feed_price == 0

    Examples:
        >>> convert_price_denomination(1, 0, 2000 * 10**8, 8, False)
        (200000000000, 8)
        >>> convert_price_denomination(10**18, 18, 2000 * 10**8, 8, True)
        (500000000000000, 18)
    """
    price, feed_price, decimals = sync_decimals_up(
        price, price_decimals, feed_price, feed_decimals
    )
    unit = pow10(decimals)

    if invert:
        return mul_div(price, unit, feed_price), decimals

    return mul_div(price, feed_price, unit), decimals


# =============================================================================
# RATE
# =============================================================================


@dataclass(frozen=True)
class Rate:
    """
    Точный курс numerator / denominator.

    Цена feed p с decimals d входит как p / 10^d. Умножение и деление
    курсов не округляют, поэтому инвертированный hop не теряет точность
    на decimals feed.

    Examples:
        >>> Rate.from_price(3000 * 10**8, 8).invert().to_fixed(18)
        333333333333333
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.numerator < 0 or self.denominator < 0:
            raise ValueError(
                f"rate must be non-negative, got {self.numerator}/{self.denominator}"
            )
        if self.denominator == 0:
            raise DivisionByZero(self.numerator, 1)

    @classmethod
    def unit(cls) -> "Rate":
        """Нейтральный курс 1."""
        return cls(1, 1)

    @classmethod
    def from_price(cls, price: int, decimals: int) -> "Rate":
        validate_uint256(price, "price")
        validate_decimals(decimals)
        return cls(price, pow10(decimals))

    def times(self, other: "Rate") -> "Rate":
        return Rate(self.numerator * other.numerator, self.denominator * other.denominator)

    def divided_by(self, other: "Rate") -> "Rate":
        """
        Raises:
            DivisionByZero: Если other == 0
        """
        if other.numerator == 0:
            raise DivisionByZero(self.numerator, other.denominator)
        return Rate(self.numerator * other.denominator, self.denominator * other.numerator)

    def invert(self) -> "Rate":
        return Rate.unit().divided_by(self)

    def apply_hop(self, feed_price: int, feed_decimals: int, invert: bool) -> "Rate":
        """Один hop пути: умножение на курс feed, при invert — деление."""
        hop = Rate.from_price(feed_price, feed_decimals)
        if invert:
            return self.divided_by(hop)
        return self.times(hop)

    def to_fixed(self, decimals: int) -> int:
        """floor(rate * 10^decimals)."""
        validate_decimals(decimals)
        return mul_div(self.numerator, pow10(decimals), self.denominator)

    def convert_amount(self, amount: int, base_decimals: int, quote_decimals: int) -> int:
        """
        Пересчёт amount base asset в quote asset.

        quote_amount = floor(amount * rate * 10^quote_decimals / 10^base_decimals)

        Raises:
            MulDivOverflow: Если результат шире 256 бит

        Examples:
            >>> Rate.from_price(2000 * 10**8, 8).convert_amount(10**18, 18, 6)
            2000000000
        """
        validate_uint256(amount, "amount")
        validate_decimals(base_decimals, "base_decimals")
        validate_decimals(quote_decimals, "quote_decimals")

        return mul_div(
            amount * self.numerator,
            pow10(quote_decimals),
            self.denominator * pow10(base_decimals),
        )

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


# =============================================================================
# LOAN TO VALUE
# =============================================================================


def validate_loan_to_value(loan_to_value_bps: int) -> None:
    """
    Валидация LTV в basis points.

    Raises:
        ValueError: Если loan_to_value_bps не int или отрицательный
    """
    if isinstance(loan_to_value_bps, bool) or not isinstance(loan_to_value_bps, int):
        raise ValueError(
            f"loan_to_value_bps must be an integer, got {type(loan_to_value_bps).__name__}"
        )

    if loan_to_value_bps < 0:
        raise ValueError(f"loan_to_value_bps must be non-negative, got {loan_to_value_bps}")


def apply_loan_to_value(
    amount: int,
    loan_to_value_bps: int,
    denominator: int = LOAN_TO_VALUE_DENOMINATOR,
) -> int:
    """
    Применение LTV: amount * loan_to_value_bps / denominator (floor).

    Args:
        amount: Количество после конверсии
        loan_to_value_bps: LTV в basis points (10000 = 100%)
        denominator: Знаменатель LTV (default: 10000)

    Raises:
        ValueError: Если loan_to_value_bps отрицательный
    """
    validate_loan_to_value(loan_to_value_bps)
    return mul_div(amount, loan_to_value_bps, denominator)

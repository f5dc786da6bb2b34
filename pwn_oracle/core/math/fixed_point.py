"""
Fixed-Point — целочисленная арифметика цен с произвольной точностью

Модуль обеспечивает корректную работу с ценами и количествами, выраженными
целыми числами с разным количеством десятичных знаков (decimals):
- mul_div: floor(x * y / d) с полной точностью промежуточного произведения
- scale_price: перевод значения между decimals
- sync_decimals_up: приведение двух значений к общему (большему) decimals

Политика переполнения:
- Промежуточное произведение не ограничено (Python int), что эквивалентно
  512-битному и более широкому mulDiv.
- Множитель масштаба 10^k может превышать 256 бит (k до 255).
- Любой результат, возвращаемый наружу, обязан помещаться в uint256.
  Иначе — MulDivOverflow. Деление на ноль — DivisionByZero. Обёртки нет.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции целочисленные, float не используется
2. Округление всегда вниз (floor), как в on-chain mulDiv
3. Результат никогда не выходит за [0, UINT256_MAX]
"""

from typing import Final

from pwn_oracle.core.errors import DivisionByZero, MulDivOverflow

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимальная гарантированная ширина значений
UINT256_MAX: Final[int] = 2**256 - 1

# decimals хранится в uint8
MAX_DECIMALS: Final[int] = 255


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_uint256(value: int, name: str) -> None:
    """
    Валидация, что значение — целое в диапазоне uint256.

    Raises:
        ValueError: Если value не int, отрицательное или шире 256 бит
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > UINT256_MAX:
        raise ValueError(f"{name} must fit in 256 bits, got {value}")


def validate_decimals(decimals: int, name: str = "decimals") -> None:
    """
    Валидация decimals (uint8).

    Raises:
        ValueError: Если decimals вне [0, 255]
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"{name} must be an integer, got {type(decimals).__name__}")

    if decimals < 0 or decimals > MAX_DECIMALS:
        raise ValueError(f"{name} must be in [0, {MAX_DECIMALS}], got {decimals}")


# =============================================================================
# MUL DIV
# =============================================================================


def mul_div(x: int, y: int, denominator: int) -> int:
    """
    Полноточное floor(x * y / denominator).

    Args:
        x: Первый множитель (>= 0)
        y: Второй множитель (>= 0, может быть шире 256 бит, например 10^k)
        denominator: Делитель (> 0, может быть шире 256 бит)

    Returns:
        floor(x * y / denominator), гарантированно <= UINT256_MAX

    Raises:
        ValueError: Если аргумент отрицательный
        DivisionByZero: Если denominator == 0
        MulDivOverflow: Если результат не помещается в uint256

    Examples:
        >>> mul_div(10**18, 2000 * 10**8, 10**8)
        2000000000000000000000
        >>> mul_div(7, 1, 2)
        3
    """
    if x < 0 or y < 0 or denominator < 0:
        raise ValueError(
            f"mul_div operands must be non-negative, got {x}, {y}, {denominator}"
        )

    if denominator == 0:
        raise DivisionByZero(x, y)

    result = (x * y) // denominator

    if result > UINT256_MAX:
        raise MulDivOverflow(x, y, denominator)

    return result


def pow10(exponent: int) -> int:
    """10^exponent для exponent >= 0."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return 10**exponent


# =============================================================================
# МАСШТАБИРОВАНИЕ DECIMALS
# =============================================================================


def scale_price(price: int, from_decimals: int, to_decimals: int) -> int:
    """
    Перевод значения из from_decimals в to_decimals.

    to >= from: price * 10^(to - from)
    to <  from: floor(price / 10^(from - to))

    Args:
        price: Значение (uint256)
        from_decimals: Исходные decimals (0..255)
        to_decimals: Целевые decimals (0..255)

    Returns:
        Отмасштабированное значение

    Raises:
        MulDivOverflow: Если результат масштабирования вверх шире 256 бит

    Examples:
        >>> scale_price(1 * 10**8, 8, 18)
        1000000000000000000
        >>> scale_price(123456789, 8, 6)
        1234567
    """
    validate_uint256(price, "price")
    validate_decimals(from_decimals, "from_decimals")
    validate_decimals(to_decimals, "to_decimals")

    if to_decimals >= from_decimals:
        return mul_div(price, pow10(to_decimals - from_decimals), 1)

    return mul_div(price, 1, pow10(from_decimals - to_decimals))


def sync_decimals_up(
    price_a: int,
    decimals_a: int,
    price_b: int,
    decimals_b: int,
) -> tuple[int, int, int]:
    """
    Приведение двух значений к общему decimals (к большему из двух).

    Масштабируется только операнд с меньшим decimals, поэтому точность
    не теряется. Используется перед любым умножением/делением двух котировок.

    Returns:
        (scaled_a, scaled_b, max_decimals)

    Examples:
        >>> sync_decimals_up(10**8, 8, 10**18, 18)
        (1000000000000000000, 1000000000000000000, 18)
    """
    validate_uint256(price_a, "price_a")
    validate_uint256(price_b, "price_b")
    validate_decimals(decimals_a, "decimals_a")
    validate_decimals(decimals_b, "decimals_b")

    if decimals_a > decimals_b:
        return price_a, scale_price(price_b, decimals_b, decimals_a), decimals_a

    if decimals_a < decimals_b:
        return scale_price(price_a, decimals_a, decimals_b), price_b, decimals_b

    return price_a, price_b, decimals_a

"""
Quotes — модели котировок, раундов feed и путей конверсии

Immutable Pydantic модели, живущие не дольше одного вызова движка:
- RoundData: сырой ответ latestRoundData() (answer со знаком)
- PriceQuote: проверенная котировка (amount >= 0)
- LivenessState: статус L2 sequencer
- ConversionPath: путь base → intermediaries → quote с флагами invert
- CommonDenominatorPrice: цены двух активов в общем знаменателе

Ничего не кэшируется и не сохраняется.
"""

from typing import NamedTuple, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from pwn_oracle.core.domain.denominations import normalize_address
from pwn_oracle.core.errors import IntermediaryDenominationsOutOfBounds, InvalidInputLengths
from pwn_oracle.core.math.fixed_point import validate_uint256

# =============================================================================
# FEED ROUND
# =============================================================================


class RoundData(BaseModel):
    """
    Ответ latestRoundData() feed.

    answer может быть отрицательным: знак проверяет PriceReader.
    """

    round_id: int = Field(0, ge=0, description="ID раунда")
    answer: int = Field(..., description="Ответ feed (signed)")
    started_at: int = Field(..., ge=0, description="Начало раунда (unix seconds)")
    updated_at: int = Field(..., ge=0, description="Последнее обновление (unix seconds)")
    answered_in_round: int = Field(0, ge=0, description="Раунд, в котором получен ответ")

    model_config = {"frozen": True}

    def is_fresh(self, now: int, max_price_age_sec: int) -> bool:
        """Раунд свежий, если now - updated_at <= max_price_age_sec."""
        return now - self.updated_at <= max_price_age_sec


# =============================================================================
# PRICE QUOTE
# =============================================================================


class PriceQuote(BaseModel):
    """Проверенная котировка: неотрицательная и свежая на момент чтения."""

    amount: int = Field(..., ge=0, description="Цена (uint256)")
    decimals: int = Field(..., ge=0, le=255, description="Decimals цены (uint8)")
    denomination: str = Field(..., description="Знаменатель котировки")
    as_of: int = Field(..., ge=0, description="Время обновления (unix seconds)")

    model_config = {"frozen": True}

    @field_validator("amount")
    @classmethod
    def _amount_fits_uint256(cls, value: int) -> int:
        validate_uint256(value, "amount")
        return value


# =============================================================================
# L2 SEQUENCER
# =============================================================================


class LivenessState(BaseModel):
    """Статус L2 sequencer: answer 0 = up, иначе down."""

    is_up: bool = Field(..., description="Sequencer работает")
    started_at: int = Field(..., ge=0, description="Время последней смены статуса")

    model_config = {"frozen": True}

    @classmethod
    def from_round(cls, round_data: RoundData) -> "LivenessState":
        return cls(is_up=round_data.answer == 0, started_at=round_data.started_at)


# =============================================================================
# CONVERSION PATH
# =============================================================================


class Hop(NamedTuple):
    """Один шаг пути: feed пары (base, quote), при invert читается (quote, base)."""

    base: str
    quote: str
    invert: bool

    @property
    def feed_pair(self) -> tuple[str, str]:
        if self.invert:
            return self.quote, self.base
        return self.base, self.quote


def validate_path_lengths(
    intermediaries: Sequence[str],
    invert_flags: Sequence[bool],
    max_intermediaries: int,
) -> None:
    """
    Проверка длин явного пути. Выполняется до любых внешних вызовов.

    Raises:
        InvalidInputLengths: len(invert_flags) != len(intermediaries) + 1
        IntermediaryDenominationsOutOfBounds: len(intermediaries) > max_intermediaries
    """
    if len(invert_flags) != len(intermediaries) + 1:
        raise InvalidInputLengths(len(intermediaries), len(invert_flags))

    if len(intermediaries) > max_intermediaries:
        raise IntermediaryDenominationsOutOfBounds(len(intermediaries), max_intermediaries)


class ConversionPath(BaseModel):
    """
    Путь конверсии base → intermediaries[0] → … → quote.

    Инвариант: len(invert_flags) == len(intermediaries) + 1.
    """

    base: str = Field(..., description="Исходный актив")
    quote: str = Field(..., description="Целевой актив")
    intermediaries: tuple[str, ...] = Field((), description="Промежуточные знаменатели")
    invert_flags: tuple[bool, ...] = Field((False,), description="Флаги invert для каждого hop")

    model_config = {"frozen": True}

    @field_validator("base", "quote")
    @classmethod
    def _normalize_endpoint(cls, value: str) -> str:
        return normalize_address(value)

    @field_validator("intermediaries")
    @classmethod
    def _normalize_intermediaries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(normalize_address(item, "intermediary") for item in value)

    @model_validator(mode="after")
    def _lengths_match(self) -> "ConversionPath":
        if len(self.invert_flags) != len(self.intermediaries) + 1:
            raise ValueError(
                f"invert_flags length {len(self.invert_flags)} must equal "
                f"intermediaries length {len(self.intermediaries)} + 1"
            )
        return self

    @classmethod
    def explicit(
        cls,
        base: str,
        quote: str,
        intermediaries: Sequence[str],
        invert_flags: Sequence[bool],
        max_intermediaries: int,
    ) -> "ConversionPath":
        """
        Явный путь, заданный вызывающей стороной.

        Длины проверяются до построения модели, чтобы вызывающая сторона
        получила структурированную ошибку движка.
        """
        validate_path_lengths(intermediaries, invert_flags, max_intermediaries)
        return cls(
            base=base,
            quote=quote,
            intermediaries=tuple(intermediaries),
            invert_flags=tuple(bool(flag) for flag in invert_flags),
        )

    @property
    def denominations(self) -> tuple[str, ...]:
        """[base, hop_1, …, hop_n, quote]."""
        return (self.base, *self.intermediaries, self.quote)

    def hops(self) -> list[Hop]:
        """Шаги пути в порядке обхода."""
        nodes = self.denominations
        return [
            Hop(base=nodes[i], quote=nodes[i + 1], invert=invert)
            for i, invert in enumerate(self.invert_flags)
        ]


# =============================================================================
# COMMON DENOMINATOR
# =============================================================================


class CommonDenominatorPrice(BaseModel):
    """Цены двух активов в одном знаменателе с общими decimals."""

    price_a: int = Field(..., ge=0, description="Цена актива A")
    price_b: int = Field(..., ge=0, description="Цена актива B")
    decimals: int = Field(..., ge=0, le=255, description="Общие decimals")
    denomination: str = Field(..., description="Общий знаменатель")

    model_config = {"frozen": True}

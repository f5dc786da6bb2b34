"""
OracleConfig — неизменяемая конфигурация ценового движка

Протокольные константы передаются движку явно при создании, а не через
глобальные переменные: один и тот же код обслуживает mainnet и L2 деплои
с разными параметрами.

Загрузка из JSON проходит через JSON Schema контракт (oracle_config.json),
затем через Pydantic модель.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from pwn_oracle.core.contracts.validators import validate_oracle_config
from pwn_oracle.core.domain.denominations import BTC, ETH, USD, normalize_address

# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_MAX_PRICE_AGE_SEC = 24 * 60 * 60
DEFAULT_L2_GRACE_PERIOD_SEC = 10 * 60
DEFAULT_MAX_INTERMEDIARY_DENOMINATIONS = 2


class OracleConfig(BaseModel):
    """
    Конфигурация движка.

    wrapped_native_token — адрес wrapped токена нативного актива (например WETH),
    который перед lookup заменяется на ETH знаменатель.
    """

    max_price_age_sec: int = Field(
        DEFAULT_MAX_PRICE_AGE_SEC, gt=0, description="Максимальный возраст цены feed (секунды)"
    )
    l2_grace_period_sec: int = Field(
        DEFAULT_L2_GRACE_PERIOD_SEC,
        ge=0,
        description="Минимальное время работы L2 sequencer после восстановления (секунды)",
    )
    max_intermediary_denominations: int = Field(
        DEFAULT_MAX_INTERMEDIARY_DENOMINATIONS,
        ge=0,
        description="Максимум промежуточных знаменателей в явном пути",
    )
    loan_to_value_denominator: int = Field(
        10_000, gt=0, description="Знаменатель LTV (basis points)"
    )

    usd: str = Field(USD, description="Адрес USD знаменателя")
    eth: str = Field(ETH, description="Адрес ETH знаменателя")
    btc: str = Field(BTC, description="Адрес BTC знаменателя")
    wrapped_native_token: Optional[str] = Field(
        None, description="Wrapped native token, эквивалентный ETH знаменателю (nullable)"
    )

    model_config = {"frozen": True}

    @field_validator("usd", "eth", "btc", "wrapped_native_token")
    @classmethod
    def _normalize(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if value is None:
            return None
        return normalize_address(value, info.field_name)

    @model_validator(mode="after")
    def _distinct_denominations(self) -> "OracleConfig":
        if len({self.usd, self.eth, self.btc}) != 3:
            raise ValueError("usd, eth and btc denominations must be distinct")
        return self

    def denomination_symbol(self, asset: str) -> str:
        """Подстановка ETH знаменателя вместо wrapped native токена."""
        if self.wrapped_native_token is not None and asset == self.wrapped_native_token:
            return self.eth
        return asset

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OracleConfig":
        """
        Создание конфигурации из dict с проверкой JSON Schema контракта.

        Raises:
            jsonschema.ValidationError: Если данные нарушают контракт
            pydantic.ValidationError: Если данные нарушают ограничения модели
        """
        validate_oracle_config(data)
        return cls.model_validate(data)


def load_oracle_config(path: str | Path) -> OracleConfig:
    """
    Загрузка конфигурации из JSON файла.

    Args:
        path: Путь к JSON файлу

    Returns:
        OracleConfig
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return OracleConfig.from_dict(data)

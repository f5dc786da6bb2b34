"""
Domain models and value objects.

Contains denominations, engine configuration, feed rounds, price quotes
and conversion paths.
"""

from pwn_oracle.core.domain.config import (
    DEFAULT_L2_GRACE_PERIOD_SEC,
    DEFAULT_MAX_INTERMEDIARY_DENOMINATIONS,
    DEFAULT_MAX_PRICE_AGE_SEC,
    OracleConfig,
    load_oracle_config,
)
from pwn_oracle.core.domain.denominations import (
    BTC,
    ETH,
    USD,
    is_address,
    normalize_address,
)
from pwn_oracle.core.domain.quotes import (
    CommonDenominatorPrice,
    ConversionPath,
    Hop,
    LivenessState,
    PriceQuote,
    RoundData,
    validate_path_lengths,
)

__all__ = [
    # Denominations
    "BTC",
    "ETH",
    "USD",
    "is_address",
    "normalize_address",
    # Config
    "DEFAULT_L2_GRACE_PERIOD_SEC",
    "DEFAULT_MAX_INTERMEDIARY_DENOMINATIONS",
    "DEFAULT_MAX_PRICE_AGE_SEC",
    "OracleConfig",
    "load_oracle_config",
    # Quotes
    "CommonDenominatorPrice",
    "ConversionPath",
    "Hop",
    "LivenessState",
    "PriceQuote",
    "RoundData",
    "validate_path_lengths",
]

"""
pwn_oracle — oracle price resolution and cross-denomination conversion.

Prices a credit amount in one asset in units of a different collateral asset
using Chainlink-style feeds, a Feed Registry and an optional L2 sequencer
uptime feed.
"""

from pwn_oracle.core.domain import (
    BTC,
    ETH,
    USD,
    CommonDenominatorPrice,
    ConversionPath,
    OracleConfig,
    PriceQuote,
    RoundData,
    load_oracle_config,
)
from pwn_oracle.core.errors import (
    CommonDenominatorNotFound,
    ContractCallReverted,
    DivisionByZero,
    FeedNotFoundError,
    FeedNotRegistered,
    GracePeriodNotOver,
    IntermediaryDenominationsOutOfBounds,
    InvalidInputLengths,
    MulDivOverflow,
    NegativePrice,
    OracleError,
    PriceTooOld,
    SequencerDown,
)
from pwn_oracle.engine import ConversionEngine
from pwn_oracle.routing import find_common_denominator_price

__version__ = "1.3.0"

__all__ = [
    # Engine
    "ConversionEngine",
    "find_common_denominator_price",
    # Domain
    "BTC",
    "ETH",
    "USD",
    "CommonDenominatorPrice",
    "ConversionPath",
    "OracleConfig",
    "PriceQuote",
    "RoundData",
    "load_oracle_config",
    # Errors
    "OracleError",
    "ContractCallReverted",
    "FeedNotRegistered",
    "SequencerDown",
    "GracePeriodNotOver",
    "FeedNotFoundError",
    "CommonDenominatorNotFound",
    "NegativePrice",
    "PriceTooOld",
    "InvalidInputLengths",
    "IntermediaryDenominationsOutOfBounds",
    "MulDivOverflow",
    "DivisionByZero",
]

"""Routing — поиск пути конверсии между знаменателями."""

from .denominator_router import (
    COMMON_DENOMINATOR_CANDIDATES,
    DenominatorCandidate,
    DenominatorMatch,
    DenominatorRouter,
    find_common_denominator_price,
)

__all__ = [
    "COMMON_DENOMINATOR_CANDIDATES",
    "DenominatorCandidate",
    "DenominatorMatch",
    "DenominatorRouter",
    "find_common_denominator_price",
]

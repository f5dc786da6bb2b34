"""
Shared pytest fixtures for pwn_oracle tests.

Fixtures provide a frozen clock, a shared external-call log and counting
collaborators wired to it.
"""

import pytest

from pwn_oracle.core.domain.config import OracleConfig
from tests.fakes import (
    COLLATERAL,
    CREDIT,
    NOW,
    CountingFeedRegistry,
    CountingPriceFeed,
    CountingTokenDecimals,
)


@pytest.fixture
def clock():
    """Замороженное время (unix seconds)."""
    return lambda: NOW


@pytest.fixture
def call_log():
    """Общий журнал внешних вызовов."""
    return []


@pytest.fixture
def config():
    """Конфигурация по умолчанию (mainnet, без wrapped native)."""
    return OracleConfig()


@pytest.fixture
def registry(call_log):
    """Пустой counting registry."""
    return CountingFeedRegistry(log=call_log)


@pytest.fixture
def tokens(call_log):
    """decimals(): credit 18, collateral 6."""
    return CountingTokenDecimals({CREDIT: 18, COLLATERAL: 6}, log=call_log)


@pytest.fixture
def sequencer_up(call_log):
    """Sequencer up уже сутки."""
    return CountingPriceFeed(
        "sequencer", answer=0, decimals=0, started_at=NOW - 86400, log=call_log
    )


@pytest.fixture
def sequencer_down(call_log):
    """Sequencer down."""
    return CountingPriceFeed(
        "sequencer", answer=1, decimals=0, started_at=NOW - 86400, log=call_log
    )

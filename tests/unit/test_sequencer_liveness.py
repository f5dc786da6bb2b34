"""
Тесты для SequencerLivenessGuard

Проверяет:
1. Нет feed sequencer → PASS без внешних вызовов
2. Sequencer down → блокировка / SequencerDown
3. Grace period (граница включительно блокирует)
4. PASS после grace period
"""

import pytest

from pwn_oracle.core.domain import OracleConfig
from pwn_oracle.core.errors import GracePeriodNotOver, SequencerDown
from pwn_oracle.guards import SequencerLivenessGuard
from tests.fakes import NOW, CountingPriceFeed


def _sequencer(up_for: int, answer: int = 0) -> CountingPriceFeed:
    return CountingPriceFeed("sequencer", answer=answer, decimals=0, started_at=NOW - up_for)


class TestEvaluate:
    """Тесты для evaluate()"""

    def test_no_feed_passes(self, config, clock) -> None:
        result = SequencerLivenessGuard(config, None, clock).evaluate()

        assert result.entry_allowed
        assert not result.is_l2
        assert result.liveness is None

    def test_down(self, config, clock, sequencer_down) -> None:
        result = SequencerLivenessGuard(config, sequencer_down, clock).evaluate()

        assert not result.entry_allowed
        assert result.block_reason == "sequencer_down"
        assert result.is_l2
        assert sequencer_down.round_reads == 1

    def test_within_grace_period(self, clock) -> None:
        config = OracleConfig(l2_grace_period_sec=3600)

        result = SequencerLivenessGuard(config, _sequencer(10), clock).evaluate()

        assert not result.entry_allowed
        assert result.block_reason == "grace_period_not_over"
        assert result.elapsed_sec == 10
        assert result.grace_period_sec == 3600

    def test_elapsed_equal_to_grace_period_blocks(self, clock) -> None:
        config = OracleConfig(l2_grace_period_sec=600)

        result = SequencerLivenessGuard(config, _sequencer(600), clock).evaluate()

        assert result.block_reason == "grace_period_not_over"

    def test_after_grace_period_passes(self, clock) -> None:
        config = OracleConfig(l2_grace_period_sec=600)

        result = SequencerLivenessGuard(config, _sequencer(601), clock).evaluate()

        assert result.entry_allowed
        assert result.is_l2
        assert result.elapsed_sec == 601

    def test_state_read_on_every_call(self, config, clock, sequencer_up) -> None:
        guard = SequencerLivenessGuard(config, sequencer_up, clock)

        guard.evaluate()
        guard.evaluate()

        assert sequencer_up.round_reads == 2


class TestCheck:
    """Тесты для check()"""

    def test_passes(self, config, clock, sequencer_up) -> None:
        SequencerLivenessGuard(config, sequencer_up, clock).check()

    def test_sequencer_down(self, config, clock, sequencer_down) -> None:
        with pytest.raises(SequencerDown):
            SequencerLivenessGuard(config, sequencer_down, clock).check()

    def test_grace_period_not_over(self, clock) -> None:
        config = OracleConfig(l2_grace_period_sec=3600)

        with pytest.raises(GracePeriodNotOver) as exc_info:
            SequencerLivenessGuard(config, _sequencer(10), clock).check()

        assert exc_info.value.elapsed == 10
        assert exc_info.value.grace_period == 3600

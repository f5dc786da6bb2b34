"""Sequencer Liveness Guard — допуск цен на L2 только при работающем sequencer

Порядок проверок:
1. Feed sequencer не задан → PASS без внешних вызовов (не L2 деплой)
2. answer != 0 → блокировка (sequencer down)
3. now - started_at <= grace_period → блокировка (grace period не истёк)
4. PASS

Интеграция:
- Выполняется до любого чтения цен в рамках вызова
- Без состояния: LivenessState читается заново при каждом вызове
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pwn_oracle.core.clock import Clock, system_clock
from pwn_oracle.core.domain.config import OracleConfig
from pwn_oracle.core.domain.quotes import LivenessState
from pwn_oracle.core.errors import GracePeriodNotOver, SequencerDown
from pwn_oracle.feeds.interfaces import PriceFeed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequencerLivenessResult:
    """Результат проверки sequencer."""

    entry_allowed: bool
    block_reason: str

    # Входные параметры для диагностики
    is_l2: bool
    liveness: Optional[LivenessState]
    elapsed_sec: Optional[int]
    grace_period_sec: int

    # Детали
    details: str


class SequencerLivenessGuard:
    """L2 sequencer uptime guard.

    evaluate() возвращает решение, check() превращает блокировку в исключение.
    """

    def __init__(
        self,
        config: OracleConfig,
        sequencer_uptime_feed: Optional[PriceFeed] = None,
        clock: Clock = system_clock,
    ):
        self.config = config
        self.sequencer_uptime_feed = sequencer_uptime_feed
        self.clock = clock

    def evaluate(self) -> SequencerLivenessResult:
        """Оценка статуса sequencer.

        Returns:
            SequencerLivenessResult с решением о допуске цен
        """
        grace_period = self.config.l2_grace_period_sec

        # 1. Не L2
        if self.sequencer_uptime_feed is None:
            return SequencerLivenessResult(
                entry_allowed=True,
                block_reason="",
                is_l2=False,
                liveness=None,
                elapsed_sec=None,
                grace_period_sec=grace_period,
                details="PASS: no sequencer uptime feed configured",
            )

        liveness = LivenessState.from_round(self.sequencer_uptime_feed.latest_round_data())

        # 2. Sequencer down
        if not liveness.is_up:
            return SequencerLivenessResult(
                entry_allowed=False,
                block_reason="sequencer_down",
                is_l2=True,
                liveness=liveness,
                elapsed_sec=None,
                grace_period_sec=grace_period,
                details=f"Sequencer down since {liveness.started_at}",
            )

        # 3. Grace period
        elapsed = self.clock() - liveness.started_at
        if elapsed <= grace_period:
            return SequencerLivenessResult(
                entry_allowed=False,
                block_reason="grace_period_not_over",
                is_l2=True,
                liveness=liveness,
                elapsed_sec=elapsed,
                grace_period_sec=grace_period,
                details=f"Sequencer up for {elapsed}s, grace period {grace_period}s",
            )

        # 4. PASS
        return SequencerLivenessResult(
            entry_allowed=True,
            block_reason="",
            is_l2=True,
            liveness=liveness,
            elapsed_sec=elapsed,
            grace_period_sec=grace_period,
            details=f"PASS: sequencer up for {elapsed}s",
        )

    def check(self) -> None:
        """Проверка с исключением при блокировке.

        Raises:
            SequencerDown: sequencer сообщает down
            GracePeriodNotOver: grace period ещё не истёк
        """
        result = self.evaluate()
        if result.entry_allowed:
            return

        logger.debug("Sequencer liveness blocked: %s", result.details)

        if result.block_reason == "sequencer_down":
            raise SequencerDown()

        raise GracePeriodNotOver(result.elapsed_sec, result.grace_period_sec)

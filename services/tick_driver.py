"""
Fixed-cadence tick scheduler for a GameSession.

The engine holds no timer; this driver plays the role of the external
clock. It uses a private schedule.Scheduler so several drivers can coexist
without touching the module-level default scheduler. Each cycle waits one
interval through the injected sleep and then runs the scheduler's jobs, so
a fake sleep drives ticks without waiting on wall time.
"""

import logging
import time
from typing import Callable, Optional

import schedule

from domain.constants import TICK_INTERVAL_MS, Direction
from domain.errors import ConfigurationError
from domain.game_state import GameSnapshot
from .game_session import GameSession

logger = logging.getLogger(__name__)

MoveSource = Callable[[GameSnapshot], Optional[Direction]]
TickListener = Callable[[GameSnapshot], None]


class TickDriver:
    """
    Calls session.tick() every interval_ms until the game ends.

    Ticks are skipped while the session is paused. before_tick may return a
    direction, which is submitted as an input request ahead of the tick;
    after_tick receives the snapshot produced by each tick.
    """

    def __init__(
        self,
        session: GameSession,
        interval_ms: int = TICK_INTERVAL_MS,
        before_tick: Optional[MoveSource] = None,
        after_tick: Optional[TickListener] = None,
        scheduler: Optional[schedule.Scheduler] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval_ms <= 0:
            raise ConfigurationError(f"interval_ms must be positive, got {interval_ms}")
        self.session = session
        self.interval_ms = interval_ms
        self.before_tick = before_tick
        self.after_tick = after_tick
        self.scheduler = scheduler or schedule.Scheduler()
        self.sleep = sleep
        self.ticks = 0
        self.max_ticks: Optional[int] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def _finished(self) -> bool:
        if self.session.state.is_game_over:
            return True
        return self.max_ticks is not None and self.ticks >= self.max_ticks

    def tick_once(self) -> Optional[GameSnapshot]:
        """Run one tick now. Returns None when skipped because the session is paused or over."""
        state = self.session.state
        if state.is_paused or state.is_game_over:
            return None

        if self.before_tick is not None:
            direction = self.before_tick(state.snapshot())
            if direction is not None:
                self.session.request_direction(direction)

        snapshot = self.session.tick()
        self.ticks += 1

        if self.after_tick is not None:
            self.after_tick(snapshot)
        return snapshot

    def _job(self):
        self.tick_once()
        if self._finished():
            self._running = False
            return schedule.CancelJob
        return None

    def run(self, max_ticks: Optional[int] = None) -> GameSnapshot:
        """
        Block until the game ends, max_ticks ticks have run, or stop() is called.

        Returns:
            The final snapshot.
        """
        self.max_ticks = max_ticks
        if self._finished():
            return self.session.snapshot()

        interval = self.interval_ms / 1000.0
        self._running = True
        job = self.scheduler.every(interval).seconds.do(self._job)
        logger.info("Tick driver started (%d ms interval)", self.interval_ms)

        try:
            while self._running:
                self.sleep(interval)
                self.scheduler.run_all()
        finally:
            self._running = False
            self.scheduler.cancel_job(job)

        logger.info("Tick driver stopped after %d ticks", self.ticks)
        return self.session.snapshot()

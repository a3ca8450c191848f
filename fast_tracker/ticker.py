"""Caller-driven tick loop for a live fasting timer.

The engine itself holds no timer state. A FastTicker re-evaluates
compute_timer_state once per interval while the fast is open and stops
on its own once the fast is closed or absent.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from fast_tracker.config import TICK_INTERVAL_SECONDS
from fast_tracker.models import FastRecord, TimerState
from fast_tracker.window_engine import compute_timer_state, should_tick

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FastTicker:
    """Deliver a fresh TimerState to ``on_tick`` every ``interval`` seconds.

    ``clock`` and ``sleep`` default to the wall clock and an interruptible
    wait; tests inject fakes to drive the loop without real time.
    """

    def __init__(
        self,
        fast: Optional[FastRecord],
        on_tick: Callable[[TimerState], None],
        interval: float = TICK_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = utc_now,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self._fast = fast
        self._on_tick = on_tick
        self._interval = interval
        self._clock = clock
        self._sleep = sleep
        self._stop_event = threading.Event()

    @property
    def fast(self) -> Optional[FastRecord]:
        return self._fast

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def update(self, fast: Optional[FastRecord]) -> None:
        """Swap in a newer record, e.g. once the backend has closed it."""
        self._fast = fast

    def stop(self) -> None:
        self._stop_event.set()

    def tick(self) -> TimerState:
        state = compute_timer_state(self._fast, self._clock())
        self._on_tick(state)
        return state

    def _wait(self) -> None:
        if self._sleep is not None:
            self._sleep(self._interval)
        else:
            self._stop_event.wait(self._interval)

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Tick until the fast closes, stop() is called, or max_ticks is hit.

        Delivers at least one tick unless max_ticks is 0, so a closed or
        absent fast still gets its final state rendered. Returns the tick
        count.
        """
        ticks = 0
        logger.debug("Ticker started (interval=%ss)", self._interval)
        while max_ticks is None or ticks < max_ticks:
            self.tick()
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
            if self.stopped or not should_tick(self._fast):
                break
            self._wait()
            if self.stopped:
                break
        logger.debug("Ticker stopped after %d tick(s)", ticks)
        return ticks

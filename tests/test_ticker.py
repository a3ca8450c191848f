"""Tests for the live timer tick loop."""

import threading
import unittest
from datetime import datetime, timedelta, timezone

from fast_tracker.models import FastRecord
from fast_tracker.ticker import FastTicker

T0 = datetime(2026, 3, 1, 20, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock advanced only by the fake sleep."""

    def __init__(self, start):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += timedelta(seconds=seconds)


class TestFastTicker(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock(T0 + timedelta(hours=1))
        self.states = []

    def _ticker(self, fast, interval=1.0):
        return FastTicker(fast, self.states.append, interval=interval,
                          clock=self.clock, sleep=self.clock.sleep)

    def test_open_fast_ticks_until_limit(self):
        fast = FastRecord(start_at=T0, target_duration_hours=16)
        ticks = self._ticker(fast).run(max_ticks=5)
        self.assertEqual(ticks, 5)
        self.assertEqual(len(self.states), 5)
        self.assertEqual(self.clock.sleeps, [1.0] * 4)
        elapsed = [s.elapsed_ms for s in self.states]
        self.assertEqual(elapsed, sorted(elapsed))
        self.assertEqual(elapsed[-1] - elapsed[0], 4000)

    def test_zero_tick_limit(self):
        fast = FastRecord(start_at=T0, target_duration_hours=16)
        self.assertEqual(self._ticker(fast).run(max_ticks=0), 0)
        self.assertEqual(self.states, [])
        self.assertEqual(self.clock.sleeps, [])

    def test_closed_fast_single_tick(self):
        fast = FastRecord(start_at=T0, end_at=T0 + timedelta(minutes=30))
        ticks = self._ticker(fast).run()
        self.assertEqual(ticks, 1)
        self.assertEqual(self.clock.sleeps, [])
        self.assertEqual(self.states[0].elapsed_hours, 0.5)

    def test_no_fast_single_tick(self):
        ticks = self._ticker(None).run()
        self.assertEqual(ticks, 1)
        self.assertEqual(self.states[0].phase_label, "no active fast")

    def test_stops_when_fast_closes(self):
        fast = FastRecord(start_at=T0)
        ticker = self._ticker(fast)

        def on_tick(state):
            self.states.append(state)
            if len(self.states) == 3:
                ticker.update(FastRecord(start_at=T0, end_at=state.now))

        ticker._on_tick = on_tick
        self.assertEqual(ticker.run(), 3)
        self.assertIsNotNone(ticker.fast.end_at)

    def test_stop_from_callback(self):
        fast = FastRecord(start_at=T0)
        ticker = self._ticker(fast)

        def on_tick(state):
            self.states.append(state)
            if len(self.states) == 2:
                ticker.stop()

        ticker._on_tick = on_tick
        self.assertEqual(ticker.run(), 2)
        self.assertTrue(ticker.stopped)

    def test_stop_from_another_thread_wakes_wait(self):
        fast = FastRecord(start_at=T0)
        ticker = FastTicker(fast, self.states.append, interval=60, clock=self.clock)
        timer = threading.Timer(0.05, ticker.stop)
        timer.start()
        try:
            self.assertEqual(ticker.run(), 1)
        finally:
            timer.cancel()

    def test_tick_returns_state(self):
        fast = FastRecord(start_at=T0, target_duration_hours=2)
        state = self._ticker(fast).tick()
        self.assertEqual(state.progress, 0.5)
        self.assertIs(self.states[0], state)


if __name__ == "__main__":
    unittest.main()

"""Fasting window and progress engine.

Derives the timer state of a fast at a given instant:
- elapsed time since the start (frozen at the end once the fast is closed)
- remaining time and progress toward the target duration
- the current phase: fasting window, eating window, or outside both

Everything here is a pure function of the fast record and ``now``. Callers
that want a live timer re-invoke it on their own tick (see ticker.py).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fast_tracker.config import (
    EATING_WINDOW,
    FASTING_WINDOW,
    MS_PER_HOUR,
    NO_ACTIVE_FAST_LABEL,
    OUTSIDE_WINDOWS,
    PHASE_LABELS,
)
from fast_tracker.models import FastRecord, TimerState

_ONE_MS = timedelta(milliseconds=1)


def as_utc(moment: Optional[datetime]) -> Optional[datetime]:
    # Naive timestamps are read as UTC so they compare with aware ones.
    if moment is None or moment.tzinfo is not None:
        return moment
    return moment.replace(tzinfo=timezone.utc)


def _ms_between(start: datetime, end: datetime) -> float:
    return (as_utc(end) - as_utc(start)) / _ONE_MS


def should_tick(fast: Optional[FastRecord]) -> bool:
    """Whether a live timer needs refreshing: only while a fast is open."""
    return fast is not None and fast.end_at is None


def phase_label(phase: str) -> str:
    return PHASE_LABELS.get(phase, PHASE_LABELS[OUTSIDE_WINDOWS])


def derive_phase(fast: Optional[FastRecord], now: datetime) -> str:
    """Classify ``now`` against the planned windows of a fast.

    Rule order matters: the fasting window wins over the eating window.
    The fasting window ends strictly at fast_target_end_at; the eating
    window is half-open [start, end).
    """
    if fast is None:
        return OUTSIDE_WINDOWS

    now = as_utc(now)
    fast_target_end = as_utc(fast.fast_target_end_at)
    eating_start = as_utc(fast.eating_window_start_at)
    eating_end = as_utc(fast.eating_window_end_at)

    if fast_target_end is not None and now < fast_target_end:
        return FASTING_WINDOW
    if (
        eating_start is not None
        and eating_end is not None
        and eating_start <= now < eating_end
    ):
        return EATING_WINDOW
    return OUTSIDE_WINDOWS


def _empty_state(now: datetime) -> TimerState:
    return TimerState(
        now=now,
        elapsed_ms=0,
        elapsed_hours=0,
        remaining_ms=None,
        remaining_hours=None,
        progress=None,
        is_over_target=False,
        phase=OUTSIDE_WINDOWS,
        is_in_fasting_window=False,
        is_in_eating_window=False,
        phase_label=NO_ACTIVE_FAST_LABEL,
    )


def compute_timer_state(fast: Optional[FastRecord], now: datetime) -> TimerState:
    """Compute the timer state of ``fast`` at ``now``.

    Never raises: absent fields disable their branch, and inconsistent
    data (end before start, non-positive target) is clamped instead.
    """
    if fast is None:
        return _empty_state(now)

    end = fast.end_at if fast.end_at is not None else now
    elapsed_ms = max(0.0, _ms_between(fast.start_at, end))
    elapsed_hours = elapsed_ms / MS_PER_HOUR

    remaining_ms = None
    remaining_hours = None
    progress = None
    is_over_target = False

    target_hours = fast.target_duration_hours
    if target_hours is not None and target_hours > 0:
        target_ms = target_hours * MS_PER_HOUR
        remaining_ms = max(0.0, target_ms - elapsed_ms)
        remaining_hours = remaining_ms / MS_PER_HOUR
        progress = min(1.0, elapsed_ms / target_ms)
        is_over_target = elapsed_ms >= target_ms

    phase = derive_phase(fast, now)

    # Reported whenever the eating window is still ahead or running,
    # including while the fasting window is in progress.
    eating_remaining_ms = None
    eating_remaining_hours = None
    if fast.eating_window_end_at is not None:
        diff = _ms_between(now, fast.eating_window_end_at)
        if diff > 0:
            eating_remaining_ms = diff
            eating_remaining_hours = diff / MS_PER_HOUR

    return TimerState(
        now=now,
        elapsed_ms=elapsed_ms,
        elapsed_hours=elapsed_hours,
        remaining_ms=remaining_ms,
        remaining_hours=remaining_hours,
        progress=progress,
        is_over_target=is_over_target,
        phase=phase,
        is_in_fasting_window=phase == FASTING_WINDOW,
        is_in_eating_window=phase == EATING_WINDOW,
        phase_label=phase_label(phase),
        eating_window_remaining_ms=eating_remaining_ms,
        eating_window_remaining_hours=eating_remaining_hours,
    )

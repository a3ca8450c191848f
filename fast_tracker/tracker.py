"""Fast history and food journal analytics.

Aggregates completed fasts into summary statistics and splits logged
food into in-window and out-of-window calories, day by day.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from fast_tracker.config import EATING_WINDOW
from fast_tracker.models import FastRecord, FastStats, FoodDaySummary, TimerState
from fast_tracker.timefmt import format_duration_h
from fast_tracker.window_engine import as_utc, derive_phase


def _utc_day(moment: datetime) -> date:
    return as_utc(moment).astimezone(timezone.utc).date()


def _fast_hours(fast: FastRecord) -> float:
    return max(0.0, (as_utc(fast.end_at) - as_utc(fast.start_at)).total_seconds()) / 3600


def _current_streak(end_days: set, today: date) -> int:
    """Consecutive days with a completed fast, counting back from today.

    A streak still counts if the latest fast ended yesterday.
    """
    day = today if today in end_days else today - timedelta(days=1)
    streak = 0
    while day in end_days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def compute_fast_stats(fasts: list, today: date) -> FastStats:
    """Summarize completed fasts. Open fasts are ignored."""
    closed = [f for f in fasts if f.end_at is not None]
    if not closed:
        return FastStats(0, 0.0, 0.0, 0.0, 0)

    hours = [_fast_hours(f) for f in closed]
    total = sum(hours)
    end_days = {_utc_day(f.end_at) for f in closed}

    return FastStats(
        total_fasts=len(closed),
        total_hours=round(total, 2),
        average_hours=round(total / len(closed), 2),
        longest_fast_hours=round(max(hours), 2),
        current_streak_days=_current_streak(end_days, today),
    )


def classify_food_entry(fast: Optional[FastRecord], logged_at) -> bool:
    """Whether food logged at ``logged_at`` falls in the fast's eating window."""
    return derive_phase(fast, logged_at) == EATING_WINDOW


def summarize_food_days(entries: list, start: date, end: date) -> list:
    """One FoodDaySummary per calendar day in [start, end]."""
    by_day = {}
    for entry in entries:
        by_day.setdefault(_utc_day(entry.logged_at), []).append(entry)

    summaries = []
    day = start
    while day <= end:
        day_entries = by_day.get(day, [])
        in_window = sum(e.calories or 0 for e in day_entries if e.in_eating_window)
        out_window = sum(e.calories or 0 for e in day_entries if not e.in_eating_window)
        summaries.append(FoodDaySummary(
            day=day,
            total_calories=in_window + out_window,
            in_window_calories=in_window,
            out_window_calories=out_window,
            entries_count=len(day_entries),
        ))
        day += timedelta(days=1)
    return summaries


def format_timer_state(state: TimerState) -> str:
    """Format a timer state for display."""
    lines = [
        f"Phase:     {state.phase_label}",
        f"Elapsed:   {format_duration_h(state.elapsed_hours)}",
    ]
    if state.progress is not None:
        lines.append(f"Remaining: {format_duration_h(state.remaining_hours)}")
        status = " (target reached)" if state.is_over_target else ""
        lines.append(f"Progress:  {state.progress * 100:.1f}%{status}")
    if state.eating_window_remaining_hours is not None:
        lines.append(f"Eating window closes in {format_duration_h(state.eating_window_remaining_hours)}")
    return "\n".join(lines)


def format_stats(stats: FastStats) -> str:
    """Format fast history statistics for display."""
    lines = [
        "Fasting Stats",
        "=" * 30,
        f"Completed fasts: {stats.total_fasts}",
    ]
    if stats.total_fasts > 0:
        lines.append(f"Total:           {stats.total_hours:.1f}h")
        lines.append(f"Average:         {stats.average_hours:.1f}h")
        lines.append(f"Longest:         {stats.longest_fast_hours:.1f}h")
        lines.append(f"Current streak:  {stats.current_streak_days} day(s)")
    else:
        lines.append("\nNo completed fasts yet.")
    return "\n".join(lines)

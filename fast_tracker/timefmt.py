"""Duration and relative-time formatting for display."""

from datetime import datetime

from fast_tracker.energy_estimator import round_half_up
from fast_tracker.window_engine import as_utc


def format_duration_h(hours: float) -> str:
    """Format a duration in hours as HH:MM (hours may exceed 24)."""
    total_minutes = round_half_up(hours * 60)
    h, m = divmod(total_minutes, 60)
    return f"{h:02d}:{m:02d}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def format_relative(then: datetime, now: datetime) -> str:
    """Describe how long ago ``then`` was, seen from ``now``."""
    diff_seconds = (as_utc(now) - as_utc(then)).total_seconds()

    seconds = round_half_up(diff_seconds)
    minutes = round_half_up(seconds / 60)
    hours = round_half_up(minutes / 60)
    days = round_half_up(hours / 24)

    if seconds < 60:
        return "a few seconds ago"
    if minutes < 60:
        return _plural(minutes, "minute")
    if hours < 24:
        return _plural(hours, "hour")
    return _plural(days, "day")

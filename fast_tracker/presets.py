"""Fasting protocols and window planning."""

from datetime import datetime, timedelta
from typing import Optional

from fast_tracker.models import FastingPreset, FastRecord


FASTING_PRESETS = [
    FastingPreset("12_12", "12:12 - Standard", 12, 12),
    FastingPreset("14_10", "14:10 - Advanced", 14, 10),
    FastingPreset("16_8", "16:8 - Aggressive", 16, 8),
    FastingPreset("18_6", "18:6 - More aggressive", 18, 6),
    FastingPreset("20_4", "20:4 - Warrior", 20, 4),
    FastingPreset("OMAD", "OMAD (23:1)", 23, 1),
]

_PRESETS_BY_ID = {preset.id: preset for preset in FASTING_PRESETS}


def get_preset(preset_id: str) -> FastingPreset:
    """Look up a preset by id. Raises KeyError listing the valid ids."""
    try:
        return _PRESETS_BY_ID[preset_id]
    except KeyError:
        choices = ", ".join(_PRESETS_BY_ID)
        raise KeyError(f"Unknown fasting preset '{preset_id}'. Choose from: {choices}") from None


def plan_fast(
    start_at: datetime,
    preset: FastingPreset,
    fast_id: Optional[str] = None,
) -> FastRecord:
    """Plan an open fast starting at ``start_at`` following ``preset``.

    The fasting window runs for fasting_hours; the eating window opens
    where it ends and lasts eating_hours.
    """
    fast_target_end_at = start_at + timedelta(hours=preset.fasting_hours)
    return FastRecord(
        start_at=start_at,
        target_duration_hours=preset.fasting_hours,
        fast_target_end_at=fast_target_end_at,
        eating_window_start_at=fast_target_end_at,
        eating_window_end_at=fast_target_end_at + timedelta(hours=preset.eating_hours),
        id=fast_id,
        type=preset.id,
    )


def format_presets() -> str:
    lines = [f"{'ID':<6}  {'Fast':>4}  {'Eat':>3}  Label", "-" * 40]
    for p in FASTING_PRESETS:
        lines.append(f"{p.id:<6}  {p.fasting_hours:>3g}h  {p.eating_hours:>2g}h  {p.label}")
    return "\n".join(lines)

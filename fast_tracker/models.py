"""Data models for the fasting tracker."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as sent by the API.

    ``None`` and empty strings mean "absent". A trailing ``Z`` is accepted.
    Raises ValueError for anything else that does not parse.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


@dataclass
class FastRecord:
    """A fast as returned by the backend. Read-only here."""
    start_at: datetime
    end_at: Optional[datetime] = None
    target_duration_hours: Optional[float] = None
    fast_target_end_at: Optional[datetime] = None
    eating_window_start_at: Optional[datetime] = None
    eating_window_end_at: Optional[datetime] = None
    id: Optional[str] = None
    type: str = ""  # preset id, e.g. "16_8"
    notes: str = ""

    @property
    def is_open(self) -> bool:
        return self.end_at is None

    @classmethod
    def from_dict(cls, payload: dict) -> "FastRecord":
        """Build a record from the API's camelCase JSON payload."""
        start_at = parse_timestamp(payload.get("startAt"))
        if start_at is None:
            raise ValueError("Fast payload is missing 'startAt'")

        target = payload.get("targetDurationHours")
        return cls(
            start_at=start_at,
            end_at=parse_timestamp(payload.get("endAt")),
            target_duration_hours=float(target) if target is not None else None,
            fast_target_end_at=parse_timestamp(payload.get("fastTargetEndAt")),
            eating_window_start_at=parse_timestamp(payload.get("eatingWindowStartAt")),
            eating_window_end_at=parse_timestamp(payload.get("eatingWindowEndAt")),
            id=payload.get("id"),
            type=payload.get("type") or "",
            notes=payload.get("notes") or "",
        )


@dataclass
class TimerState:
    """Timer state of a fast at one instant. Recomputed on every tick."""
    now: datetime
    elapsed_ms: float
    elapsed_hours: float
    remaining_ms: Optional[float]
    remaining_hours: Optional[float]
    progress: Optional[float]  # 0..1, None without a target
    is_over_target: bool
    phase: str  # FASTING_WINDOW, EATING_WINDOW or OUTSIDE_WINDOWS
    is_in_fasting_window: bool
    is_in_eating_window: bool
    phase_label: str
    eating_window_remaining_ms: Optional[float] = None
    eating_window_remaining_hours: Optional[float] = None


@dataclass
class BodyProfile:
    """Physical attributes and goal used for a calorie estimate."""
    sex: str  # "male" or "female"
    age: int
    height_cm: float
    weight_kg: float
    activity: str  # SEDENTARY, LIGHT, MODERATE, ACTIVE, ATHLETE
    goal: str  # WEIGHT_LOSS, MAINTENANCE, MUSCLE_GAIN


@dataclass
class EnergyEstimate:
    """Daily energy needs in kcal."""
    maintenance: int
    target: int
    bmr: float = 0.0


@dataclass
class MacroTargets:
    """Daily macro targets in grams for a calorie target."""
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass
class FastingPreset:
    """A fasting protocol such as 16:8."""
    id: str
    label: str
    fasting_hours: float
    eating_hours: float


@dataclass
class FastStats:
    """Aggregated history of completed fasts."""
    total_fasts: int
    total_hours: float
    average_hours: float
    longest_fast_hours: float
    current_streak_days: int


@dataclass
class FoodEntry:
    """A logged food item."""
    label: str
    logged_at: datetime
    calories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fat_g: Optional[float] = None
    in_eating_window: bool = False


@dataclass
class FoodDaySummary:
    """Calories eaten on one day, split by eating window."""
    day: date
    total_calories: float
    in_window_calories: float
    out_window_calories: float
    entries_count: int

"""Application configuration and constants."""

import os

# Timer
MS_PER_HOUR = 60 * 60 * 1000
TICK_INTERVAL_SECONDS = float(os.environ.get("FAST_TRACKER_TICK_SECONDS", "1"))

# Phases of "now" relative to the planned windows of a fast
FASTING_WINDOW = "FASTING_WINDOW"
EATING_WINDOW = "EATING_WINDOW"
OUTSIDE_WINDOWS = "OUTSIDE_WINDOWS"

PHASE_LABELS = {
    FASTING_WINDOW: "fasting window",
    EATING_WINDOW: "eating window",
    OUTSIDE_WINDOWS: "outside planned windows",
}
NO_ACTIVE_FAST_LABEL = "no active fast"

# Activity level multipliers for maintenance calories
ACTIVITY_FACTORS = {
    "SEDENTARY": 1.2,
    "LIGHT": 1.375,
    "MODERATE": 1.55,
    "ACTIVE": 1.725,
    "ATHLETE": 1.9,
}
DEFAULT_ACTIVITY_FACTOR = 1.3

# Goal-based calorie adjustments (multiplier on maintenance)
GOAL_CALORIE_ADJUSTMENTS = {
    "WEIGHT_LOSS": 0.80,
    "MAINTENANCE": 1.0,
    "MUSCLE_GAIN": 1.10,
}

# Daily target suggested before a body profile is known
DEFAULT_GOAL_CALORIES = {
    "WEIGHT_LOSS": 1800,
    "MAINTENANCE": 2100,
    "MUSCLE_GAIN": 2400,
}

# Goal-based macro splits (protein%, carbs%, fat%)
GOAL_MACRO_SPLITS = {
    "WEIGHT_LOSS": {"protein": 0.40, "carbs": 0.30, "fat": 0.30},
    "MAINTENANCE": {"protein": 0.30, "carbs": 0.40, "fat": 0.30},
    "MUSCLE_GAIN": {"protein": 0.30, "carbs": 0.45, "fat": 0.25},
}

# Macro calorie multipliers (calories per gram)
CALORIES_PER_GRAM = {
    "protein": 4,
    "carbs": 4,
    "fat": 9,
}

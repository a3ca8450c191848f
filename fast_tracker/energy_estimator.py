"""Daily energy estimation using evidence-based formulas.

Uses:
- Mifflin-St Jeor equation for Basal Metabolic Rate (BMR)
- Activity factors for maintenance calories
- Goal-specific calorie adjustments and macro splits

References:
- Mifflin MD, St Jeor ST, et al. (1990). "A new predictive equation for
  resting energy expenditure in healthy individuals." Am J Clin Nutr.
"""

import math
from typing import Optional

from fast_tracker.config import (
    ACTIVITY_FACTORS,
    CALORIES_PER_GRAM,
    DEFAULT_ACTIVITY_FACTOR,
    DEFAULT_GOAL_CALORIES,
    GOAL_CALORIE_ADJUSTMENTS,
    GOAL_MACRO_SPLITS,
)
from fast_tracker.models import BodyProfile, EnergyEstimate, MacroTargets


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded up.

    Python's round() sends 2.5 to 2; calorie targets and durations
    shown to users round 2.5 to 3.
    """
    return int(math.floor(value + 0.5))


def calculate_bmr(profile: BodyProfile) -> float:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Male:   BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) + 5
    Female: BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) − 161
    """
    bmr = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    if profile.sex == "male":
        bmr += 5
    else:
        bmr -= 161
    return bmr


def activity_factor(activity: str) -> float:
    return ACTIVITY_FACTORS.get(activity, DEFAULT_ACTIVITY_FACTOR)


def goal_adjustment(goal: str) -> float:
    return GOAL_CALORIE_ADJUSTMENTS.get(goal, 1.0)


def estimate_calories(profile: BodyProfile) -> EnergyEstimate:
    """Estimate maintenance and goal-adjusted daily calories.

    maintenance = round(BMR × activity factor)
    target      = round(maintenance × goal adjustment)

    Inputs are taken literally; range checks belong to the caller.
    """
    bmr = calculate_bmr(profile)
    maintenance = round_half_up(bmr * activity_factor(profile.activity))
    target = round_half_up(maintenance * goal_adjustment(profile.goal))
    return EnergyEstimate(maintenance=maintenance, target=target, bmr=bmr)


def default_calories_for_goal(goal: str) -> int:
    """Suggested daily target before any body data is known."""
    return DEFAULT_GOAL_CALORIES.get(goal, DEFAULT_GOAL_CALORIES["MAINTENANCE"])


def calculate_macro_targets(calories: float, goal: str) -> MacroTargets:
    """Split a daily calorie target into macro grams.

    Uses the goal's protein/carbs/fat percentage split and 4/4/9 cal/g.
    """
    splits = GOAL_MACRO_SPLITS.get(goal, GOAL_MACRO_SPLITS["MAINTENANCE"])
    return MacroTargets(
        calories=round_half_up(calories),
        protein_g=round_half_up(calories * splits["protein"] / CALORIES_PER_GRAM["protein"]),
        carbs_g=round_half_up(calories * splits["carbs"] / CALORIES_PER_GRAM["carbs"]),
        fat_g=round_half_up(calories * splits["fat"] / CALORIES_PER_GRAM["fat"]),
    )


def format_estimate(estimate: EnergyEstimate, macros: Optional[MacroTargets] = None) -> str:
    """Format an energy estimate for display."""
    lines = [
        f"BMR:          {estimate.bmr:.0f} kcal",
        f"Maintenance:  {estimate.maintenance} kcal/day",
        f"Target:       {estimate.target} kcal/day",
    ]
    if macros is not None:
        lines.extend([
            f"Protein:      {macros.protein_g}g ({macros.protein_g * 4} kcal)",
            f"Carbs:        {macros.carbs_g}g ({macros.carbs_g * 4} kcal)",
            f"Fat:          {macros.fat_g}g ({macros.fat_g * 9} kcal)",
        ])
    return "\n".join(lines)

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from campuslife.models.profile import (
    DEFAULT_BUDGET_GOAL_CENTS,
    DEFAULT_CALORIE_GOAL,
    DEFAULT_PROTEIN_GOAL,
)


@dataclass
class NutritionBudget:
    """What is left of today's goals. Negative values mean over budget."""

    calories_remaining: float = 0.0
    protein_remaining_g: float = 0.0
    budget_remaining_cents: int = 0

    def to_dict(self) -> Dict[str, float]:
        return {
            "calories_remaining": float(self.calories_remaining),
            "protein_remaining_g": float(self.protein_remaining_g),
            "budget_remaining_cents": int(self.budget_remaining_cents),
        }


def compute_nutrition_budget(profile, logs: Optional[Iterable] = None) -> NutritionBudget:
    """Subtract logged consumption from the profile goals.

    ``profile`` may be None or have unset goals; the usual defaults
    (2000 kcal, 80 g protein, 10.00 EUR) are used then.
    """

    def goal(name: str, default: int) -> float:
        value = getattr(profile, name, None) if profile is not None else None
        return float(value) if value is not None else float(default)

    calories = protein = 0.0
    spent = 0
    for entry in logs or ():
        calories += float(getattr(entry, "calories", 0.0) or 0.0)
        protein += float(getattr(entry, "protein_g", 0.0) or 0.0)
        spent += int(getattr(entry, "price_cents", 0) or 0)

    return NutritionBudget(
        calories_remaining=goal("daily_calorie_goal", DEFAULT_CALORIE_GOAL) - calories,
        protein_remaining_g=goal("protein_goal", DEFAULT_PROTEIN_GOAL) - protein,
        budget_remaining_cents=int(goal("budget_goal_cents", DEFAULT_BUDGET_GOAL_CENTS)) - spent,
    )

from __future__ import annotations

import math
from typing import Iterable, List

from campuslife.mensa.schemas import Dish
from campuslife.utils.nutrition import NutritionBudget
from campuslife.utils.validators import clamp, safe_float

from .config import (
    BASELINE_CALORIES,
    BASELINE_PRICE_CENTS,
    BASELINE_PROTEIN_G,
    GRAMS_PER_KCAL,
    PORTION_MAX,
    PORTION_MIN,
)
from .schemas import PortionRecommendation

FALLBACK_SUMMARY = "Portionsempfehlungen auf Basis deines verbleibenden Kalorienbudgets (ohne KI)."


def _positive_or(value, default: float) -> float:
    number = safe_float(value, default)
    return number if 0 < number < math.inf else default


def _portion_multiplier(remaining_calories: float, baseline: float) -> float:
    raw = remaining_calories / baseline
    if math.isnan(raw):
        return 1.0
    # clamp() maps +/-inf onto the bounds as well
    return clamp(raw, PORTION_MIN, PORTION_MAX)


def compute_fallback_recommendation(dish: Dish, remaining_calories) -> PortionRecommendation:
    """Rule-based portion for one dish when the LLM path is unavailable.

    The multiplier is ``remaining / baseline`` clamped to [0.5, 1.5]; missing
    dish data falls back to 500 kcal, 20 g protein and 5.00 EUR.
    """
    baseline = _positive_or(getattr(dish, "calories", None), BASELINE_CALORIES)
    protein = _positive_or(getattr(dish, "protein_g", None), BASELINE_PROTEIN_G)
    price = _positive_or(getattr(dish, "price_cents", None), BASELINE_PRICE_CENTS)
    remaining = safe_float(remaining_calories, float("nan"))

    dish_id = getattr(dish, "id", None)

    multiplier = _portion_multiplier(remaining, baseline)
    if math.isfinite(remaining):
        reasoning = f"Basierend auf deinem verbleibenden Tagesbudget von {round(remaining)} kcal."
    else:
        reasoning = "Dein verbleibendes Kalorienbudget ist unbekannt, daher eine Standardportion."

    return PortionRecommendation(
        dish_id=dish_id if isinstance(dish_id, int) else 0,
        dish_name=getattr(dish, "name", "") or "",
        portion_multiplier=round(multiplier, 2),
        estimated_grams=round(baseline * GRAMS_PER_KCAL * multiplier),
        calories=round(baseline * multiplier),
        protein_g=round(protein * multiplier),
        price_cents=round(price * multiplier),
        reasoning=reasoning,
    )


def compute_fallback_recommendations(
    dishes: Iterable[Dish], budget: NutritionBudget
) -> List[PortionRecommendation]:
    return [compute_fallback_recommendation(dish, budget.calories_remaining) for dish in dishes]

import math

import pytest

from campuslife.mensa.schemas import Dish
from campuslife.routers.advisor.fallbacks import (
    compute_fallback_recommendation,
    compute_fallback_recommendations,
)
from campuslife.utils.nutrition import NutritionBudget


def _dish(**kwargs) -> Dish:
    data = {"id": 1, "name": "Linsencurry", "category": "Hauptgericht"}
    data.update(kwargs)
    return Dish(**data)


def test_half_budget_gives_half_portion():
    rec = compute_fallback_recommendation(_dish(calories=500, protein_g=20, price_cents=400), 250)
    assert rec.portion_multiplier == 0.5
    assert rec.calories == 250
    assert rec.protein_g == 10
    assert rec.price_cents == 200


def test_large_budget_is_capped_at_one_and_a_half():
    rec = compute_fallback_recommendation(_dish(calories=200, protein_g=10, price_cents=300), 2000)
    assert rec.portion_multiplier == 1.5
    assert rec.calories == 300
    assert rec.protein_g == 15
    assert rec.price_cents == 450


@pytest.mark.parametrize("remaining", [-800, -1, 0])
def test_negative_or_empty_budget_keeps_floor(remaining):
    rec = compute_fallback_recommendation(_dish(calories=600), remaining)
    assert rec.portion_multiplier == 0.5
    assert rec.calories == 300
    assert rec.calories > 0


def test_in_range_multiplier_scales_linearly():
    rec = compute_fallback_recommendation(_dish(calories=400, protein_g=30, price_cents=350), 400)
    assert rec.portion_multiplier == 1.0
    assert rec.calories == 400
    assert rec.protein_g == 30
    assert rec.price_cents == 350
    assert rec.estimated_grams == 240


@pytest.mark.parametrize("calories", [None, 0, -100])
def test_missing_calories_use_baseline(calories):
    rec = compute_fallback_recommendation(_dish(calories=calories), 500)
    assert rec.portion_multiplier == 1.0
    assert rec.calories == 500
    # default protein 20 g, default price 5.00 EUR
    assert rec.protein_g == 20
    assert rec.price_cents == 500


@pytest.mark.parametrize(
    "remaining, expected",
    [(math.inf, 1.5), (-math.inf, 0.5), (math.nan, 1.0), ("kaputt", 1.0), (None, 1.0)],
)
def test_malformed_budget_never_raises(remaining, expected):
    rec = compute_fallback_recommendation(_dish(calories=500), remaining)
    assert rec.portion_multiplier == expected
    assert rec.reasoning


def test_reasoning_mentions_remaining_budget():
    rec = compute_fallback_recommendation(_dish(calories=500), 730.4)
    assert "730 kcal" in rec.reasoning


def test_every_dish_gets_a_recommendation():
    dishes = [_dish(id=1, calories=500), _dish(id=2, calories=None, price_cents=None), _dish(id=3)]
    budget = NutritionBudget(calories_remaining=-200, protein_remaining_g=10, budget_remaining_cents=-50)
    recs = compute_fallback_recommendations(dishes, budget)
    assert [r.dish_id for r in recs] == [1, 2, 3]
    assert all(0.5 <= r.portion_multiplier <= 1.5 for r in recs)

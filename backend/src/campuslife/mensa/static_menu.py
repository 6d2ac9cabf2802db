from __future__ import annotations

from datetime import date
from typing import List

from .schemas import Dish

STATIC_MENSA_NAME = "Mensa Bildungscampus Heilbronn (Beispielmenü)"

# (name, category, price_cents, kcal, protein_g, labels, allergens)
_STATIC_DISHES = (
    ("Hähnchenbrust mit Reis und Gemüse", "Hauptgericht", 395, 520, 42, [], ["Gluten"]),
    ("Vegetarische Lasagne", "Hauptgericht", 350, 480, 18, ["vegetarian"], ["Gluten", "Milch", "Ei"]),
    ("Vegane Buddha Bowl mit Quinoa", "Hauptgericht", 420, 450, 15, ["vegan", "vegetarian"], ["Sesam"]),
    ("Schweineschnitzel mit Pommes", "Hauptgericht", 450, 780, 35, [], ["Gluten", "Ei"]),
    ("Linsensuppe", "Suppe", 180, 250, 12, ["vegan", "vegetarian"], ["Sellerie"]),
    ("Gemischter Salat", "Beilage", 150, 120, 3, ["vegan", "vegetarian"], []),
    ("Schokoladenpudding", "Dessert", 120, 220, 5, ["vegetarian"], ["Milch"]),
)


def static_menu(day: date) -> List[Dish]:
    """Canned menu used when no live source is reachable. Closed on weekends."""
    if day.weekday() >= 5:
        return []
    return [
        Dish(
            id=index,
            name=name,
            category=category,
            price_cents=price,
            calories=kcal,
            protein_g=protein,
            labels=list(labels),
            allergens=list(allergens),
            mensa_name=STATIC_MENSA_NAME,
        )
        for index, (name, category, price, kcal, protein, labels, allergens) in enumerate(
            _STATIC_DISHES, start=1
        )
    ]

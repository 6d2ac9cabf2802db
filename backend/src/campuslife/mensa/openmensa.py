"""OpenMensa client for the Heilbronn Bildungscampus canteen.

API documentation: https://doc.openmensa.org/api/v2/
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List

import requests

from campuslife.core.config import get_settings

from .schemas import Dish

logger = logging.getLogger(__name__)

MENSA_NAME = "Mensa Bildungscampus Heilbronn"


class MenuSourceError(RuntimeError):
    """The menu source could not deliver a usable menu."""


_CALORIES_MAIN = (
    (("salat", "salad"), 350),
    (("suppe", "soup"), 250),
    (("pasta", "nudel"), 550),
    (("pizza",), 650),
    (("burger",), 700),
    (("schnitzel",), 600),
    (("curry",), 500),
    (("reis", "rice"), 450),
)

_PROTEIN_BY_NAME = (
    (("hähnchen", "chicken", "huhn"), 35),
    (("rind", "beef"), 30),
    (("schwein", "pork"), 28),
    (("fisch", "fish", "lachs"), 32),
    (("tofu",), 20),
    (("linsen", "lentil"), 18),
    (("bohnen", "bean"), 15),
    (("ei", "egg"), 13),
    (("käse", "cheese"), 12),
    (("pasta", "nudel"), 10),
    (("salat", "salad"), 5),
    (("gemüse", "vegetable"), 4),
)


def estimate_calories(name: str, category: str) -> int:
    """Rough kcal guess from category and dish name."""
    name = (name or "").lower()
    category = (category or "").lower()
    if "hauptgericht" in category or "main" in category:
        for tokens, kcal in _CALORIES_MAIN:
            if any(token in name for token in tokens):
                return kcal
        return 500
    if "beilage" in category or "side" in category:
        return 200
    if "dessert" in category or "nachtisch" in category:
        return 250
    return 400


def estimate_protein(name: str) -> int:
    name = (name or "").lower()
    for tokens, grams in _PROTEIN_BY_NAME:
        if any(token in name for token in tokens):
            return grams
    return 8


def labels_from_notes(notes: List[str]) -> List[str]:
    lowered = [note.lower() for note in notes]
    labels: List[str] = []
    if any("vegan" in note for note in lowered):
        labels.append("vegan")
    if any(token in note for note in lowered for token in ("vegetarisch", "vegetarian", "veggie")):
        labels.append("vegetarian")
    return labels


def dish_from_openmensa(raw: Dict[str, Any]) -> Dish:
    name = str(raw.get("name") or "").strip()
    category = str(raw.get("category") or "").strip()
    notes = [str(note) for note in raw.get("notes") or []]
    prices = raw.get("prices") or {}
    price = prices.get("students") or prices.get("others")
    return Dish(
        id=int(raw.get("id") or 0),
        name=name,
        category=category,
        price_cents=round(float(price) * 100) if price else None,
        calories=estimate_calories(name, category),
        protein_g=estimate_protein(name),
        labels=labels_from_notes(notes),
        notes=notes,
        mensa_name=MENSA_NAME,
    )


def fetch_menu(day: date) -> List[Dish]:
    """Meals of ``day``. A closed canteen (404) is an empty list."""
    settings = get_settings()
    url = (
        f"{settings.openmensa_base_url.rstrip('/')}/canteens/"
        f"{settings.openmensa_canteen_id}/days/{day.isoformat()}/meals"
    )
    logger.info("[OpenMensa] Fetching menu for %s from %s", day, url)
    try:
        response = requests.get(
            url, headers={"Accept": "application/json"}, timeout=settings.openmensa_timeout
        )
    except requests.RequestException as exc:
        raise MenuSourceError(f"OpenMensa not reachable: {exc}") from exc

    if response.status_code == 404:
        logger.info("[OpenMensa] No menu available for %s", day)
        return []
    if response.status_code != 200:
        raise MenuSourceError(f"OpenMensa API error: {response.status_code}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise MenuSourceError("OpenMensa returned invalid JSON") from exc
    if not isinstance(payload, list):
        raise MenuSourceError("Unexpected OpenMensa payload")

    dishes = [dish_from_openmensa(raw) for raw in payload if isinstance(raw, dict)]
    logger.info("[OpenMensa] Found %d meals for %s", len(dishes), day)
    return dishes

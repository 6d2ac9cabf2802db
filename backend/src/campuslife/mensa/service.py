from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from campuslife.core.config import get_settings

from . import openmensa
from .schemas import Dish
from .static_menu import static_menu

logger = logging.getLogger(__name__)


def get_menu(day: date) -> Tuple[List[Dish], str]:
    """Return ``(dishes, source)`` where source is ``openmensa`` or ``static``.

    Raises :class:`~campuslife.mensa.openmensa.MenuSourceError` when the live
    source fails and the static fallback is switched off.
    """
    try:
        return openmensa.fetch_menu(day), "openmensa"
    except openmensa.MenuSourceError as exc:
        if not get_settings().menu_static_fallback:
            raise
        logger.warning("[Mensa] Live menu unavailable (%s), serving static menu", exc)
        return static_menu(day), "static"


def parse_restrictions(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [part.strip().lower() for part in raw.split(",") if part.strip()]


def filter_dishes(
    dishes: Iterable[Dish],
    restrictions: Sequence[str] = (),
    max_price_cents: Optional[int] = None,
) -> List[Dish]:
    """Drop dishes that conflict with dietary restrictions or the price cap.

    ``restrictions`` understands ``vegetarian`` and ``vegan``; any other entry
    is treated as an allergen to avoid.
    """
    wanted = {r.strip().lower() for r in restrictions if r and r.strip()}
    result: List[Dish] = []
    for dish in dishes:
        if "vegan" in wanted and not dish.is_vegan:
            continue
        if "vegetarian" in wanted and not dish.is_vegetarian:
            continue
        allergens = {a.lower() for a in dish.allergens}
        if allergens & (wanted - {"vegan", "vegetarian"}):
            continue
        if max_price_cents is not None and dish.price_cents is not None and dish.price_cents > max_price_cents:
            continue
        result.append(dish)
    return result

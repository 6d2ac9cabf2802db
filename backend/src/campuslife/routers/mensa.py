from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from campuslife.mensa import filter_dishes, get_menu
from campuslife.mensa.openmensa import MenuSourceError
from campuslife.mensa.schemas import MenuResponse
from campuslife.mensa.service import parse_restrictions

router = APIRouter(prefix="/mensa", tags=["mensa"])


@router.get("/menu", response_model=MenuResponse)
def menu(
    day: Optional[date] = Query(None, description="Standard: heute"),
    restrictions: Optional[str] = Query(None, description="Komma-getrennt, z.B. vegan,Gluten"),
    max_price_cents: Optional[int] = Query(None, ge=0),
):
    day = day or date.today()
    try:
        dishes, source = get_menu(day)
    except MenuSourceError as exc:
        raise HTTPException(status_code=502, detail=f"Mensa-Speiseplan nicht verfuegbar: {exc}")
    dishes = filter_dishes(dishes, parse_restrictions(restrictions), max_price_cents)
    return MenuResponse(day=day.isoformat(), source=source, dishes=dishes)

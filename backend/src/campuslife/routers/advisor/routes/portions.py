from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from campuslife.core.database import get_session
from campuslife.mensa import filter_dishes, get_menu
from campuslife.mensa.openmensa import MenuSourceError
from campuslife.utils.nutrition import compute_nutrition_budget

from ...meals import meals_for_day
from ...profile import get_profile, split_csv
from ..schemas import DailyProgress, PortionRecommendationResponse
from ..services import generate_portion_recommendations

router = APIRouter()


@router.get("/portions", response_model=PortionRecommendationResponse)
def portions(
    day: Optional[date] = Query(None, description="Standard: heute"),
    respect_budget: bool = Query(True, description="Gerichte ueber dem Restbudget ausblenden"),
    session: Session = Depends(get_session),
):
    day = day or date.today()
    profile = get_profile(session)
    budget = compute_nutrition_budget(profile, meals_for_day(session, day))
    restrictions = split_csv(profile.dietary_restrictions if profile else None)
    cuisines = split_csv(profile.preferred_cuisines if profile else None)

    try:
        dishes, menu_source = get_menu(day)
    except MenuSourceError as exc:
        raise HTTPException(status_code=502, detail=f"Mensa-Speiseplan nicht verfuegbar: {exc}")

    notes: List[str] = []
    max_price = budget.budget_remaining_cents if respect_budget and budget.budget_remaining_cents > 0 else None
    candidates = filter_dishes(dishes, restrictions, max_price)
    if dishes and not candidates:
        notes.append("Kein Gericht passt zu Ernaehrungsweise und Budget, zeige alle Gerichte.")
        candidates = dishes
    if menu_source == "static":
        notes.append("Live-Speiseplan nicht erreichbar, Beispielmenue verwendet.")

    recs, summary, source = generate_portion_recommendations(candidates, budget, restrictions, cuisines)
    if source == "fallback":
        notes.append("fallback: KI nicht verfuegbar, regelbasierte Portionen.")

    return PortionRecommendationResponse(
        day=day,
        source=source,
        menu_source=menu_source,
        recommendations=recs,
        summary=summary,
        daily_progress=DailyProgress(**budget.to_dict()),
        notes=notes,
    )

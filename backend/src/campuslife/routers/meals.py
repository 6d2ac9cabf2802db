from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlmodel import Session, select

from campuslife.core.database import get_session
from campuslife.models.meals import MealLog
from campuslife.utils.nutrition import compute_nutrition_budget

from .profile import get_profile

router = APIRouter(prefix="/meals", tags=["meals"])


class MealLogIn(BaseModel):
    day: date
    dish_name: str = Field(..., min_length=1)
    mensa_name: Optional[str] = None
    portion_multiplier: float = Field(1.0, gt=0)
    calories: float = Field(0.0, ge=0)
    protein_g: float = Field(0.0, ge=0)
    price_cents: int = Field(0, ge=0)


class DayResponse(BaseModel):
    day: date
    items: List[MealLog]
    calories_remaining: float
    protein_remaining_g: float
    budget_remaining_cents: int


def meals_for_day(session: Session, day: date) -> List[MealLog]:
    return list(session.exec(select(MealLog).where(MealLog.day == day).order_by(MealLog.created_at)).all())


@router.post("/log", response_model=MealLog, status_code=201)
def log_meal(payload: MealLogIn, session: Session = Depends(get_session)):
    entry = MealLog(**payload.model_dump())
    session.add(entry)
    session.commit()
    session.refresh(entry)
    return entry


@router.get("/day", response_model=DayResponse)
def day_overview(day: date = Query(...), session: Session = Depends(get_session)):
    items = meals_for_day(session, day)
    budget = compute_nutrition_budget(get_profile(session), items)
    return DayResponse(day=day, items=items, **budget.to_dict())


@router.delete("/log/{log_id}", status_code=204)
def delete_meal(log_id: int, session: Session = Depends(get_session)):
    entry = session.get(MealLog, log_id)
    if not entry:
        raise HTTPException(404, "Eintrag nicht gefunden")
    session.delete(entry)
    session.commit()

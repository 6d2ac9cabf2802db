from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlmodel import Session, select

from campuslife.core.database import get_session
from campuslife.models.profile import WellnessProfile

router = APIRouter(prefix="/profile", tags=["profile"])


class ProfileUpdate(BaseModel):
    daily_calorie_goal: Optional[int] = Field(None, ge=0, le=10000)
    protein_goal: Optional[int] = Field(None, ge=0, le=500)
    budget_goal_cents: Optional[int] = Field(None, ge=0)
    dietary_restrictions: Optional[List[str]] = None
    preferred_cuisines: Optional[List[str]] = None


def get_profile(session: Session) -> Optional[WellnessProfile]:
    return session.exec(select(WellnessProfile)).first()


def split_csv(raw: Optional[str]) -> List[str]:
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


@router.get("", response_model=WellnessProfile)
def read_profile(session: Session = Depends(get_session)):
    # Ohne gespeichertes Profil gelten die Standardziele.
    return get_profile(session) or WellnessProfile()


@router.put("", response_model=WellnessProfile)
def update_profile(payload: ProfileUpdate, session: Session = Depends(get_session)):
    profile = get_profile(session)
    if profile is None:
        profile = WellnessProfile()
        session.add(profile)

    data = payload.model_dump(exclude_unset=True)
    for key in ("dietary_restrictions", "preferred_cuisines"):
        if key in data:
            data[key] = ",".join(data[key] or []) or None
    for key, value in data.items():
        setattr(profile, key, value)
    profile.updated_at = datetime.now(timezone.utc)

    session.commit()
    session.refresh(profile)
    return profile

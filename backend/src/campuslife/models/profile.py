from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel

DEFAULT_CALORIE_GOAL = 2000
DEFAULT_PROTEIN_GOAL = 80
DEFAULT_BUDGET_GOAL_CENTS = 1000


class WellnessProfile(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    daily_calorie_goal: Optional[int] = DEFAULT_CALORIE_GOAL
    protein_goal: Optional[int] = DEFAULT_PROTEIN_GOAL
    budget_goal_cents: Optional[int] = DEFAULT_BUDGET_GOAL_CENTS
    dietary_restrictions: Optional[str] = Field(default=None, description="Comma separated, e.g. vegetarian,vegan")
    preferred_cuisines: Optional[str] = Field(default=None, description="Comma separated")
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

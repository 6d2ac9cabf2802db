from datetime import date, datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class MealLog(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    day: date = Field(index=True)
    dish_name: str
    mensa_name: Optional[str] = None
    portion_multiplier: float = 1.0
    calories: float = 0.0
    protein_g: float = 0.0
    price_cents: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

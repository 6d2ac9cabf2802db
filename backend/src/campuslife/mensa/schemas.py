from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Dish(BaseModel):
    id: int
    name: str
    category: str = ""
    price_cents: Optional[int] = Field(default=None, description="Studierendenpreis in Cent")
    calories: Optional[float] = None
    protein_g: Optional[float] = None
    labels: List[str] = []
    allergens: List[str] = []
    notes: List[str] = []
    mensa_name: Optional[str] = None

    @property
    def is_vegetarian(self) -> bool:
        return any(label in ("vegetarian", "vegan") for label in self.labels)

    @property
    def is_vegan(self) -> bool:
        return "vegan" in self.labels


class MenuResponse(BaseModel):
    day: str
    source: str
    dishes: List[Dish]

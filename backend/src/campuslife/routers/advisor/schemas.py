from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .focus_modes import FocusMode


class DailyProgress(BaseModel):
    calories_remaining: float
    protein_remaining_g: float
    budget_remaining_cents: int


class PortionRecommendation(BaseModel):
    dish_id: int
    dish_name: str = ""
    portion_multiplier: float = Field(..., ge=0.5, le=1.5)
    estimated_grams: float = Field(..., ge=0)
    calories: float = Field(..., ge=0)
    protein_g: float = Field(..., ge=0)
    price_cents: int = Field(..., ge=0)
    reasoning: str


class LLMPortionPayload(BaseModel):
    """Shape the language model must answer with."""

    recommendations: List[PortionRecommendation]
    summary: str = ""


class PortionRecommendationResponse(BaseModel):
    day: date
    source: Literal["llm", "fallback"]
    menu_source: Literal["openmensa", "static"]
    recommendations: List[PortionRecommendation]
    summary: str
    daily_progress: DailyProgress
    notes: List[str] = []


class ChatRequest(BaseModel):
    message: str = Field(..., description="Benutzereingabe (Frage/Aufgabe)")
    context: Optional[str] = Field(
        default=None,
        description="Optional: zusätzlicher Kontext (z.B. Ziele, Präferenzen).",
    )
    day: Optional[date] = Field(
        default=None, description="Wenn gesetzt, wird der Stundenplan dieses Tages mitgeschickt."
    )
    mode: Optional[FocusMode] = Field(default=None, description="Fokus-Modus, der den Ton des Coaches bestimmt.")


class ChatResponse(BaseModel):
    output: str
    model: str


class ConflictRequest(BaseModel):
    mode: FocusMode
    task: str = Field(..., description="Kurze Beschreibung des Vorhabens")
    health_cost: float = Field(..., ge=0, le=10)
    efficiency_gain: float = Field(..., ge=0, le=10)


class ConflictResolution(BaseModel):
    mode: FocusMode
    task: str
    decision: Literal["proceed", "reject", "modify"]
    reasoning: str

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from ..focus_modes import FOCUS_MODE_CONFIGS, resolve_conflict
from ..schemas import ConflictRequest, ConflictResolution

router = APIRouter(prefix="/focus")


@router.get("/modes")
def list_focus_modes() -> List[dict]:
    return [config.to_dict() for config in FOCUS_MODE_CONFIGS.values()]


@router.post("/resolve", response_model=ConflictResolution)
def resolve_focus_conflict(payload: ConflictRequest):
    decision, reasoning = resolve_conflict(payload.mode, payload.health_cost, payload.efficiency_gain)
    return ConflictResolution(mode=payload.mode, task=payload.task, decision=decision, reasoning=reasoning)

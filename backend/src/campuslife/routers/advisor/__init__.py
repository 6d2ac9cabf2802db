from __future__ import annotations

from fastapi import APIRouter

from .routes import chat, focus, portions

router = APIRouter(prefix="/advisor", tags=["advisor"])

router.include_router(portions.router)
router.include_router(chat.router)
router.include_router(focus.router)

__all__ = ["router"]

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from campuslife.core.database import get_session
from campuslife.utils.llm import LLMUnavailableError, ollama_chat

from ...courses import courses_for_day
from ..config import OLLAMA_ENDPOINT, OLLAMA_MODEL, OLLAMA_TIMEOUT, SETTINGS
from ..focus_modes import get_mode_config
from ..llm import SYSTEM_PROMPT_CHAT, build_chat_prompt
from ..schemas import ChatRequest, ChatResponse

router = APIRouter()


def _schedule_context(session: Session, payload: ChatRequest) -> str:
    blocks: List[str] = []
    if payload.context:
        blocks.append(payload.context.strip())
    if payload.day is not None:
        courses = courses_for_day(session, payload.day)
        if courses:
            lines = [
                f"- {c.start_time:%H:%M}-{c.end_time:%H:%M} {c.course_name}"
                + (f" ({c.full_address or c.location})" if c.full_address or c.location else "")
                for c in courses
            ]
            blocks.append(f"Stundenplan {payload.day.isoformat()}:\n" + "\n".join(lines))
    return "\n\n".join(blocks)


@router.post("/chat", response_model=ChatResponse)
def advisor_chat(payload: ChatRequest, session: Session = Depends(get_session)):
    if not SETTINGS.advisor_llm_enabled:
        raise HTTPException(status_code=503, detail="KI-Coach ist deaktiviert.")
    prompt = build_chat_prompt(payload.message, _schedule_context(session, payload))
    system_prompt = SYSTEM_PROMPT_CHAT
    if payload.mode is not None:
        system_prompt = f"{SYSTEM_PROMPT_CHAT}\n\n{get_mode_config(payload.mode).system_prompt}"
    try:
        text = ollama_chat(system_prompt, prompt, OLLAMA_MODEL, OLLAMA_ENDPOINT, timeout=OLLAMA_TIMEOUT)
    except LLMUnavailableError as exc:
        raise HTTPException(status_code=503, detail=f"Kein LLM erreichbar: {exc}")
    return ChatResponse(output=text.strip(), model=OLLAMA_MODEL)

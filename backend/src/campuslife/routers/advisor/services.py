from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from pydantic import ValidationError

from campuslife.mensa.schemas import Dish
from campuslife.utils.llm import LLMUnavailableError, llm_generate_json
from campuslife.utils.nutrition import NutritionBudget

from .config import MAX_PROMPT_DISHES, OLLAMA_ENDPOINT, OLLAMA_MODEL, OLLAMA_TIMEOUT, SETTINGS
from .fallbacks import FALLBACK_SUMMARY, compute_fallback_recommendations
from .llm import SYSTEM_PROMPT_PORTIONS, build_portion_prompt
from .schemas import LLMPortionPayload, PortionRecommendation

logger = logging.getLogger(__name__)


def _llm_portion_recommendations(
    dishes: Sequence[Dish],
    budget: NutritionBudget,
    restrictions: Sequence[str],
    cuisines: Sequence[str],
) -> Tuple[List[PortionRecommendation], str]:
    prompt = build_portion_prompt(dishes, budget, restrictions, cuisines)
    raw = llm_generate_json(
        SYSTEM_PROMPT_PORTIONS,
        prompt,
        OLLAMA_MODEL,
        OLLAMA_ENDPOINT,
        json_root="recommendations",
        timeout=OLLAMA_TIMEOUT,
    )
    payload = LLMPortionPayload.model_validate({"recommendations": raw})
    known = {dish.id for dish in dishes}
    recs = [rec for rec in payload.recommendations if rec.dish_id in known]
    if not recs:
        raise LLMUnavailableError("LLM recommended none of the offered dishes")
    return recs, "Portionsempfehlungen der KI fuer deine heutigen Ziele."


def generate_portion_recommendations(
    dishes: Sequence[Dish],
    budget: NutritionBudget,
    restrictions: Sequence[str] = (),
    cuisines: Sequence[str] = (),
) -> Tuple[List[PortionRecommendation], str, str]:
    """Return ``(recommendations, summary, source)``.

    The LLM is asked first; when it is disabled, unreachable or answers with
    something that does not validate, every dish gets the rule-based portion.
    """
    dishes = list(dishes)
    if not dishes:
        return [], "Heute gibt es keine passenden Gerichte.", "fallback"

    if SETTINGS.advisor_llm_enabled:
        try:
            recs, summary = _llm_portion_recommendations(
                dishes[:MAX_PROMPT_DISHES], budget, restrictions, cuisines
            )
        except (LLMUnavailableError, ValidationError) as exc:
            logger.warning("[Advisor] LLM portions failed, using fallback: %s", exc)
        else:
            # dishes beyond the prompt window keep the rule-based portion
            rest = compute_fallback_recommendations(dishes[MAX_PROMPT_DISHES:], budget)
            return recs + rest, summary, "llm"

    return compute_fallback_recommendations(dishes, budget), FALLBACK_SUMMARY, "fallback"

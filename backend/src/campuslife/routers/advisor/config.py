from __future__ import annotations

from campuslife.core.config import get_settings

SETTINGS = get_settings()

OLLAMA_ENDPOINT = SETTINGS.ollama_endpoint
OLLAMA_MODEL = SETTINGS.ollama_model
OLLAMA_TIMEOUT = SETTINGS.ollama_timeout

# Neutral values when the menu has no estimate for a dish.
BASELINE_CALORIES = 500.0
BASELINE_PROTEIN_G = 20.0
BASELINE_PRICE_CENTS = 500
GRAMS_PER_KCAL = 0.6

PORTION_MIN = 0.5
PORTION_MAX = 1.5

# Dishes sent to the LLM per request.
MAX_PROMPT_DISHES = 10

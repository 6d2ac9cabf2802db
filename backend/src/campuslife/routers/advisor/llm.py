from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from campuslife.mensa.schemas import Dish
from campuslife.utils.nutrition import NutritionBudget

SYSTEM_PROMPT_CHAT = (
    "Du bist ein hilfsbereiter Coach fuer Studierende am TUM Campus Heilbronn. "
    "Du hilfst bei Ernaehrung, Tagesplanung und Wohlbefinden. "
    "Antworte knapp, klar und mit konkreten Zahlen, wenn sinnvoll. "
    "Wenn dir Informationen fehlen, nenne explizit, was du brauchst."
)

SYSTEM_PROMPT_PORTIONS = (
    "Du bist Ernaehrungsexperte. Antworte ausschliesslich mit validem JSON, "
    "ohne Markdown und ohne Erklaertext ausserhalb des JSON."
)


def build_chat_prompt(user_message: str, extra_context: Optional[str] = None) -> str:
    ctx = (extra_context or "").strip()
    if ctx:
        return f"[Kontext]\n{ctx}\n\n[Frage]\n{user_message}\n\n[Antwort]"
    return f"[Frage]\n{user_message}\n\n[Antwort]"


def _dish_brief(dish: Dish) -> Dict[str, Any]:
    return {
        "id": dish.id,
        "name": dish.name,
        "category": dish.category,
        "calories": dish.calories,
        "protein_g": dish.protein_g,
        "price_cents": dish.price_cents,
        "labels": dish.labels,
    }


def build_portion_prompt(
    dishes: Sequence[Dish],
    budget: NutritionBudget,
    restrictions: Sequence[str] = (),
    cuisines: Sequence[str] = (),
) -> str:
    lines: List[str] = [
        "Eine Studentin bzw. ein Student plant das Essen in der Mensa Heilbronn.",
        "",
        "TAGESREST:",
        json.dumps(budget.to_dict(), ensure_ascii=False),
    ]
    if restrictions:
        lines.append("ERNAEHRUNGSWEISE: " + ", ".join(restrictions))
    if cuisines:
        lines.append("BEVORZUGTE KUECHEN: " + ", ".join(cuisines))
    lines += [
        "",
        "GERICHTE:",
        json.dumps([_dish_brief(d) for d in dishes], ensure_ascii=False),
        "",
        "Empfiehl fuer jedes Gericht eine Portion als Faktor (0.5 bis 1.5, 1.0 = Standardportion), "
        "begruende kurz und rechne Kalorien, Protein und Preis fuer die Portion aus.",
        "Gib NUR JSON im Format:",
        '{"recommendations": [{"dish_id": 1, "dish_name": "...", "portion_multiplier": 1.0, '
        '"estimated_grams": 300, "calories": 500, "protein_g": 20, "price_cents": 350, '
        '"reasoning": "..."}], "summary": "..."}',
    ]
    return "\n".join(lines)

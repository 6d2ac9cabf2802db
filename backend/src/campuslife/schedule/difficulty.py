"""Course difficulty estimates and the weekly study load they add up to.

The LLM is asked first; without a usable answer a keyword and course-code
heuristic takes over, so every course always gets an estimate.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, ValidationError

from campuslife.core.config import get_settings
from campuslife.utils.llm import LLMUnavailableError, llm_generate_json

logger = logging.getLogger(__name__)

settings = get_settings()

CognitiveLoad = Literal["Low", "Medium", "High", "Very High"]

# Course codes are two letters and four digits; the first digit is the level.
ADVANCED_CODE_RE = re.compile(r"[A-Z]{2}[5-9]\d{3}")
INTRO_CODE_RE = re.compile(r"[A-Z]{2}[1-2]\d{3}")

ADVANCED_KEYWORDS = ("advanced", "graduate", "research")
HARD_KEYWORDS = ("algorithm", "theory", "quantum", "compiler", "cryptography")
INTRO_KEYWORDS = ("introduction", "basic", "fundamentals")

SYSTEM_PROMPT_DIFFICULTY = (
    "Du bewertest Lehrveranstaltungen einer technischen Universitaet. "
    "Antworte ausschliesslich mit validem JSON ohne Markdown."
)


class ModeRecommendations(BaseModel):
    study_mode: str
    health_mode: str
    balanced_mode: str
    exam_mode: str


class LLMDifficultyPayload(BaseModel):
    difficulty_level: int = Field(..., ge=1, le=5)
    estimated_study_hours: float = Field(..., ge=0, le=80)
    cognitive_load: CognitiveLoad
    reasoning: str
    recommendations: ModeRecommendations


class CourseDifficulty(LLMDifficultyPayload):
    course_code: str
    course_name: str
    source: Literal["llm", "heuristic"] = "heuristic"


class StudyLoad(BaseModel):
    total_hours: float
    average_difficulty: float
    overall_cognitive_load: CognitiveLoad
    warning: Optional[str] = None


def build_difficulty_prompt(course_code: str, course_name: str) -> str:
    return "\n".join(
        [
            f"Kursnummer: {course_code}",
            f"Kursname: {course_name}",
            "",
            "Schaetze ein:",
            "- difficulty_level: 1 (sehr leicht) bis 5 (sehr schwer)",
            "- estimated_study_hours: Selbststudium pro Woche",
            '- cognitive_load: "Low", "Medium", "High" oder "Very High"',
            "- reasoning: kurze Begruendung",
            "- recommendations: je ein Satz fuer study_mode, health_mode, balanced_mode, exam_mode",
            "",
            'Gib NUR JSON im Format {"analysis": {...}} zurueck.',
        ]
    )


def heuristic_difficulty(course_code: str, course_name: str) -> CourseDifficulty:
    name = (course_name or "").lower()
    code = (course_code or "").upper()

    if any(k in name for k in ADVANCED_KEYWORDS) or ADVANCED_CODE_RE.search(code):
        level, load, hours = 5, "Very High", 12
    elif any(k in name for k in HARD_KEYWORDS):
        level, load, hours = 4, "High", 10
    elif any(k in name for k in INTRO_KEYWORDS) or INTRO_CODE_RE.search(code):
        level, load, hours = 2, "Low", 4
    else:
        level, load, hours = 3, "Medium", 6

    return CourseDifficulty(
        course_code=course_code,
        course_name=course_name,
        difficulty_level=level,
        estimated_study_hours=hours,
        cognitive_load=load,
        reasoning="Heuristische Einschaetzung anhand von Kursname und Kursnummer.",
        recommendations=ModeRecommendations(
            study_mode=f"Plane {hours} Stunden pro Woche ein und arbeite auf tiefes Verstaendnis hin.",
            health_mode=f"Begrenze auf {max(4, hours - 2)} Stunden pro Woche, um Ueberlastung zu vermeiden.",
            balanced_mode=f"Ziel: {hours} Stunden pro Woche mit regelmaessigen Pausen.",
            exam_mode=f"In den letzten zwei Wochen intensiv {hours + 4} Stunden pro Woche.",
        ),
        source="heuristic",
    )


def analyze_course_difficulty(course_code: Optional[str], course_name: str) -> CourseDifficulty:
    code = (course_code or "").strip() or "UNKNOWN"
    if settings.advisor_llm_enabled:
        try:
            raw = llm_generate_json(
                SYSTEM_PROMPT_DIFFICULTY,
                build_difficulty_prompt(code, course_name),
                settings.ollama_model,
                settings.ollama_endpoint,
                json_root="analysis",
                timeout=settings.ollama_timeout,
            )
            payload = LLMDifficultyPayload.model_validate(raw)
        except (LLMUnavailableError, ValidationError) as exc:
            logger.warning("[CourseDifficulty] Analysis of %s failed, using heuristic: %s", code, exc)
        else:
            return CourseDifficulty(
                course_code=code, course_name=course_name, source="llm", **payload.model_dump()
            )
    return heuristic_difficulty(code, course_name)


def analyze_courses(courses: Iterable[Tuple[Optional[str], str]]) -> List[CourseDifficulty]:
    """One estimate per distinct ``(course_code, course_name)`` pair, in input order."""
    seen = set()
    results: List[CourseDifficulty] = []
    for code, name in courses:
        key = ((code or "").strip(), name)
        if key in seen:
            continue
        seen.add(key)
        results.append(analyze_course_difficulty(code, name))
    return results


def calculate_total_study_load(difficulties: Sequence[CourseDifficulty]) -> StudyLoad:
    total = sum(d.estimated_study_hours for d in difficulties)
    average = sum(d.difficulty_level for d in difficulties) / len(difficulties) if difficulties else 0.0

    warning = None
    if total > 40:
        load = "Very High"
        warning = "Mehr als 40 Stunden Lernaufwand pro Woche. Hohes Burnout-Risiko!"
    elif total > 30:
        load = "High"
        warning = "Hoher Lernaufwand. Achte auf ausreichend Schlaf und Pausen."
    elif total > 20:
        load = "Medium"
    else:
        load = "Low"

    return StudyLoad(
        total_hours=total,
        average_difficulty=round(average, 2),
        overall_cognitive_load=load,
        warning=warning,
    )

"""Focus modes: how the coach weighs study efficiency against health."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Literal, Tuple


class FocusMode(str, Enum):
    STUDY = "Study"
    HEALTH = "Health"
    BALANCED = "Balanced"
    EXAM = "Exam"


@dataclass(frozen=True)
class DecisionPriorities:
    efficiency: int
    health: int
    balance: int
    urgency: int


@dataclass(frozen=True)
class ModeConfig:
    mode: FocusMode
    display_name: str
    personality: str
    system_prompt: str
    priorities: DecisionPriorities
    meal_style: str
    time_management_style: str
    conversation_tone: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["mode"] = self.mode.value
        return data


FOCUS_MODE_CONFIGS: Dict[FocusMode, ModeConfig] = {
    FocusMode.STUDY: ModeConfig(
        mode=FocusMode.STUDY,
        display_name="Study Mode",
        personality="Effizienz zuerst",
        system_prompt=(
            "Modus: Study. Maximiere den Lernertrag pro Zeiteinheit und vermeide Aufgabenwechsel. "
            "Kurzfristig ungesunde Entscheidungen sind akzeptabel, wenn sie die Produktivitaet steigern. "
            "Bevorzuge lange Fokusbloecke (90-180 min) und die schwierigste Aufgabe zuerst. "
            "Bei Konflikten gilt: Effizienz vor Gesundheit vor Sozialem. Sei direkt und streng."
        ),
        priorities=DecisionPriorities(efficiency=10, health=4, balance=3, urgency=7),
        meal_style="Energiereiche, schnelle Mahlzeiten, die Lernzeit sparen.",
        time_management_style="Lange Lernbloecke mit wenigen Pausen.",
        conversation_tone="streng, zielorientiert",
    ),
    FocusMode.HEALTH: ModeConfig(
        mode=FocusMode.HEALTH,
        display_name="Health Mode",
        personality="Fuersorglich und schuetzend",
        system_prompt=(
            "Modus: Health. Langfristige koerperliche und mentale Stabilitaet hat Vorrang. "
            "Gesundheitsaufgaben sind harte Grenzen und werden nicht verhandelt. "
            "Sei bei sehr intensiven Vorhaben zurueckhaltend und sag notfalls Nein. "
            "Bei Konflikten gilt: Gesundheit vor Ausgleich vor Effizienz. Sei freundlich, aber bestimmt."
        ),
        priorities=DecisionPriorities(efficiency=4, health=10, balance=6, urgency=2),
        meal_style="Ausgewogene Mahlzeiten mit kontrollierten Kalorien und viel Abwechslung.",
        time_management_style="Pause alle 50 Minuten, Schlaf hat Vorrang.",
        conversation_tone="sanft, fuersorglich",
    ),
    FocusMode.BALANCED: ModeConfig(
        mode=FocusMode.BALANCED,
        display_name="Balanced Mode",
        personality="Nachhaltiger Planer",
        system_prompt=(
            "Modus: Balanced. Optimiere den langfristigen Durchschnitt aus Studium, Gesundheit und Alltag. "
            "Kleine Schwankungen sind erlaubt, Extreme nicht. Passe Empfehlungen an die Situation an. "
            "Bei Konflikten gilt: Ausgleich vor Gesundheit und Effizienz. Argumentiere sachlich mit Zahlen."
        ),
        priorities=DecisionPriorities(efficiency=7, health=7, balance=10, urgency=5),
        meal_style="Ausgewogen und zeitsparend zugleich.",
        time_management_style="Pomodoro (25-50 min Arbeit, 5-10 min Pause).",
        conversation_tone="rational, neutral",
    ),
    FocusMode.EXAM: ModeConfig(
        mode=FocusMode.EXAM,
        display_name="Exam Mode",
        personality="Sprint bis zur Pruefung",
        system_prompt=(
            "Modus: Exam. Maximiere die Chance, die anstehende Pruefung zu bestehen. "
            "Streiche alles, was nicht direkt hilft, halte aber einen klaren Erholungsrhythmus. "
            "Der Modus ist befristet bis zum Pruefungstermin. "
            "Bei Konflikten gilt: Dringlichkeit vor Effizienz vor Gesundheit. Sei motivierend."
        ),
        priorities=DecisionPriorities(efficiency=9, health=5, balance=2, urgency=10),
        meal_style="Schnelle Mahlzeiten, die lange wach und konzentriert halten.",
        time_management_style="Intensive Lernsprints mit kurzen, geplanten Pausen.",
        conversation_tone="motivierend, dringlich",
    ),
}


def get_mode_config(mode: FocusMode) -> ModeConfig:
    return FOCUS_MODE_CONFIGS[FocusMode(mode)]


def resolve_conflict(
    mode: FocusMode, health_cost: float, efficiency_gain: float
) -> Tuple[Literal["proceed", "reject", "modify"], str]:
    """Decide whether a task should go ahead under ``mode``.

    ``health_cost`` and ``efficiency_gain`` are on a 0-10 scale. Mode specific
    hard rules come first, then the weighted health and efficiency scores.
    """
    mode = FocusMode(mode)
    priorities = get_mode_config(mode).priorities
    health_score = priorities.health * (10 - health_cost)
    efficiency_score = priorities.efficiency * efficiency_gain

    if mode is FocusMode.HEALTH and health_cost > 7:
        return "reject", "Health Mode: Das Gesundheitsrisiko ist zu hoch. Dein Wohlbefinden geht vor."
    if mode is FocusMode.STUDY and efficiency_gain > 7:
        return "proceed", "Study Mode: Der hohe Effizienzgewinn rechtfertigt den Aufwand."
    if mode is FocusMode.EXAM and efficiency_gain > 6:
        return "proceed", "Exam Mode: Das hilft direkt bei der Pruefung. Ein kurzfristiger Verzicht ist okay."
    if health_score > efficiency_score:
        return "modify", f"{mode.value} Mode: Passe die Aufgabe an, damit sie weniger an deiner Gesundheit zehrt."
    return "proceed", f"{mode.value} Mode: Das passt zu deinen aktuellen Prioritaeten."

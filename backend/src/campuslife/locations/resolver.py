"""Map classroom strings from calendar events to campus buildings.

Handles location formats such as::

    "C.0.50, Hörsaal (1910.EG.050C)"
    "D.2.01, Seminarraum (1901.02.201)"
    "1.234"

Only the leading room code is inspected here. Bracketed facility codes are
handled by :mod:`campuslife.locations.facility`.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Optional

from .buildings import BILDUNGSCAMPUS, ETZELSTRASSE, WEIPERTSTRASSE, Building

ROOM_CODE_RE = re.compile(r"([A-Za-z](?:\.\d+)+|\d+(?:\.\d+)*)", re.ASCII)

# Evaluated top to bottom, first match wins.
_LETTER_PREFIXES = (
    ("D", BILDUNGSCAMPUS),
    ("C", WEIPERTSTRASSE),
    ("L", ETZELSTRASSE),
)


@dataclass(frozen=True)
class ResolvedLocation:
    room_code: Optional[str]
    building: Optional[Building]

    @property
    def full_address(self) -> Optional[str]:
        return self.building.full_address if self.building else None


def extract_room_code(location_text: Optional[str]) -> Optional[str]:
    """Return the room code at the start of ``location_text`` or None."""
    if not isinstance(location_text, str):
        return None
    match = ROOM_CODE_RE.match(location_text.strip())
    if match is None:
        return None
    return match.group(1)


def resolve_building(room_code: Optional[str]) -> Optional[Building]:
    """Classify a room code by its first character.

    Digits and ``L`` rooms sit in Etzelstraße, ``D`` in the Bildungscampus and
    ``C`` in Weipertstraße. Anything else is unknown and yields None.
    """
    if not isinstance(room_code, str):
        return None
    code = room_code.strip().upper()
    if not code:
        return None

    if code[0] in string.digits:
        return ETZELSTRASSE
    for prefix, building in _LETTER_PREFIXES:
        if code.startswith(prefix):
            return building
    return None


def resolve_location(location_text: Optional[str]) -> ResolvedLocation:
    room_code = extract_room_code(location_text)
    building = resolve_building(room_code) if room_code else None
    return ResolvedLocation(room_code=room_code, building=building)


def resolve_full_address(location_text: Optional[str]) -> Optional[str]:
    """Full mailing address for a classroom location, None if unknown."""
    return resolve_location(location_text).full_address

from __future__ import annotations

import re
from typing import Optional

from .buildings import BILDUNGSCAMPUS, WEIPERTSTRASSE, Building

# Internal facility numbers, e.g. "(1910.EG.050C)" or "(1901.02.201)".
FACILITY_CODE_RE = re.compile(r"\((\d{4})\.[^)]*\)", re.ASCII)

FACILITY_PREFIXES = {
    "1901": BILDUNGSCAMPUS,
    "1902": BILDUNGSCAMPUS,
    "1910": WEIPERTSTRASSE,
    "1915": WEIPERTSTRASSE,
}


def match_facility_building(location_text: Optional[str]) -> Optional[Building]:
    """Building for the first known bracketed facility code in the text."""
    if not isinstance(location_text, str):
        return None
    for prefix in FACILITY_CODE_RE.findall(location_text):
        building = FACILITY_PREFIXES.get(prefix)
        if building is not None:
            return building
    return None

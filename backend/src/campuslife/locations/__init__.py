from .buildings import BUILDINGS, Building, Coordinates
from .facility import match_facility_building
from .resolver import (
    ResolvedLocation,
    extract_room_code,
    resolve_building,
    resolve_full_address,
    resolve_location,
)
from .tum_campuses import (
    TUM_LOCATIONS,
    TumLocation,
    campus_main_location,
    find_tum_location,
    tum_locations_by_campus,
)

__all__ = [
    "BUILDINGS",
    "Building",
    "Coordinates",
    "ResolvedLocation",
    "TUM_LOCATIONS",
    "TumLocation",
    "campus_main_location",
    "extract_room_code",
    "find_tum_location",
    "match_facility_building",
    "resolve_building",
    "resolve_full_address",
    "resolve_location",
    "tum_locations_by_campus",
]

"""TUM buildings outside Heilbronn (Garching, Munich city centre, Freising).

Courses held at the Munich campuses only carry a campus name in their
location text; the campus' main building stands in for the map pin.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from .buildings import Coordinates

CAMPUSES = ("Garching", "Innenstadt", "Weihenstephan", "Other")


@dataclass(frozen=True)
class TumLocation:
    id: str
    name: str
    campus: str
    address: str
    coordinates: Coordinates
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "campus": self.campus,
            "address": self.address,
            "coordinates": {"lat": self.coordinates.lat, "lng": self.coordinates.lng},
            "description": self.description,
        }


_TUM_ROWS = (
    TumLocation(
        id="garching-main",
        name="TUM Campus Garching",
        campus="Garching",
        address="Boltzmannstraße 3, 85748 Garching bei München",
        coordinates=Coordinates(lat=48.2627, lng=11.6679),
        description="Informatik, Physik, Mathematik und Ingenieurwissenschaften",
    ),
    TumLocation(
        id="garching-mi",
        name="MI Building (Informatics)",
        campus="Garching",
        address="Boltzmannstraße 3, 85748 Garching",
        coordinates=Coordinates(lat=48.2625, lng=11.6681),
        description="Fakultät für Informatik",
    ),
    TumLocation(
        id="garching-mw",
        name="MW Building (Mechanical Engineering)",
        campus="Garching",
        address="Boltzmannstraße 15, 85748 Garching",
        coordinates=Coordinates(lat=48.2650, lng=11.6710),
        description="Maschinenwesen",
    ),
    TumLocation(
        id="garching-physics",
        name="Physics Department",
        campus="Garching",
        address="James-Franck-Straße 1, 85748 Garching",
        coordinates=Coordinates(lat=48.2638, lng=11.6717),
        description="Physik",
    ),
    TumLocation(
        id="innenstadt-main",
        name="TUM Main Building",
        campus="Innenstadt",
        address="Arcisstraße 21, 80333 München",
        coordinates=Coordinates(lat=48.1497, lng=11.5679),
        description="Stammgelände, Architektur und Bauingenieurwesen",
    ),
    TumLocation(
        id="innenstadt-theresianum",
        name="Theresianum",
        campus="Innenstadt",
        address="Theresienstraße 90, 80333 München",
        coordinates=Coordinates(lat=48.1520, lng=11.5700),
    ),
    TumLocation(
        id="weihenstephan-main",
        name="TUM Campus Weihenstephan",
        campus="Weihenstephan",
        address="Alte Akademie 8, 85354 Freising",
        coordinates=Coordinates(lat=48.3975, lng=11.7233),
        description="Life Sciences, Biotechnologie und Brauwesen",
    ),
    TumLocation(
        id="mensa-garching",
        name="Mensa Garching",
        campus="Garching",
        address="Lichtenbergstraße 2, 85748 Garching",
        coordinates=Coordinates(lat=48.2655, lng=11.6707),
    ),
    TumLocation(
        id="mensa-leopoldstrasse",
        name="Mensa Leopoldstraße",
        campus="Innenstadt",
        address="Leopoldstraße 13a, 80802 München",
        coordinates=Coordinates(lat=48.1540, lng=11.5810),
    ),
)


def build_tum_registry(rows: Iterable[TumLocation]) -> Mapping[str, TumLocation]:
    registry: dict[str, TumLocation] = {}
    for loc in rows:
        if not loc.id or loc.id in registry:
            raise ValueError(f"Missing or duplicate TUM location id {loc.id!r}")
        if loc.campus not in CAMPUSES:
            raise ValueError(f"Unknown campus {loc.campus!r} for {loc.id!r}")
        if not loc.address.strip():
            raise ValueError(f"TUM location {loc.id!r} has no address")
        lat, lng = loc.coordinates.lat, loc.coordinates.lng
        if not -90.0 <= lat <= 90.0 or not -180.0 <= lng <= 180.0:
            raise ValueError(f"TUM location {loc.id!r} has invalid coordinates")
        registry[loc.id] = loc
    return MappingProxyType(registry)


TUM_LOCATIONS: Mapping[str, TumLocation] = build_tum_registry(_TUM_ROWS)


def find_tum_location(query) -> Optional[TumLocation]:
    """First location whose id, name or address contains ``query`` (case-insensitive)."""
    if not isinstance(query, str) or not query.strip():
        return None
    needle = query.strip().lower()
    for loc in TUM_LOCATIONS.values():
        if needle in loc.id or needle in loc.name.lower() or needle in loc.address.lower():
            return loc
    return None


def tum_locations_by_campus(campus: str) -> List[TumLocation]:
    return [loc for loc in TUM_LOCATIONS.values() if loc.campus.lower() == (campus or "").lower()]


def campus_main_location(campus) -> Optional[TumLocation]:
    if not isinstance(campus, str):
        return None
    return TUM_LOCATIONS.get(f"{campus.lower()}-main")

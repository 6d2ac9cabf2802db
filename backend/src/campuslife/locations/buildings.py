"""Heilbronn campus buildings and their postal addresses.

The table is built once at import time and exposed read-only. Broken
entries (duplicate ids, empty addresses, coordinates outside WGS84) fail
the import instead of surfacing per request.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class Building:
    id: str
    display_name: str
    street_address: str
    full_address: str
    coordinates: Optional[Coordinates] = None

    def to_dict(self) -> dict:
        coords = None
        if self.coordinates is not None:
            coords = {"lat": self.coordinates.lat, "lng": self.coordinates.lng}
        return {
            "id": self.id,
            "display_name": self.display_name,
            "street_address": self.street_address,
            "full_address": self.full_address,
            "coordinates": coords,
        }


_BUILDING_ROWS = (
    Building(
        id="etzelstrasse",
        display_name="Etzelstraße Campus",
        street_address="Etzelstraße 38",
        full_address="Etzelstraße 38, 74076 Heilbronn, Germany",
        coordinates=Coordinates(lat=49.1427, lng=9.2181),
    ),
    Building(
        id="bildungscampus",
        display_name="Bildungscampus",
        street_address="Bildungscampus 2",
        full_address="Bildungscampus 2, 74076 Heilbronn, Germany",
        coordinates=Coordinates(lat=49.1419, lng=9.2144),
    ),
    Building(
        id="weipertstrasse",
        display_name="Weipertstraße Campus",
        street_address="Weipertstraße 8-10",
        full_address="Weipertstraße 8-10, 74076 Heilbronn, Germany",
        coordinates=Coordinates(lat=49.1398, lng=9.2203),
    ),
)


def build_registry(rows: Iterable[Building]) -> Mapping[str, Building]:
    """Validate building rows and freeze them into an id -> Building mapping."""
    registry: dict[str, Building] = {}
    for building in rows:
        if not building.id:
            raise ValueError("Building without id in campus table")
        if building.id in registry:
            raise ValueError(f"Duplicate building id {building.id!r}")
        if not (building.full_address or "").strip():
            raise ValueError(f"Building {building.id!r} has no full address")
        coords = building.coordinates
        if coords is not None:
            if not -90.0 <= coords.lat <= 90.0 or not -180.0 <= coords.lng <= 180.0:
                raise ValueError(f"Building {building.id!r} has invalid coordinates {coords}")
        registry[building.id] = building
    return MappingProxyType(registry)


BUILDINGS: Mapping[str, Building] = build_registry(_BUILDING_ROWS)

ETZELSTRASSE = BUILDINGS["etzelstrasse"]
BILDUNGSCAMPUS = BUILDINGS["bildungscampus"]
WEIPERTSTRASSE = BUILDINGS["weipertstrasse"]

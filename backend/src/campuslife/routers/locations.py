from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from campuslife.locations import (
    BUILDINGS,
    TUM_LOCATIONS,
    find_tum_location,
    match_facility_building,
    resolve_location,
    tum_locations_by_campus,
)

router = APIRouter(prefix="/locations", tags=["locations"])


class BuildingOut(BaseModel):
    id: str
    display_name: str
    street_address: str
    full_address: str
    coordinates: Optional[dict] = None


class TumLocationOut(BaseModel):
    id: str
    name: str
    campus: str
    address: str
    coordinates: dict
    description: Optional[str] = None


class ResolveResponse(BaseModel):
    text: str
    room_code: Optional[str] = None
    building: Optional[BuildingOut] = None
    full_address: Optional[str] = None
    facility_building: Optional[BuildingOut] = None
    on_map: bool = False


@router.get("/buildings", response_model=List[BuildingOut])
def list_buildings():
    return [building.to_dict() for building in BUILDINGS.values()]


@router.get("/resolve", response_model=ResolveResponse)
def resolve(text: str = Query("", description="Raumangabe aus dem Kalender, z.B. 'C.0.50, Hörsaal'")):
    """Unbekannte Orte liefern null statt eines Fehlers ("nicht auf der Karte")."""
    resolved = resolve_location(text)
    facility = match_facility_building(text) if resolved.building is None else None
    return ResolveResponse(
        text=text,
        room_code=resolved.room_code,
        building=resolved.building.to_dict() if resolved.building else None,
        full_address=resolved.full_address,
        facility_building=facility.to_dict() if facility else None,
        on_map=resolved.building is not None or facility is not None,
    )


@router.get("/tum", response_model=List[TumLocationOut])
def list_tum_locations(
    campus: Optional[str] = Query(None, description="Garching, Innenstadt, Weihenstephan oder Other"),
    q: Optional[str] = Query(None, description="Suche in Id, Name und Adresse"),
):
    if q:
        found = find_tum_location(q)
        if found is None or (campus and found.campus.lower() != campus.lower()):
            return []
        return [found.to_dict()]
    locations = tum_locations_by_campus(campus) if campus else TUM_LOCATIONS.values()
    return [loc.to_dict() for loc in locations]

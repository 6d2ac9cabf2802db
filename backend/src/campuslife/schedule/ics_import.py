"""iCalendar (.ics) import for TUM course schedules."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from icalendar import Calendar

from campuslife.locations import (
    Building,
    Coordinates,
    TumLocation,
    campus_main_location,
    extract_room_code,
    match_facility_building,
    resolve_building,
)

logger = logging.getLogger(__name__)

COURSE_CODE_RE = re.compile(r"^([A-Z]{2}\d{4})")
TUM_CAMPUS_RE = re.compile(r"(Garching|Innenstadt|Weihenstephan|Klinikum)", re.IGNORECASE)
CAMPUS_TZ = ZoneInfo("Europe/Berlin")


class CalendarImportError(ValueError):
    """The uploaded content is not a readable iCalendar file."""


@dataclass
class ParsedCourse:
    course_name: str
    start_time: datetime
    end_time: datetime
    course_code: Optional[str] = None
    location: Optional[str] = None
    room_number: Optional[str] = None
    building: Optional[Building] = None
    building_name: Optional[str] = None
    tum_location: Optional[TumLocation] = None
    recurrence_rule: Optional[str] = None
    description: Optional[str] = None
    uid: Optional[str] = None

    @property
    def full_address(self) -> Optional[str]:
        if self.building is not None:
            return self.building.full_address
        return self.tum_location.address if self.tum_location else None

    @property
    def coordinates(self) -> Optional[Coordinates]:
        if self.building is not None:
            return self.building.coordinates
        return self.tum_location.coordinates if self.tum_location else None


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            # stored as naive campus-local wall clock time
            return value.astimezone(CAMPUS_TZ).replace(tzinfo=None)
        return value
    # all-day events carry plain dates
    return datetime.combine(value, time.min)


@dataclass(frozen=True)
class CourseLocation:
    room_number: Optional[str] = None
    building: Optional[Building] = None
    building_name: Optional[str] = None
    tum_location: Optional[TumLocation] = None


def locate_course(location: str) -> CourseLocation:
    """Room number and building for a course location.

    The leading room code is tried first; only if it names no building are
    bracketed facility codes consulted, then TUM campus names, which map to
    the campus' main building in Munich or Freising.
    """
    room_number = extract_room_code(location)
    building = resolve_building(room_number) if room_number else None
    if building is None:
        building = match_facility_building(location)

    if building is not None:
        return CourseLocation(room_number, building, building.display_name)
    campus = TUM_CAMPUS_RE.search(location or "")
    if campus is None:
        return CourseLocation(room_number)
    name = campus.group(1).capitalize()
    return CourseLocation(room_number, None, name, campus_main_location(name))


def parse_icalendar(ics_content: Union[str, bytes]) -> List[ParsedCourse]:
    """Every VEVENT with start and end becomes a :class:`ParsedCourse`."""
    try:
        calendar = Calendar.from_ical(ics_content)
    except Exception as exc:
        logger.error("[Calendar] Failed to parse iCalendar file: %s", exc)
        raise CalendarImportError("Invalid iCalendar file format") from exc

    courses: List[ParsedCourse] = []
    for component in calendar.walk("VEVENT"):
        dtstart = component.get("DTSTART")
        dtend = component.get("DTEND")
        if dtstart is None or dtend is None:
            continue

        course_name = str(component.get("SUMMARY") or "").strip() or "Untitled Course"
        location = str(component.get("LOCATION") or "").strip()
        code_match = COURSE_CODE_RE.match(course_name)
        place = locate_course(location)
        rrule = component.get("RRULE")
        description = str(component.get("DESCRIPTION") or "").strip()
        uid = str(component.get("UID") or "").strip()

        courses.append(
            ParsedCourse(
                course_name=course_name,
                course_code=code_match.group(1) if code_match else None,
                location=location or None,
                room_number=place.room_number,
                building=place.building,
                building_name=place.building_name,
                tum_location=place.tum_location,
                start_time=_as_datetime(dtstart.dt),
                end_time=_as_datetime(dtend.dt),
                recurrence_rule=rrule.to_ical().decode("utf-8") if rrule else None,
                description=description or None,
                uid=uid or None,
            )
        )

    logger.info("[Calendar] Parsed %d courses from iCalendar file", len(courses))
    return courses

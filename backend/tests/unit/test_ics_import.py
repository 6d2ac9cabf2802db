from datetime import datetime

import pytest

from campuslife.schedule import CalendarImportError, parse_icalendar
from campuslife.schedule.ics_import import locate_course

ICS = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//TUM//TUMonline//DE
BEGIN:VEVENT
UID:course-1@tum.de
SUMMARY:IN2345 - Datenbanksysteme
LOCATION:C.0.50, Hörsaal (1910.EG.050C)
DTSTART;TZID=Europe/Berlin:20250506T100000
DTEND;TZID=Europe/Berlin:20250506T113000
RRULE:FREQ=WEEKLY;COUNT=12
DESCRIPTION:Vorlesung
END:VEVENT
BEGIN:VEVENT
UID:course-2@tum.de
SUMMARY:Seminar Entrepreneurship
LOCATION:Seminarraum (1901.02.201)
DTSTART:20250506T120000Z
DTEND:20250506T133000Z
END:VEVENT
BEGIN:VEVENT
UID:course-3@tum.de
SUMMARY:MA1001 Analysis
LOCATION:MI HS 1, Garching
DTSTART:20250507T080000
DTEND:20250507T100000
END:VEVENT
BEGIN:VEVENT
UID:course-4@tum.de
DTSTART:20250508T080000
DTEND:20250508T100000
END:VEVENT
BEGIN:VEVENT
UID:no-end@tum.de
SUMMARY:Ohne Ende
DTSTART:20250508T080000
END:VEVENT
END:VCALENDAR
"""


def test_parse_icalendar_extracts_courses():
    courses = parse_icalendar(ICS)
    assert len(courses) == 4

    db = courses[0]
    assert db.course_name == "IN2345 - Datenbanksysteme"
    assert db.course_code == "IN2345"
    assert db.room_number == "C.0.50"
    assert db.building.id == "weipertstrasse"
    assert db.building_name == "Weipertstraße Campus"
    assert db.full_address == "Weipertstraße 8-10, 74076 Heilbronn, Germany"
    assert db.start_time == datetime(2025, 5, 6, 10, 0)
    assert db.end_time == datetime(2025, 5, 6, 11, 30)
    assert "FREQ=WEEKLY" in db.recurrence_rule
    assert db.uid == "course-1@tum.de"


def test_facility_code_used_when_room_code_missing():
    seminar = parse_icalendar(ICS)[1]
    assert seminar.room_number is None
    assert seminar.building.id == "bildungscampus"
    # 12:00 UTC is 14:00 in Heilbronn during summer time
    assert seminar.start_time == datetime(2025, 5, 6, 14, 0)


def test_tum_campus_name_as_last_resort():
    analysis = parse_icalendar(ICS)[2]
    assert analysis.course_code == "MA1001"
    assert analysis.building is None
    assert analysis.building_name == "Garching"
    assert analysis.tum_location.id == "garching-main"
    assert analysis.full_address == "Boltzmannstraße 3, 85748 Garching bei München"
    assert analysis.coordinates.lat == pytest.approx(48.2627)


def test_untitled_course_without_location():
    course = parse_icalendar(ICS)[3]
    assert course.course_name == "Untitled Course"
    assert course.location is None
    assert course.building is None
    assert course.building_name is None
    assert course.tum_location is None
    assert course.coordinates is None


def test_room_code_takes_precedence_over_facility_code():
    place = locate_course("D.2.01, Seminarraum (1910.EG.050C)")
    assert place.room_number == "D.2.01"
    assert place.building.id == "bildungscampus"
    assert place.tum_location is None


def test_campus_without_table_entry_keeps_only_the_name():
    place = locate_course("Hörsaal 2, klinikum rechts der isar")
    assert place.building is None
    assert place.building_name == "Klinikum"
    assert place.tum_location is None


def test_weihenstephan_course_gets_freising_address():
    place = locate_course("HS 14, Weihenstephan")
    assert place.tum_location.address == "Alte Akademie 8, 85354 Freising"


def test_invalid_content_raises():
    with pytest.raises(CalendarImportError):
        parse_icalendar("das ist kein kalender")

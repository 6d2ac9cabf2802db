import pytest
from sqlmodel import select

from campuslife.models.courses import Course
from campuslife.schedule import difficulty

ICS = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//TUM//TUMonline//DE
BEGIN:VEVENT
UID:a@tum.de
SUMMARY:IN2345 - Datenbanksysteme
LOCATION:C.0.50, Hörsaal (1910.EG.050C)
DTSTART:20250506T100000
DTEND:20250506T113000
END:VEVENT
BEGIN:VEVENT
UID:b@tum.de
SUMMARY:Kolloquium
LOCATION:Online
DTSTART:20250507T100000
DTEND:20250507T110000
END:VEVENT
END:VCALENDAR
"""


@pytest.mark.asyncio
async def test_import_stores_resolved_locations(client, db_session):
    response = await client.post("/courses/import", json={"ics_content": ICS})
    assert response.status_code == 201, response.text
    assert response.json() == {"success": True, "count": 2, "located": 1}

    courses = db_session.exec(select(Course).order_by(Course.start_time)).all()
    assert courses[0].building_id == "weipertstrasse"
    assert courses[0].full_address == "Weipertstraße 8-10, 74076 Heilbronn, Germany"
    assert courses[0].latitude == pytest.approx(49.1398)
    assert courses[1].building_id is None
    assert courses[1].full_address is None


@pytest.mark.asyncio
async def test_import_replaces_previous_schedule(client):
    await client.post("/courses/import", json={"ics_content": ICS})
    await client.post("/courses/import", json={"ics_content": ICS})
    listing = await client.get("/courses")
    assert len(listing.json()) == 2


@pytest.mark.asyncio
async def test_list_courses_for_day(client):
    await client.post("/courses/import", json={"ics_content": ICS})
    response = await client.get("/courses", params={"day": "2025-05-06"})
    assert response.status_code == 200
    assert [c["course_code"] for c in response.json()] == ["IN2345"]


@pytest.mark.asyncio
async def test_invalid_calendar_is_rejected(client):
    response = await client.post("/courses/import", json={"ics_content": "kaputt"})
    assert response.status_code == 400
    assert "iCalendar" in response.json()["detail"]


@pytest.mark.asyncio
async def test_delete_courses(client):
    await client.post("/courses/import", json={"ics_content": ICS})
    assert (await client.delete("/courses")).status_code == 204
    assert (await client.get("/courses")).json() == []


MUNICH_ICS = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//TUM//TUMonline//DE
BEGIN:VEVENT
UID:c@tum.de
SUMMARY:IN5001 Advanced Deep Learning
LOCATION:MI HS 1, Garching
DTSTART:20250508T080000
DTEND:20250508T100000
END:VEVENT
BEGIN:VEVENT
UID:d@tum.de
SUMMARY:MA1001 Analysis
LOCATION:Seminarraum (1901.02.201)
DTSTART:20250509T080000
DTEND:20250509T100000
END:VEVENT
END:VCALENDAR
"""


@pytest.mark.asyncio
async def test_import_locates_munich_campus(client, db_session):
    response = await client.post("/courses/import", json={"ics_content": MUNICH_ICS})
    assert response.json()["located"] == 2

    garching = db_session.exec(select(Course).where(Course.uid == "c@tum.de")).one()
    assert garching.building_id == "garching-main"
    assert garching.building_name == "Garching"
    assert garching.full_address == "Boltzmannstraße 3, 85748 Garching bei München"
    assert garching.latitude == pytest.approx(48.2627)


@pytest.mark.asyncio
async def test_course_difficulty_report(client, monkeypatch):
    monkeypatch.setattr(difficulty.settings, "advisor_llm_enabled", False)
    await client.post("/courses/import", json={"ics_content": MUNICH_ICS})

    response = await client.get("/courses/difficulty")
    assert response.status_code == 200, response.text
    payload = response.json()
    levels = {c["course_code"]: c["difficulty_level"] for c in payload["courses"]}
    assert levels == {"IN5001": 5, "MA1001": 2}
    assert payload["study_load"]["total_hours"] == 16
    assert payload["study_load"]["average_difficulty"] == 3.5
    assert payload["study_load"]["overall_cognitive_load"] == "Low"


@pytest.mark.asyncio
async def test_course_difficulty_without_courses(client):
    response = await client.get("/courses/difficulty")
    assert response.json()["courses"] == []
    assert response.json()["study_load"]["total_hours"] == 0

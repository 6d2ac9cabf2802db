from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy import delete
from sqlmodel import Session, select

from campuslife.core.database import get_session
from campuslife.models.courses import Course
from campuslife.schedule import CalendarImportError, ParsedCourse, parse_icalendar
from campuslife.schedule.difficulty import (
    CourseDifficulty,
    StudyLoad,
    analyze_courses,
    calculate_total_study_load,
)

router = APIRouter(prefix="/courses", tags=["courses"])


class CourseImportRequest(BaseModel):
    ics_content: str = Field(..., description="Inhalt der .ics-Datei (TUMonline-Export)")


class CourseImportResponse(BaseModel):
    success: bool = True
    count: int
    located: int


class StudyLoadResponse(BaseModel):
    courses: List[CourseDifficulty]
    study_load: StudyLoad


def _course_from_parsed(parsed: ParsedCourse) -> Course:
    building = parsed.building or parsed.tum_location
    coords = parsed.coordinates
    return Course(
        course_name=parsed.course_name,
        course_code=parsed.course_code,
        location=parsed.location,
        room_number=parsed.room_number,
        building_id=building.id if building else None,
        building_name=parsed.building_name,
        full_address=parsed.full_address,
        latitude=coords.lat if coords else None,
        longitude=coords.lng if coords else None,
        start_time=parsed.start_time,
        end_time=parsed.end_time,
        recurrence_rule=parsed.recurrence_rule,
        description=parsed.description,
        uid=parsed.uid,
    )


def courses_for_day(session: Session, day: date) -> List[Course]:
    start = datetime.combine(day, time.min)
    stmt = (
        select(Course)
        .where(Course.start_time >= start, Course.start_time < start + timedelta(days=1))
        .order_by(Course.start_time)
    )
    return list(session.exec(stmt).all())


@router.post("/import", response_model=CourseImportResponse, status_code=201)
def import_courses(payload: CourseImportRequest, session: Session = Depends(get_session)):
    """Ersetzt den gespeicherten Stundenplan durch den Inhalt der .ics-Datei."""
    try:
        parsed = parse_icalendar(payload.ics_content)
    except CalendarImportError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    session.execute(delete(Course))
    rows = [_course_from_parsed(course) for course in parsed]
    session.add_all(rows)
    session.commit()
    return CourseImportResponse(
        count=len(rows),
        located=sum(1 for row in rows if row.building_id),
    )


@router.get("", response_model=List[Course])
def list_courses(day: Optional[date] = Query(None), session: Session = Depends(get_session)):
    if day is not None:
        return courses_for_day(session, day)
    return session.exec(select(Course).order_by(Course.start_time)).all()


@router.delete("", status_code=204)
def delete_courses(session: Session = Depends(get_session)):
    session.execute(delete(Course))
    session.commit()


@router.get("/difficulty", response_model=StudyLoadResponse)
def course_difficulty(session: Session = Depends(get_session)):
    """Schwierigkeit je Kurs und der gesamte woechentliche Lernaufwand."""
    courses = session.exec(select(Course).order_by(Course.start_time)).all()
    difficulties = analyze_courses((c.course_code, c.course_name) for c in courses)
    return StudyLoadResponse(courses=difficulties, study_load=calculate_total_study_load(difficulties))

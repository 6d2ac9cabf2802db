from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Course(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    course_name: str = Field(index=True)
    course_code: Optional[str] = Field(default=None, index=True)

    # Rohtext aus dem Kalender und das, was der Resolver daraus macht
    location: Optional[str] = None
    room_number: Optional[str] = None
    building_id: Optional[str] = Field(default=None, index=True)
    building_name: Optional[str] = None
    full_address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    start_time: datetime = Field(index=True)
    end_time: datetime
    recurrence_rule: Optional[str] = None
    description: Optional[str] = None
    uid: Optional[str] = Field(default=None, index=True)
    imported_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

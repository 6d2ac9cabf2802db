from __future__ import annotations

from typing import Iterator, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from .config import get_settings


def _sqlite_connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        # request handlers run in the threadpool, not the thread that opened the connection
        return {"check_same_thread": False}
    return {}


def create_db_engine(url: str, echo: bool = False) -> Engine:
    return create_engine(url, echo=echo, connect_args=_sqlite_connect_args(url))


settings = get_settings()
engine = create_db_engine(settings.database_url, echo=settings.database_echo)


def init_db(bind: Optional[Engine] = None) -> None:
    """Create the course, profile and meal log tables if they are missing."""
    from campuslife import models  # noqa: F401  registers the tables

    SQLModel.metadata.create_all(bind or engine)


def get_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session

from typing import AsyncIterator, Iterator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlmodel import Session

from campuslife.core import database as core_database
from campuslife.core.database import get_session
from campuslife.main import create_app


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_app(monkeypatch, tmp_path) -> Iterator[FastAPI]:
    """App wired to its own SQLite file so schedules and meal logs never leak between tests."""
    engine = core_database.create_db_engine(f"sqlite:///{tmp_path / 'campuslife-test.db'}")
    core_database.init_db(engine)
    # the startup hook and /__dbcheck read the module-level engine
    monkeypatch.setattr(core_database, "engine", engine)

    def _session_override():
        with Session(engine) as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_session] = _session_override
    try:
        yield app
    finally:
        app.dependency_overrides.clear()
        engine.dispose()


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def db_session(test_app: FastAPI) -> Iterator[Session]:
    with Session(core_database.engine) as session:
        yield session

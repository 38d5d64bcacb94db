import itertools
import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATA_DIR", str(ROOT / "data"))
os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")

from app.db.session import Base
from app.crud.clients import create_client
from app.crud.projects import create_project
from app.crud.tickets import create_ticket
from app.crud.users import create_user
from app.crud.work_units import create_work_unit

# Ensure models are registered so metadata tables are created
from app import models  # noqa: F401


@pytest.fixture()
def db_engine():
    # One shared in-memory connection so API threads see the same database.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def db_session(db_engine):
    TestingSessionLocal = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


_sequence = itertools.count(1)


@pytest.fixture()
def make_client(db_session):
    def _make(name=None):
        return create_client(db_session, {"name": name or f"Client {next(_sequence)}"})

    return _make


@pytest.fixture()
def make_project(db_session, make_client):
    def _make(name=None, client=None):
        client = client or make_client()
        return create_project(
            db_session,
            {"name": name or f"Project {next(_sequence)}", "client_id": client.id},
        )

    return _make


@pytest.fixture()
def make_user(db_session):
    def _make(login=None):
        return create_user(db_session, {"login": login or f"user{next(_sequence)}"})

    return _make


@pytest.fixture()
def make_work_unit(db_session, make_project):
    def _make(ticket=None, hours="2", **extra):
        if ticket is None:
            ticket = create_ticket(db_session, make_project())
        payload = {"hours": hours}
        payload.update(extra)
        return create_work_unit(db_session, ticket, payload)

    return _make

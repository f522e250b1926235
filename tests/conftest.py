"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database. ``StaticPool`` keeps a
single connection alive so the schema survives across sessions.
"""

import random

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from media_catalog.database.config.connection_engine import connection_engine, create_schema
from media_catalog.database.helpers.transactionManagement import SessionFactory


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def session_factory(engine):
    """Point ``SessionFactory`` (used by ``@transactional``) at the test engine."""
    SessionFactory.configure(bind=engine)
    yield SessionFactory
    SessionFactory.configure(bind=connection_engine)


@pytest.fixture
def randomize_case():
    rng = random.Random(1970)

    def randomize(text: str) -> str:
        return "".join(c.upper() if rng.random() < 0.5 else c.lower() for c in text)

    return randomize



"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the catalog:
- Builds the SQLAlchemy connection URL from environment-backed settings.
- Creates the Engine (connection pool + SQL execution entry point).
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.

Notes
-----
- Uses `URL.create(...)` so credentials stay environment-driven.
- All ORM models must inherit from `declarativeBase` to participate in schema
  creation (`create_schema`) and enable ORM features.
"""

import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import MetaData
from media_catalog.database.config.config import settings

connection_url = URL.create(
    drivername=settings.DB_DRIVER_NAME,
    username=settings.DB_USERNAME,
    password=settings.DB_PASSWORD,
    host=settings.DB_HOST,
    port=settings.DB_PORT,
    database=settings.DB_DATABASE_NAME,
)
"""Connection URL built from Settings (env vars or `.env`)."""

def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _register_sqlite_functions(dbapi_connection, connection_record):
    """
    Replace SQLite's ASCII-only ``lower()`` with Python's Unicode-aware one,
    so name searches fold "Ō" to "ō" like PostgreSQL does.
    """
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


connection_engine = create_engine(connection_url, echo=settings.DB_ECHO)
"""Engine object: Core interface to the database.
Responsible for managing connections, executing SQL, and pooling.
"""

# Stores schema-level information about tables, constraints and indexes.
metadata = MetaData()

declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models."""


def create_schema(engine: Engine = connection_engine) -> None:
    """
    Create every table registered on ``metadata`` that does not exist yet.

    Entity modules must be imported first so their tables are registered.
    """
    # Registers the article tables on ``metadata``.
    import media_catalog.database.entities.articles  # noqa: F401

    metadata.create_all(engine)

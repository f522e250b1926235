"""
Database initialization
-----------------------
Creates the catalog schema (tables) on the configured database if they do
not exist yet, after applying ``LOG_LEVEL`` to the root logger.

Run this module directly to initialize a fresh database:
    python -m media_catalog.database.init_db
"""

import logging

from sqlalchemy.engine import Engine

from media_catalog.database.config.config import configure_logging
from media_catalog.database.config.connection_engine import connection_engine, create_schema

logger = logging.getLogger(__name__)


def init_db(engine: Engine = connection_engine) -> None:
    """Configure logging and create every catalog table on ``engine``."""
    configure_logging()
    logger.info("Creating catalog schema on %s", engine.url.render_as_string(hide_password=True))
    create_schema(engine)
    logger.info("Catalog schema ready")


if __name__ == "__main__":
    init_db()

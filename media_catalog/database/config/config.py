"""
Configuration: Pydantic v2 Settings (env / .env)
================================================

Purpose
-------
Centralized, strongly-typed configuration for the catalog data layer using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Every field has a default so the package imports cleanly in tests, where
  the database is an in-memory SQLite file.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from media_catalog.database.config.config import settings

db_host = settings.DB_HOST
page_size = settings.DEFAULT_PAGE_SIZE
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_DRIVER_NAME: str = Field("sqlite", description="Database driver (e.g., `postgresql+psycopg`, `mysql`, `sqlite`).")
    DB_USERNAME: str | None = Field(None, description="Database username credential.")
    DB_PASSWORD: str | None = Field(None, description="Database password credential.")
    DB_HOST: str | None = Field(None, description="Hostname or IP address of the database server.")
    DB_PORT: int | None = Field(None, description="Port of the database server.")
    DB_DATABASE_NAME: str = Field(":memory:", description="Name of the catalog database (file path for SQLite).")
    DB_ECHO: bool = Field(False, description="Echo every emitted SQL statement through the engine logger.")
    LOG_LEVEL: str = Field("INFO", description="Root log level for the catalog (e.g., `DEBUG`, `INFO`).")
    DEFAULT_PAGE_SIZE: int = Field(20, ge=1, description="Page size used by the service layer when none is given.")


# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Defines a Settings object that contains the contents of the .env file"""


def configure_logging(level: str | None = None) -> None:
    """
    Install a stream handler (if none) and apply ``LOG_LEVEL`` (or ``level``) to the root logger.

    Library code never calls this. ``init_db`` does, and any other host
    application should call it once at startup.
    """
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel((level or settings.LOG_LEVEL).upper())

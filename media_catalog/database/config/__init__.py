"""
The `config` package provides two core building blocks for establishing database connections.

Contents:
    - config: strongly typed settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: SQLAlchemy bootstrap that builds the connection URL from those settings, creates the Engine, shared MetaData, and the declarative base for ORM models
"""

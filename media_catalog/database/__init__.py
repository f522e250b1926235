"""
The `database` package is responsible for all interactions with the catalog database.
It provides configuration, entity definitions, DAOs, and service functions.

Contents:
    - config:
        Settings and the SQLAlchemy engine / declarative base.

    - entities:
        SQLAlchemy models of the article hierarchy.

    - daos:
        Data Access Objects (DAOs) providing search and write operations.

    - core:
        Transactional service functions composing the DAOs.

    - helpers:
        Session scope, the `@transactional` decorator, and data-layer exceptions.
"""

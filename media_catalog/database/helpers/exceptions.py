"""
Data-layer exceptions.

``PersistenceError`` derives from ``SQLAlchemyError`` so callers can catch
every storage failure (these and the driver-level ``IntegrityError``) with a
single ``except SQLAlchemyError``.
"""

from sqlalchemy.exc import SQLAlchemyError


class PersistenceError(SQLAlchemyError):
    """Base class for failures raised by the DAOs themselves."""


class EntityExistsError(PersistenceError):
    """Raised when inserting an entity that already has a database identity."""


class EntityNotFoundError(PersistenceError):
    """Raised when updating an entity that has no matching row."""


class UnsupportedOperationError(Exception):
    """Raised when a DAO does not support the requested operation."""

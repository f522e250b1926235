"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy database sessions
through an explicit, scoped session handle and a decorator-based transaction
wrapper built on top of it.

Sessions are never kept in module or context state: a unit of work either
receives its session from the caller or opens (and closes) its own.

Key features
~~~~~~~~~~~~
- ``SessionFactory`` bound to the configured engine (rebindable for tests)
- ``session_scope()`` context manager: commit on success, rollback on error,
  always close
- ``@transactional`` decorator: reuses a session passed by the caller,
  otherwise runs the function inside a fresh ``session_scope()``

"""

import logging
from contextlib import contextmanager
from functools import wraps
from typing import Iterator

from sqlalchemy.orm import Session, sessionmaker

from media_catalog.database.config.connection_engine import connection_engine

logger = logging.getLogger(__name__)

SessionFactory = sessionmaker(bind=connection_engine)
"""Session factory bound to the catalog engine.

Call ``SessionFactory.configure(bind=other_engine)`` to point every new
session at another database (e.g., an in-memory test database).
"""


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Provide a transactional scope around a series of operations.

    Yields
    ------
    Session
        A new SQLAlchemy session. It is committed when the block exits
        normally, rolled back when it raises, and closed in both cases.

    Example
    -------
    >>> with session_scope() as session:
    ...     BookDao().insert(session, Book("Ubik", "1969-01-01"))
    """
    session = SessionFactory()
    try:
        yield session
        session.flush()
        session.commit()
    except Exception:
        logger.debug("Rolling back session after error", exc_info=True)
        session.rollback()
        raise
    finally:
        session.close()


def transactional(func):
    """
    Decorator to wrap functions in a managed SQLAlchemy transaction.

    Ensures that:
    - If the caller passes ``session=...``, that session is reused and the
      caller keeps ownership of its lifecycle (closing it). DAO writes
      called inside the function still commit, or roll back on error, on
      that same session.
    - Otherwise, a new session is opened with ``session_scope()``, committed
      on success, rolled back on error and closed.

    Parameters
    ----------
    func : callable
        The function to wrap. It must accept a `session` keyword argument.

    Returns
    -------
    callable
        The wrapped function, executed within a database transaction.

    Example
    -------
    >>> @transactional
    ... def create_book(name: str, session=None):
    ...     return BookDao().insert(session, Book(name, "1969-01-01"))
    ...
    >>> create_book("Ubik")
    """
    @wraps(func)
    def wrap_func(*args, **kwargs):
        session = kwargs.pop("session", None)
        if session is not None:
            return func(*args, session=session, **kwargs)

        with session_scope() as session:
            return func(*args, session=session, **kwargs)

    return wrap_func

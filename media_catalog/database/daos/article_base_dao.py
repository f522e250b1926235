"""
Article Base DAO
================

Purpose
-------
Generic data-access contract shared by every catalog DAO. A concrete DAO only
names the mapped class it serves (``entity``); the search, count, latest,
insert, update and save operations are implemented here once.

Design
------
- Every method receives an active SQLAlchemy `Session` from the caller. The
  DAO never opens sessions of its own.
- Write operations (`insert`, `update`, `save`) flush and commit the session
  they are given, so each write is its own unit of work.
- Read operations only consider *verified* rows, except `findById`.

Search semantics
----------------
- Name matching is a case-insensitive substring test: both sides go through
  ``lower()`` (Unicode-aware on SQLite too, see `connection_engine`).
  ``%`` and ``_`` in the query are matched literally. An empty query matches every verified row.
- Pages are 1-indexed: page ``p`` with size ``s`` returns rows
  ``[(p - 1) * s, p * s)`` of the result ordered by name, then id.
  A page beyond the last row yields an empty list.
- `findLatest` orders by release date (newest first), then id (highest first).

Error Handling
--------------
- Inserting an entity that already has an identity raises `EntityExistsError`.
- Updating an entity without a matching row raises `EntityNotFoundError`.
- Database errors raised while flushing are logged, the session is rolled
  back, and the original exception is re-raised unchanged.
"""

import logging
from abc import ABC
from typing import Generic, List, Optional, TypeVar

from sqlalchemy import asc, desc, func, inspect
from sqlalchemy.orm import Session

from media_catalog.database.entities.articles import Article
from media_catalog.database.helpers.exceptions import EntityExistsError, EntityNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Article)


class ArticleBaseDao(ABC, Generic[T]):
    """
    Abstract base class for catalog Data Access Objects.

    Subclasses set ``entity`` to the mapped class they manage. Queries on a
    variant class only see rows of that variant; queries on ``Article`` see
    every variant.
    """

    entity: type[T]

    def _nameCriteria(self, name: str):
        return (
            self.entity.verified.is_(True),
            func.lower(self.entity.name).contains(name.lower(), autoescape=True),
        )

    def findByName(self, session: Session, name: str, page: int, page_size: int) -> List[T]:
        """
        Fetch one page of verified entities whose name contains ``name``.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        name : str
            Case-insensitive fragment of the name. Empty matches everything.
        page : int
            1-indexed page number.
        page_size : int
            Maximum number of entities per page.

        Returns
        -------
        list[T]
            Matching entities ordered by name, then id. Empty if the page is
            out of range.

        Raises
        ------
        ValueError
            If ``page`` or ``page_size`` is lower than 1.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        try:
            return (
                session.query(self.entity)
                .filter(*self._nameCriteria(name))
                .order_by(asc(self.entity.name), asc(self.entity.id))
                .offset((page - 1) * page_size)
                .limit(page_size)
                .all()
            )
        except Exception as e:
            logger.error("Error in %s.findByName. Error Message: %s", type(self).__name__, e)
            raise e

    def countByName(self, session: Session, name: str) -> int:
        """
        Count the verified entities whose name contains ``name``.

        Uses the same predicate as `findByName`, ignoring pagination.
        """
        try:
            return session.query(self.entity).filter(*self._nameCriteria(name)).count()
        except Exception as e:
            logger.error("Error in %s.countByName. Error Message: %s", type(self).__name__, e)
            raise e

    def findLatest(self, session: Session, limit: int) -> List[T]:
        """
        Fetch the most recently released verified entities.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        limit : int
            Maximum number of entities to return. ``0`` returns an empty list.

        Returns
        -------
        list[T]
            At most ``limit`` entities, newest release date first.

        Raises
        ------
        ValueError
            If ``limit`` is negative.
        """
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        if limit == 0:
            return []

        try:
            return (
                session.query(self.entity)
                .filter(self.entity.verified.is_(True))
                .order_by(desc(self.entity.release_date), desc(self.entity.id))
                .limit(limit)
                .all()
            )
        except Exception as e:
            logger.error("Error in %s.findLatest. Error Message: %s", type(self).__name__, e)
            raise e

    def findById(self, session: Session, id: int) -> Optional[T]:
        """Return the entity with the given id (verified or not), or None."""
        try:
            found = session.get(self.entity, id)
            # Rows of another variant share the primary key space.
            return found if isinstance(found, self.entity) else None
        except Exception as e:
            logger.error("Error in %s.findById (id=%s). Error Message: %s", type(self).__name__, id, e)
            raise e

    def _checkType(self, entity) -> None:
        if not isinstance(entity, self.entity):
            raise TypeError(
                f"{type(self).__name__} stores {self.entity.__name__} instances, got {type(entity).__name__}"
            )

    def insert(self, session: Session, entity: T) -> T:
        """
        Insert a new entity and commit.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        entity : T
            A never-persisted entity. Its ``verified`` flag is stored as given.

        Returns
        -------
        T
            The same entity, now carrying its database-assigned ``id``.

        Raises
        ------
        EntityExistsError
            If the entity already has a database identity.
        sqlalchemy.exc.IntegrityError
            If the database rejects the row (e.g., duplicate primary key).
        """
        self._checkType(entity)
        if inspect(entity).has_identity:
            logger.error("Error in %s.insert. %s already inserted", type(self).__name__, entity)
            raise EntityExistsError(
                f"{type(entity).__name__} with id {entity.id} already exists"
            )

        try:
            session.add(entity)
            session.flush()
            session.commit()
            logger.debug("Inserted %s", entity)
            return entity
        except Exception as e:
            logger.error("Error in %s.insert. Error Message: %s", type(self).__name__, e)
            session.rollback()
            raise e

    def update(self, session: Session, entity: T) -> T:
        """
        Merge the state of an existing entity into the database and commit.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        entity : T
            An entity whose ``id`` refers to an existing row.

        Returns
        -------
        T
            The persistent instance attached to ``session``.

        Raises
        ------
        EntityNotFoundError
            If the entity has no id or no row carries that id.
        """
        self._checkType(entity)
        if entity.id is None or self.findById(session, entity.id) is None:
            logger.error("Error in %s.update. %s not found", type(self).__name__, entity)
            raise EntityNotFoundError(
                f"Cannot update {type(entity).__name__} with id {entity.id}: no such row"
            )

        try:
            merged = session.merge(entity)
            session.flush()
            session.commit()
            logger.debug("Updated %s", merged)
            return merged
        except Exception as e:
            logger.error("Error in %s.update. Error Message: %s", type(self).__name__, e)
            session.rollback()
            raise e

    def save(self, session: Session, entity: T) -> T:
        """
        Insert the entity if it has no id yet, otherwise update it.

        Returns
        -------
        T
            The persistent instance (see `insert` and `update`).
        """
        if entity.id is None:
            return self.insert(session, entity)
        return self.update(session, entity)

"""
Article DAO

Purpose
-------
Read-only data-access layer over the whole catalog. Queries run against the
polymorphic ``Article`` base, so results mix books, comics, movies and music
storages (each loaded as its concrete variant).

Writes are rejected: a bare ``Article`` has no storage mapping of its own,
so inserts and updates must go through the DAO of the concrete variant
(`BookDao`, `ComicDao`, `MovieDao`, `MusicStorageDao`).

Usage
-----
.. code-block:: python

    from media_catalog.database.daos.article_dao import ArticleDao
    from media_catalog.database.helpers.transactionManagement import session_scope

    dao = ArticleDao()
    with session_scope() as session:
        first_page = dao.findByName(session, "odyssey", page=1, page_size=10)
        total = dao.countByName(session, "odyssey")
        newest = dao.findLatest(session, 5)
"""

from sqlalchemy.orm import Session

from media_catalog.database.daos.article_base_dao import ArticleBaseDao
from media_catalog.database.entities.articles import Article
from media_catalog.database.helpers.exceptions import UnsupportedOperationError


class ArticleDao(ArticleBaseDao[Article]):
    """
    Data Access Object (DAO) for searching every catalog article.
    Insert, update and save always raise `UnsupportedOperationError`.
    """

    entity = Article

    def insert(self, session: Session, entity: Article) -> Article:
        raise UnsupportedOperationError(
            "Cannot insert a bare Article, use a subtype and its DAO."
        )

    def update(self, session: Session, entity: Article) -> Article:
        raise UnsupportedOperationError(
            "Cannot update a bare Article, use a subtype and its DAO."
        )

    def save(self, session: Session, entity: Article) -> Article:
        raise UnsupportedOperationError(
            "Cannot update a bare Article, use a subtype and its DAO."
        )

"""
Comic DAO

Data-access layer for the `Comic` variant. Same contract as `BookDao`,
scoped to comic rows.
"""

from media_catalog.database.daos.article_base_dao import ArticleBaseDao
from media_catalog.database.entities.articles import Comic


class ComicDao(ArticleBaseDao[Comic]):
    """Data Access Object (DAO) for `Comic` entities."""

    entity = Comic

"""
Movie DAO

Data-access layer for the `Movie` variant.
"""

from media_catalog.database.daos.article_base_dao import ArticleBaseDao
from media_catalog.database.entities.articles import Movie


class MovieDao(ArticleBaseDao[Movie]):
    """Data Access Object (DAO) for `Movie` entities."""

    entity = Movie

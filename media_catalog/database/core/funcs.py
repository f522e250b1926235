"""
Service-layer operations for the media catalog.

All public functions are wrapped with the `@transactional` decorator, which
opens, commits and closes a SQLAlchemy session unless the caller passes one
explicitly as ``session=...``. Results are plain dicts so they stay usable
after the session is closed.

Articles are addressed by an ``article_type`` string ("book", "comic",
"movie", "music_storage"). Reads accept ``None`` to search every type at
once; writes always need a concrete type.
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from media_catalog.database.config.config import settings
from media_catalog.database.daos.article_base_dao import ArticleBaseDao
from media_catalog.database.daos.article_dao import ArticleDao
from media_catalog.database.daos.book_dao import BookDao
from media_catalog.database.daos.comic_dao import ComicDao
from media_catalog.database.daos.movie_dao import MovieDao
from media_catalog.database.daos.music_storage_dao import MusicStorageDao
from media_catalog.database.entities.articles import Article
from media_catalog.database.helpers.exceptions import EntityNotFoundError
from media_catalog.database.helpers.transactionManagement import transactional

logger = logging.getLogger(__name__)

DAOS: dict[str, type[ArticleBaseDao]] = {
    "book": BookDao,
    "comic": ComicDao,
    "movie": MovieDao,
    "music_storage": MusicStorageDao,
}
"""Maps each ``article_type`` discriminator to the DAO that writes it."""


def get_dao(article_type: str | None) -> ArticleBaseDao:
    """
    Return the DAO serving ``article_type``.

    ``None`` selects the read-only `ArticleDao` spanning every type.

    Raises
    ------
    ValueError
        If ``article_type`` is not a known discriminator.
    """
    if article_type is None:
        return ArticleDao()
    try:
        return DAOS[article_type]()
    except KeyError:
        raise ValueError(
            f"Unknown article type {article_type!r}, expected one of {sorted(DAOS)}"
        ) from None


def article_to_dict(article: Article) -> dict:
    """Serialize an article into the dict shape returned by this module."""
    return {
        "id": article.id,
        "name": article.name,
        "release_date": article.release_date.isoformat(),
        "verified": article.verified,
        "type": article.article_type,
    }


@transactional
def search_articles(
    name: str,
    page: int = 1,
    page_size: int | None = None,
    article_type: str | None = None,
    session: Session = None,
) -> dict:
    """
    Search verified articles by name, one page at a time.

    Parameters
    ----------
    name : str
        Case-insensitive name fragment; empty matches everything.
    page : int
        1-indexed page number (default 1).
    page_size : int | None
        Items per page; defaults to ``settings.DEFAULT_PAGE_SIZE``.
    article_type : str | None
        Restrict the search to one type; ``None`` searches every type.
    session : Session
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    dict
        {'items': [<article dict>, ...], 'total': <int>, 'page': <int>, 'page_size': <int>}
    """
    if page_size is None:
        page_size = settings.DEFAULT_PAGE_SIZE
    dao = get_dao(article_type)
    items = dao.findByName(session, name, page, page_size)
    total = dao.countByName(session, name)
    logger.debug("search %r (type=%s) page %d: %d of %d", name, article_type, page, len(items), total)
    return {
        "items": [article_to_dict(a) for a in items],
        "total": total,
        "page": page,
        "page_size": page_size,
    }


@transactional
def latest_articles(limit: int, article_type: str | None = None, session: Session = None) -> list[dict]:
    """Return the ``limit`` most recently released verified articles, newest first."""
    dao = get_dao(article_type)
    return [article_to_dict(a) for a in dao.findLatest(session, limit)]


@transactional
def create_article(
    article_type: str,
    name: str,
    release_date: date | str,
    verified: bool = False,
    session: Session = None,
) -> dict:
    """
    Create a new article of the given type.

    Parameters
    ----------
    article_type : str
        Concrete type to create ("book", "comic", "movie", "music_storage").
    name : str
        Title of the article.
    release_date : date | str
        Release date, as a date or ISO8601 string.
    verified : bool
        Initial moderation flag (default False).
    session : Session
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    dict
        The stored article, including its assigned id.
    """
    if article_type is None:
        raise ValueError("article_type is required to create an article")
    dao = get_dao(article_type)
    article = dao.insert(session, dao.entity(name, release_date, verified=verified))
    logger.info("Created %s", article)
    return article_to_dict(article)


@transactional
def set_verified(article_type: str, article_id: int, verified: bool, session: Session = None) -> dict:
    """
    Moderate an article: mark it verified (visible) or not (hidden).

    Raises
    ------
    EntityNotFoundError
        If no article of that type carries ``article_id``.
    """
    if article_type is None:
        raise ValueError("article_type is required to moderate an article")
    dao = get_dao(article_type)
    article = dao.findById(session, article_id)
    if article is None:
        raise EntityNotFoundError(f"No {article_type} with id {article_id}")
    article.verified = verified
    article = dao.update(session, article)
    logger.info("Set verified=%s on %s", verified, article)
    return article_to_dict(article)

"""
Book DAO

Purpose
-------
Full data-access layer for the `Book` variant: verified-only name search,
counting, latest releases, plus insert / update / save.

Usage
-----
.. code-block:: python

    from media_catalog.database.daos.book_dao import BookDao
    from media_catalog.database.entities.articles import Book
    from media_catalog.database.helpers.transactionManagement import session_scope

    dao = BookDao()
    with session_scope() as session:
        book = dao.save(session, Book("Ubik", "1969-01-01"))   # insert, id assigned
        book.verified = True
        dao.save(session, book)                                 # update in place
        dao.insert(session, book)                               # raises EntityExistsError
"""

from media_catalog.database.daos.article_base_dao import ArticleBaseDao
from media_catalog.database.entities.articles import Book


class BookDao(ArticleBaseDao[Book]):
    """Data Access Object (DAO) for `Book` entities."""

    entity = Book

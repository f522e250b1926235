"""Tests for BookDao, run once per seed collection."""

from datetime import date

import pytest
from sqlalchemy.exc import SQLAlchemyError

from media_catalog.database.daos.book_dao import BookDao
from media_catalog.database.entities.articles import Book, Movie
from media_catalog.database.helpers.exceptions import EntityExistsError, EntityNotFoundError, PersistenceError
from utils import BOOK_SETS, count_containing, first_word, seed, unverify


@pytest.fixture
def dao():
    return BookDao()


@pytest.fixture(params=sorted(BOOK_SETS), ids=sorted(BOOK_SETS))
def books(request, session):
    return seed(session, BOOK_SETS[request.param]())


def test_find_books_by_exact_title(session, dao, books):
    for book in books:
        assert book in dao.findByName(session, book.name, 1, len(books))


def test_find_books_by_approximate_title(session, dao, books):
    for book in books:
        assert book in dao.findByName(session, first_word(book.name), 1, len(books))


def test_find_books_ignoring_case(session, dao, books, randomize_case):
    for book in books:
        word = first_word(book.name)

        assert book in dao.findByName(session, word.upper(), 1, len(books))
        assert book in dao.findByName(session, word.lower(), 1, len(books))
        assert book in dao.findByName(session, randomize_case(word), 1, len(books))


def test_empty_title_returns_all_books(session, dao, books):
    assert set(dao.findByName(session, "", 1, len(books))) == set(books)


def test_non_verified_books_are_ignored_when_searching_by_name(session, dao, books):
    for book in books:
        unverify(session, Book, book.id)
        assert book not in dao.findByName(session, book.name, 1, len(books))


def test_insert_books(session, dao, books):
    for book in books:
        inserted = Book(book.name, book.release_date)
        dao.save(session, inserted)

        assert inserted.id is not None
        assert session.get(Book, inserted.id) == inserted


def test_insert_keeps_the_verified_flag(session, dao, books):
    hidden = dao.insert(session, Book("Radio Free Albemuth", date(1985, 1, 1)))
    shown = dao.insert(session, Book("Radio Free Albemuth", date(1985, 1, 1), verified=True))

    assert hidden.verified is False
    assert shown.verified is True
    assert dao.findByName(session, "albemuth", 1, 10) == [shown]


def test_update_books(session, dao, books):
    for b in books:
        book = session.get(Book, b.id)
        book.verified = not book.verified

        dao.save(session, book)

        found = session.get(Book, book.id)
        assert found.verified == book.verified


def test_update_renames_a_book(session, dao, books):
    book = books[0]
    book.name = "Renamed"
    dao.update(session, book)

    session.expire_all()
    assert session.get(Book, book.id).name == "Renamed"


def test_inserting_an_already_inserted_book_fails(session, dao, books):
    with pytest.raises(EntityExistsError):
        dao.insert(session, books[0])


def test_already_inserted_error_is_a_persistence_error(session, dao, books):
    with pytest.raises(PersistenceError):
        dao.insert(session, books[0])


def test_duplicate_primary_key_is_rejected_by_the_database(session, dao, books):
    duplicate = Book("Duplicate", date(2000, 1, 1))
    duplicate.id = books[0].id
    session.expunge_all()

    with pytest.raises(SQLAlchemyError):
        dao.insert(session, duplicate)

    assert dao.countByName(session, "") == len(books)


def test_updating_a_never_inserted_book_fails(session, dao, books):
    with pytest.raises(EntityNotFoundError):
        dao.update(session, Book("Nowhere", date(2000, 1, 1)))


def test_updating_an_unknown_id_fails(session, dao, books):
    ghost = Book("Ghost", date(2000, 1, 1))
    ghost.id = 10_000

    with pytest.raises(EntityNotFoundError):
        dao.update(session, ghost)


def test_writing_another_type_is_rejected(session, dao, books):
    with pytest.raises(TypeError):
        dao.insert(session, Movie("Blade Runner", date(1982, 6, 25)))


def test_find_latest_books(session, dao, books):
    assert set(dao.findLatest(session, len(books))) == set(books)


def test_find_latest_is_ordered_by_release_date(session, dao, books):
    dates = [b.release_date for b in dao.findLatest(session, len(books))]
    assert dates == sorted(dates, reverse=True)


def test_count_with_empty_name(session, dao, books):
    assert dao.countByName(session, "") == len(books)


def test_count_with_a_name(session, dao, books):
    for book in books:
        word = first_word(book.name)
        assert dao.countByName(session, word) == count_containing(books, word)


def test_paginate_results_when_searching_by_name(session, dao, books):
    found = []
    for page in range(1, len(books) + 1):
        found.extend(dao.findByName(session, "", page, 1))

    assert len(found) == len(books)
    assert set(found) == set(books)


def test_book_dao_ignores_other_types(session, dao, books):
    seed(session, [Movie("A Scanner Darkly", date(2006, 7, 7))])

    assert dao.countByName(session, "") == len(books)
    assert all(isinstance(b, Book) for b in dao.findLatest(session, len(books) + 1))

"""Shared helpers for tests (seed collections, seeding, moderation)."""

from datetime import date

from sqlalchemy.orm import Session

from media_catalog.database.entities.articles import Book, Comic, Movie, MusicStorage


def lone_wolf_and_cub():
    return [
        Comic("Kozure Ōkami", date(1970, 1, 1)),
        Movie("Kowokashi udekashi tsukamatsuru", date(1972, 4, 1)),
        Movie("Sanzu no kawa no ubaguruma", date(1972, 6, 1)),
        Movie("Shogun Assassin", date(1980, 11, 11)),
        MusicStorage("Liquid Swords", date(1995, 11, 7)),
    ]


def asoiaf():
    return [
        Book("A Game of Thrones", date(1996, 8, 6)),
        Book("A Clash of Kings", date(1998, 11, 16)),
        Book("A Storm of Words", date(2000, 8, 8)),
        Book("A Fest for Crows", date(2005, 10, 17)),
    ]


def pkdick():
    return [
        Book("The Man in the High Castle", date(1962, 1, 1)),
        Book("Do Androids Dream of Electric Sheep?", date(1968, 1, 1)),
        Book("Ubik", date(1969, 1, 1)),
        Book("A Scanner Darkly", date(1977, 1, 1)),
        Book("VALIS", date(1981, 1, 1)),
        Book("The Divine Invasion", date(1981, 1, 1)),
        Book("The Owl in Daylight", date(1982, 1, 1)),
    ]


def odyssey():
    return [
        Book("2001: A Space Odyssey", date(1968, 1, 1)),
        Book("2010: Odyssey Two", date(1982, 1, 1)),
        Book("2061: Odyssey Three", date(1987, 1, 1)),
        Book("3001: The Final Odyssey", date(1997, 1, 1)),
    ]


BOOK_SETS = {"asoiaf": asoiaf, "pkdick": pkdick, "odyssey": odyssey}


def seed(session: Session, articles):
    """Store ``articles`` as verified rows, the way a moderator would."""
    for article in articles:
        article.verified = True
        if article.id is None:
            session.add(article)
        else:
            session.merge(article)
    session.commit()
    return articles


def unverify(session: Session, article_type, article_id: int) -> None:
    article = session.get(article_type, article_id)
    article.verified = False
    session.merge(article)
    session.commit()


def first_word(name: str) -> str:
    return name.split()[0]


def count_containing(articles, word: str) -> int:
    return sum(1 for a in articles if word.lower() in a.name.lower())

"""
Article ORM Models
==================

The ``Article`` hierarchy represents every item of the media catalog. All
variants share one ``article`` table and are told apart by the
``article_type`` discriminator column (single-table inheritance).

Variants
~~~~~~~~
- ``Book``          (``article_type = "book"``)
- ``Comic``         (``article_type = "comic"``)
- ``Movie``         (``article_type = "movie"``)
- ``MusicStorage``  (``article_type = "music_storage"``)

Key features
~~~~~~~~~~~~
- Integer surrogate primary key (``id``), assigned by the database on insert
- Human-readable ``name`` used by catalog search
- Calendar ``release_date`` used to order the latest additions
- Moderation flag ``verified``: unverified rows are hidden from searches

``Article`` itself has no polymorphic identity: rows always load as one of the
concrete variants, and constructing a bare ``Article`` raises ``TypeError``.
"""

from datetime import date

from sqlalchemy import Boolean, Date, Integer, VARCHAR
from sqlalchemy.orm import Mapped, mapped_column

from media_catalog.database.config.connection_engine import declarativeBase


class Article(declarativeBase):
    """
    ORM model for the `article` table.
    Base of every catalog item; only its variants can be instantiated.

    Attributes
    ----------
    id : int | None
        Primary key. ``None`` until the row is inserted.
    name : str
        Title of the article (max 255 chars).
    release_date : date
        Date the article was released.
    verified : bool
        Whether a moderator approved the article. Defaults to False.
    article_type : str
        Discriminator naming the concrete variant.
    """

    __tablename__ = "article"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    """Primary key. Surrogate identifier assigned on insert."""

    name: Mapped[str] = mapped_column(
        VARCHAR(255), nullable=False, index=True
    )
    """Title of the article."""

    release_date: Mapped[date] = mapped_column(
        Date, nullable=False, index=True
    )
    """Release date of the article."""

    verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    """Moderation flag. Unverified articles are invisible to searches."""

    article_type: Mapped[str] = mapped_column(
        VARCHAR(32), nullable=False
    )
    """Discriminator column holding the variant identity."""

    __mapper_args__ = {"polymorphic_on": "article_type"}

    def __init__(self, name: str, release_date, verified: bool = False):
        """
        Initialize a new article variant.

        Parameters
        ----------
        name : str
            Title of the article.
        release_date : date | str
            Release date. Accepts a date or an ISO8601 string.
        verified : bool, optional
            Initial moderation flag (default is False).

        Raises
        ------
        TypeError
            If called on ``Article`` itself instead of a variant.
        """
        if type(self) is Article:
            raise TypeError(
                "Article cannot be instantiated, use Book, Comic, Movie or MusicStorage."
            )
        self.name = name
        self.verified = verified
        if isinstance(release_date, str):
            self.release_date = date.fromisoformat(release_date)
        else:
            self.release_date = release_date

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (
            self.id == other.id
            and self.name == other.name
            and self.release_date == other.release_date
            and self.verified == other.verified
        )

    def __hash__(self) -> int:
        """
        Hash on type and primary key only.

        Stable once the article is inserted, whatever else changes. The id is
        assigned on insert, so do not put unsaved articles in sets or dict keys.
        """
        return hash((type(self).__name__, self.id))

    def __str__(self) -> str:
        """
        Return a human-readable string representation of the article.

        Returns
        -------
        str
            A formatted string containing type, ID, name, release date and verification flag.
        """
        return (
            f"{type(self).__name__}: id:{self.id}, "
            f"name: {self.name}, "
            f"release_date: {self.release_date}, "
            f"verified: {self.verified}"
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} name={self.name!r}>"


class Book(Article):
    """A printed or electronic book."""

    __mapper_args__ = {"polymorphic_identity": "book"}


class Comic(Article):
    """A comic book, manga or graphic novel."""

    __mapper_args__ = {"polymorphic_identity": "comic"}


class Movie(Article):
    """A feature film."""

    __mapper_args__ = {"polymorphic_identity": "movie"}


class MusicStorage(Article):
    """A music release on any physical or digital storage (album, single, ...)."""

    __mapper_args__ = {"polymorphic_identity": "music_storage"}

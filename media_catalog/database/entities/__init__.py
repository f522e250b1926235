"""
Entities Package: SQLAlchemy 2.0 ORM Models
===========================================

The `entities` package maps the `article` table to Python classes using
SQLAlchemy 2.0 typed mappings (`Mapped[...]` + `mapped_column(...)`).

Contents
--------
- Article
    Polymorphic-abstract base of every catalog item.
    * Fields: `id` (int PK), `name`, `release_date`, `verified`, `article_type`
- Book, Comic, Movie, MusicStorage
    Concrete variants stored in the same table, told apart by `article_type`.
"""

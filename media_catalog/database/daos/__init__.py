"""
DAOs Package: Data Access Layer (SQLAlchemy 2.0)
================================================

Conventions
-----------
- Every method takes an active SQLAlchemy `Session` as its first argument
- Writes flush and commit the given session; reads never write
- DAOs log and re-raise exceptions so upper layers decide error policy

Contents
--------
- ArticleBaseDao
    Generic contract: findByName, countByName, findLatest, findById,
    insert, update, save
- ArticleDao
    Read-only search across every article type; writes raise
    `UnsupportedOperationError`
- BookDao, ComicDao, MovieDao, MusicStorageDao
    Full contract for one article type each
"""

from media_catalog.database.daos.article_base_dao import ArticleBaseDao
from media_catalog.database.entities.articles import MusicStorage


class MusicStorageDao(ArticleBaseDao[MusicStorage]):
    """Data Access Object (DAO) for `MusicStorage` entities (albums, singles, ...)."""

    entity = MusicStorage

"""
The `media_catalog` package holds the data layer of the media-catalog
application: books, comics, movies and music storages, searchable by name.
"""

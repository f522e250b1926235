"""
The `core` package exposes transactional service functions (search, latest,
create, moderate) built on top of the DAOs.
"""

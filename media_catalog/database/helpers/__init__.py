"""
The `helpers` package provides utilities that support database operations.

Contents
--------
- transactionManagement
    `SessionFactory`, the `session_scope()` context manager and the
    `@transactional` decorator
- exceptions
    `PersistenceError`, `EntityExistsError`, `EntityNotFoundError` and
    `UnsupportedOperationError`
"""

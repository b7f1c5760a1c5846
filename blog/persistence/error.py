"""Persistence layer errors."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError


class PersistenceError(Exception):
    """Base persistence error."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(message)


class StoreError(PersistenceError):
    """A query failed in the store (connectivity, execution, constraint)."""

    def __init__(self, operation: str):
        super().__init__(operation, f"Store error during {operation}")


class PoolExhaustedError(PersistenceError):
    """No pooled connection became available within the pool timeout."""

    def __init__(self, operation: str):
        super().__init__(operation, f"No database connection available for {operation}")


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy errors raised inside the block.

    The SQLAlchemy exception is kept as __cause__.

    Args:
        operation: Name of the query being run, used in logs and messages

    Raises:
        PoolExhaustedError: If acquiring a connection timed out
        StoreError: For any other SQLAlchemy error
    """
    try:
        yield
    except PoolTimeoutError as e:
        raise PoolExhaustedError(operation) from e
    except SQLAlchemyError as e:
        raise StoreError(operation) from e

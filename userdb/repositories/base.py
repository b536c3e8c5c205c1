"""Repository contract shared by every record type."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class StorageFailure(Exception):
    """Raised when the storage layer cannot complete a request."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        self.operation = operation
        super().__init__(message or f"{operation} failed")


def require_id(value):
    if value is None:
        raise ValueError("id must not be None")
    return value


class CrudRepository(ABC, Generic[T, ID]):
    """
    Create/read/delete access to records of one type keyed by a unique id.

    Absence is never an error: lookups return ``None`` and deleting an
    unknown id does nothing. Anything the storage layer cannot complete
    surfaces as ``StorageFailure``; implementations do not retry.
    """

    @abstractmethod
    def save(self, record) -> T:
        """Insert a record without id, or upsert one that carries an id."""

    @abstractmethod
    def find_by_id(self, id: ID) -> Optional[T]:
        ...

    @abstractmethod
    def find_all(self) -> list[T]:
        """All persisted records, in whatever order the store returns them."""

    @abstractmethod
    def delete_by_id(self, id: ID) -> None:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    def exists_by_id(self, id: ID) -> bool:
        return self.find_by_id(id) is not None

    def delete(self, record: T) -> None:
        self.delete_by_id(require_id(getattr(record, "id", None)))

    def delete_all(self) -> None:
        for record in self.find_all():
            self.delete(record)

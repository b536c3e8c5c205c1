"""
Persistence adapters.

Callers depend on the CrudRepository interface; SQLUserRepository is the
SQLAlchemy-backed implementation for users.
"""

from .base import CrudRepository, StorageFailure
from .sql_repository import SQLUserRepository

__all__ = ["CrudRepository", "StorageFailure", "SQLUserRepository"]

"""User data access backed by SQLAlchemy."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from userdb.core.logging import get_logger
from userdb.db.models import UserRow
from userdb.db.session import get_session
from userdb.domain.users import NewUser, User, UserRecord
from userdb.repositories.base import CrudRepository, StorageFailure, require_id

logger = get_logger(__name__)

# drivers cannot bind ids outside the signed 64-bit range, so no row can carry one
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _row_to_user(row: UserRow) -> User:
    return User(id=row.id, name=row.name, email=row.email)


def _storable(id: int) -> bool:
    return _MIN_ID <= id <= _MAX_ID


class SQLUserRepository(CrudRepository[User, int]):
    """CRUD operations on the users table, one session per call."""

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        with get_session() as session:
            try:
                yield session
            except (SQLAlchemyError, OverflowError) as exc:
                session.rollback()
                logger.error(f"{operation} failed: {exc}")
                raise StorageFailure(operation, f"{operation} failed: {exc.__class__.__name__}") from exc

    def save(self, record: UserRecord) -> User:
        if isinstance(record, NewUser):
            return self._insert(record)
        if isinstance(record, User):
            return self._upsert(record)
        raise TypeError(f"cannot save {type(record).__name__}")

    def _insert(self, record: NewUser) -> User:
        with self._session("save") as session:
            row = UserRow(name=record.name, email=record.email)
            session.add(row)
            session.commit()
            session.refresh(row)
            logger.debug(f"Inserted user {row.id}")
            return _row_to_user(row)

    def _upsert(self, record: User) -> User:
        with self._session("save") as session:
            row = session.merge(UserRow(id=record.id, name=record.name, email=record.email))
            session.commit()
            session.refresh(row)
            logger.debug(f"Saved user {row.id}")
            return _row_to_user(row)

    def find_by_id(self, id: int) -> Optional[User]:
        require_id(id)
        if not _storable(id):
            return None
        with self._session("find_by_id") as session:
            row = session.get(UserRow, id)
            return _row_to_user(row) if row else None

    def find_all(self) -> list[User]:
        with self._session("find_all") as session:
            rows = session.execute(select(UserRow)).scalars().all()
            return [_row_to_user(row) for row in rows]

    def delete_by_id(self, id: int) -> None:
        require_id(id)
        if not _storable(id):
            return
        with self._session("delete_by_id") as session:
            result = session.execute(delete(UserRow).where(UserRow.id == id))
            session.commit()
            logger.debug(f"Deleted user {id} ({result.rowcount} row(s))")

    def exists_by_id(self, id: int) -> bool:
        require_id(id)
        if not _storable(id):
            return False
        with self._session("exists_by_id") as session:
            stmt = select(UserRow.id).where(UserRow.id == id).limit(1)
            return session.execute(stmt).first() is not None

    def count(self) -> int:
        with self._session("count") as session:
            return int(session.execute(select(func.count()).select_from(UserRow)).scalar_one())

    def delete_all(self) -> None:
        with self._session("delete_all") as session:
            session.execute(delete(UserRow))
            session.commit()

"""SQLAlchemy models for the users table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class UserRow(Base):
    __tablename__ = "users"
    # ids apagados nunca sao reutilizados no SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # sem unique: nenhuma regra de unicidade/formato para email
    email = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"UserRow(id={self.id!r}, name={self.name!r}, email={self.email!r})"

"""
User records.

A record that was never persisted is a ``NewUser`` and has no identifier;
once the storage layer assigns one it becomes a ``User``. ``save`` picks
insert or upsert from the variant it receives.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union


@dataclass(frozen=True)
class NewUser:
    name: str
    email: str

    def with_id(self, id: int) -> "User":
        return User(id=id, name=self.name, email=self.email)


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str

    def renamed(self, *, name: str | None = None, email: str | None = None) -> "User":
        """Copy with new name/email; the id never changes."""
        changes = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email
        return replace(self, **changes)


UserRecord = Union[NewUser, User]

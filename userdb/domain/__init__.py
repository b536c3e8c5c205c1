"""Plain domain records, independent of the storage layer."""

from .users import NewUser, User, UserRecord

__all__ = ["NewUser", "User", "UserRecord"]

"""userdb: a generic record repository for users over SQLAlchemy."""

__version__ = "0.1.0"

"""Entry point for the userdb HTTP API."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from userdb import __version__
from userdb.core.logging import configure_logging, get_logger
from userdb.repositories.base import CrudRepository, StorageFailure
from userdb.repositories.sql_repository import SQLUserRepository
from userdb.routers import users as users_router

logger = get_logger(__name__)


def _storage_failure_handler(request: Request, exc: StorageFailure) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse({"detail": "storage unavailable"}, status_code=503)


def create_app(repository: CrudRepository | None = None) -> FastAPI:
    configure_logging()
    app = FastAPI(title="userdb API", version=__version__)
    app.state.user_repository = repository or SQLUserRepository()
    app.add_exception_handler(StorageFailure, _storage_failure_handler)
    app.include_router(users_router.router)
    return app

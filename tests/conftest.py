from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote userdb seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userdb.core import config as core_config  # noqa: E402
from userdb.db import create_tables  # noqa: E402
from userdb.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e garante teardown completo para não deixar o arquivo bloqueado no Windows."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _clear_caches()

    engine = db_session.get_engine()
    create_tables.drop_all()
    create_tables.create_all()

    yield db_file

    try:
        create_tables.drop_all()
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()
    if db_file.exists():
        try:
            db_file.unlink()
        except Exception:
            pass

from __future__ import annotations

import sys

import pytest

from userdb.cli import main, run
from userdb.core import config as core_config
from userdb.db.models import UserRow
from userdb.db import session as db_session
from userdb.db.session import get_engine


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


def test_add_get_list_delete(temp_db, capsys):
    assert run(["add", "--name", "Alice", "--email", "alice@example.com"]) == 0
    line = capsys.readouterr().out.strip()
    user_id, name, email = line.split("\t")
    assert (name, email) == ("Alice", "alice@example.com")

    assert run(["get", user_id]) == 0
    assert capsys.readouterr().out.strip() == line

    assert run(["list"]) == 0
    assert capsys.readouterr().out.strip().splitlines() == [line]

    assert run(["delete", user_id]) == 0
    capsys.readouterr()
    assert run(["get", user_id]) == 1
    assert "not found" in capsys.readouterr().err


def test_init_db_is_repeatable(temp_db, capsys):
    assert run(["init-db"]) == 0
    assert run(["init-db"]) == 0
    assert "users table created" in capsys.readouterr().out


def test_main_exits_with_status_code(temp_db, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["userdb", "list"])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 0


def test_main_reports_storage_failure(temp_db, monkeypatch, capsys):
    UserRow.__table__.drop(bind=get_engine())
    monkeypatch.setattr(sys, "argv", ["userdb", "list"])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1
    assert "Error: find_all failed" in capsys.readouterr().err


def test_main_reports_missing_database_url(monkeypatch, capsys):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr(sys, "argv", ["userdb", "get", "1"])
    _clear_caches()
    try:
        with pytest.raises(SystemExit) as excinfo:
            main()
    finally:
        _clear_caches()
    assert excinfo.value.code == 1
    assert "DATABASE_URL must be configured" in capsys.readouterr().err

"""
Command line access to the users table.

Usage:
  userdb init-db
  userdb add --name Alice --email alice@example.com
  userdb get 1
  userdb list
  userdb delete 1
"""
from __future__ import annotations

import argparse
import sys

from userdb.core.logging import configure_logging
from userdb.db.create_tables import create_all
from userdb.domain.users import NewUser, User
from userdb.repositories.sql_repository import SQLUserRepository


def _format(user: User) -> str:
    return f"{user.id}\t{user.name}\t{user.email}"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="userdb", description="Manage users stored in DATABASE_URL")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("init-db", help="Create the users table")
    add = sub.add_parser("add", help="Insert a new user")
    add.add_argument("--name", required=True)
    add.add_argument("--email", required=True)
    get = sub.add_parser("get", help="Show one user")
    get.add_argument("id", type=int)
    sub.add_parser("list", help="Show every user")
    rm = sub.add_parser("delete", help="Delete a user (no-op if missing)")
    rm.add_argument("id", type=int)
    return ap


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    repo = SQLUserRepository()
    if args.command == "init-db":
        create_all()
        print("OK: users table created")
    elif args.command == "add":
        print(_format(repo.save(NewUser(name=args.name, email=args.email))))
    elif args.command == "get":
        user = repo.find_by_id(args.id)
        if not user:
            sys.stderr.write(f"User {args.id} not found\n")
            return 1
        print(_format(user))
    elif args.command == "list":
        for user in repo.find_all():
            print(_format(user))
    elif args.command == "delete":
        repo.delete_by_id(args.id)
        print(f"OK: user {args.id} deleted")
    return 0


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    try:
        code = run(argv)
    except Exception as exc:
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
    raise SystemExit(code)


if __name__ == "__main__":
    main()

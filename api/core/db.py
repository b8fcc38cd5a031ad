"""
Database access helpers (raw SQL) over a single SQLite file.

`Database` owns a SQLAlchemy engine and its connection pool. FastAPI opens it
on startup and closes it on shutdown (see `api/main.py`); request handlers
get it through `core.dependencies.get_database`.

SQL parameter style:
- statements go to the sqlite3 driver as-is: positional placeholders ?, ?, ?, ...
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

DEFAULT_DATABASE_PATH = "./fish_management.db"
DEFAULT_POOL_SIZE = 5
DEFAULT_POOL_TIMEOUT_S = 30.0


# Store failures are explicit and separable from other runtime errors.
class StoreError(RuntimeError):
    pass


@dataclass(frozen=True)
class ExecResult:
    rowcount: int
    lastrowid: int | None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_path() -> str:
    return os.environ.get("DATABASE_PATH", DEFAULT_DATABASE_PATH).strip() or DEFAULT_DATABASE_PATH


def pool_size() -> int:
    size = _env_int("DB_POOL_SIZE", DEFAULT_POOL_SIZE)
    return size if size > 0 else DEFAULT_POOL_SIZE


def _configure_sqlite(dbapi_connection: Any, _connection_record: Any) -> None:
    # Runs once per new DBAPI connection, outside any transaction.
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.execute("PRAGMA journal_mode = WAL")
    finally:
        cursor.close()


def create_sqlite_engine(
    path: str,
    *,
    size: int = DEFAULT_POOL_SIZE,
    timeout_s: float = DEFAULT_POOL_TIMEOUT_S,
) -> Engine:
    # SQLite needs check_same_thread=False: FastAPI runs sync endpoints in a threadpool.
    engine = create_engine(
        f"sqlite:///{path}",
        future=True,
        connect_args={"check_same_thread": False},
        pool_size=max(1, size),
        max_overflow=0,
        pool_timeout=timeout_s,
    )
    event.listen(engine, "connect", _configure_sqlite)
    return engine


def _run(conn: Connection, sql: str, args: tuple[Any, ...]):
    if args:
        return conn.exec_driver_sql(sql, args)
    return conn.exec_driver_sql(sql)


class Database:
    def __init__(
        self,
        path: str | Path,
        *,
        size: int = DEFAULT_POOL_SIZE,
        timeout_s: float = DEFAULT_POOL_TIMEOUT_S,
    ) -> None:
        self._path = str(path)
        self._engine = create_sqlite_engine(self._path, size=size, timeout_s=timeout_s)
        self._closed = False

    @property
    def path(self) -> str:
        return self._path

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def connection(self, *, begin: bool = False) -> Iterator[Connection]:
        """
        Borrow a pooled connection; with `begin=True` the block runs in one
        transaction that commits on exit.
        """
        if self._closed:
            raise StoreError("Database is closed.")
        try:
            with (self._engine.begin() if begin else self._engine.connect()) as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        with self.connection() as conn:
            row = _run(conn, sql, args).mappings().fetchone()
        return dict(row) if row is not None else None

    def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        with self.connection() as conn:
            rows = _run(conn, sql, args).mappings().fetchall()
        return [dict(r) for r in rows]

    def execute(self, sql: str, *args: Any) -> ExecResult:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) in its own transaction.
        """
        with self.connection(begin=True) as conn:
            result = _run(conn, sql, args)
            rowcount, lastrowid = result.rowcount, result.lastrowid
        return ExecResult(rowcount=rowcount, lastrowid=lastrowid)

    def ping(self) -> bool:
        try:
            return self.fetch_one("SELECT 1 AS ok") is not None
        except StoreError:
            return False

    def close(self) -> None:
        # Borrowed connections finish their statement and are discarded on return.
        if self._closed:
            return None
        self._closed = True
        self._engine.dispose()


def open_database() -> Database:
    return Database(database_path(), size=pool_size())

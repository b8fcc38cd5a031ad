"""
Idempotent table creation.

Tables are only ever created if missing; existing data is never dropped or
migrated. A failure here is fatal: the lifespan re-raises and the server
does not start.
"""

from __future__ import annotations

import logging

from . import db

logger = logging.getLogger(__name__)


class SchemaError(RuntimeError):
    pass


FISH_PROFILES_TABLE = """
CREATE TABLE IF NOT EXISTS fish_profiles (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    variety TEXT NOT NULL,
    color TEXT NOT NULL,
    age TEXT NOT NULL,
    health_status TEXT NOT NULL,
    last_health_check TEXT NOT NULL,
    notes TEXT,
    tank_id TEXT NOT NULL
)
"""

# fish_id cascades: deleting a fish removes its schedules (requires
# PRAGMA foreign_keys = ON, set per connection in core.db).
FEEDING_SCHEDULES_TABLE = """
CREATE TABLE IF NOT EXISTS feeding_schedules (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    time TEXT NOT NULL,
    food_type TEXT NOT NULL,
    fish_id INTEGER NOT NULL,
    FOREIGN KEY (fish_id) REFERENCES fish_profiles(id) ON DELETE CASCADE
)
"""

TABLES: tuple[tuple[str, str], ...] = (
    ("fish_profiles", FISH_PROFILES_TABLE),
    ("feeding_schedules", FEEDING_SCHEDULES_TABLE),
)


def init_schema(database: db.Database) -> None:
    logger.info("schema_init path=%s", database.path)
    for table, ddl in TABLES:
        try:
            database.execute(ddl)
        except db.StoreError as exc:
            logger.critical("schema_init_failed table=%s error=%s", table, exc)
            raise SchemaError(f"Failed to create {table} table: {exc}") from exc
    logger.info("schema_init_done tables=%s", ",".join(t for t, _ in TABLES))

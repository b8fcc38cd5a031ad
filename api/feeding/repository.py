"""
Feeding schedule persistence (raw SQL).

Reads by schedule id and the full listing join fish_profiles (inner join) to
add the fish name; a schedule whose fish row is missing is not returned by
those reads. `get_by_fish_id` does not join.
"""

from __future__ import annotations

from typing import Any

from core import db

_JOINED_SELECT = """
    SELECT
      fs.id,
      fs.time,
      fs.food_type,
      fs.fish_id,
      fp.name AS fish_name
    FROM feeding_schedules fs
    JOIN fish_profiles fp ON fs.fish_id = fp.id
"""


def create(database: db.Database, *, time: str, food_type: str, fish_id: int) -> int:
    """
    Insert a schedule and return its id.
    An unknown fish_id is rejected by the foreign key, not checked here.
    """
    result = database.execute(
        """
        INSERT INTO feeding_schedules (time, food_type, fish_id)
        VALUES (?, ?, ?)
        """,
        time,
        food_type,
        fish_id,
    )
    if result.lastrowid is None:
        raise db.StoreError("Insert into feeding_schedules returned no row id.")
    return int(result.lastrowid)


def get_by_id(database: db.Database, schedule_id: int) -> dict[str, Any] | None:
    return database.fetch_one(
        _JOINED_SELECT
        + """
    WHERE fs.id = ?
    """,
        schedule_id,
    )


def get_all(database: db.Database) -> list[dict[str, Any]]:
    return database.fetch_all(_JOINED_SELECT)


def get_by_fish_id(database: db.Database, fish_id: int) -> list[dict[str, Any]]:
    return database.fetch_all(
        """
        SELECT id, time, food_type, fish_id
        FROM feeding_schedules
        WHERE fish_id = ?
        """,
        fish_id,
    )


def update(
    database: db.Database,
    schedule_id: int,
    *,
    time: str,
    food_type: str,
    fish_id: int,
) -> bool:
    result = database.execute(
        """
        UPDATE feeding_schedules
        SET time = ?, food_type = ?, fish_id = ?
        WHERE id = ?
        """,
        time,
        food_type,
        fish_id,
        schedule_id,
    )
    return result.rowcount > 0


def delete(database: db.Database, schedule_id: int) -> bool:
    result = database.execute("DELETE FROM feeding_schedules WHERE id = ?", schedule_id)
    return result.rowcount > 0

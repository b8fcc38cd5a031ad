"""
Fish profile persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

_COLUMNS = "id, name, variety, color, age, health_status, last_health_check, notes, tank_id"


def create(
    database: db.Database,
    *,
    name: str,
    variety: str,
    color: str,
    age: str,
    health_status: str,
    last_health_check: str,
    notes: str,
    tank_id: str,
) -> int:
    """
    Insert a fish profile and return the id assigned by the store.
    """
    result = database.execute(
        """
        INSERT INTO fish_profiles (name, variety, color, age, health_status, last_health_check, notes, tank_id)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        name,
        variety,
        color,
        age,
        health_status,
        last_health_check,
        notes,
        tank_id,
    )
    if result.lastrowid is None:
        raise db.StoreError("Insert into fish_profiles returned no row id.")
    return int(result.lastrowid)


def get_by_id(database: db.Database, fish_id: int) -> dict[str, Any] | None:
    return database.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM fish_profiles
        WHERE id = ?
        """,
        fish_id,
    )


def get_all(database: db.Database) -> list[dict[str, Any]]:
    return database.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM fish_profiles
        """
    )


def update(
    database: db.Database,
    fish_id: int,
    *,
    name: str,
    variety: str,
    color: str,
    age: str,
    health_status: str,
    last_health_check: str,
    notes: str,
    tank_id: str,
) -> bool:
    """
    Overwrite every column of one fish profile.
    Returns False when no row has this id.
    """
    result = database.execute(
        """
        UPDATE fish_profiles
        SET name = ?, variety = ?, color = ?, age = ?, health_status = ?,
            last_health_check = ?, notes = ?, tank_id = ?
        WHERE id = ?
        """,
        name,
        variety,
        color,
        age,
        health_status,
        last_health_check,
        notes,
        tank_id,
        fish_id,
    )
    return result.rowcount > 0


def delete(database: db.Database, fish_id: int) -> bool:
    """
    Delete one fish profile. Its feeding schedules go with it (ON DELETE CASCADE).
    """
    result = database.execute("DELETE FROM fish_profiles WHERE id = ?", fish_id)
    return result.rowcount > 0

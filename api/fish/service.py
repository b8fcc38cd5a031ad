"""
Fish profile business logic.

Maps repository results onto schemas and HTTP errors:
- unknown id   -> 404 "Fish not found"
- store error  -> 500 with a fixed message (detail is logged, not returned)
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import db
from core.errors import store_errors

from . import repository, schemas

logger = logging.getLogger(__name__)

NOT_FOUND = "Fish not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


def _to_fish(row: dict) -> schemas.FishProfile:
    return schemas.FishProfile(
        id=int(row["id"]),
        name=str(row["name"]),
        variety=str(row["variety"]),
        color=str(row["color"]),
        age=str(row["age"]),
        health_status=str(row["health_status"]),
        last_health_check=str(row["last_health_check"]),
        # notes is the one nullable column.
        notes=str(row["notes"] or ""),
        tank_id=str(row["tank_id"]),
    )


def create_fish(database: db.Database, payload: schemas.FishProfileIn) -> schemas.FishProfile:
    with store_errors("Failed to create fish profile", op="create_fish"):
        fish_id = repository.create(database, **payload.model_dump())
    logger.info("fish_created id=%s name=%r tank_id=%r", fish_id, payload.name, payload.tank_id)
    return schemas.FishProfile(id=fish_id, **payload.model_dump())


def get_fish(database: db.Database, fish_id: int) -> schemas.FishProfile:
    with store_errors("Failed to retrieve fish", op="get_fish", fish_id=fish_id):
        row = repository.get_by_id(database, fish_id)
    if row is None:
        raise _not_found()
    return _to_fish(row)


def list_fish(database: db.Database) -> list[schemas.FishProfile]:
    with store_errors("Failed to retrieve fish profiles", op="list_fish"):
        rows = repository.get_all(database)
    return [_to_fish(row) for row in rows]


def update_fish(
    database: db.Database,
    fish_id: int,
    payload: schemas.FishProfileIn,
) -> schemas.FishProfile:
    with store_errors("Failed to update fish profile", op="update_fish", fish_id=fish_id):
        updated = repository.update(database, fish_id, **payload.model_dump())
    if not updated:
        raise _not_found()
    logger.info("fish_updated id=%s", fish_id)
    return schemas.FishProfile(id=fish_id, **payload.model_dump())


def delete_fish(database: db.Database, fish_id: int) -> dict[str, str]:
    with store_errors("Failed to delete fish profile", op="delete_fish", fish_id=fish_id):
        deleted = repository.delete(database, fish_id)
    if not deleted:
        raise _not_found()
    logger.info("fish_deleted id=%s", fish_id)
    return {"message": "Fish profile deleted successfully"}

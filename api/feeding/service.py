"""
Feeding schedule business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import db
from core.errors import store_errors

from . import repository, schemas

logger = logging.getLogger(__name__)

NOT_FOUND = "Feeding schedule not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


def _to_schedule(row: dict) -> schemas.FeedingSchedule:
    return schemas.FeedingSchedule(
        id=int(row["id"]),
        time=str(row["time"]),
        food_type=str(row["food_type"]),
        fish_id=int(row["fish_id"]),
    )


def _to_schedule_with_fish(row: dict) -> schemas.FeedingScheduleWithFish:
    return schemas.FeedingScheduleWithFish(
        id=int(row["id"]),
        time=str(row["time"]),
        food_type=str(row["food_type"]),
        fish_id=int(row["fish_id"]),
        fish_name=str(row["fish_name"]),
    )


def create_schedule(
    database: db.Database,
    payload: schemas.FeedingScheduleIn,
) -> schemas.FeedingSchedule:
    with store_errors("Failed to create feeding schedule", op="create_schedule", fish_id=payload.fish_id):
        schedule_id = repository.create(database, **payload.model_dump())
    logger.info("feeding_schedule_created id=%s fish_id=%s", schedule_id, payload.fish_id)
    return schemas.FeedingSchedule(id=schedule_id, **payload.model_dump())


def get_schedule(database: db.Database, schedule_id: int) -> schemas.FeedingScheduleWithFish:
    with store_errors("Failed to retrieve feeding schedule", op="get_schedule", schedule_id=schedule_id):
        row = repository.get_by_id(database, schedule_id)
    # No row also covers a schedule whose fish no longer exists.
    if row is None:
        raise _not_found()
    return _to_schedule_with_fish(row)


def list_schedules(database: db.Database) -> list[schemas.FeedingScheduleWithFish]:
    with store_errors("Failed to retrieve feeding schedules", op="list_schedules"):
        rows = repository.get_all(database)
    return [_to_schedule_with_fish(row) for row in rows]


def list_schedules_for_fish(database: db.Database, fish_id: int) -> list[schemas.FeedingSchedule]:
    """
    Schedules of one fish, without `fishName`. An unknown fish gives an empty list.
    """
    with store_errors("Failed to retrieve feeding schedules", op="list_schedules_for_fish", fish_id=fish_id):
        rows = repository.get_by_fish_id(database, fish_id)
    return [_to_schedule(row) for row in rows]


def update_schedule(
    database: db.Database,
    schedule_id: int,
    payload: schemas.FeedingScheduleIn,
) -> schemas.FeedingSchedule:
    with store_errors("Failed to update feeding schedule", op="update_schedule", schedule_id=schedule_id):
        updated = repository.update(database, schedule_id, **payload.model_dump())
    if not updated:
        raise _not_found()
    logger.info("feeding_schedule_updated id=%s fish_id=%s", schedule_id, payload.fish_id)
    return schemas.FeedingSchedule(id=schedule_id, **payload.model_dump())


def delete_schedule(database: db.Database, schedule_id: int) -> dict[str, str]:
    with store_errors("Failed to delete feeding schedule", op="delete_schedule", schedule_id=schedule_id):
        deleted = repository.delete(database, schedule_id)
    if not deleted:
        raise _not_found()
    logger.info("feeding_schedule_deleted id=%s", schedule_id)
    return {"message": "Feeding schedule deleted successfully"}

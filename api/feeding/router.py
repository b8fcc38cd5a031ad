"""
Feeding schedule API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core import db
from core.dependencies import get_database

from . import schemas, service

router = APIRouter(prefix="/feeding-schedules")


@router.post("", response_model=schemas.FeedingSchedule, status_code=status.HTTP_201_CREATED)
def create_schedule(
    payload: schemas.FeedingScheduleIn,
    database: db.Database = Depends(get_database),
) -> schemas.FeedingSchedule:
    return service.create_schedule(database, payload)


@router.get("", response_model=list[schemas.FeedingScheduleWithFish])
def list_schedules(
    database: db.Database = Depends(get_database),
) -> list[schemas.FeedingScheduleWithFish]:
    return service.list_schedules(database)


@router.get("/fish/{fish_id}", response_model=list[schemas.FeedingSchedule])
def list_schedules_for_fish(
    fish_id: int,
    database: db.Database = Depends(get_database),
) -> list[schemas.FeedingSchedule]:
    return service.list_schedules_for_fish(database, fish_id)


@router.get("/{schedule_id}", response_model=schemas.FeedingScheduleWithFish)
def get_schedule(
    schedule_id: int,
    database: db.Database = Depends(get_database),
) -> schemas.FeedingScheduleWithFish:
    return service.get_schedule(database, schedule_id)


@router.put("/{schedule_id}", response_model=schemas.FeedingSchedule)
def update_schedule(
    schedule_id: int,
    payload: schemas.FeedingScheduleIn,
    database: db.Database = Depends(get_database),
) -> schemas.FeedingSchedule:
    return service.update_schedule(database, schedule_id, payload)


@router.delete("/{schedule_id}")
def delete_schedule(
    schedule_id: int,
    database: db.Database = Depends(get_database),
) -> dict:
    return service.delete_schedule(database, schedule_id)

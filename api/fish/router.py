"""
Fish profile API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core import db
from core.dependencies import get_database

from . import schemas, service

router = APIRouter(prefix="/fish")


@router.post("", response_model=schemas.FishProfile, status_code=status.HTTP_201_CREATED)
def create_fish(
    payload: schemas.FishProfileIn,
    database: db.Database = Depends(get_database),
) -> schemas.FishProfile:
    return service.create_fish(database, payload)


@router.get("", response_model=list[schemas.FishProfile])
def list_fish(database: db.Database = Depends(get_database)) -> list[schemas.FishProfile]:
    return service.list_fish(database)


@router.get("/{fish_id}", response_model=schemas.FishProfile)
def get_fish(
    fish_id: int,
    database: db.Database = Depends(get_database),
) -> schemas.FishProfile:
    return service.get_fish(database, fish_id)


@router.put("/{fish_id}", response_model=schemas.FishProfile)
def update_fish(
    fish_id: int,
    payload: schemas.FishProfileIn,
    database: db.Database = Depends(get_database),
) -> schemas.FishProfile:
    return service.update_fish(database, fish_id, payload)


@router.delete("/{fish_id}")
def delete_fish(
    fish_id: int,
    database: db.Database = Depends(get_database),
) -> dict:
    """
    Delete a fish profile. Its feeding schedules are removed by the store.
    """
    return service.delete_fish(database, fish_id)

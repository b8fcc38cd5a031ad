"""
Pydantic schemas for feeding schedule endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FeedingScheduleIn(BaseModel):
    time: str = ""
    food_type: str = Field(default="", alias="foodType")
    fish_id: int = Field(default=0, alias="fishId")


class FeedingSchedule(FeedingScheduleIn):
    model_config = ConfigDict(populate_by_name=True)

    id: int


class FeedingScheduleWithFish(FeedingSchedule):
    """
    Read-side shape: joined with fish_profiles. `fishName` is never persisted.
    """

    fish_name: str = Field(alias="fishName")

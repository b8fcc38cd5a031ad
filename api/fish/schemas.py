"""
Pydantic schemas for fish profile endpoints.

Request bodies are camelCase only (`healthStatus`, `tankId`, ...). Response
models also accept the snake_case attribute names so services can build them
from rows.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FishProfileIn(BaseModel):
    name: str = ""
    variety: str = ""
    color: str = ""
    age: str = ""
    health_status: str = Field(default="", alias="healthStatus")
    last_health_check: str = Field(default="", alias="lastHealthCheck")
    notes: str | None = ""
    tank_id: str = Field(default="", alias="tankId")

    @field_validator("notes")
    @classmethod
    def _null_notes_are_empty(cls, value: str | None) -> str:
        return value or ""


class FishProfile(FishProfileIn):
    model_config = ConfigDict(populate_by_name=True)

    id: int

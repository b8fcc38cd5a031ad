"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Request

from . import db


def get_database(request: Request) -> db.Database:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialized. It is opened in the app lifespan.")
    return database

"""
Error responses.

Every failure leaves the API as `{"error": "<message>"}`:
- malformed input   -> 400 with the decode message
- missing rows      -> 404 with a fixed message (raised by feature services)
- store failures    -> 500 with a fixed message; driver detail is only logged
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import db

logger = logging.getLogger(__name__)

# Path parameters that fail to parse get a fixed message instead of pydantic's.
PATH_PARAM_MESSAGES = {
    "fish_id": "Invalid fish ID",
    "schedule_id": "Invalid schedule ID",
}


@contextmanager
def store_errors(message: str, **context: Any) -> Iterator[None]:
    """
    Turn a `StoreError` into a generic 500 after logging the full detail.
    """
    try:
        yield
    except db.StoreError as exc:
        details = " ".join(f"{k}={v}" for k, v in context.items())
        logger.exception("store_failure message=%r %s", message, details)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        ) from exc


def _format_location(loc: tuple[Any, ...] | list[Any]) -> str:
    # Drop the leading "body"/"path" marker.
    return ".".join(str(part) for part in list(loc)[1:])


def validation_message(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        if len(loc) >= 2 and loc[0] == "path" and loc[1] in PATH_PARAM_MESSAGES:
            return PATH_PARAM_MESSAGES[loc[1]]
        where = _format_location(loc)
        msg = str(error.get("msg") or "Invalid request")
        parts.append(f"{where}: {msg}" if where else msg)
    return "; ".join(parts) or "Invalid request body."


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": validation_message(exc)},
    )


def install(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

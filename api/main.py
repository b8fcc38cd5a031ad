import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, status
from fastapi.responses import JSONResponse

from core import db, errors, schema
from core.cors import PreflightCORSMiddleware
from core.dependencies import get_database
from core.logs import configure_logging
from feeding import router as feeding_router
from fish import router as fish_router

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # One store handle per process; schema errors abort startup.
    database = db.open_database()
    try:
        schema.init_schema(database)
        app.state.database = database
        logger.info("database_ready path=%s", database.path)
        yield
    finally:
        app.state.database = None
        database.close()
        logger.info("database_closed path=%s", database.path)


app = FastAPI(lifespan=lifespan)

# Any origin may call the API from a browser; OPTIONS gets an empty 204.
app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

errors.install(app)

health_router = APIRouter()


@health_router.get("/health")
def health(database: db.Database = Depends(get_database)) -> JSONResponse:
    connected = database.ping()
    return JSONResponse(
        status_code=status.HTTP_200_OK if connected else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if connected else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "connected" if connected else "disconnected",
        },
    )


app.include_router(health_router, prefix=API_PREFIX, tags=["health"])
app.include_router(fish_router.router, prefix=API_PREFIX, tags=["fish"])
app.include_router(feeding_router.router, prefix=API_PREFIX, tags=["feeding-schedules"])


def api_host() -> str:
    return os.environ.get("API_HOST", "0.0.0.0").strip() or "0.0.0.0"


def api_port() -> int:
    raw = os.environ.get("API_PORT", "").strip()
    try:
        return int(raw) if raw else 8080
    except ValueError:
        return 8080


def run() -> None:
    configure_logging()
    host = api_host()
    port = api_port()
    logger.info("server_starting host=%s port=%s", host, port)
    logger.info("health_check url=http://localhost:%s%s/health", port, API_PREFIX)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()

"""Health check endpoints."""

import logging
import time
from datetime import UTC, datetime

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from student_registry import __version__
from student_registry.api.dependencies import RecordStoreDep
from student_registry.api.models import DatabaseHealth, HealthResponse
from student_registry.record_store import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/healthcheck", tags=["health"])

APPLICATION_NAME = "Student Management API"

_started_at = time.monotonic()


def format_uptime(seconds: float) -> str:
    """Format a duration as e.g. '2h 15m 30s', '4m 2s' or '9s'."""
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}h {minutes}m {secs}s"
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def check_database(store: RecordStore) -> DatabaseHealth:
    """Probe the database by counting students."""
    try:
        count = store.count()
    except (SQLAlchemyError, RecordStoreError) as e:
        logger.error("Database health check failed: %s", e)
        return DatabaseHealth(status="DOWN", connection="failed", error=str(e))
    logger.debug("Database health check passed - %d students in database", count)
    return DatabaseHealth(status="UP", connection="healthy", student_count=count)


def _respond(payload: DatabaseHealth | HealthResponse, healthy: bool) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=payload.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


@router.get("", response_model=HealthResponse)
def health_check(store: RecordStoreDep) -> JSONResponse:
    """Overall health, including database connectivity. 503 when the database is down."""
    database = check_database(store)
    healthy = database.status == "UP"
    if not healthy:
        logger.warning("Health check failed - database connectivity issues")
    payload = HealthResponse(
        status="UP" if healthy else "DOWN",
        timestamp=datetime.now(UTC).replace(tzinfo=None),
        application=APPLICATION_NAME,
        version=__version__,
        database=database,
        uptime=format_uptime(time.monotonic() - _started_at),
    )
    return _respond(payload, healthy)


@router.get("/simple")
def simple_health_check() -> dict[str, str]:
    """Liveness probe. Always 200 while the process is up."""
    return {"status": "OK", "message": "Service is running"}


@router.get("/database", response_model=DatabaseHealth)
def database_health_check(store: RecordStoreDep) -> JSONResponse:
    """Database connectivity detail. 503 when the database is down."""
    database = check_database(store)
    return _respond(database, database.status == "UP")

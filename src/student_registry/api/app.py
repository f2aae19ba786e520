"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_registry import __version__
from student_registry.api.dependencies import close_record_store, init_record_store
from student_registry.api.errors import register_error_handlers
from student_registry.api.routes import health, students
from student_registry.config import Settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    db_path = app.state.db_path or Settings.from_env().db_path
    init_record_store(db_path)
    logger.info("Record store opened at %s", db_path)

    yield
    # Shutdown
    close_record_store()


def create_app(db_path: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite database path. Defaults to STUDENT_REGISTRY_DB_PATH, read
            when the app starts, or 'students.db'.
    """
    app = FastAPI(
        title="Student Registry API",
        description="REST API for managing student records",
        version=__version__,
        lifespan=lifespan,
    )

    # None defers to STUDENT_REGISTRY_DB_PATH, read at startup
    app.state.db_path = db_path

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(students.router, prefix="/api/v1")
    app.include_router(health.router)

    return app


# Default app instance
app = create_app()

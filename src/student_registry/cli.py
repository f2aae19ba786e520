"""CLI entry point for Student Registry."""

from __future__ import annotations

import sys

import click
import uvicorn

from student_registry.config import ConfigError, Settings
from student_registry.logging import setup_logging
from student_registry.record_store import RecordStore


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="student-registry")
def main() -> None:
    """Student Registry - manage student records over HTTP."""
    pass


@main.command()
@click.option("--db-path", default=None, help="SQLite database file (default: students.db).")
@click.option("--host", default=None, help="Interface to bind (default: 127.0.0.1).")
@click.option("--port", type=int, default=None, help="Port to listen on (default: 8000).")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: INFO).",
)
def serve(db_path: str | None, host: str | None, port: int | None, log_level: str | None) -> None:
    """Run the HTTP API server."""
    from student_registry.api.app import create_app  # noqa: PLC0415

    settings = _load_settings()
    db_path = db_path or settings.db_path
    host = host or settings.host
    port = port or settings.port
    level = (log_level or settings.log_level).upper()

    logger = setup_logging(log_dir=settings.log_dir, level=level)
    logger.info("Starting Student Registry API on %s:%s (db=%s)", host, port, db_path)

    uvicorn.run(create_app(db_path), host=host, port=port, log_level=level.lower())


@main.command("init-db")
@click.option("--db-path", default=None, help="SQLite database file (default: students.db).")
def init_db(db_path: str | None) -> None:
    """Create the students table and the roll number sequence."""
    settings = _load_settings()
    path = db_path or settings.db_path
    store = RecordStore(path)
    try:
        click.echo(f"Database ready at {path} ({store.count()} students)")
    finally:
        store.close()


if __name__ == "__main__":
    main()

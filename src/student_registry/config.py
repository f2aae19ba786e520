"""Configuration loading for Student Registry."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "STUDENT_REGISTRY_"

DEFAULT_DB_PATH = "students.db"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"

MAX_PORT = 65535


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass
class Settings:
    """Runtime settings for the service.

    Attributes:
        db_path: Path to the SQLite database file, or ":memory:".
        log_dir: Directory for log files. None lets logging pick its default.
        log_level: Log level name.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
    """

    db_path: str = DEFAULT_DB_PATH
    log_dir: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from STUDENT_REGISTRY_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings, with defaults for unset variables.

        Raises:
            ConfigError: If a variable holds a malformed value.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(f"{ENV_PREFIX}{name}")
            return value.strip() if value is not None and value.strip() else None

        return cls(
            db_path=get("DB_PATH") or DEFAULT_DB_PATH,
            log_dir=get("LOG_DIR"),
            log_level=(get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            host=get("HOST") or DEFAULT_HOST,
            port=_parse_port(get("PORT")),
        )


def _parse_port(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}PORT must be an integer, got '{raw}'") from e
    if not 0 < port <= MAX_PORT:
        raise ConfigError(f"{ENV_PREFIX}PORT must be between 1 and {MAX_PORT}, got {port}")
    return port

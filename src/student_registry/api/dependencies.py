"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from student_registry.lifecycle import LifecycleManager
from student_registry.record_store import RecordStore

# Global RecordStore and LifecycleManager (initialized on app startup)
_record_store: RecordStore | None = None
_lifecycle_manager: LifecycleManager | None = None


def init_record_store(db_path: str = "students.db") -> RecordStore:
    """Initialize the global RecordStore and the LifecycleManager on top of it."""
    global _record_store, _lifecycle_manager  # noqa: PLW0603
    close_record_store()
    _record_store = RecordStore(db_path)
    _lifecycle_manager = LifecycleManager(_record_store)
    return _record_store


def close_record_store() -> None:
    """Close the global RecordStore instance."""
    global _record_store, _lifecycle_manager  # noqa: PLW0603
    if _record_store is not None:
        _record_store.close()
    _record_store = None
    _lifecycle_manager = None


def get_record_store() -> Generator[RecordStore, None, None]:
    """Dependency that provides the RecordStore instance."""
    if _record_store is None:
        raise RuntimeError("RecordStore not initialized. Call init_record_store() first.")
    yield _record_store


def get_lifecycle_manager() -> Generator[LifecycleManager, None, None]:
    """Dependency that provides the LifecycleManager instance."""
    if _lifecycle_manager is None:
        raise RuntimeError("LifecycleManager not initialized. Call init_record_store() first.")
    yield _lifecycle_manager


# Type aliases for dependency injection
RecordStoreDep = Annotated[RecordStore, Depends(get_record_store)]
LifecycleManagerDep = Annotated[LifecycleManager, Depends(get_lifecycle_manager)]

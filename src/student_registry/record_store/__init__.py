"""Record Store - durable, unique-keyed storage for student records."""

from student_registry.record_store.exceptions import (
    DuplicateKeyError,
    RecordNotFoundError,
    RecordStoreError,
)
from student_registry.record_store.models import StudentRecord
from student_registry.record_store.store import RecordStore

__all__ = [
    "DuplicateKeyError",
    "RecordNotFoundError",
    "RecordStore",
    "RecordStoreError",
    "StudentRecord",
]

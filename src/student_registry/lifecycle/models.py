"""Data models for the Lifecycle Manager."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from student_registry.record_store import StudentRecord


@dataclass(frozen=True)
class StudentInput:
    """Caller-supplied student fields for create and update.

    Attributes:
        first_name: Given name, 1-50 characters.
        last_name: Family name, 1-50 characters.
        email: Email address, unique across students.
        date_of_birth: Date strictly before today.
    """

    first_name: str
    last_name: str
    email: str
    date_of_birth: date


@dataclass(frozen=True)
class StudentView:
    """Full view of a stored student returned by every successful operation."""

    student_id: str
    roll_number: int
    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: StudentRecord) -> StudentView:
        """Build a view from a persisted record."""
        if (
            record.id is None
            or record.roll_number is None
            or record.created_at is None
            or record.updated_at is None
        ):
            raise ValueError("Cannot build a view from an unsaved record")
        return cls(
            student_id=record.id,
            roll_number=record.roll_number,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            date_of_birth=record.date_of_birth,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

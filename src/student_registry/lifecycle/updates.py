"""Pure functions that apply an update input to a stored record."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from student_registry.lifecycle.models import StudentInput
    from student_registry.record_store import StudentRecord


def apply_same_email_update(record: StudentRecord, data: StudentInput) -> StudentRecord:
    """Apply names and date of birth; the email stays as stored.

    Used when ``data.email`` equals the record's current email, so no
    uniqueness check is needed.
    """
    return replace(
        record,
        first_name=data.first_name,
        last_name=data.last_name,
        date_of_birth=data.date_of_birth,
    )


def apply_changed_email_update(record: StudentRecord, data: StudentInput) -> StudentRecord:
    """Apply all four mutable fields, including the new email."""
    return replace(
        record,
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        date_of_birth=data.date_of_birth,
    )

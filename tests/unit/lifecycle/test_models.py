"""Unit tests for Lifecycle Manager models."""

from datetime import date, datetime

import pytest

from student_registry.lifecycle import StudentView
from student_registry.record_store import StudentRecord


@pytest.mark.unit
class TestStudentViewFromRecord:
    """Tests for StudentView.from_record."""

    def test_copies_every_field(self) -> None:
        created = datetime(2024, 3, 1, 9, 0, 0)
        updated = datetime(2024, 3, 2, 10, 30, 0)
        record = StudentRecord(
            first_name="John",
            last_name="Doe",
            email="john.doe@test.com",
            date_of_birth=date(2000, 1, 15),
            id="student-1",
            roll_number=1001,
            created_at=created,
            updated_at=updated,
        )

        view = StudentView.from_record(record)

        assert view == StudentView(
            student_id="student-1",
            roll_number=1001,
            first_name="John",
            last_name="Doe",
            email="john.doe@test.com",
            date_of_birth=date(2000, 1, 15),
            created_at=created,
            updated_at=updated,
        )

    def test_unsaved_record_rejected(self) -> None:
        record = StudentRecord("John", "Doe", "john.doe@test.com", date(2000, 1, 15))

        with pytest.raises(ValueError, match="unsaved"):
            StudentView.from_record(record)

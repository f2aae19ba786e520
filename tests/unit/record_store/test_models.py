"""Unit tests for Record Store models."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from student_registry.record_store.models import Student, StudentRecord


@pytest.mark.unit
class TestStudentModel:
    """Tests for the Student row model."""

    def test_student_generates_uuid_id(self) -> None:
        """id defaults to a fresh UUID string."""
        student = Student(
            roll_number=1001,
            first_name="John",
            last_name="Doe",
            email="john.doe@test.com",
            date_of_birth=date(2000, 1, 15),
        )

        assert student.id is not None
        assert len(student.id) == 36

    def test_student_keeps_explicit_id(self) -> None:
        student = Student(
            id="fixed-id",
            roll_number=1001,
            first_name="John",
            last_name="Doe",
            email="john.doe@test.com",
            date_of_birth=date(2000, 1, 15),
        )

        assert student.id == "fixed-id"

    def test_student_table_columns(self) -> None:
        """Column names match the persisted layout."""
        columns = set(Student.__table__.columns.keys())

        assert columns == {
            "student_id",
            "roll_number",
            "first_name",
            "last_name",
            "email",
            "date_of_birth",
            "created_at",
            "updated_at",
        }

    def test_student_repr(self) -> None:
        student = Student(
            id="abc",
            roll_number=1001,
            first_name="John",
            last_name="Doe",
            email="john.doe@test.com",
            date_of_birth=date(2000, 1, 15),
        )

        assert repr(student) == "<Student(id='abc', roll_number=1001)>"


@pytest.mark.unit
class TestStudentRecord:
    """Tests for the detached StudentRecord value."""

    def test_new_record_is_not_persisted(self) -> None:
        record = StudentRecord("John", "Doe", "john.doe@test.com", date(2000, 1, 15))

        assert record.is_persisted is False
        assert record.roll_number is None

    def test_from_row_copies_all_fields(self) -> None:
        now = datetime(2024, 1, 1, 12, 0, 0)
        row = Student(
            id="abc",
            roll_number=1001,
            first_name="John",
            last_name="Doe",
            email="john.doe@test.com",
            date_of_birth=date(2000, 1, 15),
        )
        row.created_at = now
        row.updated_at = now

        record = StudentRecord.from_row(row)

        assert record.is_persisted is True
        assert record.id == "abc"
        assert record.roll_number == 1001
        assert record.email == "john.doe@test.com"
        assert record.created_at == now

    def test_record_is_immutable(self) -> None:
        record = StudentRecord("John", "Doe", "john.doe@test.com", date(2000, 1, 15))

        with pytest.raises(FrozenInstanceError):
            record.email = "other@test.com"  # type: ignore[misc]

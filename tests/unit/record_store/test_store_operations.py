"""Unit tests for RecordStore operations."""

from dataclasses import replace
from datetime import date, datetime
from unittest.mock import patch

import pytest

from student_registry.record_store import (
    DuplicateKeyError,
    RecordNotFoundError,
    RecordStore,
    StudentRecord,
)
from student_registry.record_store.models import ROLL_NUMBER_START


@pytest.fixture
def store():
    """Create an in-memory RecordStore for testing."""
    s = RecordStore(":memory:")
    yield s
    s.close()


def new_record(email: str = "john.doe@test.com", first_name: str = "John") -> StudentRecord:
    return StudentRecord(
        first_name=first_name,
        last_name="Doe",
        email=email,
        date_of_birth=date(2000, 1, 15),
    )


@pytest.mark.unit
class TestSaveInsert:
    """Tests for save() on new records."""

    def test_insert_assigns_generated_fields(self, store: RecordStore) -> None:
        """ID, roll number and timestamps are assigned by the store."""
        saved = store.save(new_record())

        assert saved.id is not None
        assert saved.roll_number == ROLL_NUMBER_START
        assert saved.created_at is not None
        assert saved.created_at == saved.updated_at
        assert saved.updated_at is not None
        assert saved.first_name == "John"
        assert saved.date_of_birth == date(2000, 1, 15)

    def test_roll_numbers_increase(self, store: RecordStore) -> None:
        first = store.save(new_record("a@test.com"))
        second = store.save(new_record("b@test.com"))
        third = store.save(new_record("c@test.com"))

        assert [first.roll_number, second.roll_number, third.roll_number] == [
            ROLL_NUMBER_START,
            ROLL_NUMBER_START + 1,
            ROLL_NUMBER_START + 2,
        ]

    def test_roll_numbers_not_reused_after_delete(self, store: RecordStore) -> None:
        first = store.save(new_record("a@test.com"))
        assert first.roll_number is not None
        store.delete_by_roll_number(first.roll_number)

        second = store.save(new_record("b@test.com"))

        assert second.roll_number == ROLL_NUMBER_START + 1

    def test_insert_duplicate_email_raises(self, store: RecordStore) -> None:
        """The unique constraint rejects a second record with the same email."""
        store.save(new_record())

        with pytest.raises(DuplicateKeyError) as exc_info:
            store.save(new_record(first_name="Other"))

        assert exc_info.value.column == "email"
        assert "john.doe@test.com" in str(exc_info.value)

    def test_failed_insert_leaves_store_unchanged(self, store: RecordStore) -> None:
        original = store.save(new_record())

        with pytest.raises(DuplicateKeyError):
            store.save(new_record(first_name="Other"))

        assert store.count() == 1
        assert store.find_by_id(original.id or "") == original

    def test_failed_insert_does_not_consume_roll_number(self, store: RecordStore) -> None:
        store.save(new_record("a@test.com"))
        with pytest.raises(DuplicateKeyError):
            store.save(new_record("a@test.com"))

        second = store.save(new_record("b@test.com"))

        assert second.roll_number == ROLL_NUMBER_START + 1


@pytest.mark.unit
class TestSaveUpdate:
    """Tests for save() on persisted records."""

    def test_update_writes_mutable_fields(self, store: RecordStore) -> None:
        saved = store.save(new_record())

        changed = replace(
            saved, first_name="Johnny", email="johnny@test.com", date_of_birth=date(1999, 2, 2)
        )

        updated = store.save(changed)

        assert updated.id == saved.id
        assert updated.roll_number == saved.roll_number
        assert updated.created_at == saved.created_at
        assert updated.first_name == "Johnny"
        assert updated.email == "johnny@test.com"
        assert updated.date_of_birth == date(1999, 2, 2)
        assert updated.updated_at is not None
        assert saved.updated_at is not None
        assert updated.updated_at > saved.updated_at

    def test_update_in_same_second_advances_updated_at(self, store: RecordStore) -> None:
        """Timestamps keep sub-second precision through the database."""
        created_at = datetime(2026, 10, 18, 12, 0, 0, 100000)
        updated_at = datetime(2026, 10, 18, 12, 0, 0, 250000)

        with patch("student_registry.record_store.store.utc_now", return_value=created_at):
            saved = store.save(new_record())
        with patch("student_registry.record_store.store.utc_now", return_value=updated_at):
            updated = store.save(replace(saved, first_name="Johnny"))

        assert saved.created_at == created_at
        assert saved.updated_at == created_at
        assert updated.created_at == created_at
        assert updated.updated_at == updated_at
        assert store.find_by_id(saved.id or "") == updated

    def test_update_ignores_roll_number_and_created_at(self, store: RecordStore) -> None:
        """Roll number and creation time cannot be changed through save."""
        saved = store.save(new_record())

        updated = store.save(replace(saved, roll_number=9999, first_name="Johnny"))

        assert updated.roll_number == saved.roll_number
        assert store.find_by_roll_number(9999) is None

    def test_update_to_taken_email_raises(self, store: RecordStore) -> None:
        store.save(new_record("a@test.com"))
        second = store.save(new_record("b@test.com"))

        with pytest.raises(DuplicateKeyError) as exc_info:
            store.save(replace(second, email="a@test.com"))

        assert exc_info.value.column == "email"
        assert store.find_by_id(second.id or "") == second

    def test_update_missing_id_raises(self, store: RecordStore) -> None:
        ghost = replace(new_record(), id="missing-id")

        with pytest.raises(RecordNotFoundError):
            store.save(ghost)


@pytest.mark.unit
class TestQueries:
    """Tests for exists/find/count."""

    def test_exists_by_email(self, store: RecordStore) -> None:
        store.save(new_record())

        assert store.exists_by_email("john.doe@test.com") is True
        assert store.exists_by_email("nobody@test.com") is False

    def test_email_match_is_case_sensitive(self, store: RecordStore) -> None:
        """SQLite's default collation compares emails byte for byte."""
        store.save(new_record())

        assert store.exists_by_email("JOHN.DOE@test.com") is False

    def test_exists_by_roll_number(self, store: RecordStore) -> None:
        saved = store.save(new_record())

        assert store.exists_by_roll_number(saved.roll_number or 0) is True
        assert store.exists_by_roll_number(999) is False

    def test_find_by_id(self, store: RecordStore) -> None:
        saved = store.save(new_record())

        assert store.find_by_id(saved.id or "") == saved
        assert store.find_by_id("nonexistent-id") is None

    def test_find_by_email(self, store: RecordStore) -> None:
        saved = store.save(new_record())

        assert store.find_by_email("john.doe@test.com") == saved
        assert store.find_by_email("nobody@test.com") is None

    def test_find_by_roll_number(self, store: RecordStore) -> None:
        saved = store.save(new_record())

        assert store.find_by_roll_number(saved.roll_number or 0) == saved
        assert store.find_by_roll_number(42) is None

    def test_find_all_empty(self, store: RecordStore) -> None:
        assert store.find_all() == []

    def test_find_all_ordered_by_roll_number(self, store: RecordStore) -> None:
        store.save(new_record("c@test.com", "Charlie"))
        store.save(new_record("a@test.com", "Alpha"))

        names = [r.first_name for r in store.find_all()]

        assert names == ["Charlie", "Alpha"]

    def test_count(self, store: RecordStore) -> None:
        assert store.count() == 0
        store.save(new_record("a@test.com"))
        store.save(new_record("b@test.com"))

        assert store.count() == 2


@pytest.mark.unit
class TestDelete:
    """Tests for delete_by_id and delete_by_roll_number."""

    def test_delete_by_id(self, store: RecordStore) -> None:
        saved = store.save(new_record())

        assert store.delete_by_id(saved.id or "") is True
        assert store.find_by_id(saved.id or "") is None

    def test_delete_by_id_missing_returns_false(self, store: RecordStore) -> None:
        assert store.delete_by_id("nonexistent-id") is False

    def test_delete_by_roll_number(self, store: RecordStore) -> None:
        saved = store.save(new_record())

        assert store.delete_by_roll_number(saved.roll_number or 0) is True
        assert store.exists_by_roll_number(saved.roll_number or 0) is False

    def test_delete_by_roll_number_missing_returns_false(self, store: RecordStore) -> None:
        assert store.delete_by_roll_number(4242) is False

    def test_delete_leaves_other_records(self, store: RecordStore) -> None:
        first = store.save(new_record("a@test.com"))
        second = store.save(new_record("b@test.com"))

        store.delete_by_id(first.id or "")

        assert store.find_all() == [second]

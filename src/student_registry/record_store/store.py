"""RecordStore - Main API for Record Store operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, exists, func, select, update
from sqlalchemy.exc import IntegrityError

from student_registry.logging import get_logger
from student_registry.record_store.database import Database
from student_registry.record_store.exceptions import (
    DuplicateKeyError,
    RecordNotFoundError,
    RecordStoreError,
)
from student_registry.record_store.models import (
    EMAIL_CONSTRAINT,
    ROLL_NUMBER_CONSTRAINT,
    ROLL_NUMBER_SEQUENCE,
    RollNumberSequence,
    Student,
    StudentRecord,
    utc_now,
)

if TYPE_CHECKING:
    from sqlalchemy import Delete
    from sqlalchemy.orm import Session

logger = get_logger("record_store")


def _duplicate_key_error(exc: IntegrityError, record: StudentRecord) -> DuplicateKeyError | None:
    """Map a unique-constraint violation to the column it concerns."""
    detail = str(exc.orig) if exc.orig is not None else str(exc)
    if "students.email" in detail or EMAIL_CONSTRAINT in detail:
        return DuplicateKeyError("email", f"Email {record.email} already exists")
    if "students.roll_number" in detail or ROLL_NUMBER_CONSTRAINT in detail:
        return DuplicateKeyError("roll_number", "Roll number already assigned to another student")
    return None


class RecordStore:
    """Main API for Record Store operations.

    The unique constraints on ``email`` and ``roll_number`` are enforced by the
    database; callers may pre-check with ``exists_by_*`` but the constraint
    violation raised from ``save`` is authoritative.
    """

    def __init__(self, db_path: str = "students.db") -> None:
        """Initialize Record Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()

    @property
    def database(self) -> Database:
        return self._db

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    # --- Queries ---

    def exists_by_email(self, email: str) -> bool:
        """Check whether any record holds ``email``."""
        with self._db.get_session() as session:
            stmt = select(exists().where(Student.email == email))
            return bool(session.execute(stmt).scalar())

    def exists_by_roll_number(self, roll_number: int) -> bool:
        """Check whether any record holds ``roll_number``."""
        with self._db.get_session() as session:
            stmt = select(exists().where(Student.roll_number == roll_number))
            return bool(session.execute(stmt).scalar())

    def find_by_id(self, student_id: str) -> StudentRecord | None:
        """Get a record by its ID.

        Args:
            student_id: The student's unique ID

        Returns:
            The record, or None if no record has that ID
        """
        with self._db.get_session() as session:
            row = session.get(Student, student_id)
            return StudentRecord.from_row(row) if row is not None else None

    def find_by_email(self, email: str) -> StudentRecord | None:
        """Get a record by email (exact match)."""
        with self._db.get_session() as session:
            stmt = select(Student).where(Student.email == email)
            row = session.execute(stmt).scalar_one_or_none()
            return StudentRecord.from_row(row) if row is not None else None

    def find_by_roll_number(self, roll_number: int) -> StudentRecord | None:
        """Get a record by roll number."""
        with self._db.get_session() as session:
            stmt = select(Student).where(Student.roll_number == roll_number)
            row = session.execute(stmt).scalar_one_or_none()
            return StudentRecord.from_row(row) if row is not None else None

    def find_all(self) -> list[StudentRecord]:
        """List all records.

        Returns:
            List of all records, ordered by roll number
        """
        with self._db.get_session() as session:
            stmt = select(Student).order_by(Student.roll_number)
            return [StudentRecord.from_row(row) for row in session.execute(stmt).scalars()]

    def count(self) -> int:
        """Return the number of stored records."""
        with self._db.get_session() as session:
            return int(session.execute(select(func.count(Student.id))).scalar_one())

    # --- Mutations ---

    def save(self, record: StudentRecord) -> StudentRecord:
        """Insert a new record or update an existing one.

        A record without ``id`` is inserted: the store assigns the ID, the next
        roll number and both timestamps. A record with ``id`` has its first name,
        last name, email and date of birth written and ``updated_at`` refreshed;
        its roll number and creation time are left untouched.

        Args:
            record: The record to persist

        Returns:
            The stored record as read back from the database

        Raises:
            DuplicateKeyError: If email or roll number is already taken
            RecordNotFoundError: If updating an ID that does not exist
        """
        session = self._db.get_session()
        try:
            if record.is_persisted:
                row = self._update_row(session, record)
            else:
                row = self._insert_row(session, record)
            session.commit()
            session.refresh(row)
            return StudentRecord.from_row(row)
        except IntegrityError as e:
            session.rollback()
            duplicate = _duplicate_key_error(e, record)
            if duplicate is not None:
                logger.debug("Unique constraint rejected write: %s", e.orig)
                raise duplicate from e
            raise RecordStoreError(f"Integrity error while saving student: {e.orig}") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def _insert_row(self, session: Session, record: StudentRecord) -> Student:
        stmt = (
            update(RollNumberSequence)
            .where(RollNumberSequence.name == ROLL_NUMBER_SEQUENCE)
            .values(last_value=RollNumberSequence.last_value + 1)
            .returning(RollNumberSequence.last_value)
            .execution_options(synchronize_session=False)
        )
        roll_number = session.execute(stmt).scalar_one_or_none()
        if roll_number is None:
            raise RecordStoreError("Roll number sequence is not initialized")

        now = utc_now()
        row = Student(
            roll_number=roll_number,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            date_of_birth=record.date_of_birth,
            created_at=now,
            updated_at=now,
        )
        session.add(row)
        session.flush()
        return row

    def _update_row(self, session: Session, record: StudentRecord) -> Student:
        stmt = (
            update(Student)
            .where(Student.id == record.id)
            .values(
                first_name=record.first_name,
                last_name=record.last_name,
                email=record.email,
                date_of_birth=record.date_of_birth,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise RecordNotFoundError(f"Student with id {record.id} not found")
        row = session.get(Student, record.id)
        if row is None:
            raise RecordNotFoundError(f"Student with id {record.id} not found")
        return row

    def delete_by_id(self, student_id: str) -> bool:
        """Delete a record by ID.

        Args:
            student_id: The student's unique ID

        Returns:
            True if a record was deleted, False if none matched
        """
        return self._delete(delete(Student).where(Student.id == student_id))

    def delete_by_roll_number(self, roll_number: int) -> bool:
        """Delete a record by roll number.

        Returns:
            True if a record was deleted, False if none matched
        """
        return self._delete(delete(Student).where(Student.roll_number == roll_number))

    def _delete(self, stmt: Delete) -> bool:
        with self._db.session_factory.begin() as session:
            result = session.execute(stmt)
            return bool(result.rowcount)

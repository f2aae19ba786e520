"""LifecycleManager - create, read, update and delete student records."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from datetime import date
from typing import ParamSpec, Protocol, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from student_registry.lifecycle.models import StudentInput, StudentView
from student_registry.lifecycle.results import Failure, FailureKind, Ok, Result
from student_registry.lifecycle.updates import (
    apply_changed_email_update,
    apply_same_email_update,
)
from student_registry.lifecycle.validation import validate_student_input
from student_registry.logging import mask_email
from student_registry.record_store import (
    DuplicateKeyError,
    RecordNotFoundError,
    RecordStoreError,
    StudentRecord,
)

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

UNEXPECTED_MESSAGE = "An unexpected error occurred"
INVALID_INPUT_MESSAGE = "Invalid input data"


class StudentStore(Protocol):
    """Interface of the Record Store used by the LifecycleManager."""

    def exists_by_email(self, email: str) -> bool: ...

    def find_by_id(self, student_id: str) -> StudentRecord | None: ...

    def find_by_email(self, email: str) -> StudentRecord | None: ...

    def find_by_roll_number(self, roll_number: int) -> StudentRecord | None: ...

    def find_all(self) -> list[StudentRecord]: ...

    def save(self, record: StudentRecord) -> StudentRecord: ...

    def delete_by_id(self, student_id: str) -> bool: ...

    def delete_by_roll_number(self, roll_number: int) -> bool: ...


def _reports_store_failures(
    operation: str,
) -> Callable[[Callable[P, Result[R]]], Callable[P, Result[R]]]:
    """Turn unexpected store errors raised by an operation into an UNEXPECTED failure."""

    def decorator(method: Callable[P, Result[R]]) -> Callable[P, Result[R]]:
        @functools.wraps(method)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[R]:
            try:
                return method(*args, **kwargs)
            except (RecordStoreError, SQLAlchemyError):
                logger.exception("Unexpected store failure during %s", operation)
                return Failure(FailureKind.UNEXPECTED, UNEXPECTED_MESSAGE)

        return wrapper

    return decorator


def _not_found(message: str) -> Failure:
    logger.warning(message)
    return Failure(FailureKind.NOT_FOUND, message)


def _duplicate_email(email: str) -> Failure:
    logger.warning("Email %s already exists", mask_email(email))
    return Failure(FailureKind.DUPLICATE_EMAIL, f"Email {email} already exists")


def _from_duplicate_key(error: DuplicateKeyError, email: str) -> Failure:
    """Map a store constraint violation onto the advisory-check failure kinds."""
    if error.column == "email":
        return _duplicate_email(email)
    logger.warning("Store rejected write: %s", error)
    return Failure(FailureKind.DUPLICATE_ROLL_NUMBER, str(error))


class LifecycleManager:
    """Business rules for the student record lifecycle.

    Holds no mutable state of its own: uniqueness is decided by the store.
    The ``exists_by_email`` lookups done here only give an early, precise
    failure; a write that loses a race is rejected by the store's unique
    constraint and reported with the same failure kind.
    """

    def __init__(
        self,
        store: StudentStore,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the LifecycleManager.

        Args:
            store: Record Store holding the students.
            clock: Returns today's date; dates of birth must be before it.
        """
        self._store = store
        self._clock = clock

    def _validate(self, data: StudentInput) -> Failure | None:
        field_errors = validate_student_input(data, self._clock())
        if not field_errors:
            return None
        logger.warning("Validation failed for fields: %s", ", ".join(sorted(field_errors)))
        return Failure(FailureKind.VALIDATION_FAILED, INVALID_INPUT_MESSAGE, field_errors)

    @_reports_store_failures("create")
    def create(self, data: StudentInput) -> Result[StudentView]:
        """Create a new student.

        Args:
            data: The student's fields.

        Returns:
            Ok with the stored view, or a VALIDATION_FAILED / EMAIL_ALREADY_EXISTS /
            ROLL_NUMBER_ALREADY_EXISTS failure.
        """
        invalid = self._validate(data)
        if invalid is not None:
            return invalid
        if self._store.exists_by_email(data.email):
            return _duplicate_email(data.email)

        new_record = StudentRecord(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            date_of_birth=data.date_of_birth,
        )
        try:
            record = self._store.save(new_record)
        except DuplicateKeyError as e:
            return _from_duplicate_key(e, data.email)

        logger.info(
            "Student created with id %s and roll number %s", record.id, record.roll_number
        )
        return Ok(StudentView.from_record(record))

    @_reports_store_failures("get_by_id")
    def get_by_id(self, student_id: str) -> Result[StudentView]:
        """Get a student by ID."""
        record = self._store.find_by_id(student_id)
        if record is None:
            return _not_found(f"Student with id {student_id} not found")
        return Ok(StudentView.from_record(record))

    @_reports_store_failures("get_by_email")
    def get_by_email(self, email: str) -> Result[StudentView]:
        """Get a student by email. Matching follows the store's collation."""
        record = self._store.find_by_email(email)
        if record is None:
            return _not_found(f"Student with email {email} not found")
        return Ok(StudentView.from_record(record))

    @_reports_store_failures("get_by_roll_number")
    def get_by_roll_number(self, roll_number: int) -> Result[StudentView]:
        """Get a student by roll number."""
        record = self._store.find_by_roll_number(roll_number)
        if record is None:
            return _not_found(f"Student with roll number {roll_number} not found")
        return Ok(StudentView.from_record(record))

    @_reports_store_failures("list_all")
    def list_all(self) -> Result[list[StudentView]]:
        """List every student. Order is whatever the store returns."""
        return Ok([StudentView.from_record(record) for record in self._store.find_all()])

    @_reports_store_failures("update")
    def update(self, student_id: str, data: StudentInput) -> Result[StudentView]:
        """Replace a student's mutable fields.

        When the email is unchanged the uniqueness check is skipped, since the
        only holder of that email is this student. A changed email is checked
        against every other student first. ID, roll number and creation time
        are never modified.

        Args:
            student_id: The student's unique ID.
            data: New values for all four mutable fields.

        Returns:
            Ok with the updated view, or a VALIDATION_FAILED / STUDENT_NOT_FOUND /
            EMAIL_ALREADY_EXISTS failure.
        """
        invalid = self._validate(data)
        if invalid is not None:
            return invalid

        current = self._store.find_by_id(student_id)
        if current is None:
            return _not_found(f"Student with id {student_id} not found")

        email_changed = current.email != data.email
        if email_changed:
            if self._store.exists_by_email(data.email):
                return _duplicate_email(data.email)
            updated = apply_changed_email_update(current, data)
        else:
            updated = apply_same_email_update(current, data)

        try:
            record = self._store.save(updated)
        except DuplicateKeyError as e:
            return _from_duplicate_key(e, data.email)
        except RecordNotFoundError:
            return _not_found(f"Student with id {student_id} not found")

        if email_changed:
            logger.info("Updated all details including email for student with id %s", student_id)
        else:
            logger.info("Updated details except email for student with id %s", student_id)
        return Ok(StudentView.from_record(record))

    @_reports_store_failures("delete_by_id")
    def delete_by_id(self, student_id: str) -> Result[None]:
        """Delete a student by ID. Deletion is permanent."""
        if not self._store.delete_by_id(student_id):
            return _not_found(f"Student with id {student_id} not found")
        logger.info("Student with id %s deleted", student_id)
        return Ok(None)

    @_reports_store_failures("delete_by_roll_number")
    def delete_by_roll_number(self, roll_number: int) -> Result[None]:
        """Delete a student by roll number. Deletion is permanent."""
        if not self._store.delete_by_roll_number(roll_number):
            return _not_found(f"Student with roll number {roll_number} not found")
        logger.info("Student with roll number %s deleted", roll_number)
        return Ok(None)

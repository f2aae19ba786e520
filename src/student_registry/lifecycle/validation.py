"""Input validation for student create and update."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from email_validator import EmailNotValidError, validate_email

from student_registry.record_store.models import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH

if TYPE_CHECKING:
    from student_registry.lifecycle.models import StudentInput


def _check_name(value: object, label: str) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return f"{label} is required"
    if len(value) > NAME_MAX_LENGTH:
        return f"{label} cannot be more than {NAME_MAX_LENGTH} characters"
    return None


def _check_email(value: object) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return "Email is required"
    if len(value) > EMAIL_MAX_LENGTH:
        return f"Email cannot be more than {EMAIL_MAX_LENGTH} characters"
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return "Please enter a valid email"
    return None


def _check_date_of_birth(value: object, today: date) -> str | None:
    # datetime subclasses date; only plain calendar dates are accepted
    if not isinstance(value, date) or isinstance(value, datetime):
        return "Date of Birth is Required"
    if value >= today:
        return "Date of Birth must be in the past"
    return None


def validate_student_input(data: StudentInput, today: date) -> dict[str, str]:
    """Check a StudentInput against the field rules.

    Args:
        data: Input to validate. Field values may be of the wrong type.
        today: Reference date; the date of birth must be strictly before it.

    Returns:
        Mapping of field name to message for every invalid field. Empty when
        the input is valid.
    """
    checks = {
        "first_name": _check_name(data.first_name, "First Name"),
        "last_name": _check_name(data.last_name, "Last Name"),
        "email": _check_email(data.email),
        "date_of_birth": _check_date_of_birth(data.date_of_birth, today),
    }
    return {name: message for name, message in checks.items() if message is not None}

"""Result type returned by Lifecycle Manager operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, TypeVar

from student_registry.lifecycle.exceptions import LifecycleError

T = TypeVar("T")


class FailureKind(StrEnum):
    """Failure kinds; values double as machine-readable error codes."""

    NOT_FOUND = "STUDENT_NOT_FOUND"
    DUPLICATE_EMAIL = "EMAIL_ALREADY_EXISTS"
    DUPLICATE_ROLL_NUMBER = "ROLL_NUMBER_ALREADY_EXISTS"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    UNEXPECTED = "INTERNAL_SERVER_ERROR"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Failed outcome.

    Attributes:
        kind: What went wrong.
        message: Human-readable description, safe to show callers.
        field_errors: Per-field messages, only set for VALIDATION_FAILED.
    """

    kind: FailureKind
    message: str
    field_errors: dict[str, str] = field(default_factory=dict)


Result = Ok[T] | Failure


def unwrap(result: Result[T]) -> T:
    """Return the value of an Ok result.

    Raises:
        LifecycleError: If the result is a Failure.
    """
    if isinstance(result, Failure):
        raise LifecycleError(result)
    return result.value

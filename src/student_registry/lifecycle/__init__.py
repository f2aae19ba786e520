"""Lifecycle Manager - business rules for student records."""

from student_registry.lifecycle.exceptions import LifecycleError
from student_registry.lifecycle.manager import LifecycleManager, StudentStore
from student_registry.lifecycle.models import StudentInput, StudentView
from student_registry.lifecycle.results import Failure, FailureKind, Ok, Result, unwrap
from student_registry.lifecycle.updates import (
    apply_changed_email_update,
    apply_same_email_update,
)
from student_registry.lifecycle.validation import validate_student_input

__all__ = [
    "Failure",
    "FailureKind",
    "LifecycleError",
    "LifecycleManager",
    "Ok",
    "Result",
    "StudentInput",
    "StudentStore",
    "StudentView",
    "apply_changed_email_update",
    "apply_same_email_update",
    "unwrap",
    "validate_student_input",
]

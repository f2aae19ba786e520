"""Exceptions for the Lifecycle Manager."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from student_registry.lifecycle.results import Failure


class LifecycleError(Exception):
    """Raised by ``unwrap`` when an operation returned a Failure.

    Attributes:
        failure: The failure that was unwrapped.
    """

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure

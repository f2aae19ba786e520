"""REST API for Student Registry."""

from student_registry.api.app import app, create_app
from student_registry.api.models import (
    ApiErrorResponse,
    ApiValidationErrorResponse,
    StudentRequest,
    StudentResponse,
)

__all__ = [
    "ApiErrorResponse",
    "ApiValidationErrorResponse",
    "StudentRequest",
    "StudentResponse",
    "app",
    "create_app",
]

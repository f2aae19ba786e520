"""Pydantic models for REST API."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from student_registry.lifecycle import StudentInput

CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Student models


class StudentRequest(BaseModel):
    """Request model for creating or replacing a student.

    Only JSON types are checked here. Missing fields arrive as None and every
    field rule is applied by the Lifecycle Manager, so the address is passed
    on exactly as sent.
    """

    model_config = CAMEL_CASE

    first_name: str | None = Field(None, examples=["John"])
    last_name: str | None = Field(None, examples=["Doe"])
    email: str | None = Field(None, examples=["john.doe@test.link"])
    date_of_birth: date | None = Field(None, examples=["2015-12-12"])

    def to_input(self) -> StudentInput:
        """Convert to the Lifecycle Manager's input type."""
        return StudentInput(
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            email=self.email or "",
            # None is reported as a missing date of birth by validation
            date_of_birth=self.date_of_birth,  # type: ignore[arg-type]
        )


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    student_id: str
    roll_number: int
    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    created_at: datetime
    updated_at: datetime


def student_to_response(student: Any) -> StudentResponse:
    """Convert a StudentView to StudentResponse."""
    return StudentResponse.model_validate(student)


# Error models


class ApiErrorResponse(BaseModel):
    """Error payload for not-found, conflict and server errors."""

    model_config = CAMEL_CASE

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str


class ApiValidationErrorResponse(ApiErrorResponse):
    """Error payload for invalid input, with one message per field."""

    field_errors: dict[str, str]


# Health models


class DatabaseHealth(BaseModel):
    """Database part of a health check."""

    model_config = CAMEL_CASE

    status: str
    connection: str
    student_count: int | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Response model for the full health check."""

    status: str
    timestamp: datetime
    application: str
    version: str
    database: DatabaseHealth
    uptime: str

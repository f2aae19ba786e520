"""SQLAlchemy models for Record Store."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any

from sqlalchemy import (
    Date,
    DateTime,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)

NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255

ROLL_NUMBER_SEQUENCE = "roll_number"
ROLL_NUMBER_START = 1001

EMAIL_CONSTRAINT = "uq_students_email"
ROLL_NUMBER_CONSTRAINT = "uq_students_roll_number"


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, to the microsecond."""
    return datetime.now(UTC).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Student(Base):
    """Student row - one stored student record."""

    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("email", name=EMAIL_CONSTRAINT),
        UniqueConstraint("roll_number", name=ROLL_NUMBER_CONSTRAINT),
    )

    id: Mapped[str] = mapped_column("student_id", String(36), primary_key=True)
    roll_number: Mapped[int] = mapped_column(Integer, nullable=False)
    first_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now, onupdate=utc_now
    )

    def __init__(
        self,
        roll_number: int,
        first_name: str,
        last_name: str,
        email: str,
        date_of_birth: date,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.roll_number = roll_number
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.date_of_birth = date_of_birth

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, roll_number={self.roll_number!r})>"


class RollNumberSequence(Base):
    """Named counter owned by the store; holds the last issued value."""

    __tablename__ = "roll_number_sequence"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    last_value: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<RollNumberSequence(name={self.name!r}, last_value={self.last_value!r})>"


@dataclass(frozen=True)
class StudentRecord:
    """Detached value of a stored student.

    A record without ``id`` has not been persisted yet; the store assigns
    ``id``, ``roll_number``, ``created_at`` and ``updated_at`` on insert.
    """

    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    id: str | None = None
    roll_number: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    def from_row(cls, row: Student) -> StudentRecord:
        """Copy a Student row into a detached record."""
        return cls(
            id=row.id,
            roll_number=row.roll_number,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            date_of_birth=row.date_of_birth,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

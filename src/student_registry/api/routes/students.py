"""Student CRUD endpoints."""

from fastapi import APIRouter, status

from student_registry.api.dependencies import LifecycleManagerDep
from student_registry.api.models import (
    StudentRequest,
    StudentResponse,
    student_to_response,
)
from student_registry.lifecycle import unwrap

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=list[StudentResponse])
def list_students(manager: LifecycleManagerDep) -> list[StudentResponse]:
    """List all students."""
    students = unwrap(manager.list_all())
    return [student_to_response(s) for s in students]


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_student(student: StudentRequest, manager: LifecycleManagerDep) -> StudentResponse:
    """Create a new student. The roll number is assigned by the store."""
    created = unwrap(manager.create(student.to_input()))
    return student_to_response(created)


@router.get("/email/{email}", response_model=StudentResponse)
def get_student_by_email(email: str, manager: LifecycleManagerDep) -> StudentResponse:
    """Get a student by email address."""
    return student_to_response(unwrap(manager.get_by_email(email)))


@router.get("/rollnumber/{roll_number}", response_model=StudentResponse)
def get_student_by_roll_number(roll_number: int, manager: LifecycleManagerDep) -> StudentResponse:
    """Get a student by roll number."""
    return student_to_response(unwrap(manager.get_by_roll_number(roll_number)))


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: str, manager: LifecycleManagerDep) -> StudentResponse:
    """Get a student by ID."""
    return student_to_response(unwrap(manager.get_by_id(student_id)))


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: str, student: StudentRequest, manager: LifecycleManagerDep
) -> StudentResponse:
    """Replace a student's name, email and date of birth."""
    updated = unwrap(manager.update(student_id, student.to_input()))
    return student_to_response(updated)


@router.delete("/rollnumber/{roll_number}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student_by_roll_number(roll_number: int, manager: LifecycleManagerDep) -> None:
    """Delete a student by roll number."""
    unwrap(manager.delete_by_roll_number(roll_number))


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: str, manager: LifecycleManagerDep) -> None:
    """Delete a student by ID."""
    unwrap(manager.delete_by_id(student_id))

"""Student commands (CQRS write operations).

Commands represent intent to change student registration or enrollment state.
All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- ``RegisterStudent`` is a ResultCommand: its Success carries the new id
"""

from dataclasses import dataclass
from uuid import UUID

from studentdesk.application.cqrs.contracts import Command, ResultCommand
from studentdesk.domain.enums.grade import Grade


@dataclass(frozen=True, kw_only=True)
class RegisterStudent(ResultCommand[UUID]):
    """Register a new student.

    Attributes:
        name: Display name.
        email: Contact address (validated by the handler).

    Example:
        >>> result = await dispatcher.dispatch(
        ...     RegisterStudent(name="Alice", email="alice@university.edu")
        ... )
        >>> match result:
        ...     case Success(value=student_id): ...
    """

    name: str
    email: str


@dataclass(frozen=True, kw_only=True)
class EditPersonalInfo(Command):
    """Change a student's name and email.

    Attributes:
        student_id: Student to edit.
        name: New display name.
        email: New contact address.
    """

    student_id: UUID
    name: str
    email: str


@dataclass(frozen=True, kw_only=True)
class EnrollStudent(Command):
    """Enroll a student in a course.

    Attributes:
        student_id: Student to enroll.
        course_name: Course to enroll in.
        grade: Initial grade.
    """

    student_id: UUID
    course_name: str
    grade: Grade


@dataclass(frozen=True, kw_only=True)
class TransferStudent(Command):
    """Move one of a student's enrollments to another course.

    Attributes:
        student_id: Student to transfer.
        enrollment_number: Position of the enrollment to replace (1 or 2).
        course_name: Target course.
        grade: Grade in the target course.
    """

    student_id: UUID
    enrollment_number: int
    course_name: str
    grade: Grade


@dataclass(frozen=True, kw_only=True)
class DisenrollStudent(Command):
    """Remove one of a student's enrollments.

    Attributes:
        student_id: Student to disenroll.
        enrollment_number: Position of the enrollment to remove (1 or 2).
    """

    student_id: UUID
    enrollment_number: int


@dataclass(frozen=True, kw_only=True)
class UnregisterStudent(Command):
    """Remove a student and all of their enrollments.

    Attributes:
        student_id: Student to remove.
    """

    student_id: UUID

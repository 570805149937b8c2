"""Student DTOs (query results).

Read-side data transfer objects returned by student query handlers.
"""

from dataclasses import dataclass, field
from uuid import UUID

from studentdesk.domain.entities.student import Student


@dataclass(frozen=True, kw_only=True)
class EnrollmentDto:
    """One enrollment of a student.

    Attributes:
        course_name: Enrolled course.
        grade: Letter grade.
    """

    course_name: str
    grade: str


@dataclass(frozen=True, kw_only=True)
class StudentDto:
    """Student summary.

    Attributes:
        id: Student identifier.
        name: Display name.
        email: Contact address.
        number_of_courses: Number of enrollments.
        enrollments: Enrollments in position order.
    """

    id: UUID
    name: str
    email: str
    number_of_courses: int
    enrollments: list[EnrollmentDto] = field(default_factory=list)


def to_student_dto(student: Student) -> StudentDto:
    """Map a Student entity to its DTO."""
    return StudentDto(
        id=student.id,
        name=student.name,
        email=str(student.email),
        number_of_courses=student.number_of_courses,
        enrollments=[
            EnrollmentDto(course_name=e.course_name, grade=e.grade.value)
            for e in student.enrollments
        ],
    )

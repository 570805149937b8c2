"""Student domain entity.

A registered student and the (at most two) courses they are enrolled in.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - State changes through methods returning Result types
    - Enrollments are addressed by position (1 or 2)

Usage:
    from uuid_extensions import uuid7

    student = Student(id=uuid7(), name="Alice", email=Email("alice@university.edu"))
    result = student.enroll(course, Grade.A)
"""

from dataclasses import dataclass, field
from uuid import UUID

from studentdesk.core.result import Failure, Result, Success
from studentdesk.domain.entities.course import Course
from studentdesk.domain.enums.grade import Grade
from studentdesk.domain.errors.student_error import StudentError
from studentdesk.domain.value_objects.email import Email

MAX_ENROLLMENTS = 2


@dataclass
class Enrollment:
    """A student's enrollment in a course.

    Attributes:
        course_id: Enrolled course.
        course_name: Denormalized course name (read side, filtering).
        grade: Current grade.
    """

    course_id: UUID
    course_name: str
    grade: Grade


@dataclass
class Student:
    """Registered student.

    Attributes:
        id: Unique student identifier.
        name: Display name.
        email: Contact address.
        enrollments: Current enrollments, in position order (max 2).
    """

    id: UUID
    name: str
    email: Email
    enrollments: list[Enrollment] = field(default_factory=list)

    @property
    def number_of_courses(self) -> int:
        """Number of courses the student is enrolled in."""
        return len(self.enrollments)

    def is_fully_enrolled(self) -> bool:
        """Check whether the student reached the enrollment limit."""
        return len(self.enrollments) >= MAX_ENROLLMENTS

    def is_enrolled_in(self, course_name: str) -> bool:
        """Check whether the student has an enrollment for the named course."""
        return any(e.course_name == course_name for e in self.enrollments)

    def get_enrollment(self, enrollment_number: int) -> Enrollment | None:
        """Return the enrollment at a 1-based position, if any.

        Args:
            enrollment_number: Position (1 or 2).

        Returns:
            The enrollment, or None if the position is empty or out of range.
        """
        if not 1 <= enrollment_number <= len(self.enrollments):
            return None
        return self.enrollments[enrollment_number - 1]

    def enroll(self, course: Course, grade: Grade) -> Result[None, str]:
        """Enroll the student in a course.

        Args:
            course: Course to enroll in.
            grade: Initial grade.

        Returns:
            Success(None) on enrollment, Failure(error) when the student is
            fully enrolled or already takes the course.
        """
        if self.is_fully_enrolled():
            return Failure(error=StudentError.TOO_MANY_ENROLLMENTS)
        if self.is_enrolled_in(course.name):
            return Failure(error=StudentError.ALREADY_ENROLLED)

        self.enrollments.append(
            Enrollment(course_id=course.id, course_name=course.name, grade=grade)
        )
        return Success(value=None)

    def transfer(
        self, enrollment_number: int, course: Course, grade: Grade
    ) -> Result[None, str]:
        """Replace the enrollment at a position with another course.

        Args:
            enrollment_number: Position to replace (1 or 2).
            course: New course.
            grade: Grade in the new course.

        Returns:
            Success(None) or Failure(error).
        """
        if enrollment_number not in (1, 2):
            return Failure(error=StudentError.INVALID_ENROLLMENT_NUMBER)

        enrollment = self.get_enrollment(enrollment_number)
        if enrollment is None:
            return Failure(error=StudentError.NO_ENROLLMENT_AT_POSITION)

        if any(
            e.course_name == course.name
            for i, e in enumerate(self.enrollments, start=1)
            if i != enrollment_number
        ):
            return Failure(error=StudentError.ALREADY_ENROLLED)

        self.enrollments[enrollment_number - 1] = Enrollment(
            course_id=course.id, course_name=course.name, grade=grade
        )
        return Success(value=None)

    def disenroll(self, enrollment_number: int) -> Result[None, str]:
        """Remove the enrollment at a position.

        The second enrollment (if any) moves up to position 1.

        Args:
            enrollment_number: Position to remove (1 or 2).

        Returns:
            Success(None) or Failure(error).
        """
        if enrollment_number not in (1, 2):
            return Failure(error=StudentError.INVALID_ENROLLMENT_NUMBER)
        if self.get_enrollment(enrollment_number) is None:
            return Failure(error=StudentError.NO_ENROLLMENT_AT_POSITION)

        del self.enrollments[enrollment_number - 1]
        return Success(value=None)

    def edit_personal_info(self, name: str, email: Email) -> Result[None, str]:
        """Update name and email.

        Args:
            name: New display name.
            email: New contact address.

        Returns:
            Success(None) or Failure(INVALID_NAME).
        """
        if not name.strip():
            return Failure(error=StudentError.INVALID_NAME)

        self.name = name.strip()
        self.email = email
        return Success(value=None)

"""Student repository protocol.

Defines the interface for student persistence operations.
"""

from typing import Protocol
from uuid import UUID

from studentdesk.domain.entities.student import Student
from studentdesk.domain.specifications.base import Specification


class StudentRepository(Protocol):
    """Protocol for student persistence operations.

    Infrastructure provides concrete implementations (SQLAlchemy, in-memory).

    **Design Principles**:
    - Read methods return domain entities (Student), not database models
    - A student is saved together with its enrollments (aggregate)
    - Specification-driven reads go through ``find_matching``
    """

    async def find_by_id(self, student_id: UUID) -> Student | None:
        """Find student by ID.

        Args:
            student_id: Unique student identifier.

        Returns:
            Student entity if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Student | None:
        """Find student by (normalized) email address.

        Args:
            email: Email address.

        Returns:
            Student entity if found, None otherwise.
        """
        ...

    async def list_all(
        self,
        enrolled_in: str | None = None,
        number_of_courses: int | None = None,
    ) -> list[Student]:
        """List students, optionally filtered.

        Args:
            enrolled_in: Only students enrolled in the course with this name.
            number_of_courses: Only students with exactly this many enrollments.

        Returns:
            Matching students ordered by name (empty list if none).
        """
        ...

    async def find_matching(self, spec: Specification[Student]) -> list[Student]:
        """List students satisfying a specification.

        Args:
            spec: Student specification.

        Returns:
            Matching students ordered by name (empty list if none).
        """
        ...

    async def save(self, student: Student) -> None:
        """Create or update a student with its enrollments.

        Args:
            student: Student entity to persist.
        """
        ...

    async def delete(self, student_id: UUID) -> None:
        """Delete a student and its enrollments.

        Args:
            student_id: Student to delete.
        """
        ...

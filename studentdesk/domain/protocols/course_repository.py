"""Course repository protocol."""

from typing import Protocol

from studentdesk.domain.entities.course import Course


class CourseRepository(Protocol):
    """Protocol for course persistence operations."""

    async def find_by_name(self, name: str) -> Course | None:
        """Find course by its unique name.

        Args:
            name: Course name (e.g., "Calculus").

        Returns:
            Course entity if found, None otherwise.
        """
        ...

    async def save(self, course: Course) -> None:
        """Create or update a course.

        Args:
            course: Course entity to persist.
        """
        ...

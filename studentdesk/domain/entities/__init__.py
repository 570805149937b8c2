"""Domain entities."""

from studentdesk.domain.entities.course import Course
from studentdesk.domain.entities.student import MAX_ENROLLMENTS, Enrollment, Student

__all__ = ["Course", "Enrollment", "MAX_ENROLLMENTS", "Student"]

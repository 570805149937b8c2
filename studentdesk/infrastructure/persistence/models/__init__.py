"""Database models."""

from studentdesk.infrastructure.persistence.models.course import CourseModel
from studentdesk.infrastructure.persistence.models.enrollment import EnrollmentModel
from studentdesk.infrastructure.persistence.models.student import StudentModel

__all__ = ["CourseModel", "EnrollmentModel", "StudentModel"]

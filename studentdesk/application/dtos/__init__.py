"""Application DTOs."""

from studentdesk.application.dtos.student_dtos import (
    EnrollmentDto,
    StudentDto,
    to_student_dto,
)

__all__ = ["EnrollmentDto", "StudentDto", "to_student_dto"]

"""Enrollment database model.

Architecture:
    - Enrollments belong to students (FK with CASCADE delete)
    - course_name is denormalized for filtering without a join
    - position keeps the student's enrollment order (1 or 2)
    - grade stored as the letter string
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from studentdesk.infrastructure.persistence.base import BaseModel


class EnrollmentModel(BaseModel):
    """Enrollment model.

    Fields:
        id: UUID primary key
        student_id: FK to students table
        course_id: Enrolled course
        course_name: Course name at enrollment time
        grade: Letter grade (A-F)
        position: 1-based enrollment number

    Indexes:
        - ix_enrollments_student_id: FK lookup
        - uq_enrollments_student_position: Unique (student_id, position)
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint(
            "student_id", "position", name="uq_enrollments_student_position"
        ),
    )

    student_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    course_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    grade: Mapped[str] = mapped_column(String(1), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

"""Student database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from studentdesk.infrastructure.persistence.base import BaseMutableModel


class StudentModel(BaseMutableModel):
    """Student model.

    Fields:
        id: UUID primary key (uuid7 assigned by the domain)
        name: Display name
        email: Normalized email address (unique)

    Enrollments live in their own table keyed by student_id; there is no ORM
    relationship, the repository loads them explicitly.
    """

    __tablename__ = "students"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True
    )

"""Course database model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from studentdesk.infrastructure.persistence.base import BaseMutableModel


class CourseModel(BaseMutableModel):
    """Course model.

    Fields:
        id: UUID primary key
        name: Course name (unique)
        credits: Credit points
    """

    __tablename__ = "courses"

    name: Mapped[str] = mapped_column(
        String(200), nullable=False, unique=True, index=True
    )
    credits: Mapped[int] = mapped_column(Integer, nullable=False)

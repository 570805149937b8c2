"""SqlAlchemyCourseRepository - SQLAlchemy implementation of CourseRepository."""

from sqlalchemy import select

from studentdesk.domain.entities.course import Course
from studentdesk.infrastructure.persistence.database import Database
from studentdesk.infrastructure.persistence.models.course import CourseModel


class SqlAlchemyCourseRepository:
    """SQLAlchemy implementation of CourseRepository protocol."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def find_by_name(self, name: str) -> Course | None:
        """Find course by its unique name.

        Args:
            name: Course name.

        Returns:
            Course entity if found, None otherwise.
        """
        async with self._database.session() as session:
            result = await session.execute(
                select(CourseModel).where(CourseModel.name == name)
            )
            model = result.scalar_one_or_none()

        if model is None:
            return None
        return Course(id=model.id, name=model.name, credits=model.credits)

    async def save(self, course: Course) -> None:
        """Create or update a course.

        Args:
            course: Course entity to save.
        """
        async with self._database.session() as session:
            existing = await session.get(CourseModel, course.id)
            if existing is None:
                session.add(
                    CourseModel(id=course.id, name=course.name, credits=course.credits)
                )
            else:
                existing.name = course.name
                existing.credits = course.credits
            await session.flush()

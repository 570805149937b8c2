"""SqlAlchemyStudentRepository - SQLAlchemy implementation of StudentRepository.

Adapter for hexagonal architecture.
Maps between domain Student entities and the students/enrollments tables.
"""

from collections import defaultdict
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import Select, delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from studentdesk.domain.entities.student import Enrollment, Student
from studentdesk.domain.enums.grade import Grade
from studentdesk.domain.specifications.base import Specification
from studentdesk.domain.value_objects.email import Email
from studentdesk.infrastructure.persistence.database import Database
from studentdesk.infrastructure.persistence.models.enrollment import EnrollmentModel
from studentdesk.infrastructure.persistence.models.student import StudentModel
from studentdesk.infrastructure.persistence.specification_translator import (
    SqlAlchemyFilterTranslator,
)
from studentdesk.infrastructure.persistence.student_filters import (
    STUDENT_CLAUSES,
    enrollment_count,
)


class SqlAlchemyStudentRepository:
    """SQLAlchemy implementation of StudentRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).
    Every operation runs in its own session from ``Database.session``.

    Example:
        >>> repo = SqlAlchemyStudentRepository(database)
        >>> students = await repo.find_matching(NEEDS_ATTENTION)
    """

    def __init__(
        self,
        database: Database,
        translator: SqlAlchemyFilterTranslator | None = None,
    ) -> None:
        """Initialize repository.

        Args:
            database: Database providing sessions.
            translator: Specification translator (defaults to student clauses).
        """
        self._database = database
        self._translator = translator or SqlAlchemyFilterTranslator(STUDENT_CLAUSES)

    async def find_by_id(self, student_id: UUID) -> Student | None:
        """Find student by ID.

        Args:
            student_id: Unique student identifier.

        Returns:
            Student entity if found, None otherwise.
        """
        stmt = select(StudentModel).where(StudentModel.id == student_id)
        students = await self._fetch(stmt)
        return students[0] if students else None

    async def find_by_email(self, email: str) -> Student | None:
        """Find student by email address.

        Args:
            email: Normalized email address.

        Returns:
            Student entity if found, None otherwise.
        """
        stmt = select(StudentModel).where(StudentModel.email == email)
        students = await self._fetch(stmt)
        return students[0] if students else None

    async def list_all(
        self,
        enrolled_in: str | None = None,
        number_of_courses: int | None = None,
    ) -> list[Student]:
        """List students, optionally filtered by course and enrollment count.

        Returns:
            Matching students ordered by name (empty list if none).
        """
        stmt = select(StudentModel)

        if enrolled_in is not None:
            stmt = stmt.where(
                exists().where(
                    EnrollmentModel.student_id == StudentModel.id,
                    EnrollmentModel.course_name == enrolled_in,
                )
            )
        if number_of_courses is not None:
            stmt = stmt.where(enrollment_count() == number_of_courses)

        return await self._fetch(stmt)

    async def find_matching(self, spec: Specification[Student]) -> list[Student]:
        """List students satisfying a specification (filtered in SQL).

        Raises:
            UnsupportedConditionError: If a leaf has no SQL clause.
        """
        stmt = select(StudentModel).where(self._translator.translate_spec(spec))
        return await self._fetch(stmt)

    async def save(self, student: Student) -> None:
        """Create or update a student and replace its enrollments.

        Args:
            student: Student entity to save.
        """
        async with self._database.session() as session:
            existing = await session.get(StudentModel, student.id)
            if existing is None:
                session.add(
                    StudentModel(
                        id=student.id, name=student.name, email=str(student.email)
                    )
                )
            else:
                existing.name = student.name
                existing.email = str(student.email)

            await session.execute(
                delete(EnrollmentModel).where(EnrollmentModel.student_id == student.id)
            )
            session.add_all(
                EnrollmentModel(
                    student_id=student.id,
                    course_id=enrollment.course_id,
                    course_name=enrollment.course_name,
                    grade=enrollment.grade.value,
                    position=position,
                )
                for position, enrollment in enumerate(student.enrollments, start=1)
            )
            await session.flush()

    async def delete(self, student_id: UUID) -> None:
        """Delete a student and its enrollments.

        Args:
            student_id: Student to delete.
        """
        async with self._database.session() as session:
            await session.execute(
                delete(EnrollmentModel).where(EnrollmentModel.student_id == student_id)
            )
            await session.execute(
                delete(StudentModel).where(StudentModel.id == student_id)
            )

    async def _fetch(self, stmt: Select[tuple[StudentModel]]) -> list[Student]:
        stmt = stmt.order_by(StudentModel.name, StudentModel.id)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()
            return await self._with_enrollments(session, models)

    async def _with_enrollments(
        self, session: AsyncSession, models: Sequence[StudentModel]
    ) -> list[Student]:
        if not models:
            return []

        stmt = (
            select(EnrollmentModel)
            .where(EnrollmentModel.student_id.in_([m.id for m in models]))
            .order_by(EnrollmentModel.student_id, EnrollmentModel.position)
        )
        result = await session.execute(stmt)

        by_student: defaultdict[UUID, list[EnrollmentModel]] = defaultdict(list)
        for row in result.scalars().all():
            by_student[row.student_id].append(row)

        return [self._to_domain(m, by_student[m.id]) for m in models]

    def _to_domain(
        self, model: StudentModel, enrollments: list[EnrollmentModel]
    ) -> Student:
        """Convert database models to domain entity."""
        return Student(
            id=model.id,
            name=model.name,
            email=Email(model.email),
            enrollments=[
                Enrollment(
                    course_id=row.course_id,
                    course_name=row.course_name,
                    grade=Grade(row.grade),
                )
                for row in enrollments
            ],
        )

"""SQL clauses for student specifications.

Maps every student leaf condition to a clause over ``students`` (correlated
subqueries on ``enrollments`` where needed). Each clause selects exactly the
rows whose domain entity satisfies the leaf.
"""

from sqlalchemy import exists, func, select
from sqlalchemy.sql.elements import ColumnElement

from studentdesk.domain.entities.student import MAX_ENROLLMENTS
from studentdesk.domain.enums.grade import Grade
from studentdesk.domain.specifications.student_specifications import (
    UNIVERSITY_EMAIL_DOMAIN,
    HasFailingGrade,
    HasNoEnrollments,
    HasUniversityEmail,
    IsFullyEnrolled,
)
from studentdesk.infrastructure.persistence.models.enrollment import EnrollmentModel
from studentdesk.infrastructure.persistence.models.student import StudentModel
from studentdesk.infrastructure.persistence.specification_translator import (
    ClauseFactory,
)

FAILING_GRADES: tuple[str, ...] = tuple(g.value for g in Grade if g.is_failing)


def enrollment_count() -> ColumnElement[int]:
    """Correlated count of the current student's enrollments."""
    return (
        select(func.count(EnrollmentModel.id))
        .where(EnrollmentModel.student_id == StudentModel.id)
        .scalar_subquery()
    )


def _has_no_enrollments() -> ColumnElement[bool]:
    return ~exists().where(EnrollmentModel.student_id == StudentModel.id)


def _is_fully_enrolled() -> ColumnElement[bool]:
    return enrollment_count() >= MAX_ENROLLMENTS


def _has_failing_grade() -> ColumnElement[bool]:
    return exists().where(
        EnrollmentModel.student_id == StudentModel.id,
        EnrollmentModel.grade.in_(FAILING_GRADES),
    )


def _has_university_email() -> ColumnElement[bool]:
    return StudentModel.email.endswith(f"@{UNIVERSITY_EMAIL_DOMAIN}", autoescape=True)


STUDENT_CLAUSES: dict[str, ClauseFactory] = {
    HasNoEnrollments.condition_id: _has_no_enrollments,
    IsFullyEnrolled.condition_id: _is_fully_enrolled,
    HasFailingGrade.condition_id: _has_failing_grade,
    HasUniversityEmail.condition_id: _has_university_email,
}

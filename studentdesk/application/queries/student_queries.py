"""Student queries (CQRS read operations).

Queries request data without changing state. Handlers return the result
type declared on the marker (``Query[T]``); an empty list means nothing
matched.
"""

from dataclasses import dataclass

from studentdesk.application.cqrs.contracts import Query
from studentdesk.application.dtos.student_dtos import StudentDto


@dataclass(frozen=True, kw_only=True)
class GetStudentList(Query[list[StudentDto]]):
    """List students, optionally filtered.

    Attributes:
        enrolled_in: Only students enrolled in this course.
        number_of_courses: Only students with exactly this many enrollments.
    """

    enrolled_in: str | None = None
    number_of_courses: int | None = None


@dataclass(frozen=True, kw_only=True)
class ListStudentsNeedingAttention(Query[list[StudentDto]]):
    """List students with a failing grade or without any enrollment."""

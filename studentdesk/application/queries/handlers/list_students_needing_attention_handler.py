"""ListStudentsNeedingAttention query handler."""

from studentdesk.application.cqrs.contracts import QueryHandler
from studentdesk.application.dtos.student_dtos import StudentDto, to_student_dto
from studentdesk.application.queries.student_queries import (
    ListStudentsNeedingAttention,
)
from studentdesk.domain.protocols.student_repository import StudentRepository
from studentdesk.domain.specifications.student_specifications import NEEDS_ATTENTION


class ListStudentsNeedingAttentionHandler(
    QueryHandler[ListStudentsNeedingAttention, list[StudentDto]]
):
    """Lists students matching ``NEEDS_ATTENTION``.

    Filtering happens in the repository (SQL for the database adapter).
    """

    def __init__(self, students: StudentRepository) -> None:
        self._students = students

    async def handle(self, query: ListStudentsNeedingAttention) -> list[StudentDto]:
        students = await self._students.find_matching(NEEDS_ATTENTION)
        return [to_student_dto(s) for s in students]

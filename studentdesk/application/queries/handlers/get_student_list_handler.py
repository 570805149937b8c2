"""GetStudentList query handler.

Returns student summaries filtered by course and number of enrollments.
An empty list means no student matched.
"""

from studentdesk.application.cqrs.contracts import QueryHandler
from studentdesk.application.dtos.student_dtos import StudentDto, to_student_dto
from studentdesk.application.queries.student_queries import GetStudentList
from studentdesk.domain.protocols.student_repository import StudentRepository


class GetStudentListHandler(QueryHandler[GetStudentList, list[StudentDto]]):
    """Handler for GetStudentList query.

    Dependencies (injected via constructor):
        - StudentRepository: For data retrieval
    """

    def __init__(self, students: StudentRepository) -> None:
        self._students = students

    async def handle(self, query: GetStudentList) -> list[StudentDto]:
        """Handle GetStudentList query.

        Args:
            query: Optional course and enrollment-count filters.

        Returns:
            Matching students ordered by name (may be empty).
        """
        students = await self._students.list_all(
            enrolled_in=query.enrolled_in,
            number_of_courses=query.number_of_courses,
        )
        return [to_student_dto(s) for s in students]

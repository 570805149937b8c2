"""DisenrollStudent command handler."""

from studentdesk.application.commands.student_commands import DisenrollStudent
from studentdesk.application.cqrs.contracts import CommandHandler
from studentdesk.core.result import Failure, Result, Success
from studentdesk.domain.protocols.student_repository import StudentRepository


class DisenrollStudentError:
    """DisenrollStudent-specific errors."""

    STUDENT_NOT_FOUND = "Student not found"


class DisenrollStudentHandler(CommandHandler[DisenrollStudent]):
    """Handler for DisenrollStudent command."""

    def __init__(self, students: StudentRepository) -> None:
        self._students = students

    async def handle(self, command: DisenrollStudent) -> Result[None, str]:
        student = await self._students.find_by_id(command.student_id)
        if student is None:
            return Failure(error=DisenrollStudentError.STUDENT_NOT_FOUND)

        result = student.disenroll(command.enrollment_number)
        if isinstance(result, Failure):
            return result

        await self._students.save(student)
        return Success(value=None)

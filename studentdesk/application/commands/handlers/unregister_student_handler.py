"""UnregisterStudent command handler.

Removes a student together with all enrollments.
"""

from studentdesk.application.commands.student_commands import UnregisterStudent
from studentdesk.application.cqrs.contracts import CommandHandler
from studentdesk.core.result import Failure, Result, Success
from studentdesk.domain.protocols.logger_protocol import LoggerProtocol
from studentdesk.domain.protocols.student_repository import StudentRepository


class UnregisterStudentError:
    """UnregisterStudent-specific errors."""

    STUDENT_NOT_FOUND = "Student not found"


class UnregisterStudentHandler(CommandHandler[UnregisterStudent]):
    """Handler for UnregisterStudent command.

    Dependencies (injected via constructor):
        - StudentRepository: For persistence
        - LoggerProtocol: For structured logging
    """

    def __init__(self, students: StudentRepository, logger: LoggerProtocol) -> None:
        self._students = students
        self._logger = logger

    async def handle(self, command: UnregisterStudent) -> Result[None, str]:
        """Handle UnregisterStudent command.

        Returns:
            Success(None): Student removed.
            Failure(error): Unknown student.
        """
        student = await self._students.find_by_id(command.student_id)
        if student is None:
            return Failure(error=UnregisterStudentError.STUDENT_NOT_FOUND)

        await self._students.delete(student.id)

        self._logger.info(
            "student_unregistered",
            student_id=str(student.id),
            dropped_enrollments=student.number_of_courses,
        )
        return Success(value=None)

"""EditPersonalInfo command handler."""

from studentdesk.application.commands.student_commands import EditPersonalInfo
from studentdesk.application.cqrs.contracts import CommandHandler
from studentdesk.core.result import Failure, Result, Success
from studentdesk.domain.errors.student_error import StudentError
from studentdesk.domain.protocols.student_repository import StudentRepository
from studentdesk.domain.value_objects.email import Email


class EditPersonalInfoError:
    """EditPersonalInfo-specific errors."""

    STUDENT_NOT_FOUND = "Student not found"
    EMAIL_TAKEN = "Email address is already registered"


class EditPersonalInfoHandler(CommandHandler[EditPersonalInfo]):
    """Handler for EditPersonalInfo command.

    Dependencies (injected via constructor):
        - StudentRepository: For persistence
    """

    def __init__(self, students: StudentRepository) -> None:
        self._students = students

    async def handle(self, command: EditPersonalInfo) -> Result[None, str]:
        """Handle EditPersonalInfo command.

        Args:
            command: EditPersonalInfo command.

        Returns:
            Success(None): Name and email updated.
            Failure(error): Unknown student, empty name, invalid or taken email.
        """
        student = await self._students.find_by_id(command.student_id)
        if student is None:
            return Failure(error=EditPersonalInfoError.STUDENT_NOT_FOUND)

        try:
            email = Email(command.email)
        except ValueError:
            return Failure(error=StudentError.INVALID_EMAIL)

        if email != student.email:
            owner = await self._students.find_by_email(str(email))
            if owner is not None and owner.id != student.id:
                return Failure(error=EditPersonalInfoError.EMAIL_TAKEN)

        result = student.edit_personal_info(command.name, email)
        if isinstance(result, Failure):
            return result

        await self._students.save(student)
        return Success(value=None)

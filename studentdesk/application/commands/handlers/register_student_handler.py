"""RegisterStudent command handler.

Creates a student with a validated, normalized email address and returns
the new student id.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, value objects)
- Uses Result types for business failures; infrastructure faults propagate
"""

from uuid import UUID

from uuid_extensions import uuid7

from studentdesk.application.commands.student_commands import RegisterStudent
from studentdesk.application.cqrs.contracts import ResultCommandHandler
from studentdesk.core.result import Failure, Result, Success
from studentdesk.domain.entities.student import Student
from studentdesk.domain.errors.student_error import StudentError
from studentdesk.domain.protocols.logger_protocol import LoggerProtocol
from studentdesk.domain.protocols.student_repository import StudentRepository
from studentdesk.domain.value_objects.email import Email


class RegisterStudentError:
    """RegisterStudent-specific errors."""

    EMAIL_TAKEN = "Email address is already registered"


class RegisterStudentHandler(ResultCommandHandler[RegisterStudent, UUID]):
    """Handler for RegisterStudent command.

    Dependencies (injected via constructor):
        - StudentRepository: For persistence
        - LoggerProtocol: For structured logging
    """

    def __init__(self, students: StudentRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            students: Student repository.
            logger: Structured logger.
        """
        self._students = students
        self._logger = logger

    async def handle(self, command: RegisterStudent) -> Result[UUID, str]:
        """Handle RegisterStudent command.

        Args:
            command: RegisterStudent command with name and email.

        Returns:
            Success(student_id): Student registered.
            Failure(error): Empty name, invalid email or email already taken.
        """
        name = command.name.strip()
        if not name:
            return Failure(error=StudentError.INVALID_NAME)

        try:
            email = Email(command.email)
        except ValueError:
            return Failure(error=StudentError.INVALID_EMAIL)

        if await self._students.find_by_email(str(email)) is not None:
            return Failure(error=RegisterStudentError.EMAIL_TAKEN)

        student = Student(id=uuid7(), name=name, email=email)
        await self._students.save(student)

        self._logger.info("student_registered", student_id=str(student.id))
        return Success(value=student.id)

"""TransferStudent command handler."""

from studentdesk.application.commands.student_commands import TransferStudent
from studentdesk.application.cqrs.contracts import CommandHandler
from studentdesk.core.result import Failure, Result, Success
from studentdesk.domain.protocols.course_repository import CourseRepository
from studentdesk.domain.protocols.student_repository import StudentRepository


class TransferStudentError:
    """TransferStudent-specific errors."""

    STUDENT_NOT_FOUND = "Student not found"
    COURSE_NOT_FOUND = "Course not found"


class TransferStudentHandler(CommandHandler[TransferStudent]):
    """Handler for TransferStudent command.

    Replaces the enrollment at the given position with the target course.
    """

    def __init__(
        self,
        students: StudentRepository,
        courses: CourseRepository,
    ) -> None:
        self._students = students
        self._courses = courses

    async def handle(self, command: TransferStudent) -> Result[None, str]:
        """Handle TransferStudent command.

        Returns:
            Success(None): Enrollment replaced.
            Failure(error): Unknown student or course, invalid or empty
                position, or already enrolled in the target course.
        """
        student = await self._students.find_by_id(command.student_id)
        if student is None:
            return Failure(error=TransferStudentError.STUDENT_NOT_FOUND)

        course = await self._courses.find_by_name(command.course_name)
        if course is None:
            return Failure(error=TransferStudentError.COURSE_NOT_FOUND)

        result = student.transfer(command.enrollment_number, course, command.grade)
        if isinstance(result, Failure):
            return result

        await self._students.save(student)
        return Success(value=None)

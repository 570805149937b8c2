"""EnrollStudent command handler.

Enrolls a student in a course by name. A student takes at most two courses
and never the same course twice (enforced by the Student entity).
"""

from studentdesk.application.commands.student_commands import EnrollStudent
from studentdesk.application.cqrs.contracts import CommandHandler
from studentdesk.core.result import Failure, Result, Success
from studentdesk.domain.protocols.course_repository import CourseRepository
from studentdesk.domain.protocols.student_repository import StudentRepository


class EnrollStudentError:
    """EnrollStudent-specific errors."""

    STUDENT_NOT_FOUND = "Student not found"
    COURSE_NOT_FOUND = "Course not found"


class EnrollStudentHandler(CommandHandler[EnrollStudent]):
    """Handler for EnrollStudent command.

    Dependencies (injected via constructor):
        - StudentRepository: For persistence
        - CourseRepository: For course lookup
    """

    def __init__(
        self,
        students: StudentRepository,
        courses: CourseRepository,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            students: Student repository.
            courses: Course repository.
        """
        self._students = students
        self._courses = courses

    async def handle(self, command: EnrollStudent) -> Result[None, str]:
        """Handle EnrollStudent command.

        Args:
            command: EnrollStudent command.

        Returns:
            Success(None): Student enrolled.
            Failure(error): Unknown student or course, fully enrolled, or
                already enrolled in the course.
        """
        student = await self._students.find_by_id(command.student_id)
        if student is None:
            return Failure(error=EnrollStudentError.STUDENT_NOT_FOUND)

        course = await self._courses.find_by_name(command.course_name)
        if course is None:
            return Failure(error=EnrollStudentError.COURSE_NOT_FOUND)

        result = student.enroll(course, command.grade)
        if isinstance(result, Failure):
            return result

        await self._students.save(student)
        return Success(value=None)

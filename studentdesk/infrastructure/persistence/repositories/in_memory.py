"""In-memory repositories.

Dict-backed implementations of the student and course repository protocols,
used by tests and local experiments. Specifications are evaluated through
their predicate form, the same representation the SQL translator consumes.

Entities are copied on the way in and out so callers never share state with
the store.
"""

import copy
from uuid import UUID

from studentdesk.domain.entities.course import Course
from studentdesk.domain.entities.student import Student
from studentdesk.domain.specifications.base import (
    Specification,
    conditions_of,
    evaluate,
)


class InMemoryStudentRepository:
    """Dict-backed StudentRepository."""

    def __init__(self, students: list[Student] | None = None) -> None:
        self._students: dict[UUID, Student] = {}
        for student in students or []:
            self._students[student.id] = copy.deepcopy(student)

    async def find_by_id(self, student_id: UUID) -> Student | None:
        student = self._students.get(student_id)
        return copy.deepcopy(student) if student else None

    async def find_by_email(self, email: str) -> Student | None:
        for student in self._students.values():
            if str(student.email) == email:
                return copy.deepcopy(student)
        return None

    async def list_all(
        self,
        enrolled_in: str | None = None,
        number_of_courses: int | None = None,
    ) -> list[Student]:
        return [
            copy.deepcopy(s)
            for s in self._ordered()
            if (enrolled_in is None or s.is_enrolled_in(enrolled_in))
            and (number_of_courses is None or s.number_of_courses == number_of_courses)
        ]

    async def find_matching(self, spec: Specification[Student]) -> list[Student]:
        node = spec.to_predicate_form()
        conditions = conditions_of(spec)
        return [
            copy.deepcopy(s)
            for s in self._ordered()
            if evaluate(node, s, conditions)
        ]

    async def save(self, student: Student) -> None:
        self._students[student.id] = copy.deepcopy(student)

    async def delete(self, student_id: UUID) -> None:
        self._students.pop(student_id, None)

    def _ordered(self) -> list[Student]:
        return sorted(self._students.values(), key=lambda s: (s.name, str(s.id)))


class InMemoryCourseRepository:
    """Dict-backed CourseRepository."""

    def __init__(self, courses: list[Course] | None = None) -> None:
        self._courses: dict[UUID, Course] = {c.id: c for c in courses or []}

    async def find_by_name(self, name: str) -> Course | None:
        for course in self._courses.values():
            if course.name == name:
                return course
        return None

    async def save(self, course: Course) -> None:
        self._courses[course.id] = course

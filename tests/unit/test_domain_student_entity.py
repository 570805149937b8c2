"""Unit tests for the Student entity.

Tests cover:
- Enrollment limit and duplicate course rules
- Transfer and disenroll by position
- Personal info editing
"""

import pytest

from studentdesk.core.result import Failure, Success
from studentdesk.domain.entities.student import MAX_ENROLLMENTS
from studentdesk.domain.enums.grade import Grade
from studentdesk.domain.errors.student_error import StudentError
from studentdesk.domain.value_objects.email import Email
from tests.conftest import make_course, make_student


@pytest.mark.unit
class TestStudentEnroll:
    """Student.enroll()."""

    def test_enroll_adds_enrollment(self):
        student = make_student()
        course = make_course("Calculus")

        result = student.enroll(course, Grade.A)

        assert result == Success(value=None)
        assert student.number_of_courses == 1
        assert student.enrollments[0].course_id == course.id
        assert student.enrollments[0].grade == Grade.A

    def test_enroll_beyond_limit_fails(self):
        student = make_student()
        student.enroll(make_course("Calculus"), Grade.A)
        student.enroll(make_course("Physics"), Grade.B)

        result = student.enroll(make_course("History"), Grade.C)

        assert result == Failure(error=StudentError.TOO_MANY_ENROLLMENTS)
        assert student.number_of_courses == MAX_ENROLLMENTS
        assert student.is_fully_enrolled()

    def test_enroll_twice_in_same_course_fails(self):
        student = make_student()
        course = make_course("Calculus")
        student.enroll(course, Grade.A)

        result = student.enroll(course, Grade.B)

        assert result == Failure(error=StudentError.ALREADY_ENROLLED)
        assert student.number_of_courses == 1


@pytest.mark.unit
class TestStudentTransfer:
    """Student.transfer()."""

    def test_transfer_replaces_position(self):
        student = make_student(
            enrollments=[("Calculus", Grade.A), ("Physics", Grade.B)]
        )
        history = make_course("History")

        result = student.transfer(2, history, Grade.C)

        assert result == Success(value=None)
        assert [e.course_name for e in student.enrollments] == [
            "Calculus",
            "History",
        ]
        assert student.enrollments[1].grade == Grade.C

    def test_transfer_to_same_course_at_same_position_allowed(self):
        student = make_student(enrollments=[("Calculus", Grade.A)])

        result = student.transfer(1, make_course("Calculus"), Grade.F)

        assert result == Success(value=None)
        assert student.enrollments[0].grade == Grade.F

    def test_transfer_to_course_held_at_other_position_fails(self):
        student = make_student(
            enrollments=[("Calculus", Grade.A), ("Physics", Grade.B)]
        )

        result = student.transfer(1, make_course("Physics"), Grade.A)

        assert result == Failure(error=StudentError.ALREADY_ENROLLED)

    @pytest.mark.parametrize("position", [0, 3, -1])
    def test_invalid_position_fails(self, position):
        student = make_student(enrollments=[("Calculus", Grade.A)])

        result = student.transfer(position, make_course("History"), Grade.A)

        assert result == Failure(error=StudentError.INVALID_ENROLLMENT_NUMBER)

    def test_empty_position_fails(self):
        student = make_student(enrollments=[("Calculus", Grade.A)])

        result = student.transfer(2, make_course("History"), Grade.A)

        assert result == Failure(error=StudentError.NO_ENROLLMENT_AT_POSITION)


@pytest.mark.unit
class TestStudentDisenroll:
    """Student.disenroll()."""

    def test_disenroll_first_moves_second_up(self):
        student = make_student(
            enrollments=[("Calculus", Grade.A), ("Physics", Grade.B)]
        )

        result = student.disenroll(1)

        assert result == Success(value=None)
        assert [e.course_name for e in student.enrollments] == ["Physics"]
        assert student.get_enrollment(1).course_name == "Physics"
        assert student.get_enrollment(2) is None

    def test_disenroll_empty_position_fails(self):
        student = make_student()

        assert student.disenroll(1) == Failure(
            error=StudentError.NO_ENROLLMENT_AT_POSITION
        )

    def test_disenroll_invalid_position_fails(self):
        student = make_student(enrollments=[("Calculus", Grade.A)])

        assert student.disenroll(5) == Failure(
            error=StudentError.INVALID_ENROLLMENT_NUMBER
        )


@pytest.mark.unit
class TestStudentPersonalInfo:
    """Student.edit_personal_info()."""

    def test_edit_updates_fields(self):
        student = make_student()

        result = student.edit_personal_info("  Alicia ", Email("alicia@mail.org"))

        assert result == Success(value=None)
        assert student.name == "Alicia"
        assert student.email == Email("alicia@mail.org")

    def test_blank_name_fails_without_changes(self):
        student = make_student(name="Alice")

        result = student.edit_personal_info("   ", Email("alicia@mail.org"))

        assert result == Failure(error=StudentError.INVALID_NAME)
        assert student.name == "Alice"
        assert student.email == Email("alice@university.edu")

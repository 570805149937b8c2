"""Student specifications.

Parameterless predicates over ``Student``. Each leaf has a stable
``condition_id`` that storage adapters map to their own filter clause
(see ``infrastructure/persistence/student_filters.py``).
"""

from studentdesk.domain.entities.student import MAX_ENROLLMENTS, Student
from studentdesk.domain.specifications.base import LeafSpecification, Specification

UNIVERSITY_EMAIL_DOMAIN = "university.edu"


class HasNoEnrollments(LeafSpecification[Student]):
    """Student is not enrolled in any course."""

    condition_id = "student.has_no_enrollments"

    def is_satisfied_by(self, candidate: Student) -> bool:
        return candidate.number_of_courses == 0


class IsFullyEnrolled(LeafSpecification[Student]):
    """Student reached the enrollment limit."""

    condition_id = "student.is_fully_enrolled"

    def is_satisfied_by(self, candidate: Student) -> bool:
        return candidate.number_of_courses >= MAX_ENROLLMENTS


class HasFailingGrade(LeafSpecification[Student]):
    """Student has at least one failing grade."""

    condition_id = "student.has_failing_grade"

    def is_satisfied_by(self, candidate: Student) -> bool:
        return any(e.grade.is_failing for e in candidate.enrollments)


class HasUniversityEmail(LeafSpecification[Student]):
    """Student's contact address is on the university domain."""

    condition_id = "student.has_university_email"

    def is_satisfied_by(self, candidate: Student) -> bool:
        return candidate.email.domain == UNIVERSITY_EMAIL_DOMAIN


# Students an advisor should follow up with
NEEDS_ATTENTION: Specification[Student] = HasFailingGrade() | HasNoEnrollments()

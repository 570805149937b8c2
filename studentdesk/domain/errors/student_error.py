"""Student domain errors.

Error constants for student registration, enrollment and personal data.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error=...) instead)

Usage:
    from studentdesk.domain.errors import StudentError
    from studentdesk.core.result import Failure

    if student.is_fully_enrolled():
        return Failure(error=StudentError.TOO_MANY_ENROLLMENTS)
"""


class StudentError:
    """Student error constants.

    Error Categories:
        - Validation errors: INVALID_NAME, INVALID_EMAIL
        - Enrollment errors: TOO_MANY_ENROLLMENTS, ALREADY_ENROLLED,
          NO_ENROLLMENT_AT_POSITION, INVALID_ENROLLMENT_NUMBER
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_NAME = "Student name cannot be empty"
    """Students need a display name."""

    INVALID_EMAIL = "Invalid email address"
    """Email must be a syntactically valid address."""

    # -------------------------------------------------------------------------
    # Enrollment Errors
    # -------------------------------------------------------------------------

    TOO_MANY_ENROLLMENTS = "Student cannot have more than 2 enrollments"
    """A student holds at most two enrollments at a time."""

    ALREADY_ENROLLED = "Student is already enrolled in this course"
    """The same course cannot be taken twice."""

    INVALID_ENROLLMENT_NUMBER = "Enrollment number must be 1 or 2"
    """Enrollments are addressed by their position."""

    NO_ENROLLMENT_AT_POSITION = "Student has no enrollment at this position"
    """Transfer/disenroll target does not exist."""

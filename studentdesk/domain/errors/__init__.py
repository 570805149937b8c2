"""Domain errors package.

Usage:
    from studentdesk.domain.errors import StudentError
"""

from studentdesk.domain.errors.student_error import StudentError

__all__ = ["StudentError"]

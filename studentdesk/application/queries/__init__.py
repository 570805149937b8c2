"""Student queries.

Usage:
    from studentdesk.application.queries import GetStudentList
"""

from studentdesk.application.queries.student_queries import (
    GetStudentList,
    ListStudentsNeedingAttention,
)

__all__ = ["GetStudentList", "ListStudentsNeedingAttention"]

"""Query handlers."""

from studentdesk.application.queries.handlers.get_student_list_handler import (
    GetStudentListHandler,
)
from studentdesk.application.queries.handlers.list_students_needing_attention_handler import (
    ListStudentsNeedingAttentionHandler,
)

__all__ = ["GetStudentListHandler", "ListStudentsNeedingAttentionHandler"]

"""Repository implementations.

Usage:
    from studentdesk.infrastructure.persistence.repositories import (
        SqlAlchemyStudentRepository,
    )
"""

from studentdesk.infrastructure.persistence.repositories.course_repository import (
    SqlAlchemyCourseRepository,
)
from studentdesk.infrastructure.persistence.repositories.in_memory import (
    InMemoryCourseRepository,
    InMemoryStudentRepository,
)
from studentdesk.infrastructure.persistence.repositories.student_repository import (
    SqlAlchemyStudentRepository,
)

__all__ = [
    "InMemoryCourseRepository",
    "InMemoryStudentRepository",
    "SqlAlchemyCourseRepository",
    "SqlAlchemyStudentRepository",
]

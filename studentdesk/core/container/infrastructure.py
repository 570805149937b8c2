"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Database (SQLAlchemy async engine + session factory)
- Repositories (hold the Database, open a session per operation)
- Transient fault classification (retry decorator)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from studentdesk.core.config import settings
from studentdesk.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from studentdesk.domain.protocols.course_repository import CourseRepository
    from studentdesk.domain.protocols.fault_classifier_protocol import (
        FaultClassifierProtocol,
    )
    from studentdesk.domain.protocols.logger_protocol import LoggerProtocol
    from studentdesk.domain.protocols.student_repository import StudentRepository


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Human-readable console output in development, JSON everywhere else.
    Minimum level comes from ``settings.log_level``.

    Returns:
        Logger implementing LoggerProtocol.

    Usage:
        logger = get_logger()
        logger.info("student_registered", student_id=str(student_id))
    """
    from studentdesk.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database instance with connection pool.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_student_repository() -> "StudentRepository":
    """Get student repository singleton (app-scoped).

    Returns:
        SQLAlchemy student repository on the shared Database.
    """
    from studentdesk.infrastructure.persistence.repositories.student_repository import (
        SqlAlchemyStudentRepository,
    )

    return SqlAlchemyStudentRepository(get_database())


@lru_cache()
def get_course_repository() -> "CourseRepository":
    """Get course repository singleton (app-scoped)."""
    from studentdesk.infrastructure.persistence.repositories.course_repository import (
        SqlAlchemyCourseRepository,
    )

    return SqlAlchemyCourseRepository(get_database())


@lru_cache()
def get_fault_classifier() -> "FaultClassifierProtocol":
    """Get transient fault classifier singleton (app-scoped)."""
    from studentdesk.infrastructure.resilience.transient_faults import (
        TransientFaultClassifier,
    )

    return TransientFaultClassifier()

"""Domain protocols (ports).

Usage:
    from studentdesk.domain.protocols import StudentRepository, LoggerProtocol
"""

from studentdesk.domain.protocols.course_repository import CourseRepository
from studentdesk.domain.protocols.fault_classifier_protocol import (
    FaultClassifierProtocol,
)
from studentdesk.domain.protocols.logger_protocol import LoggerProtocol
from studentdesk.domain.protocols.student_repository import StudentRepository

__all__ = [
    "CourseRepository",
    "FaultClassifierProtocol",
    "LoggerProtocol",
    "StudentRepository",
]

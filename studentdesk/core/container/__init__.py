"""Container module - Centralized dependency injection.

This module re-exports the factory functions of its submodules:

    from studentdesk.core.container import get_dispatcher, get_logger

The container is organized into modules:
- service_directory: type-keyed lookup used to auto-wire pipelines
- infrastructure: core services (logging, database, repositories, resilience)
- dispatcher: service directory and dispatcher composition
"""

# Service directory
from studentdesk.core.container.service_directory import ServiceDirectory

# Infrastructure services
from studentdesk.core.container.infrastructure import (
    get_course_repository,
    get_database,
    get_fault_classifier,
    get_logger,
    get_student_repository,
)

# Dispatcher
from studentdesk.core.container.dispatcher import (
    build_dispatcher,
    build_service_directory,
    get_dispatcher,
)

__all__ = [
    "ServiceDirectory",
    "build_dispatcher",
    "build_service_directory",
    "get_course_repository",
    "get_database",
    "get_dispatcher",
    "get_fault_classifier",
    "get_logger",
    "get_student_repository",
]

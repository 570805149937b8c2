"""Dispatcher composition.

Builds the service directory the pipelines are wired from, registers every
handler of ``HANDLER_REGISTRY``, checks that every message of
``APPLICATION_MESSAGES`` has one, and creates the dispatcher. All pipelines
are built here, so configuration errors stop the application at startup.

Usage:
    dispatcher = get_dispatcher()
    result = await dispatcher.dispatch(EnrollStudent(...))

Tests build their own dispatcher from a custom directory:
    services = build_service_directory(
        students=InMemoryStudentRepository(),
        courses=InMemoryCourseRepository(),
        logger=MagicMock(),
    )
    dispatcher = build_dispatcher(services)
"""

from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import TYPE_CHECKING

from studentdesk.core.config import Settings, settings as default_settings
from studentdesk.core.container.infrastructure import (
    get_course_repository,
    get_fault_classifier,
    get_logger,
    get_student_repository,
)
from studentdesk.core.container.service_directory import ServiceDirectory

if TYPE_CHECKING:
    from studentdesk.application.cqrs.catalog import DecoratorCatalog
    from studentdesk.application.cqrs.dispatcher import Dispatcher
    from studentdesk.application.cqrs.metadata import HandlerMetadata
    from studentdesk.domain.protocols.course_repository import CourseRepository
    from studentdesk.domain.protocols.fault_classifier_protocol import (
        FaultClassifierProtocol,
    )
    from studentdesk.domain.protocols.logger_protocol import LoggerProtocol
    from studentdesk.domain.protocols.student_repository import StudentRepository


def build_service_directory(
    *,
    config: Settings | None = None,
    students: "StudentRepository | None" = None,
    courses: "CourseRepository | None" = None,
    logger: "LoggerProtocol | None" = None,
    classifier: "FaultClassifierProtocol | None" = None,
) -> ServiceDirectory:
    """Create the directory of services handlers and decorators depend on.

    Anything not passed explicitly comes from the infrastructure singletons.
    Repositories are registered as factories: nothing connects while the
    directory is built, but ``build_dispatcher`` resolves them (and so creates
    the engine) when it builds the pipelines.

    Args:
        config: Settings for decorator policies (defaults to process settings).
        students: Student repository override.
        courses: Course repository override.
        logger: Logger override.
        classifier: Transient fault classifier override.

    Returns:
        ServiceDirectory: Populated directory.
    """
    from studentdesk.application.decorators.policies import AuditPolicy, RetryPolicy
    from studentdesk.domain.protocols.course_repository import CourseRepository
    from studentdesk.domain.protocols.fault_classifier_protocol import (
        FaultClassifierProtocol,
    )
    from studentdesk.domain.protocols.logger_protocol import LoggerProtocol
    from studentdesk.domain.protocols.student_repository import StudentRepository

    config = config or default_settings
    services = ServiceDirectory()

    services.register_instance(RetryPolicy, RetryPolicy.from_settings(config))
    services.register_instance(AuditPolicy, AuditPolicy.from_settings(config))
    services.register_instance(LoggerProtocol, logger or get_logger())
    services.register_instance(
        FaultClassifierProtocol, classifier or get_fault_classifier()
    )

    if students is not None:
        services.register_instance(StudentRepository, students)
    else:
        services.register_factory(StudentRepository, get_student_repository)

    if courses is not None:
        services.register_instance(CourseRepository, courses)
    else:
        services.register_factory(CourseRepository, get_course_repository)

    return services


def build_dispatcher(
    services: ServiceDirectory,
    handlers: "Sequence[HandlerMetadata] | None" = None,
    catalog: "DecoratorCatalog | None" = None,
    messages: Iterable[type] | None = None,
) -> "Dispatcher":
    """Register handlers, build their pipelines and create the dispatcher.

    Args:
        services: Directory supplying handler and decorator dependencies.
        handlers: Registration list (defaults to HANDLER_REGISTRY).
        catalog: Decorator implementations (defaults to the built-in catalog).
        messages: Closed message set the handlers must cover (defaults to
            APPLICATION_MESSAGES).

    Returns:
        Dispatcher: Ready to dispatch.

    Raises:
        ConfigurationError: On any registration or pipeline build error.
        NoHandlerError: If a message of the closed set has no handler.
    """
    from studentdesk.application.cqrs.dispatcher import Dispatcher
    from studentdesk.application.cqrs.handler_registry import HandlerRegistry
    from studentdesk.application.cqrs.pipeline import PipelineBuilder
    from studentdesk.application.cqrs.registry import (
        APPLICATION_MESSAGES,
        HANDLER_REGISTRY,
    )
    from studentdesk.application.decorators import DEFAULT_DECORATOR_CATALOG
    from studentdesk.domain.protocols.logger_protocol import LoggerProtocol

    if handlers is None:
        handlers = HANDLER_REGISTRY
    if messages is None:
        messages = APPLICATION_MESSAGES

    registry = HandlerRegistry()
    for meta in handlers:
        registry.register(meta.handler_class, meta.decorators)
    registry.validate_complete(messages)

    builder = PipelineBuilder(services, catalog or DEFAULT_DECORATOR_CATALOG)
    logger: LoggerProtocol = services.resolve(LoggerProtocol)
    return Dispatcher.create(registry, builder, logger)


@lru_cache()
def get_dispatcher() -> "Dispatcher":
    """Get dispatcher singleton (app-scoped).

    Returns:
        Dispatcher wired to the infrastructure singletons.
    """
    return build_dispatcher(build_service_directory())

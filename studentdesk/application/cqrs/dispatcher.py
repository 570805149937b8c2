"""Dispatcher - in-process message dispatch.

Routes a message to the pipeline of the one handler registered for its
concrete type. Pipelines are built eagerly when the dispatcher is created, so
every configuration error (missing contract, unknown decorator, unresolvable
dependency) surfaces at startup rather than on first use.

Return types follow the message marker:
    await dispatcher.dispatch(EnrollStudent(...))      # Result[None, str]
    await dispatcher.dispatch(RegisterStudent(...))    # Result[UUID, str]
    await dispatcher.dispatch(GetStudentList())        # list[StudentDto]

Handlers may not dispatch further messages: a dispatch started while
another one is in progress in the same context raises
``ReentrantDispatchError``.
"""

from collections.abc import Mapping
from contextvars import ContextVar
from types import MappingProxyType
from typing import Any, TypeVar, overload

from studentdesk.application.cqrs.contracts import Command, Query, ResultCommand
from studentdesk.application.cqrs.errors import (
    ConfigurationError,
    ReentrantDispatchError,
)
from studentdesk.application.cqrs.handler_registry import HandlerRegistry
from studentdesk.application.cqrs.pipeline import Pipeline, PipelineBuilder
from studentdesk.core.result import Failure, Result
from studentdesk.domain.protocols.logger_protocol import LoggerProtocol

T = TypeVar("T")

# Message type currently being dispatched in this context
_active_dispatch: ContextVar[type | None] = ContextVar("active_dispatch", default=None)


class Dispatcher:
    """Sends messages through their cached handler pipelines.

    Use ``Dispatcher.create`` rather than the constructor.

    Args:
        registry: Frozen handler registry.
        pipelines: Built pipelines keyed by handler type.
        logger: Structured logger.

    Raises:
        ConfigurationError: If the registry is not frozen or a registered
            handler has no pipeline.
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        pipelines: Mapping[type, Pipeline],
        logger: LoggerProtocol,
    ) -> None:
        if not registry.is_frozen:
            raise ConfigurationError("Dispatcher requires a frozen registry")

        missing = [
            d.handler_type.__name__
            for d in registry.descriptors
            if d.handler_type not in pipelines
        ]
        if missing:
            raise ConfigurationError(f"No pipeline built for: {', '.join(missing)}")

        self._registry = registry
        self._pipelines: Mapping[type, Pipeline] = MappingProxyType(dict(pipelines))
        self._logger = logger

    @classmethod
    def create(
        cls,
        registry: HandlerRegistry,
        builder: PipelineBuilder,
        logger: LoggerProtocol,
    ) -> "Dispatcher":
        """Freeze the registry and build every pipeline.

        Args:
            registry: Handler registry (frozen by this call).
            builder: Pipeline builder.
            logger: Structured logger.

        Returns:
            Dispatcher: Ready to dispatch.

        Raises:
            ConfigurationError: Any error raised while building pipelines.
        """
        registry.freeze()
        pipelines = builder.build_all(registry)
        logger.info("dispatcher_ready", handlers=len(pipelines))
        return cls(registry, pipelines, logger)

    @property
    def pipelines(self) -> Mapping[type, Pipeline]:
        """Built pipelines keyed by handler type (read-only)."""
        return self._pipelines

    @overload
    async def dispatch(self, message: Query[T]) -> T: ...

    @overload
    async def dispatch(self, message: ResultCommand[T]) -> Result[T, str]: ...

    @overload
    async def dispatch(self, message: Command) -> Result[None, str]: ...

    async def dispatch(self, message: Any) -> Any:
        """Dispatch a message to its handler pipeline.

        Args:
            message: Command, result command or query instance.

        Returns:
            The handler's return value (a Result for commands).

        Raises:
            NoHandlerError: If no handler is registered for the message type.
            ReentrantDispatchError: If called from inside a dispatch.
            Exception: Any fault raised by the pipeline, unchanged.
        """
        message_type = type(message)

        active = _active_dispatch.get()
        if active is not None:
            raise ReentrantDispatchError(message_type, active)

        descriptor = self._registry.resolve(message_type)
        pipeline = self._pipelines[descriptor.handler_type]
        log = self._logger.bind(
            message_type=message_type.__name__,
            handler=descriptor.handler_type.__name__,
        )

        token = _active_dispatch.set(message_type)
        log.debug("dispatch_started")
        try:
            result = await pipeline(message)
        except Exception as e:
            log.error("dispatch_failed", error=e)
            raise
        finally:
            _active_dispatch.reset(token)

        if isinstance(result, Failure):
            log.debug("dispatch_completed", outcome="failure", reason=result.error)
        else:
            log.debug("dispatch_completed", outcome="success")
        return result

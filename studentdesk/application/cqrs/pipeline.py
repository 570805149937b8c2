"""Pipeline construction.

A pipeline is a concrete handler wrapped in its declared decorators. The
declaration order is the wrapping order: the first declared decorator is the
outermost element and sees the message first.

    decorators=(AUDIT_LOG, RETRY)

    AuditLogDecorator -> RetryDecorator -> EnrollStudentHandler

The builder instantiates innermost first: the handler, then each decorator
from last declared to first, handing the previous element to the decorator's
``inner`` parameter and the message type to a ``message_type`` parameter if
the decorator declares one. Every other constructor parameter is auto-wired
from the ``ServiceDirectory`` by its annotated type.

Pipelines are built once at startup and never mutated.
"""

import inspect
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeVar, get_type_hints

from studentdesk.application.cqrs.catalog import DecoratorCatalog
from studentdesk.application.cqrs.contracts import Handler, HandlerDecorator
from studentdesk.application.cqrs.errors import UnresolvedDependencyError
from studentdesk.application.cqrs.handler_registry import HandlerRegistry
from studentdesk.application.cqrs.metadata import HandlerDescriptor
from studentdesk.core.container.service_directory import ServiceDirectory

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class Pipeline:
    """A built handler pipeline.

    Attributes:
        descriptor: Registry entry the pipeline was built from.
        entry: Outermost element (a decorator, or the handler itself).
    """

    descriptor: HandlerDescriptor
    entry: Handler

    async def __call__(self, message: Any) -> Any:
        return await self.entry.handle(message)

    @property
    def layers(self) -> tuple[Handler, ...]:
        """Every element from outermost to the concrete handler."""
        return tuple(self._walk())

    @property
    def handler(self) -> Handler:
        """The concrete (innermost) handler."""
        return self.layers[-1]

    def _walk(self) -> Iterator[Handler]:
        current: Handler = self.entry
        while isinstance(current, HandlerDecorator):
            yield current
            current = current.inner
        yield current


# =============================================================================
# Dependency auto-wiring
# =============================================================================


@dataclass(frozen=True, slots=True)
class Dependency:
    """Constructor parameter of a handler or decorator.

    Attributes:
        name: Parameter name.
        annotation: Resolved annotation (None if unannotated).
        has_default: Whether the parameter can be omitted.
    """

    name: str
    annotation: Any
    has_default: bool


def analyze_dependencies(cls: type) -> dict[str, Dependency]:
    """Analyze ``cls.__init__`` to discover dependencies.

    Args:
        cls: Class to analyze.

    Returns:
        Dict mapping parameter names to Dependency, in declaration order.
        ``*args``/``**kwargs`` are not dependencies.
    """
    # Use getattr to avoid mypy's unsound __init__ access warning
    init_method = getattr(cls, "__init__")
    signature = inspect.signature(init_method)

    try:
        # Resolves forward references
        hints = get_type_hints(init_method)
    except (NameError, TypeError):
        hints = {
            name: param.annotation
            for name, param in signature.parameters.items()
            if param.annotation is not inspect.Parameter.empty
        }

    dependencies: dict[str, Dependency] = {}
    for name, param in signature.parameters.items():
        if name == "self" or param.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            continue

        dependencies[name] = Dependency(
            name=name,
            annotation=hints.get(name),
            has_default=param.default is not inspect.Parameter.empty,
        )

    return dependencies


def create_instance(cls: type[T], services: ServiceDirectory, **provided: Any) -> T:
    """Create an instance of ``cls`` with auto-wired dependencies.

    Args:
        cls: Class to instantiate.
        services: Directory to resolve annotated parameter types from.
        **provided: Explicit arguments (``inner`` for decorators).

    Returns:
        New instance of ``cls``.

    Raises:
        UnresolvedDependencyError: If a required parameter cannot be supplied.
    """
    kwargs = dict(provided)

    for name, dependency in analyze_dependencies(cls).items():
        if name in kwargs:
            continue
        if dependency.annotation is not None and services.has(dependency.annotation):
            kwargs[name] = services.resolve(dependency.annotation)
        elif not dependency.has_default:
            raise UnresolvedDependencyError(cls, name, dependency.annotation)

    return cls(**kwargs)


# =============================================================================
# Builder
# =============================================================================


class PipelineBuilder:
    """Builds pipelines from handler descriptors.

    Args:
        services: Directory supplying handler and decorator dependencies.
        catalog: Implementations of the declared decorator kinds.
    """

    def __init__(self, services: ServiceDirectory, catalog: DecoratorCatalog) -> None:
        self._services = services
        self._catalog = catalog

    def build(self, handler_type: type, descriptor: HandlerDescriptor) -> Pipeline:
        """Build the pipeline for one handler.

        Args:
            handler_type: Concrete handler class.
            descriptor: Its registry entry (decorator declaration).

        Returns:
            Pipeline: Handler wrapped in its decorators, first declared outermost.

        Raises:
            UnknownDecoratorError: If a declared kind is not in the catalog.
            UnresolvedDependencyError: If a constructor parameter of the
                handler or of a decorator cannot be supplied.
            ConfigurationError: If a decorator rejects the message type
                (``UnauditableMessageError`` from the audit decorator).
        """
        if handler_type is not descriptor.handler_type:
            raise ValueError(
                f"Descriptor for {descriptor.message_type.__name__} belongs to "
                f"{descriptor.handler_type.__name__}, not {handler_type.__name__}"
            )

        # Look up every kind before instantiating anything
        decorator_types = [
            self._catalog.decorator_for(kind) for kind in descriptor.decorators
        ]

        current: Handler = create_instance(handler_type, self._services)
        for decorator_type in reversed(decorator_types):
            provided: dict[str, Any] = {"inner": current}
            if "message_type" in analyze_dependencies(decorator_type):
                provided["message_type"] = descriptor.message_type
            current = create_instance(decorator_type, self._services, **provided)

        return Pipeline(descriptor=descriptor, entry=current)

    def build_all(self, registry: HandlerRegistry) -> dict[type, Pipeline]:
        """Build a pipeline for every registered handler.

        Returns:
            Pipelines keyed by handler type.
        """
        return {
            descriptor.handler_type: self.build(descriptor.handler_type, descriptor)
            for descriptor in registry.descriptors
        }

"""Service directory - dependency lookup by type.

A small type-keyed directory the pipeline builder consults when it
instantiates handlers and decorators. The composition root fills it once at
startup with instances (settings-derived policies, the logger) and lazy
factories (repositories).

Keys are the annotated types themselves (usually protocols), so a handler
declaring ``students: StudentRepository`` receives whatever was registered
under ``StudentRepository``. ``X | None`` annotations look up ``X``.

The dispatcher is never registered here: handlers cannot dispatch.

Usage:
    services = ServiceDirectory()
    services.register_instance(LoggerProtocol, get_logger())
    services.register_factory(StudentRepository, get_student_repository)

    repo = services.resolve(StudentRepository)
"""

import types
from collections.abc import Callable
from typing import Any, TypeVar, Union, cast, get_args, get_origin

T = TypeVar("T")


def service_key(annotation: Any) -> Any:
    """Normalize an annotation into a directory key.

    Args:
        annotation: Parameter annotation (class, protocol, ``X | None``).

    Returns:
        ``X`` for an optional ``X``, otherwise the annotation unchanged.
    """
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


class ServiceDirectory:
    """Type-keyed registry of service instances and lazy factories."""

    def __init__(self) -> None:
        self._instances: dict[Any, Any] = {}
        self._factories: dict[Any, Callable[[], Any]] = {}

    def register_instance(self, service_type: type[T] | Any, instance: T) -> None:
        """Register a ready instance under a type.

        Args:
            service_type: Key type (usually a protocol).
            instance: Object returned for that type.
        """
        key = service_key(service_type)
        self._factories.pop(key, None)
        self._instances[key] = instance

    def register_factory(
        self, service_type: type[T] | Any, factory: Callable[[], T]
    ) -> None:
        """Register a factory called on first resolution (result is cached).

        Args:
            service_type: Key type (usually a protocol).
            factory: Zero-argument callable producing the service.
        """
        key = service_key(service_type)
        self._instances.pop(key, None)
        self._factories[key] = factory

    def has(self, service_type: Any) -> bool:
        """Check whether a type can be resolved."""
        key = service_key(service_type)
        return key in self._instances or key in self._factories

    def resolve(self, service_type: type[T] | Any) -> T:
        """Return the service registered for a type.

        Args:
            service_type: Key type.

        Returns:
            The registered instance, or the (cached) factory result.

        Raises:
            LookupError: If nothing is registered for the type.
        """
        key = service_key(service_type)
        if key in self._instances:
            return cast(T, self._instances[key])

        factory = self._factories.get(key)
        if factory is None:
            name = getattr(key, "__name__", repr(key))
            raise LookupError(f"No service registered for {name}")

        # A failing factory stays registered and is called again next time
        instance = factory()
        self._factories.pop(key, None)
        self._instances[key] = instance
        return cast(T, instance)

"""Decorator catalog: DecoratorKind to decorator implementation.

The set of decorator kinds is closed and the mapping is explicit. A kind
missing from the catalog is a configuration error raised while pipelines are
built, never silently ignored.

Usage:
    catalog = DecoratorCatalog({
        DecoratorKind.RETRY: RetryDecorator,
        DecoratorKind.AUDIT_LOG: AuditLogDecorator,
    })
    catalog.decorator_for(DecoratorKind.RETRY)  # RetryDecorator
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from studentdesk.application.cqrs.contracts import HandlerDecorator
from studentdesk.application.cqrs.errors import UnknownDecoratorError
from studentdesk.application.cqrs.metadata import DecoratorKind


class DecoratorCatalog(Mapping[DecoratorKind, type[HandlerDecorator]]):
    """Read-only mapping of decorator kinds to decorator classes."""

    def __init__(self, decorators: Mapping[DecoratorKind, type[HandlerDecorator]]):
        for kind, decorator_type in decorators.items():
            if not (
                isinstance(decorator_type, type)
                and issubclass(decorator_type, HandlerDecorator)
            ):
                raise TypeError(
                    f"{kind} must map to a HandlerDecorator subclass, "
                    f"got {decorator_type!r}"
                )
        self._decorators = MappingProxyType(dict(decorators))

    def decorator_for(self, kind: DecoratorKind) -> type[HandlerDecorator]:
        """Return the implementation of a decorator kind.

        Raises:
            UnknownDecoratorError: If the kind has no implementation.
        """
        decorator_type = self._decorators.get(kind)
        if decorator_type is None:
            raise UnknownDecoratorError(kind)
        return decorator_type

    def __getitem__(self, kind: DecoratorKind) -> type[HandlerDecorator]:
        return self._decorators[kind]

    def __iter__(self) -> Iterator[DecoratorKind]:
        return iter(self._decorators)

    def __len__(self) -> int:
        return len(self._decorators)

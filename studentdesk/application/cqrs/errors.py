"""Dispatch configuration and usage errors.

Configuration errors are programming mistakes in how handlers and decorators
are declared. They surface while the registry and pipelines are built at
startup, before any message is dispatched. The exceptions are
``NoHandlerError`` for a message type nobody registered and
``ReentrantDispatchError`` for dispatching from inside a handler.

Business failures are never raised: handlers return ``Failure(error=...)``.
"""

from collections.abc import Iterable
from typing import Any


class ConfigurationError(Exception):
    """Base exception for dispatch configuration errors."""

    pass


class DuplicateHandlerError(ConfigurationError):
    """A second handler was registered for the same message type."""

    def __init__(self, message_type: type, existing: type, duplicate: type) -> None:
        super().__init__(
            f"{message_type.__name__} is already handled by {existing.__name__}; "
            f"cannot register {duplicate.__name__}"
        )
        self.message_type = message_type
        self.existing = existing
        self.duplicate = duplicate


class MissingContractError(ConfigurationError):
    """Handler does not declare exactly one valid handler contract."""

    def __init__(self, handler_type: type, reason: str) -> None:
        super().__init__(f"{handler_type.__name__}: {reason}")
        self.handler_type = handler_type
        self.reason = reason


class NoHandlerError(ConfigurationError):
    """No handler is registered for one or more message types."""

    def __init__(self, message_types: Iterable[type]) -> None:
        self.message_types = tuple(message_types)
        names = ", ".join(t.__name__ for t in self.message_types)
        super().__init__(f"No handler registered for: {names}")


class DuplicateDecoratorError(ConfigurationError):
    """The same decorator kind was declared twice for one handler."""

    def __init__(self, handler_type: type, kind: Any) -> None:
        super().__init__(
            f"{handler_type.__name__} declares decorator {kind} more than once"
        )
        self.handler_type = handler_type
        self.kind = kind


class UnknownDecoratorError(ConfigurationError):
    """A declared decorator kind has no implementation in the catalog."""

    def __init__(self, kind: Any) -> None:
        super().__init__(f"No decorator implementation registered for {kind}")
        self.kind = kind


class UnresolvedDependencyError(ConfigurationError):
    """A handler or decorator constructor parameter cannot be supplied."""

    def __init__(self, owner: type, parameter: str, annotation: Any) -> None:
        type_name = getattr(annotation, "__name__", repr(annotation))
        super().__init__(
            f"Cannot resolve parameter '{parameter}: {type_name}' "
            f"of {owner.__name__}"
        )
        self.owner = owner
        self.parameter = parameter
        self.annotation = annotation


class UnauditableMessageError(ConfigurationError):
    """An audited message type has no serializable payload schema."""

    def __init__(self, message_type: type, reason: str) -> None:
        super().__init__(
            f"Cannot audit {message_type.__name__}: payload schema failed ({reason})"
        )
        self.message_type = message_type
        self.reason = reason


class RegistryFrozenError(ConfigurationError):
    """Registration was attempted after the registry was frozen."""

    pass


class ReentrantDispatchError(RuntimeError):
    """A message was dispatched from inside a handler's own dispatch."""

    def __init__(self, message_type: type, active: type) -> None:
        super().__init__(
            f"Cannot dispatch {message_type.__name__} while {active.__name__} "
            f"is being dispatched"
        )
        self.message_type = message_type
        self.active = active

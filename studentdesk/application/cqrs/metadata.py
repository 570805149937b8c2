"""CQRS Metadata Types.

Dataclasses and enums describing registered handlers.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Decorators are declared by kind only; their configuration (retry budget,
  audit switch) comes from Settings through the service directory
"""

from dataclasses import dataclass
from enum import Enum

from studentdesk.application.cqrs.contracts import MessageKind


class DecoratorKind(str, Enum):
    """Cross-cutting behaviours a handler can declare.

    The enum is closed: adding a kind means adding its implementation to the
    decorator catalog.
    """

    RETRY = "retry"  # Re-attempt on transient infrastructure faults
    AUDIT_LOG = "audit_log"  # Log the message payload before handling


@dataclass(frozen=True, kw_only=True)
class HandlerDescriptor:
    """Registered handler for one message type.

    Attributes:
        message_type: Message class served by the handler.
        handler_type: Concrete handler class.
        kind: Message kind (from the message's marker base).
        decorators: Declared decorators, outermost first.
    """

    message_type: type
    handler_type: type
    kind: MessageKind
    decorators: tuple[DecoratorKind, ...] = ()


@dataclass(frozen=True, kw_only=True)
class HandlerMetadata:
    """Entry of the static handler registration list.

    Attributes:
        handler_class: The handler class (e.g., EnrollStudentHandler).
        decorators: Decorators wrapped around the handler, outermost first.
        description: Human-readable description for documentation.

    Example:
        >>> HandlerMetadata(
        ...     handler_class=EnrollStudentHandler,
        ...     decorators=(DecoratorKind.AUDIT_LOG, DecoratorKind.RETRY),
        ...     description="Enroll a student in a course",
        ... )
    """

    handler_class: type
    decorators: tuple[DecoratorKind, ...] = ()
    description: str = ""

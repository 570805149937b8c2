"""Handler Registry Computed Views and Helper Functions.

Utility functions for introspecting ``HANDLER_REGISTRY``.
Used by the container, compliance tests, and documentation.
"""

from collections import Counter
from typing import TYPE_CHECKING

from studentdesk.application.cqrs.contracts import find_contracts

if TYPE_CHECKING:
    from studentdesk.application.cqrs.metadata import DecoratorKind, HandlerMetadata


def get_message_type(handler_class: type) -> type | None:
    """Get the message type a handler class serves.

    Args:
        handler_class: Handler class.

    Returns:
        Message class if the handler declares exactly one contract, else None.
    """
    contracts = find_contracts(handler_class)
    return contracts[0].message_type if len(contracts) == 1 else None


def get_all_message_types() -> list[type]:
    """Get all message types handled by registered handlers.

    Returns:
        Message classes in registry order.

    Example:
        >>> from studentdesk.application.commands import EnrollStudent
        >>> EnrollStudent in get_all_message_types()
        True
    """
    from studentdesk.application.cqrs.registry import HANDLER_REGISTRY

    message_types: list[type] = []
    for meta in HANDLER_REGISTRY:
        message_type = get_message_type(meta.handler_class)
        if message_type is not None:
            message_types.append(message_type)
    return message_types


def get_handler_metadata(message_type: type) -> "HandlerMetadata | None":
    """Get the registry entry for a message type.

    Args:
        message_type: The message class to look up.

    Returns:
        HandlerMetadata if found, None otherwise.

    Example:
        >>> from studentdesk.application.commands import EnrollStudent
        >>> meta = get_handler_metadata(EnrollStudent)
        >>> meta.handler_class.__name__
        'EnrollStudentHandler'
    """
    from studentdesk.application.cqrs.registry import HANDLER_REGISTRY

    for meta in HANDLER_REGISTRY:
        if get_message_type(meta.handler_class) is message_type:
            return meta
    return None


def get_handlers_with_decorator(kind: "DecoratorKind") -> list["HandlerMetadata"]:
    """Get registry entries declaring a decorator kind.

    Args:
        kind: DecoratorKind to filter by.

    Returns:
        List of HandlerMetadata entries declaring that decorator.
    """
    from studentdesk.application.cqrs.registry import HANDLER_REGISTRY

    return [meta for meta in HANDLER_REGISTRY if kind in meta.decorators]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics for documentation and monitoring.

    Returns:
        Dict with counts by message kind and decorator kind.
    """
    from studentdesk.application.cqrs.registry import HANDLER_REGISTRY

    kinds = Counter(
        contract.kind.value
        for meta in HANDLER_REGISTRY
        for contract in find_contracts(meta.handler_class)
    )
    return {
        "total_handlers": len(HANDLER_REGISTRY),
        "handlers_by_kind": dict(kinds),
        "handlers_by_decorator": dict(
            Counter(kind.value for meta in HANDLER_REGISTRY for kind in meta.decorators)
        ),
        "undecorated_handlers": sum(
            1 for meta in HANDLER_REGISTRY if not meta.decorators
        ),
    }


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Returns:
        List of error messages. Empty if registry is consistent.
    """
    from studentdesk.application.cqrs.registry import HANDLER_REGISTRY

    errors: list[str] = []

    handler_classes = [meta.handler_class for meta in HANDLER_REGISTRY]
    if len(handler_classes) != len(set(handler_classes)):
        errors.append("Duplicate handler classes in HANDLER_REGISTRY")

    seen: dict[type, type] = {}
    for meta in HANDLER_REGISTRY:
        name = meta.handler_class.__name__
        contracts = find_contracts(meta.handler_class)
        if len(contracts) != 1:
            errors.append(
                f"Handler {name} declares {len(contracts)} handler contracts"
            )
            continue

        message_type = contracts[0].message_type
        if message_type in seen and seen[message_type] is not meta.handler_class:
            errors.append(
                f"{message_type.__name__} handled by both "
                f"{seen[message_type].__name__} and {name}"
            )
        seen[message_type] = meta.handler_class

        if len(meta.decorators) != len(set(meta.decorators)):
            errors.append(f"Handler {name} declares a decorator twice")

    return errors

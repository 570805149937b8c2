"""CQRS - typed in-process message dispatch.

Messages (commands and queries) are routed by their concrete type to exactly
one handler, wrapped in the decorators declared for that handler.

Architecture:
- contracts: message markers and generic handler contracts
- handler_registry: message type -> HandlerDescriptor (fails fast)
- catalog / pipeline: decorator implementations and pipeline construction
- dispatcher: resolution, cached pipelines, re-entrancy guard
- registry: HANDLER_REGISTRY, the application's registration list
  (import it from ``studentdesk.application.cqrs.registry``)

Adding new commands/queries:
1. Define the message dataclass subclassing Command, ResultCommand[T] or Query[T]
2. Create a handler subclassing the matching handler contract
3. Add a HandlerMetadata entry to HANDLER_REGISTRY
4. Run tests - registry compliance tests report what's missing
"""

# Contracts
from studentdesk.application.cqrs.contracts import (
    Command,
    CommandHandler,
    Handler,
    HandlerDecorator,
    MessageKind,
    Query,
    QueryHandler,
    ResultCommand,
    ResultCommandHandler,
    find_contracts,
    message_kind_of,
    messages_declared_in,
)

# Errors
from studentdesk.application.cqrs.errors import (
    ConfigurationError,
    DuplicateDecoratorError,
    DuplicateHandlerError,
    MissingContractError,
    NoHandlerError,
    ReentrantDispatchError,
    RegistryFrozenError,
    UnauditableMessageError,
    UnknownDecoratorError,
    UnresolvedDependencyError,
)

# Metadata types
from studentdesk.application.cqrs.metadata import (
    DecoratorKind,
    HandlerDescriptor,
    HandlerMetadata,
)

# Engine
from studentdesk.application.cqrs.catalog import DecoratorCatalog
from studentdesk.application.cqrs.dispatcher import Dispatcher
from studentdesk.application.cqrs.handler_registry import HandlerRegistry
from studentdesk.application.cqrs.pipeline import Pipeline, PipelineBuilder

# Computed views and helper functions
from studentdesk.application.cqrs.computed_views import (
    get_all_message_types,
    get_handler_metadata,
    get_handlers_with_decorator,
    get_statistics,
    validate_registry_consistency,
)

__all__ = [
    # Contracts
    "Command",
    "CommandHandler",
    "Handler",
    "HandlerDecorator",
    "MessageKind",
    "Query",
    "QueryHandler",
    "ResultCommand",
    "ResultCommandHandler",
    "find_contracts",
    "message_kind_of",
    "messages_declared_in",
    # Errors
    "ConfigurationError",
    "DuplicateDecoratorError",
    "DuplicateHandlerError",
    "MissingContractError",
    "NoHandlerError",
    "ReentrantDispatchError",
    "RegistryFrozenError",
    "UnauditableMessageError",
    "UnknownDecoratorError",
    "UnresolvedDependencyError",
    # Metadata types
    "DecoratorKind",
    "HandlerDescriptor",
    "HandlerMetadata",
    # Engine
    "DecoratorCatalog",
    "Dispatcher",
    "HandlerRegistry",
    "Pipeline",
    "PipelineBuilder",
    # Computed views
    "get_all_message_types",
    "get_handler_metadata",
    "get_handlers_with_decorator",
    "get_statistics",
    "validate_registry_consistency",
]

"""Message markers and handler contracts.

Every message is a frozen, keyword-only dataclass that subclasses exactly one
marker base. The marker fixes what its handler returns:

- ``Command``: state change reporting success or a reason for failure
  (``Result[None, str]``).
- ``ResultCommand[T]``: state change that also yields a value on success
  (``Result[T, str]``), e.g. the id of a newly registered student.
- ``Query[T]``: read-only request answered with a ``T``.

Handlers declare which message they serve by subclassing one generic handler
contract parameterised with the concrete message class:

    class EnrollStudentHandler(CommandHandler[EnrollStudent]):
        async def handle(self, command: EnrollStudent) -> Result[None, str]:
            ...

The registry reads that declaration back (``find_contracts``), so the message
type a handler serves is stated once, in its class statement.
"""

import inspect
import types
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, Protocol, TypeVar, get_args, get_origin

from studentdesk.core.result import Result

T = TypeVar("T")
TCommand = TypeVar("TCommand", bound="Command")
TResultCommand = TypeVar("TResultCommand", bound="ResultCommand[Any]")
TQuery = TypeVar("TQuery", bound="Query[Any]")
TValue = TypeVar("TValue")
TResult = TypeVar("TResult")


class MessageKind(str, Enum):
    """Kind of a message, derived from its marker base."""

    COMMAND = "command"
    RESULT_COMMAND = "result_command"
    QUERY = "query"


# =============================================================================
# Message markers
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class Command:
    """Marker base for commands whose handler returns ``Result[None, str]``."""

    message_kind: ClassVar[MessageKind] = MessageKind.COMMAND


@dataclass(frozen=True, kw_only=True)
class ResultCommand(Generic[T]):
    """Marker base for commands whose handler returns ``Result[T, str]``."""

    message_kind: ClassVar[MessageKind] = MessageKind.RESULT_COMMAND


@dataclass(frozen=True, kw_only=True)
class Query(Generic[T]):
    """Marker base for queries whose handler returns ``T``."""

    message_kind: ClassVar[MessageKind] = MessageKind.QUERY


_MARKERS: dict[type, MessageKind] = {
    Command: MessageKind.COMMAND,
    ResultCommand: MessageKind.RESULT_COMMAND,
    Query: MessageKind.QUERY,
}


def message_kind_of(message_type: type) -> MessageKind | None:
    """Return the kind of a message class.

    Args:
        message_type: Candidate message class.

    Returns:
        The kind of its marker base, or None if the class subclasses no
        marker or more than one.
    """
    kinds = {
        kind for marker, kind in _MARKERS.items() if issubclass(message_type, marker)
    }
    if len(kinds) != 1:
        return None
    return kinds.pop()


def messages_declared_in(*modules: types.ModuleType) -> tuple[type, ...]:
    """Collect the message classes defined in the given modules.

    Imported names are skipped, so each message is reported by the module
    that defines it.
    """
    return tuple(
        obj
        for module in modules
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module.__name__ and message_kind_of(obj) is not None
    )


# =============================================================================
# Handler contracts
# =============================================================================


class Handler(Protocol):
    """Anything that can handle a message: a concrete handler or a decorator."""

    async def handle(self, message: Any) -> Any:
        """Handle a message."""
        ...


class CommandHandler(ABC, Generic[TCommand]):
    """Contract for handlers of ``Command`` messages."""

    @abstractmethod
    async def handle(self, command: TCommand) -> Result[None, str]:
        """Execute the command.

        Returns:
            Success(value=None) or Failure(error=reason).
        """


class ResultCommandHandler(ABC, Generic[TResultCommand, TValue]):
    """Contract for handlers of ``ResultCommand[TValue]`` messages."""

    @abstractmethod
    async def handle(self, command: TResultCommand) -> Result[TValue, str]:
        """Execute the command.

        Returns:
            Success(value=...) or Failure(error=reason).
        """


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Contract for handlers of ``Query[TResult]`` messages."""

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """Answer the query."""


class HandlerDecorator(ABC):
    """Base for cross-cutting wrappers around a handler.

    A decorator owns the next element of the pipeline (``inner``) and is itself
    a ``Handler``. Its constructor must accept ``inner`` plus any services it
    needs, annotated by type; the pipeline builder supplies both.
    """

    def __init__(self, inner: Handler) -> None:
        self.inner = inner

    @abstractmethod
    async def handle(self, message: Any) -> Any:
        """Handle the message, delegating to ``inner``."""


_CONTRACTS: dict[type, MessageKind] = {
    CommandHandler: MessageKind.COMMAND,
    ResultCommandHandler: MessageKind.RESULT_COMMAND,
    QueryHandler: MessageKind.QUERY,
}


@dataclass(frozen=True, slots=True)
class HandlerContract:
    """A handler contract declared by a handler class.

    Attributes:
        contract: Generic contract class (e.g., ``CommandHandler``).
        message_type: Concrete message class the contract is parameterised with.
        kind: Message kind the contract serves.
    """

    contract: type
    message_type: type
    kind: MessageKind


def find_contracts(handler_type: type) -> list[HandlerContract]:
    """Discover the handler contracts a class declares.

    Walks the class's original (parameterised) bases recursively, carrying
    type arguments through generic intermediate bases, so
    ``class H(LoggingBase[Ping])`` with ``class LoggingBase(CommandHandler[M])``
    declares ``CommandHandler[Ping]``. Contracts still parameterised with an
    unbound type variable are not counted.

    Args:
        handler_type: Candidate handler class.

    Returns:
        Unique contracts in declaration order (empty for non-handlers).
    """
    found: list[HandlerContract] = []
    seen: set[tuple[type, type]] = set()

    def walk(klass: type, bindings: dict[Any, Any]) -> None:
        for base in types.get_original_bases(klass):
            origin = get_origin(base) or base
            if origin is Generic or origin is object or not inspect.isclass(origin):
                continue
            args = tuple(bindings.get(arg, arg) for arg in get_args(base))

            kind = _CONTRACTS.get(origin)
            if kind is None:
                parameters = getattr(origin, "__parameters__", ())
                walk(origin, dict(zip(parameters, args)))
                continue

            message_type = args[0] if args else None
            if not inspect.isclass(message_type) or get_origin(message_type):
                continue

            key = (origin, message_type)
            if key in seen:
                continue
            seen.add(key)
            found.append(
                HandlerContract(contract=origin, message_type=message_type, kind=kind)
            )

    walk(handler_type, {})
    return found

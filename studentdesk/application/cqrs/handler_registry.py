"""Handler registry: message type to handler descriptor.

Registration is a one-time, single-threaded setup phase. Each handler states
the message it serves through its handler contract (``CommandHandler[M]``,
``ResultCommandHandler[M, T]`` or ``QueryHandler[M, T]``) and is indexed under
that message type together with its ordered decorator declaration.

Configuration mistakes fail here, before any dispatch:
- two handlers for one message type (``DuplicateHandlerError``)
- a handler without exactly one valid contract (``MissingContractError``)
- a decorator kind declared twice (``DuplicateDecoratorError``)
- a message type of a closed set without handler (``NoHandlerError``)

After ``freeze()`` the index is a read-only mapping and resolution is safe
from concurrent tasks.

Usage:
    registry = HandlerRegistry()
    registry.register(
        EnrollStudentHandler,
        decorators=(DecoratorKind.AUDIT_LOG, DecoratorKind.RETRY),
    )
    registry.freeze()
    descriptor = registry.resolve(EnrollStudent)
"""

import inspect
from collections.abc import Callable, Iterable, Mapping, Sequence
from types import MappingProxyType

from studentdesk.application.cqrs.contracts import (
    HandlerContract,
    find_contracts,
    message_kind_of,
)
from studentdesk.application.cqrs.errors import (
    DuplicateDecoratorError,
    DuplicateHandlerError,
    MissingContractError,
    NoHandlerError,
    RegistryFrozenError,
    UnknownDecoratorError,
)
from studentdesk.application.cqrs.metadata import DecoratorKind, HandlerDescriptor


class HandlerRegistry:
    """Index of handler descriptors by message type."""

    def __init__(self) -> None:
        self._descriptors: dict[type, HandlerDescriptor] = {}
        self._index: Mapping[type, HandlerDescriptor] = self._descriptors
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        """Whether registration has ended."""
        return self._frozen

    @property
    def descriptors(self) -> tuple[HandlerDescriptor, ...]:
        """All registered descriptors, in registration order."""
        return tuple(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, message_type: object) -> bool:
        return message_type in self._index

    def register(
        self,
        handler_type: type,
        decorators: Sequence[DecoratorKind] = (),
    ) -> HandlerDescriptor:
        """Register a handler class.

        Args:
            handler_type: Concrete handler class declaring one handler contract.
            decorators: Decorator kinds, outermost first.

        Returns:
            HandlerDescriptor: The new registry entry.

        Raises:
            RegistryFrozenError: If the registry was frozen.
            MissingContractError: If the handler declares no contract, more
                than one, or one whose kind does not match its message.
            UnknownDecoratorError: If a declared kind is not a DecoratorKind.
            DuplicateDecoratorError: If a decorator kind is declared twice.
            DuplicateHandlerError: If the message type already has a handler.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {handler_type.__name__}: registry is frozen"
            )

        contract = self._single_contract(handler_type)

        declared = tuple(self._decorator_kind(kind) for kind in decorators)
        for position, kind in enumerate(declared):
            if kind in declared[:position]:
                raise DuplicateDecoratorError(handler_type, kind)

        existing = self._descriptors.get(contract.message_type)
        if existing is not None:
            raise DuplicateHandlerError(
                contract.message_type, existing.handler_type, handler_type
            )

        descriptor = HandlerDescriptor(
            message_type=contract.message_type,
            handler_type=handler_type,
            kind=contract.kind,
            decorators=declared,
        )
        self._descriptors[contract.message_type] = descriptor
        return descriptor

    def register_all(
        self,
        candidates: Iterable[type],
        decorators_for: Callable[[type], Sequence[DecoratorKind]] | None = None,
    ) -> list[HandlerDescriptor]:
        """Scan candidate types and register the handlers among them.

        Candidates that are not classes, are abstract, or do not declare
        exactly one handler contract (decorators, helpers, base classes) are
        skipped.

        Args:
            candidates: Types to scan (e.g., every class of a module).
            decorators_for: Returns the decorator declaration for a handler
                class. Defaults to no decorators.

        Returns:
            Descriptors registered by this call.

        Raises:
            ConfigurationError: As ``register`` for the handlers found.
        """
        registered: list[HandlerDescriptor] = []
        for candidate in candidates:
            if not inspect.isclass(candidate) or inspect.isabstract(candidate):
                continue
            if len(find_contracts(candidate)) != 1:
                continue
            decorators = decorators_for(candidate) if decorators_for else ()
            registered.append(self.register(candidate, decorators))
        return registered

    def resolve(self, message_type: type) -> HandlerDescriptor:
        """Return the descriptor for a message type.

        Args:
            message_type: Concrete message class.

        Returns:
            HandlerDescriptor: Registered entry.

        Raises:
            NoHandlerError: If nothing handles the message type.
        """
        descriptor = self._index.get(message_type)
        if descriptor is None:
            raise NoHandlerError([message_type])
        return descriptor

    def validate_complete(self, message_types: Iterable[type]) -> None:
        """Check that every message type of a closed set has a handler.

        Args:
            message_types: The closed set of message types.

        Raises:
            NoHandlerError: Listing every message type without handler.
        """
        missing = [t for t in message_types if t not in self._index]
        if missing:
            raise NoHandlerError(missing)

    def freeze(self) -> None:
        """End registration; the index becomes read-only. Idempotent."""
        if self._frozen:
            return
        self._index = MappingProxyType(dict(self._descriptors))
        self._frozen = True

    @staticmethod
    def _decorator_kind(kind: DecoratorKind | str) -> DecoratorKind:
        try:
            return DecoratorKind(kind)
        except ValueError as e:
            raise UnknownDecoratorError(kind) from e

    @staticmethod
    def _single_contract(handler_type: type) -> HandlerContract:
        if not inspect.isclass(handler_type):
            raise TypeError(f"Expected a handler class, got {handler_type!r}")

        contracts = find_contracts(handler_type)
        if not contracts:
            raise MissingContractError(handler_type, "declares no handler contract")
        if len(contracts) > 1:
            names = ", ".join(
                f"{c.contract.__name__}[{c.message_type.__name__}]" for c in contracts
            )
            raise MissingContractError(
                handler_type, f"declares more than one handler contract ({names})"
            )

        contract = contracts[0]
        message_kind = message_kind_of(contract.message_type)
        if message_kind is not contract.kind:
            actual = message_kind.value if message_kind else "not a message"
            raise MissingContractError(
                handler_type,
                f"{contract.contract.__name__} expects a {contract.kind.value} "
                f"but {contract.message_type.__name__} is {actual}",
            )
        if inspect.isabstract(handler_type):
            raise MissingContractError(handler_type, "does not implement handle()")

        return contract

"""Unit tests for message contracts and the HandlerRegistry.

Tests cover:
- Message kind derivation from marker bases
- Handler contract discovery (direct, inherited, generic intermediates)
- Registration errors (duplicate, missing/ambiguous/mismatched contract,
  duplicate or unknown decorator, frozen registry)
- Scanning candidates (non-handlers skipped)
- Resolution and closed-set validation
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import pytest

from studentdesk.application.cqrs.contracts import (
    Command,
    CommandHandler,
    HandlerDecorator,
    MessageKind,
    Query,
    QueryHandler,
    ResultCommand,
    ResultCommandHandler,
    find_contracts,
    message_kind_of,
)
from studentdesk.application.cqrs.errors import (
    ConfigurationError,
    DuplicateDecoratorError,
    DuplicateHandlerError,
    MissingContractError,
    NoHandlerError,
    RegistryFrozenError,
    UnknownDecoratorError,
)
from studentdesk.application.cqrs.handler_registry import HandlerRegistry
from studentdesk.application.cqrs.metadata import DecoratorKind, HandlerDescriptor
from studentdesk.core.result import Result, Success

M = TypeVar("M")


# =============================================================================
# Test Messages and Handlers
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class Ping(Command):
    text: str = "ping"


@dataclass(frozen=True, kw_only=True)
class CreateThing(ResultCommand[int]):
    name: str


@dataclass(frozen=True, kw_only=True)
class CountThings(Query[int]):
    pass


@dataclass(frozen=True, kw_only=True)
class Unhandled(Command):
    pass


class PingHandler(CommandHandler[Ping]):
    async def handle(self, command: Ping) -> Result[None, str]:
        return Success(value=None)


class OtherPingHandler(CommandHandler[Ping]):
    async def handle(self, command: Ping) -> Result[None, str]:
        return Success(value=None)


class CreateThingHandler(ResultCommandHandler[CreateThing, int]):
    async def handle(self, command: CreateThing) -> Result[int, str]:
        return Success(value=1)


class CountThingsHandler(QueryHandler[CountThings, int]):
    async def handle(self, query: CountThings) -> int:
        return 0


class SubclassedPingHandler(PingHandler):
    """Inherits its contract from PingHandler."""


class BaseLoggingHandler(CommandHandler[M], Generic[M]):
    """Generic intermediate base: contract still parameterised by a TypeVar."""

    async def handle(self, command: Any) -> Result[None, str]:
        return Success(value=None)


class GenericBasedPingHandler(BaseLoggingHandler[Ping]):
    pass


class TwoContractsHandler(CommandHandler[Ping], QueryHandler[CountThings, int]):
    async def handle(self, message: Any) -> Any:
        return None


class MismatchedHandler(CommandHandler[CountThings]):  # type: ignore[type-var]
    """Declares a command contract for a query message."""

    async def handle(self, command: Any) -> Result[None, str]:
        return Success(value=None)


class NotAMessageHandler(CommandHandler[int]):  # type: ignore[type-var]
    async def handle(self, command: Any) -> Result[None, str]:
        return Success(value=None)


class AbstractPingHandler(CommandHandler[Ping]):
    """Declares the contract but never implements handle()."""


class PlainHelper:
    async def handle(self, message: Any) -> None:
        return None


class PassThroughDecorator(HandlerDecorator):
    async def handle(self, message: Any) -> Any:
        return await self.inner.handle(message)


# =============================================================================
# Contracts
# =============================================================================


@pytest.mark.unit
class TestMessageKinds:
    """Message kind is derived from the marker base."""

    def test_command_kind(self):
        assert message_kind_of(Ping) is MessageKind.COMMAND

    def test_result_command_kind(self):
        assert message_kind_of(CreateThing) is MessageKind.RESULT_COMMAND

    def test_query_kind(self):
        assert message_kind_of(CountThings) is MessageKind.QUERY

    def test_non_message_has_no_kind(self):
        assert message_kind_of(int) is None

    def test_messages_are_frozen(self):
        ping = Ping(text="a")
        with pytest.raises(AttributeError):
            ping.text = "b"  # type: ignore[misc]


@pytest.mark.unit
class TestFindContracts:
    """Contract discovery walks the MRO's original bases."""

    def test_direct_contract(self):
        contracts = find_contracts(PingHandler)

        assert len(contracts) == 1
        assert contracts[0].contract is CommandHandler
        assert contracts[0].message_type is Ping
        assert contracts[0].kind is MessageKind.COMMAND

    def test_query_contract(self):
        (contract,) = find_contracts(CountThingsHandler)
        assert contract.contract is QueryHandler
        assert contract.message_type is CountThings

    def test_inherited_contract(self):
        (contract,) = find_contracts(SubclassedPingHandler)
        assert contract.message_type is Ping

    def test_generic_intermediate_base(self):
        (contract,) = find_contracts(GenericBasedPingHandler)
        assert contract.message_type is Ping

    def test_generic_base_itself_declares_nothing(self):
        assert find_contracts(BaseLoggingHandler) == []

    def test_two_contracts(self):
        assert len(find_contracts(TwoContractsHandler)) == 2

    def test_non_handlers_declare_nothing(self):
        assert find_contracts(PlainHelper) == []
        assert find_contracts(PassThroughDecorator) == []


# =============================================================================
# Registration
# =============================================================================


@pytest.mark.unit
class TestRegister:
    """HandlerRegistry.register."""

    def test_register_returns_descriptor(self):
        registry = HandlerRegistry()

        descriptor = registry.register(
            PingHandler, decorators=(DecoratorKind.AUDIT_LOG, DecoratorKind.RETRY)
        )

        assert descriptor == HandlerDescriptor(
            message_type=Ping,
            handler_type=PingHandler,
            kind=MessageKind.COMMAND,
            decorators=(DecoratorKind.AUDIT_LOG, DecoratorKind.RETRY),
        )

    def test_resolve_returns_registered_descriptor(self):
        registry = HandlerRegistry()
        descriptor = registry.register(CreateThingHandler)

        assert registry.resolve(CreateThing) is descriptor
        assert descriptor.kind is MessageKind.RESULT_COMMAND
        assert descriptor.decorators == ()

    def test_decorator_order_is_preserved(self):
        registry = HandlerRegistry()
        registry.register(
            PingHandler, decorators=[DecoratorKind.RETRY, DecoratorKind.AUDIT_LOG]
        )

        assert registry.resolve(Ping).decorators == (
            DecoratorKind.RETRY,
            DecoratorKind.AUDIT_LOG,
        )

    def test_duplicate_handler_fails(self):
        registry = HandlerRegistry()
        registry.register(PingHandler)

        with pytest.raises(DuplicateHandlerError) as exc_info:
            registry.register(OtherPingHandler)

        assert exc_info.value.message_type is Ping
        assert exc_info.value.existing is PingHandler
        assert exc_info.value.duplicate is OtherPingHandler
        # First registration is kept
        assert registry.resolve(Ping).handler_type is PingHandler

    def test_registering_same_handler_twice_fails(self):
        registry = HandlerRegistry()
        registry.register(PingHandler)

        with pytest.raises(DuplicateHandlerError):
            registry.register(PingHandler)

    def test_no_contract_fails(self):
        with pytest.raises(MissingContractError, match="no handler contract"):
            HandlerRegistry().register(PlainHelper)

    def test_two_contracts_fail(self):
        with pytest.raises(MissingContractError, match="more than one"):
            HandlerRegistry().register(TwoContractsHandler)

    def test_kind_mismatch_fails(self):
        with pytest.raises(MissingContractError, match="expects a command"):
            HandlerRegistry().register(MismatchedHandler)

    def test_contract_for_non_message_fails(self):
        with pytest.raises(MissingContractError, match="not a message"):
            HandlerRegistry().register(NotAMessageHandler)

    def test_abstract_handler_fails(self):
        with pytest.raises(MissingContractError, match="handle"):
            HandlerRegistry().register(AbstractPingHandler)

    def test_duplicate_decorator_kind_fails(self):
        with pytest.raises(DuplicateDecoratorError):
            HandlerRegistry().register(
                PingHandler, decorators=(DecoratorKind.RETRY, DecoratorKind.RETRY)
            )

    def test_unknown_decorator_kind_fails(self):
        registry = HandlerRegistry()

        with pytest.raises(UnknownDecoratorError) as exc_info:
            registry.register(PingHandler, decorators=("retry", "rate_limit"))

        assert exc_info.value.kind == "rate_limit"
        assert isinstance(exc_info.value, ConfigurationError)
        assert Ping not in registry

    def test_decorator_kind_by_value(self):
        descriptor = HandlerRegistry().register(PingHandler, decorators=("audit_log",))

        assert descriptor.decorators == (DecoratorKind.AUDIT_LOG,)

    def test_configuration_errors_share_base(self):
        assert issubclass(DuplicateHandlerError, ConfigurationError)
        assert issubclass(MissingContractError, ConfigurationError)
        assert issubclass(NoHandlerError, ConfigurationError)


@pytest.mark.unit
class TestRegisterAll:
    """Scanning a candidate set."""

    def test_scan_registers_handlers_and_skips_others(self):
        registry = HandlerRegistry()

        registered = registry.register_all(
            [
                PingHandler,
                PlainHelper,
                PassThroughDecorator,
                BaseLoggingHandler,
                AbstractPingHandler,
                TwoContractsHandler,
                CountThingsHandler,
                "not a class",  # type: ignore[list-item]
            ]
        )

        assert [d.handler_type for d in registered] == [
            PingHandler,
            CountThingsHandler,
        ]
        assert len(registry) == 2

    def test_scan_applies_decorator_declarations(self):
        registry = HandlerRegistry()
        declarations = {PingHandler: (DecoratorKind.AUDIT_LOG,)}

        registry.register_all(
            [PingHandler, CountThingsHandler],
            decorators_for=lambda handler: declarations.get(handler, ()),
        )

        assert registry.resolve(Ping).decorators == (DecoratorKind.AUDIT_LOG,)
        assert registry.resolve(CountThings).decorators == ()

    def test_scan_detects_duplicates(self):
        with pytest.raises(DuplicateHandlerError):
            HandlerRegistry().register_all([PingHandler, OtherPingHandler])


@pytest.mark.unit
class TestResolveAndValidate:
    """Resolution and closed message set validation."""

    def test_resolve_unknown_type_fails(self):
        registry = HandlerRegistry()

        with pytest.raises(NoHandlerError) as exc_info:
            registry.resolve(Unhandled)

        assert exc_info.value.message_types == (Unhandled,)

    def test_validate_complete_passes(self):
        registry = HandlerRegistry()
        registry.register_all([PingHandler, CountThingsHandler])

        registry.validate_complete([Ping, CountThings])

    def test_validate_complete_lists_every_missing_type(self):
        registry = HandlerRegistry()
        registry.register(PingHandler)

        with pytest.raises(NoHandlerError) as exc_info:
            registry.validate_complete([Ping, CreateThing, Unhandled])

        assert exc_info.value.message_types == (CreateThing, Unhandled)
        assert "CreateThing" in str(exc_info.value)
        assert "Unhandled" in str(exc_info.value)


@pytest.mark.unit
class TestFreeze:
    """Registry becomes read-only after freeze()."""

    def test_register_after_freeze_fails(self):
        registry = HandlerRegistry()
        registry.register(PingHandler)
        registry.freeze()

        with pytest.raises(RegistryFrozenError):
            registry.register(CountThingsHandler)

    def test_resolution_still_works_after_freeze(self):
        registry = HandlerRegistry()
        descriptor = registry.register(PingHandler)
        registry.freeze()

        assert registry.is_frozen
        assert registry.resolve(Ping) is descriptor
        assert Ping in registry

    def test_freeze_is_idempotent(self):
        registry = HandlerRegistry()
        registry.freeze()
        registry.freeze()

        assert registry.is_frozen
        assert registry.descriptors == ()

"""CQRS Registry Compliance Tests.

Self-enforcing tests that fail if HANDLER_REGISTRY is incomplete or
inconsistent.

Test categories:
1. Completeness - Every command and query class has a registered handler
2. Handler compliance - Handlers are concrete classes with one contract
3. Message compliance - Messages are frozen keyword-only dataclasses
4. Decorator declarations - Commands audited and retried, queries retried
5. Statistics - Registry counts match the declarations
"""

import dataclasses
import inspect

import pytest

from studentdesk.application.commands import student_commands
from studentdesk.application.cqrs import (
    DecoratorKind,
    HandlerRegistry,
    MessageKind,
    get_all_message_types,
    get_handler_metadata,
    get_handlers_with_decorator,
    get_statistics,
    message_kind_of,
    messages_declared_in,
    validate_registry_consistency,
)
from studentdesk.application.cqrs.computed_views import get_message_type
from studentdesk.application.cqrs.registry import (
    COMMAND_DECORATORS,
    HANDLER_REGISTRY,
    QUERY_DECORATORS,
)
from studentdesk.application.queries import student_queries


ALL_MESSAGES = messages_declared_in(student_commands, student_queries)


@pytest.mark.unit
class TestRegistryCompleteness:
    """Verify every message is registered."""

    def test_registry_not_empty(self) -> None:
        assert len(HANDLER_REGISTRY) > 0, "HANDLER_REGISTRY is empty"

    def test_message_modules_declare_messages(self) -> None:
        assert len(ALL_MESSAGES) == 8

    def test_no_duplicate_handlers(self) -> None:
        handler_classes = [meta.handler_class for meta in HANDLER_REGISTRY]
        duplicates = [h for h in handler_classes if handler_classes.count(h) > 1]
        assert not duplicates, f"Duplicate handlers: {duplicates}"

    def test_every_message_has_a_handler(self) -> None:
        registry = HandlerRegistry()
        for meta in HANDLER_REGISTRY:
            registry.register(meta.handler_class, meta.decorators)

        registry.validate_complete(ALL_MESSAGES)

    def test_message_types_match_declared_messages(self) -> None:
        assert set(get_all_message_types()) == set(ALL_MESSAGES)

    def test_registry_consistent(self) -> None:
        errors = validate_registry_consistency()
        assert not errors, "\n".join(errors)


@pytest.mark.unit
class TestHandlerCompliance:
    """Handlers are concrete classes serving exactly one message."""

    @pytest.mark.parametrize(
        "meta", HANDLER_REGISTRY, ids=lambda m: m.handler_class.__name__
    )
    def test_handler_is_concrete(self, meta) -> None:
        assert inspect.isclass(meta.handler_class)
        assert not inspect.isabstract(meta.handler_class)
        assert inspect.iscoroutinefunction(meta.handler_class.handle)

    @pytest.mark.parametrize(
        "meta", HANDLER_REGISTRY, ids=lambda m: m.handler_class.__name__
    )
    def test_handler_named_after_message(self, meta) -> None:
        message_type = get_message_type(meta.handler_class)
        assert message_type is not None
        assert meta.handler_class.__name__ == f"{message_type.__name__}Handler"

    @pytest.mark.parametrize(
        "meta", HANDLER_REGISTRY, ids=lambda m: m.handler_class.__name__
    )
    def test_handler_has_description(self, meta) -> None:
        assert meta.description.strip()

    def test_metadata_lookup_by_message(self) -> None:
        for meta in HANDLER_REGISTRY:
            assert get_handler_metadata(get_message_type(meta.handler_class)) is meta


@pytest.mark.unit
class TestMessageCompliance:
    """Messages are immutable keyword-only dataclasses."""

    @pytest.mark.parametrize("message_type", ALL_MESSAGES, ids=lambda t: t.__name__)
    def test_frozen_dataclass(self, message_type) -> None:
        assert dataclasses.is_dataclass(message_type)
        assert message_type.__dataclass_params__.frozen

    @pytest.mark.parametrize("message_type", ALL_MESSAGES, ids=lambda t: t.__name__)
    def test_keyword_only_fields(self, message_type) -> None:
        assert all(f.kw_only for f in dataclasses.fields(message_type))


@pytest.mark.unit
class TestDecoratorDeclarations:
    """Declared decorator order per message kind."""

    def test_commands_audited_then_retried(self) -> None:
        assert COMMAND_DECORATORS == (DecoratorKind.AUDIT_LOG, DecoratorKind.RETRY)
        for meta in HANDLER_REGISTRY:
            kind = message_kind_of(get_message_type(meta.handler_class))
            if kind is not MessageKind.QUERY:
                assert meta.decorators == COMMAND_DECORATORS

    def test_queries_retried_not_audited(self) -> None:
        assert QUERY_DECORATORS == (DecoratorKind.RETRY,)
        audited = {m.handler_class for m in get_handlers_with_decorator(DecoratorKind.AUDIT_LOG)}
        for meta in HANDLER_REGISTRY:
            if message_kind_of(get_message_type(meta.handler_class)) is MessageKind.QUERY:
                assert meta.handler_class not in audited


@pytest.mark.unit
class TestRegistryStatistics:
    """get_statistics()."""

    def test_statistics(self) -> None:
        stats = get_statistics()

        assert stats["total_handlers"] == len(HANDLER_REGISTRY)
        assert stats["handlers_by_kind"] == {
            "result_command": 1,
            "command": 5,
            "query": 2,
        }
        assert stats["handlers_by_decorator"] == {"audit_log": 6, "retry": 8}
        assert stats["undecorated_handlers"] == 0

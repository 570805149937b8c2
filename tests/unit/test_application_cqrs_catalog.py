"""Unit tests for DecoratorCatalog."""

from typing import Any

import pytest

from studentdesk.application.cqrs.catalog import DecoratorCatalog
from studentdesk.application.cqrs.contracts import HandlerDecorator
from studentdesk.application.cqrs.errors import UnknownDecoratorError
from studentdesk.application.cqrs.metadata import DecoratorKind
from studentdesk.application.decorators import (
    DEFAULT_DECORATOR_CATALOG,
    AuditLogDecorator,
    RetryDecorator,
)


class NoopDecorator(HandlerDecorator):
    async def handle(self, message: Any) -> Any:
        return await self.inner.handle(message)


@pytest.mark.unit
class TestDecoratorCatalog:
    """Explicit DecoratorKind -> implementation mapping."""

    def test_default_catalog_covers_every_kind(self):
        assert set(DEFAULT_DECORATOR_CATALOG) == set(DecoratorKind)
        assert DEFAULT_DECORATOR_CATALOG.decorator_for(DecoratorKind.RETRY) is (
            RetryDecorator
        )
        assert DEFAULT_DECORATOR_CATALOG.decorator_for(DecoratorKind.AUDIT_LOG) is (
            AuditLogDecorator
        )

    def test_missing_kind_raises_unknown_decorator(self):
        catalog = DecoratorCatalog({DecoratorKind.RETRY: NoopDecorator})

        with pytest.raises(UnknownDecoratorError) as exc_info:
            catalog.decorator_for(DecoratorKind.AUDIT_LOG)

        assert exc_info.value.kind is DecoratorKind.AUDIT_LOG

    def test_rejects_non_decorator_classes(self):
        with pytest.raises(TypeError):
            DecoratorCatalog({DecoratorKind.RETRY: object})  # type: ignore[dict-item]

    def test_catalog_is_read_only_mapping(self):
        source = {DecoratorKind.RETRY: NoopDecorator}
        catalog = DecoratorCatalog(source)
        source[DecoratorKind.AUDIT_LOG] = NoopDecorator

        assert len(catalog) == 1
        assert DecoratorKind.AUDIT_LOG not in catalog

"""Cross-cutting handler decorators.

Usage:
    from studentdesk.application.decorators import DEFAULT_DECORATOR_CATALOG
"""

from studentdesk.application.cqrs.catalog import DecoratorCatalog
from studentdesk.application.cqrs.metadata import DecoratorKind
from studentdesk.application.decorators.audit_log import (
    AuditLogDecorator,
    serialize_message,
)
from studentdesk.application.decorators.policies import AuditPolicy, RetryPolicy
from studentdesk.application.decorators.retry import RetryDecorator

DEFAULT_DECORATOR_CATALOG = DecoratorCatalog(
    {
        DecoratorKind.RETRY: RetryDecorator,
        DecoratorKind.AUDIT_LOG: AuditLogDecorator,
    }
)

__all__ = [
    "AuditLogDecorator",
    "AuditPolicy",
    "DEFAULT_DECORATOR_CATALOG",
    "RetryDecorator",
    "RetryPolicy",
    "serialize_message",
]

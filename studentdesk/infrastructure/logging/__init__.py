"""Logging adapters (structlog)."""

from studentdesk.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]

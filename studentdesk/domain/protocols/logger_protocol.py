"""Port for structured logging.

The dispatcher and the pipeline decorators log through this protocol. Which
sink backs it is decided in the container; today that is the structlog
console adapter.

Events are snake_case names with key/value context, never formatted
strings:

    logger.bind(message_type="EnrollStudent").warning(
        "transient_fault_retrying", attempt=1, max_retries=3
    )

Levels in use:
    debug     dispatch start and finish
    info      audit entries, container start-up
    warning   retried transient faults, exhausted retry budgets
    error     failed dispatches
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger accepted by every component that logs."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure.

        Args:
            message: Event name.
            error: Exception behind the failure, if any. Adapters flatten it
                into ``error_type`` and ``error_message`` fields.
            **context: Event fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every event.

        The receiver is left unchanged.
        """
        ...

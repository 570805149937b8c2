"""Retry decorator.

Re-attempts a handler when it raises a transient infrastructure fault (lost
database connection and the like). What counts as transient is decided by
the injected fault classifier.

Behaviour:
- Failed Results are business outcomes and are returned, never retried
- Non-transient exceptions propagate immediately
- At most ``policy.max_retries`` extra attempts, sequentially, with linear
  back-off ``policy.delay_seconds * attempt``
- When the budget is spent the original exception is re-raised unchanged
- Task cancellation is never intercepted
"""

import asyncio
from typing import Any

from studentdesk.application.cqrs.contracts import Handler, HandlerDecorator
from studentdesk.application.decorators.policies import RetryPolicy
from studentdesk.domain.protocols.fault_classifier_protocol import (
    FaultClassifierProtocol,
)
from studentdesk.domain.protocols.logger_protocol import LoggerProtocol


class RetryDecorator(HandlerDecorator):
    """Retries the inner handler on transient faults."""

    def __init__(
        self,
        inner: Handler,
        policy: RetryPolicy,
        classifier: FaultClassifierProtocol,
        logger: LoggerProtocol,
    ) -> None:
        super().__init__(inner)
        self._policy = policy
        self._classifier = classifier
        self._logger = logger

    async def handle(self, message: Any) -> Any:
        attempt = 0
        while True:
            try:
                return await self.inner.handle(message)
            except Exception as e:
                if not self._classifier.is_transient(e):
                    raise

                if attempt >= self._policy.max_retries:
                    self._logger.warning(
                        "retry_budget_exhausted",
                        message_type=type(message).__name__,
                        attempts=attempt + 1,
                        error_type=type(e).__name__,
                    )
                    raise

                attempt += 1
                self._logger.warning(
                    "transient_fault_retrying",
                    message_type=type(message).__name__,
                    attempt=attempt,
                    max_retries=self._policy.max_retries,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )

                if self._policy.delay_seconds > 0:
                    await asyncio.sleep(self._policy.delay_seconds * attempt)

"""Transient fault classifier protocol.

The retry decorator asks a classifier whether an exception is worth another
attempt. Which exceptions count as transient is an infrastructure concern;
the concrete classifier lives in ``infrastructure/resilience``.
"""

from typing import Protocol


class FaultClassifierProtocol(Protocol):
    """Protocol for deciding whether a fault is transient."""

    def is_transient(self, error: BaseException) -> bool:
        """Check whether an exception represents a transient fault.

        Args:
            error: Exception raised by a handler.

        Returns:
            bool: True if retrying the same message may succeed.
        """
        ...

"""Transient fault classification.

Decides which exceptions are worth retrying. Only faults caused by a lost or
refused connection qualify; everything else (constraint violations, bugs,
timeouts inside a transaction) is propagated on the first occurrence.

Recognised as transient:
- ``ConnectionError`` and subclasses (refused, reset, aborted, broken pipe)
- ``TransientInfrastructureError`` raised by adapters
- SQLAlchemy ``DisconnectionError``
- SQLAlchemy ``DBAPIError`` flagged ``connection_invalidated``
- SQLAlchemy ``OperationalError`` whose message reports a lost connection

Usage:
    classifier = TransientFaultClassifier()
    if classifier.is_transient(error):
        ...
"""

from sqlalchemy.exc import DBAPIError, DisconnectionError, OperationalError

# Lower-cased fragments of driver messages reporting a lost connection
CONNECTION_LOSS_MARKERS: tuple[str, ...] = (
    "could not connect to server",
    "connection refused",
    "server closed the connection unexpectedly",
    "connection was closed in the middle of operation",
    "connection is closed",
)


class TransientInfrastructureError(Exception):
    """Infrastructure fault that may succeed when retried."""

    pass


class TransientFaultClassifier:
    """Classifies exceptions as transient or not."""

    def __init__(
        self, connection_loss_markers: tuple[str, ...] = CONNECTION_LOSS_MARKERS
    ) -> None:
        self._markers = tuple(m.lower() for m in connection_loss_markers)

    def is_transient(self, error: BaseException) -> bool:
        """Check whether an exception represents a transient fault.

        Args:
            error: Exception raised by a handler.

        Returns:
            bool: True if retrying the same message may succeed.
        """
        if isinstance(error, (ConnectionError, TransientInfrastructureError)):
            return True
        if isinstance(error, DisconnectionError):
            return True
        if isinstance(error, DBAPIError) and error.connection_invalidated:
            return True
        if isinstance(error, OperationalError):
            text = str(error).lower()
            return any(marker in text for marker in self._markers)
        return False

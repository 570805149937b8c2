"""Decorator policies.

Process-wide configuration of the cross-cutting decorators, derived from
Settings once at startup and registered in the service directory. Decorator
kinds carry no configuration themselves.
"""

from dataclasses import dataclass

from studentdesk.core.config import Settings


@dataclass(frozen=True, kw_only=True)
class RetryPolicy:
    """Retry budget for transient faults.

    Attributes:
        max_retries: Extra attempts after the first one (0 disables retrying).
        delay_seconds: Linear back-off step; attempt n waits n * delay_seconds.
    """

    max_retries: int = 3
    delay_seconds: float = 0.0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must not be negative")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryPolicy":
        return cls(
            max_retries=settings.retry_max_retries,
            delay_seconds=settings.retry_delay_seconds,
        )


@dataclass(frozen=True, kw_only=True)
class AuditPolicy:
    """Audit logging switch.

    Attributes:
        enabled: Whether AUDIT_LOG decorators emit entries.
    """

    enabled: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuditPolicy":
        return cls(enabled=settings.audit_enabled)

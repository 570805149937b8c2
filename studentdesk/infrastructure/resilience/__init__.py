"""Resilience helpers (transient fault classification)."""

from studentdesk.infrastructure.resilience.transient_faults import (
    CONNECTION_LOSS_MARKERS,
    TransientFaultClassifier,
    TransientInfrastructureError,
)

__all__ = [
    "CONNECTION_LOSS_MARKERS",
    "TransientFaultClassifier",
    "TransientInfrastructureError",
]

"""Domain enums package."""

from studentdesk.domain.enums.grade import Grade

__all__ = ["Grade"]

"""Domain value objects."""

from studentdesk.domain.value_objects.email import Email

__all__ = ["Email"]

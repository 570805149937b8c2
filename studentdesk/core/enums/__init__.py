"""Core enums package.

Usage:
    from studentdesk.core.enums import Environment
"""

from studentdesk.core.enums.environment import Environment

__all__ = ["Environment"]

"""Database persistence infrastructure.

This module provides database-related functionality including:
- Base model for all database entities
- Database connection and session management
- Specification to SQL translation
- Repository implementations (see ``repositories``)
"""

from studentdesk.infrastructure.persistence.base import BaseModel
from studentdesk.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "Database"]

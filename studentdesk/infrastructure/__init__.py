"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- logging/: structlog console adapter
- persistence/: SQLAlchemy models, repositories, specification translation
- resilience/: transient fault classification
"""

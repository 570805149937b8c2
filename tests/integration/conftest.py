"""Integration test fixtures.

Each test gets a fresh SQLite database file (aiosqlite driver) with the full
schema created, so tests never share rows.
"""

import pytest_asyncio

from studentdesk.infrastructure.persistence.database import Database


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh Database with all tables created."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'studentdesk.db'}")
    await database.create_all()
    yield database
    await database.close()

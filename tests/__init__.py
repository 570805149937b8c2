"""Test suite for Studentdesk.

Test structure follows the test pyramid:
- unit/: Unit tests - engine, decorators, specifications and handlers in
  isolation (mocks, in-memory repositories)
- integration/: Integration tests - SQLAlchemy repositories and
  specification translation against SQLite (aiosqlite)
"""

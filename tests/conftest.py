"""Pytest configuration and shared test helpers.

This configuration ensures:
1. Async tests are marked for pytest-asyncio automatically
2. Custom markers are registered
3. Entity builders and a seeded random domain are shared across suites
"""

import inspect
import random
from unittest.mock import MagicMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from studentdesk.domain.entities.course import Course
from studentdesk.domain.entities.student import Enrollment, Student
from studentdesk.domain.enums.grade import Grade
from studentdesk.domain.protocols.logger_protocol import LoggerProtocol
from studentdesk.domain.value_objects.email import Email

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


COURSE_NAMES = ("Calculus", "Chemistry", "Literature", "History", "Physics")
EMAIL_DOMAINS = ("university.edu", "gmail.com", "mail.org")


# =============================================================================
# Builders
# =============================================================================


def make_course(name: str = "Calculus", credits: int = 3) -> Course:
    """Create a course with a fresh id."""
    return Course(id=uuid7(), name=name, credits=credits)


def make_student(
    name: str = "Alice",
    email: str = "alice@university.edu",
    enrollments: list[tuple[str, Grade]] | None = None,
    student_id: UUID | None = None,
) -> Student:
    """Create a student, optionally with (course_name, grade) enrollments."""
    return Student(
        id=student_id or uuid7(),
        name=name,
        email=Email(email),
        enrollments=[
            Enrollment(course_id=uuid7(), course_name=course_name, grade=grade)
            for course_name, grade in enrollments or []
        ],
    )


def random_students(count: int, seed: int = 1234) -> list[Student]:
    """Create a reproducible random population of students.

    Covers every combination the student specifications distinguish:
    0-2 enrollments, failing and passing grades, university and other
    email domains.
    """
    rng = random.Random(seed)
    students = []
    for i in range(count):
        courses = rng.sample(COURSE_NAMES, rng.randint(0, 2))
        students.append(
            make_student(
                name=f"Student {i:03d}",
                email=f"student{i}@{rng.choice(EMAIL_DOMAINS)}",
                enrollments=[(c, rng.choice(list(Grade))) for c in courses],
            )
        )
    return students


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger mock whose bind() returns itself (one object to assert on)."""
    logger = MagicMock(spec=LoggerProtocol)
    logger.bind.return_value = logger
    return logger


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)

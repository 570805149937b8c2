"""Unit tests for ServiceDirectory."""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from studentdesk.core.container.service_directory import ServiceDirectory, service_key
from studentdesk.domain.protocols.student_repository import StudentRepository


class Clock:
    pass


@pytest.mark.unit
class TestServiceKey:
    """service_key()."""

    def test_plain_type_unchanged(self):
        assert service_key(Clock) is Clock

    def test_optional_unwrapped(self):
        assert service_key(Clock | None) is Clock
        assert service_key(Optional[Clock]) is Clock

    def test_real_union_unchanged(self):
        assert service_key(Clock | int) == (Clock | int)


@pytest.mark.unit
class TestServiceDirectory:
    """ServiceDirectory registration and resolution."""

    def test_resolve_instance(self):
        services = ServiceDirectory()
        clock = Clock()
        services.register_instance(Clock, clock)

        assert services.has(Clock)
        assert services.resolve(Clock) is clock
        assert services.resolve(Clock | None) is clock

    def test_factory_called_lazily_once(self):
        services = ServiceDirectory()
        factory = MagicMock(return_value=MagicMock(name="repo"))
        services.register_factory(StudentRepository, factory)

        factory.assert_not_called()
        first = services.resolve(StudentRepository)
        second = services.resolve(StudentRepository)

        assert first is second
        factory.assert_called_once_with()

    def test_later_registration_replaces_earlier(self):
        services = ServiceDirectory()
        services.register_factory(Clock, Clock)
        clock = Clock()
        services.register_instance(Clock, clock)

        assert services.resolve(Clock) is clock

    def test_unknown_type_raises_lookup_error(self):
        services = ServiceDirectory()

        assert not services.has(Clock)
        with pytest.raises(LookupError, match="Clock"):
            services.resolve(Clock)

    def test_failing_factory_stays_registered(self):
        services = ServiceDirectory()
        repo = MagicMock(name="repo")
        factory = MagicMock(side_effect=[ConnectionError("database down"), repo])
        services.register_factory(StudentRepository, factory)

        with pytest.raises(ConnectionError):
            services.resolve(StudentRepository)

        assert services.has(StudentRepository)
        assert services.resolve(StudentRepository) is repo
        assert services.resolve(StudentRepository) is repo
        assert factory.call_count == 2

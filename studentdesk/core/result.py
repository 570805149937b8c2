"""Success/failure values returned by command handlers.

Business refusals (unknown student, course already taken, enrollment limit)
come back as ``Failure(error=reason)``. Infrastructure faults are not
business outcomes: they stay exceptions and travel through the pipeline,
where the retry decorator may see them.

    match await dispatcher.dispatch(EnrollStudent(student_id=sid, course_name="Physics")):
        case Success():
            ...
        case Failure(error=reason):
            log.info("enrollment_refused", reason=reason)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Completed command; ``value`` is None unless the command yields one."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Refused command with the reason the caller is shown."""

    error: E


type Result[T, E] = Success[T] | Failure[E]

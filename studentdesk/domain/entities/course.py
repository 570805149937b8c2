"""Course domain entity.

A course students can enroll in. Courses are reference data: created by
administration and looked up by name when students enroll or transfer.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Course:
    """Course offered by the university.

    Attributes:
        id: Unique course identifier.
        name: Course name, unique across the catalog (e.g., "Calculus").
        credits: Credit points awarded for the course.
    """

    id: UUID
    name: str
    credits: int

"""Grade enum.

Letter grades a student holds for an enrolled course.
F is the only failing grade.
"""

from enum import Enum


class Grade(str, Enum):
    """Letter grade for an enrollment."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def is_failing(self) -> bool:
        """Check whether the grade is a failing grade.

        Returns:
            bool: True only for F.
        """
        return self is Grade.F

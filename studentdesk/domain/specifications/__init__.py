"""Specification pattern and student specifications.

Usage:
    from studentdesk.domain.specifications import NEEDS_ATTENTION, evaluate
"""

from studentdesk.domain.specifications.base import (
    And,
    AndSpecification,
    Leaf,
    LeafSpecification,
    Not,
    NotSpecification,
    Or,
    OrSpecification,
    PredicateNode,
    Specification,
    UnknownConditionError,
    conditions_of,
    evaluate,
)
from studentdesk.domain.specifications.student_specifications import (
    NEEDS_ATTENTION,
    UNIVERSITY_EMAIL_DOMAIN,
    HasFailingGrade,
    HasNoEnrollments,
    HasUniversityEmail,
    IsFullyEnrolled,
)

__all__ = [
    # Algebra
    "Specification",
    "LeafSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    # Predicate form
    "PredicateNode",
    "Leaf",
    "And",
    "Or",
    "Not",
    "evaluate",
    "conditions_of",
    "UnknownConditionError",
    # Student
    "HasNoEnrollments",
    "IsFullyEnrolled",
    "HasFailingGrade",
    "HasUniversityEmail",
    "NEEDS_ATTENTION",
    "UNIVERSITY_EMAIL_DOMAIN",
]

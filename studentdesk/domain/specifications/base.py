"""Specification pattern: composable, parameterless predicates.

A specification answers one yes/no question about a domain value. The same
declaration serves two consumers:

1. In-process validation: ``spec.is_satisfied_by(student)``.
2. Query engines: ``spec.to_predicate_form()`` returns a small tagged tree
   (``Leaf`` / ``And`` / ``Or`` / ``Not``) that a storage adapter walks to
   build its own filter (see the SQLAlchemy translator in infrastructure).

Both surfaces agree for every input: evaluating the predicate form with
``evaluate()`` gives the same boolean as ``is_satisfied_by``.

Design rules:
    - Leaf specifications take no constructor parameters. Their meaning is
      fixed by their class and identified by a stable ``condition_id``.
    - Combination (``and_``/``or_``/``not_`` or ``&``/``|``/``~``) never
      mutates operands; it always returns a new composite.

Usage:
    needs_attention = HasFailingGrade() | HasNoEnrollments()
    if needs_attention.is_satisfied_by(student):
        ...
    students = await repo.find_matching(needs_attention)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")


# =============================================================================
# Predicate form (engine-translatable IR)
# =============================================================================


@dataclass(frozen=True, slots=True)
class Leaf:
    """Reference to a leaf condition by its identifier."""

    condition_id: str


@dataclass(frozen=True, slots=True)
class And:
    """Conjunction of two predicate nodes."""

    left: PredicateNode
    right: PredicateNode


@dataclass(frozen=True, slots=True)
class Or:
    """Disjunction of two predicate nodes."""

    left: PredicateNode
    right: PredicateNode


@dataclass(frozen=True, slots=True)
class Not:
    """Negation of a predicate node."""

    operand: PredicateNode


type PredicateNode = Leaf | And | Or | Not


class UnknownConditionError(LookupError):
    """Predicate form references a condition the evaluator does not know."""

    def __init__(self, condition_id: str) -> None:
        super().__init__(f"Unknown specification condition: {condition_id}")
        self.condition_id = condition_id


# =============================================================================
# Specifications
# =============================================================================


class Specification(ABC, Generic[T]):
    """Immutable predicate over values of type T."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """Evaluate the predicate in-process.

        Args:
            candidate: Value to test.

        Returns:
            bool: True if the candidate satisfies the specification.
        """

    @abstractmethod
    def to_predicate_form(self) -> PredicateNode:
        """Return the engine-translatable form of this specification."""

    @abstractmethod
    def leaves(self) -> dict[str, LeafSpecification[T]]:
        """Return every leaf used by this specification, keyed by condition id."""

    def and_(self, other: Specification[T]) -> Specification[T]:
        """Return a specification satisfied when both operands are."""
        return AndSpecification(self, other)

    def or_(self, other: Specification[T]) -> Specification[T]:
        """Return a specification satisfied when either operand is."""
        return OrSpecification(self, other)

    def not_(self) -> Specification[T]:
        """Return the negation of this specification."""
        return NotSpecification(self)

    def __and__(self, other: Specification[T]) -> Specification[T]:
        return self.and_(other)

    def __or__(self, other: Specification[T]) -> Specification[T]:
        return self.or_(other)

    def __invert__(self) -> Specification[T]:
        return self.not_()


_LEAF_CLASSES: dict[str, type] = {}


class LeafSpecification(Specification[T]):
    """Parameterless specification with a fixed condition.

    Subclasses set ``condition_id`` (unique across the process) and implement
    ``is_satisfied_by``. Defining ``__init__`` on a leaf is rejected: leaves
    carry no parameters, so every instance of a leaf class is interchangeable.

    Example:
        >>> class HasNoEnrollments(LeafSpecification[Student]):
        ...     condition_id = "student.has_no_enrollments"
        ...
        ...     def is_satisfied_by(self, candidate: Student) -> bool:
        ...         return candidate.number_of_courses == 0
    """

    condition_id: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)

        if "__init__" in cls.__dict__:
            raise TypeError(
                f"{cls.__name__} defines __init__; leaf specifications take no parameters"
            )

        condition_id = cls.__dict__.get("condition_id")
        if condition_id is None:
            # Intermediate base class without its own condition
            return
        if not isinstance(condition_id, str) or not condition_id:
            raise TypeError(f"{cls.__name__}.condition_id must be a non-empty string")

        existing = _LEAF_CLASSES.get(condition_id)
        if existing is not None and (existing.__module__, existing.__qualname__) != (
            cls.__module__,
            cls.__qualname__,
        ):
            raise TypeError(
                f"condition_id {condition_id!r} already used by {existing.__qualname__}"
            )
        _LEAF_CLASSES[condition_id] = cls

    def to_predicate_form(self) -> PredicateNode:
        return Leaf(self.condition_id)

    def leaves(self) -> dict[str, LeafSpecification[T]]:
        return {self.condition_id: self}

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@dataclass(frozen=True)
class AndSpecification(Specification[T]):
    """Satisfied when both children are satisfied."""

    left: Specification[T]
    right: Specification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(
            candidate
        )

    def to_predicate_form(self) -> PredicateNode:
        return And(self.left.to_predicate_form(), self.right.to_predicate_form())

    def leaves(self) -> dict[str, LeafSpecification[T]]:
        return {**self.left.leaves(), **self.right.leaves()}


@dataclass(frozen=True)
class OrSpecification(Specification[T]):
    """Satisfied when at least one child is satisfied."""

    left: Specification[T]
    right: Specification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(
            candidate
        )

    def to_predicate_form(self) -> PredicateNode:
        return Or(self.left.to_predicate_form(), self.right.to_predicate_form())

    def leaves(self) -> dict[str, LeafSpecification[T]]:
        return {**self.left.leaves(), **self.right.leaves()}


@dataclass(frozen=True)
class NotSpecification(Specification[T]):
    """Satisfied when the child is not."""

    operand: Specification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.operand.is_satisfied_by(candidate)

    def to_predicate_form(self) -> PredicateNode:
        return Not(self.operand.to_predicate_form())

    def leaves(self) -> dict[str, LeafSpecification[T]]:
        return self.operand.leaves()


# =============================================================================
# Predicate form evaluation
# =============================================================================


def evaluate(
    node: PredicateNode,
    candidate: T,
    conditions: Mapping[str, Specification[T]],
) -> bool:
    """Evaluate a predicate form in-process.

    This is the reference walker for the predicate form; collection adapters
    that keep data in memory filter through it.

    Args:
        node: Predicate form (from ``to_predicate_form()``).
        candidate: Value to test.
        conditions: Leaf specifications by condition id (``spec.leaves()``).

    Returns:
        bool: Result of the predicate for the candidate.

    Raises:
        UnknownConditionError: If a leaf id is missing from ``conditions``.
    """
    match node:
        case Leaf(condition_id=condition_id):
            leaf = conditions.get(condition_id)
            if leaf is None:
                raise UnknownConditionError(condition_id)
            return leaf.is_satisfied_by(candidate)
        case And(left=left, right=right):
            return evaluate(left, candidate, conditions) and evaluate(
                right, candidate, conditions
            )
        case Or(left=left, right=right):
            return evaluate(left, candidate, conditions) or evaluate(
                right, candidate, conditions
            )
        case Not(operand=operand):
            return not evaluate(operand, candidate, conditions)
    raise TypeError(f"Not a predicate node: {node!r}")


def conditions_of(spec: Specification[T]) -> dict[str, LeafSpecification[T]]:
    """Collect the leaf specifications a specification is built from.

    Args:
        spec: Any specification.

    Returns:
        dict: Leaf specifications keyed by condition id, suitable as the
        ``conditions`` argument of ``evaluate()``.
    """
    return spec.leaves()

"""Specification to SQLAlchemy filter translation.

Walks the predicate form of a specification (``Leaf``/``And``/``Or``/``Not``)
and builds the equivalent SQLAlchemy boolean clause. Each leaf condition id
maps to a zero-argument clause factory; the table of factories is supplied
per entity (see ``student_filters.STUDENT_CLAUSES``).

Usage:
    translator = SqlAlchemyFilterTranslator(STUDENT_CLAUSES)
    stmt = select(StudentModel).where(translator.translate_spec(NEEDS_ATTENTION))
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from sqlalchemy import and_, not_, or_
from sqlalchemy.sql.elements import ColumnElement

from studentdesk.domain.specifications.base import (
    And,
    Leaf,
    Not,
    Or,
    PredicateNode,
    Specification,
)

ClauseFactory = Callable[[], ColumnElement[bool]]


class UnsupportedConditionError(LookupError):
    """A leaf condition has no SQL clause."""

    def __init__(self, condition_id: str) -> None:
        super().__init__(f"No SQL clause registered for condition: {condition_id}")
        self.condition_id = condition_id


class SqlAlchemyFilterTranslator:
    """Translates predicate forms into SQLAlchemy WHERE clauses."""

    def __init__(self, clauses: Mapping[str, ClauseFactory]) -> None:
        self._clauses = MappingProxyType(dict(clauses))

    def supports(self, condition_id: str) -> bool:
        """Check whether a leaf condition can be translated."""
        return condition_id in self._clauses

    def translate(self, node: PredicateNode) -> ColumnElement[bool]:
        """Build the SQL clause for a predicate form.

        Args:
            node: Predicate form.

        Returns:
            Boolean clause usable in ``Select.where``.

        Raises:
            UnsupportedConditionError: If a leaf has no registered clause.
        """
        match node:
            case Leaf(condition_id=condition_id):
                factory = self._clauses.get(condition_id)
                if factory is None:
                    raise UnsupportedConditionError(condition_id)
                return factory()
            case And(left=left, right=right):
                return and_(self.translate(left), self.translate(right))
            case Or(left=left, right=right):
                return or_(self.translate(left), self.translate(right))
            case Not(operand=operand):
                return not_(self.translate(operand))
        raise TypeError(f"Not a predicate node: {node!r}")

    def translate_spec(self, spec: Specification[Any]) -> ColumnElement[bool]:
        """Build the SQL clause for a specification."""
        return self.translate(spec.to_predicate_form())

"""
Composable query specifications.

A specification is one query criterion with two renderings: an in-memory
predicate (``is_satisfied_by``) and a SQLAlchemy filter expression
(``to_sql_filter``). Specifications combine with ``&``, ``|`` and ``~``.
"""

from abc import ABC, abstractmethod
from datetime import date
from functools import reduce
from typing import Any, Generic, Iterable, TypeVar

from sqlalchemy import and_, not_, or_, true
from sqlalchemy.orm import InstrumentedAttribute


T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """A single business rule or query criterion."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """Check if a candidate object satisfies this specification."""

    @abstractmethod
    def to_sql_filter(self):
        """Convert the specification to a SQLAlchemy filter expression."""

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "Specification[T]":
        return NotSpecification(self)


class AndSpecification(Specification[T]):
    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())

    def __repr__(self):
        return f"({self.left!r} AND {self.right!r})"


class OrSpecification(Specification[T]):
    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return or_(self.left.to_sql_filter(), self.right.to_sql_filter())

    def __repr__(self):
        return f"({self.left!r} OR {self.right!r})"


class NotSpecification(Specification[T]):
    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return not_(self.spec.to_sql_filter())

    def __repr__(self):
        return f"NOT {self.spec!r}"


class MatchAll(Specification[T]):
    """Matches every candidate. The result of compiling zero filters."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_sql_filter(self):
        return true()

    def __and__(self, other: Specification[T]) -> Specification[T]:
        return other

    def __repr__(self):
        return "MatchAll()"


class FieldEquals(Specification[T]):
    """Exact match of one mapped column against a value."""

    def __init__(self, column: InstrumentedAttribute, value: Any):
        self.column = column
        self.value = value

    def is_satisfied_by(self, candidate: T) -> bool:
        return getattr(candidate, self.column.key) == self.value

    def to_sql_filter(self):
        return self.column == self.value

    def __repr__(self):
        return f"{self.column.key} == {self.value!r}"


class WithinDates(Specification[T]):
    """
    Candidate's [start, end] window lies inside [window_start, window_end].

    Dates are stored as ISO ``YYYY-MM-DD`` text, so string comparison is
    date comparison.
    """

    def __init__(
        self,
        start_column: InstrumentedAttribute,
        end_column: InstrumentedAttribute,
        window_start: date,
        window_end: date,
    ):
        self.start_column = start_column
        self.end_column = end_column
        self.window_start = window_start.isoformat()
        self.window_end = window_end.isoformat()

    def is_satisfied_by(self, candidate: T) -> bool:
        start = getattr(candidate, self.start_column.key)
        end = getattr(candidate, self.end_column.key)
        return start >= self.window_start and end <= self.window_end

    def to_sql_filter(self):
        return and_(self.start_column >= self.window_start, self.end_column <= self.window_end)

    def __repr__(self):
        return f"{self.start_column.key}..{self.end_column.key} within {self.window_start}..{self.window_end}"


def all_of(specs: Iterable[Specification[T]]) -> Specification[T]:
    """AND together any number of specifications; none gives ``MatchAll``."""
    return reduce(lambda left, right: left & right, specs, MatchAll())

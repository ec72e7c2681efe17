"""Composable filter predicates over records.

A Predicate is a small tagged tree (Eq, In, Gte, Lte, Matches, And) that can be
evaluated in memory against any record (attribute access or mapping) and compiled
by the persistence layer into a storage where-clause. PredicateBuilder accumulates
clauses starting from match-all; None or empty inputs add nothing, so optional
query fields can only narrow a result set.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Any

from adminkit.domain.exceptions import ValidationException
from adminkit.shared.utils.datetime import ensure_utc


def _field_value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _comparable(left: Any, right: Any) -> tuple[Any, Any]:
    """Normalize naive/aware datetimes to UTC so they compare."""
    if isinstance(left, datetime) and isinstance(right, datetime):
        return ensure_utc(left), ensure_utc(right)
    return left, right


@lru_cache(maxsize=256)
def _compiled(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


class Predicate:
    """Base of all predicate nodes. Combine with & (logical AND)."""

    def evaluate(self, record: Any) -> bool:
        raise NotImplementedError

    def clauses(self) -> tuple[Predicate, ...]:
        """Return the conjuncts of this predicate (itself for a single clause)."""
        return (self,)

    def __and__(self, other: Predicate) -> Predicate:
        return and_(self, other)

    def __call__(self, record: Any) -> bool:
        return self.evaluate(record)


@dataclass(frozen=True)
class MatchAll(Predicate):
    """Identity predicate: matches every record."""

    def evaluate(self, record: Any) -> bool:
        return True

    def clauses(self) -> tuple[Predicate, ...]:
        return ()

    def __str__(self) -> str:
        return "TRUE"


MATCH_ALL = MatchAll()


@dataclass(frozen=True)
class Eq(Predicate):
    field: str
    value: Any

    def evaluate(self, record: Any) -> bool:
        return _field_value(record, self.field) == self.value

    def __str__(self) -> str:
        return f"{self.field} == {self.value!r}"


@dataclass(frozen=True)
class In(Predicate):
    field: str
    values: tuple[Any, ...]

    def evaluate(self, record: Any) -> bool:
        return _field_value(record, self.field) in self.values

    def __str__(self) -> str:
        return f"{self.field} IN ({', '.join(repr(v) for v in self.values)})"


@dataclass(frozen=True)
class Gte(Predicate):
    field: str
    value: Any

    def evaluate(self, record: Any) -> bool:
        actual = _field_value(record, self.field)
        if actual is None:
            return False
        actual, bound = _comparable(actual, self.value)
        return actual >= bound

    def __str__(self) -> str:
        return f"{self.field} >= {self.value!r}"


@dataclass(frozen=True)
class Lte(Predicate):
    field: str
    value: Any

    def evaluate(self, record: Any) -> bool:
        actual = _field_value(record, self.field)
        if actual is None:
            return False
        actual, bound = _comparable(actual, self.value)
        return actual <= bound

    def __str__(self) -> str:
        return f"{self.field} <= {self.value!r}"


@dataclass(frozen=True)
class Matches(Predicate):
    """Case-insensitive, unanchored regular-expression search on a text field.

    The pattern is used as given; callers that accept user text and want a
    literal substring match must escape it first (see PredicateBuilder.matches).
    """

    field: str
    pattern: str

    def evaluate(self, record: Any) -> bool:
        actual = _field_value(record, self.field)
        if actual is None:
            return False
        return _compiled(self.pattern).search(str(actual)) is not None

    def __str__(self) -> str:
        return f"{self.field} ~* /{self.pattern}/"


@dataclass(frozen=True)
class And(Predicate):
    items: tuple[Predicate, ...]

    def evaluate(self, record: Any) -> bool:
        return all(p.evaluate(record) for p in self.items)

    def clauses(self) -> tuple[Predicate, ...]:
        return self.items

    def __str__(self) -> str:
        return " AND ".join(str(p) for p in self.items)


def and_(*predicates: Predicate) -> Predicate:
    """AND predicates together, flattening nested Ands and dropping match-all."""
    flat: list[Predicate] = []
    for predicate in predicates:
        flat.extend(predicate.clauses())
    if not flat:
        return MATCH_ALL
    if len(flat) == 1:
        return flat[0]
    return And(tuple(flat))


class PredicateBuilder:
    """Accumulator that starts at match-all and narrows with each appended clause.

    Every method ignores absent input (None, empty string, empty collection) so
    callers can pass optional query fields straight through.
    """

    def __init__(self) -> None:
        self._clauses: list[Predicate] = []

    def where(self, predicate: Predicate | None) -> PredicateBuilder:
        if predicate is not None:
            self._clauses.extend(predicate.clauses())
        return self

    def eq(self, field: str, value: Any) -> PredicateBuilder:
        if value is not None:
            self._clauses.append(Eq(field, value))
        return self

    def is_in(self, field: str, values: Iterable[Any] | None) -> PredicateBuilder:
        if values is None:
            return self
        unique = tuple(dict.fromkeys(v for v in values if v is not None))
        if unique:
            self._clauses.append(In(field, unique))
        return self

    def gte(self, field: str, value: Any) -> PredicateBuilder:
        if value is not None:
            self._clauses.append(Gte(field, value))
        return self

    def lte(self, field: str, value: Any) -> PredicateBuilder:
        if value is not None:
            self._clauses.append(Lte(field, value))
        return self

    def matches(self, field: str, text: str | None, *, literal: bool = False) -> PredicateBuilder:
        """Add a case-insensitive substring match; literal=True escapes regex metacharacters."""
        if text:
            pattern = re.escape(text) if literal else text
            try:
                _compiled(pattern)
            except re.error as e:
                raise ValidationException(
                    f"Invalid pattern for '{field}': {e}", field=field
                ) from e
            self._clauses.append(Matches(field, pattern))
        return self

    def build(self) -> Predicate:
        return and_(*self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)

"""Compile query predicates into SQLAlchemy where-clauses for one model."""

from typing import Any

from sqlalchemy import ColumnElement, and_, true
from sqlalchemy.orm import InstrumentedAttribute

from adminkit.application.query.predicate import (
    And,
    Eq,
    Gte,
    In,
    Lte,
    Matches,
    MatchAll,
    Predicate,
)
from adminkit.domain.exceptions import ValidationException

# Inline flag: honoured by Python re (SQLite REGEXP) and PostgreSQL AREs.
CASE_INSENSITIVE_PREFIX = "(?i)"


def column_for(model: type[Any], field: str) -> InstrumentedAttribute[Any]:
    """Return the mapped attribute for field, or raise ValidationException."""
    attr = getattr(model, field, None)
    if not isinstance(attr, InstrumentedAttribute):
        raise ValidationException(
            f"{model.__name__} has no filterable field '{field}'", field=field
        )
    return attr


def compile_predicate(predicate: Predicate, model: type[Any]) -> ColumnElement[bool]:
    """Translate predicate into a boolean SQL expression over model's columns."""
    if isinstance(predicate, MatchAll):
        return true()
    if isinstance(predicate, And):
        return and_(*(compile_predicate(item, model) for item in predicate.items))
    if isinstance(predicate, Eq):
        column = column_for(model, predicate.field)
        if predicate.value is None:
            return column.is_(None)
        return column == predicate.value
    if isinstance(predicate, In):
        return column_for(model, predicate.field).in_(predicate.values)
    if isinstance(predicate, Gte):
        return column_for(model, predicate.field) >= predicate.value
    if isinstance(predicate, Lte):
        return column_for(model, predicate.field) <= predicate.value
    if isinstance(predicate, Matches):
        return column_for(model, predicate.field).regexp_match(
            CASE_INSENSITIVE_PREFIX + predicate.pattern
        )
    raise TypeError(f"Unsupported predicate type: {type(predicate).__name__}")

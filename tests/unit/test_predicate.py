"""Tests for predicates and PredicateBuilder (in-memory evaluation)."""

from datetime import UTC, datetime

import pytest

from adminkit.application.query.predicate import (
    MATCH_ALL,
    And,
    Eq,
    Gte,
    In,
    Lte,
    Matches,
    PredicateBuilder,
    and_,
)
from adminkit.domain.exceptions import ValidationException

RECORD = {
    "id": "a",
    "name": "Dashboard",
    "path": "/admin/dash",
    "is_hide": False,
    "created_at": datetime(2025, 1, 15, tzinfo=UTC),
    "email": "ops+alerts@example.com",
}


def test_empty_builder_matches_everything() -> None:
    predicate = PredicateBuilder().build()
    assert predicate is MATCH_ALL
    assert predicate.evaluate(RECORD)
    assert predicate.evaluate({})


def test_absent_inputs_add_nothing() -> None:
    builder = (
        PredicateBuilder()
        .eq("id", None)
        .is_in("id", None)
        .is_in("id", [])
        .gte("created_at", None)
        .lte("created_at", None)
        .matches("name", None)
        .matches("name", "")
    )
    assert len(builder) == 0
    assert builder.build() is MATCH_ALL


def test_eq_and_in() -> None:
    assert Eq("is_hide", False).evaluate(RECORD)
    assert not Eq("name", "dashboard").evaluate(RECORD)
    assert In("id", ("a", "b")).evaluate(RECORD)
    assert not In("id", ("b",)).evaluate(RECORD)


def test_is_in_dedupes_values() -> None:
    predicate = PredicateBuilder().is_in("id", ["a", "b", "a", None]).build()
    assert predicate == In("id", ("a", "b"))


def test_range_bounds_are_inclusive() -> None:
    at = datetime(2025, 1, 15, tzinfo=UTC)
    assert Gte("created_at", at).evaluate(RECORD)
    assert Lte("created_at", at).evaluate(RECORD)
    assert not Gte("created_at", datetime(2025, 1, 16, tzinfo=UTC)).evaluate(RECORD)


def test_range_normalizes_naive_datetimes() -> None:
    assert Gte("created_at", datetime(2025, 1, 1)).evaluate(RECORD)
    assert Lte("created_at", datetime(2025, 2, 1)).evaluate({"created_at": datetime(2025, 1, 1)})


def test_range_on_missing_field_is_false() -> None:
    assert not Gte("created_at", datetime(2025, 1, 1, tzinfo=UTC)).evaluate({})


def test_matches_is_case_insensitive_and_unanchored() -> None:
    assert Matches("name", "board").evaluate(RECORD)
    assert Matches("name", "DASH").evaluate(RECORD)
    assert Matches("name", "^dash").evaluate(RECORD)
    assert not Matches("name", "^board").evaluate(RECORD)
    assert not Matches("name", "x").evaluate({"name": None})


def test_matches_literal_escapes_metacharacters() -> None:
    """'+' in an email is literal text, not a quantifier."""
    literal = PredicateBuilder().matches("email", "ops+alerts", literal=True).build()
    assert literal.evaluate(RECORD)
    pattern = PredicateBuilder().matches("email", "ops+alerts").build()
    assert not pattern.evaluate(RECORD)


def test_matches_rejects_malformed_pattern() -> None:
    with pytest.raises(ValidationException) as exc_info:
        PredicateBuilder().matches("name", "(")
    assert exc_info.value.details == {"field": "name"}
    assert len(PredicateBuilder().matches("name", "(", literal=True)) == 1


def test_and_flattens_and_drops_match_all() -> None:
    a, b, c = Eq("id", "a"), Eq("name", "x"), Eq("path", "y")
    combined = and_(a, MATCH_ALL, and_(b, c))
    assert combined == And((a, b, c))
    assert and_() is MATCH_ALL
    assert and_(MATCH_ALL, a) is a
    assert (a & b) == And((a, b))


def test_builder_narrows_monotonically() -> None:
    """Each appended clause can only remove records from the result."""
    records = [
        {"name": "alpha", "is_hide": False},
        {"name": "alpine", "is_hide": True},
        {"name": "beta", "is_hide": False},
    ]
    builder = PredicateBuilder()
    sizes = [len([r for r in records if builder.build()(r)])]
    builder.matches("name", "^al")
    sizes.append(len([r for r in records if builder.build()(r)]))
    builder.eq("is_hide", False)
    sizes.append(len([r for r in records if builder.build()(r)]))
    assert sizes == [3, 2, 1]


def test_attribute_records_supported() -> None:
    class Row:
        name = "Dashboard"

    assert Matches("name", "dash").evaluate(Row())


@pytest.mark.parametrize(
    ("predicate", "text"),
    [
        (Eq("id", "a"), "id == 'a'"),
        (In("id", ("a", "b")), "id IN ('a', 'b')"),
        (Matches("name", "x"), "name ~* /x/"),
        (MATCH_ALL, "TRUE"),
    ],
)
def test_str(predicate: object, text: str) -> None:
    assert str(predicate) == text

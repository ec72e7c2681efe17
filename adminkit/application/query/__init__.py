"""Query composition: predicates, filter requests, and pagination."""

from adminkit.application.query.filters import QueryFilterRequest
from adminkit.application.query.pagination import PagedResult, PageParams
from adminkit.application.query.predicate import (
    MATCH_ALL,
    And,
    Eq,
    Gte,
    In,
    Lte,
    Matches,
    MatchAll,
    Predicate,
    PredicateBuilder,
    and_,
)

__all__ = [
    "MATCH_ALL",
    "And",
    "Eq",
    "Gte",
    "In",
    "Lte",
    "MatchAll",
    "Matches",
    "PageParams",
    "PagedResult",
    "Predicate",
    "PredicateBuilder",
    "QueryFilterRequest",
    "and_",
]

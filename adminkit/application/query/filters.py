"""Query filter requests: optional request fields -> one composed Predicate.

Every list query subclasses QueryFilterRequest. The base owns identifier,
identifier-set and creation-time-range matching; subclasses add entity clauses
in build_predicate(). to_predicate() always ANDs the two, so entity fields can
narrow the result but never bypass the base constraints.

Unparsable identifiers are dropped rather than rejected: a bad single id adds
no constraint, and bad entries in ids are removed one by one.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import ClassVar, final

from pydantic import BaseModel, ConfigDict, field_validator

from adminkit.application.query.pagination import PageParams
from adminkit.application.query.predicate import Predicate, PredicateBuilder, and_
from adminkit.core.config import get_settings
from adminkit.domain.exceptions import ValidationException
from adminkit.domain.value_objects.core import EntityId
from adminkit.shared.utils.datetime import add_months, ensure_utc, utc_now

logger = logging.getLogger(__name__)


class QueryFilterRequest(BaseModel):
    """Base for list/query requests over one record type.

    Class attributes name the record fields the base predicate targets and
    which fields callers may sort by.
    """

    model_config = ConfigDict(extra="ignore")

    id_field: ClassVar[str] = "id"
    created_field: ClassVar[str] = "created_at"
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"created_at"})
    default_sort_field: ClassVar[str] = "created_at"

    id: str | None = None
    ids: list[str] | None = None
    is_time_range: bool = False
    start_time: datetime | None = None
    end_time: datetime | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value)

    def time_bounds(self, now: datetime | None = None) -> tuple[datetime, datetime]:
        """Return (start, end) for the creation-time range.

        Unset bounds default to one month before now and one day after now
        (configurable), evaluated at call time.
        """
        settings = get_settings()
        now = ensure_utc(now) or utc_now()
        start = self.start_time or add_months(now, -settings.query_default_lookback_months)
        end = self.end_time or now + timedelta(days=settings.query_default_lookahead_days)
        return start, end

    @final
    def base_predicate(self, now: datetime | None = None) -> Predicate:
        """Identifier, identifier-set and time-range clauses shared by every query."""
        builder = PredicateBuilder()

        single_id = EntityId.parse(self.id) if self.id else None
        if single_id is not None:
            builder.eq(self.id_field, single_id)
        elif self.ids:
            valid = [parsed for parsed in map(EntityId.parse, self.ids) if parsed is not None]
            dropped = len(self.ids) - len(valid)
            if dropped:
                logger.debug("Dropped %d unparsable identifier(s) from ids filter", dropped)
            builder.is_in(self.id_field, valid)
        elif self.id:
            logger.debug("Ignoring unparsable id filter value")

        if self.is_time_range:
            start, end = self.time_bounds(now)
            builder.gte(self.created_field, start).lte(self.created_field, end)

        return builder.build()

    def build_predicate(self, builder: PredicateBuilder) -> None:
        """Append entity-specific clauses. Override in subclasses; base adds none."""

    @final
    def to_predicate(self, now: datetime | None = None) -> Predicate:
        """Return base predicate AND entity predicate."""
        builder = PredicateBuilder()
        self.build_predicate(builder)
        return and_(self.base_predicate(now), builder.build())

    def resolve_sort(self, params: PageParams) -> tuple[str, bool]:
        """Return (field, ascending) for params, rejecting fields this query cannot sort by."""
        if params.sort_field is None:
            return self.default_sort_field, params.ascending
        if params.sort_field not in self.sortable_fields:
            raise ValidationException(
                f"Cannot sort by '{params.sort_field}'; allowed: "
                + ", ".join(sorted(self.sortable_fields)),
                field="sort_field",
            )
        return params.sort_field, params.ascending

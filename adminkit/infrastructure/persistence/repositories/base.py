"""Base query repository: predicate-driven find, count and paging."""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from adminkit.application.query.filters import QueryFilterRequest
from adminkit.application.query.pagination import PagedResult, PageParams
from adminkit.application.query.predicate import Predicate
from adminkit.infrastructure.persistence.database import Base
from adminkit.infrastructure.persistence.predicate_compiler import (
    column_for,
    compile_predicate,
)

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)

DEFAULT_SORT_FIELD = "created_at"


class QueryRepository(Generic[ModelType]):
    """Read-side repository over one model.

    Every method takes a Predicate (usually from QueryFilterRequest.to_predicate)
    and compiles it against the model; fields the model does not map raise
    ValidationException.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    def _select(self, predicate: Predicate) -> Select[Any]:
        return select(self.model).where(compile_predicate(predicate, self.model))

    def _ordered(self, stmt: Select[Any], params: PageParams | None) -> Select[Any]:
        field = (params.sort_field if params else None) or DEFAULT_SORT_FIELD
        ascending = params.ascending if params else False
        column = column_for(self.model, field)
        primary = column.asc() if ascending else column.desc()
        # id as tie-breaker keeps pages stable across equal sort keys
        return stmt.order_by(primary, column_for(self.model, "id").asc())

    async def find(
        self, predicate: Predicate, params: PageParams | None = None
    ) -> list[ModelType]:
        """Return matching records; one page of them when params is given."""
        stmt = self._ordered(self._select(predicate), params)
        if params is not None:
            stmt = stmt.offset(params.offset).limit(params.page_size)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self, predicate: Predicate) -> int:
        """Return the number of records matching predicate."""
        stmt = select(func.count()).select_from(self.model).where(
            compile_predicate(predicate, self.model)
        )
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def get_one(self, predicate: Predicate) -> ModelType | None:
        """Return the first matching record in default order, or None."""
        stmt = self._ordered(self._select(predicate), None).limit(1)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def page(self, predicate: Predicate, params: PageParams) -> PagedResult[ModelType]:
        """Return one page of matches plus the total match count."""
        total = await self.count(predicate)
        items = await self.find(predicate, params) if total else []
        result = PagedResult(
            items=items,
            total_count=total,
            page_number=params.page_number,
            page_size=params.page_size,
        )
        logger.debug(
            "%s page %d/%d: %d of %d match(es) for %s",
            self.model.__name__,
            result.page_number,
            result.total_pages,
            len(items),
            total,
            predicate,
        )
        return result

    async def page_query(
        self, query: QueryFilterRequest, params: PageParams
    ) -> PagedResult[ModelType]:
        """Validate params' sort against query, then page through query's matches."""
        field, ascending = query.resolve_sort(params)
        resolved = params.model_copy(update={"sort_field": field, "ascending": ascending})
        return await self.page(query.to_predicate(), resolved)

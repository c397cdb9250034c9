"""Read-only query-builder interface over the hosted database.

Repositories describe what they need as an immutable :class:`ReadQuery`
(filters, one sort field, an offset/limit range and an optional exact count)
and hand it to a :class:`DataStore`. Rows come back as plain dictionaries so
the pure ranking and fight-record helpers never see ORM objects.

:class:`SqlAlchemyDataStore` compiles queries into SQLAlchemy Core
statements. It opens a short-lived session per query, which lets callers
issue independent reads concurrently with :func:`asyncio.gather`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Literal, Protocol, runtime_checkable

from sqlalchemy import ColumnElement, Select, Table, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mma_scheduler.db.models import Event, Fight, Fighter, FighterRanking
from mma_scheduler.errors import UpstreamQueryError
from mma_scheduler.utils.request_context import get_request_id

logger = logging.getLogger(__name__)

Row = dict[str, Any]
FilterOp = Literal["eq", "ilike", "in", "not_in", "not_null", "gte", "lte"]

TABLES: Mapping[str, Table] = {
    model.__tablename__: model.__table__
    for model in (Fighter, FighterRanking, Event, Fight)
}


@dataclass(frozen=True)
class Filter:
    field: str
    op: FilterOp
    value: Any = None


@dataclass(frozen=True)
class ReadQuery:
    """Immutable description of a single read against one table.

    Builder methods return a new query, mirroring the chained style of hosted
    database clients::

        ReadQuery("fighters").where_in("weight_class", ["Lightweight"]).order("name").range(0, 10)
    """

    table: str
    columns: tuple[str, ...] = ()
    filters: tuple[Filter, ...] = ()
    order_by: str | None = None
    ascending: bool = True
    offset: int = 0
    limit: int | None = None
    count: bool = False
    distinct: bool = False

    def select(self, *columns: str) -> ReadQuery:
        return replace(self, columns=tuple(columns))

    def _with(self, item: Filter) -> ReadQuery:
        return replace(self, filters=(*self.filters, item))

    def where_eq(self, column: str, value: Any) -> ReadQuery:
        return self._with(Filter(column, "eq", value))

    def where_ilike(self, column: str, pattern: str) -> ReadQuery:
        """Case-insensitive match; ``pattern`` uses SQL ``%`` wildcards."""
        return self._with(Filter(column, "ilike", pattern))

    def where_in(self, column: str, values: Sequence[Any]) -> ReadQuery:
        """OR semantics across ``values`` for a single column."""
        return self._with(Filter(column, "in", tuple(values)))

    def where_not_in(self, column: str, values: Sequence[Any]) -> ReadQuery:
        return self._with(Filter(column, "not_in", tuple(values)))

    def where_not_null(self, column: str) -> ReadQuery:
        return self._with(Filter(column, "not_null"))

    def where_gte(self, column: str, value: Any) -> ReadQuery:
        return self._with(Filter(column, "gte", value))

    def where_lte(self, column: str, value: Any) -> ReadQuery:
        return self._with(Filter(column, "lte", value))

    def order(self, column: str, *, ascending: bool = True) -> ReadQuery:
        return replace(self, order_by=column, ascending=ascending)

    def range(self, offset: int, limit: int) -> ReadQuery:
        return replace(self, offset=max(offset, 0), limit=max(limit, 0))

    def take(self, limit: int) -> ReadQuery:
        return replace(self, limit=max(limit, 0))

    def with_count(self) -> ReadQuery:
        return replace(self, count=True)

    def unique(self) -> ReadQuery:
        return replace(self, distinct=True)


@dataclass
class QueryResult:
    rows: list[Row] = field(default_factory=list)
    count: int | None = None


@runtime_checkable
class DataStore(Protocol):
    """Anything that can answer a :class:`ReadQuery`."""

    async def fetch(self, query: ReadQuery) -> QueryResult: ...


class SqlAlchemyDataStore:
    """:class:`DataStore` backed by an async SQLAlchemy session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def fetch(self, query: ReadQuery) -> QueryResult:
        table = _resolve_table(query.table)
        statement = _build_select(table, query)

        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                rows = [dict(row._mapping) for row in result]
                total: int | None = None
                if query.count:
                    total = (await session.execute(_build_count(table, query))).scalar_one()
        except SQLAlchemyError as exc:
            logger.error(
                "Upstream query failed for request %s on table %s: %s",
                get_request_id(),
                query.table,
                exc,
            )
            raise UpstreamQueryError(query.table, str(exc)) from exc

        return QueryResult(rows=rows, count=total)


def _resolve_table(name: str) -> Table:
    try:
        return TABLES[name]
    except KeyError:
        raise ValueError(f"Unknown table '{name}'") from None


def _column(table: Table, name: str):
    try:
        return table.c[name]
    except KeyError:
        raise ValueError(f"Unknown column '{name}' on table '{table.name}'") from None


def _compile_filter(table: Table, item: Filter) -> ColumnElement[bool]:
    column = _column(table, item.field)
    if item.op == "eq":
        return column.is_(None) if item.value is None else column == item.value
    if item.op == "ilike":
        return column.ilike(item.value)
    if item.op == "in":
        return column.in_(item.value)
    if item.op == "not_in":
        return column.not_in(item.value)
    if item.op == "not_null":
        return column.is_not(None)
    if item.op == "gte":
        return column >= item.value
    if item.op == "lte":
        return column <= item.value
    raise ValueError(f"Unsupported filter operator '{item.op}'")


def _apply_filters(statement: Select, table: Table, query: ReadQuery) -> Select:
    for item in query.filters:
        statement = statement.where(_compile_filter(table, item))
    return statement


def _build_select(table: Table, query: ReadQuery) -> Select:
    columns = (
        [_column(table, name) for name in query.columns]
        if query.columns
        else list(table.c)
    )
    statement = _apply_filters(select(*columns), table, query)

    if query.distinct:
        statement = statement.distinct()

    if query.order_by:
        column = _column(table, query.order_by)
        statement = statement.order_by(column.asc() if query.ascending else column.desc())
        if not query.distinct and "id" in table.c:
            # Stable page boundaries when the sort column has duplicates.
            statement = statement.order_by(table.c.id.asc())

    if query.offset:
        statement = statement.offset(query.offset)
    if query.limit is not None:
        statement = statement.limit(query.limit)
    return statement


def _build_count(table: Table, query: ReadQuery) -> Select:
    return _apply_filters(select(func.count()).select_from(table), table, query)


__all__ = [
    "DataStore",
    "Filter",
    "QueryResult",
    "ReadQuery",
    "Row",
    "SqlAlchemyDataStore",
    "TABLES",
]

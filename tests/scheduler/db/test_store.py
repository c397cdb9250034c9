"""Tests for the query-builder data store over SQLAlchemy."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mma_scheduler.db.store import QueryResult, ReadQuery, SqlAlchemyDataStore
from mma_scheduler.errors import UpstreamQueryError


def test_builder_methods_return_new_queries() -> None:
    base = ReadQuery("fighters")
    filtered = base.where_eq("status", "Active").order("name").range(10, 5)

    assert base.filters == ()
    assert filtered.filters[0].op == "eq"
    assert (filtered.offset, filtered.limit, filtered.order_by) == (10, 5, "name")


def test_range_clamps_negative_values() -> None:
    query = ReadQuery("events").range(-5, -1)

    assert (query.offset, query.limit) == (0, 0)


@pytest.mark.asyncio
async def test_fetch_with_count_returns_page_and_total(store: SqlAlchemyDataStore) -> None:
    result = await store.fetch(
        ReadQuery("fighters").select("id", "name").with_count().order("name").range(0, 2)
    )

    assert isinstance(result, QueryResult)
    assert [row["name"] for row in result.rows] == ["Charles Oliveira", "Georges St-Pierre"]
    assert result.count == 7
    assert set(result.rows[0]) == {"id", "name"}


@pytest.mark.asyncio
async def test_inclusion_filter_uses_or_semantics(store: SqlAlchemyDataStore) -> None:
    result = await store.fetch(
        ReadQuery("fighters")
        .select("id")
        .where_in("nationality", ["Brazil", "Canada"])
        .order("id")
    )

    assert [row["id"] for row in result.rows] == ["charles-oliveira", "georges-st-pierre"]
    assert result.count is None


@pytest.mark.asyncio
async def test_ilike_is_case_insensitive(store: SqlAlchemyDataStore) -> None:
    result = await store.fetch(ReadQuery("fighters").select("id").where_ilike("name", "%JONES%"))

    assert [row["id"] for row in result.rows] == ["jon-jones"]


@pytest.mark.asyncio
async def test_descending_order_and_distinct(store: SqlAlchemyDataStore) -> None:
    result = await store.fetch(
        ReadQuery("fighters")
        .select("weight_class")
        .unique()
        .order("weight_class", ascending=False)
    )

    assert [row["weight_class"] for row in result.rows] == [
        "Women's Strawweight",
        "Welterweight",
        "Lightweight",
        "Heavyweight",
    ]


@pytest.mark.asyncio
async def test_unknown_table_or_column_is_rejected(store: SqlAlchemyDataStore) -> None:
    with pytest.raises(ValueError):
        await store.fetch(ReadQuery("users"))
    with pytest.raises(ValueError):
        await store.fetch(ReadQuery("fighters").where_eq("password", "x"))


@pytest.mark.asyncio
async def test_database_errors_become_upstream_query_errors(
    seeded_factory: async_sessionmaker[AsyncSession],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    async def _boom(self, statement, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection reset"))

    monkeypatch.setattr(AsyncSession, "execute", _boom)
    store = SqlAlchemyDataStore(seeded_factory)

    with pytest.raises(UpstreamQueryError) as excinfo:
        await store.fetch(ReadQuery("events"))

    assert excinfo.value.table == "events"
    assert "connection reset" in excinfo.value.message

"""Event reads for the home page, the yearly schedule and event detail."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from mma_scheduler.db.store import DataStore, ReadQuery, Row

EVENT_COLUMNS: tuple[str, ...] = (
    "id",
    "name",
    "event_date",
    "venue",
    "city",
    "country",
    "status",
    "attendance",
    "ufc_url",
)


def year_bounds(year: int) -> tuple[datetime, datetime]:
    """First and last instant (UTC) of ``year``."""

    return (
        datetime(year, 1, 1, tzinfo=UTC),
        datetime(year, 12, 31, 23, 59, 59, tzinfo=UTC),
    )


class EventRepository:
    def __init__(self, store: DataStore) -> None:
        self._store = store

    async def list_upcoming_events(self, *, now: datetime, limit: int) -> list[Row]:
        """Events starting at or after ``now``, soonest first."""

        result = await self._store.fetch(
            ReadQuery("events")
            .select(*EVENT_COLUMNS)
            .where_gte("event_date", now)
            .order("event_date")
            .take(limit)
        )
        return result.rows

    async def list_events_for_year(
        self, year: int | None, *, offset: int, limit: int
    ) -> tuple[list[Row], int]:
        """Page through one calendar year in date order; ``None`` means all years."""

        query = ReadQuery("events").select(*EVENT_COLUMNS).with_count()
        if year:
            start, end = year_bounds(year)
            query = query.where_gte("event_date", start).where_lte("event_date", end)
        result = await self._store.fetch(
            query.order("event_date").range(offset, limit)
        )
        return result.rows, result.count or 0

    async def list_event_dates(self) -> list[object]:
        result = await self._store.fetch(ReadQuery("events").select("event_date"))
        return [row["event_date"] for row in result.rows]

    async def get_event(self, event_id: str) -> Row | None:
        result = await self._store.fetch(
            ReadQuery("events").select(*EVENT_COLUMNS).where_eq("id", event_id).take(1)
        )
        return result.rows[0] if result.rows else None

    async def get_events_by_ids(self, event_ids: Sequence[str]) -> dict[str, Row]:
        if not event_ids:
            return {}
        result = await self._store.fetch(
            ReadQuery("events")
            .select("id", "name", "event_date", "status")
            .where_in("id", list(dict.fromkeys(event_ids)))
        )
        return {row["id"]: row for row in result.rows}

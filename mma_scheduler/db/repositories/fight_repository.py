"""Fight reads for fighter histories and event fight cards."""

from __future__ import annotations

import asyncio

from mma_scheduler.db.repositories.event_repository import EventRepository
from mma_scheduler.db.store import DataStore, ReadQuery, Row


class FightRepository:
    def __init__(self, store: DataStore) -> None:
        self._store = store
        self._events = EventRepository(store)

    async def list_fights_for_fighter(self, fighter_id: str) -> list[Row]:
        """Every fight the fighter appears in, on either side.

        The two sides are fetched concurrently and concatenated; each row gets
        an ``event`` key holding the parent event's ``id``, ``name``,
        ``event_date`` and ``status`` (``None`` if the event row is missing).
        """

        as_first, as_second = await asyncio.gather(
            self._store.fetch(ReadQuery("fights").where_eq("fighter1_id", fighter_id)),
            self._store.fetch(ReadQuery("fights").where_eq("fighter2_id", fighter_id)),
        )
        fights = [*as_first.rows, *as_second.rows]

        events = await self._events.get_events_by_ids(
            [fight["event_id"] for fight in fights]
        )
        return [{**fight, "event": events.get(fight["event_id"])} for fight in fights]

    async def list_fights_for_event(self, event_id: str) -> list[Row]:
        """The event's card in running order."""

        result = await self._store.fetch(
            ReadQuery("fights").where_eq("event_id", event_id).order("fight_order")
        )
        return result.rows

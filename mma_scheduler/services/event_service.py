"""Event listings, the yearly schedule and event detail pages."""

from __future__ import annotations

import logging
from datetime import datetime

from mma_scheduler.db.repositories.event_repository import EventRepository
from mma_scheduler.db.repositories.fight_repository import FightRepository
from mma_scheduler.db.store import Row
from mma_scheduler.schemas.event import EventDetail, EventListResponse, EventSummary
from mma_scheduler.services.fight_history_builder import build_fight_card
from mma_scheduler.utils.date_math import (
    CountdownStyle,
    format_event_date,
    format_event_time,
    is_past,
    parse_instant,
    relative_label,
    utc_now,
)
from mma_scheduler.utils.event_utils import (
    available_years,
    format_attendance,
    format_location,
    is_completed,
)

logger = logging.getLogger(__name__)


def summarize_event(
    row: Row, now: datetime, *, style: CountdownStyle = CountdownStyle.AWAY
) -> EventSummary:
    """Attach the formatted date, location and countdown to an event row."""

    return EventSummary(
        id=str(row["id"]),
        name=row.get("name") or "",
        event_date=parse_instant(row.get("event_date")),
        venue=row.get("venue"),
        city=row.get("city"),
        country=row.get("country"),
        status=row.get("status"),
        ufc_url=row.get("ufc_url"),
        formatted_date=format_event_date(row.get("event_date")),
        location=format_location(row.get("venue"), row.get("city"), row.get("country")),
        countdown=relative_label(row.get("event_date"), now, style=style),
        is_past=is_past(row.get("event_date"), now),
    )


class EventService:
    def __init__(self, events: EventRepository, fights: FightRepository) -> None:
        self.events = events
        self.fights = fights

    async def list_upcoming(
        self, *, limit: int, now: datetime | None = None
    ) -> list[EventSummary]:
        """The next ``limit`` events from ``now`` on, soonest first."""

        reference = now or utc_now()
        rows = await self.events.list_upcoming_events(now=reference, limit=limit)
        return [summarize_event(row, reference) for row in rows]

    async def list_events_for_year(
        self,
        year: int | None,
        *,
        offset: int,
        limit: int,
        now: datetime | None = None,
    ) -> EventListResponse:
        """One page of a year's schedule; ``hasMore`` compares the next offset to the total."""

        reference = now or utc_now()
        rows, count = await self.events.list_events_for_year(year, offset=offset, limit=limit)
        next_offset = offset + limit
        return EventListResponse(
            events=[summarize_event(row, reference) for row in rows],
            has_more=next_offset < count,
            next_offset=next_offset,
        )

    async def list_years(self, current_year: int) -> list[int]:
        dates = await self.events.list_event_dates()
        return available_years(dates, current_year)

    async def get_event_detail(
        self, event_id: str, *, now: datetime | None = None
    ) -> EventDetail | None:
        """Event header and fight card, or ``None`` when the event is unknown."""

        row = await self.events.get_event(event_id)
        if row is None:
            return None

        reference = now or utc_now()
        fights = await self.fights.list_fights_for_event(event_id)
        completed = is_completed(row.get("status"))
        summary = summarize_event(row, reference, style=CountdownStyle.UNTIL)

        return EventDetail(
            **summary.model_dump(),
            formatted_time=format_event_time(row.get("event_date")),
            attendance=format_attendance(row.get("attendance")) if completed else None,
            is_completed=completed,
            fights=build_fight_card(fights, row.get("status")),
        )

"""Pydantic schemas for event listings and the event detail page."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mma_scheduler.schemas.fight import FightCardEntry


class EventSummary(BaseModel):
    """Event row enriched with the labels shown on cards."""

    id: str
    name: str
    event_date: datetime | None = None
    venue: str | None = None
    city: str | None = None
    country: str | None = None
    status: str | None = None
    ufc_url: str | None = None

    formatted_date: str = Field("", description="e.g. 'Saturday, April 13, 2024'")
    location: str = ""
    countdown: str = Field("", description="'Today', 'N days away', 'N days ago' ...")
    is_past: bool = False


class EventListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    events: list[EventSummary] = Field(default_factory=list)
    has_more: bool = Field(False, alias="hasMore")
    next_offset: int = Field(0, alias="nextOffset")


class EventDetail(EventSummary):
    """Event page payload: header details plus the ordered fight card."""

    formatted_time: str = ""
    attendance: str | None = Field(
        None, description="'19,253 fans'; only populated for completed events"
    )
    is_completed: bool = False
    fights: list[FightCardEntry] = Field(default_factory=list)

"""Pydantic schemas for fight history rows and event fight cards."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FightRecord(BaseModel):
    """A fight seen from one fighter's side, ready for display."""

    fight_id: str
    event_id: str | None = None
    event_name: str | None = None
    event_date: datetime | None = None
    event_date_label: str = ""

    opponent_id: str | None = None
    opponent_name: str | None = None
    fighter_rank: str | None = Field(None, description="Rank at the time of the fight")
    opponent_rank: str | None = None

    weight_class: str | None = None
    is_main_event: bool = False
    was_title_fight: bool = False

    result: str = Field(
        "", description="WIN, LOSS, DRAW, NC, CANCELED or empty when pending/unknown"
    )
    method: str | None = None
    method_details: str | None = None
    round: int | None = None
    time: str | None = None

    @property
    def is_canceled(self) -> bool:
        return self.result == "CANCELED"


class FightHistoryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fights: list[FightRecord] = Field(default_factory=list)
    total: int = 0
    has_more: bool = Field(False, alias="hasMore")


class CardCorner(BaseModel):
    fighter_id: str | None = None
    name: str | None = None
    rank_badge: str | None = None
    was_champion: bool = False
    is_winner: bool = False


class FightCardEntry(BaseModel):
    """One bout on an event's fight card."""

    fight_id: str
    fight_order: int | None = None
    weight_class: str | None = None
    is_main_event: bool = False
    was_title_fight: bool = False
    fighter1: CardCorner
    fighter2: CardCorner
    method: str | None = None
    method_details: str | None = None
    round: int | None = None
    time: str | None = None
    is_canceled: bool = False

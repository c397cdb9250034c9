"""Pydantic schemas for the divisional rankings page."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from mma_scheduler.utils.rank_ordering import CHAMPION, INTERIM_CHAMPION

RosterSource = Literal["rankings", "legacy"]


class RosterEntry(BaseModel):
    """Single fighter card within a division roster."""

    fighter_id: str = Field(description="Fighter's identifier")
    name: str = Field(description="Fighter's full name")
    nickname: str | None = Field(None, description="Fighter's nickname")
    wins: int = 0
    losses: int = 0
    draws: int = 0
    status: str | None = None
    rank: str = Field(description="Current rank label, e.g. 'Champion' or '#3'")
    weight_class: str = Field(description="Division the rank applies to")
    source: RosterSource = Field(
        "rankings", description="'rankings' table row or 'legacy' fighter rank column"
    )

    @property
    def is_champion(self) -> bool:
        return self.rank == CHAMPION

    @property
    def is_interim_champion(self) -> bool:
        return self.rank == INTERIM_CHAMPION

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}-{self.draws}"


class RosterView(BaseModel):
    """Rosters for every known division plus the tab selection."""

    divisions: dict[str, list[RosterEntry]] = Field(
        default_factory=dict,
        description="Every known division in display order, possibly empty",
    )
    active_divisions: list[str] = Field(
        default_factory=list, description="Non-empty divisions in display order"
    )
    selected_division: str = Field(description="Division shown when the page loads")
    degraded_sources: list[str] = Field(
        default_factory=list,
        description="Sources that failed to load and contributed nothing",
    )

    @property
    def is_partial(self) -> bool:
        return bool(self.degraded_sources)

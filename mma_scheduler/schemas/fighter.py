"""Pydantic schemas for fighter list, filter and profile payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FighterListItem(BaseModel):
    """Row rendered by the fighter browser."""

    id: str
    name: str
    weight_class: str | None = None
    nationality: str | None = None
    wins: int | None = 0
    losses: int | None = 0
    draws: int | None = 0
    no_contests: int | None = 0
    rank: str | None = None
    status: str | None = None


class FighterListResponse(BaseModel):
    fighters: list[FighterListItem] = Field(default_factory=list)
    count: int = Field(0, description="Total fighters matching the filters")


class LegacyFighterListResponse(BaseModel):
    """Unfiltered page returned by ``/api/fighters.json``."""

    model_config = ConfigDict(populate_by_name=True)

    fighters: list[dict[str, Any]] = Field(default_factory=list)
    total_count: int = Field(0, alias="totalCount")
    requested_offset: int = Field(0, alias="requestedOffset")
    actual_offset: int = Field(0, alias="actualOffset")
    limit: int = 10


class FilterOptionsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nationalities: list[str] = Field(default_factory=list)
    weight_classes: list[str] = Field(default_factory=list, alias="weightClasses")


class FighterRankingLine(BaseModel):
    """One division line under the fighter's name on the profile header."""

    weight_class: str | None = None
    rank: str | None = None
    label: str | None = Field(
        None, description="'Champion', 'Unranked' or 'Ranked #N'; None hides the line"
    )
    is_champion: bool = False


class MethodBreakdown(BaseModel):
    ko: int | None = None
    submission: int | None = None
    decision: int | None = None
    dq: int | None = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.ko, self.submission, self.decision)


class FighterProfile(BaseModel):
    """Everything the fighter page renders apart from the fight history."""

    id: str
    name: str
    nickname: str | None = None
    weight_class: str | None = None
    status: str = "Unknown"
    nationality: str | None = None
    age: int | None = None
    height: str | None = None
    weight: str | None = None
    reach: str | None = None
    fighting_out_of: list[str] = Field(default_factory=list)
    ufc_url: str | None = None

    wins: int = 0
    losses: int = 0
    draws: int = 0
    no_contests: int = 0

    rankings: list[FighterRankingLine] = Field(
        default_factory=list,
        description="Rows from the rankings table, or the legacy rank as a single line",
    )
    win_methods: MethodBreakdown = Field(default_factory=MethodBreakdown)
    loss_methods: MethodBreakdown = Field(default_factory=MethodBreakdown)

"""Fighter browser, filter vocabularies and the fighter profile page."""

from __future__ import annotations

import asyncio
import logging
import re
from datetime import datetime

from mma_scheduler.db.repositories.fight_repository import FightRepository
from mma_scheduler.db.repositories.fighter_repository import FighterFilters, FighterRepository
from mma_scheduler.db.repositories.ranking_repository import RankingRepository
from mma_scheduler.db.store import Row
from mma_scheduler.schemas.fight import FightHistoryResponse, FightRecord
from mma_scheduler.schemas.fighter import (
    FighterListItem,
    FighterListResponse,
    FighterProfile,
    FighterRankingLine,
    FilterOptionsResponse,
    LegacyFighterListResponse,
    MethodBreakdown,
)
from mma_scheduler.services.fight_history_builder import build_fight_record, paginate_records
from mma_scheduler.utils.rank_ordering import CHAMPION, NOT_RANKED, describe_rank
from mma_scheduler.utils.weight_classes import order_divisions

logger = logging.getLogger(__name__)

_BRACES = re.compile(r"^\{|\}$")


def split_locations(value: str | None) -> list[str]:
    """Split the ``"{Las Vegas, Nevada}, {Denver, Colorado}"`` storage format."""

    if not value:
        return []
    if "{" not in value:
        return [value]
    return [part for part in _BRACES.sub("", value).split("}, {") if part]


def ranking_lines(fighter: Row, rankings: list[Row]) -> list[FighterRankingLine]:
    """Profile header lines: one per ranking row, else the legacy rank."""

    if rankings:
        return [
            FighterRankingLine(
                weight_class=ranking.get("weight_class"),
                rank=ranking.get("rank"),
                label=describe_rank(ranking.get("rank")),
                is_champion=ranking.get("rank") == CHAMPION,
            )
            for ranking in rankings
        ]

    rank = fighter.get("rank")
    if not fighter.get("weight_class") and (not rank or rank == NOT_RANKED):
        return []
    return [
        FighterRankingLine(
            weight_class=fighter.get("weight_class"),
            rank=rank,
            label=describe_rank(rank),
            is_champion=rank == CHAMPION,
        )
    ]


def build_profile(fighter: Row, rankings: list[Row]) -> FighterProfile:
    age = fighter.get("age")
    return FighterProfile(
        id=str(fighter["id"]),
        name=fighter.get("name") or "",
        nickname=fighter.get("nickname"),
        weight_class=fighter.get("weight_class"),
        status=fighter.get("status") or "Unknown",
        nationality=fighter.get("nationality"),
        age=age if age and age > 0 else None,
        height=fighter.get("height"),
        weight=fighter.get("weight"),
        reach=fighter.get("reach"),
        fighting_out_of=split_locations(fighter.get("fighting_out_of")),
        ufc_url=fighter.get("ufc_url"),
        wins=fighter.get("wins") or 0,
        losses=fighter.get("losses") or 0,
        draws=fighter.get("draws") or 0,
        no_contests=fighter.get("no_contests") or 0,
        rankings=ranking_lines(fighter, rankings),
        win_methods=MethodBreakdown(
            ko=fighter.get("ko_wins"),
            submission=fighter.get("sub_wins"),
            decision=fighter.get("dec_wins"),
        ),
        loss_methods=MethodBreakdown(
            ko=fighter.get("loss_by_ko"),
            submission=fighter.get("loss_by_sub"),
            decision=fighter.get("loss_by_dec"),
            dq=fighter.get("loss_by_dq"),
        ),
    )


class FighterService:
    """Use cases behind the fighter browser, filter options and profiles."""

    def __init__(
        self,
        fighters: FighterRepository,
        rankings: RankingRepository,
        fights: FightRepository,
    ) -> None:
        self.fighters = fighters
        self.rankings = rankings
        self.fights = fights

    async def list_fighters(
        self, filters: FighterFilters, *, offset: int, limit: int
    ) -> FighterListResponse:
        rows, count = await self.fighters.search_fighters(filters, offset=offset, limit=limit)
        logger.debug(
            "Fighter search returned %s of %s rows (offset=%s, limit=%s)",
            len(rows),
            count,
            offset,
            limit,
        )
        return FighterListResponse(
            fighters=[FighterListItem.model_validate(row) for row in rows],
            count=count,
        )

    async def list_all_fighters(self, *, offset: int, limit: int) -> LegacyFighterListResponse:
        rows, count = await self.fighters.list_all_fighters(offset=offset, limit=limit)
        return LegacyFighterListResponse(
            fighters=rows,
            total_count=count,
            requested_offset=offset,
            actual_offset=offset,
            limit=limit,
        )

    async def get_filter_options(self) -> FilterOptionsResponse:
        nationalities, weight_classes = await asyncio.gather(
            self.fighters.distinct_values("nationality"),
            self.fighters.distinct_values("weight_class"),
        )
        return FilterOptionsResponse(
            nationalities=nationalities,
            weight_classes=order_divisions(weight_classes),
        )

    async def get_profile(self, fighter_id: str) -> FighterProfile | None:
        fighter = await self.fighters.get_fighter(fighter_id)
        if fighter is None:
            return None
        rankings = await self.rankings.list_for_fighter(fighter_id)
        return build_profile(fighter, rankings)

    async def get_fight_records(
        self, fighter_id: str, *, now: datetime | None = None
    ) -> list[FightRecord]:
        fights = await self.fights.list_fights_for_fighter(fighter_id)
        return build_fight_record(fighter_id, fights, now)

    async def get_fight_history(
        self,
        fighter_id: str,
        *,
        offset: int,
        limit: int,
        now: datetime | None = None,
    ) -> FightHistoryResponse:
        records = await self.get_fight_records(fighter_id, now=now)
        page, has_more = paginate_records(records, offset=offset, limit=limit)
        return FightHistoryResponse(fights=page, total=len(records), has_more=has_more)

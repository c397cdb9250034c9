"""Repositories translating page needs into :class:`~mma_scheduler.db.store.ReadQuery` objects."""

from mma_scheduler.db.repositories.event_repository import EventRepository
from mma_scheduler.db.repositories.fight_repository import FightRepository
from mma_scheduler.db.repositories.fighter_repository import (
    FighterFilters,
    FighterRepository,
    build_fighter_query,
    normalize_fighter_filters,
)
from mma_scheduler.db.repositories.ranking_repository import RankingRepository

__all__ = [
    "EventRepository",
    "FightRepository",
    "FighterFilters",
    "FighterRepository",
    "RankingRepository",
    "build_fighter_query",
    "normalize_fighter_filters",
]

"""FastAPI dependency wiring for services.

Separating dependency factories from service implementation modules keeps the
latter free of web-layer concerns, so tests can construct services directly
around stub repositories.
"""

from __future__ import annotations

from fastapi import Depends, Request

from mma_scheduler.db.repositories.event_repository import EventRepository
from mma_scheduler.db.repositories.fight_repository import FightRepository
from mma_scheduler.db.repositories.fighter_repository import FighterRepository
from mma_scheduler.db.repositories.ranking_repository import RankingRepository
from mma_scheduler.db.store import DataStore, SqlAlchemyDataStore
from mma_scheduler.services.event_service import EventService
from mma_scheduler.services.fighter_service import FighterService
from mma_scheduler.services.ranking_service import RankingService
from mma_scheduler.settings import AppSettings


def get_app_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_data_store(request: Request) -> DataStore:
    """Build a data store around the session factory created at startup."""

    return SqlAlchemyDataStore(request.app.state.session_factory)


def get_fighter_service(store: DataStore = Depends(get_data_store)) -> FighterService:
    return FighterService(
        FighterRepository(store),
        RankingRepository(store),
        FightRepository(store),
    )


def get_event_service(store: DataStore = Depends(get_data_store)) -> EventService:
    return EventService(EventRepository(store), FightRepository(store))


def get_ranking_service(store: DataStore = Depends(get_data_store)) -> RankingService:
    return RankingService(RankingRepository(store), FighterRepository(store))


__all__ = [
    "get_app_settings",
    "get_data_store",
    "get_event_service",
    "get_fighter_service",
    "get_ranking_service",
]

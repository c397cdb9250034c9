"""Shared fixtures: a throwaway SQLite database seeded with a small UFC dataset.

Each test gets its own database file so the data store can open one
connection per query, exactly as it does against PostgreSQL.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import UTC, datetime
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from mma_scheduler.db.models import Base, Event, Fight, Fighter, FighterRanking
from mma_scheduler.db.store import SqlAlchemyDataStore
from mma_scheduler.main import create_app
from mma_scheduler.settings import AppSettings
from tests import _ensure_repo_on_path

# Reference "now" used by service-level tests.
REFERENCE_NOW = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


def pytest_configure(config: pytest.Config) -> None:
    """Hook executed by pytest prior to running any tests."""

    _ensure_repo_on_path()


def sample_fighters() -> list[Fighter]:
    return [
        Fighter(
            id="jon-jones",
            name="Jon Jones",
            nickname="Bones",
            weight_class="Heavyweight",
            nationality="United States",
            wins=27,
            losses=1,
            draws=0,
            no_contests=1,
            rank="Champion",
            status="Active",
            age=37,
            height="6' 4\"",
            reach="84.5\"",
            fighting_out_of="{Albuquerque, New Mexico}, {Rochester, New York}",
            ufc_url="https://www.ufc.com/athlete/jon-jones",
            ko_wins=10,
            sub_wins=7,
            dec_wins=10,
            loss_by_ko=0,
            loss_by_sub=0,
            loss_by_dec=0,
            loss_by_dq=1,
        ),
        Fighter(
            id="stipe-miocic",
            name="Stipe Miocic",
            weight_class="Heavyweight",
            nationality="United States",
            wins=20,
            losses=5,
            draws=0,
            rank="#2",
            status="Retired",
        ),
        Fighter(
            id="tom-aspinall",
            name="Tom Aspinall",
            weight_class="Heavyweight",
            nationality="United Kingdom",
            wins=15,
            losses=3,
            draws=0,
            rank="Interim Champion",
            status="Active",
        ),
        Fighter(
            id="islam-makhachev",
            name="Islam Makhachev",
            weight_class="Lightweight",
            nationality="Russia",
            wins=26,
            losses=1,
            draws=0,
            rank="Champion",
            status="Active",
        ),
        Fighter(
            id="charles-oliveira",
            name="Charles Oliveira",
            weight_class="Lightweight",
            nationality="Brazil",
            wins=35,
            losses=10,
            draws=0,
            rank="#1",
            status="Active",
        ),
        Fighter(
            id="georges-st-pierre",
            name="Georges St-Pierre",
            weight_class="Welterweight",
            nationality="Canada",
            wins=26,
            losses=2,
            draws=0,
            rank="NR",
            status="Not Fighting",
        ),
        Fighter(
            id="zhang-weili",
            name="Zhang Weili",
            weight_class="Women's Strawweight",
            nationality="China",
            wins=25,
            losses=3,
            draws=0,
            rank="Champion",
            status="Active",
        ),
    ]


def sample_rankings() -> list[FighterRanking]:
    return [
        FighterRanking(id="r-1", fighter_id="jon-jones", weight_class="Heavyweight", rank="Champion"),
        FighterRanking(
            id="r-2", fighter_id="tom-aspinall", weight_class="Heavyweight", rank="Interim Champion"
        ),
        FighterRanking(id="r-3", fighter_id="stipe-miocic", weight_class="Heavyweight", rank="#2"),
        FighterRanking(
            id="r-4", fighter_id="islam-makhachev", weight_class="Lightweight", rank="Champion"
        ),
        FighterRanking(
            id="r-5", fighter_id="islam-makhachev", weight_class="Pound for Pound", rank="#1"
        ),
    ]


def sample_events() -> list[Event]:
    return [
        Event(
            id="ufc-300",
            name="UFC 300",
            event_date=datetime(2024, 4, 13, 22, 0, tzinfo=UTC),
            venue="T-Mobile Arena",
            city="Las Vegas",
            country="USA",
            status="Completed",
            attendance="19253",
        ),
        Event(
            id="ufc-309",
            name="UFC 309",
            event_date=datetime(2024, 11, 16, 3, 0, tzinfo=UTC),
            venue="Madison Square Garden",
            city="New York",
            country="USA",
            status="Completed",
        ),
        Event(
            id="ufc-295",
            name="UFC 295",
            event_date=datetime(2023, 11, 11, 22, 0, tzinfo=UTC),
            venue="Madison Square Garden",
            city="New York",
            country="USA",
            status="Completed",
        ),
        Event(
            id="ufc-400",
            name="UFC 400",
            event_date=datetime(2030, 1, 1, 22, 0, tzinfo=UTC),
            venue="T-Mobile Arena",
            city="Las Vegas",
            country="USA",
            status="Scheduled",
        ),
    ]


def sample_fights() -> list[Fight]:
    return [
        Fight(
            id="fight-300-main",
            event_id="ufc-300",
            fighter1_id="jon-jones",
            fighter2_id="stipe-miocic",
            fighter1_name="Jon Jones",
            fighter2_name="Stipe Miocic",
            fighter1_rank="C",
            fighter2_rank="2",
            fighter1_was_champion=True,
            weight_class="Heavyweight",
            is_main_event=True,
            was_title_fight=True,
            fight_order=1,
            winner_id="jon-jones",
            result_method="KO/TKO",
            result_method_details="Spinning Back Kick",
            result_round=3,
            result_time="4:294:29",
        ),
        Fight(
            id="fight-300-co",
            event_id="ufc-300",
            fighter1_id="islam-makhachev",
            fighter2_id="charles-oliveira",
            fighter1_name="Islam Makhachev",
            fighter2_name="Charles Oliveira",
            fighter1_rank="#C",
            fighter2_rank="",
            weight_class="Lightweight",
            fight_order=2,
            winner_id="islam-makhachev",
            result_method="Submission",
            result_round=1,
            result_time="3:16",
        ),
        Fight(
            id="fight-300-off",
            event_id="ufc-300",
            fighter1_id="tom-aspinall",
            fighter2_id=None,
            fighter1_name="Tom Aspinall",
            fighter2_name="TBA",
            weight_class="Heavyweight",
            fight_order=3,
        ),
        Fight(
            id="fight-309",
            event_id="ufc-309",
            fighter1_id="stipe-miocic",
            fighter2_id="jon-jones",
            fighter1_name="Stipe Miocic",
            fighter2_name="Jon Jones",
            fighter1_rank="#4",
            fighter2_rank="C",
            weight_class="Heavyweight",
            fight_order=1,
        ),
        Fight(
            id="fight-295",
            event_id="ufc-295",
            fighter1_id="jon-jones",
            fighter2_id="stipe-miocic",
            fighter1_name="Jon Jones",
            fighter2_name="Stipe Miocic",
            weight_class="Heavyweight",
            fight_order=1,
            result_method="No Contest",
        ),
        Fight(
            id="fight-400",
            event_id="ufc-400",
            fighter1_id="jon-jones",
            fighter2_id="tom-aspinall",
            fighter1_name="Jon Jones",
            fighter2_name="Tom Aspinall",
            fighter1_rank="C",
            fighter2_rank="Interim Champion",
            weight_class="Heavyweight",
            is_main_event=True,
            was_title_fight=True,
            fight_order=1,
        ),
    ]


@pytest_asyncio.fixture
async def session_factory(tmp_path: Path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Provide a session factory bound to an empty SQLite database file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> async_sessionmaker[AsyncSession]:
    """The same factory after inserting the sample fighters, events and fights."""
    async with session_factory() as session:
        session.add_all(sample_fighters())
        session.add_all(sample_events())
        await session.flush()
        session.add_all(sample_rankings())
        session.add_all(sample_fights())
        await session.commit()
    return session_factory


@pytest.fixture
def store(seeded_factory: async_sessionmaker[AsyncSession]) -> SqlAlchemyDataStore:
    return SqlAlchemyDataStore(seeded_factory)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(use_sqlite=True, cors_allow_origins_raw="https://example.com")


@pytest_asyncio.fixture
async def client(
    settings: AppSettings, seeded_factory: async_sessionmaker[AsyncSession]
) -> AsyncIterator[AsyncClient]:
    """HTTP client for an app wired to the seeded database."""
    app = create_app(settings)
    app.state.session_factory = seeded_factory
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http

"""Tests for the fighter browser, filter options and profile assembly."""

from __future__ import annotations

import pytest

from mma_scheduler.db.repositories.fight_repository import FightRepository
from mma_scheduler.db.repositories.fighter_repository import FighterFilters, FighterRepository
from mma_scheduler.db.repositories.ranking_repository import RankingRepository
from mma_scheduler.db.store import SqlAlchemyDataStore
from mma_scheduler.services.fighter_service import (
    FighterService,
    build_profile,
    ranking_lines,
    split_locations,
)
from tests.conftest import REFERENCE_NOW


@pytest.fixture
def service(store: SqlAlchemyDataStore) -> FighterService:
    return FighterService(
        FighterRepository(store), RankingRepository(store), FightRepository(store)
    )


def test_split_locations() -> None:
    assert split_locations("{Albuquerque, New Mexico}, {Rochester, New York}") == [
        "Albuquerque, New Mexico",
        "Rochester, New York",
    ]
    assert split_locations("{Las Vegas, Nevada}") == ["Las Vegas, Nevada"]
    assert split_locations("Denver, Colorado") == ["Denver, Colorado"]
    assert split_locations(None) == []


def test_ranking_lines_fall_back_to_legacy_rank() -> None:
    fighter = {"id": "x", "weight_class": "Lightweight", "rank": "#4"}

    (line,) = ranking_lines(fighter, [])

    assert line.weight_class == "Lightweight"
    assert line.label == "Ranked #4"


def test_ranking_lines_hide_nr_but_keep_weight_class() -> None:
    (line,) = ranking_lines({"id": "x", "weight_class": "Welterweight", "rank": "NR"}, [])

    assert line.label is None
    assert line.weight_class == "Welterweight"
    assert ranking_lines({"id": "x", "rank": "NR"}, []) == []


def test_build_profile_defaults() -> None:
    profile = build_profile({"id": "x", "name": "Nobody", "age": 0}, [])

    assert profile.status == "Unknown"
    assert profile.age is None
    assert (profile.wins, profile.losses, profile.draws, profile.no_contests) == (0, 0, 0, 0)
    assert not profile.win_methods.is_complete


@pytest.mark.asyncio
async def test_list_fighters(service: FighterService) -> None:
    result = await service.list_fighters(
        FighterFilters(search="o", nationalities=("Brazil", "United Kingdom")),
        offset=0,
        limit=10,
    )

    assert [fighter.name for fighter in result.fighters] == ["Charles Oliveira", "Tom Aspinall"]
    assert result.count == 2


@pytest.mark.asyncio
async def test_legacy_fighter_list_echoes_offsets(service: FighterService) -> None:
    result = await service.list_all_fighters(offset=2, limit=2)

    payload = result.model_dump(by_alias=True)
    assert payload["totalCount"] == 7
    assert payload["requestedOffset"] == payload["actualOffset"] == 2
    assert [fighter["name"] for fighter in payload["fighters"]] == [
        "Islam Makhachev",
        "Jon Jones",
    ]


@pytest.mark.asyncio
async def test_filter_options(service: FighterService) -> None:
    options = await service.get_filter_options()

    assert options.weight_classes == [
        "Lightweight",
        "Welterweight",
        "Heavyweight",
        "Women's Strawweight",
    ]
    assert "Brazil" in options.nationalities


@pytest.mark.asyncio
async def test_profile_prefers_rankings_table(service: FighterService) -> None:
    profile = await service.get_profile("islam-makhachev")

    assert profile is not None
    assert {line.weight_class for line in profile.rankings} == {"Lightweight", "Pound for Pound"}


@pytest.mark.asyncio
async def test_profile_details(service: FighterService) -> None:
    profile = await service.get_profile("jon-jones")

    assert profile is not None
    assert profile.fighting_out_of == ["Albuquerque, New Mexico", "Rochester, New York"]
    assert profile.win_methods.is_complete
    assert profile.loss_methods.dq == 1
    assert profile.rankings[0].is_champion


@pytest.mark.asyncio
async def test_unknown_fighter_profile_is_none(service: FighterService) -> None:
    assert await service.get_profile("nobody") is None


@pytest.mark.asyncio
async def test_fight_history(service: FighterService) -> None:
    history = await service.get_fight_history(
        "jon-jones", offset=0, limit=3, now=REFERENCE_NOW
    )

    assert history.total == 4
    assert history.has_more
    assert [(fight.fight_id, fight.result) for fight in history.fights] == [
        ("fight-400", ""),
        ("fight-309", "CANCELED"),
        ("fight-300-main", "WIN"),
    ]
    assert history.fights[0].opponent_name == "Tom Aspinall"
    assert history.fights[1].fighter_rank == "Champion"
    assert history.fights[2].time == "4:29"


@pytest.mark.asyncio
async def test_fight_history_last_page(service: FighterService) -> None:
    history = await service.get_fight_history(
        "jon-jones", offset=3, limit=3, now=REFERENCE_NOW
    )

    assert [(fight.fight_id, fight.result) for fight in history.fights] == [("fight-295", "NC")]
    assert not history.has_more

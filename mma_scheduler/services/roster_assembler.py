"""Merge the two sources of rank data into per-division rosters.

Rank information lives in two places: the dedicated ``fighter_rankings``
table and the older single ``rank`` column on each fighter row. The rankings
table wins whenever it mentions a fighter at all; the legacy column is only
consulted for fighters the table does not know about, so nobody is dropped
when the table is incomplete and nobody is listed twice.

The assembler is pure: it never talks to the data store and yields identical
output for identical input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from mma_scheduler.schemas.ranking import RosterEntry, RosterView
from mma_scheduler.utils.rank_ordering import is_competitive_rank, sort_by_rank
from mma_scheduler.utils.weight_classes import (
    DEFAULT_DIVISION,
    KNOWN_DIVISIONS,
    is_known_division,
)

Row = Mapping[str, Any]


def _count(value: Any) -> int:
    return value if isinstance(value, int) and value >= 0 else 0


def _entry_from_ranking(ranking: Row, fighter: Row) -> RosterEntry:
    return RosterEntry(
        fighter_id=str(ranking["fighter_id"]),
        name=fighter.get("name") or "",
        nickname=fighter.get("nickname"),
        wins=_count(fighter.get("wins")),
        losses=_count(fighter.get("losses")),
        draws=_count(fighter.get("draws")),
        status=fighter.get("status"),
        rank=ranking["rank"],
        weight_class=ranking["weight_class"],
        source="rankings",
    )


def _entry_from_fighter(fighter: Row) -> RosterEntry:
    return RosterEntry(
        fighter_id=str(fighter["id"]),
        name=fighter.get("name") or "",
        nickname=fighter.get("nickname"),
        wins=_count(fighter.get("wins")),
        losses=_count(fighter.get("losses")),
        draws=_count(fighter.get("draws")),
        status=fighter.get("status"),
        rank=fighter["rank"],
        weight_class=fighter["weight_class"],
        source="legacy",
    )


def assemble_roster(
    rankings: Iterable[Row],
    legacy_fighters: Iterable[Row],
    *,
    degraded_sources: Sequence[str] = (),
) -> RosterView:
    """Build the sorted roster of every known division.

    Args:
        rankings: Ranking rows (``fighter_id``, ``weight_class``, ``rank``) each
            carrying the referenced fighter under ``"fighter"``.
        legacy_fighters: Fighter rows whose ``rank`` column is populated.
        degraded_sources: Names of sources that failed to load; recorded on the
            result untouched.

    Returns:
        A :class:`RosterView` whose ``divisions`` maps every known division
        (in display order) to its roster sorted by rank, best first.
    """

    rosters: dict[str, list[RosterEntry]] = {division: [] for division in KNOWN_DIVISIONS}
    ranking_rows = list(rankings)

    # Any appearance in the rankings table suppresses the legacy fallback,
    # even when that row is not itself rendered.
    ranked_fighter_ids = {str(row["fighter_id"]) for row in ranking_rows}

    for ranking in ranking_rows:
        fighter = ranking.get("fighter")
        if not fighter:
            continue
        if not is_competitive_rank(ranking.get("rank")):
            continue
        if not is_known_division(ranking.get("weight_class")):
            continue
        rosters[ranking["weight_class"]].append(_entry_from_ranking(ranking, fighter))

    for fighter in legacy_fighters:
        if str(fighter["id"]) in ranked_fighter_ids:
            continue
        if not fighter.get("rank") or not is_known_division(fighter.get("weight_class")):
            continue
        rosters[fighter["weight_class"]].append(_entry_from_fighter(fighter))

    for division, entries in rosters.items():
        rosters[division] = sort_by_rank(entries, lambda entry: entry.rank)

    active = [division for division in KNOWN_DIVISIONS if rosters[division]]

    return RosterView(
        divisions=rosters,
        active_divisions=active,
        selected_division=active[0] if active else DEFAULT_DIVISION,
        degraded_sources=list(degraded_sources),
    )


__all__ = ["assemble_roster"]

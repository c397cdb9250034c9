"""Turn raw fight rows into display-ready fight histories and fight cards."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from mma_scheduler.schemas.fight import CardCorner, FightCardEntry, FightRecord
from mma_scheduler.utils.date_math import format_short_date, is_past, parse_instant, utc_now
from mma_scheduler.utils.event_utils import is_completed
from mma_scheduler.utils.rank_ordering import normalize_snapshot_rank, rank_badge
from mma_scheduler.utils.result_time import normalize_result_time

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]

WIN = "WIN"
LOSS = "LOSS"
DRAW = "DRAW"
NO_CONTEST = "NC"
CANCELED = "CANCELED"

DRAW_METHOD = "Draw"
NO_CONTEST_METHOD = "No Contest"

_OLDEST = datetime.min.replace(tzinfo=UTC)


def resolve_winner(fight: Row) -> str | None:
    """Return the winner reference when it names one of the two corners.

    A winner that matches neither fighter is ignored and logged.
    """

    winner_id = fight.get("winner_id")
    if not winner_id:
        return None
    if winner_id in (fight.get("fighter1_id"), fight.get("fighter2_id")):
        return winner_id
    logger.warning(
        "Ignoring winner %s on fight %s: not one of its fighters",
        winner_id,
        fight.get("id"),
    )
    return None


def is_canceled_fight(fight: Row, winner_id: str | None, event_date: Any, now: datetime) -> bool:
    """A bout whose event is already over without a winner, draw or no contest."""

    if winner_id:
        return False
    if fight.get("result_method") in (DRAW_METHOD, NO_CONTEST_METHOD):
        return False
    return is_past(event_date, now)


def result_label(
    fighter_id: str, winner_id: str | None, method: str | None, *, canceled: bool
) -> str:
    if canceled:
        return CANCELED
    if winner_id:
        return WIN if winner_id == fighter_id else LOSS
    if method == DRAW_METHOD:
        return DRAW
    if method == NO_CONTEST_METHOD:
        return NO_CONTEST
    return ""


def _record_for(fighter_id: str, fight: Row, now: datetime) -> FightRecord:
    event = fight.get("event") or {}
    event_date = parse_instant(event.get("event_date"))

    if fight.get("fighter1_id") == fighter_id:
        own, other = "fighter1", "fighter2"
    else:
        own, other = "fighter2", "fighter1"

    winner_id = resolve_winner(fight)
    canceled = is_canceled_fight(fight, winner_id, event_date, now)

    return FightRecord(
        fight_id=str(fight["id"]),
        event_id=event.get("id") or fight.get("event_id"),
        event_name=event.get("name"),
        event_date=event_date,
        event_date_label=format_short_date(event_date),
        opponent_id=fight.get(f"{other}_id"),
        opponent_name=fight.get(f"{other}_name"),
        fighter_rank=normalize_snapshot_rank(fight.get(f"{own}_rank")),
        opponent_rank=normalize_snapshot_rank(fight.get(f"{other}_rank")),
        weight_class=fight.get("weight_class"),
        is_main_event=bool(fight.get("is_main_event")),
        was_title_fight=bool(fight.get("was_title_fight")),
        result=result_label(
            fighter_id, winner_id, fight.get("result_method"), canceled=canceled
        ),
        method=fight.get("result_method"),
        method_details=fight.get("result_method_details"),
        round=fight.get("result_round"),
        time=normalize_result_time(fight.get("result_time")),
    )


def build_fight_record(
    fighter_id: str, fights: Iterable[Row], now: datetime | None = None
) -> list[FightRecord]:
    """Build a fighter's history, most recent event first.

    Args:
        fighter_id: The fighter whose perspective is used for opponent and result.
        fights: Fight rows on either side, each with the parent event under ``"event"``.
        now: Reference instant for cancellation; defaults to the current UTC time.

    Fights whose event date is missing or unparsable sort last, keeping their
    input order.
    """

    reference = now or utc_now()
    records = [_record_for(fighter_id, fight, reference) for fight in fights]
    return sorted(records, key=lambda record: record.event_date or _OLDEST, reverse=True)


def paginate_records(
    records: Sequence[FightRecord], *, offset: int, limit: int
) -> tuple[list[FightRecord], bool]:
    """Slice ``records`` and report whether anything is left after the page."""

    offset = max(offset, 0)
    limit = max(limit, 0)
    page = list(records[offset : offset + limit])
    return page, offset + limit < len(records)


def _corner(fight: Row, side: str, winner_id: str | None) -> CardCorner:
    fighter_id = fight.get(f"{side}_id")
    return CardCorner(
        fighter_id=fighter_id,
        name=fight.get(f"{side}_name"),
        rank_badge=rank_badge(fight.get(f"{side}_rank")),
        was_champion=bool(fight.get(f"{side}_was_champion")),
        is_winner=winner_id is not None and winner_id == fighter_id,
    )


def build_fight_card(fights: Iterable[Row], event_status: str | None) -> list[FightCardEntry]:
    """Fight card entries for an event page, in ``fight_order``.

    On the event page a bout is canceled when the event is completed and the
    bout has neither a winner nor any result method.
    """

    completed = is_completed(event_status)
    entries = []
    for fight in fights:
        winner_id = resolve_winner(fight)
        entries.append(
            FightCardEntry(
                fight_id=str(fight["id"]),
                fight_order=fight.get("fight_order"),
                weight_class=fight.get("weight_class"),
                is_main_event=bool(fight.get("is_main_event")),
                was_title_fight=bool(fight.get("was_title_fight")),
                fighter1=_corner(fight, "fighter1", winner_id),
                fighter2=_corner(fight, "fighter2", winner_id),
                method=fight.get("result_method"),
                method_details=fight.get("result_method_details"),
                round=fight.get("result_round"),
                time=normalize_result_time(fight.get("result_time")),
                is_canceled=completed and not winner_id and not fight.get("result_method"),
            )
        )
    return entries

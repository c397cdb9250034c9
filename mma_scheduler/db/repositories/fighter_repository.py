"""Fighter reads: the filtered browser list, profiles and legacy rank rows."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mma_scheduler.db.store import DataStore, ReadQuery, Row
from mma_scheduler.utils.rank_ordering import CHAMPION, NOT_RANKED, UNRANKED

FIGHTER_LIST_COLUMNS: tuple[str, ...] = (
    "id",
    "name",
    "weight_class",
    "nationality",
    "wins",
    "losses",
    "draws",
    "rank",
    "status",
    "no_contests",
)

# "Retired" in the browser filter also matches fighters marked as not fighting.
RETIRED_STATUS = "Retired"
RETIRED_STATUSES: tuple[str, ...] = ("Retired", "Not Fighting")


@dataclass(frozen=True)
class FighterFilters:
    """Normalised filters accepted by the fighter browser."""

    search: str = ""
    status: str = ""
    champion: bool = False
    weight_classes: tuple[str, ...] = ()
    nationalities: tuple[str, ...] = ()


def normalize_fighter_filters(
    *,
    search: str | None = None,
    status: str | None = None,
    champion: bool = False,
    weight_classes: Sequence[str] = (),
    nationalities: Sequence[str] = (),
) -> FighterFilters:
    """Strip whitespace and drop empty or repeated multi-select values."""

    def _clean(values: Sequence[str]) -> tuple[str, ...]:
        cleaned = (value.strip() for value in values)
        return tuple(dict.fromkeys(value for value in cleaned if value))

    return FighterFilters(
        search=(search or "").strip(),
        status=(status or "").strip(),
        champion=champion,
        weight_classes=_clean(weight_classes),
        nationalities=_clean(nationalities),
    )


def build_fighter_query(
    filters: FighterFilters,
    *,
    offset: int,
    limit: int,
    columns: Sequence[str] = FIGHTER_LIST_COLUMNS,
) -> ReadQuery:
    """Build the single fighter-browser query used by every list endpoint.

    Multi-valued filters (weight class, nationality) use one inclusion filter
    each, so several selected values combine with OR while different filters
    combine with AND. Results are ordered by name and carry an exact count.
    """

    query = ReadQuery("fighters").select(*columns).with_count()

    if filters.search:
        query = query.where_ilike("name", f"%{filters.search}%")

    if filters.status:
        if filters.status == RETIRED_STATUS:
            query = query.where_in("status", RETIRED_STATUSES)
        else:
            query = query.where_eq("status", filters.status)

    if filters.champion:
        query = query.where_eq("rank", CHAMPION)

    if filters.weight_classes:
        query = query.where_in("weight_class", filters.weight_classes)

    if filters.nationalities:
        query = query.where_in("nationality", filters.nationalities)

    return query.order("name").range(offset, limit)


class FighterRepository:
    """Fighter queries issued against the injected data store."""

    def __init__(self, store: DataStore) -> None:
        self._store = store

    async def search_fighters(
        self, filters: FighterFilters, *, offset: int, limit: int
    ) -> tuple[list[Row], int]:
        """Return one page of matching fighters plus the total match count."""

        result = await self._store.fetch(
            build_fighter_query(filters, offset=offset, limit=limit)
        )
        return result.rows, result.count or 0

    async def list_all_fighters(self, *, offset: int, limit: int) -> tuple[list[Row], int]:
        """Unfiltered page with every column, ordered by name."""

        result = await self._store.fetch(
            ReadQuery("fighters").with_count().order("name").range(offset, limit)
        )
        return result.rows, result.count or 0

    async def get_fighter(self, fighter_id: str) -> Row | None:
        result = await self._store.fetch(
            ReadQuery("fighters").where_eq("id", fighter_id).take(1)
        )
        return result.rows[0] if result.rows else None

    async def get_fighters_by_ids(self, fighter_ids: Sequence[str]) -> dict[str, Row]:
        if not fighter_ids:
            return {}
        result = await self._store.fetch(
            ReadQuery("fighters")
            .select("id", "name", "nickname", "wins", "losses", "draws", "status")
            .where_in("id", list(dict.fromkeys(fighter_ids)))
        )
        return {row["id"]: row for row in result.rows}

    async def list_legacy_ranked_fighters(self) -> list[Row]:
        """Fighters whose legacy ``rank`` column holds something other than NR."""

        result = await self._store.fetch(
            ReadQuery("fighters")
            .where_not_null("rank")
            .where_not_in("rank", (UNRANKED, NOT_RANKED))
        )
        return result.rows

    async def distinct_values(self, column: str) -> list[str]:
        """Distinct non-null values of ``column`` sorted alphabetically."""

        result = await self._store.fetch(
            ReadQuery("fighters")
            .select(column)
            .where_not_null(column)
            .unique()
            .order(column)
        )
        return [row[column] for row in result.rows if row[column]]

"""Repository for the dedicated ``fighter_rankings`` table."""

from __future__ import annotations

from mma_scheduler.db.repositories.fighter_repository import FighterRepository
from mma_scheduler.db.store import DataStore, ReadQuery, Row


class RankingRepository:
    """Reads ranking rows and resolves the fighters they reference."""

    def __init__(self, store: DataStore) -> None:
        """Initialize repository with the data store.

        Args:
            store: Query interface over the hosted database
        """
        self._store = store
        self._fighters = FighterRepository(store)

    async def list_rankings(self) -> list[Row]:
        """Get every ranking row with its fighter's display fields.

        Returns:
            Ranking dicts (``id``, ``fighter_id``, ``weight_class``, ``rank``)
            each carrying a ``fighter`` key; ``None`` when the referenced
            fighter row no longer exists.
        """
        result = await self._store.fetch(
            ReadQuery("fighter_rankings").select("id", "fighter_id", "weight_class", "rank")
        )
        rankings = result.rows

        fighters = await self._fighters.get_fighters_by_ids(
            [ranking["fighter_id"] for ranking in rankings]
        )
        return [
            {**ranking, "fighter": fighters.get(ranking["fighter_id"])}
            for ranking in rankings
        ]

    async def list_for_fighter(self, fighter_id: str) -> list[Row]:
        """Get the ranking rows of a single fighter (one per division)."""
        result = await self._store.fetch(
            ReadQuery("fighter_rankings").where_eq("fighter_id", fighter_id)
        )
        return result.rows

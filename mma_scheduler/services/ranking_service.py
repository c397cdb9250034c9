"""Service layer for the divisional rankings page."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from mma_scheduler.db.repositories.fighter_repository import FighterRepository
from mma_scheduler.db.repositories.ranking_repository import RankingRepository
from mma_scheduler.db.store import Row
from mma_scheduler.errors import UpstreamQueryError
from mma_scheduler.schemas.ranking import RosterView
from mma_scheduler.services.roster_assembler import assemble_roster
from mma_scheduler.utils.request_context import get_request_id

logger = logging.getLogger(__name__)

RANKINGS_SOURCE = "rankings"
LEGACY_SOURCE = "legacy"


class RankingService:
    """Loads both rank sources and hands them to the roster assembler."""

    def __init__(
        self,
        rankings: RankingRepository,
        fighters: FighterRepository,
    ) -> None:
        """Initialize ranking service with its repositories.

        Args:
            rankings: Reads the dedicated rankings table
            fighters: Reads legacy rank columns on fighter rows
        """
        self.rankings = rankings
        self.fighters = fighters

    async def _load_source(
        self, name: str, loader: Callable[[], Awaitable[list[Row]]]
    ) -> list[Row] | UpstreamQueryError:
        try:
            return await loader()
        except UpstreamQueryError as exc:
            logger.warning(
                "Roster source %s unavailable for request %s: %s",
                name,
                get_request_id(),
                exc.message,
            )
            return exc

    async def get_roster(self) -> RosterView:
        """Get the per-division roster.

        A source that fails contributes nothing and is listed in
        ``degraded_sources``; if both fail the last error is raised.

        Returns:
            RosterView with every known division sorted by rank
        """
        rankings, legacy = await asyncio.gather(
            self._load_source(RANKINGS_SOURCE, self.rankings.list_rankings),
            self._load_source(LEGACY_SOURCE, self.fighters.list_legacy_ranked_fighters),
        )

        if isinstance(rankings, UpstreamQueryError) and isinstance(
            legacy, UpstreamQueryError
        ):
            raise legacy

        degraded = [
            name
            for name, outcome in ((RANKINGS_SOURCE, rankings), (LEGACY_SOURCE, legacy))
            if isinstance(outcome, UpstreamQueryError)
        ]

        return assemble_roster(
            [] if isinstance(rankings, UpstreamQueryError) else rankings,
            [] if isinstance(legacy, UpstreamQueryError) else legacy,
            degraded_sources=degraded,
        )

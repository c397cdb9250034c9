"""Slow-query logging for the data store engine."""

import logging
import time
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

_MAX_LOGGED_STATEMENT = 500
_STARTED_KEY = "mma_scheduler.query_started"


class SlowQueryLogger:
    """Cursor-execute listener pair timing each statement on a connection."""

    def __init__(self, threshold: float) -> None:
        self.threshold = threshold

    def before_execute(self, conn: Any, *_: Any) -> None:
        conn.info.setdefault(_STARTED_KEY, []).append(time.perf_counter())

    def after_execute(self, conn: Any, cursor: Any, statement: str, *_: Any) -> None:
        started = conn.info.get(_STARTED_KEY)
        if not started:
            return
        elapsed = time.perf_counter() - started.pop()
        if elapsed <= self.threshold:
            return

        shown = statement[:_MAX_LOGGED_STATEMENT]
        if len(statement) > _MAX_LOGGED_STATEMENT:
            shown += "..."
        logger.warning(
            "Slow query detected (%.3fs): %s",
            elapsed,
            shown,
            extra={"duration_seconds": elapsed, "threshold_seconds": self.threshold},
        )


def setup_query_monitoring(engine: AsyncEngine, slow_query_threshold: float = 0.1) -> None:
    """Warn about every statement slower than ``slow_query_threshold`` seconds."""
    listener = SlowQueryLogger(slow_query_threshold)
    event.listen(engine.sync_engine, "before_cursor_execute", listener.before_execute)
    event.listen(engine.sync_engine, "after_cursor_execute", listener.after_execute)
    logger.info("Slow query logging enabled (threshold %ss)", slow_query_threshold)

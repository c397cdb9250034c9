"""Lenient parsing of pagination query parameters."""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d{1,18})")

# Largest OFFSET/LIMIT every supported driver binds as an integer.
MAX_ROW_BOUND = 2**31 - 1


def parse_int(raw: str | None, default: int) -> int:
    """Parse the leading integer of ``raw`` ("20", "20px"), else ``default``."""

    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    return int(match.group(1))


def parse_pagination(
    offset: str | None, limit: str | None, *, default_limit: int
) -> tuple[int, int]:
    """Return a non-negative ``(offset, limit)`` pair.

    Offsets clamp into ``0..MAX_ROW_BOUND``; a missing, unparsable or
    non-positive limit falls back to ``default_limit`` and an oversized one is
    capped at ``MAX_ROW_BOUND``.
    """

    parsed_offset = min(max(parse_int(offset, 0), 0), MAX_ROW_BOUND)
    parsed_limit = parse_int(limit, default_limit)
    if parsed_limit <= 0:
        parsed_limit = default_limit
    return parsed_offset, min(parsed_limit, MAX_ROW_BOUND)


def parse_flag(raw: str | None) -> bool:
    return raw is not None and raw.strip().lower() == "true"

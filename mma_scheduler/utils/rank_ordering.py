"""Ordering and display helpers for free-form rank labels.

Rank labels arrive as text: ``"Champion"``, ``"Interim Champion"``, ``"#3"``,
``"3"``, ``"NR"``, ``"Unranked"`` or an empty string. :func:`rank_sort_key`
maps them onto integers where a lower value means a better rank.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TypeVar

CHAMPION = "Champion"
INTERIM_CHAMPION = "Interim Champion"
UNRANKED = "Unranked"
NOT_RANKED = "NR"

CHAMPION_KEY = -2
INTERIM_CHAMPION_KEY = -1
UNRANKED_KEY = 999

# Fight rows store the champion's snapshot rank as "C" or "#C".
_CHAMPION_SNAPSHOTS = frozenset({"C", "#C"})
_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")

T = TypeVar("T")


def _parse_leading_int(text: str) -> int | None:
    """Parse the leading integer of ``text`` ("3", "12th" -> 12), else ``None``."""

    match = _LEADING_INTEGER.match(text)
    if match is None:
        return None
    return int(match.group(1))


def rank_sort_key(label: str | None) -> int:
    """Map a rank label to its sort key (ascending = better).

    >>> [rank_sort_key(v) for v in ("Champion", "Interim Champion", "#1", "7", "NR")]
    [-2, -1, 1, 7, 999]
    """

    if not label:
        return UNRANKED_KEY
    if label == CHAMPION:
        return CHAMPION_KEY
    if label == INTERIM_CHAMPION:
        return INTERIM_CHAMPION_KEY
    if label.startswith("#"):
        parsed = _parse_leading_int(label[1:])
        return UNRANKED_KEY if parsed is None else parsed

    parsed = _parse_leading_int(label)
    return UNRANKED_KEY if parsed is None else parsed


def sort_by_rank(items: Iterable[T], label_of: Callable[[T], str | None]) -> list[T]:
    """Return ``items`` ordered by rank; equal keys keep their input order."""

    return sorted(items, key=lambda item: rank_sort_key(label_of(item)))


def is_competitive_rank(label: str | None) -> bool:
    """Return ``True`` for Champion, Interim Champion, ``#N`` or a bare integer.

    Blank labels, ``"NR"`` and ``"Unranked"`` are not competitive ranks.
    """

    if not label:
        return False
    if label in (CHAMPION, INTERIM_CHAMPION) or label.startswith("#"):
        return True
    return _parse_leading_int(label) is not None


def normalize_snapshot_rank(label: str | None) -> str | None:
    """Translate the ``"C"``/``"#C"`` champion snapshot into ``"Champion"``."""

    if label in _CHAMPION_SNAPSHOTS:
        return CHAMPION
    return label


def rank_badge(label: str | None) -> str | None:
    """Short badge rendered beside a fighter's name on fight cards.

    ``None`` means no badge at all; a blank label renders as ``"Unranked"``.
    """

    if label is None:
        return None
    normalized = normalize_snapshot_rank(label)
    if normalized == CHAMPION:
        return "C"
    if not normalized or not normalized.strip():
        return UNRANKED
    if normalized.startswith("#"):
        return normalized
    return f"#{normalized}"


def describe_rank(label: str | None) -> str | None:
    """Profile wording: ``"Champion"``, ``"Unranked"`` or ``"Ranked #3"``."""

    if not label or label == NOT_RANKED:
        return None
    if label in (CHAMPION, UNRANKED):
        return label
    return f"Ranked {label}"

"""The fixed, display-ordered list of divisions the site knows about."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

KNOWN_DIVISIONS: Final[tuple[str, ...]] = (
    "Flyweight",
    "Bantamweight",
    "Featherweight",
    "Lightweight",
    "Welterweight",
    "Middleweight",
    "Light Heavyweight",
    "Heavyweight",
    "Women's Strawweight",
    "Women's Flyweight",
    "Women's Bantamweight",
    "Women's Featherweight",
)

DEFAULT_DIVISION: Final[str] = "Heavyweight"

_DIVISION_POSITIONS: Final[dict[str, int]] = {
    division: position for position, division in enumerate(KNOWN_DIVISIONS)
}


def is_known_division(weight_class: str | None) -> bool:
    return weight_class in _DIVISION_POSITIONS


def order_divisions(weight_classes: Iterable[str | None]) -> list[str]:
    """Deduplicate ``weight_classes``: known divisions first in display order,
    then any other non-empty labels alphabetically."""

    unique = {value for value in weight_classes if value}
    known = sorted(
        (value for value in unique if value in _DIVISION_POSITIONS),
        key=_DIVISION_POSITIONS.__getitem__,
    )
    others = sorted(value for value in unique if value not in _DIVISION_POSITIONS)
    return known + others


def division_anchor(weight_class: str) -> str:
    """DOM id for a division section, e.g. ``weight-class-womens-flyweight``."""

    slug = "-".join(weight_class.split()).replace("'", "").lower()
    return f"weight-class-{slug}"

"""Utility functions for event listings and event detail headers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import MAXYEAR, MINYEAR
from enum import Enum

from mma_scheduler.utils.date_math import event_year

_NON_DIGITS = re.compile(r"[^\d]")

COMPLETED_CACHE_CONTROL = "public, max-age=86400"
SCHEDULED_CACHE_CONTROL = "public, max-age=3600"


class EventStatus(str, Enum):
    """Lifecycle status stored on event rows."""

    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"


def is_completed(status: str | None) -> bool:
    return status == EventStatus.COMPLETED.value


def available_years(event_dates: Iterable[object], current_year: int) -> list[int]:
    """Distinct years with at least one event, newest first.

    The current year is always present so the events page has a default
    selection even before the schedule is published. Unparsable dates are
    skipped.
    """

    years = {year for year in (event_year(value) for value in event_dates) if year}
    years.add(current_year)
    return sorted(years, reverse=True)


def is_calendar_year(year: int) -> bool:
    return MINYEAR <= year <= MAXYEAR


def parse_year_filter(raw: str | None) -> int | None:
    """Year filter of ``/api/events``; ``None`` (all years) for 0, junk or out of range."""

    if raw is None:
        return None
    match = re.match(r"^\s*([+-]?\d{1,18})", raw)
    if match is None:
        return None
    year = int(match.group(1))
    return year if is_calendar_year(year) else None


def parse_year(raw: str | None, current_year: int) -> int:
    """Interpret the ``/events/{year}`` path segment, defaulting to ``current_year``."""

    return parse_year_filter(raw) or current_year


def format_attendance(attendance: object) -> str | None:
    """Render attendance as ``"19,253 fans"``.

    The stored value is free text; digits are extracted and grouped. When no
    digits are present the raw text is kept.
    """

    if attendance is None or attendance == "":
        return None
    text = str(attendance)
    digits = _NON_DIGITS.sub("", text)
    formatted = f"{int(digits):,}" if digits else text
    return f"{formatted} fans"


def format_location(
    venue: str | None, city: str | None, country: str | None
) -> str:
    """Join the non-empty location parts, e.g. ``"T-Mobile Arena, Las Vegas, USA"``."""

    return ", ".join(part for part in (venue, city, country) if part)


def cache_control_for(status: str | None) -> str:
    """Completed cards never change, so they are cached for a day."""

    if is_completed(status):
        return COMPLETED_CACHE_CONTROL
    return SCHEDULED_CACHE_CONTROL

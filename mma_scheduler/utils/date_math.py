"""Calendar-day arithmetic and the countdown labels shown next to events.

Every comparison happens on whole calendar days in UTC: both the target and
the reference instant are truncated to midnight before differencing, so an
event twelve hours away and one at 11:59pm today both read "Today".

None of the helpers raise on malformed input. Unparsable values degrade to
the ``"Date unknown"`` / ``"Invalid date"`` sentinels instead.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from enum import Enum

UNKNOWN_DATE_LABEL = "Date unknown"
INVALID_DATE_LABEL = "Invalid date"
DATE_NOT_AVAILABLE_LABEL = "Date not available"


class CountdownStyle(str, Enum):
    """Wording used for future events."""

    AWAY = "away"  # "5 days away" (home page cards)
    UNTIL = "until"  # "5 days until event" (event detail header)


def parse_instant(value: object) -> datetime | None:
    """Coerce ``value`` into a timezone-aware ``datetime``.

    Accepts ``datetime`` and ``date`` objects as well as ISO-8601 strings
    (a trailing ``Z`` is understood). Naive values are interpreted as UTC.
    Returns ``None`` for anything that cannot be parsed.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in "Zz":
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def calendar_day(value: datetime | date) -> date:
    """Return the UTC calendar day of ``value`` (time-of-day stripped)."""

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(UTC).date()
    return value


def days_between(first: datetime | date, second: datetime | date) -> int:
    """Absolute number of whole calendar days separating two instants."""

    return abs((calendar_day(first) - calendar_day(second)).days)


def utc_now() -> datetime:
    return datetime.now(UTC)


def relative_label(
    target: object,
    now: datetime | date | None = None,
    *,
    style: CountdownStyle = CountdownStyle.AWAY,
) -> str:
    """Describe ``target`` relative to ``now`` ("Today", "Tomorrow", "3 days ago").

    Args:
        target: Event instant as a ``datetime``/``date`` or ISO string.
        now: Reference instant; defaults to the current UTC time.
        style: Wording for future events further than one day away.

    Returns:
        The human label, ``""`` for a missing target, or ``"Date unknown"``
        when the target cannot be parsed.
    """

    if target is None or (isinstance(target, str) and not target.strip()):
        return ""

    parsed = parse_instant(target)
    if parsed is None:
        return UNKNOWN_DATE_LABEL

    target_day = calendar_day(parsed)
    today = calendar_day(now if now is not None else utc_now())
    diff_days = days_between(target_day, today)

    if target_day >= today:
        if diff_days == 0:
            return "Today"
        if diff_days == 1:
            return "Tomorrow"
        if style is CountdownStyle.UNTIL:
            return f"{diff_days} days until event"
        return f"{diff_days} days away"

    if diff_days == 1:
        return "Yesterday"
    return f"{diff_days} days ago"


def is_past(target: object, now: datetime | None = None) -> bool:
    """Return ``True`` when ``target`` is strictly earlier than ``now``.

    Unparsable targets are never considered past.
    """

    parsed = parse_instant(target)
    if parsed is None:
        return False
    return parsed < (now if now is not None else utc_now())


def format_event_date(value: object) -> str:
    """Long form used on event cards, e.g. ``"Saturday, April 13, 2024"``."""

    if value is None or value == "":
        return ""
    parsed = parse_instant(value)
    if parsed is None:
        return INVALID_DATE_LABEL
    day = calendar_day(parsed)
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def format_short_date(value: object) -> str:
    """Compact form used in fight history rows, e.g. ``"Apr 13, 2024"``."""

    parsed = parse_instant(value)
    if parsed is None:
        return UNKNOWN_DATE_LABEL
    day = calendar_day(parsed)
    return f"{day:%b} {day.day}, {day.year}"


def format_event_time(value: object) -> str:
    """Start time in UTC, e.g. ``"10:00 PM UTC"``."""

    parsed = parse_instant(value)
    if parsed is None:
        return DATE_NOT_AVAILABLE_LABEL
    return f"{parsed.astimezone(UTC):%I:%M %p} UTC"


def event_year(value: object) -> int | None:
    """Return the UTC year of ``value`` or ``None`` when unparsable."""

    parsed = parse_instant(value)
    if parsed is None:
        return None
    return calendar_day(parsed).year

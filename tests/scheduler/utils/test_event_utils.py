"""Tests for event listing helpers and the division vocabulary."""

from __future__ import annotations

from datetime import UTC, datetime

from mma_scheduler.utils.event_utils import (
    COMPLETED_CACHE_CONTROL,
    SCHEDULED_CACHE_CONTROL,
    available_years,
    cache_control_for,
    format_attendance,
    format_location,
    parse_year,
    parse_year_filter,
)
from mma_scheduler.utils.weight_classes import (
    DEFAULT_DIVISION,
    KNOWN_DIVISIONS,
    division_anchor,
    order_divisions,
)


def test_available_years_are_distinct_descending_and_include_current() -> None:
    dates = [
        datetime(2024, 4, 13, tzinfo=UTC),
        "2024-11-16T03:00:00Z",
        "2023-11-11T22:00:00Z",
        "garbage",
        None,
    ]

    assert available_years(dates, 2026) == [2026, 2024, 2023]


def test_parse_year_defaults_to_current() -> None:
    assert parse_year("2024", 2026) == 2024
    assert parse_year("abc", 2026) == 2026
    assert parse_year(None, 2026) == 2026


def test_parse_year_rejects_years_outside_the_calendar() -> None:
    assert parse_year("99999", 2026) == 2026
    assert parse_year("0", 2026) == 2026
    assert parse_year("-1", 2026) == 2026
    assert parse_year("9999", 2026) == 9999


def test_parse_year_filter_means_all_years_when_unusable() -> None:
    assert parse_year_filter("2024") == 2024
    assert parse_year_filter("0") is None
    assert parse_year_filter("-1") is None
    assert parse_year_filter("10000") is None
    assert parse_year_filter("1" * 40) is None
    assert parse_year_filter("abc") is None
    assert parse_year_filter(None) is None


def test_format_attendance() -> None:
    assert format_attendance("19253") == "19,253 fans"
    assert format_attendance("19,253") == "19,253 fans"
    assert format_attendance(20000) == "20,000 fans"
    assert format_attendance("Sold out") == "Sold out fans"
    assert format_attendance(None) is None


def test_format_location_skips_blanks() -> None:
    assert format_location("T-Mobile Arena", "Las Vegas", "USA") == "T-Mobile Arena, Las Vegas, USA"
    assert format_location(None, "Las Vegas", "") == "Las Vegas"


def test_cache_control_depends_on_status() -> None:
    assert cache_control_for("Completed") == COMPLETED_CACHE_CONTROL
    assert cache_control_for("Scheduled") == SCHEDULED_CACHE_CONTROL
    assert cache_control_for(None) == SCHEDULED_CACHE_CONTROL


def test_order_divisions_known_first_then_alphabetical() -> None:
    ordered = order_divisions(["Heavyweight", "Catch Weight", None, "Flyweight", "Heavyweight", "Open"])

    assert ordered == ["Flyweight", "Heavyweight", "Catch Weight", "Open"]


def test_division_vocabulary() -> None:
    assert len(KNOWN_DIVISIONS) == 12
    assert DEFAULT_DIVISION in KNOWN_DIVISIONS
    assert division_anchor("Women's Flyweight") == "weight-class-womens-flyweight"

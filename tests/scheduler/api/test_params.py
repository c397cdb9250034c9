"""Tests for lenient query-parameter parsing."""

from __future__ import annotations

from mma_scheduler.api.params import MAX_ROW_BOUND, parse_flag, parse_int, parse_pagination


def test_parse_int_reads_leading_digits() -> None:
    assert parse_int("20", 5) == 20
    assert parse_int(" 20px", 5) == 20
    assert parse_int("-3", 5) == -3
    assert parse_int("abc", 5) == 5
    assert parse_int(None, 5) == 5


def test_parse_pagination_defaults_and_clamps() -> None:
    assert parse_pagination(None, None, default_limit=10) == (0, 10)
    assert parse_pagination("-4", "0", default_limit=10) == (0, 10)
    assert parse_pagination("30", "x", default_limit=10) == (30, 10)


def test_parse_pagination_caps_oversized_values() -> None:
    huge = "9" * 5000

    assert parse_pagination(huge, huge, default_limit=10) == (MAX_ROW_BOUND, MAX_ROW_BOUND)
    assert parse_pagination("-" + huge, None, default_limit=10) == (0, 10)


def test_parse_flag() -> None:
    assert parse_flag("true")
    assert parse_flag(" TRUE ")
    assert not parse_flag("1")
    assert not parse_flag(None)

"""Repair finish times that were stored concatenated with themselves."""

from __future__ import annotations


def normalize_result_time(value: str | None) -> str | None:
    """Collapse a duplicated time string into its single value.

    Some stored rows repeat the finish time end-to-end (``"00:04:1400:04:14"``).
    When the value has even length and both halves match, only the first half
    is returned. Any other value, including ``None`` and ``""``, is returned
    unchanged.
    """

    if not value or len(value) % 2:
        return value
    half = len(value) // 2
    if value[:half] == value[half:]:
        return value[:half]
    return value

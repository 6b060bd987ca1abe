# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
analysis.py — Summary statistics over the fetched day records.

Every function takes the full record list and returns None when it is empty.
"""

from __future__ import annotations
from collections import Counter


def lowest_temp(records: list[dict]) -> float | None:
    """Return the minimum average temperature (°F), or None if no records."""
    if not records:
        return None
    return min(r["temperature"] for r in records)


def earliest_moon_rise(records: list[dict]) -> str | None:
    """Return the moonrise string that sorts first.

    This is a plain string comparison of the provider's time-of-day text,
    so "10:30 PM" sorts before "06:45 AM". Chronological order is not used.
    """
    if not records:
        return None
    return min(r["moon_rise"] for r in records)


def most_common_moon_phase(records: list[dict]) -> str | None:
    """Return the most frequent moon phase; ties go to the first one seen."""
    if not records:
        return None
    # Counter.most_common keeps insertion order among equal counts
    return Counter(r["moon_phase"] for r in records).most_common(1)[0][0]


def summarize(records: list[dict]) -> dict:
    """Return lowest_temp, earliest_moon_rise and most_common_moon_phase."""
    return {
        "lowest_temp":            lowest_temp(records),
        "earliest_moon_rise":     earliest_moon_rise(records),
        "most_common_moon_phase": most_common_moon_phase(records),
    }


def fmt_stat(value: object, unit: str = "") -> str:
    """Render a statistic for display, 'N/A' when absent."""
    if value is None:
        return "N/A"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}{unit}"

# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
filters.py — Narrow the fetched day records to what the user asked for.

Each match_* function checks one criterion against one record and returns
True when the record passes. filter_records() ANDs all of them and keeps
the original record order. Every call is a full rescan.
"""

from dataclasses import dataclass

ALL_PHASES = "All"
TEMP_SLIDER_MIN = 0
TEMP_SLIDER_MAX = 100


@dataclass(frozen=True)
class FilterCriteria:
    """User-selected filters: date substring, moon phase, °F range."""

    query: str = ""
    moon_phase: str = ALL_PHASES
    temp_range: tuple[float, float] = (TEMP_SLIDER_MIN, TEMP_SLIDER_MAX)

    def __post_init__(self):
        low, high = self.temp_range
        if low > high:
            raise ValueError(f"Temperature range low ({low}) is above high ({high})")


def match_date(record: dict, query: str) -> bool:
    """Case-insensitive substring match on the 'YYYY-MM-DD' date."""
    return query.lower() in record["date"].lower()


def match_phase(record: dict, phase: str) -> bool:
    """
    'All' passes everything; otherwise the phase must match exactly,
    including case.
    """
    return phase == ALL_PHASES or record["moon_phase"] == phase


def match_temperature(record: dict, temp_range: tuple[float, float]) -> bool:
    """Inclusive on both ends."""
    low, high = temp_range
    return low <= record["temperature"] <= high


def filter_records(records: list[dict], criteria: FilterCriteria) -> list[dict]:
    """Return the records that pass every criterion, in their original order."""
    return [
        r for r in records
        if match_date(r, criteria.query)
        and match_phase(r, criteria.moon_phase)
        and match_temperature(r, criteria.temp_range)
    ]


def moon_phase_options(records: list[dict]) -> list[str]:
    """'All' followed by each distinct phase in order of first appearance."""
    seen = dict.fromkeys(r["moon_phase"] for r in records)
    return [ALL_PHASES, *seen]

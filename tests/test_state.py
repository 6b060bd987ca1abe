# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for state.py — the dashboard's loading/error/ready state container."""

import pytest

from astro_dash.fetch import FetchResult
from astro_dash.filters import FilterCriteria
from astro_dash.state import ERROR, LOADING, READY, DashboardState


RECORDS = [
    {"date": "2025-03-26", "temperature": 40.0, "moon_rise": "05:12 AM",
     "moon_set": "03:20 PM", "moon_phase": "Full Moon"},
    {"date": "2025-03-27", "temperature": 38.0, "moon_rise": "06:05 AM",
     "moon_set": "04:31 PM", "moon_phase": "Full Moon"},
    {"date": "2025-03-28", "temperature": 52.0, "moon_rise": "06:52 AM",
     "moon_set": "05:42 PM", "moon_phase": "Waning Gibbous"},
]


class TestStatus:

    def test_starts_loading(self):
        state = DashboardState()
        assert state.status == LOADING
        assert state.records == []
        assert state.error is None

    def test_ready_after_successful_load(self):
        state = DashboardState()
        state.load(FetchResult(records=RECORDS))
        assert state.status == READY
        assert state.records == RECORDS

    def test_error_after_failed_load(self):
        state = DashboardState()
        state.load(FetchResult(error="Failed to fetch data for 2025-03-27: 500"))
        assert state.status == ERROR
        assert state.error.startswith("Failed to fetch")
        assert state.records == []
        assert state.filtered == []

    def test_second_load_raises(self):
        state = DashboardState()
        state.load(FetchResult(records=RECORDS))
        with pytest.raises(RuntimeError, match="already loaded"):
            state.load(FetchResult(records=[]))


class TestDerivedValues:

    def setup_method(self):
        self.state = DashboardState()
        self.state.load(FetchResult(records=RECORDS))

    def test_summary(self):
        assert self.state.summary == {
            "lowest_temp": 38.0,
            "earliest_moon_rise": "05:12 AM",
            "most_common_moon_phase": "Full Moon",
        }

    def test_phase_options(self):
        assert self.state.phase_options == ["All", "Full Moon", "Waning Gibbous"]

    def test_filtered_follows_criteria_changes(self):
        assert len(self.state.filtered) == 3

        self.state.update_criteria(moon_phase="Waning Gibbous")
        assert [r["date"] for r in self.state.filtered] == ["2025-03-28"]

        self.state.update_criteria(moon_phase="All", temp_range=(39, 45))
        assert [r["date"] for r in self.state.filtered] == ["2025-03-26"]

    def test_update_criteria_keeps_other_fields(self):
        self.state.update_criteria(query="03-2")
        criteria = self.state.update_criteria(moon_phase="Full Moon")
        assert criteria == FilterCriteria(query="03-2", moon_phase="Full Moon")

    def test_invalid_range_rejected_and_criteria_unchanged(self):
        before = self.state.criteria
        with pytest.raises(ValueError):
            self.state.update_criteria(temp_range=(80, 20))
        assert self.state.criteria == before

    def test_summary_ignores_filters(self):
        self.state.update_criteria(moon_phase="Waning Gibbous")
        assert self.state.summary["lowest_temp"] == 38.0

    def test_records_returns_copy(self):
        self.state.records.clear()
        assert len(self.state.records) == 3

# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
state.py — Session state for the dashboard.

DashboardState holds the fetched records (set once per session) and the
current filter criteria. The filtered view, the summary and the phase
options are recomputed from those two on every read.
"""

from dataclasses import replace

from astro_dash.analysis import summarize
from astro_dash.fetch import FetchResult
from astro_dash.filters import FilterCriteria, filter_records, moon_phase_options

LOADING = "loading"
ERROR = "error"
READY = "ready"


class DashboardState:
    def __init__(self, criteria: FilterCriteria | None = None):
        self._result: FetchResult | None = None
        self.criteria = criteria or FilterCriteria()

    @property
    def status(self) -> str:
        """One of 'loading', 'error' or 'ready'."""
        if self._result is None:
            return LOADING
        return READY if self._result.ok else ERROR

    @property
    def error(self) -> str | None:
        return self._result.error if self._result is not None else None

    @property
    def records(self) -> list[dict]:
        """The full record set; empty until a successful load."""
        if self._result is None or not self._result.ok:
            return []
        return list(self._result.records)

    def load(self, result: FetchResult) -> None:
        """Store the outcome of the session's single fetch.

        Raises:
            RuntimeError: If a result was already loaded.
        """
        if self._result is not None:
            raise RuntimeError("Dashboard data is already loaded for this session")
        self._result = result

    def update_criteria(self, **changes) -> FilterCriteria:
        """Replace one or more criteria fields and return the new criteria."""
        self.criteria = replace(self.criteria, **changes)
        return self.criteria

    @property
    def filtered(self) -> list[dict]:
        return filter_records(self.records, self.criteria)

    @property
    def summary(self) -> dict:
        return summarize(self.records)

    @property
    def phase_options(self) -> list[str]:
        return moon_phase_options(self.records)

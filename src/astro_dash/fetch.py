# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
fetch.py — Fetch the whole date range in one concurrent burst.

One request per day is submitted to a thread pool at once. The batch is
all-or-nothing: the first failure to come back becomes the result's error
and no partial records are returned.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

from astro_dash.config import (
    DEFAULT_START_DATE,
    DEFAULT_TIMEOUT_SECONDS,
    WEATHERAPI_HISTORY_URL,
)
from astro_dash.history import DAY_COUNT, FetchError, build_dates, fetch_day
from astro_dash.utils import DEFAULT_LOG_PATH, log_error, log_event


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch batch: either records or an error message."""

    records: list[dict] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_result_set(
    city: str,
    api_key: str,
    start_date: str = DEFAULT_START_DATE,
    count: int = DAY_COUNT,
    base_url: str = WEATHERAPI_HISTORY_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    log_path: Path = DEFAULT_LOG_PATH,
) -> FetchResult:
    """Fetch `count` consecutive days for `city` concurrently.

    Args:
        city: Location query, e.g. 'New York'.
        api_key: WeatherAPI.com key.
        start_date: First day, 'YYYY-MM-DD'.
        count: Number of days (one request each).
        base_url: History endpoint URL.
        timeout: Per-request timeout in seconds.
        log_path: File that receives the error line on failure.

    Returns:
        FetchResult with records in date order, or with the first error.
    """
    dates = build_dates(start_date, count)
    log_event(f"Fetching {len(dates)} days for {city} ({dates[0]} to {dates[-1]})...")

    pool = ThreadPoolExecutor(max_workers=len(dates))
    futures = {
        pool.submit(
            fetch_day, date_str, city, api_key, base_url=base_url, timeout=timeout
        ): i
        for i, date_str in enumerate(dates)
    }

    by_index: dict[int, dict] = {}
    try:
        for fut in as_completed(futures):
            try:
                by_index[futures[fut]] = fut.result()
            except Exception as e:
                if isinstance(e, FetchError):
                    message = str(e)
                else:
                    message = f"Unexpected error fetching {dates[futures[fut]]}: {e!r}"
                log_event(f"Fetch failed: {message}")
                log_error(message, log_path=log_path)
                return FetchResult(error=message)
    finally:
        # Requests already in flight finish in the background; queued ones are dropped
        pool.shutdown(wait=False, cancel_futures=True)

    records = [by_index[i] for i in range(len(dates))]
    log_event(f"Fetched {len(records)} days.")
    return FetchResult(records=records)


def fetch_for_config(config: dict) -> FetchResult:
    """Run fetch_result_set with values from a loaded config dict."""
    provider = config["provider"]
    return fetch_result_set(
        city=config["location"]["city"],
        api_key=provider["api_key"],
        start_date=config["range"]["start_date"],
        base_url=provider["base_url"],
        timeout=provider["timeout"],
        log_path=Path(config["log"]["path"]),
    )

# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
history.py — Fetch one day of historical weather and astronomy from WeatherAPI.com.

Each call asks the history endpoint for a single city and date and returns
a flat day record. Failures are never retried here.

API docs: https://www.weatherapi.com/docs/#apis-history
"""

import math

import requests
from datetime import date, timedelta

from astro_dash.config import WEATHERAPI_HISTORY_URL, DEFAULT_TIMEOUT_SECONDS

DAY_COUNT = 10


class FetchError(RuntimeError):
    """Raised when a single day could not be fetched from the provider."""


class MalformedResponseError(FetchError):
    """Raised when a successful response lacks the expected nested fields."""


def build_dates(start: date | str, count: int = DAY_COUNT) -> list[str]:
    """Return `count` consecutive 'YYYY-MM-DD' strings beginning at `start`.

    Args:
        start: First day (inclusive), as a date or an ISO string.
        count: Number of days.

    Raises:
        ValueError: If count is less than 1 or start is not an ISO date.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if isinstance(start, str):
        start = date.fromisoformat(start)
    return [(start + timedelta(days=i)).isoformat() for i in range(count)]


def fetch_day(
    date_str: str,
    city: str,
    api_key: str,
    base_url: str = WEATHERAPI_HISTORY_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict:
    """Fetch the history record for one city and date.

    Args:
        date_str: Day to request, 'YYYY-MM-DD'.
        city: Location query passed as ``q``, e.g. 'New York'.
        api_key: WeatherAPI.com key.
        base_url: History endpoint URL.
        timeout: Per-request timeout in seconds.

    Returns:
        Day record dict with keys date, temperature, moon_rise, moon_set,
        moon_phase.

    Raises:
        FetchError: On transport failure or a non-2xx status.
        MalformedResponseError: If the body is not the expected shape.
    """
    params = {"key": api_key, "q": city, "dt": date_str}

    try:
        r = requests.get(base_url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch data for {date_str}: {e}") from e

    if not r.ok:
        raise FetchError(
            f"Failed to fetch data for {date_str}: {r.status_code} {r.reason}"
        )

    try:
        data = r.json()
    except ValueError as e:
        raise MalformedResponseError(
            f"Unexpected API response structure for {date_str}: body is not JSON"
        ) from e

    return _parse_day(data, date_str)


def _parse_day(data: dict, date_str: str) -> dict:
    """Extract the day record from a history.json response.

    Expected shape::

        {"forecast": {"forecastday": [
            {"day": {"avgtemp_f": 45.3, ...},
             "astro": {"moonrise": "06:45 AM", "moonset": "07:12 PM",
                       "moon_phase": "Waning Crescent", ...}}
        ]}}

    Raises:
        MalformedResponseError: If any of those fields is missing or mistyped.
    """
    try:
        forecastday = data["forecast"]["forecastday"][0]
        temperature = forecastday["day"]["avgtemp_f"]
        astro = forecastday["astro"]
        moon_rise = astro["moonrise"]
        moon_set = astro["moonset"]
        moon_phase = astro["moon_phase"]
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise MalformedResponseError(
            f"Unexpected API response structure for {date_str}: {e!r}"
        ) from e

    for name, value in (("moonrise", moon_rise), ("moonset", moon_set), ("moon_phase", moon_phase)):
        if not isinstance(value, str):
            raise MalformedResponseError(
                f"Unexpected API response structure for {date_str}: "
                f"astro.{name} is {type(value).__name__}, expected str"
            )

    # bool is an int subclass; NaN and inf come through json.loads
    if (
        isinstance(temperature, bool)
        or not isinstance(temperature, (int, float))
        or not math.isfinite(temperature)
    ):
        raise MalformedResponseError(
            f"Unexpected API response structure for {date_str}: "
            f"day.avgtemp_f is {temperature!r}, expected a finite number"
        )

    return {
        "date": date_str,
        "temperature": float(temperature),
        "moon_rise": moon_rise,
        "moon_set": moon_set,
        "moon_phase": moon_phase,
    }

# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing.
"""

import tomllib
from datetime import date
from pathlib import Path

from astro_dash.utils import DEFAULT_LOG_PATH


DEFAULT_CONFIG_PATH = Path("config.toml")

WEATHERAPI_HISTORY_URL = "https://api.weatherapi.com/v1/history.json"
DEFAULT_START_DATE = "2025-03-26"
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_LOG_FILE = str(DEFAULT_LOG_PATH)


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Optional keys are filled in with their defaults, so callers can index
    every key listed in ``_validate`` without further checks.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and fill in your WeatherAPI key."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    _apply_defaults(config)
    return config


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [provider]
        api_key  = <str>   # WeatherAPI.com key, must not be empty
        base_url = <str>   # optional, history endpoint URL
        timeout  = <num>   # optional, per-request timeout in seconds

        [location]
        city = <str>       # query string sent as q=, e.g. "New York"

        [range]            # optional section
        start_date = <str> # first day, 'YYYY-MM-DD'

        [log]              # optional section
        path = <str>       # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent or invalid.
    """
    for section in ("provider", "location"):
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")

    if "api_key" not in config["provider"]:
        raise ValueError("Missing required config key: [provider].api_key")
    if not str(config["provider"]["api_key"]).strip():
        raise ValueError("Config key [provider].api_key must not be empty")

    if "city" not in config["location"]:
        raise ValueError("Missing required config key: [location].city")

    start = config.get("range", {}).get("start_date")
    if start is not None and not isinstance(start, date):
        try:
            date.fromisoformat(str(start))
        except ValueError:
            raise ValueError(
                f"Invalid [range].start_date '{start}'. Use 'YYYY-MM-DD'."
            )


def _apply_defaults(config: dict) -> None:
    """Fill in optional keys in place."""
    provider = config["provider"]
    provider.setdefault("base_url", WEATHERAPI_HISTORY_URL)
    provider.setdefault("timeout", DEFAULT_TIMEOUT_SECONDS)

    # TOML parses bare dates (start_date = 2025-03-26) into date objects
    range_section = config.setdefault("range", {})
    start = range_section.get("start_date", DEFAULT_START_DATE)
    range_section["start_date"] = start.isoformat() if isinstance(start, date) else str(start)

    config.setdefault("log", {}).setdefault("path", DEFAULT_LOG_FILE)

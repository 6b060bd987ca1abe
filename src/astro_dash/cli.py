# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for astro-dash.

We use argparse (stdlib) rather than click because:
- No extra dependency to install
- Sufficient for 2 simple subcommands

Commands:
  astro-dash show     — fetch, summarise and print the filtered table
  astro-dash phases   — list the moon phases present in the fetched range
"""

import argparse
from pathlib import Path

from astro_dash.chart import render_records_table, render_summary, render_temperature_chart
from astro_dash.config import DEFAULT_CONFIG_PATH, load_config
from astro_dash.fetch import fetch_for_config
from astro_dash.filters import ALL_PHASES, TEMP_SLIDER_MAX, TEMP_SLIDER_MIN, FilterCriteria
from astro_dash.state import DashboardState


def _load_state(config_path: Path) -> tuple[dict, DashboardState]:
    """Load config, run the single fetch and return a loaded state."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    state = DashboardState()
    state.load(fetch_for_config(config))
    if state.status != "ready":
        print(f"[error] {state.error}")
        raise SystemExit(1)
    return config, state


def cmd_show(args) -> None:
    """Fetch the range, print the summary and the filtered table."""
    try:
        criteria = FilterCriteria(
            query=args.query,
            moon_phase=args.phase,
            temp_range=(args.min_temp, args.max_temp),
        )
    except ValueError as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    config, state = _load_state(args.config)
    state.criteria = criteria
    city = config["location"]["city"]

    print()
    print(render_summary(state.summary, city))
    print()
    filtered = state.filtered
    print(render_records_table(filtered))
    if args.chart and filtered:
        print()
        print(render_temperature_chart(filtered))


def cmd_phases(args) -> None:
    """Print 'All' plus each moon phase present in the fetched range."""
    _, state = _load_state(args.config)
    for phase in state.phase_options:
        print(phase)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="astro-dash",
        description="Historical temperature and moon data from WeatherAPI.com",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_show = subparsers.add_parser("show", help="Fetch the range and print summary + table")
    p_show.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config.toml")
    p_show.add_argument(
        "--query",
        metavar="TEXT",
        default="",
        help='Date substring to match, e.g. "03-2" or "2025-04"',
    )
    p_show.add_argument(
        "--phase",
        metavar="PHASE",
        default=ALL_PHASES,
        help='Exact moon phase, e.g. "Full Moon". Default: All',
    )
    p_show.add_argument("--min-temp", type=float, default=TEMP_SLIDER_MIN, help="Lowest °F to include")
    p_show.add_argument("--max-temp", type=float, default=TEMP_SLIDER_MAX, help="Highest °F to include")
    p_show.add_argument("--chart", action="store_true", help="Also print a temperature bar chart")

    p_phases = subparsers.add_parser("phases", help="List moon phases in the fetched range")
    p_phases.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config.toml")

    args = parser.parse_args()

    commands = {
        "show": cmd_show,
        "phases": cmd_phases,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()

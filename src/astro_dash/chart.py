# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
chart.py — ASCII summary, table and chart rendering for the day records.

Uses only the Python standard library (os).
All rendering functions return strings ready to print.
"""

import os

from astro_dash.analysis import fmt_stat
from astro_dash.moon import format_phase
from astro_dash.utils import fmt_day

FALLBACK_TERMINAL_WIDTH: int = 80
BAR_LABEL_RESERVE: int = 30  # characters reserved for label + value outside the bar

NO_MATCHES_MESSAGE = "No data matches your filters."


def render_summary(summary: dict, city: str) -> str:
    """Render the three summary statistics as a short block.

    Args:
        summary: Dict from analysis.summarize.
        city: Display name for the header.

    Returns:
        Multi-line string.
    """
    sep = "─" * 45
    lines = [
        f"📍 {city} — Summary",
        sep,
        f"🌡  Low temp:               {fmt_stat(summary['lowest_temp'], '°F')}",
        f"🌙  Earliest moon rise:     {fmt_stat(summary['earliest_moon_rise'])}",
        f"🌕  Most common moon phase: {fmt_stat(summary['most_common_moon_phase'])}",
        sep,
    ]
    return "\n".join(lines)


def render_records_table(records: list[dict]) -> str:
    """Render day records as a fixed-width ASCII table.

    Args:
        records: Filtered list of day record dicts.

    Returns:
        Multi-line string containing the table, or the no-match message.
    """
    if not records:
        return NO_MATCHES_MESSAGE

    headers = ["Date      ", " Temp°F", " Moon rise", " Moon set ", " Moon phase"]
    header_row = "  ".join(headers)
    sep = "─" * (len(header_row) + 12)

    lines = [sep, header_row, sep]
    for r in records:
        row_parts = [
            f"{r['date']:<10}",
            f"{r['temperature']:>6.1f}°",
            f"{r['moon_rise']:>10}",
            f"{r['moon_set']:>10}",
            f" {format_phase(r['moon_phase'])}",
        ]
        lines.append("  ".join(row_parts))

    lines.append(sep)
    return "\n".join(lines)


def _bar(value: float, max_value: float, bar_width: int) -> str:
    """Render a single filled/empty bar scaled to bar_width.

    Args:
        value: The data value to represent.
        max_value: The maximum value (maps to full bar width).
        bar_width: Total character width of the bar.

    Returns:
        String of '█' and '░' characters of length bar_width.
    """
    if max_value == 0:
        filled = 0
    else:
        filled = round((value / max_value) * bar_width)
    filled = max(0, min(filled, bar_width))
    return "█" * filled + "░" * (bar_width - filled)


def render_temperature_chart(records: list[dict], bar_width: int | None = None) -> str:
    """Render average temperature per day as a horizontal bar chart.

    Args:
        records: List of day record dicts.
        bar_width: Width of the bar in characters. Auto-detected from terminal if None.

    Returns:
        Multi-line string containing the chart, or the no-match message.
    """
    if not records:
        return NO_MATCHES_MESSAGE

    if bar_width is None:
        try:
            terminal_width = os.get_terminal_size().columns
        except OSError:
            terminal_width = FALLBACK_TERMINAL_WIDTH
        bar_width = max(10, terminal_width - BAR_LABEL_RESERVE)

    labels = [fmt_day(r["date"]) for r in records]
    temps = [r["temperature"] for r in records]

    # Shift values so the minimum maps to 0 for bar scaling
    offset = -min(temps) if min(temps) < 0 else 0
    shifted = [t + offset for t in temps]
    max_shifted = max(shifted) or 1

    label_w = max(len(lbl) for lbl in labels)
    lines = ["Average temperature (°F)"]
    for label, value, real in zip(labels, shifted, temps):
        bar = _bar(value, max_shifted, bar_width)
        lines.append(f"  {label:<{label_w}} │{bar}│ {real:>5.1f}°F")

    return "\n".join(lines)

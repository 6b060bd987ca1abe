# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
moon.py — Glyphs for the eight named lunar phases.
"""

MOON_PHASES = [
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
]

_PHASE_EMOJI: dict[str, str] = {
    phase.lower(): glyph
    for phase, glyph in zip(MOON_PHASES, "🌑🌒🌓🌔🌕🌖🌗🌘")
}

DEFAULT_MOON_EMOJI = "🌙"


def moon_phase_emoji(phase: str | None) -> str:
    """Return the glyph for a phase name (case-insensitive), or 🌙 if unknown."""
    if not phase:
        return DEFAULT_MOON_EMOJI
    return _PHASE_EMOJI.get(phase.lower(), DEFAULT_MOON_EMOJI)


def format_phase(phase: str | None) -> str:
    """Return 'glyph name', e.g. '🌕 Full Moon'."""
    return f"{moon_phase_emoji(phase)} {phase or ''}".rstrip()

"""Tests for moon.py phase glyph lookup."""

import pytest

from astro_dash.moon import DEFAULT_MOON_EMOJI, MOON_PHASES, format_phase, moon_phase_emoji


@pytest.mark.parametrize("phase, glyph", [
    ("New Moon", "🌑"),
    ("Waxing Crescent", "🌒"),
    ("First Quarter", "🌓"),
    ("Waxing Gibbous", "🌔"),
    ("Full Moon", "🌕"),
    ("Waning Gibbous", "🌖"),
    ("Last Quarter", "🌗"),
    ("Waning Crescent", "🌘"),
])
def test_canonical_phases(phase, glyph):
    assert moon_phase_emoji(phase) == glyph


def test_lookup_is_case_insensitive():
    assert moon_phase_emoji("FULL MOON") == "🌕"
    assert moon_phase_emoji("waning gibbous") == "🌖"


def test_unknown_phase_gets_default():
    assert moon_phase_emoji("Blue Moon") == DEFAULT_MOON_EMOJI


def test_none_and_empty_get_default():
    assert moon_phase_emoji(None) == DEFAULT_MOON_EMOJI
    assert moon_phase_emoji("") == DEFAULT_MOON_EMOJI


def test_every_canonical_phase_has_its_own_glyph():
    glyphs = {moon_phase_emoji(p) for p in MOON_PHASES}
    assert len(glyphs) == 8
    assert DEFAULT_MOON_EMOJI not in glyphs


def test_format_phase():
    assert format_phase("Full Moon") == "🌕 Full Moon"
    assert format_phase(None) == DEFAULT_MOON_EMOJI


def test_surrounding_whitespace_is_not_stripped():
    """Only case is normalised; padded names fall back to the default glyph."""
    assert moon_phase_emoji(" Full Moon") == DEFAULT_MOON_EMOJI
    assert moon_phase_emoji("Full Moon ") == DEFAULT_MOON_EMOJI

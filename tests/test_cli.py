"""
test_cli.py — Tests for the astro-dash command-line interface.

fetch_for_config is replaced so no network calls are made.
"""

import pytest

from astro_dash import cli
from astro_dash.fetch import FetchResult


CONFIG_TOML = """
[provider]
api_key = "abc123"

[location]
city = "New York"

[log]
path = "{log}"
"""

RECORDS = [
    {"date": "2025-03-26", "temperature": 40.0, "moon_rise": "05:12 AM",
     "moon_set": "03:20 PM", "moon_phase": "Full Moon"},
    {"date": "2025-03-27", "temperature": 55.0, "moon_rise": "06:05 AM",
     "moon_set": "04:31 PM", "moon_phase": "Waning Gibbous"},
]


@pytest.fixture()
def config_path(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML.format(log=(tmp_path / "astro.log").as_posix()))
    return path


def _run(monkeypatch, *argv):
    monkeypatch.setattr("sys.argv", ["astro-dash", *argv])
    cli.main()


def test_show_prints_summary_and_table(monkeypatch, capsys, config_path):
    monkeypatch.setattr(cli, "fetch_for_config", lambda config: FetchResult(records=RECORDS))

    _run(monkeypatch, "show", "--config", str(config_path))

    out = capsys.readouterr().out
    assert "New York" in out
    assert "40°F" in out
    assert "🌕 Full Moon" in out
    assert "2025-03-27" in out


def test_show_applies_filters(monkeypatch, capsys, config_path):
    monkeypatch.setattr(cli, "fetch_for_config", lambda config: FetchResult(records=RECORDS))

    _run(monkeypatch, "show", "--config", str(config_path), "--phase", "Waning Gibbous")

    out = capsys.readouterr().out
    assert "2025-03-27" in out
    assert "2025-03-26" not in out


def test_show_no_matches(monkeypatch, capsys, config_path):
    monkeypatch.setattr(cli, "fetch_for_config", lambda config: FetchResult(records=RECORDS))

    _run(monkeypatch, "show", "--config", str(config_path), "--min-temp", "90")

    assert "No data matches your filters." in capsys.readouterr().out


def test_show_with_chart(monkeypatch, capsys, config_path):
    monkeypatch.setattr(cli, "fetch_for_config", lambda config: FetchResult(records=RECORDS))

    _run(monkeypatch, "show", "--config", str(config_path), "--chart")

    assert "Average temperature" in capsys.readouterr().out


def test_show_fetch_error_exits_1(monkeypatch, capsys, config_path):
    monkeypatch.setattr(
        cli, "fetch_for_config", lambda config: FetchResult(error="Failed to fetch data for 2025-03-26: 401")
    )

    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "show", "--config", str(config_path))

    assert exc.value.code == 1
    assert "[error] Failed to fetch data" in capsys.readouterr().out


def test_show_missing_config_exits_1(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "show", "--config", str(tmp_path / "missing.toml"))

    assert exc.value.code == 1
    assert "Config file not found" in capsys.readouterr().out


def test_show_inverted_range_exits_1(monkeypatch, capsys, config_path):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "show", "--config", str(config_path), "--min-temp", "70", "--max-temp", "20")

    assert exc.value.code == 1
    assert "[error]" in capsys.readouterr().out


def test_phases_lists_options(monkeypatch, capsys, config_path):
    monkeypatch.setattr(cli, "fetch_for_config", lambda config: FetchResult(records=RECORDS))

    _run(monkeypatch, "phases", "--config", str(config_path))

    assert capsys.readouterr().out.splitlines() == ["All", "Full Moon", "Waning Gibbous"]

# Project: astro-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
app.py — Streamlit AstroDash dashboard with Apple-inspired dark UI.

Run with: streamlit run app/app.py
Requires: pip install -e ".[ui]"
"""

import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import html

import plotly.graph_objects as go
import streamlit as st

from astro_dash.analysis import fmt_stat
from astro_dash.chart import NO_MATCHES_MESSAGE
from astro_dash.config import load_config
from astro_dash.fetch import FetchResult, fetch_for_config
from astro_dash.filters import TEMP_SLIDER_MAX, TEMP_SLIDER_MIN
from astro_dash.moon import format_phase
from astro_dash.state import DashboardState, ERROR, LOADING
from astro_dash.utils import fmt_day


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="AstroDash",
    page_icon="🌙",
    layout="wide",
    initial_sidebar_state="collapsed",
)


# ─────────────────────────────────────────────────────────────
# CSS injection
# ─────────────────────────────────────────────────────────────

CUSTOM_CSS = """
<style>
  /* ── Reset Streamlit chrome ── */
  #MainMenu, footer, header { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; max-width: 960px; }

  /* ── Typography & base ── */
  html, body, [class*="css"] {
    font-family: -apple-system, BlinkMacSystemFont, "SF Pro Display",
                 "SF Pro Text", "Segoe UI", Roboto, sans-serif;
    background-color: #0a0a0a;
    color: #f5f5f7;
  }

  /* ── Title ── */
  .ad-title {
    font-size: 2.6rem;
    font-weight: 700;
    letter-spacing: -0.03em;
    text-align: center;
    margin-bottom: 0.25rem;
  }
  .ad-subtitle {
    color: #8e8e93;
    font-size: 0.95rem;
    text-align: center;
    margin-bottom: 1.5rem;
  }

  /* ── Cards ── */
  .wa-card {
    background: #1c1c1e;
    border: 1px solid #2c2c2e;
    border-radius: 16px;
    padding: 28px 32px;
    margin-bottom: 1.5rem;
  }

  /* ── Stat pills ── */
  .stat-pill {
    background: #2c2c2e;
    border-radius: 12px;
    padding: 14px 18px;
    display: inline-block;
    width: 100%;
  }
  .stat-label {
    font-size: 0.68rem;
    text-transform: uppercase;
    letter-spacing: 0.08em;
    color: #8e8e93;
    font-weight: 500;
  }
  .stat-value {
    font-size: 1.6rem;
    font-weight: 700;
    letter-spacing: -0.03em;
    color: #f5f5f7;
    line-height: 1.2;
  }

  /* ── Error card ── */
  .error-card {
    background: rgba(255, 69, 58, 0.1);
    border: 1px solid rgba(255, 69, 58, 0.3);
    border-radius: 12px;
    color: #ff453a;
    font-size: 1rem;
    padding: 20px 24px;
    text-align: center;
    margin: 1rem 0;
  }

  /* ── Section heading ── */
  .section-label {
    font-size: 0.72rem;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    color: #636366;
    font-weight: 600;
    margin-bottom: 0.75rem;
  }

  /* ── Records table ── */
  .wa-table { width: 100%; border-collapse: collapse; font-size: 0.95rem; }
  .wa-table th {
    font-size: 0.65rem;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    color: #636366;
    font-weight: 600;
    padding: 8px 12px;
    text-align: right;
    border-bottom: 1px solid #2c2c2e;
  }
  .wa-table th:first-child, .wa-table th:last-child { text-align: left; }
  .wa-table td {
    padding: 12px 12px;
    color: #f5f5f7;
    text-align: right;
    border-bottom: 1px solid #1c1c1e;
    font-variant-numeric: tabular-nums;
    font-weight: 500;
  }
  .wa-table td:first-child, .wa-table td:last-child { text-align: left; }
  .wa-table tr:hover td { background: #2c2c2e; }
  .wa-table td.empty { text-align: center; color: #8e8e93; }

  /* ── Footer ── */
  .wa-footer {
    text-align: center;
    color: #48484a;
    font-size: 0.8rem;
    padding: 3rem 0 1rem;
    letter-spacing: -0.005em;
  }
</style>
"""

st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(family="-apple-system, BlinkMacSystemFont, 'SF Pro Display', sans-serif",
              color="#8e8e93", size=12),
    margin=dict(l=8, r=8, t=32, b=8),
    xaxis=dict(showgrid=False, zeroline=False, tickfont=dict(color="#636366")),
    yaxis=dict(gridcolor="#2c2c2e", zeroline=False, tickfont=dict(color="#636366")),
)


def stat_html(label: str, value: str) -> str:
    """Render a stat pill as HTML."""
    return f"""
    <div class="stat-pill">
      <div class="stat-label">{label}</div>
      <div class="stat-value">{html.escape(value)}</div>
    </div>
    """


def table_html(records: list[dict]) -> str:
    """Render the filtered records as an HTML table, or a no-match row."""
    rows = ""
    for r in records:
        rows += f"""
        <tr>
          <td>{r["date"]}</td>
          <td>{r["temperature"]:.1f}</td>
          <td>{html.escape(r["moon_rise"])}</td>
          <td>{html.escape(r["moon_set"])}</td>
          <td>{html.escape(format_phase(r["moon_phase"]))}</td>
        </tr>
        """
    if not records:
        rows = f'<tr><td colspan="5" class="empty">{NO_MATCHES_MESSAGE}</td></tr>'

    return f"""
    <table class="wa-table">
      <thead>
        <tr>
          <th>Date</th>
          <th>Temperature (°F)</th>
          <th>Moon Rise</th>
          <th>Moon Set</th>
          <th>Moon Phase</th>
        </tr>
      </thead>
      <tbody>{rows}</tbody>
    </table>
    """


def load_dashboard() -> tuple[str, DashboardState]:
    """Fetch once per browser session; later reruns reuse the stored state."""
    if "dashboard" not in st.session_state:
        state = DashboardState()
        city = ""
        try:
            config = load_config()
            city = config["location"]["city"]
        except (FileNotFoundError, ValueError) as e:
            state.load(FetchResult(error=str(e)))
        if state.status == LOADING:
            with st.spinner("Loading..."):
                state.load(fetch_for_config(config))
        st.session_state.dashboard = state
        st.session_state.city = city
    return st.session_state.city, st.session_state.dashboard


# ─────────────────────────────────────────────────────────────
# SECTION 1: Header + data load
# ─────────────────────────────────────────────────────────────

st.markdown('<div class="ad-title">AstroDash</div>', unsafe_allow_html=True)

city, dashboard = load_dashboard()

if city:
    st.markdown(
        f'<div class="ad-subtitle">📍 {html.escape(city)} &nbsp;·&nbsp; '
        f'historical temperature and moon data</div>',
        unsafe_allow_html=True,
    )

if dashboard.status == ERROR:
    st.markdown(
        f'<div class="error-card">⚠️ Error: {html.escape(dashboard.error)}</div>',
        unsafe_allow_html=True,
    )
    st.stop()

# ─────────────────────────────────────────────────────────────
# SECTION 2: Summary statistics
# ─────────────────────────────────────────────────────────────

summary = dashboard.summary
stat_cols = st.columns(3)
stats = [
    ("Low Temp", fmt_stat(summary["lowest_temp"], "°F")),
    ("Earliest Moon Rise", fmt_stat(summary["earliest_moon_rise"])),
    ("Most Common Moon Phase", fmt_stat(summary["most_common_moon_phase"])),
]
for col, (label, val) in zip(stat_cols, stats):
    with col:
        st.markdown(stat_html(label, val), unsafe_allow_html=True)

st.markdown("<div style='height:1.5rem'></div>", unsafe_allow_html=True)

# ─────────────────────────────────────────────────────────────
# SECTION 3: Search and filters
# ─────────────────────────────────────────────────────────────

st.markdown('<div class="section-label">Filters</div>', unsafe_allow_html=True)

f_date, f_phase, f_temp = st.columns([1, 1, 2])
with f_date:
    query = st.text_input(
        label="Date",
        placeholder="Enter Date (YYYY-MM-DD)",
        key="date_query",
    )
with f_phase:
    phase = st.selectbox(
        label="Moon Phase",
        options=dashboard.phase_options,
        index=0,
        key="phase_filter",
    )
with f_temp:
    low, high = st.slider(
        label="Temperature Range (°F)",
        min_value=TEMP_SLIDER_MIN,
        max_value=TEMP_SLIDER_MAX,
        value=(TEMP_SLIDER_MIN, TEMP_SLIDER_MAX),
        key="temp_range",
    )

# Every widget change reruns the script, which re-derives the filtered view
dashboard.update_criteria(query=query, moon_phase=phase, temp_range=(low, high))
filtered = dashboard.filtered

# ─────────────────────────────────────────────────────────────
# SECTION 4: Records table
# ─────────────────────────────────────────────────────────────

st.markdown('<div class="wa-card">', unsafe_allow_html=True)
st.markdown(table_html(filtered), unsafe_allow_html=True)
st.markdown("</div>", unsafe_allow_html=True)

# ─────────────────────────────────────────────────────────────
# SECTION 5: Temperature chart
# ─────────────────────────────────────────────────────────────

if filtered:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[fmt_day(r["date"]) for r in filtered],
        y=[r["temperature"] for r in filtered],
        name="Avg °F",
        marker_color="rgba(10,132,255,0.6)",
        marker_line_width=0,
        hovertext=[format_phase(r["moon_phase"]) for r in filtered],
    ))
    fig.update_layout(
        **PLOTLY_LAYOUT,
        title=dict(text="Average Temperature (°F)", font=dict(color="#8e8e93", size=13)),
        height=280,
    )
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

# ─────────────────────────────────────────────────────────────
# Footer
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<div class="wa-footer">'
    'Powered by <a href="https://www.weatherapi.com" style="color:#0a84ff;text-decoration:none;">WeatherAPI.com</a>'
    ' &nbsp;·&nbsp; History API'
    '</div>',
    unsafe_allow_html=True,
)

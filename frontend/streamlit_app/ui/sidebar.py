# frontend/streamlit_app/ui/sidebar.py
# SPDX-License-Identifier: Apache-2.0
"""Sidebar composition for the leaderboard viewer.

The sidebar shows the effective configuration (data source, network label,
poll period) and hosts the theme selector. It reads configuration only; it
never fetches.

Returns
-------
`render_sidebar_and_status()` returns a context dictionary containing:
- `settings`: the loaded settings dataclass instance.
- `theme`: the selected theme name ("retro" or "classic").
- `switched`: True on the first run after the theme changed.
- `url`: the configured leaderboard URL (may be empty).
- `refresh_seconds`: the effective poll period after flooring.

This context object is passed to the view render functions.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from core.config import settings
from core.constants import THEMES
from core.state import ensure_defaults, note_theme


def _source_row(url: str) -> None:
    """Show the configured data source, or a hint when it is missing."""
    if not url:
        st.sidebar.warning("LEADERBOARD_JSON_URL is not set.")
        return
    st.sidebar.markdown(f"**Source**  \n[{url}]({url})")


def render_sidebar_and_status() -> dict[str, Any]:
    """Render the sidebar and return a context dict for the views."""
    ensure_defaults()

    st.sidebar.header("Leaderboard")

    theme = st.sidebar.radio(
        "Theme",
        THEMES,
        key="THEME",
        format_func=str.title,
        horizontal=True,
    )

    st.sidebar.markdown("### Configuration")
    _source_row(settings.LEADERBOARD_JSON_URL)
    st.sidebar.markdown(
        f"**Network**: `{settings.NETWORK_LABEL}`  \n"
        f"**Auto-refresh**: every `{settings.REFRESH_INTERVAL_SECONDS}` s  \n"
        f"**Timeout**: `{settings.HTTP_TIMEOUT}` s"
    )
    st.sidebar.caption(
        "Values come from the environment (or `.env`) and are read once at "
        "startup. Restart the app after changing them."
    )

    return dict(
        settings=settings,
        theme=theme,
        switched=note_theme(theme),
        url=settings.LEADERBOARD_JSON_URL,
        refresh_seconds=settings.REFRESH_INTERVAL_SECONDS,
    )

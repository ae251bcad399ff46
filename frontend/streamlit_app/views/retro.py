# frontend/streamlit_app/views/retro.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit view: Retro leaderboard

Purpose
-------
The contest page: banner, credit line, "Updated" timestamp with network pill,
a public-key search box, a Refresh button, the ranked table with Copy PK /
Open actions, and the producer's per-account errors.

Design Notes
------------
- The status line sits above the controls but depends on the load result, so
  it is rendered into a container reserved before the Refresh button and
  filled after `load_if_due()` returns.
- Searching is a pure filter over the stored payload; keystrokes rerun the
  script but never fetch.
- On a failed load the error panel is shown and the previous table stays.
"""

import html

import streamlit as st

from core.constants import PLACEHOLDER_LOADING, RETRO_FRACTION_DIGITS
from core.state import load_if_due
from services.formatting import format_timestamp
from services.leaderboard import filter_rows, producer_errors, rows_to_csv
from ui.components import error_panel, producer_error_list, table_leaderboard
from ui.keys import k
from ui.theme import inject_theme

VIEW = "retro"


def _status_line(updated_at: str | None, network: str) -> str:
    if not updated_at:
        return f'Updated: <span class="retro-pill">{PLACEHOLDER_LOADING}</span>'
    return (
        f'Updated: <span class="retro-green">{html.escape(format_timestamp(updated_at))}</span>'
        f'<span class="retro-pill">{html.escape(network)}</span>'
    )


def render(ctx: dict) -> None:
    """Render the retro leaderboard.

    Args:
        ctx: Sidebar context; uses `url`, `tick` and `settings`.
    """
    settings = ctx["settings"]
    inject_theme(VIEW)

    st.markdown(
        '<div class="retro-banner"><h1 class="retro-title">Leaderboard</h1></div>',
        unsafe_allow_html=True,
    )
    st.markdown(
        '<div class="retro-subtitle">💎Casper Community Contest 3, Diamond Hands💎</div>'
        '<div class="retro-credit">Built with CSPR.cloud data. '
        "Always verify on-chain, this is just for testing purposes.</div>",
        unsafe_allow_html=True,
    )

    status_slot = st.container()

    c_search, c_refresh = st.columns([4, 1], vertical_alignment="bottom")
    with c_search:
        query = st.text_input(
            "Search",
            placeholder="Search public key…",
            key=k(VIEW, "query"),
            label_visibility="collapsed",
        )
    with c_refresh:
        refresh_clicked = st.button(
            "Refresh", key=k(VIEW, "refresh"), type="primary", use_container_width=True
        )

    state = load_if_due(
        VIEW,
        url=ctx["url"],
        tick=ctx["tick"],
        force=refresh_clicked or ctx.get("switched", False),
    )
    payload = state.payload

    with status_slot:
        network = (payload.network if payload else None) or settings.NETWORK_LABEL
        st.markdown(
            _status_line(payload.updated_at if payload else None, network),
            unsafe_allow_html=True,
        )

    error_panel(state.error)

    rows = filter_rows(payload.rows if payload else (), query)
    table_leaderboard(
        VIEW,
        rows,
        fraction_digits=RETRO_FRACTION_DIGITS,
        explorer_template=settings.EXPLORER_ACCOUNT_URL,
    )

    if rows:
        st.download_button(
            "Download CSV",
            rows_to_csv(rows, settings.EXPLORER_ACCOUNT_URL),
            "leaderboard.csv",
            "text/csv",
            key=k(VIEW, "csv"),
        )

    producer_error_list(producer_errors(payload))

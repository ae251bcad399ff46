# frontend/streamlit_app/views/classic.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit view: Classic leaderboard

A plain rendering of the same feed. It has no search box and no copy
buttons. Amounts show up to nine fraction digits and may arrive as JSON
numbers. A status badge reports the last load outcome. The previously
loaded table stays on screen beneath an error message until a later load
succeeds.
"""

import html

import streamlit as st

from core.constants import (
    CLASSIC_FRACTION_DIGITS,
    PLACEHOLDER_NONE,
    PLACEHOLDER_UNKNOWN,
)
from core.state import load_if_due
from services.formatting import format_timestamp
from services.leaderboard import ViewState, producer_errors, rows_to_csv
from ui.components import dataframe_leaderboard
from ui.keys import k
from ui.theme import inject_theme

VIEW = "classic"


def _badge(status: str) -> str:
    return (
        f'<span class="classic-badge classic-badge-{html.escape(status)}">'
        f"{html.escape(status)}</span>"
    )


def _meta_line(state: ViewState, network: str) -> str:
    payload = state.payload
    produced = format_timestamp(payload.updated_at if payload else None, PLACEHOLDER_UNKNOWN)
    fetched = format_timestamp(state.fetched_at, PLACEHOLDER_NONE)
    return (
        f'<div class="classic-meta">Network <code>{html.escape(network)}</code>'
        f" · Snapshot {html.escape(produced)}"
        f" · Last fetched {html.escape(fetched)}"
        f" · {_badge(state.status)}</div>"
    )


def render(ctx: dict) -> None:
    """Render the classic leaderboard."""
    settings = ctx["settings"]
    inject_theme(VIEW)

    left, right = st.columns([5, 1], vertical_alignment="bottom")
    with left:
        st.markdown(
            '<div class="classic-header"><p class="classic-title">Leaderboard</p></div>',
            unsafe_allow_html=True,
        )
    with right:
        refresh_clicked = st.button(
            "Refresh", key=k(VIEW, "refresh"), use_container_width=True
        )

    state = load_if_due(
        VIEW,
        url=ctx["url"],
        tick=ctx["tick"],
        force=refresh_clicked or ctx.get("switched", False),
    )
    payload = state.payload
    network = (payload.network if payload else None) or settings.NETWORK_LABEL

    st.markdown(_meta_line(state, network), unsafe_allow_html=True)

    if state.error:
        if payload is not None:
            st.error(f"{state.error} (showing the last loaded snapshot)")
        else:
            st.error(state.error)

    rows = list(payload.rows) if payload else []
    dataframe_leaderboard(
        rows,
        fraction_digits=CLASSIC_FRACTION_DIGITS,
        explorer_template=settings.EXPLORER_ACCOUNT_URL,
    )
    if rows:
        st.caption(f"{len(rows)} accounts")
        st.download_button(
            "Download CSV",
            rows_to_csv(rows, settings.EXPLORER_ACCOUNT_URL),
            "leaderboard.csv",
            "text/csv",
            key=k(VIEW, "csv"),
        )

    errs = producer_errors(payload)
    if errs:
        with st.expander(f"Upstream errors ({len(errs)} shown)"):
            st.text("\n".join(f"{e.public_key}: {e.error}" for e in errs))

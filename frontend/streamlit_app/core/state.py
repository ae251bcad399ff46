# frontend/streamlit_app/core/state.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Session-scoped UI state helpers for the leaderboard viewer.

This module centralizes the **default values** we expect to exist in
`st.session_state` and the per-view `ViewState` record that carries the last
payload, status and fetch time between reruns.

Why this exists
---------------
- Streamlit reruns the whole script on every interaction and every
  auto-refresh tick. Anything that must survive a rerun (the last good
  payload, the search query, the tick a view last loaded for) has to live in
  `st.session_state`.
- Keeping defaults in one place prevents "magic strings" scattered across
  views and helps avoid typos.

Design notes
------------
- Initialization is **idempotent**: calling `ensure_defaults()` multiple
  times is safe; existing values are preserved.
- Each theme keeps its own `ViewState` under a namespaced key, so switching
  themes does not share or clobber state.
- `load_if_due()` is the only place a fetch is issued from the UI.
"""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Final

import streamlit as st

from services.leaderboard import LOADING, ViewState, refresh
from ui.keys import k

from .clients import get_http_session
from .config import settings

# Canonical set of session keys and their initial values.
DEFAULTS: Final[Mapping[str, Any]] = {
    # Theme chosen in the sidebar (seeded from LEADERBOARD_THEME).
    "THEME": settings.LEADERBOARD_THEME,
}

__all__ = [
    "DEFAULTS",
    "ensure_defaults",
    "get_view_state",
    "load_if_due",
    "note_theme",
    "set_view_state",
]


def ensure_defaults() -> None:
    """Ensure all expected session keys exist with sane defaults.

    Safe to call on every rerun; values written by widgets are preserved.
    """
    for key, default_value in DEFAULTS.items():
        st.session_state.setdefault(key, default_value)


def get_view_state(view: str) -> ViewState:
    """Return the `ViewState` for `view`, creating an idle one on first use."""
    return st.session_state.setdefault(k(view, "state"), ViewState())


def set_view_state(view: str, state: ViewState) -> None:
    """Replace the stored `ViewState` for `view` wholesale."""
    st.session_state[k(view, "state")] = state


def load_if_due(view: str, *, url: str, tick: int, force: bool = False) -> ViewState:
    """Load the leaderboard for `view` if this rerun calls for it.

    A load is due on the view's first render, whenever the auto-refresh
    counter has moved past the tick the view last loaded for, or when
    `force` is set (the Refresh button). Reruns caused by other widgets
    (e.g. typing in the search box) reuse the stored state untouched.

    Streamlit runs one script at a time per session and a new rerun stops
    the previous one, so whichever load completes last is what is stored.
    """
    state = get_view_state(view)
    # A run stopped mid-fetch leaves LOADING behind; retry rather than stick.
    if not force and state.last_tick == tick and state.status != LOADING:
        return state

    state = replace(state, status=LOADING, last_tick=tick)
    set_view_state(view, state)
    with st.spinner("Loading leaderboard…"):
        state = refresh(
            state,
            url,
            session=get_http_session(),
            timeout=settings.HTTP_TIMEOUT,
        )
    set_view_state(view, state)
    return state


def note_theme(theme: str) -> bool:
    """Record the rendered theme; True when it differs from the previous run.

    A switch counts as mounting the newly selected view, so the caller
    forces a load even if the auto-refresh tick has not moved.
    """
    previous = st.session_state.get("LAST_THEME")
    st.session_state["LAST_THEME"] = theme
    return previous is not None and previous != theme

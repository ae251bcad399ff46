# frontend/streamlit_app/core/clients.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
HTTP client factory for the leaderboard viewer.

This module exposes one cached constructor:

- `get_http_session()` → `requests.Session`

It is wrapped with `@st.cache_resource` so that:
  * A single session (and its connection pool) is created per Streamlit
    process, avoiding a fresh TLS handshake on every poll.
  * The cached instance persists across reruns triggered by UI interaction
    and by the auto-refresh timer.
  * Objects are stored as resources (not pickled), which is appropriate for
    network clients.

Caching:
  * The session sends `Cache-Control: no-cache` and `Pragma: no-cache` on every
    request. The leaderboard document changes between polls and an
    intermediate cache must not mask that.
  * No authentication headers are ever attached.

Testing:
  * `services.leaderboard.fetch_payload` accepts any object with a
    `get(url, headers=..., timeout=...)` method, so tests pass a fake session
    instead of touching this factory.
"""

import requests
import streamlit as st

NO_CACHE_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


def build_http_session() -> requests.Session:
    """Return a new `requests.Session` with the no-cache headers applied."""
    session = requests.Session()
    session.headers.update(NO_CACHE_HEADERS)
    return session


@st.cache_resource(show_spinner=False)
def get_http_session() -> requests.Session:
    """
    Construct (once) and return the cached HTTP session.

    Streamlit:
        `cache_resource` ensures a single instance is reused across reruns.
        Spinner is disabled because construction is fast and synchronous.
    """
    return build_http_session()

# frontend/streamlit_app/app.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

__doc__ = """Casper Leaderboard Viewer (Streamlit).

This module is the Streamlit entrypoint. It wires up the page chrome, the
sidebar (configuration + theme selector), the auto-refresh timer and the
selected theme's view.

Themes:
  retro    — Contest page with search, Copy PK and Open actions.
  classic  — Plain table with status badge and snapshot/fetch times.

Design notes:
* We import sibling packages (core/, services/, ui/, views/) by adding this
  directory to sys.path. This keeps `streamlit run frontend/streamlit_app/app.py`
  working from a plain checkout without installing the project.
* The auto-refresh component reruns the script every
  REFRESH_INTERVAL_SECONDS and returns a counter. Views fetch only when that
  counter moves (or on Refresh), never on ordinary widget reruns.
* Keep this file intentionally thin. Fetch/validate logic belongs to
  services/leaderboard.py and formatting to services/formatting.py.
"""

# ────────────────────── sys.path bootstrap for local packages ─────────────────
import pathlib
import sys

APP_DIR = pathlib.Path(__file__).resolve().parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))
# ──────────────────────────────────────────────────────────────────────────────

import logging
from typing import Final

from streamlit_autorefresh import st_autorefresh

from core.config import settings
from ui.layout import configure_page
from ui.sidebar import render_sidebar_and_status
from views import classic, retro

logging.basicConfig(
    level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)-8s: %(message)s"
)

# ─────────────────────────────── Page chrome ──────────────────────────────────
configure_page(title="Casper Leaderboard")

# The sidebar returns a context dict (settings, theme, url, refresh period)
# which is passed to the view renderer to keep state flow explicit.
ctx: dict = render_sidebar_and_status()

# ─────────────────────────────── Refresh timer ────────────────────────────────
# The browser-side timer is cleared by the component when the page goes away.
ctx["tick"] = st_autorefresh(
    interval=ctx["refresh_seconds"] * 1000, key="leaderboard:autorefresh"
) or 0

# ─────────────────────────────── View dispatch ────────────────────────────────
VIEWS: Final[dict] = {
    "retro": retro.render,
    "classic": classic.render,
}

VIEWS.get(ctx["theme"], retro.render)(ctx)

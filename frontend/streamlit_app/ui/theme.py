# frontend/streamlit_app/ui/theme.py
# SPDX-License-Identifier: Apache-2.0
"""Per-theme CSS for the leaderboard viewer.

Each theme only styles its own class prefix (`retro-*`, `classic-*`) plus the
numeric cells both themes use, so injecting the sheet never restyles core
Streamlit widgets beyond the page background.
"""

from __future__ import annotations

import streamlit as st

RETRO_CSS = """
<style>
.stApp { background: #f4ecd8; }
.retro-banner {
  border: 4px solid #1b1b1b; border-radius: 14px;
  background: linear-gradient(180deg, #ffe9a8 0%, #ffd166 100%);
  box-shadow: 6px 6px 0 #1b1b1b; padding: 1.2rem 2rem; margin-bottom: 1.5rem;
  text-align: center;
}
.retro-title { font-family: Georgia, serif; font-size: 3rem; margin: 0; color: #1b1b1b; }
.retro-subtitle { text-align: center; font-weight: 900; font-size: 1.25rem; }
.retro-credit { text-align: center; font-size: 0.85rem; font-weight: 600; }
.retro-pill {
  display: inline-block; border: 2px solid #1b1b1b; border-radius: 999px;
  padding: 0 0.6rem; margin-left: 0.5rem; background: #fff; font-size: 0.8rem;
}
.retro-green { color: #0a7a32; font-weight: 700; }
.retro-panel {
  border: 3px solid #1b1b1b; border-radius: 10px; background: #fffaf0;
  padding: 0.8rem 1rem; margin: 0.6rem 0;
}
.retro-th { font-weight: 900; text-transform: uppercase; font-size: 0.8rem; }
.retro-rank { font-weight: 900; font-size: 1.1rem; }
.retro-fullkey { font-size: 0.72rem; word-break: break-all; color: #444; }
.lb-num { text-align: right; font-variant-numeric: tabular-nums; }
.lb-strong { font-weight: 900; }
</style>
"""

CLASSIC_CSS = """
<style>
.classic-header { border-bottom: 1px solid #d0d7de; padding-bottom: 0.4rem; margin-bottom: 1rem; }
.classic-title { font-size: 2rem; font-weight: 600; margin: 0; }
.classic-meta { color: #57606a; font-size: 0.9rem; }
.classic-badge {
  display: inline-block; border-radius: 6px; padding: 0 0.5rem;
  font-size: 0.8rem; font-weight: 600; color: #fff;
}
.classic-badge-ok { background: #1a7f37; }
.classic-badge-error { background: #cf222e; }
.classic-badge-loading { background: #9a6700; }
.classic-badge-idle { background: #6e7781; }
.lb-num { text-align: right; font-variant-numeric: tabular-nums; }
</style>
"""

_SHEETS = {"retro": RETRO_CSS, "classic": CLASSIC_CSS}


def inject_theme(theme: str) -> None:
    """Inject the stylesheet for `theme`; unknown names inject nothing."""
    css = _SHEETS.get(theme)
    if css:
        st.markdown(css, unsafe_allow_html=True)

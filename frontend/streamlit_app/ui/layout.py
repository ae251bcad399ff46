# frontend/streamlit_app/ui/layout.py
# SPDX-License-Identifier: Apache-2.0
"""Page-level layout helpers for the leaderboard viewer.

Conventions
-----------
- Call `configure_page()` exactly once at the beginning of the app startup
  (Streamlit enforces that `st.set_page_config` is called before other UI).
- Views build their table with `table_columns()` so the header row and each
  data row share the same column ratios.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

import streamlit as st
from streamlit.delta_generator import DeltaGenerator

# Rank, Account, Total, Liquid, Staked, Actions.
TABLE_SPEC: Final[Sequence[float]] = (0.6, 3.4, 1.5, 1.4, 1.4, 1.7)


def configure_page(title: str) -> None:
    """Configure global Streamlit page options.

    Sets the browser tab title and the wide layout. The on-page heading is
    left to each theme, which renders its own banner.

    Notes:
      - Streamlit requires `st.set_page_config` to be called before any other
        page elements are created.
    """
    st.set_page_config(page_title=title, page_icon="💎", layout="wide")


def table_columns(spec: Sequence[float] = TABLE_SPEC) -> list[DeltaGenerator]:
    """Return one row of columns laid out for the leaderboard table."""
    return st.columns(spec, vertical_alignment="center")

# frontend/streamlit_app/ui/keys.py
# SPDX-License-Identifier: Apache-2.0
"""Namespaced keys for Streamlit widgets and session entries.

Both themes render the same controls (search box, refresh button, one copy
button per row). Without a namespace, the two views and the rows within a
view would collide and raise `StreamlitDuplicateElementKey`.

Usage
-----
    from ui.keys import k, row_key

    query = st.text_input("Search", key=k("retro", "query"))
    st.button("Copy PK", key=row_key("retro", "copy", i, row.identity(i)))
"""

from __future__ import annotations


def k(view: str, name: str) -> str:
    """Return a stable key of the form "<view>:<name>".

    Args:
      view: Short, stable namespace (the theme name, e.g. "retro").
      name: Identifier of the widget or session entry within that view.
    """
    return f"{view}:{name}"


def row_key(view: str, action: str, index: int, identity: str) -> str:
    """Key for a per-row widget.

    The position is included because a producer can list the same public key
    twice; identity alone would then collide.
    """
    return k(view, f"{action}:{index}:{identity}")

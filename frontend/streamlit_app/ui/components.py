# frontend/streamlit_app/ui/components.py
# SPDX-License-Identifier: Apache-2.0
"""Reusable Streamlit UI components for the leaderboard views.

Currently provided:
  • leaderboard_records(): Pure row → display-dict conversion shared by both themes.
  • table_leaderboard(): Row-per-line table with Copy/Open actions (retro).
  • dataframe_leaderboard(): Compact `st.dataframe` table with a link column (classic).
  • error_panel() / producer_error_list(): Fetch error and upstream error display.
  • copy_to_clipboard(): Best-effort browser clipboard write.
"""

from __future__ import annotations

import html
import json
import logging
from collections.abc import Sequence
from typing import Any

import streamlit as st
import streamlit.components.v1 as components

from core.constants import DEFAULT_EXPLORER_TEMPLATE, MAX_PRODUCER_ERRORS
from services.formatting import display_short_key, explorer_url, format_amount
from services.leaderboard import ProducerError, Row

from .keys import row_key
from .layout import table_columns

log = logging.getLogger(__name__)


def leaderboard_records(
    rows: Sequence[Row],
    *,
    fraction_digits: int,
    explorer_template: str = DEFAULT_EXPLORER_TEMPLATE,
) -> list[dict[str, Any]]:
    """Convert rows to display dicts, one per row, in the given order.

    Amounts are formatted here; rows themselves are left untouched.
    """
    return [
        {
            "Rank": r.rank,
            "Account": display_short_key(r),
            "Public key": r.public_key,
            "Total (CSPR)": format_amount(r.total_cspr, fraction_digits),
            "Liquid": format_amount(r.liquid_cspr, fraction_digits),
            "Staked": format_amount(r.staked_cspr, fraction_digits),
            "Explorer": explorer_url(r, explorer_template),
        }
        for r in rows
    ]


def _num(text: str, *, strong: bool = False) -> None:
    cls = "lb-num lb-strong" if strong else "lb-num"
    st.markdown(f'<div class="{cls}">{html.escape(text)}</div>', unsafe_allow_html=True)


def table_leaderboard(
    view: str,
    rows: Sequence[Row],
    *,
    fraction_digits: int,
    explorer_template: str = DEFAULT_EXPLORER_TEMPLATE,
) -> None:
    """Render the leaderboard one Streamlit row per account.

    Each line shows rank, linked short key with the full key underneath, the
    three amounts, and Copy PK / Open actions. Suited to the few hundred rows
    a contest board carries; there is no virtualization.
    """
    if not rows:
        st.info("No accounts to show.")
        return

    header = table_columns()
    for col, (label, numeric) in zip(
        header,
        [
            ("Rank", False),
            ("Account", False),
            ("Total (CSPR)", True),
            ("Liquid", True),
            ("Staked", True),
            ("Actions", True),
        ],
    ):
        cls = "retro-th lb-num" if numeric else "retro-th"
        col.markdown(f'<div class="{cls}">{label}</div>', unsafe_allow_html=True)

    records = leaderboard_records(
        rows, fraction_digits=fraction_digits, explorer_template=explorer_template
    )
    for i, (r, rec) in enumerate(zip(rows, records)):
        c_rank, c_acct, c_total, c_liquid, c_staked, c_actions = table_columns()
        with c_rank:
            rank = "" if rec["Rank"] is None else str(rec["Rank"])
            st.markdown(
                f'<div class="retro-rank">{html.escape(rank)}</div>',
                unsafe_allow_html=True,
            )
        with c_acct:
            link = html.escape(rec["Explorer"], quote=True)
            st.markdown(
                f'<a href="{link}" target="_blank" rel="noreferrer">'
                f'{html.escape(rec["Account"])}</a>'
                f'<div class="retro-fullkey">{html.escape(r.public_key)}</div>',
                unsafe_allow_html=True,
            )
        with c_total:
            _num(rec["Total (CSPR)"], strong=True)
        with c_liquid:
            _num(rec["Liquid"])
        with c_staked:
            _num(rec["Staked"])
        with c_actions:
            a_copy, a_open = st.columns(2)
            with a_copy:
                if st.button(
                    "Copy PK",
                    key=row_key(view, "copy", i, r.identity(i)),
                    use_container_width=True,
                ):
                    copy_to_clipboard(r.public_key)
            with a_open:
                st.link_button("Open", rec["Explorer"], use_container_width=True)


def dataframe_leaderboard(
    rows: Sequence[Row],
    *,
    fraction_digits: int,
    explorer_template: str = DEFAULT_EXPLORER_TEMPLATE,
) -> None:
    """Render the leaderboard as a static `st.dataframe` with an Open link column."""
    if not rows:
        st.info("No accounts to show.")
        return

    st.dataframe(
        leaderboard_records(
            rows, fraction_digits=fraction_digits, explorer_template=explorer_template
        ),
        use_container_width=True,
        hide_index=True,
        column_config={
            "Rank": st.column_config.NumberColumn("Rank", format="%d", width="small"),
            "Public key": st.column_config.TextColumn("Public key", width="large"),
            "Explorer": st.column_config.LinkColumn("Actions", display_text="Open"),
        },
    )


def error_panel(message: str | None) -> None:
    """Show the last load error above whatever data is still on screen."""
    if not message:
        return
    st.markdown(
        '<div class="retro-panel"><strong>Error</strong>'
        f"<div>{html.escape(message)}</div></div>",
        unsafe_allow_html=True,
    )


def producer_error_list(errors: Sequence[ProducerError]) -> None:
    """List upstream per-account errors verbatim, capped at the first ten."""
    if not errors:
        return
    items = "".join(
        f"<li><strong>{html.escape(e.public_key)}</strong>: {html.escape(e.error)}</li>"
        for e in list(errors)[:MAX_PRODUCER_ERRORS]
    )
    st.markdown(
        f'<div class="retro-panel"><strong>Fetch errors</strong><ul>{items}</ul></div>',
        unsafe_allow_html=True,
    )


def copy_to_clipboard(text: str) -> None:
    """Ask the browser to put `text` on the clipboard; ignore any failure.

    The write happens in a zero-height component. Permission denials and
    insecure contexts reject the clipboard promise, which the script drops.
    Errors raised while injecting the component are logged and dropped too,
    so the caller's page never changes because of a copy.
    """
    # Keep "</script>" inside the key from closing the tag.
    literal = json.dumps(text).replace("</", "<\\/")
    script = (
        "<script>(function(){"
        f"var text={literal};"
        "try{"
        "var nav=(window.parent&&window.parent.navigator)||navigator;"
        "nav.clipboard.writeText(text).catch(function(){});"
        "}catch(e){}"
        "})();</script>"
    )
    try:
        components.html(script, height=0)
    except Exception:
        log.debug("Clipboard write could not be injected", exc_info=True)

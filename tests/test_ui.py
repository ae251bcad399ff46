# tests/test_ui.py
# SPDX-License-Identifier: Apache-2.0
"""UI helpers that can run without a Streamlit server.

Streamlit calls are patched out; only the decisions made around them
(records, keys, load scheduling, clipboard fallbacks) are checked.
"""

from __future__ import annotations

import contextlib
from types import SimpleNamespace

import pytest

import core.state as state_mod
import ui.components as components_mod
from conftest import PK_A, PK_B, PK_C, FakeSession, make_response
from services.leaderboard import ERROR, OK, LeaderboardPayload, ViewState, filter_rows
from ui.keys import k, row_key


# ---------------------------------------------------------------------------
# leaderboard_records
# ---------------------------------------------------------------------------


@pytest.fixture
def payload(leaderboard_doc):
    return LeaderboardPayload.from_json(leaderboard_doc)


def test_record_count_matches_rows_with_empty_query(payload):
    rows = filter_rows(payload.rows, "")
    records = components_mod.leaderboard_records(rows, fraction_digits=6)
    assert len(records) == len(payload.rows)


def test_records_format_amounts_and_links(payload):
    rec = components_mod.leaderboard_records(payload.rows, fraction_digits=6)

    assert rec[0]["Total (CSPR)"] == "1,234,567.123457"
    assert rec[0]["Explorer"] == f"https://testnet.cspr.live/account/{PK_A}"
    assert rec[1]["Staked"] == "0"
    # Non-numeric cell falls through unchanged.
    assert rec[2]["Staked"] == "n/a"
    # Missing short form and link are derived.
    assert rec[2]["Account"] == f"{PK_C[:8]}…{PK_C[-6:]}"
    assert rec[2]["Explorer"] == f"https://testnet.cspr.live/account/{PK_C}"


def test_records_respect_explorer_template(payload):
    rec = components_mod.leaderboard_records(
        payload.rows, fraction_digits=9, explorer_template="https://x.test/{public_key}"
    )
    # Supplied links win over the template.
    assert rec[0]["Explorer"].startswith("https://testnet.cspr.live/")
    assert rec[1]["Explorer"] == f"https://x.test/{PK_B}"


def test_records_do_not_mutate_rows(payload):
    before = list(payload.rows)
    components_mod.leaderboard_records(payload.rows, fraction_digits=6)
    assert list(payload.rows) == before


# ---------------------------------------------------------------------------
# copy_to_clipboard
# ---------------------------------------------------------------------------


def test_copy_injects_guarded_script(monkeypatch):
    seen = {}

    def fake_html(body, height):
        seen["body"], seen["height"] = body, height

    monkeypatch.setattr(components_mod.components, "html", fake_html)
    components_mod.copy_to_clipboard(PK_A)

    assert seen["height"] == 0
    assert f'"{PK_A}"' in seen["body"]
    assert "writeText" in seen["body"]
    assert ".catch(" in seen["body"]


def test_copy_escapes_closing_script_tag(monkeypatch):
    seen = {}
    monkeypatch.setattr(
        components_mod.components, "html", lambda body, height: seen.setdefault("body", body)
    )
    components_mod.copy_to_clipboard("</script><b>x")
    assert seen["body"].count("</script>") == 1


def test_copy_failure_is_silent(monkeypatch):
    def boom(*_a, **_k):
        raise RuntimeError("no clipboard here")

    monkeypatch.setattr(components_mod.components, "html", boom)
    assert components_mod.copy_to_clipboard(PK_A) is None


# ---------------------------------------------------------------------------
# keys
# ---------------------------------------------------------------------------


def test_keys_are_namespaced_per_view_and_row():
    assert k("retro", "query") == "retro:query"
    assert k("retro", "query") != k("classic", "query")
    assert row_key("retro", "copy", 0, PK_A) != row_key("retro", "copy", 1, PK_A)


# ---------------------------------------------------------------------------
# load_if_due
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_st(monkeypatch):
    """Swap `core.state.st` for a namespace with a plain-dict session state."""
    fake = SimpleNamespace(
        session_state={},
        spinner=lambda *_a, **_k: contextlib.nullcontext(),
    )
    monkeypatch.setattr(state_mod, "st", fake)
    return fake


@pytest.fixture
def use_session(monkeypatch):
    def _use(session):
        monkeypatch.setattr(state_mod, "get_http_session", lambda: session)
        return session

    return _use


def test_first_render_loads(fake_st, use_session, leaderboard_doc):
    session = use_session(FakeSession(make_response(200, leaderboard_doc)))

    st_state = state_mod.load_if_due("retro", url="https://x.test/lb.json", tick=0)

    assert st_state.status == OK
    assert st_state.last_tick == 0
    assert len(session.calls) == 1
    assert fake_st.session_state["retro:state"] is st_state


def test_same_tick_does_not_refetch(fake_st, use_session, leaderboard_doc):
    session = use_session(FakeSession(make_response(200, leaderboard_doc)))

    first = state_mod.load_if_due("retro", url="https://x.test/lb.json", tick=3)
    again = state_mod.load_if_due("retro", url="https://x.test/lb.json", tick=3)

    assert again is first
    assert len(session.calls) == 1


def test_new_tick_and_manual_refresh_fetch(fake_st, use_session, leaderboard_doc):
    session = use_session(
        FakeSession(
            make_response(200, leaderboard_doc),
            make_response(200, leaderboard_doc),
            make_response(200, leaderboard_doc),
        )
    )

    state_mod.load_if_due("retro", url="https://x.test/lb.json", tick=0)
    state_mod.load_if_due("retro", url="https://x.test/lb.json", tick=1)
    state_mod.load_if_due("retro", url="https://x.test/lb.json", tick=1, force=True)

    assert len(session.calls) == 3


def test_failed_tick_keeps_stale_payload(fake_st, use_session, leaderboard_doc):
    use_session(FakeSession(make_response(200, leaderboard_doc), make_response(500)))

    good = state_mod.load_if_due("classic", url="https://x.test/lb.json", tick=0)
    bad = state_mod.load_if_due("classic", url="https://x.test/lb.json", tick=1)

    assert bad.status == ERROR
    assert "500" in bad.error
    assert bad.payload is good.payload


def test_views_keep_separate_state(fake_st, use_session, leaderboard_doc):
    use_session(
        FakeSession(make_response(200, leaderboard_doc), make_response(200, leaderboard_doc))
    )

    state_mod.load_if_due("retro", url="https://x.test/lb.json", tick=0)
    assert isinstance(state_mod.get_view_state("classic"), ViewState)
    assert state_mod.get_view_state("classic").payload is None


def test_interrupted_load_is_retried(fake_st, use_session, leaderboard_doc):
    session = use_session(FakeSession(make_response(200, leaderboard_doc)))
    state_mod.set_view_state("retro", ViewState(status="loading", last_tick=2))

    result = state_mod.load_if_due("retro", url="https://x.test/lb.json", tick=2)

    assert result.status == OK
    assert len(session.calls) == 1


def test_theme_switch_is_reported_once(fake_st):
    assert state_mod.note_theme("retro") is False
    assert state_mod.note_theme("retro") is False
    assert state_mod.note_theme("classic") is True
    assert state_mod.note_theme("classic") is False
    assert state_mod.note_theme("retro") is True


def test_returning_to_a_theme_reloads_it(fake_st, use_session, leaderboard_doc):
    session = use_session(
        FakeSession(
            make_response(200, leaderboard_doc),
            make_response(200, leaderboard_doc),
            make_response(200, leaderboard_doc),
        )
    )
    url = "https://x.test/lb.json"

    state_mod.note_theme("retro")
    state_mod.load_if_due("retro", url=url, tick=0)
    switched = state_mod.note_theme("classic")
    state_mod.load_if_due("classic", url=url, tick=0, force=switched)
    switched = state_mod.note_theme("retro")
    state_mod.load_if_due("retro", url=url, tick=0, force=switched)

    assert len(session.calls) == 3

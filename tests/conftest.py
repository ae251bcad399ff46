# tests/conftest.py
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: canned leaderboard documents and a fake HTTP session."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

PK_A = "01" + "a1" * 32
PK_B = "02" + "b2" * 32 + "ff"
PK_C = "01" + "c3" * 32


def make_response(status: int = 200, body: Any = None, raw: bytes | None = None) -> requests.Response:
    """Build a real `requests.Response` without touching the network."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = "https://example.test/leaderboard.json"
    if raw is not None:
        resp._content = raw
    else:
        resp._content = json.dumps(body if body is not None else {}).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class FakeSession:
    """Stands in for `requests.Session`; replays queued responses or errors."""

    def __init__(self, *outcomes: requests.Response | Exception) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def leaderboard_doc() -> dict[str, Any]:
    return {
        "network": "testnet",
        "updated_at": "2025-06-01T12:00:00+00:00",
        "rows": [
            {
                "rank": 1,
                "public_key_short": "01a1a1a1…a1a1a1",
                "total_cspr": "1234567.123456789",
                "liquid_cspr": "1000.5",
                "staked_cspr": "1233566.623456789",
                "public_key": PK_A,
                "cspr_live_url": f"https://testnet.cspr.live/account/{PK_A}",
                "total_motes": "1234567123456789",
            },
            {
                "rank": 2,
                "public_key_short": "02b2b2b2…b2b2ff",
                "total_cspr": "500.000000000",
                "liquid_cspr": "500.000000000",
                "staked_cspr": "0.000000000",
                "public_key": PK_B,
            },
            {
                "rank": 3,
                "total_cspr": 12.25,
                "liquid_cspr": 2,
                "staked_cspr": "n/a",
                "public_key": PK_C,
            },
        ],
        "errors": [{"public_key": f"03{i:02d}", "error": "404 Not Found"} for i in range(12)],
    }


@pytest.fixture
def ok_session(leaderboard_doc):
    return FakeSession(make_response(200, leaderboard_doc))

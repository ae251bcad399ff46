# frontend/streamlit_app/services/leaderboard.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Leaderboard service: fetch, validate, hold and filter the ranking document.

The leaderboard is computed elsewhere and published as a single JSON file.
This module consumes it:
  • Data model (`Row`, `ProducerError`, `LeaderboardPayload`) built from the
    raw JSON without re-sorting or re-parsing amounts
  • `fetch_payload()` to GET + validate the document
  • `refresh()` as the load-operation boundary that turns every failure into
    a status/message pair on a `ViewState`
  • `filter_rows()` for the search box, `producer_errors()` for the error list
    and `rows_to_csv()` for the download button

Design principles
-----------------
- Amounts stay exactly as the producer wrote them (strings, or numbers in the
  classic feed). They are parsed only when formatted for display.
- A failed load never clears what is on screen; the last good payload stays
  in `ViewState.payload` next to the error message.
- No widgets here; views own rendering and session state.
"""

import csv
import io
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Protocol

import requests

from core.clients import NO_CACHE_HEADERS
from core.constants import (
    DEFAULT_EXPLORER_TEMPLATE,
    DEFAULT_HTTP_TIMEOUT,
    MAX_PRODUCER_ERRORS,
)

from .formatting import explorer_url

log = logging.getLogger(__name__)

Amount = str | int | float

# =============================================================================
# Errors
# =============================================================================


class LeaderboardError(Exception):
    """Base class for every failure the load operation can surface."""


class ConfigError(LeaderboardError):
    """The leaderboard URL is not configured."""


class FetchError(LeaderboardError):
    """Non-success HTTP response or transport failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SchemaError(LeaderboardError):
    """Body is not JSON, or lacks a `rows` list."""


# =============================================================================
# Data model
# =============================================================================


@dataclass(frozen=True)
class Row:
    """One ranked account. Amount fields hold the producer's raw values."""

    rank: int | None
    public_key: str
    total_cspr: Amount
    liquid_cspr: Amount
    staked_cspr: Amount
    public_key_short: str | None = None
    cspr_live_url: str | None = None
    total_motes: str | None = None
    liquid_motes: str | None = None
    staked_motes: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Row:
        rank = raw.get("rank")
        try:
            rank = int(rank) if rank is not None else None
        except (TypeError, ValueError):
            rank = None
        return cls(
            rank=rank,
            public_key=str(raw.get("public_key") or ""),
            total_cspr=_amount(raw.get("total_cspr")),
            liquid_cspr=_amount(raw.get("liquid_cspr")),
            staked_cspr=_amount(raw.get("staked_cspr")),
            public_key_short=_optional_str(raw.get("public_key_short")),
            cspr_live_url=_optional_str(raw.get("cspr_live_url")),
            total_motes=_optional_str(raw.get("total_motes")),
            liquid_motes=_optional_str(raw.get("liquid_motes")),
            staked_motes=_optional_str(raw.get("staked_motes")),
        )

    def identity(self, index: int) -> str:
        """List-rendering identity: the public key, else the position."""
        return self.public_key or str(index)


@dataclass(frozen=True)
class ProducerError:
    """An account the upstream producer failed to resolve."""

    public_key: str
    error: str

    @classmethod
    def from_raw(cls, raw: Any) -> ProducerError:
        if isinstance(raw, Mapping):
            return cls(
                public_key=str(raw.get("public_key") or ""),
                error=str(raw.get("error") or ""),
            )
        # Shown verbatim; the producer owns the meaning.
        return cls(public_key="", error=str(raw))


@dataclass(frozen=True)
class LeaderboardPayload:
    """The whole snapshot. Replaced wholesale on every successful fetch."""

    rows: tuple[Row, ...]
    network: str | None = None
    updated_at: str | None = None
    errors: tuple[ProducerError, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, doc: Any) -> LeaderboardPayload:
        """Validate the minimal shape and build a payload.

        Raises:
            SchemaError: `doc` is not an object, `rows` is missing or not a
                list, or a row entry is not an object.
        """
        if not isinstance(doc, Mapping):
            raise SchemaError("JSON did not contain rows[]")
        raw_rows = doc.get("rows")
        if not isinstance(raw_rows, list):
            raise SchemaError("JSON did not contain rows[]")

        rows: list[Row] = []
        for i, raw in enumerate(raw_rows):
            if not isinstance(raw, Mapping):
                raise SchemaError(f"rows[{i}] is not an object")
            rows.append(Row.from_dict(raw))

        raw_errors = doc.get("errors") or []
        if not isinstance(raw_errors, list):
            raw_errors = []

        return cls(
            rows=tuple(rows),
            network=_optional_str(doc.get("network")),
            updated_at=_optional_str(doc.get("updated_at")),
            errors=tuple(ProducerError.from_raw(e) for e in raw_errors),
        )


def _amount(value: Any) -> Amount:
    if isinstance(value, bool) or value is None:
        return "" if value is None else str(value)
    if isinstance(value, (int, float, str)):
        return value
    return str(value)


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


# =============================================================================
# Fetch
# =============================================================================


class HttpGetter(Protocol):
    def get(self, url: str, **kwargs: Any) -> requests.Response: ...


def fetch_payload(
    url: str | None,
    *,
    session: HttpGetter | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> LeaderboardPayload:
    """GET the leaderboard document and validate it.

    Caching is always bypassed via request headers. No auth is sent.

    Args:
        url: Absolute URL of the JSON document.
        session: Anything with a `requests`-style `get`. Defaults to the
            `requests` module itself.
        timeout: Seconds before the request is abandoned.

    Raises:
        ConfigError: `url` is empty.
        FetchError: Non-2xx status (with `status_code`) or transport error.
        SchemaError: Body is not JSON or has no `rows` list.
    """
    if not url:
        raise ConfigError(
            "Missing LEADERBOARD_JSON_URL in .env / environment variables."
        )

    http = session or requests
    try:
        resp = http.get(url, headers=dict(NO_CACHE_HEADERS), timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Fetch failed: {e}") from e

    if not resp.ok:
        raise FetchError(f"Fetch failed: {resp.status_code}", resp.status_code)

    try:
        doc = resp.json()
    except ValueError as e:
        raise SchemaError(f"Response was not valid JSON: {e}") from e

    return LeaderboardPayload.from_json(doc)


# =============================================================================
# Load-operation boundary
# =============================================================================

IDLE = "idle"
LOADING = "loading"
OK = "ok"
ERROR = "error"


@dataclass
class ViewState:
    """Per-view state kept in `st.session_state` between reruns.

    `fetched_at` is the client-observed time of the last successful fetch,
    distinct from the producer's `payload.updated_at`. `last_tick` is the
    auto-refresh counter value this view last loaded for (-1 = never).
    """

    status: str = IDLE
    payload: LeaderboardPayload | None = None
    error: str | None = None
    fetched_at: datetime | None = None
    last_tick: int = -1


def refresh(
    state: ViewState,
    url: str | None,
    *,
    session: HttpGetter | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    now: datetime | None = None,
) -> ViewState:
    """Run one load and return the next state. Never raises on load failure.

    On success the payload is replaced wholesale and `fetched_at` recorded.
    On failure only `status`/`error` change; the previous payload stays.
    """
    try:
        payload = fetch_payload(url, session=session, timeout=timeout)
    except LeaderboardError as e:
        log.warning("Leaderboard load failed: %s", e)
        return replace(state, status=ERROR, error=str(e))

    log.info("Loaded %d leaderboard rows from %s", len(payload.rows), url)
    return replace(
        state,
        status=OK,
        payload=payload,
        error=None,
        fetched_at=now or datetime.now(timezone.utc),
    )


# =============================================================================
# Derived views
# =============================================================================


def filter_rows(rows: Sequence[Row], query: str | None) -> list[Row]:
    """Case-insensitive substring match on the full or short public key."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(rows)
    return [
        r
        for r in rows
        if needle in r.public_key.lower()
        or needle in (r.public_key_short or "").lower()
    ]


def producer_errors(
    payload: LeaderboardPayload | None, limit: int = MAX_PRODUCER_ERRORS
) -> list[ProducerError]:
    """First `limit` upstream resolution errors, in producer order."""
    if payload is None:
        return []
    return list(payload.errors[:limit])


CSV_FIELDS = [
    "rank",
    "public_key_short",
    "total_cspr",
    "liquid_cspr",
    "staked_cspr",
    "public_key",
    "cspr_live_url",
    "total_motes",
    "liquid_motes",
    "staked_motes",
]


def rows_to_csv(
    rows: Iterable[Row], explorer_template: str = DEFAULT_EXPLORER_TEMPLATE
) -> bytes:
    """Serialize rows as UTF-8 CSV with the producer's raw amount values."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS)
    writer.writeheader()
    for r in rows:
        writer.writerow(
            {
                "rank": "" if r.rank is None else r.rank,
                "public_key_short": r.public_key_short or "",
                "total_cspr": r.total_cspr,
                "liquid_cspr": r.liquid_cspr,
                "staked_cspr": r.staked_cspr,
                "public_key": r.public_key,
                "cspr_live_url": explorer_url(r, explorer_template),
                "total_motes": r.total_motes or "",
                "liquid_motes": r.liquid_motes or "",
                "staked_motes": r.staked_motes or "",
            }
        )
    return buf.getvalue().encode("utf-8")

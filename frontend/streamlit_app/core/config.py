# frontend/streamlit_app/core/config.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Centralized, immutable application configuration for the leaderboard viewer.

This module defines a frozen `Settings` dataclass whose fields are populated
from environment variables (loaded via python-dotenv if a `.env` file is
present). The resulting singleton `settings` is imported by other modules to
avoid scattering `os.getenv` calls throughout the codebase.

Design goals
------------
- **Single source of truth**: All tunables live here; other modules consume
  `settings` rather than reading environment variables directly.
- **Read once**: Values are captured at process start and are not hot-reloaded.
  Changes require a restart (or re-instantiation in tests).
- **No crash on missing URL**: `LEADERBOARD_JSON_URL` defaults to an empty
  string. The load operation turns that into a persistent banner instead of
  failing at import.

Testing
-------
- Set environment variables **before** importing this module, or reload it:
      >>> import importlib, os
      >>> os.environ["REFRESH_INTERVAL_SECONDS"] = "5"
      >>> import core.config as cfg
      >>> importlib.reload(cfg)
      >>> assert cfg.settings.REFRESH_INTERVAL_SECONDS == 10
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import (
    DEFAULT_EXPLORER_TEMPLATE,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_NETWORK_LABEL,
    DEFAULT_REFRESH_SECONDS,
    DEFAULT_THEME,
    MIN_REFRESH_SECONDS,
    THEMES,
)

# Load key-value pairs from a local `.env` file into process environment, if
# present. `override=False` by default, so pre-set env vars take precedence.
load_dotenv()


def clamp_refresh_interval(raw: str | int | None) -> int:
    """Parse a refresh period in seconds and floor it at `MIN_REFRESH_SECONDS`.

    Unset, blank or non-integer input falls back to `DEFAULT_REFRESH_SECONDS`.
    """
    if raw is None or str(raw).strip() == "":
        return DEFAULT_REFRESH_SECONDS
    try:
        seconds = int(str(raw).strip())
    except ValueError:
        return DEFAULT_REFRESH_SECONDS
    return max(MIN_REFRESH_SECONDS, seconds)


def _positive_int(raw: str | None, default: int) -> int:
    try:
        value = int(raw) if raw else default
    except ValueError:
        return default
    return value if value > 0 else default


def _log_level(raw: str | None) -> str:
    name = (raw or "").strip().upper()
    return name if name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL") else "INFO"


def _theme(raw: str | None) -> str:
    name = (raw or "").strip().lower()
    return name if name in THEMES else DEFAULT_THEME


@dataclass(frozen=True)
class Settings:
    """
    Immutable application settings.

    Each attribute is populated from the corresponding environment variable;
    when unset, a documented default is used. See `.env.example` for a
    template of common values.
    """

    # --- Data source ---------------------------------------------------------
    # Absolute URL of the pre-computed leaderboard JSON. Required.
    LEADERBOARD_JSON_URL: str = os.getenv("LEADERBOARD_JSON_URL", "").strip()
    # Label shown when the payload itself carries no `network`.
    NETWORK_LABEL: str = os.getenv("NETWORK_LABEL") or DEFAULT_NETWORK_LABEL

    # --- Polling -------------------------------------------------------------
    REFRESH_INTERVAL_SECONDS: int = clamp_refresh_interval(
        os.getenv("REFRESH_INTERVAL_SECONDS")
    )
    HTTP_TIMEOUT: int = _positive_int(os.getenv("HTTP_TIMEOUT"), DEFAULT_HTTP_TIMEOUT)

    # --- Presentation --------------------------------------------------------
    # Fallback explorer link when a row carries no `cspr_live_url`.
    EXPLORER_ACCOUNT_URL: str = (
        os.getenv("EXPLORER_ACCOUNT_URL") or DEFAULT_EXPLORER_TEMPLATE
    )
    # Theme selected in the sidebar on first render.
    LEADERBOARD_THEME: str = _theme(os.getenv("LEADERBOARD_THEME"))

    # --- Logging -------------------------------------------------------------
    LOG_LEVEL: str = _log_level(os.getenv("LOG_LEVEL"))


# Singleton settings object imported by consumers.
settings = Settings()

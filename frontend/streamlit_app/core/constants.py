# frontend/streamlit_app/core/constants.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Display and scheduling constants for the leaderboard viewer.

This module centralizes:
  1) **Refresh scheduling** bounds (default poll period and the floor applied
     to operator overrides).
  2) **Presentation caps** shared by both themes: fraction digits per theme,
     how many producer errors to list, and how account keys are elided.

Design notes
------------
- Constants are typed `Final` to communicate immutability and to help static
  analyzers catch accidental reassignment.
- Values here are not environment-driven; anything an operator may tune lives
  in `core.config.Settings` instead.
"""

from typing import Final

# ---------------------------------------------------------------------------
# Scheduling (seconds)
# ---------------------------------------------------------------------------

#: Poll period used when `REFRESH_INTERVAL_SECONDS` is unset or malformed.
DEFAULT_REFRESH_SECONDS: Final[int] = 60

#: Overrides below this are raised to it so a typo can't hammer the host.
MIN_REFRESH_SECONDS: Final[int] = 10

#: Per-request timeout used when `HTTP_TIMEOUT` is unset.
DEFAULT_HTTP_TIMEOUT: Final[int] = 20

# ---------------------------------------------------------------------------
# Network / explorer
# ---------------------------------------------------------------------------

DEFAULT_NETWORK_LABEL: Final[str] = "testnet"

#: `{public_key}` is interpolated verbatim; no validation of the key shape.
DEFAULT_EXPLORER_TEMPLATE: Final[str] = "https://testnet.cspr.live/account/{public_key}"

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

#: Upstream resolution errors listed under the table.
MAX_PRODUCER_ERRORS: Final[int] = 10

#: Leading/trailing characters kept when deriving a short public key.
KEY_PREFIX: Final[int] = 8
KEY_SUFFIX: Final[int] = 6

#: Fraction-digit cap for CSPR amounts, per theme.
RETRO_FRACTION_DIGITS: Final[int] = 6
CLASSIC_FRACTION_DIGITS: Final[int] = 9

#: Known themes, in sidebar order.
THEMES: Final[tuple[str, ...]] = ("retro", "classic")
DEFAULT_THEME: Final[str] = "retro"

# Timestamp placeholders.
PLACEHOLDER_LOADING: Final[str] = "loading…"
PLACEHOLDER_UNKNOWN: Final[str] = "?"
PLACEHOLDER_NONE: Final[str] = "—"

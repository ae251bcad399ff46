# frontend/streamlit_app/services/formatting.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Presentation helpers for leaderboard values.

Everything here is a pure string transformation. Rendering must never fail
because one cell is odd, so each helper degrades to the raw input (or a
placeholder) rather than raising.
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING, Any

from core.constants import (
    DEFAULT_EXPLORER_TEMPLATE,
    KEY_PREFIX,
    KEY_SUFFIX,
    PLACEHOLDER_NONE,
)

if TYPE_CHECKING:
    from .leaderboard import Row


def format_amount(value: Any, max_fraction_digits: int) -> str:
    """Group thousands and cap fraction digits; return `value` as-is if not numeric.

    Parsing goes through `Decimal` so 9-decimal CSPR strings keep full
    precision. Trailing zeros are dropped ("12.500000000" → "12.5").

    Examples:
      >>> format_amount("1234567.1", 6)
      '1,234,567.1'
      >>> format_amount("abc", 6)
      'abc'
    """
    raw = "" if value is None else str(value)
    if isinstance(value, bool) or not raw.strip():
        return raw
    # Decimal accepts "1_000"; a grouped string is not a plain number here.
    if "_" in raw:
        return raw
    try:
        d = Decimal(raw.strip())
    except InvalidOperation:
        return raw
    if not d.is_finite():
        return raw

    with localcontext() as ctx:
        # Every integer digit (exponent included) plus the fraction cap.
        ctx.prec = max(60, d.adjusted() + max_fraction_digits + 2)
        try:
            q = d.quantize(
                Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_UP
            )
        except InvalidOperation:
            return raw

    text = f"{q:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_timestamp(value: str | datetime | None, placeholder: str = PLACEHOLDER_NONE) -> str:
    """Render an ISO-8601 string or datetime in local time.

    Uses the process locale's date and time representation. Missing values
    return `placeholder`; unparseable strings are shown verbatim.
    """
    if value is None or value == "":
        return placeholder
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            # `fromisoformat` only learned the "Z" suffix in 3.11.
            dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return str(value)
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime("%x %X")


def short_key(public_key: str, *, prefix: int = KEY_PREFIX, suffix: int = KEY_SUFFIX) -> str:
    """Return `prefix…suffix` of a public key.

    Keys no longer than `prefix + suffix` are returned unchanged and an empty
    key renders as "—".
    """
    if not public_key:
        return PLACEHOLDER_NONE
    if len(public_key) <= prefix + suffix:
        return public_key
    return f"{public_key[:prefix]}…{public_key[-suffix:]}"


def display_short_key(row: Row) -> str:
    """Producer-supplied short form, else one derived from the full key."""
    return row.public_key_short or short_key(row.public_key)


def explorer_url(row: Row, template: str = DEFAULT_EXPLORER_TEMPLATE) -> str:
    """Row's own explorer link, else `template` with the key interpolated."""
    if row.cspr_live_url:
        return row.cspr_live_url
    return template.format(public_key=row.public_key)

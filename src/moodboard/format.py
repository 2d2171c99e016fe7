"""Display formatting for dates, sizes and due-date offsets."""

from __future__ import annotations

import re
from datetime import date, datetime

_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
_DUE_RE = re.compile(r"\d{4}-\d{2}-\d{2}(?:[T ].*)?$")


def format_date(value: str | None) -> str:
    """Render an ISO date or timestamp for display.

    "2025-03-05T14:30:00" → "Mar 5, 2025, 14:30", "2025-03-05" → "Mar 5, 2025".
    Empty values give "-"; anything unparseable is returned unchanged.
    """
    if not value:
        return "-"
    if "T" not in value and " " not in value.strip():
        try:
            d = date.fromisoformat(value)
        except ValueError:
            return value
        return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}, {dt:%H:%M}"


def format_file_size(size: int) -> str:
    """Human readable byte count: B below 1 KiB, then KB, then MB."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def is_due_date(value: str) -> bool:
    """True for a real ``YYYY-MM-DD`` date, optionally followed by a time."""
    return _DUE_RE.match(value) is not None and parse_due(value) is not None


def parse_due(value: str | None) -> date | None:
    """Parse an ISO due date, or None if empty or invalid."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except (ValueError, TypeError):
        return None


def date_diff(target: date, reference: date) -> str:
    """Return compact string showing difference between dates.

    Examples: "1d", "-3d", "2m", "-1m", "5y", "-2y"
    Uses days for <60 days, months for <24 months, years otherwise.
    """
    days = (target - reference).days
    if days == 0:
        return "0d"

    sign = "" if days > 0 else "-"
    abs_days = abs(days)

    if abs_days < 60:
        return f"{sign}{abs_days}d"

    months = (target.year - reference.year) * 12 + (target.month - reference.month)
    abs_months = abs(months)

    if abs_months < 24:
        return f"{sign}{abs_months}m"

    years = abs(target.year - reference.year)
    return f"{sign}{years}y"

"""Instant parsing and formatting shared by storage and extraction boundaries.

Resume dates arrive as ``YYYY-MM-DD`` text; stored timestamps use ISO-8601. Both are
compared by the instant they denote, so every parsed value is a timezone-aware UTC
``datetime`` and naive values are taken to be UTC.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

_YEAR_MONTH = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{1,2}))?$")


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_instant(value: str | datetime | None) -> datetime | None:
    """Parse ISO-8601 text (date-only, ``YYYY-MM`` or ``YYYY`` included).

    Blank text yields ``None``; anything else unparseable raises ``ValueError``.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)

    text = value.strip()
    if not text:
        return None

    partial = _YEAR_MONTH.match(text)
    if partial is not None:
        month = int(partial.group("month") or 1)
        return datetime(int(partial.group("year")), month, 1, tzinfo=UTC)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"Invalid ISO date: {value}") from exc
    return ensure_utc(parsed)


def format_instant(value: datetime) -> str:
    """Canonical text form: ISO-8601 in UTC with a ``Z`` suffix."""

    return ensure_utc(value).isoformat().replace("+00:00", "Z")

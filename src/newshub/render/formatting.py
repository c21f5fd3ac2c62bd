"""Relative date formatting for article cards."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

logger = logging.getLogger(__name__)

UNKNOWN_DATE = "Unknown date"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO 8601 timestamp, returning None when it is missing or invalid."""
    if value is None or isinstance(value, datetime):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparseable timestamp: {value!r}")
        return None


def format_absolute_date(moment: datetime) -> str:
    """Format as ``Dec 1, 2023`` regardless of the process locale."""
    return f"{_MONTHS[moment.month - 1]} {moment.day}, {moment.year}"


def format_relative_date(published_at: str | datetime | None, now: datetime | None = None) -> str:
    """Describe how long ago ``published_at`` was.

    Uses the absolute elapsed time between the two instants:

    - under an hour: ``"N minutes ago"`` (``"0 minutes ago"`` included)
    - under a day: ``"N hours ago"``
    - one day: ``"Yesterday"``
    - two to six days: ``"N days ago"``
    - otherwise the absolute date, e.g. ``"Dec 1, 2023"``

    When only one side carries a timezone the other is taken to be UTC.

    Args:
        published_at: ISO 8601 timestamp or datetime.
        now: Reference instant (defaults to the current UTC time).

    Returns:
        The formatted string, or ``"Unknown date"`` when the timestamp is
        missing or unparseable.
    """
    moment = parse_timestamp(published_at)
    if moment is None:
        return UNKNOWN_DATE

    if now is None:
        now = datetime.now(tz=UTC)
    if (moment.tzinfo is None) != (now.tzinfo is None):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        else:
            now = now.replace(tzinfo=UTC)

    elapsed = abs(now - moment).total_seconds()
    days = int(elapsed // 86400)

    if days == 0:
        hours = int(elapsed // 3600)
        if hours == 0:
            return _plural(int(elapsed // 60), "minute")
        return _plural(hours, "hour")
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    return format_absolute_date(moment)

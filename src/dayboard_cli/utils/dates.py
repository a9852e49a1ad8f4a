"""Date helpers for deadline strings.

Deadlines are ``YYYY-MM-DDTHH:MM`` strings. Day keys are the ``YYYY-MM-DD``
prefix, which sorts lexicographically in chronological order.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]

TODAY_LABEL = "Today"


def system_clock() -> datetime:
    """Return the current local time as a naive datetime."""
    return datetime.now()


def date_part(deadline: str) -> str:
    """Return the date portion of a deadline string."""
    return deadline.split("T", 1)[0]


def time_part(deadline: str) -> str:
    """Return the ``HH:MM`` portion of a deadline string, or "" if absent."""
    _, sep, rest = deadline.partition("T")
    if not sep:
        return ""
    return rest[:5]


def today_iso(clock: Clock = system_clock) -> str:
    """Return today's date as ``YYYY-MM-DD``."""
    return clock().date().isoformat()


def parse_deadline(deadline: str | None) -> datetime | None:
    """Parse a deadline into a naive local datetime.

    Offsets returned by the store are converted to local time. Returns None
    for empty or unparseable values.
    """
    if not deadline:
        return None
    try:
        parsed = datetime.fromisoformat(deadline.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_day(date: str) -> str:
    """Render ``YYYY-MM-DD`` as ``DD/MM/YYYY``."""
    return "/".join(reversed(date.split("-")))


def day_label(date: str, today: str) -> str:
    """Label for a day: "Today" for the current date, else ``DD/MM/YYYY``."""
    if date == today:
        return TODAY_LABEL
    return format_day(date)

from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def date_key(value) -> Optional[str]:
    """Normalize a date-ish value to the ``YYYY-MM-DD`` key used in every log.

    Accepts ``date``/``datetime`` objects and strings such as ``2024-06-01``,
    ``2024-06-01T10:00:00.000Z`` or ``2024-06-01 10:00:00``. Returns None when
    the value is not a calendar date.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = str(value).strip()
    if not text:
        return None
    head = text.split("T")[0].split(" ")[0]
    try:
        return parse_iso_date(head).isoformat()
    except ValueError:
        return None


def parse_timestamp(value) -> Optional[datetime]:
    """Parse a stored timestamp cell (ISO format, optional trailing Z)."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    text = str(value or "").strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1]
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        key = date_key(text)
        return datetime.combine(parse_iso_date(key), datetime.min.time()) if key else None


def format_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()

"""Date helpers for ledger period bucketing."""

import calendar
from datetime import date, datetime

from finledger.domain.models import Period


def parse_entry_date(value) -> date | None:
    """Parse an entry date leniently.

    Accepts ``date`` and ``datetime`` objects and ISO 8601 strings, with or
    without a time part and a trailing ``Z``.

    Args:
        value: Raw date value from a record.

    Returns:
        date | None: Calendar date, or None when the value is unusable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if not raw:
        return None
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


def month_period(today: date) -> Period:
    """Return the calendar month containing ``today``."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return Period(
        start=today.replace(day=1),
        end=today.replace(day=last_day),
    )


def months_back(today: date, months: int) -> date:
    """Return ``today`` shifted back by whole months, clamping the day."""
    index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


__all__ = ["parse_entry_date", "month_period", "months_back"]

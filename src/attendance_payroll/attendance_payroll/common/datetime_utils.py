from __future__ import annotations

import calendar
from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse an "HH:MM" (or "HH:MM:SS") string into a time of day."""
    parts = value.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=int(parts[0]), minute=int(parts[1]), second=seconds)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def from_epoch_ms(value: int) -> datetime:
    """Local naive datetime for an epoch-milliseconds instant."""
    return datetime.fromtimestamp(value / 1000)


def to_epoch_ms(value: datetime) -> int:
    return int(round(value.timestamp() * 1000))


def calendar_date_of(value: int) -> date:
    """Local calendar date an epoch-milliseconds instant falls on."""
    return from_epoch_ms(value).date()


def days_in_month(month: int, year: int) -> int:
    days = calendar.monthrange(year, month)[1]
    assert days > 0, f"no days in {year}-{month:02d}"
    return days


def month_label(month: int, year: int) -> str:
    """Human label used on payroll records, e.g. "October 2026"."""
    return f"{calendar.month_name[month]} {year}"


def is_weekend(day: date) -> bool:
    # Saturday=5, Sunday=6
    return day.weekday() >= 5


def is_same_month(value: datetime, *, month: int, year: int) -> bool:
    return value.month == month and value.year == year

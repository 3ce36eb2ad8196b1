from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant.

    Services take a clock instead of calling `datetime.now()` so tests can
    pin "now" to a fixed instant.
    """

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant.astimezone(timezone.utc)

    def now(self) -> datetime:
        return self._instant


@dataclass(frozen=True)
class MonthWindow:
    """Inclusive [start, end] dates of one calendar month."""

    start: date
    end: date


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def month_window(day: date) -> MonthWindow:
    last = calendar.monthrange(day.year, day.month)[1]
    return MonthWindow(start=first_day_of_month(day), end=day.replace(day=last))


def today_utc(clock: Clock) -> date:
    return clock.now().astimezone(timezone.utc).date()


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as returned by MySQL DATETIME/TIMESTAMP) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_iso_utc(value: datetime) -> str:
    """Format as ISO-8601 UTC, e.g. 2024-03-15T13:45:00Z."""
    return as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_minute(value: datetime) -> str:
    """Format with minute precision, e.g. 2024-03-15T13:45 (registro display)."""
    return value.strftime("%Y-%m-%dT%H:%M")


def parse_iso_date(value: str) -> date:
    """Parse an ISO-8601 date; a full timestamp is accepted and truncated to its date."""
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def parse_entry_time(value: str) -> datetime:
    """Parse an entry time such as 2024-03-15T13:45 or 2024-03-15 13:45:00.

    The result is naive; aware inputs are converted to UTC first.
    """
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed

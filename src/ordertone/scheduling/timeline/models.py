"""Day/shift timeline primitives shared by the projector and the order views."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from pydantic import BaseModel, model_validator

SHIFTS: tuple[int, ...] = (1, 2, 3)
SHIFT_COUNT = len(SHIFTS)
MAX_DAYS = 62
DEFAULT_WINDOW_DAYS = 7


def normalize_calendar_day(value: date | datetime | str) -> date:
    """Collapse a date, datetime or ISO-8601 string to a local calendar day.

    Aware datetimes are converted to the local timezone before truncation so a
    ``...T23:30:00Z`` timestamp lands on the same day the viewer sees.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return normalize_calendar_day(datetime.fromisoformat(text))


def day_index(day: date) -> int:
    """Integer day number since a fixed epoch (proleptic Gregorian ordinal)."""
    return day.toordinal()


def days_in_range(start: date, end: date) -> list[date]:
    """Return every calendar day from ``start`` to ``end`` inclusive."""
    return list(_iter_days(start, end))


def _iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


class DateRange(BaseModel):
    """Inclusive visible window on the timeline (at most ``MAX_DAYS`` days)."""

    start: date
    end: date

    @model_validator(mode="after")
    def _check_window(self) -> DateRange:
        if self.end < self.start:
            raise ValueError("DateRange.end must be on or after DateRange.start")
        span = (self.end - self.start).days + 1
        if span > MAX_DAYS:
            raise ValueError(f"DateRange spans {span} days; maximum is {MAX_DAYS}")
        return self

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def days(self) -> list[date]:
        return days_in_range(self.start, self.end)


def default_date_range(today: date | None = None) -> DateRange:
    """Window from ``today`` to one week ahead."""
    today = today or date.today()
    return DateRange(start=today, end=today + timedelta(days=DEFAULT_WINDOW_DAYS))


__all__ = [
    "DEFAULT_WINDOW_DAYS",
    "DateRange",
    "MAX_DAYS",
    "SHIFTS",
    "SHIFT_COUNT",
    "day_index",
    "days_in_range",
    "default_date_range",
    "normalize_calendar_day",
]

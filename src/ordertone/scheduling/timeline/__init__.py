"""Timeline (day x shift) helpers."""

from .models import (
    DEFAULT_WINDOW_DAYS,
    MAX_DAYS,
    SHIFT_COUNT,
    SHIFTS,
    DateRange,
    day_index,
    days_in_range,
    default_date_range,
    normalize_calendar_day,
)

__all__ = [
    "DEFAULT_WINDOW_DAYS",
    "MAX_DAYS",
    "SHIFT_COUNT",
    "SHIFTS",
    "DateRange",
    "day_index",
    "days_in_range",
    "default_date_range",
    "normalize_calendar_day",
]

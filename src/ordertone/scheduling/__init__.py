"""Scheduling utilities (timeline windows, shift constants)."""

from .timeline import MAX_DAYS, SHIFT_COUNT, SHIFTS, DateRange, default_date_range

__all__ = ["DateRange", "MAX_DAYS", "SHIFTS", "SHIFT_COUNT", "default_date_range"]

"""Synthetic order schedules."""

from .generator import DEFAULT_LINES, SyntheticScheduleBundle, SyntheticScheduleSpec, generate_orders

__all__ = ["DEFAULT_LINES", "SyntheticScheduleBundle", "SyntheticScheduleSpec", "generate_orders"]

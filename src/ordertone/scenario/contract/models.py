"""Pydantic models describing the order records fed to the timeline."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, field_validator

from ordertone.scheduling.timeline import normalize_calendar_day


class Order(BaseModel):
    """Scheduled production order as delivered by the order-fetching collaborator.

    Attributes
    ----------
    id:
        Unique order identifier; the key of every color assignment.
    date:
        Calendar day the order is scheduled on. Accepts a ``date``, a ``datetime``
        or an ISO-8601 string and is normalised to the local calendar day.
    shift:
        One-indexed shift within the day (``1..3`` on the standard timeline).
    line:
        Production line number, or ``None`` for orders not yet placed on a line.
    description:
        Free-form order description surfaced in tooltips and tables.
    """

    id: int
    date: dt.date
    shift: int
    line: int | None = None
    description: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _normalise_day(cls, value: Any) -> dt.date:
        return normalize_calendar_day(value)

    @field_validator("description", mode="before")
    @classmethod
    def _description_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


__all__ = ["Order"]

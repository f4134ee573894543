from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from ordertone.scenario.contract import Order
from ordertone.scheduling.timeline import (
    MAX_DAYS,
    DateRange,
    day_index,
    days_in_range,
    default_date_range,
    normalize_calendar_day,
)


def test_normalize_calendar_day_variants():
    assert normalize_calendar_day("2025-01-15") == date(2025, 1, 15)
    assert normalize_calendar_day(date(2025, 1, 15)) == date(2025, 1, 15)
    assert normalize_calendar_day(datetime(2025, 1, 15, 23, 59)) == date(2025, 1, 15)
    assert normalize_calendar_day(" 2025-01-15T08:00:00 ") == date(2025, 1, 15)


def test_aware_timestamp_uses_local_day():
    stamp = datetime(2025, 3, 1, 22, 30, tzinfo=timezone.utc)
    assert normalize_calendar_day(stamp) == stamp.astimezone().date()
    assert normalize_calendar_day("2025-03-01T22:30:00Z") == stamp.astimezone().date()


def test_day_index_is_contiguous():
    assert day_index(date(2025, 1, 2)) - day_index(date(2025, 1, 1)) == 1
    assert day_index(date(2025, 3, 1)) - day_index(date(2025, 2, 28)) == 1


def test_days_in_range_inclusive():
    days = days_in_range(date(2025, 1, 30), date(2025, 2, 2))
    assert days == [date(2025, 1, 30), date(2025, 1, 31), date(2025, 2, 1), date(2025, 2, 2)]
    assert days_in_range(date(2025, 1, 2), date(2025, 1, 1)) == []


def test_date_range_limits():
    start = date(2025, 1, 1)
    window = DateRange(start=start, end=start + timedelta(days=MAX_DAYS - 1))
    assert len(window.days()) == MAX_DAYS
    assert window.contains(start)
    with pytest.raises(ValidationError):
        DateRange(start=start, end=start + timedelta(days=MAX_DAYS))
    with pytest.raises(ValidationError):
        DateRange(start=start, end=start - timedelta(days=1))


def test_default_date_range_spans_a_week():
    window = default_date_range(date(2025, 1, 10))
    assert window.start == date(2025, 1, 10)
    assert window.end == date(2025, 1, 17)


def test_order_rejects_unparseable_date():
    with pytest.raises(ValidationError):
        Order(id=1, date="not-a-date", shift=1, line=1)


def test_order_description_defaults():
    order = Order(id=1, date="2025-01-15", shift=2, line=None, description=None)
    assert order.description == ""
    assert order.line is None

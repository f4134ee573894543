from datetime import date

import pytest

from ordertone.scenario.contract import Order


@pytest.fixture
def make_order():
    """Factory for orders on the standard timeline."""

    def _make(order_id: int, day: str | date = "2025-01-15", shift: int = 1, line: int | None = 1):
        return Order(
            id=order_id,
            date=day,
            shift=shift,
            line=line,
            description=f"Order {order_id}",
        )

    return _make

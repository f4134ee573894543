"""Visible-window helpers: filtering orders and grouping them per timeline cell."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Collection, Iterable, Mapping
from datetime import date

from ordertone.scenario.contract import Order
from ordertone.scheduling.timeline import SHIFTS, DateRange

CellKey = tuple[date, int, int]


def filter_orders(
    orders: Iterable[Order],
    date_range: DateRange | None = None,
    lines: Collection[int] | None = None,
) -> list[Order]:
    """Keep orders inside ``date_range`` and on one of ``lines``.

    ``None`` disables the corresponding filter. Orders without a line only
    survive when no line filter is given.
    """

    selected: list[Order] = []
    for order in orders:
        if date_range is not None and not date_range.contains(order.date):
            continue
        if lines is not None and order.line not in lines:
            continue
        selected.append(order)
    return selected


def group_orders_by_cell(orders: Iterable[Order]) -> dict[CellKey, list[Order]]:
    """Group placed orders by ``(date, shift, line)``; unplaced orders are skipped."""
    groups: defaultdict[CellKey, list[Order]] = defaultdict(list)
    for order in orders:
        if order.line is None:
            continue
        groups[(order.date, order.shift, order.line)].append(order)
    return dict(groups)


def max_orders_per_line(
    groups: Mapping[CellKey, list[Order]],
    lines: Iterable[int],
    days: Iterable[date],
    minimum: int = 1,
) -> dict[int, int]:
    """Tallest cell stack per line over ``days`` x shifts (row sizing for the renderer)."""
    days = list(days)
    result: dict[int, int] = {}
    for line in lines:
        tallest = minimum
        for day in days:
            for shift in SHIFTS:
                tallest = max(tallest, len(groups.get((day, shift, line), ())))
        result[line] = tallest
    return result


__all__ = ["CellKey", "filter_orders", "group_orders_by_cell", "max_orders_per_line"]

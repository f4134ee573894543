"""Project orders from (date, shift, line) onto integer timeline cells."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ordertone.scenario.contract import Order
from ordertone.scheduling.timeline import SHIFT_COUNT, day_index

UNCOLORED = -1


@dataclass(frozen=True, slots=True)
class VisualPosition:
    """Grid cell of an order: ``x`` runs along day x shift, ``y`` is the line rank."""

    x: int
    y: int

    def chebyshev(self, other: VisualPosition) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))


@dataclass(slots=True)
class PositionedOrder:
    """Order placed on the grid plus its (mutable) color slot."""

    node: int
    order: Order
    position: VisualPosition
    color_index: int = UNCOLORED

    @property
    def colored(self) -> bool:
        return self.color_index != UNCOLORED


@dataclass(slots=True)
class Projection:
    """Result of projecting one order list onto the timeline grid."""

    positioned: list[PositionedOrder] = field(default_factory=list)
    unassigned: list[Order] = field(default_factory=list)
    line_rank: dict[int, int] = field(default_factory=dict)
    origin_day: int | None = None


def line_ranks(orders: Iterable[Order]) -> dict[int, int]:
    """Map each distinct line number to its ascending rank (the grid row)."""
    lines = sorted({order.line for order in orders if order.line is not None})
    return {line: rank for rank, line in enumerate(lines)}


def project_orders(orders: Iterable[Order], shift_count: int = SHIFT_COUNT) -> Projection:
    """Place every order with a known line and valid shift on the grid.

    Orders without a line, with a line missing from the rank table, or with a
    shift outside ``1..shift_count`` are returned in ``Projection.unassigned``.
    """

    orders = list(orders)
    projection = Projection()
    if not orders:
        return projection

    projection.line_rank = line_ranks(orders)
    origin = min(day_index(order.date) for order in orders)
    projection.origin_day = origin

    for order in orders:
        rank = projection.line_rank.get(order.line) if order.line is not None else None
        if rank is None or not 1 <= order.shift <= shift_count:
            projection.unassigned.append(order)
            continue
        x = (day_index(order.date) - origin) * shift_count + (order.shift - 1)
        projection.positioned.append(
            PositionedOrder(
                node=len(projection.positioned),
                order=order,
                position=VisualPosition(x=x, y=rank),
            )
        )
    return projection


__all__ = [
    "PositionedOrder",
    "Projection",
    "UNCOLORED",
    "VisualPosition",
    "line_ranks",
    "project_orders",
]

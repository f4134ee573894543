"""Synthetic production schedules for benchmarks and demos."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from pathlib import Path

import pandas as pd

from ordertone.scenario.contract import Order
from ordertone.scenario.io import orders_to_frame, write_orders
from ordertone.scheduling.timeline import SHIFTS

DEFAULT_LINES: tuple[int, ...] = (1, 2, 3, 33, 4, 44, 5, 7)


@dataclass
class SyntheticScheduleSpec:
    """Configuration for generating a random day x shift x line schedule."""

    num_days: int = 60
    lines: tuple[int, ...] = DEFAULT_LINES
    fill_ratio: float = 0.7
    max_stack: int = 1
    unassigned_ratio: float = 0.0
    start_date: date = field(default_factory=lambda: date(2025, 1, 1))
    seed: int = 123
    first_id: int = 1


@dataclass
class SyntheticScheduleBundle:
    """Generated orders plus helpers to persist them."""

    spec: SyntheticScheduleSpec
    orders: list[Order]

    def to_frame(self) -> pd.DataFrame:
        return orders_to_frame(self.orders)

    def write(self, path: Path) -> Path:
        return write_orders(path, self.orders)

    def summary(self) -> dict[str, object]:
        placed = [order for order in self.orders if order.line is not None]
        return {
            "orders": len(self.orders),
            "placed": len(placed),
            "unassigned": len(self.orders) - len(placed),
            "days": self.spec.num_days,
            "lines": len(self.spec.lines),
            "seed": self.spec.seed,
        }


def generate_orders(spec: SyntheticScheduleSpec) -> SyntheticScheduleBundle:
    """Fill each (day, shift, line) cell with probability ``fill_ratio``.

    Filled cells receive between one and ``max_stack`` orders, so values above
    one produce collision cells. ``unassigned_ratio`` of the orders lose their line.
    """

    if not 0.0 <= spec.fill_ratio <= 1.0:
        raise ValueError("fill_ratio must be within [0, 1]")
    if not 0.0 <= spec.unassigned_ratio <= 1.0:
        raise ValueError("unassigned_ratio must be within [0, 1]")
    if spec.max_stack < 1:
        raise ValueError("max_stack must be >= 1")

    rng = random.Random(spec.seed)
    orders: list[Order] = []
    next_id = spec.first_id
    for offset in range(spec.num_days):
        day = spec.start_date + timedelta(days=offset)
        for shift in SHIFTS:
            for line in spec.lines:
                if rng.random() >= spec.fill_ratio:
                    continue
                for _ in range(rng.randint(1, spec.max_stack)):
                    placed = rng.random() >= spec.unassigned_ratio
                    orders.append(
                        Order(
                            id=next_id,
                            date=day,
                            shift=shift,
                            line=line if placed else None,
                            description=f"Order {next_id}",
                        )
                    )
                    next_id += 1
    return SyntheticScheduleBundle(spec=spec, orders=orders)


__all__ = [
    "DEFAULT_LINES",
    "SyntheticScheduleBundle",
    "SyntheticScheduleSpec",
    "generate_orders",
]

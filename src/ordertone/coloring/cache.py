"""Session color cache and the ``assign_colors`` entry point."""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator, Mapping
from contextlib import nullcontext
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from ordertone.coloring.graph import build_neighbor_graph
from ordertone.coloring.greedy import color_graph, fallback_color
from ordertone.coloring.projection import project_orders
from ordertone.coloring.spatial import SpatialIndex
from ordertone.config import ColoringConfig
from ordertone.palette import CONTRAST_MATRIX, PALETTE_SIZE
from ordertone.scenario.contract import Order
from ordertone.telemetry import RunTelemetryLogger

SOLVER_NAME = "greedy-contrast"


class ColorCache:
    """``order id -> color index`` memory owned by one timeline view/session.

    Entries are never evicted; call :meth:`clear` when the session restarts.
    A cache must have a single writer at a time.
    """

    def __init__(self, initial: Mapping[int, int] | None = None) -> None:
        self._colors: dict[int, int] = dict(initial or {})

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[int]:
        return iter(self._colors)

    def get(self, order_id: int, default: int | None = None) -> int | None:
        return self._colors.get(order_id, default)

    def update(self, colors: Mapping[int, int]) -> None:
        self._colors.update(colors)

    def clear(self) -> None:
        self._colors.clear()

    def as_dict(self) -> dict[int, int]:
        return dict(self._colors)


@dataclass(slots=True)
class ColoringStats:
    """Counters describing one ``assign_colors`` call."""

    orders: int = 0
    new_orders: int = 0
    cached_orders: int = 0
    unassigned_orders: int = 0
    edges: int = 0
    collisions: int = 0
    passes: int = 0
    elapsed_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _chunks(items: list[int], size: int) -> Iterator[list[int]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


def assign_colors_with_stats(
    orders: Iterable[Order],
    cache: ColorCache | None = None,
    *,
    config: ColoringConfig | None = None,
    telemetry_log: str | Path | None = None,
    telemetry_source: str | None = None,
    telemetry_context: Mapping[str, Any] | None = None,
) -> tuple[dict[int, int], ColoringStats]:
    """Color ``orders`` and return the assignment together with run statistics.

    Orders already present in ``cache`` keep their stored color. The grid,
    spatial index and neighbour graph are built over the whole input so cached
    orders constrain the new ones, but only new orders are colored. New colors
    are merged into ``cache`` before returning.
    """

    config = config or ColoringConfig()
    cache = cache if cache is not None else ColorCache()
    orders = list(orders)
    stats = ColoringStats(orders=len(orders))

    telemetry_logger: RunTelemetryLogger | None = None
    if telemetry_log:
        telemetry_logger = RunTelemetryLogger(
            log_path=Path(telemetry_log),
            solver=SOLVER_NAME,
            source=telemetry_source,
            config=config.model_dump(),
            context=dict(telemetry_context or {}),
            step_interval=1,
        )

    started = time.perf_counter()
    assignments: dict[int, int] = {}
    with telemetry_logger if telemetry_logger else nullcontext() as run_logger:
        projection = project_orders(orders, shift_count=config.shift_count)
        stats.unassigned_orders = len(projection.unassigned)

        for order in projection.unassigned:
            color = cache.get(order.id)
            if color is None:
                color = fallback_color(order.id, PALETTE_SIZE)
                stats.new_orders += 1
            else:
                stats.cached_orders += 1
            assignments[order.id] = color

        positioned = projection.positioned
        pending: list[int] = []
        for item in positioned:
            color = cache.get(item.order.id)
            if color is None:
                pending.append(item.node)
            else:
                item.color_index = color
                stats.cached_orders += 1
        stats.new_orders += len(pending)

        if positioned:
            index = SpatialIndex(positioned)
            graph = build_neighbor_graph(positioned, index, radius=config.radius)
            stats.edges = graph.edge_count
            stats.collisions = len(index.collisions())
            for chunk in _chunks(pending, config.max_orders_per_pass):
                pass_started = time.perf_counter()
                color_graph(
                    positioned,
                    graph,
                    chunk,
                    palette_size=PALETTE_SIZE,
                    matrix=CONTRAST_MATRIX,
                    saturation_penalty=config.saturation_penalty,
                )
                stats.passes += 1
                if run_logger:
                    run_logger.log_step(
                        step=stats.passes,
                        colored=len(chunk),
                        elapsed_ms=(time.perf_counter() - pass_started) * 1000.0,
                    )

        for item in positioned:
            assignments[item.order.id] = item.color_index
        cache.update(assignments)
        stats.elapsed_ms = (time.perf_counter() - started) * 1000.0

        if run_logger:
            run_logger.finalize(status="ok", metrics=stats.to_dict())

    return {order.id: assignments[order.id] for order in orders}, stats


def assign_colors(
    orders: Iterable[Order],
    cache: ColorCache | None = None,
    *,
    config: ColoringConfig | None = None,
) -> dict[int, int]:
    """Return ``order id -> palette index`` for every order in ``orders``.

    Without a ``cache`` the call is stateless. With one, previously assigned
    ids keep their colors and newly colored ids are remembered.
    """

    colors, _ = assign_colors_with_stats(orders, cache, config=config)
    return colors


__all__ = [
    "ColorCache",
    "ColoringStats",
    "SOLVER_NAME",
    "assign_colors",
    "assign_colors_with_stats",
]

"""Cell-bucketed index over positioned orders."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator

from ordertone.coloring.projection import PositionedOrder, VisualPosition

Cell = tuple[int, int]


def cell_key(position: VisualPosition) -> str:
    """Composite ``"x_y"`` key used by the renderer for cell identifiers."""
    return f"{position.x}_{position.y}"


class SpatialIndex:
    """Buckets positioned orders by exact grid cell for constant-time window scans."""

    def __init__(self, positioned: Iterable[PositionedOrder] = ()) -> None:
        self._cells: defaultdict[Cell, list[PositionedOrder]] = defaultdict(list)
        self._size = 0
        for item in positioned:
            self.add(item)

    def add(self, item: PositionedOrder) -> None:
        self._cells[(item.position.x, item.position.y)].append(item)
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def cell(self, x: int, y: int) -> list[PositionedOrder]:
        """Return the orders occupying cell ``(x, y)`` (empty list when none)."""
        return self._cells.get((x, y), [])

    def cells(self) -> dict[Cell, list[PositionedOrder]]:
        return dict(self._cells)

    def neighbourhood(self, position: VisualPosition, radius: int) -> Iterator[PositionedOrder]:
        """Yield orders in the ``(2 * radius + 1)`` square window centred on ``position``."""
        cells = self._cells
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                bucket = cells.get((position.x + dx, position.y + dy))
                if bucket:
                    yield from bucket

    def collisions(self) -> dict[Cell, list[PositionedOrder]]:
        """Cells shared by more than one order."""
        return {cell: items for cell, items in self._cells.items() if len(items) > 1}


__all__ = ["Cell", "SpatialIndex", "cell_key"]

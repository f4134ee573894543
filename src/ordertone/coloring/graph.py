"""Proximity graph between positioned orders."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ordertone.coloring.projection import PositionedOrder
from ordertone.coloring.spatial import SpatialIndex
from ordertone.config import DEFAULT_RADIUS


@dataclass(slots=True)
class NeighborGraph:
    """Symmetric adjacency over projection node ids."""

    adjacency: dict[int, set[int]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.adjacency)

    def neighbours(self, node: int) -> set[int]:
        return self.adjacency.get(node, set())

    def degree(self, node: int) -> int:
        return len(self.adjacency.get(node, ()))

    @property
    def edge_count(self) -> int:
        return sum(len(adj) for adj in self.adjacency.values()) // 2


def build_neighbor_graph(
    positioned: Sequence[PositionedOrder],
    index: SpatialIndex | None = None,
    radius: int = DEFAULT_RADIUS,
) -> NeighborGraph:
    """Connect every pair of orders whose Chebyshev distance is at most ``radius``.

    Each order scans only the ``(2 * radius + 1) ** 2`` cells around it through
    ``index``, so construction is linear in the number of orders.
    """

    if index is None:
        index = SpatialIndex(positioned)
    adjacency: dict[int, set[int]] = {item.node: set() for item in positioned}
    for current in positioned:
        links = adjacency[current.node]
        for other in index.neighbourhood(current.position, radius):
            if other.node == current.node or other.node in links:
                continue
            if current.position.chebyshev(other.position) <= radius:
                links.add(other.node)
                adjacency[other.node].add(current.node)
    return NeighborGraph(adjacency=adjacency)


__all__ = ["NeighborGraph", "build_neighbor_graph"]

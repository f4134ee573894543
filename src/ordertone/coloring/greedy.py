"""Degree-ordered greedy coloring that maximises contrast between neighbours."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

from ordertone.coloring.graph import NeighborGraph
from ordertone.coloring.projection import PositionedOrder
from ordertone.config import DEFAULT_SATURATION_PENALTY
from ordertone.palette import CONTRAST_MATRIX, PALETTE_SIZE

HASH_MULTIPLIER = 2654435761  # Knuth's multiplicative constant (2**32 / golden ratio)
UINT32_MASK = 0xFFFFFFFF

Matrix = Sequence[Sequence[int]]


def hash_order_id(order_id: int) -> int:
    """Unsigned 32-bit multiplicative hash of an order id."""
    return (order_id * HASH_MULTIPLIER) & UINT32_MASK


def default_color(order_id: int, palette_size: int = PALETTE_SIZE) -> int:
    """Color for an order with no colored neighbours."""
    return hash_order_id(order_id) % palette_size


def fallback_color(order_id: int, palette_size: int = PALETTE_SIZE) -> int:
    """Color for an order that never reaches the grid (no line, bad shift)."""
    return order_id % palette_size


def most_contrasting_free_color(
    used: set[int],
    palette_size: int = PALETTE_SIZE,
    matrix: Matrix = CONTRAST_MATRIX,
) -> int:
    """Unused color whose worst contrast against ``used`` is highest (lowest index on ties)."""

    best_color = 0
    best_score = -math.inf
    for candidate in range(palette_size):
        if candidate in used:
            continue
        row = matrix[candidate]
        score = min(row[u] for u in used)
        if score > best_score:
            best_score = score
            best_color = candidate
    return best_color


def least_conflicting_color(
    used: set[int],
    neighbour_counts: Counter[int],
    palette_size: int = PALETTE_SIZE,
    matrix: Matrix = CONTRAST_MATRIX,
    saturation_penalty: float = DEFAULT_SATURATION_PENALTY,
) -> int:
    """Best color once every palette entry already appears around the node.

    Scores each candidate by its mean contrast to ``used`` minus
    ``saturation_penalty`` for every neighbour already wearing it.
    """

    best_color = 0
    best_score = -math.inf
    for candidate in range(palette_size):
        row = matrix[candidate]
        mean_contrast = sum(row[u] for u in used) / len(used)
        score = mean_contrast - saturation_penalty * neighbour_counts.get(candidate, 0)
        if score > best_score:
            best_score = score
            best_color = candidate
    return best_color


def select_color(
    order_id: int,
    neighbour_colors: Iterable[int],
    palette_size: int = PALETTE_SIZE,
    matrix: Matrix = CONTRAST_MATRIX,
    saturation_penalty: float = DEFAULT_SATURATION_PENALTY,
) -> int:
    """Pick a color for one node given the colors of its already-colored neighbours."""

    counts = Counter(neighbour_colors)
    used = set(counts)
    if not used:
        return default_color(order_id, palette_size)
    if len(used) < palette_size:
        return most_contrasting_free_color(used, palette_size, matrix)
    return least_conflicting_color(used, counts, palette_size, matrix, saturation_penalty)


def coloring_sequence(
    positioned: Sequence[PositionedOrder],
    graph: NeighborGraph,
    nodes: Iterable[int] | None = None,
) -> list[int]:
    """Order ``nodes`` by descending degree, then row, then column."""

    if nodes is None:
        nodes = (item.node for item in positioned)

    def _key(node: int) -> tuple[int, int, int]:
        position = positioned[node].position
        return (-graph.degree(node), position.y, position.x)

    return sorted(nodes, key=_key)


def color_graph(
    positioned: Sequence[PositionedOrder],
    graph: NeighborGraph,
    nodes: Iterable[int] | None = None,
    *,
    palette_size: int = PALETTE_SIZE,
    matrix: Matrix = CONTRAST_MATRIX,
    saturation_penalty: float = DEFAULT_SATURATION_PENALTY,
) -> dict[int, int]:
    """Greedily color ``nodes`` (default: every uncolored node) in place.

    Nodes that already carry a color act as fixed context: they constrain
    their neighbours but are never recolored. Returns ``order id -> color``
    for the nodes colored by this call.
    """

    if nodes is None:
        nodes = [item.node for item in positioned if not item.colored]
    assignments: dict[int, int] = {}
    for node in coloring_sequence(positioned, graph, nodes):
        current = positioned[node]
        neighbour_colors = [
            positioned[other].color_index
            for other in graph.neighbours(node)
            if positioned[other].colored
        ]
        color = select_color(
            current.order.id,
            neighbour_colors,
            palette_size,
            matrix,
            saturation_penalty,
        )
        current.color_index = color
        assignments[current.order.id] = color
    return assignments


__all__ = [
    "HASH_MULTIPLIER",
    "color_graph",
    "coloring_sequence",
    "default_color",
    "fallback_color",
    "hash_order_id",
    "least_conflicting_color",
    "most_contrasting_free_color",
    "select_color",
]

"""Timeline order coloring: projection, proximity graph, greedy contrast coloring."""

from .cache import ColorCache, ColoringStats, assign_colors, assign_colors_with_stats
from .graph import NeighborGraph, build_neighbor_graph
from .greedy import color_graph, default_color, fallback_color, hash_order_id, select_color
from .projection import PositionedOrder, Projection, VisualPosition, project_orders
from .spatial import SpatialIndex, cell_key

__all__ = [
    "ColorCache",
    "ColoringStats",
    "NeighborGraph",
    "PositionedOrder",
    "Projection",
    "SpatialIndex",
    "VisualPosition",
    "assign_colors",
    "assign_colors_with_stats",
    "build_neighbor_graph",
    "cell_key",
    "color_graph",
    "default_color",
    "fallback_color",
    "hash_order_id",
    "project_orders",
    "select_color",
]

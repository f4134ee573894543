"""ordertone: contrast-aware color assignment for production timeline orders."""

from ordertone.coloring import ColorCache, assign_colors
from ordertone.config import ColoringConfig
from ordertone.palette import PALETTE, palette_color
from ordertone.scenario.contract import Order

__version__ = "0.1.0"

__all__ = [
    "ColorCache",
    "ColoringConfig",
    "Order",
    "PALETTE",
    "__version__",
    "assign_colors",
    "palette_color",
]

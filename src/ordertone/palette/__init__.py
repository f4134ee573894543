"""Palette entries and their pairwise contrast scores."""

from .colors import PALETTE, PALETTE_SIZE, PaletteColor, palette_color
from .contrast import CONTRAST_MATRIX, contrast, validate_contrast_matrix

__all__ = [
    "PALETTE",
    "PALETTE_SIZE",
    "PaletteColor",
    "palette_color",
    "CONTRAST_MATRIX",
    "contrast",
    "validate_contrast_matrix",
]

"""Fixed order palette used by the timeline renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PaletteColor:
    """Background/border/text hex triple for one palette slot."""

    name: str
    background: str
    border: str
    text: str


# Neighbouring indices are deliberately low-contrast pairs; the greedy engine
# relies on the contrast matrix rather than index distance.
PALETTE: tuple[PaletteColor, ...] = (
    PaletteColor("blue", "#2196F3", "#1565C0", "#FFFFFF"),
    PaletteColor("orange", "#FF9800", "#E65100", "#000000"),
    PaletteColor("green", "#4CAF50", "#2E7D32", "#FFFFFF"),
    PaletteColor("pink", "#E91E63", "#C2185B", "#FFFFFF"),
    PaletteColor("purple", "#9C27B0", "#7B1FA2", "#FFFFFF"),
    PaletteColor("yellow", "#FFEB3B", "#F9A825", "#000000"),
    PaletteColor("cyan", "#00BCD4", "#0097A7", "#000000"),
    PaletteColor("deep-orange", "#FF5722", "#D84315", "#FFFFFF"),
    PaletteColor("lime", "#8BC34A", "#558B2F", "#000000"),
    PaletteColor("deep-purple", "#673AB7", "#4527A0", "#FFFFFF"),
    PaletteColor("teal", "#009688", "#00695C", "#FFFFFF"),
    PaletteColor("red", "#F44336", "#C62828", "#FFFFFF"),
)

PALETTE_SIZE = len(PALETTE)


def palette_color(color_index: int) -> PaletteColor:
    """Return the palette entry for ``color_index`` (wraps modulo the palette size)."""
    return PALETTE[color_index % PALETTE_SIZE]


__all__ = ["PALETTE", "PALETTE_SIZE", "PaletteColor", "palette_color"]

"""Hand-authored perceptual contrast scores between palette entries."""

from __future__ import annotations

from collections.abc import Sequence

from ordertone.core.errors import OrderToneValueError

CONTRAST_MIN = 0
CONTRAST_MAX = 10

# Rows/columns follow PALETTE order. Scores blend hue, lightness and
# saturation distance; 10 is maximal contrast.
CONTRAST_MATRIX: tuple[tuple[int, ...], ...] = (
    #  0   1   2   3   4   5   6   7   8   9  10  11
    (0, 10, 7, 9, 8, 10, 5, 9, 6, 9, 6, 10),  # 0: blue
    (10, 0, 8, 7, 10, 4, 9, 3, 6, 10, 9, 5),  # 1: orange
    (7, 8, 0, 9, 7, 8, 7, 10, 3, 8, 4, 9),  # 2: green
    (9, 7, 9, 0, 5, 8, 9, 6, 8, 6, 10, 4),  # 3: pink
    (8, 10, 7, 5, 0, 9, 8, 9, 7, 2, 8, 8),  # 4: purple
    (10, 4, 8, 8, 9, 0, 6, 5, 4, 10, 7, 7),  # 5: yellow
    (5, 9, 7, 9, 8, 6, 0, 9, 6, 9, 4, 9),  # 6: cyan
    (9, 3, 10, 6, 9, 5, 9, 0, 7, 10, 10, 2),  # 7: deep orange
    (6, 6, 3, 8, 7, 4, 6, 7, 0, 8, 5, 8),  # 8: lime
    (9, 10, 8, 6, 2, 10, 9, 10, 8, 0, 8, 9),  # 9: deep purple
    (6, 9, 4, 10, 8, 7, 4, 10, 5, 8, 0, 10),  # 10: teal
    (10, 5, 9, 4, 8, 7, 9, 2, 8, 9, 10, 0),  # 11: red
)


def contrast(a: int, b: int) -> int:
    """Return the contrast score between palette indices ``a`` and ``b``."""
    return CONTRAST_MATRIX[a][b]


def validate_contrast_matrix(matrix: Sequence[Sequence[int]], size: int | None = None) -> None:
    """Check that ``matrix`` is square, symmetric, zero on the diagonal and in range.

    Raises
    ------
    OrderToneValueError
        Describing the first violation found.
    """

    n = len(matrix) if size is None else size
    if len(matrix) != n:
        raise OrderToneValueError(f"contrast matrix must have {n} rows, found {len(matrix)}")
    for i, row in enumerate(matrix):
        if len(row) != n:
            raise OrderToneValueError(f"contrast matrix row {i} has {len(row)} entries, expected {n}")
        if row[i] != 0:
            raise OrderToneValueError(f"contrast matrix diagonal at {i} must be 0")
        for j, value in enumerate(row):
            if not CONTRAST_MIN <= value <= CONTRAST_MAX:
                raise OrderToneValueError(
                    f"contrast[{i}][{j}]={value} outside [{CONTRAST_MIN}, {CONTRAST_MAX}]"
                )
            if matrix[j][i] != value:
                raise OrderToneValueError(f"contrast matrix not symmetric at ({i}, {j})")


__all__ = [
    "CONTRAST_MATRIX",
    "CONTRAST_MAX",
    "CONTRAST_MIN",
    "contrast",
    "validate_contrast_matrix",
]

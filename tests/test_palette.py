import re

import pytest

from ordertone.core.errors import OrderToneValueError
from ordertone.palette import (
    CONTRAST_MATRIX,
    PALETTE,
    PALETTE_SIZE,
    contrast,
    palette_color,
    validate_contrast_matrix,
)

HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def test_palette_has_twelve_entries():
    assert PALETTE_SIZE == 12
    assert len(PALETTE) == 12


def test_palette_entries_are_hex_triples():
    for color in PALETTE:
        assert HEX_RE.match(color.background)
        assert HEX_RE.match(color.border)
        assert HEX_RE.match(color.text)


def test_palette_color_wraps_index():
    assert palette_color(0) is PALETTE[0]
    assert palette_color(PALETTE_SIZE) is PALETTE[0]
    assert palette_color(PALETTE_SIZE + 3) is PALETTE[3]


def test_contrast_matrix_shape_and_diagonal():
    assert len(CONTRAST_MATRIX) == PALETTE_SIZE
    for i, row in enumerate(CONTRAST_MATRIX):
        assert len(row) == PALETTE_SIZE
        assert row[i] == 0


def test_contrast_matrix_is_symmetric_and_bounded():
    for i in range(PALETTE_SIZE):
        for j in range(PALETTE_SIZE):
            assert contrast(i, j) == contrast(j, i)
            assert 0 <= contrast(i, j) <= 10


def test_validate_contrast_matrix_accepts_shipped_matrix():
    validate_contrast_matrix(CONTRAST_MATRIX, size=PALETTE_SIZE)


@pytest.mark.parametrize(
    "matrix, message",
    [
        ([[0, 1], [2, 0]], "symmetric"),
        ([[1, 1], [1, 0]], "diagonal"),
        ([[0, 11], [11, 0]], "outside"),
        ([[0, 1], [1]], "row 1"),
    ],
)
def test_validate_contrast_matrix_rejects_bad_matrices(matrix, message):
    with pytest.raises(OrderToneValueError, match=message):
        validate_contrast_matrix(matrix)

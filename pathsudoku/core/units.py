"""Row, column and box masks over the 9x9 grid."""

from __future__ import annotations
from typing import Tuple

from .cellset import CellSet, SIZE, BOX_SIZE


def row_mask(row: int) -> CellSet:
    """All cells in a row."""
    return CellSet.from_cells((row, col) for col in range(SIZE))


def column_mask(col: int) -> CellSet:
    """All cells in a column."""
    return CellSet.from_cells((row, col) for row in range(SIZE))


def box_mask(box_row: int, box_col: int) -> CellSet:
    """
    All cells in the 3x3 box at position (box_row, box_col).

    Box coordinates run 0-2 in each direction, so box (2, 1) is the
    bottom-middle box.
    """
    if not (0 <= box_row < BOX_SIZE and 0 <= box_col < BOX_SIZE):
        raise ValueError(f"Box ({box_row}, {box_col}) is outside the 3x3 box grid")
    return CellSet.from_cells(
        (BOX_SIZE * box_row + i, BOX_SIZE * box_col + j)
        for i in range(BOX_SIZE)
        for j in range(BOX_SIZE)
    )


ROWS: Tuple[CellSet, ...] = tuple(row_mask(r) for r in range(SIZE))
COLUMNS: Tuple[CellSet, ...] = tuple(column_mask(c) for c in range(SIZE))
BOXES: Tuple[CellSet, ...] = tuple(
    box_mask(br, bc) for br in range(BOX_SIZE) for bc in range(BOX_SIZE)
)

"""Enumeration of every valid single-digit placement pattern ("path")."""

from __future__ import annotations
import itertools
from typing import Iterator, Sequence, Tuple

from ..core.cellset import CellSet, SIZE
from ..core.units import BOXES


# _CELL_BITS[row][col] == 1 << (9 * row + col)
_CELL_BITS = tuple(
    tuple(1 << (SIZE * row + col) for col in range(SIZE)) for row in range(SIZE)
)
_BOX_BITS = tuple(box.bits for box in BOXES)


def permutations() -> Iterator[Tuple[int, ...]]:
    """
    Lazily yield every ordering of the columns 0-8.

    Each tuple maps row index to column index. All 9! = 362,880 orderings
    are produced exactly once, in lexicographic order, and a fresh call
    restarts the sequence.
    """
    return itertools.permutations(range(SIZE))


def _permutation_bits(cols: Sequence[int]) -> int:
    bits = 0
    for row, col in enumerate(cols):
        bits |= _CELL_BITS[row][col]
    return bits


def _box_exclusive_bits(bits: int) -> bool:
    return all(bin(box & bits).count("1") == 1 for box in _BOX_BITS)


def permutation_to_cellset(cols: Sequence[int]) -> CellSet:
    """
    Convert a row -> column permutation into the CellSet it covers.

    Raises:
        ValueError: If ``cols`` is not an ordering of 0-8.
    """
    if sorted(cols) != list(range(SIZE)):
        raise ValueError(f"Expected an ordering of 0-{SIZE - 1}, got {tuple(cols)}")
    return CellSet(_permutation_bits(cols))


def is_box_exclusive(cells: CellSet) -> bool:
    """True if every 3x3 box holds exactly one cell of ``cells``."""
    return _box_exclusive_bits(cells.bits)


def generate_paths() -> Iterator[CellSet]:
    """
    Lazily yield every path that is valid within a Sudoku.

    Rows and columns are exclusive by construction since each candidate
    comes from a permutation. Only the box constraint has to be checked.
    There are 46,656 such paths.
    """
    for cols in permutations():
        bits = _permutation_bits(cols)
        if _box_exclusive_bits(bits):
            yield CellSet(bits)

"""Fixed-width 81-cell set used to represent clues, paths and placements."""

from __future__ import annotations
from typing import Iterable, Iterator, Tuple

import numpy as np


SIZE = 9
BOX_SIZE = 3
NUM_CELLS = SIZE * SIZE

# Only the low 81 bits are meaningful.
MASK = (1 << NUM_CELLS) - 1


def cell_index(row: int, col: int) -> int:
    """Linear index of a cell: 9 * row + col."""
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the 9x9 grid")
    return SIZE * row + col


class CellSet:
    """
    Immutable set of board cells stored as an 81-bit integer.

    Bit ``9 * row + col`` is set when the cell (row, col) is a member.
    Every operation returns a new CellSet; equality and hashing only look
    at the bit pattern.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0):
        if bits < 0 or bits & ~MASK:
            raise ValueError("CellSet bits must lie within the 81 board cells")
        self._bits = bits

    @classmethod
    def singleton(cls, row: int, col: int) -> CellSet:
        """Create a set containing only the cell at (row, col)."""
        return cls(1 << cell_index(row, col))

    @classmethod
    def from_cells(cls, cells: Iterable[Tuple[int, int]]) -> CellSet:
        """Create a set from (row, col) pairs."""
        bits = 0
        for row, col in cells:
            bits |= 1 << cell_index(row, col)
        return cls(bits)

    @classmethod
    def full(cls) -> CellSet:
        """The set of all 81 cells."""
        return cls(MASK)

    @property
    def bits(self) -> int:
        """Raw integer bit pattern."""
        return self._bits

    def __or__(self, other: CellSet) -> CellSet:
        return CellSet(self._bits | other._bits)

    def __and__(self, other: CellSet) -> CellSet:
        return CellSet(self._bits & other._bits)

    def __invert__(self) -> CellSet:
        return CellSet(~self._bits & MASK)

    def __sub__(self, other: CellSet) -> CellSet:
        return self & ~other

    def union(self, other: CellSet) -> CellSet:
        return self | other

    def intersection(self, other: CellSet) -> CellSet:
        return self & other

    def complement(self) -> CellSet:
        return ~self

    def is_empty(self) -> bool:
        return self._bits == 0

    def cardinality(self) -> int:
        """Number of cells in the set."""
        return bin(self._bits).count("1")

    def __len__(self) -> int:
        return self.cardinality()

    def __bool__(self) -> bool:
        return self._bits != 0

    def issuperset(self, other: CellSet) -> bool:
        """True if every cell of ``other`` is also in this set."""
        return other._bits & self._bits == other._bits

    def issubset(self, other: CellSet) -> bool:
        return other.issuperset(self)

    def isdisjoint(self, other: CellSet) -> bool:
        return not self._bits & other._bits

    def __contains__(self, cell: Tuple[int, int]) -> bool:
        row, col = cell
        return bool(self._bits >> cell_index(row, col) & 1)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """Yield member cells as (row, col) in row-major order."""
        bits = self._bits
        index = 0
        while bits:
            if bits & 1:
                yield divmod(index, SIZE)
            bits >>= 1
            index += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellSet):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"CellSet({self._bits:081b})"

    def to_array(self) -> np.ndarray:
        """9x9 boolean array with True at member cells."""
        grid = np.zeros((SIZE, SIZE), dtype=bool)
        for row, col in self:
            grid[row, col] = True
        return grid

    def render(self, mark: str = "#") -> str:
        """ASCII grid with ``mark`` on member cells and '.' elsewhere."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for row in range(SIZE):
            if row % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for col in range(SIZE):
                row_str += f' {mark}' if (row, col) in self else ' .'
                if (col + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.render()


EMPTY = CellSet()

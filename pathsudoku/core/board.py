"""Sudoku board stored as one CellSet per digit."""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .cellset import CellSet, SIZE, BOX_SIZE, NUM_CELLS
from .validator import is_consistent, is_valid_path


DIGITS = range(1, SIZE + 1)
PLACEHOLDERS = ".0"


def _check_digit(digit: int) -> int:
    if digit not in DIGITS:
        raise ValueError(f"Digit must be 1-{SIZE}, got {digit}")
    return digit - 1


class SudokuBoard:
    """
    A 9x9 Sudoku stored by digit rather than by cell.

    ``board[d]`` is the CellSet of cells currently holding digit ``d``.
    This makes it cheap to ask where a digit may go, which is what the
    path solver needs, at the cost of a scan when looking up the digit
    in a single cell.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, placements: Optional[Sequence[CellSet]] = None):
        """
        Initialize a board.

        Args:
            placements: Optional nine CellSets, one per digit 1-9.
                If None, creates an empty board.
        """
        if placements is None:
            self._placements: List[CellSet] = [CellSet() for _ in DIGITS]
        else:
            if len(placements) != SIZE:
                raise ValueError(f"Expected {SIZE} placements, got {len(placements)}")
            self._placements = list(placements)

    def __getitem__(self, digit: int) -> CellSet:
        return self._placements[_check_digit(digit)]

    def __setitem__(self, digit: int, cells: CellSet) -> None:
        self._placements[_check_digit(digit)] = cells

    @property
    def placements(self) -> List[CellSet]:
        """Per-digit CellSets in digit order 1-9."""
        return list(self._placements)

    def copy(self) -> SudokuBoard:
        """Create a copy of the board."""
        return SudokuBoard(self._placements)

    def with_placements(self, placements: Sequence[CellSet]) -> SudokuBoard:
        """Return a new board holding the given per-digit placements."""
        return SudokuBoard(placements)

    def occupied(self) -> CellSet:
        """Every cell holding some digit."""
        total = CellSet()
        for cells in self._placements:
            total |= cells
        return total

    def get(self, row: int, col: int) -> int:
        """Get the digit at (row, col). 0 means empty."""
        cell = CellSet.singleton(row, col)
        for digit, cells in zip(DIGITS, self._placements):
            if cells.issuperset(cell):
                return digit
        return 0

    def set(self, row: int, col: int, digit: int) -> None:
        """Place a digit at (row, col), replacing whatever was there. 0 clears."""
        cell = CellSet.singleton(row, col)
        self._placements = [cells - cell for cells in self._placements]
        if digit != 0:
            self[digit] = self[digit] | cell

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.set(row, col, 0)

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty."""
        return (row, col) not in self.occupied()

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return sum(len(cells) for cells in self._placements)

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return NUM_CELLS - len(self.occupied())

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.occupied() == CellSet.full()

    def is_consistent(self) -> bool:
        """
        Check the internal validity of the board.

        No digit may hold more than nine cells and no cell may hold two
        digits. Rules of Sudoku are not checked here.
        """
        return is_consistent(self._placements)

    def is_solved(self) -> bool:
        """Check every digit occupies a complete path and no cell is shared."""
        return (
            self.is_consistent()
            and self.is_complete()
            and all(is_valid_path(cells) for cells in self._placements)
        )

    def to_grid(self) -> np.ndarray:
        """9x9 int32 array of digits, 0 for empty cells."""
        grid = np.zeros((SIZE, SIZE), dtype=np.int32)
        for digit, cells in zip(DIGITS, self._placements):
            grid[cells.to_array()] = digit
        return grid

    @classmethod
    def from_grid(cls, grid: np.ndarray) -> SudokuBoard:
        """
        Create a board from a 9x9 array of digits.

        Raises:
            ValueError: If the shape or values are wrong, or the
                result is internally inconsistent.
        """
        grid = np.asarray(grid)
        if grid.shape != (SIZE, SIZE):
            raise ValueError(f"Grid shape must be ({SIZE}, {SIZE})")
        if grid.min() < 0 or grid.max() > SIZE:
            raise ValueError(f"Grid values must be 0-{SIZE}")

        placements = [
            CellSet.from_cells(
                (int(r), int(c)) for r, c in zip(*np.nonzero(grid == digit))
            )
            for digit in DIGITS
        ]
        board = cls(placements)
        if not board.is_consistent():
            raise ValueError("Board clues are not internally consistent")
        return board

    @classmethod
    def from_2d_list(cls, data: Iterable[Iterable[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls.from_grid(np.array([list(row) for row in data], dtype=np.int32))

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from the usual one-line text form.

        Args:
            s: 81 characters listing the cells row by row. Digits 1-9
               stand for themselves; '.' or '0' marks an empty cell.

        Raises:
            ValueError: On wrong length, an unknown character, or a
                board whose clue-sets are not internally consistent.
        """
        if len(s) != NUM_CELLS:
            raise ValueError(f"String length must be {NUM_CELLS}, got {len(s)}")

        bits = [0] * SIZE
        for idx, c in enumerate(s):
            if c in PLACEHOLDERS:
                continue
            if c not in "123456789":
                raise ValueError(f"Invalid character {c!r} at position {idx}")
            bits[int(c) - 1] |= 1 << idx

        board = cls([CellSet(b) for b in bits])
        if not board.is_consistent():
            raise ValueError("Board clues are not internally consistent")
        return board

    def to_string(self) -> str:
        """Convert board to its 81-character form, '.' for empty cells."""
        chars = ['.'] * NUM_CELLS
        for digit, cells in zip(DIGITS, self._placements):
            for row, col in cells:
                chars[row * SIZE + col] = str(digit)
        return ''.join(chars)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size
        text = self.to_string()

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                row_str += f' {text[i * self.size + j]}'
                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self._placements == other._placements

    def __hash__(self) -> int:
        return hash(tuple(self._placements))

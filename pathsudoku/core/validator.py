"""Validation utilities for clue-sets, paths and solutions."""

from __future__ import annotations
from typing import Sequence, TYPE_CHECKING

from .cellset import CellSet, SIZE
from .units import ROWS, COLUMNS, BOXES

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_consistent(placements: Sequence[CellSet]) -> bool:
    """
    Check the internal consistency of nine per-digit clue-sets.

    This says nothing about whether the clues obey the rules of Sudoku.
    It only checks that no digit occupies more than nine cells and that
    no cell is claimed by two different digits.

    Args:
        placements: One CellSet per digit.

    Returns:
        True if both checks pass.
    """
    total = CellSet()
    for cells in placements:
        if len(cells) > SIZE:
            return False
        if not cells.isdisjoint(total):
            return False
        total |= cells

    return True


def is_valid_path(cells: CellSet) -> bool:
    """
    Check that a CellSet places exactly one cell in every row, column and box.

    Args:
        cells: Candidate placement pattern for a single digit.

    Returns:
        True if the pattern is a complete single-digit placement.
    """
    for units in (ROWS, COLUMNS, BOXES):
        for unit in units:
            if len(unit & cells) != 1:
                return False
    return True


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and keeps every puzzle clue.
    """
    for digit in range(1, SIZE + 1):
        if not solution[digit].issuperset(puzzle[digit]):
            return False

    return solution.is_solved()

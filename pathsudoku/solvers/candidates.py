"""Per-puzzle narrowing of the path universe to each digit's candidates."""

from __future__ import annotations
from typing import List, Optional

from ..core.board import SudokuBoard, DIGITS
from ..core.cellset import CellSet
from ..paths.universe import PathUniverse, default_universe


def opposing_clues(board: SudokuBoard, digit: int) -> CellSet:
    """Cells already held by any digit other than ``digit``."""
    return board.occupied() & ~board[digit]


def filter_candidates(
    universe: PathUniverse,
    clues: CellSet,
    opposing: CellSet
) -> List[CellSet]:
    """
    Keep the paths that cover ``clues`` and avoid ``opposing``.

    Args:
        universe: Every path, in generation order.
        clues: Cells where the digit is already placed.
        opposing: Cells held by other digits.

    Returns:
        Matching paths in universe order.
    """
    clue_bits = clues.bits
    opposing_bits = opposing.bits
    return [
        path
        for path, bits in zip(universe, universe.bits)
        if bits & clue_bits == clue_bits and not bits & opposing_bits
    ]


def candidate_lists(
    board: SudokuBoard,
    universe: Optional[PathUniverse] = None
) -> List[List[CellSet]]:
    """
    Build the candidate list for every digit, in digit order 1-9.

    Args:
        board: Puzzle whose clues filter the universe.
        universe: Path universe to scan (default: the shared one).
    """
    if universe is None:
        universe = default_universe()

    total = board.occupied()
    lists = []
    for digit in DIGITS:
        clues = board[digit]
        lists.append(filter_candidates(universe, clues, total & ~clues))
    return lists

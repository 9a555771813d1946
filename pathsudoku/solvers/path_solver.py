"""Solver that assigns one precomputed path to each digit."""

from __future__ import annotations
from typing import Optional

from .base_solver import BaseSolver
from .candidates import candidate_lists
from .assigner import assign_paths
from ..core.board import SudokuBoard, DIGITS
from ..paths.universe import PathUniverse, default_universe


class PathSolver(BaseSolver):
    """
    Path-assignment solver.

    A solved Sudoku is nine pairwise disjoint paths, one per digit. This
    solver filters the path universe down to the paths consistent with
    each digit's clues, then searches depth-first for a disjoint choice
    of one path per digit, in digit order 1-9.

    Features:
    - Shared, immutable path universe reused across solves
    - Optional forward checking (same result, fewer dead branches)
    - Per-digit candidate counts recorded in stats
    """

    name = "Path Assignment"

    def __init__(
        self,
        universe: Optional[PathUniverse] = None,
        forward_checking: bool = True,
        track_memory: bool = False
    ):
        """
        Initialize the path solver.

        Args:
            universe: Path universe to use. Defaults to the process-wide
                universe, generated on first solve.
            forward_checking: Prune later digits' candidates after each
                pick.
            track_memory: Record peak memory with tracemalloc.
        """
        super().__init__(track_memory=track_memory)
        self._universe = universe
        self.forward_checking = forward_checking

    @property
    def universe(self) -> PathUniverse:
        if self._universe is None:
            self._universe = default_universe()
        return self._universe

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve by filtering candidates and assigning paths."""
        candidates = candidate_lists(board, self.universe)
        self.stats.extra["candidates"] = {
            digit: len(options) for digit, options in zip(DIGITS, candidates)
        }

        assigned = assign_paths(
            candidates,
            forward_checking=self.forward_checking,
            stats=self.stats
        )
        if assigned is None:
            return None

        return board.with_placements(assigned)


def solve_board(
    board: SudokuBoard,
    universe: Optional[PathUniverse] = None,
    forward_checking: bool = True
) -> Optional[SudokuBoard]:
    """
    Solve a board without collecting timing.

    Returns:
        The solved board, or None if no assignment exists.
    """
    if universe is None:
        universe = default_universe()
    assigned = assign_paths(candidate_lists(board, universe), forward_checking)
    if assigned is None:
        return None
    return board.with_placements(assigned)

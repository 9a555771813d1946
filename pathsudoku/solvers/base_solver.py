"""Shared solver plumbing: run statistics and the timed solve wrapper."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple
import time
import tracemalloc

from ..core.board import SudokuBoard


@dataclass
class SolverStats:
    """Counters and timings gathered while solving one board."""
    solved: bool = False
    time_seconds: float = 0.0
    # Peak traced allocation, zero unless memory tracking is on
    memory_bytes: int = 0

    # iterations: search calls made
    # nodes_explored: paths placed on the board
    # backtracks: placed paths taken back off
    iterations: int = 0
    nodes_explored: int = 0
    backtracks: int = 0

    algorithm: str = ""
    # Solver-specific values, e.g. per-digit candidate counts or "error"
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a JSON-friendly dictionary."""
        row = {
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "nodes_explored": self.nodes_explored,
            "backtracks": self.backtracks,
        }
        row.update(self.extra)
        return row


class BaseSolver(ABC):
    """
    Wraps a subclass's search with timing and error capture.

    Subclasses implement `_solve` on a private copy of the board; the
    caller's board is never touched. Anything `_solve` raises ends up in
    ``stats.extra["error"]`` and the solve counts as unsolved.
    """

    name: str = "Solver"

    def __init__(self, track_memory: bool = False):
        """
        Args:
            track_memory: Trace allocations for the duration of each solve
                and keep the peak. Slows solving down considerably.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> Tuple[Optional[SudokuBoard], SolverStats]:
        """
        Solve `board` and report how it went.

        Returns:
            (filled board, stats) on success, (None, stats) otherwise.
        """
        stats = self.stats = SolverStats(algorithm=self.name)
        if self.track_memory:
            tracemalloc.start()

        began = time.perf_counter()
        try:
            solution = self._solve(board.copy())
        except Exception as e:
            stats.extra["error"] = str(e)
            solution = None
        stats.time_seconds = time.perf_counter() - began

        if self.track_memory:
            stats.memory_bytes = tracemalloc.get_traced_memory()[1]
            tracemalloc.stop()

        stats.solved = solution is not None and solution.is_solved()
        return solution, stats

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Return the filled board, or None when the clues admit no solution."""

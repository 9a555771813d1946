"""Sudoku solving by assigning one precomputed placement path per digit."""

from .core import CellSet, SudokuBoard
from .paths import PathUniverse, generate_paths, default_universe
from .solvers import PathSolver, SolverStats, solve_board

__version__ = "1.0.0"

__all__ = [
    "CellSet",
    "SudokuBoard",
    "PathUniverse",
    "generate_paths",
    "default_universe",
    "PathSolver",
    "SolverStats",
    "solve_board",
]

"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .candidates import opposing_clues, filter_candidates, candidate_lists
from .assigner import assign_paths
from .path_solver import PathSolver, solve_board

__all__ = [
    "BaseSolver",
    "SolverStats",
    "opposing_clues",
    "filter_candidates",
    "candidate_lists",
    "assign_paths",
    "PathSolver",
    "solve_board",
]

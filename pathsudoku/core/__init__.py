"""Core module for cell sets, board representation and validation."""

from .cellset import CellSet, MASK
from .board import SudokuBoard, DIGITS
from .validator import is_consistent, is_valid_path, validate_solution

__all__ = [
    "CellSet",
    "MASK",
    "SudokuBoard",
    "DIGITS",
    "is_consistent",
    "is_valid_path",
    "validate_solution",
]

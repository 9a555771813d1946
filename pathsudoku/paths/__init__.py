"""Path generation module."""

from .generator import (
    permutations,
    permutation_to_cellset,
    is_box_exclusive,
    generate_paths,
)
from .universe import PathUniverse, default_universe

__all__ = [
    "permutations",
    "permutation_to_cellset",
    "is_box_exclusive",
    "generate_paths",
    "PathUniverse",
    "default_universe",
]

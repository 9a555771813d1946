"""Materialised, shareable collection of every path."""

from __future__ import annotations
import functools
import os
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from ..core.cellset import CellSet, SIZE
from .generator import generate_paths, is_box_exclusive, permutation_to_cellset


_ROW_MASK = (1 << SIZE) - 1


class PathUniverse:
    """
    Immutable, ordered collection of paths.

    The order is the generation order, which the solver relies on for
    deterministic tie-breaking. Nothing mutates a universe after it is
    built, so one instance can be shared by any number of solves,
    including solves running on different threads.
    """

    __slots__ = ("_paths", "_bits", "_members")

    def __init__(self, paths: Iterable[CellSet]):
        self._paths: Tuple[CellSet, ...] = tuple(paths)
        self._bits: Tuple[int, ...] = tuple(p.bits for p in self._paths)
        self._members = frozenset(self._bits)

    @classmethod
    def generate(cls) -> PathUniverse:
        """Build the full universe from grid geometry."""
        return cls(generate_paths())

    @property
    def bits(self) -> Tuple[int, ...]:
        """Raw bit patterns in universe order."""
        return self._bits

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[CellSet]:
        return iter(self._paths)

    def __getitem__(self, index: int) -> CellSet:
        return self._paths[index]

    def __contains__(self, cells: object) -> bool:
        return isinstance(cells, CellSet) and cells.bits in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathUniverse):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"PathUniverse(paths={len(self)})"

    def to_array(self) -> np.ndarray:
        """
        Encode the universe as an (N, 9) int8 array.

        Row ``i`` holds, for each board row, the column used by path ``i``.
        """
        out = np.empty((len(self._bits), SIZE), dtype=np.int8)
        for i, bits in enumerate(self._bits):
            for row in range(SIZE):
                out[i, row] = ((bits >> (SIZE * row)) & _ROW_MASK).bit_length() - 1
        return out

    @classmethod
    def from_array(cls, array: np.ndarray) -> PathUniverse:
        """
        Decode an array produced by :meth:`to_array`.

        Raises:
            ValueError: If the array has the wrong shape or any row is
                not a box-exclusive permutation.
        """
        array = np.asarray(array)
        if array.ndim != 2 or array.shape[1] != SIZE:
            raise ValueError(f"Expected an (N, {SIZE}) array, got shape {array.shape}")

        paths = []
        for cols in array.tolist():
            cells = permutation_to_cellset(cols)
            if not is_box_exclusive(cells):
                raise ValueError(f"Row {cols} is not a valid path")
            paths.append(cells)
        return cls(paths)

    def save(self, path: Union[str, os.PathLike]) -> None:
        """Save the universe as a .npy file."""
        np.save(path, self.to_array())

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> PathUniverse:
        """Load a universe saved with :meth:`save`."""
        return cls.from_array(np.load(path))


@functools.lru_cache(maxsize=1)
def default_universe() -> PathUniverse:
    """Process-wide universe, generated on first use."""
    return PathUniverse.generate()

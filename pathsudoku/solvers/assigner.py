"""Depth-first assignment of one path per digit."""

from __future__ import annotations
from typing import List, Optional, Sequence

from ..core.cellset import CellSet
from .base_solver import SolverStats


def assign_paths(
    candidates: Sequence[Sequence[CellSet]],
    forward_checking: bool = True,
    stats: Optional[SolverStats] = None
) -> Optional[List[CellSet]]:
    """
    Pick one candidate per digit so that no two picks share a cell.

    Digits are visited in the order given and each digit's candidates in
    list order, so the first assignment found is always the same one.
    Recursion depth equals the number of candidate lists (nine).

    Args:
        candidates: One candidate list per digit.
        forward_checking: If True, drop later candidates that collide
            with the current pick and abandon the branch as soon as some
            later digit has none left. Pruned branches could never have
            succeeded, so the result is identical to the plain search.
        stats: Optional stats object; iterations, nodes_explored and
            backtracks are incremented in place.

    Returns:
        The chosen paths in digit order, or None if no disjoint
        assignment exists.
    """
    if stats is None:
        stats = SolverStats()

    lists = [[path.bits for path in options] for options in candidates]
    if not all(lists):
        # Some digit has nowhere to go
        return None

    if forward_checking:
        chosen = _search_forward(lists, 0, stats)
    else:
        chosen = _search(lists, 0, stats)

    if chosen is None:
        return None
    return [CellSet(bits) for bits in chosen]


def _search(lists: List[List[int]], taken: int, stats: SolverStats) -> Optional[List[int]]:
    stats.iterations += 1
    if not lists:
        return []

    first, rest = lists[0], lists[1:]
    for bits in first:
        if bits & taken:
            continue
        stats.nodes_explored += 1
        tail = _search(rest, taken | bits, stats)
        if tail is not None:
            return [bits] + tail
        stats.backtracks += 1

    return None


def _search_forward(lists: List[List[int]], taken: int, stats: SolverStats) -> Optional[List[int]]:
    stats.iterations += 1
    if not lists:
        return []

    first, rest = lists[0], lists[1:]
    for bits in first:
        if bits & taken:
            continue
        stats.nodes_explored += 1

        narrowed = []
        for later in rest:
            remaining = [other for other in later if not other & bits]
            if not remaining:
                break
            narrowed.append(remaining)
        else:
            tail = _search_forward(narrowed, taken | bits, stats)
            if tail is not None:
                return [bits] + tail

        stats.backtracks += 1

    return None

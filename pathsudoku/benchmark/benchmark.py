"""Batch solving of many puzzles against a shared path universe."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Sequence
from concurrent.futures import ThreadPoolExecutor, TimeoutError
import json
import os
import threading
import time

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..paths.universe import PathUniverse, default_universe
from ..solvers import PathSolver


def load_puzzles(path: str) -> List[str]:
    """
    Read puzzles from a text file, one 81-character puzzle per line.

    Blank lines and lines starting with '#' are skipped.
    """
    puzzles = []
    with open(path, "r") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            puzzles.append(line)
    return puzzles


@dataclass
class BenchmarkResult:
    """Result of solving a single puzzle."""
    puzzle_id: int
    puzzle: str
    solved: bool
    time_seconds: float
    memory_bytes: int = 0
    iterations: int = 0
    backtracks: int = 0
    nodes_explored: int = 0
    solution: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "puzzle": self.puzzle,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "solution": self.solution,
            **self.extra
        }


class Benchmark:
    """
    Solve a batch of puzzles and collect per-puzzle metrics.

    Every puzzle gets its own PathSolver, all reading the same path
    universe, so puzzles can be solved on several worker threads.
    """

    def __init__(
        self,
        puzzles: Sequence[str],
        universe: Optional[PathUniverse] = None,
        workers: int = 1,
        timeout_seconds: float = 60.0,
        forward_checking: bool = True,
        track_memory: bool = False
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Puzzle strings in the 81-character format.
            universe: Shared path universe (default: process-wide one).
            workers: Number of worker threads.
            timeout_seconds: Maximum time to wait for each puzzle.
            forward_checking: Passed through to each PathSolver.
            track_memory: Passed through to each PathSolver.
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        self.puzzles = list(puzzles)
        self.universe = universe
        self.workers = workers
        self.timeout_seconds = timeout_seconds
        self.forward_checking = forward_checking
        self.track_memory = track_memory
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Solve every puzzle.

        Each puzzle's timeout is counted from the moment a worker picks
        it up, so puzzles queued behind a slow one are not charged for
        the wait.

        Returns:
            List of BenchmarkResult objects in input order.
        """
        if self.universe is None:
            self.universe = default_universe()

        self.results = []
        started = [threading.Event() for _ in self.puzzles]
        start_times: Dict[int, float] = {}

        def task(puzzle_id: int, puzzle: str) -> BenchmarkResult:
            start_times[puzzle_id] = time.perf_counter()
            started[puzzle_id].set()
            return self._run_single(puzzle_id, puzzle)

        pbar = tqdm(total=len(self.puzzles), desc="Solving", disable=not show_progress)

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [
                executor.submit(task, puzzle_id, puzzle)
                for puzzle_id, puzzle in enumerate(self.puzzles)
            ]
            for puzzle_id, future in enumerate(futures):
                started[puzzle_id].wait()
                deadline = start_times[puzzle_id] + self.timeout_seconds
                try:
                    result = future.result(timeout=max(deadline - time.perf_counter(), 0.0))
                except TimeoutError:
                    result = BenchmarkResult(
                        puzzle_id=puzzle_id,
                        puzzle=self.puzzles[puzzle_id],
                        solved=False,
                        time_seconds=self.timeout_seconds,
                        extra={"error": "Timeout"}
                    )
                self.results.append(result)
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, puzzle_id: int, puzzle: str) -> BenchmarkResult:
        """Parse and solve a single puzzle."""
        try:
            board = SudokuBoard.from_string(puzzle)
        except ValueError as e:
            return BenchmarkResult(
                puzzle_id=puzzle_id,
                puzzle=puzzle,
                solved=False,
                time_seconds=0.0,
                extra={"error": f"Invalid board format: {e}"}
            )

        solver = PathSolver(
            universe=self.universe,
            forward_checking=self.forward_checking,
            track_memory=self.track_memory
        )
        solution, stats = solver.solve(board)

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            puzzle=puzzle,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            solution=solution.to_string() if solution is not None else None,
            extra=stats.extra
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        parsed = [r for r in self.results if "error" not in r.extra]
        solved = [r for r in parsed if r.solved]
        times = [r.time_seconds for r in parsed]

        summary = {
            "total_puzzles": len(self.results),
            "errors": len(self.results) - len(parsed),
            "solved": len(solved),
            "unsolved": len(parsed) - len(solved),
            "accuracy": len(solved) / len(parsed) * 100 if parsed else 0.0,
            "workers": self.workers,
            "forward_checking": self.forward_checking,
        }

        if times:
            summary.update({
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "total_time_seconds": sum(times),
            })

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save per-puzzle results and the summary as JSON."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        print(f"Results saved to {output_dir}")

"""Visualization utilities for batch solve results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for batch solve results.

    Only puzzles that parsed and ran to completion are plotted.
    """

    SOLVED_COLOR = "#2ecc71"
    UNSOLVED_COLOR = "#e74c3c"

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = [r for r in results if "error" not in r.extra]
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        if not self.results:
            return []

        return [
            self.plot_time_distribution(),
            self.plot_candidate_counts(),
            self.plot_search_effort(),
        ]

    def plot_time_distribution(self) -> str:
        """Histogram of solve times, split by outcome."""
        fig, ax = plt.subplots(figsize=(10, 6))

        solved = [r.time_seconds for r in self.results if r.solved]
        unsolved = [r.time_seconds for r in self.results if not r.solved]

        if solved:
            sns.histplot(solved, ax=ax, color=self.SOLVED_COLOR, label="Solved")
        if unsolved:
            sns.histplot(unsolved, ax=ax, color=self.UNSOLVED_COLOR, label="No solution")

        ax.set_xlabel('Time (seconds)', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Solve Time Distribution', fontsize=14, fontweight='bold')
        ax.legend()

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_candidate_counts(self) -> str:
        """Box plot of candidate list sizes per digit."""
        fig, ax = plt.subplots(figsize=(12, 6))

        digits = list(range(1, 10))
        data = []
        for digit in digits:
            counts = [
                r.extra["candidates"][digit]
                for r in self.results
                if "candidates" in r.extra
            ]
            data.append(counts)

        sns.boxplot(data=data, ax=ax)
        ax.set_xticks(range(len(digits)))
        ax.set_xticklabels([str(d) for d in digits])
        ax.set_yscale('symlog')

        ax.set_xlabel('Digit', fontsize=12)
        ax.set_ylabel('Candidate paths', fontsize=12)
        ax.set_title('Candidate Paths per Digit after Clue Filtering', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "candidate_counts.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_search_effort(self) -> str:
        """Scatter of nodes explored against solve time."""
        fig, ax = plt.subplots(figsize=(10, 6))

        nodes = np.array([r.nodes_explored for r in self.results])
        times = np.array([r.time_seconds for r in self.results])
        colors = [self.SOLVED_COLOR if r.solved else self.UNSOLVED_COLOR for r in self.results]

        ax.scatter(nodes, times, c=colors, edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Nodes explored', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Search Effort vs Solve Time', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "search_effort.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        solved = sum(1 for r in self.results if r.solved)
        accuracy = (solved / len(self.results)) * 100 if self.results else 0

        avg_time = np.mean([r.time_seconds for r in self.results]) if self.results else 0.0
        avg_nodes = np.mean([r.nodes_explored for r in self.results]) if self.results else 0.0
        avg_backtracks = np.mean([r.backtracks for r in self.results]) if self.results else 0.0

        lines = [
            "# Solve Summary\n",
            "| Puzzles | Solved | Avg Time | Avg Nodes | Avg Backtracks |",
            "|---------|--------|----------|-----------|----------------|",
            f"| {len(self.results)} | {accuracy:.1f}% | {avg_time:.4f}s | "
            f"{int(avg_nodes):,} | {int(avg_backtracks):,} |",
        ]

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path

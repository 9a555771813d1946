"""Benchmark module for batch solving."""

from .benchmark import Benchmark, BenchmarkResult, load_puzzles
from .visualizer import Visualizer

__all__ = ["Benchmark", "BenchmarkResult", "load_puzzles", "Visualizer"]

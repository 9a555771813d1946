"""Command-line interface for the path-assignment Sudoku solver."""

import argparse
import sys
import time

from .benchmark import Benchmark, load_puzzles
from .benchmark.visualizer import Visualizer
from .core.board import SudokuBoard
from .paths import PathUniverse
from .solvers import PathSolver


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver that assigns one placement path per digit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve one or more puzzles ('.' or '0' for empty cells)
  pathsudoku solve "........8..3...4...9..2..6.....79.......612...6.5.2.7...8...5...1.....2.4.5.....3"

  # Precompute the path universe once and reuse it
  pathsudoku paths --output paths.npy
  pathsudoku solve --paths paths.npy "<puzzle>"

  # Solve a file of puzzles on 4 threads
  pathsudoku benchmark --file puzzles.txt --workers 4 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve one or more puzzles")
    solve_parser.add_argument(
        "puzzles", nargs="*",
        help="Puzzle strings (81 chars, '.' or '0' for empty cells)"
    )
    solve_parser.add_argument(
        "--paths", type=str, default=None,
        help="Load the path universe from a .npy file instead of generating it"
    )
    solve_parser.add_argument(
        "--no-forward-check", action="store_true",
        help="Use the plain depth-first search without forward checking"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Paths command
    paths_parser = subparsers.add_parser("paths", help="Generate the path universe")
    paths_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Save the universe to this .npy file"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Solve a file of puzzles")
    bench_parser.add_argument(
        "--file", "-f", type=str, required=True,
        help="Text file with one puzzle per line"
    )
    bench_parser.add_argument(
        "--paths", type=str, default=None,
        help="Load the path universe from a .npy file instead of generating it"
    )
    bench_parser.add_argument(
        "--workers", "-w", type=int, default=1,
        help="Number of worker threads (default: 1)"
    )
    bench_parser.add_argument(
        "--timeout", "-t", type=float, default=60.0,
        help="Seconds to wait for each puzzle (default: 60)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "paths":
        cmd_paths(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _load_universe(path):
    """Load a saved universe, or generate a fresh one."""
    if path is None:
        return PathUniverse.generate()
    try:
        return PathUniverse.load(path)
    except (OSError, ValueError) as e:
        print(f"Error loading paths from {path}: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_solve(args):
    """Handle the solve command."""
    if not args.puzzles:
        print("Usage: pathsudoku solve <puzzle> [puzzle2] [puzzle3] ...", file=sys.stderr)
        sys.exit(1)

    universe = _load_universe(args.paths)
    solver = PathSolver(universe=universe, forward_checking=not args.no_forward_check)

    for puzzle in args.puzzles:
        try:
            board = SudokuBoard.from_string(puzzle)
        except ValueError as e:
            print(f"Invalid board format: {e}", file=sys.stderr)
            continue

        solution, stats = solver.solve(board)

        if solution is not None:
            print(solution)
        else:
            print("No solution found")
            if "error" in stats.extra:
                print(f"  Error: {stats.extra['error']}")

        print(f"Solution took {stats.time_seconds:.6f}s")
        if args.verbose:
            counts = ", ".join(
                f"{digit}:{count}" for digit, count in stats.extra.get("candidates", {}).items()
            )
            print(f"  Candidates: {counts}")
            print(f"  Nodes explored: {stats.nodes_explored:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
        print()


def cmd_paths(args):
    """Handle the paths command."""
    start = time.perf_counter()
    universe = PathUniverse.generate()
    elapsed = time.perf_counter() - start

    print(f"Generated {len(universe):,} paths in {elapsed:.2f}s")

    if args.output:
        universe.save(args.output)
        print(f"Paths saved to {args.output}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    try:
        puzzles = load_puzzles(args.file)
    except OSError as e:
        print(f"Error reading puzzles: {e}", file=sys.stderr)
        sys.exit(1)

    print("=" * 60)
    print("PATH SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")
    print(f"Workers: {args.workers}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    universe = _load_universe(args.paths)
    benchmark = Benchmark(
        puzzles,
        universe=universe,
        workers=args.workers,
        timeout_seconds=args.timeout
    )
    results = benchmark.run()

    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"  Solved: {summary['solved']}/{summary['total_puzzles']}")
    print(f"  No solution: {summary['unsolved']}")
    print(f"  Errors: {summary['errors']}")
    if "avg_time_seconds" in summary:
        print(f"  Avg Time: {summary['avg_time_seconds']:.4f}s")
        print(f"  Max Time: {summary['max_time_seconds']:.4f}s")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()

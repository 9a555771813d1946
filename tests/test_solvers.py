"""Unit tests for candidate filtering, path assignment and the path solver."""

import pytest
from pathsudoku.core.board import SudokuBoard, DIGITS
from pathsudoku.core.cellset import CellSet
from pathsudoku.core.validator import is_valid_path, validate_solution
from pathsudoku.solvers import (
    BaseSolver,
    PathSolver,
    SolverStats,
    assign_paths,
    candidate_lists,
    filter_candidates,
    opposing_clues,
    solve_board,
)


HARD_PUZZLE = "........8..3...4...9..2..6.....79.......612...6.5.2.7...8...5...1.....2.4.5.....3"

# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Row 0 needs a 9 in its last cell, but column 8 already has one
UNSOLVABLE_PUZZLE = "12345678." + "........9" + "." * 63

# Two 5s in the first row
RULE_BREAKING_PUZZLE = "55" + TEST_PUZZLE[2:]


class TestCandidateFilter:
    """Tests for per-digit candidate filtering."""

    def test_opposing_clues(self):
        """Opposing clues are every other digit's cells."""
        board = SudokuBoard.from_string(HARD_PUZZLE)
        opposing = opposing_clues(board, 8)
        assert opposing.isdisjoint(board[8])
        assert opposing | board[8] == board.occupied()

    def test_candidates_respect_clues(self, universe):
        """Every candidate covers its clues and avoids other digits."""
        board = SudokuBoard.from_string(HARD_PUZZLE)
        lists = candidate_lists(board, universe)

        assert len(lists) == 9
        for digit, options in zip(DIGITS, lists):
            assert options
            opposing = opposing_clues(board, digit)
            for path in options:
                assert path.issuperset(board[digit])
                assert path.isdisjoint(opposing)

    def test_matches_direct_scan(self, universe):
        """Filtering agrees with a scan using CellSet operations."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        clues = board[5]
        opposing = opposing_clues(board, 5)

        expected = [
            path for path in universe
            if path.issuperset(clues) and (path & opposing).is_empty()
        ]
        assert filter_candidates(universe, clues, opposing) == expected

    def test_empty_board_keeps_everything(self, universe):
        """With no clues every path is a candidate."""
        lists = candidate_lists(SudokuBoard(), universe)
        assert all(len(options) == len(universe) for options in lists)


class TestAssigner:
    """Tests for the depth-first assigner on small hand-built lists."""

    A = CellSet.singleton(0, 0)
    B = CellSet.singleton(0, 1)
    C = CellSet.singleton(1, 1)

    @pytest.mark.parametrize("forward_checking", [True, False])
    def test_first_disjoint_choice(self, forward_checking):
        """Colliding candidates are skipped."""
        result = assign_paths([[self.A, self.B], [self.A, self.C]], forward_checking)
        assert result == [self.A, self.C]

    @pytest.mark.parametrize("forward_checking", [True, False])
    def test_backtracks(self, forward_checking):
        """A dead end sends the search back to the previous digit."""
        stats = SolverStats()
        result = assign_paths([[self.A, self.B], [self.A]], forward_checking, stats)
        assert result == [self.B, self.A]
        assert stats.backtracks >= 1

    @pytest.mark.parametrize("forward_checking", [True, False])
    def test_no_assignment(self, forward_checking):
        """Exhausting every branch reports failure."""
        assert assign_paths([[self.A], [self.A]], forward_checking) is None

    def test_empty_list_fails_immediately(self):
        """A digit with no candidates means no search at all."""
        stats = SolverStats()
        assert assign_paths([[self.A, self.B], []], stats=stats) is None
        assert stats.nodes_explored == 0

    def test_deep_backtrack_same_in_both_modes(self):
        """A failure two digits down unwinds to the first digit either way."""
        D = CellSet.singleton(2, 2)
        lists = [[self.A, self.B], [self.C], [self.C, self.A], [D]]

        plain_stats = SolverStats()
        checked_stats = SolverStats()
        plain = assign_paths(lists, forward_checking=False, stats=plain_stats)
        checked = assign_paths(lists, forward_checking=True, stats=checked_stats)

        assert plain == [self.B, self.C, self.A, D]
        assert checked == plain
        assert plain_stats.backtracks >= 1
        assert checked_stats.backtracks >= 1

    def test_no_digits(self):
        """Nothing to assign is trivially satisfied."""
        assert assign_paths([]) == []


class TestPathSolver:
    """Tests for the path solver."""

    def test_solve_puzzle(self, universe):
        """Test solving a known puzzle."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = PathSolver(universe=universe)

        solution, stats = solver.solve(board)

        assert stats.solved
        assert solution is not None
        assert solution.is_solved()
        assert solution.to_string() == TEST_SOLUTION

    def test_solve_hard_puzzle(self, universe):
        """Every digit ends on a path covering its clues."""
        board = SudokuBoard.from_string(HARD_PUZZLE)
        solution, stats = PathSolver(universe=universe).solve(board)

        assert stats.solved
        assert solution.count_empty() == 0
        assert validate_solution(board, solution)

        taken = CellSet()
        for digit in DIGITS:
            assert len(solution[digit]) == 9
            assert is_valid_path(solution[digit])
            assert solution[digit].issuperset(board[digit])
            assert solution[digit].isdisjoint(taken)
            taken |= solution[digit]

    def test_deterministic(self, universe):
        """Solving twice gives the same assignment."""
        board = SudokuBoard.from_string(HARD_PUZZLE)
        first, _ = PathSolver(universe=universe).solve(board)
        second, _ = PathSolver(universe=universe).solve(board)
        assert first == second

    @pytest.mark.parametrize("puzzle", [TEST_PUZZLE, HARD_PUZZLE])
    def test_forward_checking_gives_same_answer(self, universe, puzzle):
        """The plain search finds the same first solution."""
        board = SudokuBoard.from_string(puzzle)
        plain, plain_stats = PathSolver(universe=universe, forward_checking=False).solve(board)
        checked, _ = PathSolver(universe=universe, forward_checking=True).solve(board)
        assert plain_stats.solved
        assert plain == checked

    def test_input_not_modified(self, universe):
        """The caller's board keeps its clues."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        PathSolver(universe=universe).solve(board)
        assert board.to_string() == TEST_PUZZLE.replace("0", ".")

    def test_stats_collected(self, universe):
        """Test that stats are collected."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        _, stats = PathSolver(universe=universe).solve(board)

        assert stats.time_seconds > 0
        assert stats.nodes_explored >= 9
        assert stats.algorithm == PathSolver.name
        assert sorted(stats.extra["candidates"]) == list(DIGITS)

    def test_memory_tracking(self, universe):
        """Peak memory is recorded only when asked for."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        _, stats = PathSolver(universe=universe, track_memory=True).solve(board)
        assert stats.memory_bytes > 0

    def test_unsolvable(self, universe):
        """A well-formed board with no solution reports failure."""
        board = SudokuBoard.from_string(UNSOLVABLE_PUZZLE)
        solution, stats = PathSolver(universe=universe).solve(board)
        assert solution is None
        assert not stats.solved
        assert "error" not in stats.extra

    def test_rule_breaking_clues(self, universe):
        """Two equal digits in a row leave that digit without candidates."""
        board = SudokuBoard.from_string(RULE_BREAKING_PUZZLE)
        solution, stats = PathSolver(universe=universe).solve(board)
        assert solution is None
        assert stats.extra["candidates"][5] == 0

    @pytest.mark.parametrize("forward_checking", [True, False])
    def test_overlapping_clues_terminate(self, universe, forward_checking):
        """Clue-sets that share a cell never produce an assignment."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        # (0, 0) already holds a 5
        board[2] = board[2] | CellSet.singleton(0, 0)
        assert not board.is_consistent()

        solver = PathSolver(universe=universe, forward_checking=forward_checking)
        solution, stats = solver.solve(board)
        assert solution is None
        assert not stats.solved

    def test_solve_board(self, universe):
        """Convenience wrapper returns just the board."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert solve_board(board, universe).to_string() == TEST_SOLUTION
        assert solve_board(SudokuBoard.from_string(UNSOLVABLE_PUZZLE), universe) is None


class TestBaseSolver:
    """Tests for the timed solve wrapper shared by solvers."""

    class Failing(BaseSolver):
        name = "Failing"

        def _solve(self, board):
            board.set(0, 0, 9)
            raise RuntimeError("search exploded")

    def test_error_recorded_not_raised(self):
        """An exception from the search becomes an unsolved result."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solution, stats = self.Failing().solve(board)

        assert solution is None
        assert not stats.solved
        assert stats.extra["error"] == "search exploded"
        assert board.get(0, 0) == 5

    def test_memory_untracked_by_default(self, universe):
        """Peak memory stays zero unless tracking was asked for."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        _, stats = PathSolver(universe=universe).solve(board)
        assert stats.memory_bytes == 0

    def test_stats_dict_flattens_extra(self):
        """Extra values sit beside the fixed counters."""
        stats = SolverStats(algorithm="Path Assignment", backtracks=3)
        stats.extra["candidates"] = {1: 2}

        row = stats.to_dict()
        assert row["algorithm"] == "Path Assignment"
        assert row["backtracks"] == 3
        assert row["candidates"] == {1: 2}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

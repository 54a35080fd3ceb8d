import pytest

from grid_logic.core.search import search
from grid_logic.core.solver import SOLVED, UNSOLVABLE, NonogramSolver, find_solution
from grid_logic.core.types import CellState, empty_grid
from grid_logic.core.validation import clues_from_grid, verify_solution
from grid_logic.schemas.nonogram import tokens_to_grid

F, E = CellState.FILLED, CellState.EMPTY

SOUNDNESS_GRIDS = [
    ["s.s", ".s.", "s.s"],
    ["ss..", ".ss.", "..ss", "s..s"],
    ["sssss", "s...s", "s.s.s", "s...s", "sssss"],
    ["s....", ".....", "..ss.", "....s"],
    [".ss.s.", "ssssss", "......"],
]


class TestFindSolution:
    def test_trivial_single_row(self):
        assert find_solution([[2]], [[1], [1]]) == [[F, F]]

    def test_all_filled(self):
        assert find_solution([[2], [2]], [[2], [2]]) == [[F, F], [F, F]]

    def test_unsolvable_clue_too_long(self):
        assert find_solution([[3]], [[1]]) is None

    def test_multiple_solutions_returns_one(self):
        result = find_solution([[1], [1], [1]], [[1], [1], [1]])
        assert result is not None
        assert sorted(row.index(F) for row in result) == [0, 1, 2]
        assert all(row.count(F) == 1 for row in result)

    def test_worked_example_matches_golden(self, worked_clues, worked_solution):
        rows, cols = worked_clues
        assert find_solution(rows, cols) == worked_solution

    def test_worked_example_solution_is_unique(self, worked_clues, worked_solution):
        rows, cols = worked_clues
        # any grid other than the golden one differs from it in at least one cell
        for r, row in enumerate(worked_solution):
            for c, state in enumerate(row):
                grid = empty_grid(len(rows), len(cols))
                grid[r][c] = E if state == F else F
                assert search(grid, rows, cols) is None

    def test_empty_puzzle(self):
        assert find_solution([], []) == []

    def test_all_empty_lines(self):
        assert find_solution([[], []], [[], [], []]) == [[E, E, E], [E, E, E]]

    def test_inconsistent_totals(self):
        assert find_solution([[1], [1]], [[2], [2]]) is None

    @pytest.mark.parametrize("rows", SOUNDNESS_GRIDS)
    def test_solutions_satisfy_clues(self, rows):
        row_clues, col_clues = clues_from_grid(tokens_to_grid([list(r) for r in rows]))
        result = find_solution(row_clues, col_clues)
        assert result is not None
        assert verify_solution(result, row_clues, col_clues)


class TestNonogramSolver:
    def test_solved_result(self, worked_clues):
        rows, cols = worked_clues
        result = NonogramSolver().resolve(rows, cols)
        assert result.status == SOLVED
        assert result.solved
        assert result.stats.nodes >= 1
        assert result.stats.rounds >= 1

    def test_unsolvable_result(self):
        result = NonogramSolver().resolve([[3]], [[1]])
        assert result.status == UNSOLVABLE
        assert not result.solved
        assert result.grid is None

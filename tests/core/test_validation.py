from grid_logic.core.types import CellState
from grid_logic.core.validation import (
    clues_from_grid,
    count_line_errors,
    line_blocks,
    line_satisfies,
    shape_matches,
    verify_solution,
)

F, E = CellState.FILLED, CellState.EMPTY


def test_line_blocks():
    assert line_blocks([F, F, E, F, E, E, F, F, F]) == [2, 1, 3]
    assert line_blocks([E, E]) == []
    assert line_blocks([]) == []


def test_line_satisfies():
    assert line_satisfies([E, F, F], [2])
    assert not line_satisfies([F, E, F], [2])
    assert line_satisfies([E, E], [])


def test_count_line_errors(worked_clues, worked_solution):
    rows, cols = worked_clues
    assert count_line_errors(worked_solution, rows, cols) == 0

    broken = [row[:] for row in worked_solution]
    broken[0][0] = F
    # row 0 and column 0 both break
    assert count_line_errors(broken, rows, cols) == 2


def test_verify_solution_rejects_bad_shapes():
    assert not verify_solution([[F]], [[1], [1]], [[1]])
    assert not verify_solution([[F, F]], [[1]], [[1]])
    assert not verify_solution([[None]], [[1]], [[1]])
    assert verify_solution([[F]], [[1]], [[1]])


def test_clues_from_grid(worked_clues, worked_solution):
    assert clues_from_grid(worked_solution) == (list(worked_clues[0]), list(worked_clues[1]))
    assert clues_from_grid([]) == ([], [])


def test_shape_matches():
    assert shape_matches([[F, E]], [[1]], [[1], []])
    assert not shape_matches([[F]], [[1]], [[1], []])
    assert not shape_matches([[F], [E]], [[1]], [[1]])
    assert shape_matches([], [], [])

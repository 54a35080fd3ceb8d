from typing import Optional, Sequence

from grid_logic.core.errors import LineContradiction
from grid_logic.core.line import solve_line
from grid_logic.core.stats import SearchStats
from grid_logic.core.transpose import transpose
from grid_logic.core.types import Clue, Grid, grids_equal

ROW_AXIS = "row"
COLUMN_AXIS = "column"


def narrow_lines(lines: Grid, clues: Sequence[Clue], axis: str) -> Grid:
    narrowed = [solve_line(line, clue, axis, index) for index, (line, clue) in enumerate(zip(lines, clues))]
    check_refinement(lines, narrowed, axis)
    return narrowed


def check_refinement(before: Grid, after: Grid, axis: str = ROW_AXIS) -> None:
    """Raise if `after` drops or overwrites any cell already known in `before`."""
    for index, (old_line, new_line) in enumerate(zip(before, after)):
        for old, new in zip(old_line, new_line):
            if old is not None and new != old:
                raise LineContradiction(axis, index, "known cell would be overwritten")


def propagation_round(grid: Grid, row_clues: Sequence[Clue], col_clues: Sequence[Clue]) -> Grid:
    num_rows, num_cols = len(row_clues), len(col_clues)
    rows = narrow_lines(grid, row_clues, ROW_AXIS)
    columns = narrow_lines(transpose(rows, num_cols), col_clues, COLUMN_AXIS)
    return transpose(columns, num_rows)


def propagate(
    grid: Grid,
    row_clues: Sequence[Clue],
    col_clues: Sequence[Clue],
    stats: Optional[SearchStats] = None,
) -> Grid:
    """
    Narrow every row then every column until a round changes nothing.

    Returns the fixpoint grid as a new object; the input is never mutated.
    Raises LineContradiction as soon as any line has no valid completion.
    """
    current = grid
    while True:
        updated = propagation_round(current, row_clues, col_clues)
        if stats is not None:
            stats.rounds += 1
            stats.line_updates += len(row_clues) + len(col_clues)
        if grids_equal(updated, current):
            return updated
        current = updated

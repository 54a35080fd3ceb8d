import itertools
from typing import List, Optional, Sequence, Tuple

from grid_logic.core.transpose import transpose
from grid_logic.core.types import CellState, Clue, Grid, SolvedGrid


def line_blocks(cells: Sequence[Optional[CellState]]) -> List[int]:
    return [len(list(group)) for state, group in itertools.groupby(cells) if state == CellState.FILLED]


def line_satisfies(cells: Sequence[Optional[CellState]], clue: Clue) -> bool:
    return line_blocks(cells) == list(clue)


def count_line_errors(grid: Grid, row_clues: Sequence[Clue], col_clues: Sequence[Clue]) -> int:
    """Number of rows and columns whose filled runs differ from their clue."""
    errors = 0
    for row, clue in zip(grid, row_clues):
        if not line_satisfies(row, clue):
            errors += 1
    for column, clue in zip(transpose(grid, len(col_clues)), col_clues):
        if not line_satisfies(column, clue):
            errors += 1
    return errors


def verify_solution(grid: Grid, row_clues: Sequence[Clue], col_clues: Sequence[Clue]) -> bool:
    if not shape_matches(grid, row_clues, col_clues):
        return False
    if any(cell is None for row in grid for cell in row):
        return False
    return count_line_errors(grid, row_clues, col_clues) == 0


def clues_from_grid(grid: SolvedGrid) -> Tuple[List[List[int]], List[List[int]]]:
    num_cols = len(grid[0]) if grid else 0
    row_clues = [line_blocks(row) for row in grid]
    col_clues = [line_blocks(column) for column in transpose(grid, num_cols)]
    return row_clues, col_clues


def shape_matches(grid: Grid, row_clues: Sequence[Clue], col_clues: Sequence[Clue]) -> bool:
    return len(grid) == len(row_clues) and all(len(row) == len(col_clues) for row in grid)

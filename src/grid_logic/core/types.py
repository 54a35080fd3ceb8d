from enum import Enum
from typing import List, Optional, Sequence, Tuple


class CellState(Enum):
    FILLED = "filled"
    EMPTY = "empty"


Clue = Sequence[int]
Line = List[Optional[CellState]]
Candidate = Tuple[CellState, ...]
Grid = List[List[Optional[CellState]]]
SolvedGrid = List[List[CellState]]


def empty_grid(num_rows: int, num_cols: int) -> Grid:
    return [[None] * num_cols for _ in range(num_rows)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def grids_equal(a: Grid, b: Grid) -> bool:
    """Cell-by-cell structural equality, shape included."""
    if len(a) != len(b):
        return False
    return all(row_a == row_b for row_a, row_b in zip(a, b))


def count_unknown(grid: Grid) -> int:
    return sum(1 for row in grid for cell in row if cell is None)

from typing import Optional, Sequence

import msgspec

from grid_logic.core.search import search
from grid_logic.core.stats import SearchStats
from grid_logic.core.types import Clue, SolvedGrid, empty_grid

SOLVED = "solved"
UNSOLVABLE = "unsolvable"


class SolveResult(msgspec.Struct):
    status: str
    grid: Optional[SolvedGrid]
    stats: SearchStats

    @property
    def solved(self) -> bool:
        return self.status == SOLVED


class NonogramSolver:
    def __init__(self, max_nodes: Optional[int] = None):
        self.max_nodes = max_nodes

    def resolve(self, row_clues: Sequence[Clue], col_clues: Sequence[Clue]) -> SolveResult:
        stats = SearchStats()
        grid = empty_grid(len(row_clues), len(col_clues))
        solution = search(grid, row_clues, col_clues, stats=stats, max_nodes=self.max_nodes)
        status = SOLVED if solution is not None else UNSOLVABLE
        return SolveResult(status=status, grid=solution, stats=stats)


def find_solution(row_clues: Sequence[Clue], col_clues: Sequence[Clue]) -> Optional[SolvedGrid]:
    """First solution found for the clues, or None if the puzzle has none."""
    return NonogramSolver().resolve(row_clues, col_clues).grid

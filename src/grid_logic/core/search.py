from typing import List, Optional, Sequence, Tuple, cast

from grid_logic.core.errors import LineContradiction, SearchLimitExceeded
from grid_logic.core.propagation import propagate
from grid_logic.core.stats import SearchStats
from grid_logic.core.types import CellState, Clue, Grid, SolvedGrid, copy_grid

# FILLED is explored before EMPTY; this decides which solution is returned
# when a puzzle has several.
BRANCH_ORDER = (CellState.FILLED, CellState.EMPTY)


def first_unknown_cell(grid: Grid) -> Optional[Tuple[int, int]]:
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell is None:
                return r, c
    return None


def assume(grid: Grid, row: int, col: int, state: CellState) -> Grid:
    branch = copy_grid(grid)
    branch[row][col] = state
    return branch


def search(
    grid: Grid,
    row_clues: Sequence[Clue],
    col_clues: Sequence[Clue],
    stats: Optional[SearchStats] = None,
    max_nodes: Optional[int] = None,
) -> Optional[SolvedGrid]:
    """
    Depth-first search over propagation fixpoints.

    Each node propagates its own grid. A contradiction kills the node; a
    complete fixpoint is returned as the solution; otherwise the first unknown
    cell (row-major) is branched on, FILLED first. Returns None once every
    branch is exhausted.

    Nodes live on an explicit stack rather than the call stack. Popping the
    FILLED child before its EMPTY sibling gives the same visiting order as
    the recursive formulation.
    """
    stack: List[Tuple[Grid, int]] = [(grid, 0)]
    visited = 0

    while stack:
        node, depth = stack.pop()
        visited += 1
        if max_nodes is not None and 0 < max_nodes < visited:
            raise SearchLimitExceeded(max_nodes)
        if stats is not None:
            stats.nodes += 1
            stats.max_depth = max(stats.max_depth, depth)

        try:
            fixpoint = propagate(node, row_clues, col_clues, stats)
        except LineContradiction:
            if stats is not None:
                stats.dead_branches += 1
            continue

        cell = first_unknown_cell(fixpoint)
        if cell is None:
            return cast(SolvedGrid, fixpoint)

        r, c = cell
        for state in reversed(BRANCH_ORDER):
            stack.append((assume(fixpoint, r, c, state), depth + 1))

    return None

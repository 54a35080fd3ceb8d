from typing import List, Optional

import msgspec

from grid_logic.core.types import CellState, SolvedGrid

FILLED_TOKEN = "s"
EMPTY_TOKEN = "."


def clean_hints(hints: List[List[int]]) -> List[List[int]]:
    """Drop zero padding from each line's hint list."""
    return [[h for h in line if h != 0] for line in hints]


class NonogramHints(msgspec.Struct):
    row_hints: List[List[int]]
    col_hints: List[List[int]]


class NonogramPuzzle(msgspec.Struct, rename="lower"):
    hints: NonogramHints
    id: str = "unknown"
    solution: Optional[List[List[str]]] = None

    @property
    def row_clues(self) -> List[List[int]]:
        return clean_hints(self.hints.row_hints)

    @property
    def col_clues(self) -> List[List[int]]:
        return clean_hints(self.hints.col_hints)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.hints.row_hints), len(self.hints.col_hints)

    def expected_grid(self) -> Optional[SolvedGrid]:
        if self.solution is None:
            return None
        return tokens_to_grid(self.solution)


def tokens_to_grid(tokens: List[List[str]]) -> SolvedGrid:
    return [[CellState.FILLED if str(cell) == FILLED_TOKEN else CellState.EMPTY for cell in row] for row in tokens]


def grid_to_tokens(grid: SolvedGrid) -> List[List[str]]:
    return [[FILLED_TOKEN if cell == CellState.FILLED else EMPTY_TOKEN for cell in row] for row in grid]

import msgspec

from grid_logic.core.types import CellState
from grid_logic.schemas.nonogram import (
    NonogramHints,
    NonogramPuzzle,
    clean_hints,
    grid_to_tokens,
    tokens_to_grid,
)

F, E = CellState.FILLED, CellState.EMPTY


def test_clean_hints_strips_padding():
    assert clean_hints([[1, 2, 0], [0, 0, 0], [3]]) == [[1, 2], [], [3]]


def test_puzzle_from_builtins():
    raw = {
        "id": "p1",
        "hints": {"row_hints": [[1, 0], [0, 0]], "col_hints": [[1], [0]]},
        "solution": [["s", "."], [".", "."]],
    }
    puzzle = msgspec.convert(raw, NonogramPuzzle)
    assert puzzle.row_clues == [[1], []]
    assert puzzle.col_clues == [[1], []]
    assert puzzle.shape == (2, 2)
    assert puzzle.expected_grid() == [[F, E], [E, E]]


def test_puzzle_defaults():
    puzzle = NonogramPuzzle(hints=NonogramHints(row_hints=[[1]], col_hints=[[1]]))
    assert puzzle.id == "unknown"
    assert puzzle.expected_grid() is None


def test_token_conversion():
    grid = [[F, E, F]]
    assert grid_to_tokens(grid) == [["s", ".", "s"]]
    assert tokens_to_grid(grid_to_tokens(grid)) == grid
    # anything other than the filled token reads as empty
    assert tokens_to_grid([["s", "0", "*"]]) == [[F, E, E]]


def test_clean_hints_keeps_negative_blocks():
    assert clean_hints([[-1, 0], [0, 2]]) == [[-1], [2]]

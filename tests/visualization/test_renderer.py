from unittest.mock import MagicMock

from rich.console import Console

from grid_logic.core.types import CellState
from grid_logic.visualization.renderer import (
    display_comparison,
    display_solution,
    display_with_hints,
    format_grid,
    format_hints,
    format_row,
)

F, E = CellState.FILLED, CellState.EMPTY


def test_format_row_plain_symbols():
    assert format_row([F, E, F]) == "X_X"


def test_format_grid_custom_symbols():
    assert format_grid([[F, E], [E, F]], filled="#", empty=".") == ["#.", ".#"]


def test_format_hints_casts_to_int():
    assert format_hints([[1.0, 2.0], []]) == [[1, 2], []]


def test_display_solution_renders_cells():
    out = Console(record=True, width=80)
    display_solution([[F, E], [E, F]], title="demo", out=out)
    text = out.export_text()
    assert "demo" in text
    assert "█" in text


def test_display_solution_empty_grid():
    out = Console(record=True, width=80)
    display_solution([], out=out)
    assert "(empty grid)" in out.export_text()


def test_display_with_hints_one_line_per_row():
    out = MagicMock()
    display_with_hints([[F, F], [E, F]], [[2], [1]], out=out)
    # two header lines plus one per row
    assert out.print.call_count == 4


def test_display_comparison():
    out = Console(record=True, width=80)
    display_comparison([[F, E]], [[E, F]], out=out)
    assert "│" in out.export_text()

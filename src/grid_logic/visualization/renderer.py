from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel

from grid_logic.core.types import CellState, Clue, SolvedGrid
from grid_logic.utils.config import settings

console = Console()

PLAIN_FILLED = "X"
PLAIN_EMPTY = "_"
PANEL_BORDER_STYLE = "cyan"
HINT_COLUMN_WIDTH = 10


def format_row(row: Sequence[CellState], filled: str = PLAIN_FILLED, empty: str = PLAIN_EMPTY) -> str:
    return "".join(filled if cell == CellState.FILLED else empty for cell in row)


def format_grid(grid: SolvedGrid, filled: str = PLAIN_FILLED, empty: str = PLAIN_EMPTY) -> List[str]:
    return [format_row(row, filled, empty) for row in grid]


def format_hints(clues: Sequence[Clue]) -> List[List[int]]:
    return [[int(h) for h in clue] for clue in clues]


def display_solution(grid: SolvedGrid, title: Optional[str] = None, out: Optional[Console] = None):
    out = out or console
    num_rows = len(grid)
    num_cols = len(grid[0]) if grid else 0
    body = "\n".join(format_grid(grid, settings.DISPLAY_FILLED, settings.DISPLAY_EMPTY)) or "(empty grid)"
    out.print(Panel(
        body,
        title=title or f"Solution ({num_rows}x{num_cols})",
        expand=False,
        border_style=PANEL_BORDER_STYLE,
        highlight=False,
    ))


def display_with_hints(grid: SolvedGrid, row_clues: Sequence[Clue], out: Optional[Console] = None):
    """Row hints on the left, grid on the right."""
    out = out or console
    num_cols = len(grid[0]) if grid else 0
    out.print("[dim]Hints      │ Grid Layout[/]")
    out.print("[dim]───────────┼" + "──" * num_cols + "[/]")
    for row, clue in zip(grid, row_clues):
        hints_str = " ".join(map(str, clue)).rjust(HINT_COLUMN_WIDTH)
        out.print(f"{hints_str} │ {format_row(row, settings.DISPLAY_FILLED, settings.DISPLAY_EMPTY)}", highlight=False)


def display_comparison(solved: SolvedGrid, expected: SolvedGrid, out: Optional[Console] = None):
    out = out or console
    out.print("[bold cyan]Comparison: Solved vs Stored Solution[/bold cyan]")
    out.print("[dim]Left: Solved | Right: Stored[/dim]")
    for solved_row, expected_row in zip(solved, expected):
        left = format_row(solved_row, settings.DISPLAY_FILLED, settings.DISPLAY_EMPTY)
        right = format_row(expected_row, settings.DISPLAY_FILLED, settings.DISPLAY_EMPTY)
        out.print(f"  {left}   │   {right}", highlight=False)

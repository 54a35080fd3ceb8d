import sys
import time
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from grid_logic.core.errors import PuzzleFormatError, SearchLimitExceeded
from grid_logic.core.solver import NonogramSolver
from grid_logic.core.validation import count_line_errors, shape_matches
from grid_logic.data.examples import WORKED_EXAMPLE_ID
from grid_logic.data.loader import PuzzleCatalog, load_puzzle_file
from grid_logic.schemas.nonogram import NonogramPuzzle
from grid_logic.utils.config import settings
from grid_logic.visualization.renderer import (
    display_comparison,
    display_solution,
    display_with_hints,
    format_hints,
)

app = typer.Typer(help="Grid Logic: Nonogram solving by propagation and search.")
console = Console()

DEFAULT_LIMIT_IDS = 10
MAX_ID_DISPLAY_LENGTH = 50

CYAN_STYLE = "cyan"
GREEN_STYLE = "green"
RED_STYLE = "red"
YELLOW_STYLE = "yellow"
MAGENTA_STYLE = "magenta"
BOLD_STYLE = "bold"
DIM_STYLE = "dim"

SOLVED_STATUS = "SOLVED"
UNSOLVABLE_STATUS = "UNSOLVABLE"
VALID_STATUS = "VALID"
INVALID_STATUS = "INVALID"


def select_puzzle(catalog, puzzle_id):
    puzzle = catalog.get(puzzle_id)
    if puzzle is None:
        console.print(f"[{RED_STYLE}]Error: Puzzle {puzzle_id} not found.[/{RED_STYLE}]")
    return puzzle


def load_requested_puzzle(puzzle_id: str, puzzle_file: Optional[Path]) -> Optional[NonogramPuzzle]:
    if puzzle_file is not None:
        try:
            puzzles = load_puzzle_file(puzzle_file)
        except (FileNotFoundError, PuzzleFormatError) as e:
            console.print(f"[{RED_STYLE}]Error: {escape(str(e))}[/{RED_STYLE}]")
            return None
        if not puzzles:
            console.print(f"[{RED_STYLE}]Error: No puzzles in {puzzle_file}.[/{RED_STYLE}]")
            return None
        if not puzzle_id:
            return puzzles[0]
        for puzzle in puzzles:
            if puzzle.id == puzzle_id:
                return puzzle
        console.print(f"[{RED_STYLE}]Error: Puzzle {puzzle_id} not found.[/{RED_STYLE}]")
        return None

    if not puzzle_id.strip():
        puzzle_id = WORKED_EXAMPLE_ID
        console.print(f"[{DIM_STYLE}]No ID provided. Selected: [{BOLD_STYLE}]{puzzle_id}[/][/{DIM_STYLE}]")
    return select_puzzle(PuzzleCatalog(), puzzle_id)


def print_hints(puzzle: NonogramPuzzle):
    console.print(f"\n[{BOLD_STYLE}]Puzzle Hints:[/{BOLD_STYLE}]")
    console.print(f"[{DIM_STYLE}]Rows: {format_hints(puzzle.row_clues)}[/{DIM_STYLE}]")
    console.print(f"[{DIM_STYLE}]Columns: {format_hints(puzzle.col_clues)}[/{DIM_STYLE}]")


@app.command()
def solve(
    puzzle_id: Annotated[str, typer.Option(help="Specific puzzle ID")] = "",
    puzzle_file: Annotated[Optional[Path], typer.Option(help="JSON file holding one puzzle or a list")] = None,
    compare: bool = typer.Option(True, help="Compare with the stored solution when there is one"),
    max_nodes: int = typer.Option(settings.MAX_SEARCH_NODES, min=0, help="Search node budget, 0 for exhaustive"),
):
    puzzle = load_requested_puzzle(puzzle_id, puzzle_file)
    if puzzle is None:
        return

    print_hints(puzzle)

    solver = NonogramSolver(max_nodes=max_nodes or None)
    start_time = time.perf_counter()
    try:
        result = solver.resolve(puzzle.row_clues, puzzle.col_clues)
    except SearchLimitExceeded as e:
        console.print(f"\n[{BOLD_STYLE}{RED_STYLE}]Search Halted:[/{BOLD_STYLE}{RED_STYLE}]")
        console.print(f"[{RED_STYLE}]» {e}[/{RED_STYLE}]")
        sys.exit(1)
    total_ms = (time.perf_counter() - start_time) * 1000

    if result.grid is not None:
        console.print()
        display_solution(result.grid, title=f"{puzzle.id} ({len(result.grid)}x{len(puzzle.col_clues)})", out=console)

    console.print(f"\n[{BOLD_STYLE}]Final Report:[/{BOLD_STYLE}]")

    if result.solved:
        status_text = f"[{GREEN_STYLE}]{SOLVED_STATUS}[/{GREEN_STYLE}]"
    else:
        status_text = f"[{RED_STYLE}]{UNSOLVABLE_STATUS}[/{RED_STYLE}]"

    console.print(f"  Status: {status_text}")
    console.print(f"  Search Nodes: [{BOLD_STYLE}{CYAN_STYLE}]{result.stats.nodes}[/{BOLD_STYLE}{CYAN_STYLE}]")
    console.print(f"  Dead Branches: [{BOLD_STYLE}{CYAN_STYLE}]{result.stats.dead_branches}[/{BOLD_STYLE}{CYAN_STYLE}]")
    console.print(f"  Propagation Rounds: [{BOLD_STYLE}{CYAN_STYLE}]{result.stats.rounds}[/{BOLD_STYLE}{CYAN_STYLE}]")
    console.print(f"  Total Time: [{BOLD_STYLE}{MAGENTA_STYLE}]{total_ms:.2f} ms[/{BOLD_STYLE}{MAGENTA_STYLE}]")

    expected = puzzle.expected_grid()
    if compare and result.grid is not None and expected is not None:
        cells = [(a, b) for row_a, row_b in zip(result.grid, expected) for a, b in zip(row_a, row_b)]
        cell_acc = sum(1 for a, b in cells if a == b) / len(cells) if cells else 1.0
        console.print(f"  Stored Solution Match: {cell_acc:.2%}")
        if cell_acc < 1.0:
            console.print(f"  [{YELLOW_STYLE}]Solved grid differs from the stored solution.[/{YELLOW_STYLE}]")
            display_comparison(result.grid, expected, out=console)

    return result


@app.command(name="list-ids")
def list_ids(limit: int = typer.Option(DEFAULT_LIMIT_IDS, help="Number of IDs to show")):
    try:
        catalog = PuzzleCatalog()
        total = len(catalog)
        console.print(f"[{BOLD_STYLE}{CYAN_STYLE}]Available IDs (Total: {total}):[/{BOLD_STYLE}{CYAN_STYLE}]")

        for i in range(min(limit, total)):
            raw_id = str(catalog.ids[i])
            clean_id = (raw_id[:MAX_ID_DISPLAY_LENGTH] + "...") if len(raw_id) > MAX_ID_DISPLAY_LENGTH else raw_id
            console.print(f" - {clean_id}", markup=False)

    except Exception as e:
        console.print(f"[{BOLD_STYLE}{RED_STYLE}]Error loading puzzles:[/{BOLD_STYLE}{RED_STYLE}] {escape(str(e))}")


@app.command()
def verify(
    puzzle_id: Annotated[str, typer.Option(help="Puzzle ID whose stored solution is checked")] = WORKED_EXAMPLE_ID,
):
    puzzle = select_puzzle(PuzzleCatalog(), puzzle_id)
    if puzzle is None:
        return

    expected = puzzle.expected_grid()
    if expected is None:
        console.print(f"[{YELLOW_STYLE}]Puzzle {puzzle_id} has no stored solution.[/{YELLOW_STYLE}]")
        return

    if not shape_matches(expected, puzzle.row_clues, puzzle.col_clues):
        num_rows, num_cols = puzzle.shape
        width = len(expected[0]) if expected else 0
        console.print(
            f"  Stored Solution: [{RED_STYLE}]{INVALID_STATUS} (grid is {len(expected)}x{width}, "
            f"hints expect {num_rows}x{num_cols})[/{RED_STYLE}]"
        )
        return

    display_with_hints(expected, puzzle.row_clues, out=console)
    errors = count_line_errors(expected, puzzle.row_clues, puzzle.col_clues)
    if errors == 0:
        console.print(f"  Stored Solution: [{GREEN_STYLE}]{VALID_STATUS}[/{GREEN_STYLE}]")
    else:
        console.print(f"  Stored Solution: [{RED_STYLE}]{INVALID_STATUS} ({errors} lines wrong)[/{RED_STYLE}]")


def main():
    app()


if __name__ == "__main__":
    main()

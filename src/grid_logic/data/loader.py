from pathlib import Path
from typing import List, Optional, Union

import msgspec
from rich.console import Console

from grid_logic.core.errors import PuzzleFormatError
from grid_logic.data.examples import BUILTIN_PUZZLES
from grid_logic.schemas.nonogram import NonogramPuzzle
from grid_logic.utils.config import settings

console = Console()

PUZZLE_GLOB = "*.json"


def load_puzzle_file(path: Path) -> List[NonogramPuzzle]:
    """Decode a JSON file holding either one puzzle or a list of puzzles."""
    if not path.exists():
        raise FileNotFoundError(f"Puzzle file missing at {path}")

    try:
        decoded = msgspec.json.decode(
            path.read_bytes(),
            type=Union[List[NonogramPuzzle], NonogramPuzzle],
        )
    except (msgspec.ValidationError, msgspec.DecodeError) as e:
        raise PuzzleFormatError(f"Invalid puzzle file {path}: {e}") from e

    if isinstance(decoded, NonogramPuzzle):
        return [decoded]
    return decoded


class PuzzleCatalog:
    def __init__(self, puzzle_dir: Optional[Path] = None, include_builtin: bool = True):
        puzzle_dir = puzzle_dir if puzzle_dir is not None else settings.PUZZLE_DIR

        self.puzzles: List[NonogramPuzzle] = list(BUILTIN_PUZZLES.values()) if include_builtin else []

        if puzzle_dir.is_dir():
            for path in sorted(puzzle_dir.glob(PUZZLE_GLOB)):
                try:
                    self.puzzles.extend(load_puzzle_file(path))
                except PuzzleFormatError as e:
                    console.print(f"[yellow]Warning: skipping {path.name}: {e}[/yellow]")

        self.ids = [p.id for p in self.puzzles]

    def __len__(self):
        return len(self.puzzles)

    def __getitem__(self, idx):
        return self.puzzles[idx]

    def get(self, puzzle_id: str) -> Optional[NonogramPuzzle]:
        try:
            return self.puzzles[self.ids.index(puzzle_id)]
        except ValueError:
            return None

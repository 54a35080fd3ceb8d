from typing import List, Optional, Sequence

from grid_logic.core.errors import LineContradiction
from grid_logic.core.sequences import generate_sequences
from grid_logic.core.types import Candidate, CellState, Clue, Line


def matches(known: Sequence[Optional[CellState]], candidate: Candidate) -> bool:
    return all(k is None or k == c for k, c in zip(known, candidate))


def merge_sequences(candidates: Sequence[Candidate]) -> Line:
    """Keep a cell only where every candidate agrees on it."""
    merged: Line = []
    for states in zip(*candidates):
        first = states[0]
        merged.append(first if all(s == first for s in states) else None)
    return merged


def filter_candidates(line: Sequence[Optional[CellState]], clue: Clue) -> List[Candidate]:
    return [c for c in generate_sequences(clue, len(line)) if matches(line, c)]


def solve_line(line: Sequence[Optional[CellState]], clue: Clue, axis: str = "line", index: Optional[int] = None) -> Line:
    survivors = filter_candidates(line, clue)
    if not survivors:
        raise LineContradiction(axis, index)
    return merge_sequences(survivors)

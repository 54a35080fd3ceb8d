from functools import lru_cache
from typing import Tuple

from grid_logic.core.types import Candidate, CellState, Clue

CANDIDATE_CACHE_SIZE = 4096


def generate_sequences(clue: Clue, length: int) -> Tuple[Candidate, ...]:
    """
    Every placement of the clue's blocks in a line of `length` cells,
    ordered by ascending start index of the leftmost block.

    An empty result means the clue cannot fit; callers treat that as a
    contradiction on the line.
    """
    return _generate(tuple(clue), length)


@lru_cache(maxsize=CANDIDATE_CACHE_SIZE)
def _generate(clue: Tuple[int, ...], length: int) -> Tuple[Candidate, ...]:
    if length < 0:
        return ()
    if not clue:
        return ((CellState.EMPTY,) * length,)

    block, rest = clue[0], clue[1:]
    if any(b < 1 for b in clue):
        return ()

    separator: Candidate = (CellState.EMPTY,) if rest else ()
    consumed = block + sum(rest) + len(rest)
    max_start = length - consumed

    sequences = []
    for start in range(max_start + 1):
        head = (CellState.EMPTY,) * start + (CellState.FILLED,) * block + separator
        for tail in _generate(rest, length - len(head)):
            sequences.append(head + tail)
    return tuple(sequences)

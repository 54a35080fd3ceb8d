from typing import Dict

from grid_logic.schemas.nonogram import NonogramHints, NonogramPuzzle

WORKED_EXAMPLE_ID = "worked-example"

WORKED_EXAMPLE = NonogramPuzzle(
    id=WORKED_EXAMPLE_ID,
    hints=NonogramHints(
        row_hints=[[3], [2, 1], [3, 2], [2, 2], [6], [1, 5], [6], [1], [2]],
        col_hints=[[1, 2], [3, 1], [1, 5], [7, 1], [5], [3], [4], [3]],
    ),
    solution=[
        list(".sss...."),
        list("ss.s...."),
        list(".sss..ss"),
        list("..ss..ss"),
        list("..ssssss"),
        list("s.sssss."),
        list("ssssss.."),
        list("....s..."),
        list("...ss..."),
    ],
)

DIAGONAL = NonogramPuzzle(
    id="diagonal-3x3",
    hints=NonogramHints(
        row_hints=[[1], [1], [1]],
        col_hints=[[1], [1], [1]],
    ),
)

OVERSIZED_CLUE = NonogramPuzzle(
    id="oversized-clue",
    hints=NonogramHints(row_hints=[[3]], col_hints=[[1]]),
)

BUILTIN_PUZZLES: Dict[str, NonogramPuzzle] = {
    p.id: p for p in (WORKED_EXAMPLE, DIAGONAL, OVERSIZED_CLUE)
}

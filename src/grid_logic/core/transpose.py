from typing import List, Optional, TypeVar

T = TypeVar("T")


def transpose(grid: List[List[T]], num_cols: Optional[int] = None) -> List[List[T]]:
    """
    Swap rows and columns. `num_cols` is only needed when the grid has no
    rows, where the width cannot be read off the grid itself.
    """
    if num_cols is None:
        num_cols = len(grid[0]) if grid else 0
    return [[row[col] for row in grid] for col in range(num_cols)]

from typing import Optional


class GridLogicError(Exception):
    pass


class LineContradiction(GridLogicError):
    """A line whose known cells admit no placement of its clue."""

    def __init__(self, axis: str = "line", index: Optional[int] = None, reason: str = "no valid candidates"):
        self.axis = axis
        self.index = index
        self.reason = reason
        location = f"{axis} {index}" if index is not None else axis
        super().__init__(f"Contradiction in {location}: {reason}")


class SearchLimitExceeded(GridLogicError):
    def __init__(self, max_nodes: int):
        self.max_nodes = max_nodes
        super().__init__(f"Search exceeded the budget of {max_nodes} nodes")


class PuzzleFormatError(GridLogicError):
    pass

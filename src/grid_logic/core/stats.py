import msgspec


class SearchStats(msgspec.Struct):
    rounds: int = 0
    line_updates: int = 0
    nodes: int = 0
    dead_branches: int = 0
    max_depth: int = 0

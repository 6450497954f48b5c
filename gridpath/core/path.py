# gridpath/core/path.py
#!/usr/bin/env python3
from typing import Dict, List, Optional

from gridpath.core.types import Cell, SearchResult


def reconstruct(came_from: Dict[Cell, Optional[Cell]], end: Cell) -> SearchResult:
    """
    Walk came_from back from end to the start (the cell mapped to None).

    Not found when end never got an entry. The walk is bounded by the size
    of the map, so a corrupted (cyclic) map raises instead of spinning.
    """
    if end not in came_from:
        return SearchResult.not_found()

    path: List[Cell] = []
    cur: Optional[Cell] = end
    while cur is not None:
        if len(path) > len(came_from):
            raise ValueError(f"came_from has a cycle through {cur}")
        path.append(cur)
        cur = came_from[cur]
    path.reverse()
    return SearchResult.found_path(path)

# gridpath/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-first search -- one expansion per step().

Unit edge weights make the first pop of the goal a shortest path in edge
count. Predecessors are first-writer-wins.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from gridpath.core.algo_base import SearchAlgo
from gridpath.core.types import Cell


@dataclass
class BFSAlgo(SearchAlgo):
    name: str = "BFS"

    queue: Deque[Cell] = field(default_factory=deque)

    def _seed(self, start: Cell) -> None:
        self.queue.clear()
        self.queue.append(start)

    def _pop(self) -> Optional[Cell]:
        return self.queue.popleft() if self.queue else None

    def _expand(self, u: Cell) -> List[Cell]:
        opened_now: List[Cell] = []
        for v in self.grid.neighbors(u):
            if v in self.visited:
                continue
            if v not in self.came_from:
                self.came_from[v] = u
            self.queue.append(v)
            self._open(v, opened_now)
        return opened_now

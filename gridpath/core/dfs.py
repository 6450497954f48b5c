# gridpath/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search -- one expansion per step().

Explores for reachability, not for the shortest route. Neighbor order is
shuffled before pushing so repeated runs trace different shapes; pass a
seed to make a run repeatable (reset() re-seeds).

A cell pushed several times keeps the predecessor of its latest push;
once popped it is closed and later copies are skipped.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from gridpath.core.algo_base import SearchAlgo
from gridpath.core.types import Cell


@dataclass
class DFSAlgo(SearchAlgo):
    name: str = "DFS"
    seed: Optional[int] = None

    stack: List[Cell] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random)

    def _seed(self, start: Cell) -> None:
        if self.seed is not None:
            self.rng.seed(self.seed)
        self.stack.clear()
        self.stack.append(start)

    def _pop(self) -> Optional[Cell]:
        return self.stack.pop() if self.stack else None

    def _expand(self, u: Cell) -> List[Cell]:
        neighbors = self.grid.neighbors(u)
        self.rng.shuffle(neighbors)

        opened_now: List[Cell] = []
        for v in neighbors:
            if v in self.visited:
                continue
            self.came_from[v] = u
            self.stack.append(v)
            self._open(v, opened_now)
        return opened_now

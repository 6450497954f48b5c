# gridpath/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gridpath.core.algo_base import SearchAlgo
from gridpath.core.pqueue import PriorityQueue
from gridpath.core.types import Cell


@dataclass
class DijkstraAlgo(SearchAlgo):
    """Uniform-cost search. Relaxes until the queue is empty, then rebuilds the path."""

    name: str = "Dijkstra"
    early_exit: bool = False

    open_pq: PriorityQueue = field(default_factory=PriorityQueue)   # (cell, priority)
    g: Dict[Cell, int] = field(default_factory=dict)

    def _seed(self, start: Cell) -> None:
        self.open_pq = PriorityQueue()
        self.g.clear()
        self.g[start] = 0
        self.open_pq.enqueue(start, self._priority(start))

    def _pop(self) -> Optional[Cell]:
        entry = self.open_pq.dequeue()
        return entry[0] if entry else None

    def _priority(self, v: Cell) -> int:
        return self.g[v]

    def _expand(self, u: Cell) -> List[Cell]:
        opened_now: List[Cell] = []
        for v in self.grid.neighbors(u):
            if v in self.visited:
                continue
            alt = self.g[u] + 1
            if v not in self.g or alt < self.g[v]:
                self.g[v] = alt
                self.came_from[v] = u
                self.open_pq.enqueue(v, self._priority(v))
                self._open(v, opened_now)
        return opened_now

    def _metrics(self, path_len: int = 0) -> dict:
        m = super()._metrics(path_len)
        m["total_cost"] = self.g.get(self.grid.goal) if path_len else None
        return m

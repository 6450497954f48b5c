# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* -- one expansion per step() for animation.

Heuristic:
- Manhattan distance to the end cell. Admissible and consistent on a
  4-connected unit-cost grid, so the first pop of the goal is optimal and
  the search stops there.
"""

from dataclasses import dataclass

from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.types import Cell


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class AStarAlgo(DijkstraAlgo):
    name: str = "A*"
    early_exit: bool = True

    def _priority(self, v: Cell) -> int:
        return self.g[v] + self._h(v)

    def _h(self, c: Cell) -> int:
        return manhattan(c, self.grid.goal)

# gridpath/core/engine.py
#!/usr/bin/env python3
"""
Entry points for running a search to completion or one event at a time.

    run = run_search(grid, "astar")
    for ev in run:            # one ExplorationEvent per closed cell
        draw(ev.cell)
    run.result                # SearchResult: "found" + path, or "not_found"

Missing endpoints are reported when run_search() is called, not on the
first iteration. Stop iterating to abandon a run.
"""

import logging
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

from gridpath.core.algo_base import SearchAlgo
from gridpath.core.astar import AStarAlgo
from gridpath.core.bfs import BFSAlgo
from gridpath.core.dfs import DFSAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.types import ExplorationEvent, Grid, SearchResult

log = logging.getLogger(__name__)


class Algorithm(Enum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"
    BFS = "bfs"
    DFS = "dfs"

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in ("a*", "a_star", "a-star"):
            key = "astar"
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown algorithm {value!r}") from None


_ALGOS = {
    Algorithm.ASTAR: AStarAlgo,
    Algorithm.DIJKSTRA: DijkstraAlgo,
    Algorithm.BFS: BFSAlgo,
    Algorithm.DFS: DFSAlgo,
}


def make_algo(algorithm: Union[Algorithm, str], seed: Optional[int] = None) -> SearchAlgo:
    """Unbound step-driven algorithm; call init(grid) before step()."""
    algo = Algorithm.parse(algorithm)
    if algo is Algorithm.DFS:
        return DFSAlgo(seed=seed)
    return _ALGOS[algo]()


class SearchRun:
    """Lazy sequence of exploration events; result is set once it is exhausted."""

    def __init__(self, algo: SearchAlgo):
        self.algo = algo
        self._events = self._drive()

    def __iter__(self) -> Iterator[ExplorationEvent]:
        return self._events

    def _drive(self) -> Iterator[ExplorationEvent]:
        order = 0
        while True:
            res = self.algo.step()
            for c in res.closed:
                yield ExplorationEvent(c, order)
                order += 1
            if res.status in ("done", "no_path"):
                return

    @property
    def result(self) -> SearchResult:
        if self.algo.result is None:
            for _ in self._events:
                pass
        return self.algo.result


def run_search(grid: Grid, algorithm: Union[Algorithm, str],
               seed: Optional[int] = None) -> SearchRun:
    algo = make_algo(algorithm, seed=seed)
    algo.init(grid)
    log.debug("%s search on %dx%d grid from %s to %s",
              algo.name, grid.height, grid.width, grid.start, grid.goal)
    return SearchRun(algo)


def solve(grid: Grid, algorithm: Union[Algorithm, str],
          seed: Optional[int] = None) -> Tuple[List[ExplorationEvent], SearchResult]:
    run = run_search(grid, algorithm, seed=seed)
    events = list(run)
    return events, run.result


def is_reachable(grid: Grid) -> bool:
    """BFS from start; True when the end cell can be reached over non-wall cells."""
    return run_search(grid, Algorithm.BFS).result.found

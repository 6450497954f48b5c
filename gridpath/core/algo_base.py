# gridpath/core/algo_base.py
#!/usr/bin/env python3
"""
Shared state machine for the step-driven searches.

Implements the lifecycle the viewer drives:
- init(grid) - reset() - step() -> StepResult

Each step pops one cell from the frontier. Stale pops (cells already
visited) come back as "running" with nothing closed; a real pop closes the
cell, checks the goal, then lets the subclass push neighbors. The run ends
with "done" (path attached) or "no_path" once the frontier is exhausted.

Subclasses fill in three hooks: _seed(start), _pop() and _expand(cell).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from gridpath.core.errors import MissingEndpoints
from gridpath.core.path import reconstruct
from gridpath.core.types import Cell, Grid, SearchResult, StepResult

log = logging.getLogger(__name__)


@dataclass
class SearchAlgo:
    name: str = "search"
    early_exit: bool = True       # stop as soon as the goal is popped

    grid: Optional[Grid] = None
    came_from: Dict[Cell, Optional[Cell]] = field(default_factory=dict)
    visited: Set[Cell] = field(default_factory=set)
    open_set: Set[Cell] = field(default_factory=set)   # for overlay
    popped_count: int = 0
    result: Optional[SearchResult] = None

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        """Bind to a grid and seed the frontier with its start cell."""
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        missing = [name for name, c in (("start", self.grid.start), ("end", self.grid.goal))
                   if c is None]
        if missing:
            raise MissingEndpoints(missing)

        self.came_from.clear()
        self.visited.clear()
        self.open_set.clear()
        self.popped_count = 0
        self.result = None

        s = self.grid.start
        self.came_from[s] = None
        self.open_set.add(s)
        self._seed(s)

    @property
    def finished(self) -> bool:
        return self.result is not None

    # -------------------- hooks --------------------

    def _seed(self, start: Cell) -> None:
        raise NotImplementedError

    def _pop(self) -> Optional[Cell]:
        """Next frontier cell, None when the frontier is empty."""
        raise NotImplementedError

    def _expand(self, u: Cell) -> List[Cell]:
        """Push u's neighbors; return the cells that newly joined the open set."""
        raise NotImplementedError

    def _open(self, v: Cell, opened_now: List[Cell]) -> None:
        if v not in self.open_set:
            self.open_set.add(v)
            opened_now.append(v)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.result is not None:
            return self._terminal()

        u = self._pop()
        if u is None:
            return self._finish()

        if u in self.visited:
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.visited.add(u)
        self.open_set.discard(u)

        if u == self.grid.goal and (self.early_exit or u == self.grid.start):
            return self._finish(closed=[u], current=u)

        opened_now = self._expand(u)
        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def _finish(self, closed: Optional[List[Cell]] = None,
                current: Optional[Cell] = None) -> StepResult:
        self.result = reconstruct(self.came_from, self.grid.goal)
        log.debug("%s finished: %s after %d expansions",
                  self.name, self.result.status, self.popped_count)
        res = self._terminal()
        res.closed = closed or []
        res.current = current
        return res

    def _terminal(self) -> StepResult:
        if self.result.found:
            return StepResult(status="done", path=self.result.path,
                              metrics=self._metrics(path_len=len(self.result.path)))
        return StepResult(status="no_path", metrics=self._metrics())

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.visited),
            "path_len": path_len,
        }

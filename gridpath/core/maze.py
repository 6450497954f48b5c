# gridpath/core/maze.py
#!/usr/bin/env python3
"""
Recursive-backtracker maze generator.

Start sits on a random row of the left edge and End on a random row of the
right edge; every other cell starts as a wall. The carve walks 2-cell steps
from Start in shuffled order, knocking out the wall between, which leaves a
spanning tree over one parity lattice. End is only connected when it lands
next to that lattice, so each attempt is checked with a BFS and retried
with fresh endpoints when it fails.

After max_attempts failures the last attempt gets a straight corridor from
Start to End carved into it.
"""

import logging
import random
from typing import Iterator, List, Optional, Tuple

from gridpath.core.engine import is_reachable
from gridpath.core.types import Cell, Grid

log = logging.getLogger(__name__)

CARVE_STEPS: Tuple[Cell, ...] = ((0, 2), (0, -2), (2, 0), (-2, 0))
DEFAULT_MAX_ATTEMPTS = 64


def _shuffled_steps(rng: random.Random) -> Iterator[Cell]:
    steps = list(CARVE_STEPS)
    rng.shuffle(steps)
    return iter(steps)


def carve(grid: Grid, origin: Cell, rng: random.Random) -> None:
    """Depth-first carve from origin; an explicit stack stands in for recursion."""
    grid.set_wall(origin, False)
    stack: List[Tuple[Cell, Iterator[Cell]]] = [(origin, _shuffled_steps(rng))]
    while stack:
        (row, col), steps = stack[-1]
        step = next(steps, None)
        if step is None:
            stack.pop()
            continue
        dr, dc = step
        target = (row + dr, col + dc)
        if grid.in_bounds(target) and grid.is_wall(target):
            grid.set_wall((row + dr // 2, col + dc // 2), False)
            grid.set_wall(target, False)
            stack.append((target, _shuffled_steps(rng)))


def carve_corridor(grid: Grid) -> None:
    """Clear Start's row up to End's column, then that column up to End."""
    (sr, sc), (er, ec) = grid.start, grid.goal
    col_step = 1 if ec >= sc else -1
    for col in range(sc, ec + col_step, col_step):
        grid.set_wall((sr, col), False)
    row_step = 1 if er >= sr else -1
    for row in range(sr, er + row_step, row_step):
        grid.set_wall((row, ec), False)


def _attempt(width: int, height: int, rng: random.Random) -> Grid:
    grid = Grid.create(width, height)
    grid.set_start((rng.randrange(height), 0))
    grid.set_end((rng.randrange(height), width - 1))
    for c in grid.all_cells():
        grid.set_wall(c, True)
    carve(grid, grid.start, rng)
    return grid


def generate_maze(width: int, height: int, seed: Optional[int] = None,
                  rng: Optional[random.Random] = None,
                  max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS) -> Grid:
    """
    Return a fresh grid holding a maze whose End is reachable from Start.

    max_attempts=None retries until a carve connects on its own.
    """
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    if rng is None:
        rng = random.Random(seed)

    attempt = 0
    while True:
        attempt += 1
        grid = _attempt(width, height, rng)
        if is_reachable(grid):
            log.debug("maze %dx%d solvable after %d attempt(s)", height, width, attempt)
            return grid
        if max_attempts is not None and attempt >= max_attempts:
            log.warning("maze %dx%d unsolvable after %d attempts, carving a corridor",
                        height, width, attempt)
            carve_corridor(grid)
            return grid

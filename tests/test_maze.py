# tests/test_maze.py
import random

import pytest

from gridpath.core.engine import is_reachable, solve
from gridpath.core.errors import InvalidDimension
from gridpath.core.maze import carve, carve_corridor, generate_maze
from gridpath.core.types import Grid


@pytest.mark.parametrize("width,height", [(21, 21), (20, 15), (5, 5), (2, 7), (1, 1), (9, 1)])
def test_generated_maze_is_solvable(width, height):
    for seed in range(15):
        grid = generate_maze(width, height, seed=seed)
        assert (grid.width, grid.height) == (width, height)
        assert grid.start[1] == 0
        assert grid.goal[1] == width - 1
        assert is_reachable(grid), seed


def test_generated_maze_without_retry_cap_is_solvable():
    for seed in range(10):
        grid = generate_maze(15, 11, seed=seed, max_attempts=None)
        assert is_reachable(grid)


def test_single_attempt_falls_back_to_corridor():
    for seed in range(20):
        grid = generate_maze(12, 12, seed=seed, max_attempts=1)
        _, res = solve(grid, "bfs")
        assert res.found, seed


def test_same_seed_same_maze():
    a = generate_maze(17, 13, seed=1234)
    b = generate_maze(17, 13, seed=1234)
    assert a == b


def test_maze_has_walls_and_passages():
    grid = generate_maze(21, 21, seed=8)
    walls = grid.walls()
    assert 0 < len(walls) < 21 * 21 - 2
    assert grid.start not in walls and grid.goal not in walls


def test_bad_arguments():
    with pytest.raises(InvalidDimension):
        generate_maze(0, 5)
    with pytest.raises(ValueError):
        generate_maze(5, 5, max_attempts=0)


def test_carve_clears_every_lattice_cell():
    grid = Grid.create(9, 9)
    for c in grid.all_cells():
        grid.set_wall(c, True)
    carve(grid, (0, 0), random.Random(3))
    for r in range(0, 9, 2):
        for c in range(0, 9, 2):
            assert not grid.is_wall((r, c))
    # spanning tree over 25 lattice cells: 24 connecting passages
    assert 81 - len(grid.walls()) == 25 + 24


def test_corridor_joins_endpoints():
    grid = Grid.create(6, 5)
    grid.set_start((4, 0))
    grid.set_end((0, 5))
    for c in grid.all_cells():
        grid.set_wall(c, True)
    assert not is_reachable(grid)
    carve_corridor(grid)
    assert is_reachable(grid)

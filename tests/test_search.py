# tests/test_search.py
import random
from collections import deque

import pytest

from gridpath.core.engine import Algorithm, make_algo, run_search, solve
from gridpath.core.errors import MissingEndpoints
from gridpath.core.types import ExplorationEvent, Grid

ALL_ALGOS = ["astar", "dijkstra", "bfs", "dfs"]
SHORTEST_ALGOS = ["astar", "dijkstra", "bfs"]


def _grid(width, height, walls, start, end):
    grid = Grid.create(width, height)
    for c in walls:
        grid.set_wall(c, True)
    grid.set_start(start)
    grid.set_end(end)
    return grid


def _oracle(grid):
    """Plain BFS distances from start over non-wall cells."""
    dist = {grid.start: 0}
    q = deque([grid.start])
    while q:
        r, c = q.popleft()
        for n in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if grid.in_bounds(n) and not grid.is_wall(n) and n not in dist:
                dist[n] = dist[(r, c)] + 1
                q.append(n)
    return dist


def _assert_valid_path(grid, path):
    assert path[0] == grid.start
    assert path[-1] == grid.goal
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
        assert not grid.is_wall(b)
    assert len(set(path)) == len(path)


def _random_grid(seed, size=5, density=0.3):
    rng = random.Random(seed)
    cells = [(r, c) for r in range(size) for c in range(size)]
    start, end = rng.sample(cells, 2)
    walls = [c for c in cells if c not in (start, end) and rng.random() < density]
    return _grid(size, size, walls, start, end)


# -------------------- concrete scenarios --------------------

def test_bfs_three_by_three_route():
    grid = _grid(3, 3, [(1, 1)], (0, 0), (2, 2))
    events, res = solve(grid, "bfs")
    assert res.path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert [e.cell for e in events] == [(0, 0), (1, 0), (0, 1), (2, 0),
                                        (0, 2), (2, 1), (1, 2), (2, 2)]


@pytest.mark.parametrize("algorithm", SHORTEST_ALGOS)
def test_three_by_three_shortest_length(algorithm):
    grid = _grid(3, 3, [(1, 1)], (0, 0), (2, 2))
    _, res = solve(grid, algorithm)
    assert res.found
    assert res.length == 4
    _assert_valid_path(grid, res.path)


@pytest.mark.parametrize("algorithm", ALL_ALGOS)
def test_two_by_two_open_grid(algorithm):
    grid = _grid(2, 2, [], (0, 0), (1, 1))
    _, res = solve(grid, algorithm, seed=1)
    assert len(res.path) == 3
    _assert_valid_path(grid, res.path)


@pytest.mark.parametrize("algorithm", ALL_ALGOS)
def test_walled_off_end_is_not_found(algorithm):
    grid = _grid(5, 5, [(1, 2), (3, 2), (2, 1), (2, 3)], (0, 0), (2, 2))
    events, res = solve(grid, algorithm, seed=5)
    assert res.status == "not_found"
    assert res.path is None
    assert {e.cell for e in events} == set(_oracle(grid))
    assert len(events) == 20


@pytest.mark.parametrize("algorithm", ALL_ALGOS)
def test_start_equals_end(algorithm):
    grid = _grid(4, 4, [(1, 1)], (2, 2), (2, 2))
    events, res = solve(grid, algorithm)
    assert events == [ExplorationEvent((2, 2), 0)]
    assert res.path == [(2, 2)]


# -------------------- properties --------------------

@pytest.mark.parametrize("algorithm", SHORTEST_ALGOS)
def test_shortest_length_matches_oracle(algorithm):
    grid = _grid(5, 5, [(0, 1), (1, 1), (1, 3), (2, 3), (3, 1), (3, 2), (4, 3)],
                 (0, 0), (4, 4))
    _, res = solve(grid, algorithm)
    assert res.length == _oracle(grid)[grid.goal]
    _assert_valid_path(grid, res.path)

    for seed in range(40):
        grid = _random_grid(seed)
        dist = _oracle(grid)
        _, res = solve(grid, algorithm)
        if grid.goal in dist:
            assert res.length == dist[grid.goal], seed
            _assert_valid_path(grid, res.path)
        else:
            assert not res.found, seed


def test_dfs_finds_a_valid_path_whenever_one_exists():
    for seed in range(40):
        grid = _random_grid(seed, size=6)
        _, res = solve(grid, "dfs", seed=seed)
        assert res.found == (grid.goal in _oracle(grid)), seed
        if res.found:
            _assert_valid_path(grid, res.path)


@pytest.mark.parametrize("algorithm", ALL_ALGOS)
def test_unreachable_visits_exactly_the_component(algorithm):
    for seed in range(30):
        grid = _random_grid(seed, size=6, density=0.45)
        reach = _oracle(grid)
        if grid.goal in reach:
            continue
        events, res = solve(grid, algorithm, seed=seed)
        assert not res.found
        assert [e.cell for e in events].count(grid.start) == 1
        assert sorted(e.cell for e in events) == sorted(reach)


@pytest.mark.parametrize("algorithm", ALL_ALGOS)
def test_event_order_is_dense_and_cells_unique(algorithm):
    grid = _random_grid(11, size=7, density=0.2)
    events, _ = solve(grid, algorithm, seed=2)
    assert [e.order for e in events] == list(range(len(events)))
    assert len({e.cell for e in events}) == len(events)
    assert events[0].cell == grid.start


def test_dijkstra_explores_whole_component_even_when_found():
    grid = _grid(4, 4, [], (0, 0), (0, 1))
    events, res = solve(grid, "dijkstra")
    assert res.path == [(0, 0), (0, 1)]
    assert len(events) == 16


def test_astar_stops_at_goal():
    grid = _grid(8, 8, [], (0, 0), (0, 3))
    events, res = solve(grid, "astar")
    assert res.length == 3
    assert events[-1].cell == (0, 3)
    assert len(events) < 64


def test_dfs_seed_is_repeatable():
    grid = _random_grid(4, size=7, density=0.15)
    first, _ = solve(grid, "dfs", seed=99)
    second, _ = solve(grid, "dfs", seed=99)
    assert first == second


# -------------------- run interface --------------------

@pytest.mark.parametrize("algorithm", ALL_ALGOS)
def test_missing_endpoints_fail_up_front(algorithm):
    grid = Grid.create(3, 3)
    grid.set_start((0, 0))
    with pytest.raises(MissingEndpoints):
        run_search(grid, algorithm)
    grid.clear()
    with pytest.raises(MissingEndpoints):
        run_search(grid, algorithm)


def test_run_is_lazy_and_abandonable():
    grid = _grid(10, 10, [], (0, 0), (9, 9))
    run = run_search(grid, "bfs")
    first = next(iter(run))
    assert first == ExplorationEvent((0, 0), 0)
    assert run.algo.result is None
    assert run.result.length == 18


def test_grid_is_not_mutated_by_search():
    grid = _grid(5, 5, [(1, 1), (2, 2)], (0, 0), (4, 4))
    before = grid.copy()
    for algorithm in ALL_ALGOS:
        solve(grid, algorithm)
    assert grid == before


def test_algorithm_names():
    assert Algorithm.parse("A*") is Algorithm.ASTAR
    assert Algorithm.parse("Dijkstra") is Algorithm.DIJKSTRA
    assert Algorithm.parse(Algorithm.DFS) is Algorithm.DFS
    with pytest.raises(ValueError):
        Algorithm.parse("greedy")


def test_step_results_drive_overlays():
    grid = _grid(3, 3, [(1, 1)], (0, 0), (2, 2))
    algo = make_algo("astar")
    algo.init(grid)
    first = algo.step()
    assert first.status == "running"
    assert first.closed == [(0, 0)]
    assert set(first.opened) == {(1, 0), (0, 1)}

    status = first.status
    for _ in range(50):
        res = algo.step()
        status = res.status
        if status != "running":
            break
    assert status == "done"
    assert res.metrics["path_len"] == 5
    # a finished search keeps reporting its outcome
    assert algo.step().path == res.path

    algo.reset()
    assert algo.result is None
    assert algo.step().closed == [(0, 0)]

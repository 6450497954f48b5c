# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any, Set

from gridpath.core.errors import InvalidDimension, OutOfBounds

Cell = Tuple[int, int]  # (row, col)

# up, down, left, right -- fixes BFS/DFS traversal shape
NEIGHBOR_OFFSETS: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class CellState(Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"


def cell_to_str(c: Cell) -> str:
    return f"{c[0]},{c[1]}"


def cell_from_str(s: str) -> Cell:
    row, col = s.split(",")
    return (int(row), int(col))


@dataclass
class Grid:
    width: int
    height: int
    cells: List[List[CellState]]       # [row][col], EMPTY or WALL only
    start: Optional[Cell] = None
    goal: Optional[Cell] = None

    # -------------------- construction --------------------

    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        """All cells Empty, no endpoints."""
        for name, v in (("width", width), ("height", height)):
            if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
                raise InvalidDimension(f"{name} must be a positive integer, got {v!r}")
        cells = [[CellState.EMPTY for _ in range(width)] for _ in range(height)]
        return cls(width, height, cells)

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, [list(r) for r in self.cells],
                    self.start, self.goal)

    # -------------------- keys --------------------

    def key(self, c: Cell) -> int:
        """Packed integer key row * width + col."""
        self._check(c)
        return c[0] * self.width + c[1]

    def cell_of(self, key: int) -> Cell:
        if not 0 <= key < self.width * self.height:
            raise OutOfBounds(key, self.width, self.height)
        return divmod(key, self.width)

    # -------------------- queries --------------------

    def in_bounds(self, c: Cell) -> bool:
        row, col = c
        return 0 <= row < self.height and 0 <= col < self.width

    def is_wall(self, c: Cell) -> bool:
        row, col = c
        return self.cells[row][col] is CellState.WALL

    def state(self, c: Cell) -> CellState:
        self._check(c)
        if c == self.start:
            return CellState.START
        if c == self.goal:
            return CellState.END
        return self.cells[c[0]][c[1]]

    def neighbors(self, c: Cell) -> List[Cell]:
        """In-bounds, non-wall orthogonal neighbors in up, down, left, right order."""
        row, col = c
        out: List[Cell] = []
        for dr, dc in NEIGHBOR_OFFSETS:
            n = (row + dr, col + dc)
            if self.in_bounds(n) and not self.is_wall(n):
                out.append(n)
        return out

    def walls(self) -> Set[Cell]:
        return {(r, c) for r in range(self.height) for c in range(self.width)
                if self.cells[r][c] is CellState.WALL}

    def all_cells(self):
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    # -------------------- mutation --------------------

    def set_wall(self, c: Cell, present: bool = True) -> None:
        self._check(c)
        if present and c in (self.start, self.goal):
            return  # endpoints win over walls
        self.cells[c[0]][c[1]] = CellState.WALL if present else CellState.EMPTY

    def toggle_wall(self, c: Cell) -> None:
        self.set_wall(c, not self.is_wall(self._check(c)))

    def set_start(self, c: Cell) -> None:
        self._check(c)
        self.cells[c[0]][c[1]] = CellState.EMPTY
        self.start = c

    def set_end(self, c: Cell) -> None:
        self._check(c)
        self.cells[c[0]][c[1]] = CellState.EMPTY
        self.goal = c

    def paint(self, c: Cell, mode: str) -> None:
        """Apply one paint-mode action: "wall" toggles, "start"/"end" place, "erase" empties."""
        if mode == "wall":
            self.toggle_wall(c)
        elif mode == "start":
            self.set_start(c)
        elif mode == "end":
            self.set_end(c)
        elif mode == "erase":
            self._check(c)
            if c == self.start:
                self.start = None
            if c == self.goal:
                self.goal = None
            self.cells[c[0]][c[1]] = CellState.EMPTY
        else:
            raise ValueError(f"unknown paint mode {mode!r}")

    def clear(self) -> None:
        for row in self.cells:
            for col in range(self.width):
                row[col] = CellState.EMPTY
        self.start = None
        self.goal = None

    def _check(self, c: Cell) -> Cell:
        if not self.in_bounds(c):
            raise OutOfBounds(c, self.width, self.height)
        return c


@dataclass(frozen=True)
class ExplorationEvent:
    cell: Cell
    order: int


@dataclass(frozen=True)
class SearchResult:
    status: str                   # "found" | "not_found"
    path: Optional[List[Cell]] = None

    @classmethod
    def found_path(cls, path: List[Cell]) -> "SearchResult":
        return cls("found", list(path))

    @classmethod
    def not_found(cls) -> "SearchResult":
        return cls("not_found", None)

    @property
    def found(self) -> bool:
        return self.status == "found"

    @property
    def length(self) -> int:
        """Edge count of the path, -1 when not found."""
        return len(self.path) - 1 if self.path else -1


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

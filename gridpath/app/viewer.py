# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer — paint a grid, pick an algorithm, watch it explore

- Mouse:
    left drag    -> paint with the current mode
- Keyboard:
    [W]/[S]/[E]/[X]  -> paint mode: wall / start / end / erase
    [1]/[2]/[3]/[4]  -> algorithm: A* / Dijkstra / BFS / DFS
    [SPACE]          -> run/pause
    [N]              -> single step
    [R]              -> reset overlays
    [M]              -> generate maze
    [C]              -> clear grid
    [+]/[-]          -> steps/sec
    [Q]/[ESC]        -> quit

Settings:
- ENV: GRIDPATH_ALGO, GRIDPATH_WIDTH, GRIDPATH_HEIGHT, GRIDPATH_SPEED,
       GRIDPATH_SEED, GRIDPATH_LOG
- CLI: --algo=, --width=, --height=, --speed=, --seed=, --log= (override ENV)
"""

import sys, os, time, logging
from typing import List, Tuple, Optional, Dict, Any

import pygame

from gridpath.core.algo_base import SearchAlgo
from gridpath.core.engine import Algorithm, make_algo
from gridpath.core.errors import GridError
from gridpath.core.maze import generate_maze
from gridpath.core.types import Grid, StepResult, Cell

# ---------- Config ----------
DEFAULTS: Dict[str, Any] = {
    "algo": "astar",
    "width": 20,
    "height": 20,
    "speed": 20,
    "seed": None,
    "log": "WARNING",
}
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 28
FONT_NAME = None  # default pygame font

ALGO_LABELS = {
    Algorithm.ASTAR: "A*",
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.BFS: "BFS",
    Algorithm.DFS: "DFS",
}
PAINT_MODES = ("wall", "start", "end", "erase")

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
EMPTY_GRAY  = (222,226,230)
WALL_DARK   = ( 52, 58, 64)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
EXPLORE_A   = (255,  0,120, 90)
FRONTIER_A  = (  0,150,255,110)
NEON_MINT   = (  0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


# ---------- Settings resolution ----------
def _coerce(key: str, raw: str):
    if key in ("width", "height", "speed", "seed"):
        return int(raw)
    if key == "algo":
        return Algorithm.parse(raw).value
    return raw.upper()


def resolve_settings(argv: Optional[List[str]] = None,
                     environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Defaults, then GRIDPATH_* environment variables, then --key=value flags."""
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    raw: Dict[str, str] = {}
    for key in DEFAULTS:
        v = environ.get(f"GRIDPATH_{key.upper()}")
        if v:
            raw[key] = v
    for arg in argv:
        if arg.startswith("--") and "=" in arg:
            key, v = arg[2:].split("=", 1)
            if key in DEFAULTS:
                raw[key] = v

    settings = dict(DEFAULTS)
    for key, v in raw.items():
        try:
            settings[key] = _coerce(key, v)
        except ValueError:
            print(f"Ignoring bad setting {key}={v!r}, using {DEFAULTS[key]!r}")
    settings["speed"] = max(1, min(60, settings["speed"]))
    if settings["width"] < 1 or settings["height"] < 1:
        print(f"Ignoring bad grid size {settings['width']}x{settings['height']}")
        settings["width"], settings["height"] = DEFAULTS["width"], DEFAULTS["height"]
    return settings


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle

        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, settings: Dict[str, Any]):
        pygame.init()

        self.grid = grid
        self.settings = settings
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        cs = self._auto_cell_size(grid)
        win_w = GRID_MARGIN*2 + grid.width * cs + PANEL_W
        win_h = max(GRID_MARGIN*2 + grid.height * cs, 640)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding — A* / Dijkstra / BFS / DFS")

        self._buttons: list[UIButton] = []
        self.running = False
        self.paint_mode = "wall"
        self.selected_algo = Algorithm.parse(settings["algo"])
        self._layout(win_w, win_h)

        self.open_set: set[Cell] = set()
        self.closed_set: set[Cell] = set()
        self.path: List[Cell] = []

        self.clock = pygame.time.Clock()
        self.steps_per_sec = settings["speed"]
        self.state = "Idle"
        self.message = ""
        self._dragging = False
        self._last_painted: Optional[Cell] = None

        self.algo: Optional[SearchAlgo] = None
        self._last_metrics: Dict[str, Any] = {}
        self._reset_overlays()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid on the left."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)

        cs_by_w = avail_w // self.grid.width
        cs_by_h = avail_h // self.grid.height
        self.cell_size = int(max(4, min(cs_by_w, cs_by_h)))

        grid_plate_w = self.grid.width  * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.height * self.cell_size + 2 * GRID_MARGIN
        top_y = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(0, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(8, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    def cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        ox, oy = self._grid_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        c = (row, col)
        return c if self.grid.in_bounds(c) else None

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    # ---------- algorithm driving ----------
    def _tick_algorithm(self):
        t0 = time.time()
        step_interval = 1.0 / max(1, self.steps_per_sec)
        if not hasattr(self, "_last_step_t"):
            self._last_step_t = 0.0
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self._do_step()

    def _ensure_algo(self) -> bool:
        if self.algo is not None:
            return True
        algo = make_algo(self.selected_algo, seed=self.settings["seed"])
        try:
            algo.init(self.grid)
        except GridError as ex:
            self.message = str(ex)
            self.running = False
            self.state = "Idle"
            return False
        self.algo = algo
        self.message = ""
        return True

    def _do_step(self):
        if not self._ensure_algo():
            return
        res: StepResult = self.algo.step()
        for c in res.opened: self.open_set.add(c)
        for c in res.closed:
            self.closed_set.add(c)
            self.open_set.discard(c)
        if res.path is not None: self.path = res.path
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        elif res.status in ("running","idle"):
            self.state = "Running" if self.running else "Paused"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                self._handle_mouse(e)

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            pygame.quit(); sys.exit(0)
        elif key == pygame.K_SPACE:
            self._toggle_run()
        elif key == pygame.K_n:
            self._do_step()
        elif key == pygame.K_r:
            self._reset()
        elif key == pygame.K_m:
            self._new_maze()
        elif key == pygame.K_c:
            self._clear()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self._bump_speed(+1)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            self._bump_speed(-1)
        elif key == pygame.K_w:
            self._set_mode("wall")
        elif key == pygame.K_s:
            self._set_mode("start")
        elif key == pygame.K_e:
            self._set_mode("end")
        elif key == pygame.K_x:
            self._set_mode("erase")
        elif key == pygame.K_1:
            self._switch_algo(Algorithm.ASTAR)
        elif key == pygame.K_2:
            self._switch_algo(Algorithm.DIJKSTRA)
        elif key == pygame.K_3:
            self._switch_algo(Algorithm.BFS)
        elif key == pygame.K_4:
            self._switch_algo(Algorithm.DFS)

    def _handle_mouse(self, e: pygame.event.Event):
        for b in self._buttons:
            if b.handle_mouse(e):
                return
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            self._dragging = True
            self._last_painted = None
            self._paint_at(e.pos)
        elif e.type == pygame.MOUSEMOTION and self._dragging:
            self._paint_at(e.pos)
        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            self._dragging = False
            self._last_painted = None

    def _paint_at(self, pos: Tuple[int, int]):
        c = self.cell_at(pos)
        if c is None or c == self._last_painted:
            return
        self._last_painted = c
        # the grid is read-only while a search is in flight
        self._reset()
        self.grid.paint(c, self.paint_mode)

    # ---------- actions ----------
    def _set_mode(self, mode: str):
        self.paint_mode = mode
        self._refresh_active_states()

    def _switch_algo(self, algo: Algorithm):
        self.selected_algo = algo
        self._reset()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        if self.running and not self._ensure_algo():
            self.running = False
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(60, self.steps_per_sec + dv)))

    def _new_maze(self):
        seed = self.settings["seed"]
        try:
            self.grid = generate_maze(self.grid.width, self.grid.height, seed=seed)
        except GridError as ex:
            print(f"Failed to generate maze: {ex}")
            return
        self._reset()

    def _clear(self):
        self.grid.clear()
        self._reset()

    def _reset_overlays(self):
        self.open_set.clear()
        self.closed_set.clear()
        self.path = []
        self._last_metrics = {
            "algo": ALGO_LABELS[self.selected_algo],
            "popped": 0,
            "open_size": 0,
            "closed_count": 0,
            "path_len": 0,
        }

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.message = ""
        self.algo = None
        self._reset_overlays()
        self._refresh_active_states()

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, c: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = c
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        for c in self.grid.all_cells():
            rect = self._cell_rect(c)
            color = WALL_DARK if self.grid.is_wall(c) else EMPTY_GRAY
            pygame.draw.rect(self.screen, color, rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        # overlays
        for overlay, rgba in ((self.closed_set, EXPLORE_A), (self.open_set, FRONTIER_A)):
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(rgba)
            for c in overlay:
                self.screen.blit(s, self._cell_rect(c).topleft)

        # path
        if len(self.path) >= 2:
            pts = [self._cell_rect(c).center for c in self.path]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, max(2, cs // 5))

        if self.grid.start is not None:
            self._draw_badge(self.grid.start, BLUE, "S")
        if self.grid.goal is not None:
            self._draw_badge(self.grid.goal, RED, "E")

    def _draw_badge(self, cell: Cell, color: Tuple[int,int,int], label: str):
        center = self._cell_rect(cell).center
        pygame.draw.circle(self.screen, color, center, max(3, self.cell_size//2 - 2))
        if self.cell_size >= 14:
            txt = self.font_small.render(label, True, WHITE)
            self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 32
        gap = 8
        half = (w - 8) // 2

        def add(label, cb, rect, *, togglable=False, store_as: str | None = None):
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, pygame.Rect(x, y, w, h),
            togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step, pygame.Rect(x, y, half, h))
        add("Reset", self._reset, pygame.Rect(x + half + 8, y, half, h)); y += h + gap
        add("Speed −", lambda: self._bump_speed(-1), pygame.Rect(x, y, half, h))
        add("Speed +", lambda: self._bump_speed(+1), pygame.Rect(x + half + 8, y, half, h)); y += h + gap

        self._algo_buttons: Dict[Algorithm, UIButton] = {}
        for i, (algo, label) in enumerate(ALGO_LABELS.items()):
            rect = pygame.Rect(x + (i % 2) * (half + 8), y, half, h)
            add(f"Algo: {label}", lambda a=algo: self._switch_algo(a), rect, togglable=True)
            self._algo_buttons[algo] = self._buttons[-1]
            if i % 2:
                y += h + gap

        self._mode_buttons: Dict[str, UIButton] = {}
        for i, mode in enumerate(PAINT_MODES):
            rect = pygame.Rect(x + (i % 2) * (half + 8), y, half, h)
            add(f"Paint: {mode}", lambda m=mode: self._set_mode(m), rect, togglable=True)
            self._mode_buttons[mode] = self._buttons[-1]
            if i % 2:
                y += h + gap

        add("Generate Maze", self._new_maze, pygame.Rect(x, y, half, h))
        add("Clear Grid", self._clear, pygame.Rect(x + half + 8, y, half, h))

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        for algo, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(algo is self.selected_algo)
        for mode, btn in getattr(self, "_mode_buttons", {}).items():
            btn.set_active(mode == self.paint_mode)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 210
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line(f"Algo: {ALGO_LABELS[self.selected_algo]}   Mode: {self.paint_mode}")
        line(f"Speed: {self.steps_per_sec} steps/s   {self.state}")
        if self.message:
            line(self.message, color=RED)

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    settings = resolve_settings(argv)
    logging.basicConfig(level=getattr(logging, settings["log"], logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    grid = Grid.create(settings["width"], settings["height"])
    grid.set_start((settings["height"] // 2, 0))
    grid.set_end((settings["height"] // 2, settings["width"] - 1))
    Viewer(grid, settings).run()

if __name__ == "__main__":
    main()

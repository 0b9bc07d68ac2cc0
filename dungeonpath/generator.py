"""Random dungeon generation by recursive backtracking."""

from __future__ import annotations

import random
import warnings
from collections.abc import Iterator, MutableSequence

from .cell import Cell

WALL = "#"
OPEN = " "
START = "S"
EXIT = "E"
MIN_SIZE = 5

# North, east, south, west: two steps, jumping over the wall between rooms.
_CARVE_DIRECTIONS = ((-2, 0), (0, 2), (2, 0), (0, -2))

Grid = MutableSequence[MutableSequence[str]]


def carve_passage(maze: Grid, start: Cell, end: Cell) -> None:
    """Open ``end`` and the wall cell lying midway between ``start`` and ``end``."""
    maze[end.r][end.c] = OPEN
    maze[(start.r + end.r) // 2][(start.c + end.c) // 2] = OPEN


def _unvisited_neighbors(maze: Grid, cell: Cell) -> list[Cell]:
    rows, cols = len(maze), len(maze[0])
    found = []
    for dr, dc in _CARVE_DIRECTIONS:
        r, c = cell.r + dr, cell.c + dc
        if 0 <= r < rows and 0 <= c < cols and maze[r][c] != OPEN:
            found.append(Cell(r, c))
    return found


def _shuffled_neighbors(maze: Grid, cell: Cell, rng: random.Random) -> Iterator[Cell]:
    candidates = _unvisited_neighbors(maze, cell)
    rng.shuffle(candidates)
    return iter(candidates)


def _carve_maze(maze: Grid, origin: Cell, rng: random.Random) -> None:
    """Depth-first carving with an explicit stack in place of recursion."""
    maze[origin.r][origin.c] = OPEN
    stack = [(origin, _shuffled_neighbors(maze, origin, rng))]
    while stack:
        cell, pending = stack[-1]
        for nxt in pending:
            if maze[nxt.r][nxt.c] != OPEN:
                carve_passage(maze, cell, nxt)
                stack.append((nxt, _shuffled_neighbors(maze, nxt, rng)))
                break
        else:
            stack.pop()


def _add_random_rooms(maze: Grid, room_rate: int, rng: random.Random) -> None:
    rows, cols = len(maze), len(maze[0])
    rooms_to_add = ((rows * cols) // 4 * room_rate) // 100
    for _ in range(rooms_to_add):
        r = 2 + rng.randrange(rows - 4)
        c = 2 + rng.randrange(cols - 4)
        if maze[r][c] == WALL:
            maze[r][c] = OPEN


def _place_start_and_exit(maze: Grid) -> None:
    rows, cols = len(maze), len(maze[0])
    open_cells = [
        (r, c)
        for r in range(1, rows - 1)
        for c in range(1, cols - 1)
        if maze[r][c] == OPEN
    ]
    if len(open_cells) < 2:
        warnings.warn("not enough open cells for start/exit placement", stacklevel=3)
        return
    first_r, first_c = open_cells[0]
    last_r, last_c = open_cells[-1]
    maze[first_r][first_c] = START
    maze[last_r][last_c] = EXIT


def generate_dungeon(
    rows: int,
    cols: int,
    room_rate: int = 20,
    rng: random.Random | None = None,
) -> list[str]:
    """Generate a maze of walls and open space with a start and an exit.

    Even dimensions are rounded up to odd ones and both are at least 5.
    ``room_rate`` is the percentage of extra wall cells knocked out afterwards.
    """
    rng = rng if rng is not None else random.Random()
    if rows % 2 == 0:
        rows += 1
    if cols % 2 == 0:
        cols += 1
    rows = max(rows, MIN_SIZE)
    cols = max(cols, MIN_SIZE)

    maze = [[WALL] * cols for _ in range(rows)]
    _carve_maze(maze, Cell(1, 1), rng)
    _add_random_rooms(maze, room_rate, rng)
    _place_start_and_exit(maze)
    return ["".join(row) for row in maze]
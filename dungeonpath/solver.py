"""Breadth-first path finding through dungeons, with optional keys and doors."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator, Mapping, Sequence
from typing import TypeVar

from .cell import DIRECTIONS, Cell

WALL = "#"
START = "S"
EXIT = "E"
_KEYS = "abcdef"
_DOORS = "ABCDEF"

Dungeon = Sequence[str]
_Node = TypeVar("_Node", bound=Hashable)


def find_position(dungeon: Dungeon, target: str) -> Cell | None:
    """Return the first cell holding ``target`` in row-major order, or None."""
    for r, row in enumerate(dungeon):
        c = row.find(target)
        if c != -1:
            return Cell(r, c)
    return None


def _in_bounds(dungeon: Dungeon, row: int, col: int) -> bool:
    return 0 <= row < len(dungeon) and 0 <= col < len(dungeon[row])


def _is_door(char: str) -> bool:
    return char in _DOORS and char != EXIT


def is_passable(dungeon: Dungeon, row: int, col: int) -> bool:
    """True if the position is inside the dungeon and not a wall."""
    return _in_bounds(dungeon, row, col) and dungeon[row][col] != WALL


def _is_passable_basic(dungeon: Dungeon, row: int, col: int) -> bool:
    return is_passable(dungeon, row, col) and not _is_door(dungeon[row][col])


def can_pass_door(door: str, key_mask: int) -> bool:
    """True if ``door`` is not a door, or its key's bit is set in ``key_mask``."""
    if door not in _DOORS:
        return True
    return bool(key_mask & (1 << _DOORS.index(door)))


def collect_key(key: str, key_mask: int) -> int:
    """Return ``key_mask`` with the bit for ``key`` set; other characters leave it."""
    if key not in _KEYS:
        return key_mask
    return key_mask | (1 << _KEYS.index(key))


def _trace(parents: Mapping[_Node, _Node | None], goal: _Node) -> list[_Node]:
    chain: list[_Node] = []
    node: _Node | None = goal
    while node is not None:
        chain.append(node)
        node = parents[node]
    chain.reverse()
    return chain


def _steps(cell: Cell) -> Iterator[tuple[int, int]]:
    for dr, dc in DIRECTIONS:
        yield cell.r + dr, cell.c + dc


def bfs_path(dungeon: Dungeon) -> list[Cell]:
    """Shortest path from 'S' to 'E' treating doors as walls; empty if none."""
    start = find_position(dungeon, START)
    goal = find_position(dungeon, EXIT)
    if start is None or goal is None:
        return []

    parents: dict[Cell, Cell | None] = {start: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            return _trace(parents, current)
        for r, c in _steps(current):
            nxt = Cell(r, c)
            if nxt not in parents and _is_passable_basic(dungeon, r, c):
                parents[nxt] = current
                queue.append(nxt)
    return []


def bfs_path_keys(dungeon: Dungeon) -> list[Cell]:
    """Shortest path from 'S' to 'E' where keys 'a'-'f' open doors 'A'-'F'.

    The search state is the position together with the set of keys held,
    so a cell may be revisited once new keys have been picked up.
    """
    start = find_position(dungeon, START)
    goal = find_position(dungeon, EXIT)
    if start is None or goal is None:
        return []

    origin = (start, 0)
    parents: dict[tuple[Cell, int], tuple[Cell, int] | None] = {origin: None}
    queue = deque([origin])
    while queue:
        state = queue.popleft()
        cell, mask = state
        if cell == goal:
            return [position for position, _ in _trace(parents, state)]
        for r, c in _steps(cell):
            if not is_passable(dungeon, r, c):
                continue
            char = dungeon[r][c]
            if _is_door(char) and not can_pass_door(char, mask):
                continue
            nxt = (Cell(r, c), collect_key(char, mask))
            if nxt not in parents:
                parents[nxt] = state
                queue.append(nxt)
    return []


def count_reachable_keys(dungeon: Dungeon) -> int:
    """Number of distinct keys reachable from 'S' when doors are ignored."""
    start = find_position(dungeon, START)
    if start is None:
        return 0

    mask = 0
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        mask = collect_key(dungeon[current.r][current.c], mask)
        for r, c in _steps(current):
            nxt = Cell(r, c)
            if nxt not in seen and is_passable(dungeon, r, c):
                seen.add(nxt)
                queue.append(nxt)
    return bin(mask).count("1")
"""Grid coordinates and the four cardinal moves."""

from __future__ import annotations

from dataclasses import dataclass

# Up, down, left, right: the order neighbours are explored in.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True, order=True)
class Cell:
    """A row/column position in a dungeon grid."""

    r: int = 0
    c: int = 0

    def neighbors(self) -> list[Cell]:
        """Return the four orthogonally adjacent cells, in exploration order."""
        return [Cell(self.r + dr, self.c + dc) for dr, dc in DIRECTIONS]
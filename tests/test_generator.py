import random

import pytest

from dungeonpath.cell import Cell
from dungeonpath.generator import carve_passage, generate_dungeon
from dungeonpath.solver import bfs_path


def _count(dungeon, char):
    return sum(row.count(char) for row in dungeon)


@pytest.mark.parametrize("seed", range(10))
def test_generated_dungeon_has_one_start_and_exit(seed):
    dungeon = generate_dungeon(9, 9, 10, random.Random(seed))
    assert _count(dungeon, "S") == 1
    assert _count(dungeon, "E") == 1


@pytest.mark.parametrize("seed", range(10))
def test_generated_dungeon_is_solvable(seed):
    dungeon = generate_dungeon(9, 9, 10, random.Random(seed))
    assert bfs_path(dungeon)


def test_dimensions_kept_when_odd():
    dungeon = generate_dungeon(11, 15, 20, random.Random(1))
    assert len(dungeon) == 11
    assert {len(row) for row in dungeon} == {15}


def test_even_dimensions_rounded_up():
    dungeon = generate_dungeon(8, 10, 0, random.Random(2))
    assert len(dungeon) == 8 + 1
    assert {len(row) for row in dungeon} == {10 + 1}


def test_minimum_size_enforced():
    dungeon = generate_dungeon(1, 2, 0, random.Random(3))
    assert len(dungeon) == 5
    assert {len(row) for row in dungeon} == {5}


@pytest.mark.parametrize("rate", [0, 20, 100])
def test_border_is_solid_wall(rate):
    dungeon = generate_dungeon(13, 13, rate, random.Random(4))
    assert set(dungeon[0]) == {"#"}
    assert set(dungeon[-1]) == {"#"}
    assert all(row[0] == "#" and row[-1] == "#" for row in dungeon)


def test_every_room_centre_is_carved():
    dungeon = generate_dungeon(15, 21, 0, random.Random(5))
    centres = [
        dungeon[r][c]
        for r in range(1, len(dungeon), 2)
        for c in range(1, len(dungeon[0]), 2)
    ]
    assert len(centres) == 7 * 10
    assert set(centres) <= {" ", "S", "E"}


def test_even_even_cells_stay_walls_without_rooms():
    dungeon = generate_dungeon(15, 15, 0, random.Random(6))
    corners = [
        dungeon[r][c]
        for r in range(0, len(dungeon), 2)
        for c in range(0, len(dungeon[0]), 2)
    ]
    assert len(corners) == 8 * 8
    assert set(corners) == {"#"}


def test_perfect_maze_open_cell_count():
    # A spanning tree over k room centres opens k centres and k - 1 walls.
    dungeon = generate_dungeon(11, 11, 0, random.Random(7))
    centres = sum(1 for r in range(1, 11, 2) for c in range(1, 11, 2))
    opened = sum(1 for row in dungeon for ch in row if ch != "#")
    assert opened == 2 * centres - 1


def test_rooms_only_remove_walls():
    plain = generate_dungeon(21, 21, 0, random.Random(8))
    roomy = generate_dungeon(21, 21, 100, random.Random(8))
    assert _count(roomy, "#") <= _count(plain, "#")


def test_same_seed_same_dungeon():
    first = generate_dungeon(17, 17, 20, random.Random(42))
    second = generate_dungeon(17, 17, 20, random.Random(42))
    assert first == second


def test_start_is_first_open_cell():
    dungeon = generate_dungeon(9, 9, 0, random.Random(9))
    assert dungeon[1][1] == "S"


def test_large_dungeon_does_not_exhaust_recursion():
    dungeon = generate_dungeon(201, 201, 0, random.Random(10))
    assert len(dungeon) == 201
    assert bfs_path(dungeon)


def test_carve_passage_opens_end_and_wall():
    grid = [["#"] * 5 for _ in range(5)]
    carve_passage(grid, Cell(1, 1), Cell(1, 3))
    assert grid[1][2] == " "
    assert grid[1][3] == " "
    assert grid[1][1] == "#"


def test_carve_passage_vertical():
    grid = [["#"] * 5 for _ in range(5)]
    carve_passage(grid, Cell(3, 1), Cell(1, 1))
    assert [grid[r][1] for r in range(5)] == ["#", " ", " ", "#", "#"]
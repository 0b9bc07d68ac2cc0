from dungeonpath.cell import DIRECTIONS, Cell


def test_equality_and_hash():
    assert Cell(2, 3) == Cell(2, 3)
    assert Cell(2, 3) != Cell(3, 2)
    assert len({Cell(1, 1), Cell(1, 1), Cell(1, 2)}) == 2


def test_default_is_origin():
    assert Cell() == Cell(0, 0)


def test_neighbors_follow_direction_order():
    origin = Cell(5, 7)
    expected = [Cell(5 + dr, 7 + dc) for dr, dc in DIRECTIONS]
    assert origin.neighbors() == expected


def test_neighbors_are_adjacent_and_distinct():
    origin = Cell(4, 4)
    around = origin.neighbors()
    assert len(set(around)) == 4
    assert all(abs(n.r - origin.r) + abs(n.c - origin.c) == 1 for n in around)


def test_first_neighbor_is_up():
    assert Cell(3, 3).neighbors()[0] == Cell(2, 3)
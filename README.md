# dungeonpath

Generate random grid dungeons and find routes through them.

A dungeon is a list of equal-length strings:

| Character | Meaning |
|-----------|---------|
| `#` | wall |
| ` ` | open floor |
| `S` | start |
| `E` | exit |
| `a`–`f` | keys |
| `A`–`F` | doors, opened by the matching lower-case key |

Positions are `Cell(r, c)` values from `dungeonpath.cell`: frozen, hashable
and ordered. `Cell.neighbors()` returns the four adjacent cells in the order
up, down, left, right, which is also the order the searches explore them in.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Generating a dungeon

`generate_dungeon(rows, cols, room_rate=20, rng=None)` carves a perfect maze
by depth-first backtracking from cell (1, 1), knocks out extra wall cells to
make rooms, and then places `S` on the first open cell and `E` on the last
(scanning row by row inside the border). Even sizes are rounded up to the
next odd number and both sizes are at least 5. If fewer than two open cells
exist, a warning is issued and no start or exit is placed.

```python
import random
from dungeonpath.generator import generate_dungeon

dungeon = generate_dungeon(9, 9, 10, random.Random(42))
print("\n".join(dungeon))
```

`room_rate` is a percentage (0–100) controlling how many extra openings are
attempted; pass your own `random.Random` for reproducible output.
`carve_passage(maze, start, end)` opens `end` and the cell midway between the
two in a mutable grid of characters.

## Finding a path

```python
from dungeonpath.solver import bfs_path, bfs_path_keys, count_reachable_keys

dungeon = [
    "###########",
    "#S   a    #",
    "#A#########",
    "#       b #",
    "# #B#######",
    "# #     E #",
    "###########",
]

bfs_path(dungeon)             # [] - door A blocks the way
route = bfs_path_keys(dungeon)
route[0], route[-1]           # start and exit cells
count_reachable_keys(dungeon) # keys reachable if doors are ignored
```

`bfs_path` returns the shortest route from `S` to `E` treating every door as
a wall. `bfs_path_keys` searches over position plus collected keys, so it
will pick up a key before walking through its door. Both return a list of
`Cell` objects, or an empty list when no route exists or `S` or `E` is
missing. `count_reachable_keys` returns 0 when there is no `S`.

Smaller helpers in `dungeonpath.solver`:

- `find_position(dungeon, target)` – first cell holding `target`, or `None`
- `is_passable(dungeon, row, col)` – inside the grid and not a wall
- `can_pass_door(door, key_mask)` – true for non-doors, or when the key's bit is set
- `collect_key(key, key_mask)` – the mask with the key's bit added

## Command line

```
dungeonpath
dungeonpath --seed 42
```

runs the built-in sample dungeons (a straight corridor, a winding maze, a
key-and-door puzzle, an unsolvable layout and a freshly generated 9×9 maze),
prints each one with its solution marked by `*`, and reports how many of the
checks passed. `--seed` makes the generated maze reproducible. The command
always exits with status 0; read the summary line for the outcome.

From Python, `dungeonpath.cli` offers `render_dungeon`, `render_with_path`,
`validate_path`, `sample_dungeons` and `run_checks` (which returns a list of
`CheckResult` records with `name`, `passed` and `report`).

## What it does not do

There is no interactive play, no saving or loading of dungeons, and no
drawing beyond plain text.
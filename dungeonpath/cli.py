"""Command-line runner that exercises the generator and solvers on sample dungeons."""

from __future__ import annotations

import argparse
import io
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .cell import Cell
from .generator import generate_dungeon
from .solver import (
    EXIT,
    START,
    WALL,
    bfs_path,
    bfs_path_keys,
    count_reachable_keys,
    find_position,
)

PATH_MARK = "*"
_RULE = "-" * 50
_BANNER = "=" * 48


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check: its name, whether it passed and its printed report."""

    name: str
    passed: bool
    report: str


def render_dungeon(dungeon: Sequence[str], title: str = "") -> str:
    """Return the dungeon as text, one row per line, optionally under a title."""
    out = io.StringIO()
    if title:
        print(f"{title}:", file=out)
    for row in dungeon:
        print(row, file=out)
    print(file=out)
    return out.getvalue()


def render_with_path(dungeon: Sequence[str], path: Sequence[Cell], title: str = "") -> str:
    """Render the dungeon with path cells marked '*', leaving 'S' and 'E' as they are."""
    grid = [list(row) for row in dungeon]
    width = len(grid[0]) if grid else 0
    for cell in path:
        if 0 <= cell.r < len(grid) and 0 <= cell.c < width:
            if grid[cell.r][cell.c] not in (START, EXIT):
                grid[cell.r][cell.c] = PATH_MARK
    return render_dungeon(["".join(row) for row in grid], title)


def validate_path(dungeon: Sequence[str], path: Sequence[Cell]) -> bool:
    """True if the path runs from 'S' to 'E' in single orthogonal steps avoiding walls."""
    if not path:
        return False
    start = find_position(dungeon, START)
    goal = find_position(dungeon, EXIT)
    if start is None or goal is None:
        return False
    if path[0] != start or path[-1] != goal:
        return False

    width = len(dungeon[0])
    for cell in path:
        if not (0 <= cell.r < len(dungeon) and 0 <= cell.c < width):
            return False
        if dungeon[cell.r][cell.c] == WALL:
            return False
    return all(
        abs(cur.r - prev.r) + abs(cur.c - prev.c) == 1
        for prev, cur in zip(path, path[1:])
    )


def sample_dungeons() -> dict[str, list[str]]:
    """Fixed dungeons used by the checks, keyed by name."""
    return {
        "simple": [
            "#######",
            "#S   E#",
            "#######",
        ],
        "complex": [
            "#########",
            "#S#     #",
            "# # ### #",
            "#   #  E#",
            "#########",
        ],
        "keys": [
            "###########",
            "#S   a    #",
            "#A#########",
            "#       b #",
            "# #B#######",
            "# #     E #",
            "###########",
        ],
        "unsolvable": [
            "#######",
            "#S###E#",
            "#######",
        ],
    }


def _solve_check(out: io.StringIO, heading: str, label: str, dungeon: list[str]) -> bool:
    print(f"=== {heading} ===", file=out)
    out.write(render_dungeon(dungeon, label))
    path = bfs_path(dungeon)
    print(f"Path length: {len(path)}", file=out)
    passed = False
    if not path:
        print("[ERROR] No path found!", file=out)
    elif validate_path(dungeon, path):
        print("[OK] Valid path found!", file=out)
        out.write(render_with_path(dungeon, path, "Solution"))
        passed = True
    else:
        print("[ERROR] Invalid path!", file=out)
    return passed


def _check_basic(out: io.StringIO, rng: random.Random) -> bool:
    return _solve_check(out, "Basic Pathfinding Test", "Test Dungeon", sample_dungeons()["simple"])


def _check_complex(out: io.StringIO, rng: random.Random) -> bool:
    return _solve_check(
        out, "Complex Pathfinding Test", "Complex Test Dungeon", sample_dungeons()["complex"]
    )


def _check_keys(out: io.StringIO, rng: random.Random) -> bool:
    dungeon = sample_dungeons()["keys"]
    print("=== Key-Door Pathfinding Test ===", file=out)
    out.write(render_dungeon(dungeon, "Key-Door Test Dungeon"))

    print("Step 1: Counting reachable keys (ignoring doors)...", file=out)
    print(f"Reachable keys without considering doors: {count_reachable_keys(dungeon)}", file=out)
    print(file=out)

    print("Step 2: Testing basic BFS (should fail due to locked door)...", file=out)
    basic = bfs_path(dungeon)
    if basic:
        print(f"Basic BFS result: [OK] Found path of length {len(basic)} (unexpected!)", file=out)
    else:
        print("Basic BFS result: [ERROR] No path found (expected - door blocks the way)", file=out)
    print(file=out)

    print("Step 3: Testing key-door BFS (should succeed by collecting key first)...", file=out)
    key_path = bfs_path_keys(dungeon)
    passed = False
    if not key_path:
        print("Key-Door BFS result: [ERROR] No path found with key system!", file=out)
    elif validate_path(dungeon, key_path):
        print(f"Key-Door BFS result: [OK] Valid key-door path found! Length: {len(key_path)}", file=out)
        out.write(render_with_path(dungeon, key_path, "Key-Door Solution"))
        passed = True
    else:
        print("Key-Door BFS result: [ERROR] Invalid key-door path!", file=out)
    return passed


def _check_unsolvable(out: io.StringIO, rng: random.Random) -> bool:
    dungeon = sample_dungeons()["unsolvable"]
    print("=== Unsolvable Dungeon Test ===", file=out)
    out.write(render_dungeon(dungeon, "Unsolvable Test Dungeon"))
    if bfs_path(dungeon):
        print("[ERROR] Found path in unsolvable dungeon!", file=out)
        return False
    print("[OK] Correctly identified unsolvable dungeon!", file=out)
    return True


def _check_generation(out: io.StringIO, rng: random.Random) -> bool:
    print("=== Dungeon Generation Test ===", file=out)
    print("Generating 9x9 dungeon...", file=out)
    dungeon = generate_dungeon(9, 9, 10, rng)

    has_start = any(START in row for row in dungeon)
    has_exit = any(EXIT in row for row in dungeon)
    if not (has_start and has_exit):
        print("[ERROR] Dungeon generation incomplete - missing start (S) or exit (E)", file=out)
        out.write(render_dungeon(dungeon, "Incomplete Generated Dungeon"))
        return False

    out.write(render_dungeon(dungeon, "Generated 9x9 Dungeon"))
    print("Testing pathfinding on generated dungeon...", file=out)
    path = bfs_path(dungeon)
    if not path:
        print("[ERROR] No path found in generated dungeon", file=out)
        return False
    print(f"[OK] Generated dungeon is solvable! Path length: {len(path)}", file=out)
    out.write(render_with_path(dungeon, path, "Solved Generated Dungeon"))
    return True


_CHECKS: tuple[tuple[str, Callable[[io.StringIO, random.Random], bool]], ...] = (
    ("basic", _check_basic),
    ("complex", _check_complex),
    ("keys", _check_keys),
    ("unsolvable", _check_unsolvable),
    ("generation", _check_generation),
)


def run_checks(rng: random.Random | None = None) -> list[CheckResult]:
    """Run every check in order and return their results."""
    rng = rng if rng is not None else random.Random()
    results = []
    for name, check in _CHECKS:
        out = io.StringIO()
        passed = check(out, rng)
        print(_RULE, file=out)
        print(file=out)
        results.append(CheckResult(name, passed, out.getvalue()))
    return results


def _verdict(passed: int, total: int) -> str:
    if passed == total:
        return "[EXCELLENT! All tests passed!]"
    if passed >= total * 0.8:
        return "[GREAT! Almost there!]"
    if passed >= total * 0.5:
        return "[GOOD! Making progress!]"
    if passed > 0:
        return "[GETTING STARTED! Keep going!]"
    return "[START HERE!]"


def main(argv: Sequence[str] | None = None) -> int:
    """Run all checks, print their reports and a summary; always returns 0."""
    parser = argparse.ArgumentParser(
        prog="dungeonpath", description="Exercise dungeon generation and path finding."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for dungeon generation")
    args = parser.parse_args(argv)

    print("Testing Dungeon Pathfinder Algorithms")
    print(_BANNER)
    print()

    results = run_checks(random.Random(args.seed))
    total = len(results)
    for index, result in enumerate(results, start=1):
        print(f"Running test {index}/{total}...")
        print(result.report, end="")

    passed = sum(result.passed for result in results)
    print(_BANNER)
    print("TEST PROGRESS SUMMARY")
    print(_BANNER)
    print(f"Tests passed: {passed}/{total} {_verdict(passed, total)}")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
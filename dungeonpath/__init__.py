"""Random dungeon generation and breadth-first pathfinding with keys and doors."""

__version__ = "0.1.0"
__all__ = ["cell", "generator", "solver", "cli"]
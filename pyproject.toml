[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonpath"
version = "0.1.0"
description = "Random dungeon generation and breadth-first pathfinding with keys and locked doors"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "dungeon", "pathfinding", "bfs", "backtracking", "keys", "doors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeonpath = "dungeonpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

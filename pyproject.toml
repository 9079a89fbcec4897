[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clickpath"
version = "0.1.0"
description = "A small frame-based terminal game engine with an interactive A* path-finding demo driven by mouse clicks."
requires-python = ">=3.10"
dependencies = []
keywords = ["astar", "pathfinding", "terminal", "game-engine", "grid", "demo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clickpath = "clickpath.demo_level:main"
clickpath-engine = "clickpath.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["clickpath"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

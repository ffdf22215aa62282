[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolve"
version = "0.1.0"
description = "Solvers for a December series of grid, graph and simulation puzzles, with a small grid toolkit."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "graph", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
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
adventsolve = "adventsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

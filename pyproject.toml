[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2018"
version = "0.1.0"
description = "Solutions to the first Advent of Code 2018 puzzles, with a small command-line runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2018"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2018 = "aoc2018.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2018"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

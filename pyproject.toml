[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "adventsolve"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles from the 2017 and 2018 events"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solvers", "aoc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
aoc2017-day01 = "adventsolve.y2017.day01:main"
aoc2017-day02 = "adventsolve.y2017.day02:main"
aoc2017-day03 = "adventsolve.y2017.day03:main"
aoc2017-day04 = "adventsolve.y2017.day04:main"
aoc2017-day05 = "adventsolve.y2017.day05:main"
aoc2017-day06 = "adventsolve.y2017.day06:main"
aoc2017-day07 = "adventsolve.y2017.day07:main"
aoc2018-day01 = "adventsolve.y2018.day01:main"
aoc2018-day02 = "adventsolve.y2018.day02:main"
aoc2018-day03 = "adventsolve.y2018.day03:main"
aoc2018-day04 = "adventsolve.y2018.day04:main"
aoc2018-day05 = "adventsolve.y2018.day05:main"
aoc2018-day06 = "adventsolve.y2018.day06:main"
aoc2018-day07 = "adventsolve.y2018.day07:main"
aoc2018-day08 = "adventsolve.y2018.day08:main"
aoc2018-day09 = "adventsolve.y2018.day09:main"
aoc2018-day11 = "adventsolve.y2018.day11:main"
aoc2018-day14 = "adventsolve.y2018.day14:main"
aoc2018-day18 = "adventsolve.y2018.day18:main"

[tool.setuptools.packages.find]
include = ["adventsolve*"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

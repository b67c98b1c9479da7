"""Day 1: summing frequency changes and finding the first repeated frequency."""

from __future__ import annotations

import os
from itertools import cycle

from .solution import Solution
from .utils import read_lines

INPUT = "01_input.txt"
TEST_INPUT = "01_test_input.txt"


def solve_part1(lines: list[str]) -> int:
    """Return the frequency reached after applying every change once."""
    return sum(int(line) for line in lines)


def solve_part2(lines: list[str]) -> int:
    """Return the first frequency reached twice while repeating the changes.

    The starting frequency of zero is not counted as already reached.
    """
    changes = [int(line) for line in lines]
    if not changes:
        raise ValueError("no frequency changes given")
    seen: set[int] = set()
    frequency = 0
    for change in cycle(changes):
        frequency += change
        if frequency in seen:
            return frequency
        seen.add(frequency)
    raise AssertionError("unreachable")


def part1(path: str | os.PathLike[str] = INPUT) -> int:
    return solve_part1(read_lines(path))


def part2(path: str | os.PathLike[str] = INPUT) -> int:
    return solve_part2(read_lines(path))


def test_part1(path: str | os.PathLike[str] = TEST_INPUT) -> bool:
    """Check part 1 against the example input."""
    try:
        lines = read_lines(path)
    except OSError:
        return False
    return solve_part1(lines) == 3


def test_part2(path: str | os.PathLike[str] = TEST_INPUT) -> bool:
    """Check part 2 against the example input."""
    try:
        lines = read_lines(path)
    except OSError:
        return False
    return solve_part2(lines) == 2


SOLUTION = Solution(part1, part2, test_part1, test_part2)
"""Day 2: box ID checksums and the pair of IDs differing by one character."""

from __future__ import annotations

import os
from collections import Counter
from itertools import permutations, zip_longest

from .solution import Solution
from .utils import read_lines

INPUT = "02_input.txt"
TEST_INPUT = "02_test_input.txt"
TEST_INPUT_PART2 = "02_p2_test_input.txt"


def solve_part1(lines: list[str]) -> int:
    """Return the checksum: IDs with a letter twice times IDs with a letter thrice."""
    twos = 0
    threes = 0
    for line in lines:
        counts = set(Counter(line).values())
        twos += 2 in counts
        threes += 3 in counts
    return twos * threes


def solve_part2(lines: list[str]) -> str:
    """Return the characters shared by the first two IDs that differ in one place.

    Returns an empty string when no such pair exists.
    """
    for line_a, line_b in permutations(lines, 2):
        pairs = list(zip_longest(line_a, line_b))
        common = "".join(a for a, b in pairs if a == b)
        if len(pairs) - len(common) == 1:
            return common
    return ""


def part1(path: str | os.PathLike[str] = INPUT) -> int:
    return solve_part1(read_lines(path))


def part2(path: str | os.PathLike[str] = INPUT) -> str:
    return solve_part2(read_lines(path))


def test_part1(path: str | os.PathLike[str] = TEST_INPUT) -> bool:
    """Check part 1 against the example input."""
    try:
        lines = read_lines(path)
    except OSError:
        return False
    return solve_part1(lines) == 12


def test_part2(path: str | os.PathLike[str] = TEST_INPUT_PART2) -> bool:
    """Check part 2 against the example input."""
    try:
        lines = read_lines(path)
    except OSError:
        return False
    return solve_part2(lines) == "fgij"


SOLUTION = Solution(part1, part2, test_part1, test_part2)
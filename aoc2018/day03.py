"""Day 3: overlapping fabric claims."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from .solution import Solution
from .utils import read_lines

INPUT = "03_input.txt"
TEST_INPUT = "03_test_input.txt"

_CLAIM = re.compile(r"@\s*(\d+)\s*,\s*(\d+)\s*:\s*(\d+)\s*x\s*(\d+)")


@dataclass
class Claim:
    """A rectangle of fabric; right and bottom are exclusive."""

    left: int
    top: int
    right: int
    bottom: int
    has_overlap: bool = False

    def overlap(self, other: Claim) -> Claim | None:
        """Return the shared rectangle of two claims, or None if they do not meet."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if left >= right or top >= bottom:
            return None
        return Claim(left, top, right, bottom)


def parse_claim(definition: str) -> Claim:
    """Parse a line such as ``#1 @ 1,3: 4x4``."""
    match = _CLAIM.search(definition)
    if match is None:
        raise ValueError(f"invalid claim: {definition!r}")
    x, y, width, height = map(int, match.groups())
    return Claim(x, y, x + width, y + height)


def parse_claims(lines: list[str]) -> list[Claim]:
    return [parse_claim(line) for line in lines]


def solve(claims: list[Claim], part2: bool) -> int:
    """Count square inches claimed more than once, or find the lone claim.

    Marks every overlapping claim. For part 2 the 1-based number of the first
    claim without overlap is returned; if there is none, the overlap count is.
    """
    cells: set[tuple[int, int]] = set()
    for i, a in enumerate(claims):
        for b in claims[i + 1:]:
            shared = a.overlap(b)
            if shared is None:
                continue
            a.has_overlap = True
            b.has_overlap = True
            cells.update(
                (x, y)
                for x in range(shared.left, shared.right)
                for y in range(shared.top, shared.bottom)
            )

    if part2:
        for number, claim in enumerate(claims, start=1):
            if not claim.has_overlap:
                return number
    return len(cells)


def part1(path: str | os.PathLike[str] = INPUT) -> int:
    return solve(parse_claims(read_lines(path)), False)


def part2(path: str | os.PathLike[str] = INPUT) -> int:
    return solve(parse_claims(read_lines(path)), True)


def test_part1(path: str | os.PathLike[str] = TEST_INPUT) -> bool:
    """Check part 1 against the example input."""
    try:
        lines = read_lines(path)
    except OSError:
        return False
    return solve(parse_claims(lines), False) == 4


def test_part2(path: str | os.PathLike[str] = TEST_INPUT) -> bool:
    """Check part 2 against the example input."""
    try:
        lines = read_lines(path)
    except OSError:
        return False
    return solve(parse_claims(lines), True) == 3


SOLUTION = Solution(part1, part2, test_part1, test_part2)
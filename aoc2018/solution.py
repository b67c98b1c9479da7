"""The shape shared by every day's solution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Solution:
    """Both parts of a day's puzzle and the checks against its example input."""

    part1: Callable[[], Any]
    part2: Callable[[], Any]
    test_part1: Callable[[], bool]
    test_part2: Callable[[], bool]

    def run_part1(self) -> Any:
        """Solve part 1 on the real input and return the answer."""
        return self.part1()

    def run_part2(self) -> Any:
        """Solve part 2 on the real input and return the answer."""
        return self.part2()
"""Command line entry point that runs the daily solutions or their checks."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import Any, Callable

from . import day01, day02, day03, day04
from .solution import Solution
from .utils import Timer

SOLUTIONS: tuple[Solution, ...] = (
    day01.SOLUTION,
    day02.SOLUTION,
    day03.SOLUTION,
    day04.SOLUTION,
)

PROGRAM_NAME = "aoc2018"

RED = "\x1b[31m"
GREEN = "\x1b[32m"
WHITE = "\x1b[37m"
RESET = "\x1b[0m"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def print_usage(program_name: str) -> None:
    """Print how the command is used."""
    print(f"Usage: {program_name} [--help|-h] [--test|-t] [day]")
    print("  --help|-h: Print this help message")
    print("  --test|-t: Run tests instead of main solution")
    print(
        "  day: The day to run the solution for "
        "(1-25, optional - defaults to all implemented)"
    )
    print("\nExamples:")
    print(f"  {program_name}        # Run all implemented solutions")
    print(f"  {program_name} 1      # Run solution for day 1")
    print(f"  {program_name} -t 1   # Run tests for day 1")


def parse_day(arg: str) -> int:
    """Return the day number at the start of ``arg``.

    Trailing text after the leading digits is ignored. Raises ValueError
    unless the number lies between 1 and 25.
    """
    match = _LEADING_INT.match(arg)
    day = int(match.group(1)) if match else 0
    if 1 <= day <= 25:
        return day
    raise ValueError(f"Invalid day number '{arg}'")


def run_part(part: Callable[[], Any]) -> Any:
    """Run one part, print its answer and the time taken, and return the answer.

    A missing input file is reported on standard error and gives None.
    """
    timer = Timer()
    print(WHITE, end="")
    try:
        result = part()
    except OSError as exc:
        print(f"Failed to open {exc.filename}", file=sys.stderr)
        result = None
    else:
        print(result, end="")
    print(RESET, end="")
    print(f"\n({timer.elapsed():.6f}s)")
    return result


def run_test(test: Callable[[], bool]) -> bool:
    """Run one check, print PASS or FAIL with the time taken, and return the outcome."""
    timer = Timer()
    passed = bool(test())
    elapsed = timer.elapsed()
    if passed:
        print(f"{GREEN}PASS{RESET} ({elapsed:.6f}s)")
    else:
        print(f"{RED}FAIL{RESET} ({elapsed:.6f}s)")
    return passed


def run_solution(day: int, solution: Solution, run_tests: bool) -> None:
    """Run both parts of a day, or both of its checks."""
    print(f"Day {day}")
    if run_tests:
        print("Part 1 test: ", end="")
        run_test(solution.test_part1)
        print("Part 2 test: ", end="")
        run_test(solution.test_part2)
    else:
        print("Part 1: ", end="")
        run_part(solution.part1)
        print("Part 2: ", end="")
        run_part(solution.part2)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the chosen solutions and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    day = 0
    run_tests = False

    try:
        if args:
            if args[0] in ("--help", "-h"):
                print_usage(PROGRAM_NAME)
                return 0
            if args[0] in ("--test", "-t"):
                run_tests = True
                if len(args) >= 2:
                    day = parse_day(args[1])
            else:
                day = parse_day(args[0])
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Advent of Code 2018")
    print("===================\n")

    if day == 0:
        print(f"Running {len(SOLUTIONS)} solution(s)...\n")
        for number, solution in enumerate(SOLUTIONS, start=1):
            if number > 1:
                print()
            run_solution(number, solution, run_tests)
        return 0

    if day > len(SOLUTIONS):
        print(f"Error: Solution for day {day} not created yet", file=sys.stderr)
        return 1

    run_solution(day, SOLUTIONS[day - 1], run_tests)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
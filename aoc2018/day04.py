"""Day 4: guard shift records."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter

from .solution import Solution
from .utils import read_lines

INPUT = "04_input.txt"
TEST_INPUT = "04_test_input.txt"

_RECORD = re.compile(r"\[\d+-(\d+)-(\d+)\s+(\d+):(\d+)\](.*)")
_GUARD = re.compile(r"#(\d+)")


class Event(Enum):
    BEGINS_SHIFT = 0
    FALLS_ASLEEP = 1
    WAKES_UP = 2


@dataclass(frozen=True)
class Record:
    """One log line; guard_id is -1 for events that name no guard."""

    datetime: int
    event: Event
    guard_id: int = -1


def parse_record(line: str) -> Record:
    """Parse a line such as ``[1518-11-01 00:00] Guard #10 begins shift``.

    The month, day, hour and minute digits are joined into one number.
    """
    match = _RECORD.match(line)
    if match is None:
        raise ValueError(f"invalid record: {line!r}")
    month, day, hour, minute, text = match.groups()
    datetime = int(month + day + hour + minute)

    for char in text:
        if char == "w":
            return Record(datetime, Event.WAKES_UP)
        if char == "f":
            return Record(datetime, Event.FALLS_ASLEEP)
        if char == "G":
            guard = _GUARD.search(text)
            if guard is None:
                raise ValueError(f"record names no guard: {line!r}")
            return Record(datetime, Event.BEGINS_SHIFT, int(guard.group(1)))
    raise ValueError(f"record has no event: {line!r}")


def parse_records(lines: list[str]) -> list[Record]:
    """Parse every line and return the records in time order."""
    return sorted((parse_record(line) for line in lines), key=attrgetter("datetime"))


def _describe(records: list[Record]) -> str:
    rows = [
        f"Datetime: {r.datetime}, event: {r.event.value}, guard ID: {r.guard_id}"
        for r in records
    ]
    return "\n".join(["Sorted records:", *rows])


def part1(path: str | os.PathLike[str] = INPUT) -> str:
    """Return a listing of the records in time order."""
    return _describe(parse_records(read_lines(path)))


def part2(path: str | os.PathLike[str] = INPUT) -> str:
    """Read the input; this part has no answer yet, so the result is empty."""
    read_lines(path)
    return ""


def test_part1(path: str | os.PathLike[str] = TEST_INPUT) -> bool:
    """Parse the example input; no expected answer exists, so this never passes."""
    try:
        lines = read_lines(path)
    except OSError:
        return False
    parse_records(lines)
    return False


def test_part2(path: str | os.PathLike[str] = TEST_INPUT) -> bool:
    """Read the example input; no expected answer exists, so this never passes."""
    try:
        read_lines(path)
    except OSError:
        return False
    return False


SOLUTION = Solution(part1, part2, test_part1, test_part2)
"""File reading and timing helpers shared by the daily solutions."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a text file, with line endings left untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file without their newlines.

    A final newline does not produce a trailing empty line; blank lines
    inside the file are kept.
    """
    content = read_file(path)
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


@dataclass
class Timer:
    """Measures processor time since it was created."""

    start: float = field(default_factory=time.process_time)

    def elapsed(self) -> float:
        """Seconds of processor time used since the timer started."""
        return time.process_time() - self.start
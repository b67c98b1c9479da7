# aoc2018

Solutions to days 1 to 4 of the Advent of Code 2018 puzzles, with a
command-line runner that prints each answer and the processor time it took.

## Installation

```
pip install .
```

## Puzzle input

Each day reads its input from the current directory:

- `01_input.txt`, `02_input.txt`, `03_input.txt`, `04_input.txt` for the answers
- `01_test_input.txt`, `02_test_input.txt`, `02_p2_test_input.txt`,
  `03_test_input.txt`, `04_test_input.txt` for the self-checks

Run the command from the directory that holds these files. When an input
file is missing, the runner prints `Failed to open <file>` on standard error
and carries on; a self-check whose example file is missing reports FAIL.

## Usage

```
aoc2018 [--help|-h] [--test|-t] [day]
```

- `aoc2018` runs every implemented day.
- `aoc2018 1` runs day 1 only.
- `aoc2018 -t` checks every day against its example input.
- `aoc2018 -t 1` checks day 1 against its example input and prints PASS or FAIL.
- `aoc2018 --help` prints the usage message.

The day is read from the leading digits of the argument. A day outside 1–25
is rejected, and a day that has no solution yet is reported as an error; in
both cases the command exits with status 1.

## Using the solvers directly

Each day module exposes solver functions that take the input lines, and
`part1`/`part2`/`test_part1`/`test_part2` functions that take a file path
(defaulting to the file names above):

```python
from aoc2018 import day01, day02, day03, day04

day01.solve_part1(["+1", "-2", "+3", "+1"])              # 3
day01.solve_part2(["+1", "-2", "+3", "+1"])              # 2
day02.solve_part2(["abcde", "fghij", "klmno", "fguij"])  # "fgij"

claims = day03.parse_claims(["#1 @ 1,3: 4x4", "#2 @ 3,1: 4x4", "#3 @ 5,5: 2x2"])
day03.solve(claims, False)  # 4 square inches claimed more than once
day03.solve(claims, True)   # 3, the 1-based position of the claim with no overlap

day04.parse_records(["[1518-11-01 00:05] falls asleep",
                     "[1518-11-01 00:00] Guard #10 begins shift"])
# records ordered by timestamp
```

`aoc2018.utils` provides `read_file`, `read_lines` and a `Timer` measuring
processor time; `aoc2018.solution.Solution` bundles a day's four functions.

## What is not done

Day 4 is unfinished: part 1 only prints the guard records sorted by time,
part 2 gives an empty answer, and both of its self-checks always report FAIL.
Days 5 to 25 have no solutions.

## Running the tests

```
pip install ".[test]"
pytest
```
from aoc2018.solution import Solution


def _make(calls):
    return Solution(
        part1=lambda: calls.append("part1") or "one",
        part2=lambda: calls.append("part2") or "two",
        test_part1=lambda: True,
        test_part2=lambda: False,
    )


def test_run_part1_returns_part1_answer():
    calls = []
    solution = _make(calls)
    assert solution.run_part1() == "one"
    assert calls == ["part1"]


def test_run_part2_returns_part2_answer():
    calls = []
    solution = _make(calls)
    assert solution.run_part2() == "two"
    assert calls == ["part2"]


def test_checks_are_reachable():
    solution = _make([])
    assert solution.test_part1() is True
    assert solution.test_part2() is False
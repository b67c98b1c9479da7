import pytest

from aoc2018 import day01

EXAMPLE = ["+1", "-2", "+3", "+1"]


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "01_test_input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    return path


def test_solve_part1_example():
    assert day01.solve_part1(EXAMPLE) == 3


def test_solve_part2_example():
    assert day01.solve_part2(EXAMPLE) == 2


def test_solve_part1_is_order_independent():
    assert day01.solve_part1(list(reversed(EXAMPLE))) == day01.solve_part1(EXAMPLE)


def test_solve_part2_does_not_count_start():
    assert day01.solve_part2(["+1", "-1"]) == 1


def test_solve_part2_empty_raises():
    with pytest.raises(ValueError):
        day01.solve_part2([])


def test_bad_line_raises():
    with pytest.raises(ValueError):
        day01.solve_part1(["abc"])


def test_parts_from_file(example_file):
    assert day01.part1(example_file) == 3
    assert day01.part2(example_file) == 2


def test_checks_pass_on_example(example_file):
    assert day01.test_part1(example_file) is True
    assert day01.test_part2(example_file) is True


def test_checks_fail_without_file(tmp_path):
    assert day01.test_part1(tmp_path / "missing.txt") is False
    assert day01.test_part2(tmp_path / "missing.txt") is False


def test_part_without_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        day01.part1(tmp_path / "missing.txt")


def test_solution_runs_parts(example_file, monkeypatch):
    monkeypatch.chdir(example_file.parent)
    (example_file.parent / "01_input.txt").write_text(
        example_file.read_text(encoding="utf-8"), encoding="utf-8"
    )
    assert day01.SOLUTION.run_part1() == 3
    assert day01.SOLUTION.test_part2() is True
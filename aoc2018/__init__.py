"""Advent of Code 2018 solutions for days 1 to 4 and their command-line runner."""

__version__ = "0.1.0"
__all__ = ["cli", "day01", "day02", "day03", "day04", "solution", "utils"]
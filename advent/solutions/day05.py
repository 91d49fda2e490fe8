"""Day 5: checking ingredient IDs against ranges of fresh IDs."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(5)


def _parse_range(line: str) -> tuple[int, int]:
    start, sep, end = line.partition("-")
    if not sep:
        raise ValueError(f"invalid range: {line!r}")
    return int(start), int(end)


def _parse_input(text: str) -> tuple[list[tuple[int, int]], list[int]]:
    """Ranges sorted by start, then the IDs listed after the blank line."""
    lines = iter(text.splitlines())
    ranges = sorted(
        (_parse_range(line) for line in itertools.takewhile(bool, lines)),
        key=lambda r: r[0],
    )
    numbers = [int(line) for line in lines if line]
    return ranges, numbers


def part_one(text: str) -> int:
    """Count the listed IDs that fall inside a range."""
    ranges, numbers = _parse_input(text)
    return sum(
        1
        for number in numbers
        if any(start < number <= end for start, end in reversed(ranges))
    )


def part_two(text: str) -> int:
    """Count the IDs covered by the ranges."""
    ranges, _ = _parse_input(text)
    count = 0
    last_end = 0
    for range_start, range_end in ranges:
        start = max(last_end, range_start)
        end = max(last_end, range_end)
        count += end - start + 1
        last_end = end + 1
    return count


def main(argv: Sequence[str] | None = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)
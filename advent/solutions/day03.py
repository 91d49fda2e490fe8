"""Day 3: choosing the largest joltage from each bank of batteries."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(3)


def _banks(text: str) -> Iterator[list[int]]:
    for line in text.splitlines():
        yield [int(c) for c in line]


def _max_joltage(digits: list[int], count: int) -> int:
    """Largest number made of ``count`` digits kept in order."""
    if len(digits) < count:
        raise ValueError(f"bank has fewer than {count} batteries")
    result = 0
    start = 0
    for n in range(count):
        end = len(digits) - (count - n)
        index = max(range(start, end + 1), key=digits.__getitem__)
        result = result * 10 + digits[index]
        start = index + 1
    return result


def part_one(text: str) -> int:
    return sum(_max_joltage(bank, 2) for bank in _banks(text))


def part_two(text: str) -> int:
    return sum(_max_joltage(bank, 12) for bank in _banks(text))


def main(argv: Sequence[str] | None = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)
"""Day 1: turning a dial of 100 positions and counting the times it shows zero."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(1)
_START = 50
_SIZE = 100


def _rotations(text: str) -> Iterator[int]:
    """Signed rotation amounts, left turns negative; zero turns are skipped."""
    for line in text.splitlines():
        sign = -1 if line.startswith("L") else 1
        value = sign * int(line[1:])
        if value != 0:
            yield value


def part_one(text: str) -> int:
    """Count the rotations that leave the dial at zero."""
    position = _START
    zeros = 0
    for value in _rotations(text):
        position = (position + value) % _SIZE
        zeros += position == 0
    return zeros


def part_two(text: str) -> int:
    """Count every time the dial passes or stops at zero."""
    position = _START
    zeros = 0
    for value in _rotations(text):
        new = (position + value) % _SIZE
        crossed = position != 0 and ((value < 0 and new > position) or (value > 0 and new < position))
        zeros += abs(value) // _SIZE + (crossed or new == 0)
        position = new
    return zeros


def main(argv: Sequence[str] | None = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)
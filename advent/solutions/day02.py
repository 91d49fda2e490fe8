"""Day 2: summing product IDs made of a repeated digit sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(2)


def _ranges(text: str) -> Iterator[range]:
    """Inclusive ID ranges from comma separated ``start-end`` pairs."""
    for chunk in text.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split("-")
        if len(parts) < 2:
            raise ValueError(f"invalid range: {chunk!r}")
        yield range(int(parts[0]), int(parts[1]) + 1)


def _is_doubled(number: int) -> bool:
    digits = str(number)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def _is_repeated(number: int) -> bool:
    digits = str(number)
    length = len(digits)
    return any(
        length % size == 0 and digits[:size] * (length // size) == digits
        for size in range(1, length // 2 + 1)
    )


def part_one(text: str) -> int:
    """Sum of IDs that are one sequence written twice."""
    return sum(n for r in _ranges(text) for n in r if _is_doubled(n))


def part_two(text: str) -> int:
    """Sum of IDs that are one sequence written at least twice."""
    return sum(n for r in _ranges(text) for n in r if _is_repeated(n))


def main(argv: Sequence[str] | None = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)
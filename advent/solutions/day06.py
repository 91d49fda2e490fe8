"""Day 6: solving the columns of a cephalopod math worksheet."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from advent.day import Day
from advent.grid import Grid
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(6)
_OPERATORS = "*+"


def _apply(op: str, values: Iterable[int]) -> int:
    if op == "*":
        return math.prod(values)
    if op == "+":
        return sum(values)
    raise ValueError(f"unknown operator: {op!r}")


def part_one(text: str) -> int:
    """Numbers read along rows; each column is combined by its operator."""
    data: list[int] = []
    operations: list[str] = []
    n = 0
    for c in text:
        if c in _OPERATORS:
            operations.append(c)
        elif c.isdigit() and c.isascii():
            n = n * 10 + int(c)
        elif c in " \n":
            if n > 0:
                data.append(n)
                n = 0
        else:
            raise ValueError(f"unexpected character: {c!r}")
    grid = Grid.from_list(data, len(operations))
    return sum(
        _apply(op, column) for op, column in zip(operations, zip(*grid.iter_rows()))
    )


def _column_numbers(head: str) -> list[int]:
    """Numbers read down each character column; blank columns give zero."""
    nums: list[int] = []
    for line in head.split("\n"):
        for column, c in enumerate(line):
            if c == " ":
                if column >= len(nums):
                    nums.append(0)
            elif c.isdigit() and c.isascii():
                if column < len(nums):
                    nums[column] = nums[column] * 10 + int(c)
                else:
                    nums.append(int(c))
            else:
                raise ValueError(f"unexpected character: {c!r}")
    return nums


def _block(op: str, values: Iterable[int]) -> int:
    return _apply(op, [v for v in values if v != 0])


def part_two(text: str) -> int | None:
    """Numbers read down columns; each block is combined by its operator.

    Returns None when the operator line is missing or not terminated.
    """
    first = min((i for i in (text.find(o) for o in _OPERATORS) if i >= 0), default=-1)
    if first < 0:
        return None
    nums = _column_numbers(text[:first])
    op = text[first]
    op_start = 0
    total = 0
    for column, c in enumerate(text[first + 1 :]):
        if c in _OPERATORS:
            total += _block(op, nums[op_start:column])
            op = c
            op_start = column
        elif c == "\n":
            return total + _block(op, nums[op_start:])
        elif c != " ":
            raise ValueError(f"unexpected character: {c!r}")
    return None


def main(argv: Sequence[str] | None = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)
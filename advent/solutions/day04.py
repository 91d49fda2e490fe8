"""Day 4: removing paper rolls that forklifts can reach."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from advent.day import Day
from advent.geometry import ALL_AROUND, Point
from advent.grid import Grid
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(4)
_ROLL = "@"
_CROWDED = 4


def _neighbour_rolls(grid: Grid, point: Point) -> int:
    return sum(1 for d in ALL_AROUND if grid.get_item(point + d) == _ROLL)


def part_one(text: str) -> int:
    """Count rolls with fewer than four neighbouring rolls."""
    grid = Grid.char_grid(text)
    return sum(
        1
        for point, cell in grid.iter_item_and_position()
        if cell == _ROLL and _neighbour_rolls(grid, point) < _CROWDED
    )


def part_two(text: str) -> int:
    """Count rolls removed when accessible rolls are taken away repeatedly."""
    grid = Grid.char_grid(text)
    counts = Grid.filled(grid.width, grid.height, 0)
    queue: deque[Point] = deque()
    for point, cell in grid.iter_item_and_position():
        if cell == _ROLL:
            count = _neighbour_rolls(grid, point)
            counts[point] = count
            if 0 < count < _CROWDED:
                queue.append(point)

    removed = 0
    while queue:
        point = queue.popleft()
        if counts[point] < 0:
            continue
        counts[point] = -1
        removed += 1
        for d in ALL_AROUND:
            neighbour = point + d
            if counts.is_in_bounds(neighbour):
                counts[neighbour] -= 1
                if 0 < counts[neighbour] < _CROWDED:
                    queue.append(neighbour)
    return removed


def main(argv: Sequence[str] | None = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)
"""A rectangular grid of values addressed by :class:`~advent.geometry.Point`."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from advent.geometry import Point


def _first_line_width(text: str) -> int:
    if not text:
        raise ValueError("cannot build a grid from empty text")
    first = text.split("\n", 1)[0]
    if first.endswith("\r"):
        first = first[:-1]
    if not first:
        raise ValueError("the first line of the grid is empty")
    return len(first)


@dataclass
class Grid:
    """Values stored row by row; ``height`` rows of ``width`` columns."""

    width: int
    height: int
    content: list

    @classmethod
    def filled(cls, width: int, height: int, default: Any) -> Grid:
        """A grid of the given size with every cell set to ``default``."""
        return cls(width, height, [default] * (width * height))

    @classmethod
    def from_str(cls, text: str, map_char: Callable[[str], Any]) -> Grid:
        """Build a grid from lines of text, mapping each character."""
        width = _first_line_width(text)
        content = [map_char(c) for c in text if c != "\n"]
        return cls(width, len(content) // width, content)

    @classmethod
    def from_str_capture_start(
        cls,
        text: str,
        map_char: Callable[[str], Any],
        is_start: Callable[[str], bool],
    ) -> tuple[Grid, Point]:
        """Build a grid and return the position of the (last) start character."""
        width = _first_line_width(text)
        content = []
        start = None
        for i, c in enumerate(c for c in text if c != "\n"):
            if is_start(c):
                start = Point.from_index(i, width)
            content.append(map_char(c))
        if start is None:
            raise ValueError("no start position found in grid")
        return cls(width, len(content) // width, content), start

    @classmethod
    def from_list(cls, content: list, width: int) -> Grid:
        """Wrap a flat list of values as rows of ``width`` columns."""
        if width <= 0:
            raise ValueError("grid width must be positive")
        content = list(content)
        return cls(width, len(content) // width, content)

    @classmethod
    def char_grid(cls, text: str) -> Grid:
        """A grid holding the characters of ``text`` unchanged."""
        return cls.from_str(text, lambda c: c)

    def row(self, index: int) -> list:
        if not 0 <= index < self.height:
            raise IndexError(f"row {index} out of range")
        return self.content[index * self.width : (index + 1) * self.width]

    def resize(self, width: int, height: int, default: Any) -> None:
        """Change the size, keeping values at their positions and filling new cells."""
        self.content = [
            self.content[point.to_index(self.width)] if self.is_in_bounds(point) else default
            for line in range(height)
            for column in range(width)
            for point in (Point(line, column),)
        ]
        self.width = width
        self.height = height

    def resize_to_max_point(self, point: Point, default: Any) -> None:
        """Resize so that ``point`` is the bottom-right cell."""
        self.resize(point.column + 1, point.line + 1, default)

    def clamp(self, min_point: Point, max_point: Point, default: Any) -> None:
        """Cut the grid to the rectangle between two corners, inclusive."""
        width = max_point.column - min_point.column + 1
        height = max_point.line - min_point.line + 1
        self.content = [
            self.content[point.to_index(self.width)] if self.is_in_bounds(point) else default
            for line in range(min_point.line, max_point.line + 1)
            for column in range(min_point.column, max_point.column + 1)
            for point in (Point(line, column),)
        ]
        self.width = width
        self.height = height

    def is_in_bounds(self, point: Point) -> bool:
        return 0 <= point.column < self.width and 0 <= point.line < self.height

    def __iter__(self) -> Iterator:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)

    def iter_rows(self) -> Iterator[list]:
        for start in range(0, len(self.content), self.width):
            yield self.content[start : start + self.width]

    def iter_item_and_position(self) -> Iterator[tuple[Point, Any]]:
        for i, item in enumerate(self.content):
            yield Point.from_index(i, self.width), item

    def iter_positions(self) -> Iterator[Point]:
        for line in range(self.height):
            for column in range(self.width):
                yield Point(line, column)

    def get_item(self, point: Point) -> Any | None:
        """The value at ``point``, or None outside the grid."""
        if self.is_in_bounds(point):
            return self.content[point.to_index(self.width)]
        return None

    def __getitem__(self, point: Point) -> Any:
        if not self.is_in_bounds(point):
            raise IndexError(f"point {point} outside grid")
        return self.content[point.to_index(self.width)]

    def __setitem__(self, point: Point, value: Any) -> None:
        if not self.is_in_bounds(point):
            raise IndexError(f"point {point} outside grid")
        self.content[point.to_index(self.width)] = value

    def to_fmt(self, f: Callable[[Point, Any], str]) -> Grid:
        """A grid of strings produced by ``f(point, value)`` for each cell."""
        return self.map(f)

    def __str__(self) -> str:
        rows = "".join(
            "".join(str(self[Point(line, column)]) for column in range(self.width)) + "\n"
            for line in range(self.height)
        )
        return f"({self.width}, {self.height})\n{rows}"

    def find_position_of(self, item: Any) -> Point | None:
        """Position of the first cell equal to ``item``, or None."""
        for point, value in self.iter_item_and_position():
            if value == item:
                return point
        return None

    def map(self, f: Callable[[Point, Any], Any]) -> Grid:
        """A new grid of ``f(point, value)`` for each cell."""
        return Grid(
            self.width,
            self.height,
            [f(point, self[point]) for point in self.iter_positions()],
        )

    def to_debug(self) -> Grid:
        """A character grid showing true cells as ``#`` and false cells as ``.``."""
        return self.map(lambda _, b: "#" if b else ".")

    def is_true(self, point: Point) -> bool:
        return self.is_in_bounds(point) and bool(self[point])

    def is_false(self, point: Point) -> bool:
        return not self.is_in_bounds(point) or not self[point]
"""Points and directions on a two-dimensional line/column grid."""

from __future__ import annotations

from dataclasses import dataclass

_U8_MASK = 0xFF
_U64_MASK = (1 << 64) - 1
_U128_MASK = (1 << 128) - 1


def _to_signed64(value: int) -> int:
    value &= _U64_MASK
    return value - (1 << 64) if value >= 1 << 63 else value


@dataclass(frozen=True, slots=True)
class Direction:
    """A step on the grid: ``vertical`` grows downwards, ``horizontal`` to the right."""

    vertical: int = 0
    horizontal: int = 0

    def rotate_clockwise(self) -> Direction:
        return Direction(self.horizontal, -self.vertical)

    def rotate_counterclockwise(self) -> Direction:
        return Direction(-self.horizontal, self.vertical)

    def reverse(self) -> Direction:
        return Direction(-self.vertical, -self.horizontal)

    def is_opposite(self, other: Direction) -> bool:
        return self.vertical == -other.vertical and self.horizontal == -other.horizontal

    def is_orthogonal(self, other: Direction) -> bool:
        return (self.vertical == 0 and other.vertical == 0) or (
            self.horizontal == 0 and other.horizontal == 0
        )

    def to_u8(self) -> int:
        """Pack a unit direction into one byte."""
        return (((self.vertical + 1) << 2) & _U8_MASK) | ((self.horizontal + 1) & _U8_MASK)

    @classmethod
    def from_u8(cls, value: int) -> Direction:
        """Unpack a direction packed by :meth:`to_u8`."""
        value &= _U8_MASK
        return cls((value >> 2) - 1, (value & 0b11) - 1)

    @classmethod
    def from_char(cls, value: str) -> Direction:
        """Read a direction from the first character of ``value`` (``^v<>`` or ``UDLR``)."""
        if not value:
            raise ValueError("empty direction")
        try:
            return _CHAR_TO_DIRECTION[value[0]]
        except KeyError:
            raise ValueError(f"unknown direction character: {value[0]!r}") from None

    def __add__(self, other):
        if isinstance(other, Direction):
            return Direction(self.vertical + other.vertical, self.horizontal + other.horizontal)
        if isinstance(other, Point):
            return other.apply_direction(self)
        return NotImplemented

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Direction(self.vertical * factor, self.horizontal * factor)

    def __str__(self) -> str:
        try:
            return _DIRECTION_TO_CHAR[self]
        except KeyError:
            raise ValueError(f"no symbol for direction {self!r}") from None


@dataclass(frozen=True, slots=True)
class Point:
    """A position on the grid given by ``line`` and ``column``."""

    line: int = 0
    column: int = 0

    def apply_direction(self, direction: Direction) -> Point:
        return Point(self.line + direction.vertical, self.column + direction.horizontal)

    def max(self, other: Point) -> Point:
        return Point(max(self.line, other.line), max(self.column, other.column))

    def min(self, other: Point) -> Point:
        return Point(min(self.line, other.line), min(self.column, other.column))

    def is_aligned(self, other: Point) -> bool:
        return self.line == other.line or self.column == other.column

    def is_between_inclusive(self, a: Point, b: Point) -> bool:
        """True when this point lies on the straight segment from ``a`` to ``b``."""
        if not (self.is_aligned(a) and self.is_aligned(b) and a.is_aligned(b)):
            return False
        between_lines = min(a.line, b.line) <= self.line <= max(a.line, b.line)
        between_columns = min(a.column, b.column) <= self.column <= max(a.column, b.column)
        return (a.line == b.line == self.line and between_columns) or (
            a.column == b.column == self.column and between_lines
        )

    @classmethod
    def from_index(cls, value: int, grid_width: int) -> Point:
        return cls(value // grid_width, value % grid_width)

    def to_index(self, grid_width: int) -> int:
        return self.line * grid_width + self.column

    def to_u128(self) -> int:
        """Pack the point into a 128-bit integer, line in the high half."""
        line = self.line & _U128_MASK
        column = self.column & _U128_MASK
        return ((line << 64) | column) & _U128_MASK

    @classmethod
    def from_u128(cls, value: int) -> Point:
        """Unpack a point packed by :meth:`to_u128`."""
        value &= _U128_MASK
        return cls(_to_signed64(value >> 64), _to_signed64(value & _U64_MASK))

    def as_direction(self) -> Direction:
        return Direction(self.line, self.column)

    def as_vector_direction(self, other: Point) -> Direction:
        return Direction(other.line - self.line, other.column - self.column)

    def __add__(self, direction):
        if not isinstance(direction, Direction):
            return NotImplemented
        return self.apply_direction(direction)

    def __sub__(self, direction):
        if not isinstance(direction, Direction):
            return NotImplemented
        return Point(self.line - direction.vertical, self.column - direction.horizontal)

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Point(self.line * factor, self.column * factor)

    def __str__(self) -> str:
        return f"(l:{self.line}, c:{self.column})"


UP = Direction(-1, 0)
DOWN = Direction(1, 0)
LEFT = Direction(0, -1)
RIGHT = Direction(0, 1)
ORTHOGONAL = (UP, DOWN, LEFT, RIGHT)
DIAGONALS = (UP + RIGHT, RIGHT + DOWN, DOWN + LEFT, LEFT + UP)
ALL_AROUND = (UP, UP + RIGHT, RIGHT, RIGHT + DOWN, DOWN, DOWN + LEFT, LEFT, LEFT + UP)

_CHAR_TO_DIRECTION = {
    "^": UP,
    "U": UP,
    "v": DOWN,
    "D": DOWN,
    "<": LEFT,
    "L": LEFT,
    ">": RIGHT,
    "R": RIGHT,
}
_DIRECTION_TO_CHAR = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">"}
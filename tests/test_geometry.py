import pytest

from advent.geometry import (
    ALL_AROUND,
    DIAGONALS,
    DOWN,
    LEFT,
    ORTHOGONAL,
    RIGHT,
    UP,
    Direction,
    Point,
)


def test_direction():
    direction = Direction(1, 0)
    assert direction.vertical == 1
    assert direction.horizontal == 0


def test_point_apply_direction():
    point = Point(1, 2)
    direction = Direction(1, 0)
    new_point = point.apply_direction(direction)
    assert (new_point.line, new_point.column) == (2, 2)
    new_point = point + direction
    assert (new_point.line, new_point.column) == (2, 2)
    assert direction + point == Point(2, 2)


def test_direction_rotate():
    direction = Direction(1, 0)
    assert direction.rotate_clockwise() == Direction(0, -1)
    assert direction.rotate_counterclockwise() == Direction(0, 1)


@pytest.mark.parametrize(
    "vertical, horizontal",
    [(-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1)],
)
def test_rotate_four_times_is_identity(vertical, horizontal):
    start = Direction(vertical, horizontal)
    rotated = start.rotate_clockwise().rotate_clockwise().rotate_clockwise().rotate_clockwise()
    assert rotated == Direction(vertical, horizontal)
    assert start.rotate_clockwise().rotate_counterclockwise() == Direction(vertical, horizontal)


def test_direction_from_char():
    assert Direction.from_char("U") == Direction(-1, 0)
    assert Direction.from_char("D") == Direction(1, 0)
    assert Direction.from_char("L") == Direction(0, -1)
    assert Direction.from_char("R") == Direction(0, 1)
    assert Direction.from_char("^") == UP
    assert Direction.from_char("v") == DOWN
    assert Direction.from_char("<") == LEFT
    assert Direction.from_char(">") == RIGHT
    assert Direction.from_char("Right") == RIGHT


def test_direction_from_char_invalid():
    with pytest.raises(ValueError):
        Direction.from_char("x")
    with pytest.raises(ValueError):
        Direction.from_char("")


def test_direction_mult():
    assert Direction(2, 0) * 2 == Direction(4, 0)


def test_direction_str():
    assert str(Direction(-1, 0)) == "^"
    assert str(Direction(1, 0)) == "v"
    assert str(Direction(0, -1)) == "<"
    assert str(Direction(0, 1)) == ">"
    assert [str(Direction.from_char(c)) for c in "UDLR"] == [str(d) for d in ORTHOGONAL]
    with pytest.raises(ValueError):
        str(Direction(-1, 1))


def test_direction_reverse_and_opposite():
    assert UP.reverse() == DOWN
    assert LEFT.is_opposite(RIGHT)
    assert not LEFT.is_opposite(UP)


def test_direction_is_orthogonal():
    assert LEFT.is_orthogonal(RIGHT)
    assert UP.is_orthogonal(DOWN)
    assert not UP.is_orthogonal(LEFT)


def test_direction_u8_round_trip():
    for d in ALL_AROUND:
        assert Direction.from_u8(d.to_u8()) == d
    assert Direction(0, 0).to_u8() == 0b0101


def test_diagonals():
    assert DIAGONALS == (Direction(-1, 1), Direction(1, 1), Direction(1, -1), Direction(-1, -1))
    assert len(set(ALL_AROUND)) == 8


def test_point():
    point = Point(1, 2)
    assert point.line == 1
    assert point.column == 2


def test_point_max():
    assert Point(1, 2).max(Point(3, 1)) == Point(3, 2)


def test_point_min():
    assert Point(1, 2).min(Point(3, 1)) == Point(1, 1)


def test_point_is_aligned():
    assert Point(1, 2).is_aligned(Point(1, 3))
    assert not Point(1, 2).is_aligned(Point(3, 1))
    assert Point(1, 2).is_aligned(Point(1, 2))


def test_point_is_between_inclusive():
    point = Point(1, 2)
    assert point.is_between_inclusive(Point(0, 2), Point(2, 2))
    assert point.is_between_inclusive(Point(1, 0), Point(1, 4))
    assert not point.is_between_inclusive(Point(0, 1), Point(2, 3))
    assert not point.is_between_inclusive(Point(1, 2), Point(2, 3))
    assert not point.is_between_inclusive(Point(2, 1), Point(3, 2))


def test_point_index_round_trip():
    assert Point(2, 3).to_index(5) == 13
    assert Point.from_index(13, 5) == Point(2, 3)


def test_point_u128_round_trip():
    for p in (Point(0, 0), Point(5, 7), Point(-3, 4), Point(123456, 654321)):
        assert Point.from_u128(p.to_u128()) == p
    assert Point(1, 2).to_u128() == (1 << 64) | 2


def test_point_sub_and_mul():
    assert Point(3, 3) - UP == Point(4, 3)
    assert Point(2, -3) * 3 == Point(6, -9)


def test_point_as_directions():
    assert Point(1, -1).as_direction() == Direction(1, -1)
    assert Point(1, 1).as_vector_direction(Point(4, 0)) == Direction(3, -1)


def test_point_str():
    assert str(Point(3, 4)) == "(l:3, c:4)"


def test_hashable():
    assert {Point(1, 1), Point(1, 1), Point(0, 1)} == {Point(0, 1), Point(1, 1)}
import math

from geometry import clamp_point, distance, perpendicular, point_in_oriented_rect, unit_vector


def test_distance():
    assert distance((0, 0), (3, 4)) == 5.0
    assert distance((1, 1), (1, 1)) == 0.0


def test_unit_vector_and_perpendicular():
    d = unit_vector((0, 0), (0, 10))
    assert d == (0.0, 1.0)
    assert perpendicular(d) == (-1.0, 0.0)
    assert unit_vector((2, 2), (2, 2)) is None


def test_point_in_oriented_rect_horizontal():
    start, end = (0, 0), (100, 0)
    assert point_in_oriented_rect((50, 0), start, end, 6.0)
    assert point_in_oriented_rect((50, 2.9), start, end, 6.0)
    assert point_in_oriented_rect((50, -2.9), start, end, 6.0)
    assert not point_in_oriented_rect((50, 3.5), start, end, 6.0)
    assert not point_in_oriented_rect((-1, 0), start, end, 6.0)
    assert not point_in_oriented_rect((101, 0), start, end, 6.0)


def test_point_in_oriented_rect_diagonal():
    start, end = (0, 0), (100, 100)
    assert point_in_oriented_rect((50, 50), start, end, 6.0)
    # 2 units off the line, perpendicular
    off = 2 / math.sqrt(2)
    assert point_in_oriented_rect((50 + off, 50 - off), start, end, 6.0)
    # 5 units off the line
    off = 5 / math.sqrt(2)
    assert not point_in_oriented_rect((50 + off, 50 - off), start, end, 6.0)


def test_point_in_oriented_rect_zero_length_is_never_hit():
    assert not point_in_oriented_rect((5, 5), (5, 5), (5, 5), 6.0)


def test_clamp_point():
    bounds = (-100, -50, 100, 50)
    assert clamp_point((0, 0), bounds) == (0, 0)
    assert clamp_point((500, -500), bounds) == (100, -50)
    assert clamp_point((500, -500), bounds, padding=25) == (75, -25)


def test_clamp_point_collapses_when_padding_exceeds_bounds():
    assert clamp_point((30, 30), (0, 0, 20, 100), padding=25) == (10.0, 30)

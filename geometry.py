"""
Small 2D helpers used for hit-testing and arrow layout.
Points are plain (x, y) tuples in widget-local coordinates.
"""

import math
from typing import Optional, Tuple

Point = Tuple[float, float]
Bounds = Tuple[float, float, float, float]  # left, top, right, bottom


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points"""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return math.sqrt(dx * dx + dy * dy)


def dot(r: Point, s: Point) -> float:
    return r[0] * s[0] + r[1] * s[1]


def perpendicular(d: Point) -> Point:
    """Rotate a vector by 90 degrees: (x, y) => (-y, x)"""
    return (-d[1], d[0])


def unit_vector(start: Point, end: Point) -> Optional[Point]:
    """Normalized direction from start to end, or None when the points coincide"""
    length = distance(start, end)
    if length == 0.0:
        return None
    return ((end[0] - start[0]) / length, (end[1] - start[1]) / length)


def point_in_oriented_rect(p: Point, start: Point, end: Point, width: float) -> bool:
    """
    Check whether p lies inside the rectangle of the given width centred on
    the segment start -> end.

    Let a be the corner of the rectangle next to start, with ab running along
    the segment and ac across it. p is inside when the scalar projections of
    ap onto ab and ac both lie within the side lengths. The comparisons are
    done against dot(ab, ab) and dot(ac, ac) so no division is needed.
    A zero-length segment has no direction and is never hit.
    """
    d = unit_vector(start, end)
    if d is None:
        return False

    halfwidth = width / 2.0
    # counterclockwise side of the segment
    a = (start[0] - halfwidth * d[1], start[1] + halfwidth * d[0])
    ab = (end[0] - start[0], end[1] - start[1])
    # clockwise, across the full width
    ac = (width * d[1], -width * d[0])
    ap = (p[0] - a[0], p[1] - a[1])

    along = dot(ap, ab)
    across = dot(ap, ac)
    return (0.0 <= along <= dot(ab, ab)) and (0.0 <= across <= dot(ac, ac))


def clamp_point(p: Point, bounds: Bounds, padding: float = 0.0) -> Point:
    """
    Clamp p into bounds shrunk by padding on every side. If the padded box is
    narrower than nothing on an axis, that axis collapses to the box centre.
    """
    left, top, right, bottom = bounds
    return (_clamp_axis(p[0], left + padding, right - padding),
            _clamp_axis(p[1], top + padding, bottom - padding))


def _clamp_axis(value: float, low: float, high: float) -> float:
    if low > high:
        return (low + high) / 2.0
    return min(max(value, low), high)

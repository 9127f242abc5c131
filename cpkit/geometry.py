"""Integer-coordinate segment and line geometry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


class Orientation(IntEnum):
    """Turn direction of an ordered triple of points."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """Return the orientation of the triple ``(p, q, r)``."""
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTERCLOCKWISE


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Return whether ``q`` lies in the bounding box of segment ``pr``."""
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def do_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """Return whether segments ``p1q1`` and ``p2q2`` share a point."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)
    if o1 != o2 and o3 != o4:
        return True
    collinear = Orientation.COLLINEAR
    return (
        (o1 == collinear and on_segment(p1, p2, q1))
        or (o2 == collinear and on_segment(p1, q2, q1))
        or (o3 == collinear and on_segment(p2, p1, q2))
        or (o4 == collinear and on_segment(p2, q1, q2))
    )


def are_collinear(p1: Point, p2: Point, p3: Point) -> bool:
    """Return whether three points lie on one line."""
    return (p2.y - p1.y) * (p3.x - p2.x) == (p3.y - p2.y) * (p2.x - p1.x)


def intersection(
    p1: Point, q1: Point, p2: Point, q2: Point
) -> tuple[float, float] | None:
    """Return where lines ``p1q1`` and ``p2q2`` meet, or ``None`` if parallel.

    For segments, check :func:`do_intersect` first.
    """
    a1 = q1.y - p1.y
    b1 = p1.x - q1.x
    c1 = a1 * p1.x + b1 * p1.y

    a2 = q2.y - p2.y
    b2 = p2.x - q2.x
    c2 = a2 * p2.x + b2 * p2.y

    determinant = a1 * b2 - a2 * b1
    if determinant == 0:
        return None
    return (b2 * c1 - b1 * c2) / determinant, (a1 * c2 - a2 * c1) / determinant
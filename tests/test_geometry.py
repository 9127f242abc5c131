import pytest

from cpkit.geometry import (
    Orientation,
    Point,
    are_collinear,
    do_intersect,
    intersection,
    on_segment,
    orientation,
)


def _cross(p, q, x, y):
    return (q.x - p.x) * (y - p.y) - (q.y - p.y) * (x - p.x)


def test_orientation_collinear():
    assert orientation(Point(0, 0), Point(1, 1), Point(2, 2)) is Orientation.COLLINEAR


def test_orientation_turns():
    p, q = Point(0, 0), Point(1, 0)
    assert orientation(p, q, Point(1, 1)) is Orientation.COUNTERCLOCKWISE
    assert orientation(p, q, Point(1, -1)) is Orientation.CLOCKWISE


@pytest.mark.parametrize(
    "p,q,r",
    [
        (Point(0, 0), Point(3, 1), Point(1, 4)),
        (Point(-2, 5), Point(7, -1), Point(0, 0)),
    ],
)
def test_orientation_flips_when_swapped(p, q, r):
    first = orientation(p, q, r)
    second = orientation(p, r, q)
    assert {first, second} == {Orientation.CLOCKWISE, Orientation.COUNTERCLOCKWISE}


def test_on_segment():
    assert on_segment(Point(0, 0), Point(1, 1), Point(2, 2))
    assert not on_segment(Point(0, 0), Point(3, 3), Point(2, 2))


def test_crossing_segments_intersect():
    args = (Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
    assert do_intersect(*args)
    assert do_intersect(args[2], args[3], args[0], args[1])


def test_parallel_segments_do_not_intersect():
    assert not do_intersect(Point(0, 0), Point(2, 0), Point(0, 1), Point(2, 1))


def test_collinear_overlap_and_disjoint():
    assert do_intersect(Point(0, 0), Point(4, 0), Point(2, 0), Point(6, 0))
    assert not do_intersect(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))


def test_touching_endpoint_intersects():
    assert do_intersect(Point(0, 0), Point(2, 2), Point(2, 2), Point(4, 0))


def test_are_collinear():
    assert are_collinear(Point(0, 0), Point(2, 4), Point(5, 10))
    assert not are_collinear(Point(0, 0), Point(2, 4), Point(5, 11))


def test_intersection_of_diagonals():
    assert intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0)) == (1.0, 1.0)


@pytest.mark.parametrize(
    "p1,q1,p2,q2",
    [
        (Point(0, 0), Point(5, 3), Point(1, 7), Point(4, -2)),
        (Point(-3, 2), Point(6, 6), Point(0, -5), Point(2, 9)),
    ],
)
def test_intersection_lies_on_both_lines(p1, q1, p2, q2):
    point = intersection(p1, q1, p2, q2)
    assert point is not None
    x, y = point
    assert _cross(p1, q1, x, y) == pytest.approx(0.0, abs=1e-9)
    assert _cross(p2, q2, x, y) == pytest.approx(0.0, abs=1e-9)


def test_intersection_of_parallel_lines():
    assert intersection(Point(0, 0), Point(1, 1), Point(0, 1), Point(1, 2)) is None
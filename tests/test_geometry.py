import math

import pytest

from gvlayout.core.geometry import (
    Point,
    Position,
    create_vector_of_length,
    do_boxes_intersect,
    ellipse_line_intersection,
    get_connection_point_for_box,
    get_connection_point_for_circle,
    get_passthrough_path_invisible,
    get_size_for_str,
    in_range,
    interpolate,
    make_size_square,
    normalize_scale_vector,
    pad_shape_scalar,
    segment_rect_intersection,
    weighted_median,
)

RECT = (Point(-50.0, -50.0), Point(50.0, 50.0))


@pytest.mark.parametrize(
    "a, b",
    [
        (Point(-48.0, -27.0), Point(-196.0, -55.0)),
        (Point(-70.0, -156.0), Point(57.0, 41.0)),
        (Point(70.0, -11.0), Point(-20.0, -119.0)),
    ],
)
def test_segment_intersects_rect(a, b):
    assert segment_rect_intersection((a, b), RECT) is True


@pytest.mark.parametrize(
    "a, b",
    [
        (Point(190.0, -55.0), Point(173.0, 199.0)),
        (Point(142.0, -19.0), Point(-108.0, -133.0)),
        (Point(151.0, 80.0), Point(17.0, 124.0)),
    ],
)
def test_segment_misses_rect(a, b):
    assert segment_rect_intersection((a, b), RECT) is False


def test_segment_rect_requires_normalized_rect():
    with pytest.raises(ValueError):
        segment_rect_intersection(
            (Point(0.0, 0.0), Point(1.0, 1.0)),
            (Point(10.0, 0.0), Point(0.0, 10.0)),
        )


def test_point_arithmetic():
    p = Point(1.0, 2.0)
    q = Point(3.0, 5.0)
    assert p.add(q) == Point(4.0, 7.0)
    assert q.sub(p) == Point(2.0, 3.0)
    assert p.neg() == Point(-1.0, -2.0)
    assert p.scale(2.0) == Point(2.0, 4.0)
    assert p.transpose() == Point(2.0, 1.0)
    assert Point.zero() == Point(0.0, 0.0)
    assert Point.splat(3.0) == Point(3.0, 3.0)


def test_point_lengths():
    assert Point(3.0, 4.0).length() == 5.0
    assert Point(1.0, 1.0).distance_to(Point(4.0, 5.0)) == 5.0


def test_point_rotation():
    r = Point(1.0, 0.0).rotate(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)
    r = Point(2.0, 1.0).rotate_around(Point(1.0, 1.0), math.pi)
    assert r.x == pytest.approx(0.0)
    assert r.y == pytest.approx(1.0)


def test_point_str():
    assert str(Point(1.0, 2.5)) == "(x: 1.000, y: 2.500)"


def test_ellipse_line_intersection_horizontal():
    assert ellipse_line_intersection(50.0, 25.0, 0.0) == Point(50.0, 0.0)


def test_interpolate_and_normalize():
    assert interpolate(Point(10.0, 0.0), Point(0.0, 10.0), 1.0) == Point(10.0, 0.0)
    assert interpolate(Point(10.0, 0.0), Point(0.0, 10.0), 0.5) == Point(5.0, 5.0)
    assert normalize_scale_vector(Point(3.0, 4.0), 10.0) == Point(6.0, 8.0)
    with pytest.raises(ValueError):
        normalize_scale_vector(Point(0.0, 0.0), 1.0)


def test_create_vector_of_length():
    assert create_vector_of_length(Point(0.0, 0.0), Point(0.0, 100.0), 10.0) == (
        Point(0.0, 0.0),
        Point(0.0, 10.0),
    )
    assert create_vector_of_length(Point(2.0, 3.0), Point(2.0, 3.0), 5.0) == (
        Point(2.0, 3.0),
        Point(7.0, 3.0),
    )


def test_box_connection_vertical():
    loc, size = Point(0.0, 0.0), Point(100.0, 50.0)
    below = get_connection_point_for_box(loc, size, Point(0.0, 100.0), 10.0)
    assert below == (Point(0.0, 25.0), Point(0.0, 35.0))
    above = get_connection_point_for_box(loc, size, Point(0.0, -100.0), 10.0)
    assert above == (Point(0.0, -25.0), Point(0.0, -35.0))


def test_box_connection_side():
    res = get_connection_point_for_box(
        Point(0.0, 0.0), Point(100.0, 50.0), Point(200.0, 0.0), 10.0
    )
    assert res == (Point(50.0, 0.0), Point(60.0, 0.0))


def test_circle_connection():
    loc, size = Point(0.0, 0.0), Point(100.0, 50.0)
    assert get_connection_point_for_circle(loc, size, Point(0.0, 100.0), 10.0) == (
        Point(0.0, 25.0),
        Point(0.0, 35.0),
    )
    assert get_connection_point_for_circle(loc, size, Point(200.0, 0.0), 10.0) == (
        Point(50.0, 0.0),
        Point(60.0, 0.0),
    )
    assert get_connection_point_for_circle(loc, size, Point(-200.0, 0.0), 10.0) == (
        Point(-50.0, 0.0),
        Point(-60.0, 0.0),
    )


def test_passthrough_straight_line():
    res = get_passthrough_path_invisible(
        Point(1.0, 1.0), Point(10.0, 0.0), Point(0.0, 0.0), Point(20.0, 0.0), 5.0
    )
    assert res == (Point(10.0, 0.0), Point(5.0, 0.0))


def test_passthrough_self_edge_bows():
    center, ctrl = get_passthrough_path_invisible(
        Point(1.0, 1.0), Point(10.0, 0.0), Point(0.0, 0.0), Point(0.0, 0.0), 5.0
    )
    assert center == Point(10.0, 0.0)
    assert ctrl.x == pytest.approx(10.0)
    assert ctrl.y == pytest.approx(-5.0)


def test_size_helpers():
    assert make_size_square(Point(3.0, 7.0)) == Point(7.0, 7.0)
    assert pad_shape_scalar(Point(3.0, 7.0), 2.0) == Point(5.0, 9.0)
    assert get_size_for_str("abc\nde", 10) == Point(30.0, 20.0)
    assert get_size_for_str("", 10) == Point(10.0, 10.0)
    assert get_size_for_str("ab\n", 5) == Point(10.0, 5.0)


def test_ranges_and_boxes():
    assert in_range((1.0, 3.0), 3.0) is True
    assert in_range((1.0, 3.0), 3.5) is False
    a = (Point(0.0, 0.0), Point(10.0, 10.0))
    assert do_boxes_intersect(a, (Point(5.0, 5.0), Point(15.0, 15.0))) is True
    assert do_boxes_intersect(a, (Point(10.0, 0.0), Point(20.0, 10.0))) is False


@pytest.mark.parametrize(
    "values, expected",
    [([5.0], 5.0), ([4.0, 1.0], 2.5), ([3.0, 1.0, 2.0], 2.0), ([4.0, 1.0, 3.0, 2.0], 2.5)],
)
def test_weighted_median(values, expected):
    assert weighted_median(values) == expected


def test_weighted_median_empty():
    with pytest.raises(ValueError):
        weighted_median([])


def _position():
    return Position(Point(10.0, 20.0), Point(4.0, 6.0), Point(1.0, 0.0), Point(2.0, 2.0))


def test_position_bbox():
    pos = _position()
    assert pos.bbox(False) == (Point(8.0, 17.0), Point(12.0, 23.0))
    assert pos.bbox(True) == (Point(7.0, 16.0), Point(13.0, 24.0))
    assert pos.center() == Point(11.0, 20.0)
    assert pos.distance_to_left(False) == 3.0
    assert pos.distance_to_right(False) == 1.0
    assert (pos.left(True), pos.right(True), pos.top(True), pos.bottom(True)) == (
        7.0,
        13.0,
        16.0,
        24.0,
    )
    assert pos.in_x_range((7.0, 13.0), True) is True
    assert pos.in_x_range((8.0, 13.0), True) is False


def test_position_moves():
    pos = _position()
    pos.move_to(Point(0.0, 0.0))
    assert pos.center() == Point(0.0, 0.0)
    assert pos.middle() == Point(-1.0, 0.0)
    pos.set_x(5.0)
    assert pos.middle().x == 4.0
    pos.set_y(7.0)
    assert pos.middle().y == 7.0
    pos.align_to_top(0.0)
    assert pos.top(True) == 0.0
    pos.align_to_left(0.0)
    assert pos.left(True) == 0.0
    pos.align_to_right(100.0)
    assert pos.right(True) == 100.0
    pos.align_x(50.0, True)
    assert pos.left(True) == 50.0
    pos.align_x(50.0, False)
    assert pos.right(True) == 50.0
    pos.translate(Point(1.0, 2.0))
    assert pos.right(True) == 51.0


def test_position_transpose_and_center():
    pos = _position()
    pos.transpose()
    assert pos.middle() == Point(20.0, 10.0)
    assert pos.size(False) == Point(6.0, 4.0)
    assert pos.center() == Point(20.0, 11.0)
    pos.set_new_center_point(Point(0.0, 0.0))
    assert pos.center() == Point(20.0, 10.0)
    with pytest.raises(ValueError):
        pos.set_new_center_point(Point(10.0, 0.0))
"""Geometry of shapes: points, bounding boxes, intersections and edge anchors."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace


def _fdiv(a: float, b: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero divisor."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    sign = math.copysign(1.0, a) * math.copysign(1.0, b)
    return math.copysign(math.inf, sign)


def _text_lines(text: str) -> list[str]:
    """Split text into lines on ``\\n``, dropping a trailing ``\\r`` per line."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(frozen=True)
class Point:
    """A 2D coordinate or vector."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Point:
        return cls(0.0, 0.0)

    @classmethod
    def splat(cls, s: float) -> Point:
        return cls(s, s)

    def neg(self) -> Point:
        return Point(-self.x, -self.y)

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return self.add(other.neg())

    def distance_to(self, other: Point) -> float:
        d = self.sub(other)
        return math.sqrt(d.x * d.x + d.y * d.y)

    def length(self) -> float:
        return Point.zero().distance_to(self)

    def scale(self, s: float) -> Point:
        return Point(self.x * s, self.y * s)

    def transpose(self) -> Point:
        return Point(self.y, self.x)

    def rotate_around(self, center: Point, angle: float) -> Point:
        return self.sub(center).rotate(angle).add(center)

    def rotate(self, angle: float) -> Point:
        cos, sin = math.cos(angle), math.sin(angle)
        return Point(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def __str__(self) -> str:
        return f"(x: {self.x:.3f}, y: {self.y:.3f})"


def ellipse_line_intersection(a: float, b: float, m: float) -> Point:
    """Intersect the line ``y = m x`` with the ellipse ``x²/a² + y²/b² = 1``.

    Returns the solution with non-negative x; the mirrored point is the other.
    """
    x = math.sqrt(_fdiv(a * a * b * b, b * b + a * a * m * m))
    return Point(x, m * x)


def get_connection_point_for_circle(
    loc: Point, size: Point, from_: Point, force: float
) -> tuple[Point, Point]:
    """Connector location and control point for circle-like shapes."""
    dx = from_.x - loc.x
    dy = from_.y - loc.y
    a = size.x / 2.0
    b = size.y / 2.0

    if dx == 0.0:
        b = b * (math.nan if math.isnan(dy) else math.copysign(1.0, dy))
        return create_vector_of_length(Point(loc.x, loc.y + b), from_, force)

    m = dy / dx
    v = ellipse_line_intersection(a, b, m)
    # The two roots are mirrored; pick the one on the side of the source.
    if dx < 0.0:
        v = v.neg()
    return create_vector_of_length(loc.add(v), from_, force)


def interpolate(v0: Point, v1: Point, w: float) -> Point:
    """Linear interpolation: ``w`` weights ``v0`` and ``1 - w`` weights ``v1``."""
    return v0.scale(w).add(v1.scale(1.0 - w))


def normalize_scale_vector(v: Point, s: float) -> Point:
    """Return ``v`` scaled to length ``s``."""
    length = Point.zero().distance_to(v)
    if not length > 0.0:
        raise ValueError("can't normalize the zero vector")
    return v.scale(s / length)


def create_vector_of_length(
    from_: Point, to: Point, s: float
) -> tuple[Point, Point]:
    """Return ``from_`` and a point at distance ``s`` from it towards ``to``."""
    if from_ == to:
        return from_, Point(from_.x + s, from_.y)
    t = normalize_scale_vector(to.sub(from_), s)
    return from_, t.add(from_)


def get_connection_point_for_box(
    loc: Point, size: Point, from_: Point, force: float
) -> tuple[Point, Point]:
    """Connector location and control point for box-like shapes."""
    loc_x, size_x = loc.x, size.x
    # Use only the half of the box that faces the source of the edge.
    if from_.x > loc_x + size_x / 2.0:
        size_x /= 2.0
        loc_x += size_x / 2.0
    elif from_.x < loc_x - size_x / 2.0:
        size_x /= 2.0
        loc_x -= size_x / 2.0
    loc = Point(loc_x, loc.y)

    dx = loc.x - from_.x
    dy = loc.y - from_.y
    box_x = size_x / 2.0
    box_y = size.y / 2.0

    if dx == 0.0:
        if dy > 0.0:
            return create_vector_of_length(
                Point(loc.x, loc.y - box_y), from_, force
            )
        return create_vector_of_length(Point(loc.x, loc.y + box_y), from_, force)

    slope_from = dy / dx
    gain_y = box_x * slope_from

    if abs(gain_y) < box_y:
        if dx > 0.0:
            box_x = -box_x
            gain_y = -gain_y
        con = Point(loc.x + box_x, loc.y + gain_y)
        return create_vector_of_length(con, from_, force)

    gain_x = _fdiv(box_y, slope_from)
    if dy > 0.0:
        box_y = -box_y
        gain_x = -gain_x
    con = Point(loc.x + gain_x, loc.y + box_y)
    return create_vector_of_length(con, from_, force)


def get_passthrough_path_invisible(
    size: Point, center: Point, from_: Point, to: Point, force: float
) -> tuple[Point, Point]:
    """Bezier control point for an edge passing through ``center``.

    The direction vectors towards ``from_`` and ``to`` are blended in inverse
    proportion to their distances so that the curve does not overshoot.
    """
    ar = center.sub(from_)
    rb = to.sub(center)

    a_outgoing = normalize_scale_vector(ar.neg(), force)
    b_outgoing = normalize_scale_vector(rb.neg(), force)

    # Source and destination in the same direction: bow the curve by 90°.
    if a_outgoing.add(b_outgoing).length() < 1.0:
        edge = a_outgoing.rotate(math.radians(90.0))
        return center, edge.add(center)

    total = ar.length() + rb.length()
    a_ratio = ar.length() / total

    # Keep straight horizontal and vertical lines perfectly aligned.
    if center.x == to.x or center.y == to.y:
        a_ratio = 1.0
    elif center.x == from_.x or center.y == from_.y:
        a_ratio = 0.0

    res = interpolate(a_outgoing, b_outgoing, 1.0 - a_ratio)
    return center, res.add(center)


def make_size_square(sz: Point) -> Point:
    side = max(sz.x, sz.y)
    return Point(side, side)


def pad_shape_scalar(size: Point, s: float) -> Point:
    return Point(size.x + s, size.y + s)


def get_size_for_str(label: str, font_size: int) -> Point:
    """Estimate the bounding box of rendered text."""
    lines = _text_lines(label)
    longest = max((len(line) for line in lines), default=0)
    return Point(float(max(longest, 1)), float(max(len(lines), 1))).scale(
        float(font_size)
    )


def in_range(range_: tuple[float, float], x: float) -> bool:
    """True if ``x`` lies in the inclusive range ``range_``."""
    return range_[0] <= x <= range_[1]


def do_boxes_intersect(
    p1: tuple[Point, Point], p2: tuple[Point, Point]
) -> bool:
    """True if the two bounding boxes overlap."""
    overlap_x = p2[0].x < p1[1].x and p1[0].x < p2[1].x
    overlap_y = p2[0].y < p1[1].y and p1[0].y < p2[1].y
    return overlap_x and overlap_y


def weighted_median(values: Sequence[float]) -> float:
    """The median as defined by Gansner, North and Vo for DAG layout."""
    if not values:
        raise ValueError("array can't be empty")
    ordered = sorted(values)
    count = len(ordered)
    if count == 1:
        return ordered[0]
    if count == 2:
        return (ordered[0] + ordered[1]) / 2.0
    mid = count // 2
    if count % 2 == 1:
        return ordered[mid]
    return (ordered[mid] + ordered[mid - 1]) / 2.0


class Position:
    """Size, location, center point and halo of a shape.

    ``middle`` is the middle of the shape in absolute coordinates, ``center``
    the delta from the middle to the point edges are aimed at, and ``halo``
    the gap around the shape, applied symmetrically.
    """

    def __init__(
        self, middle: Point, size: Point, center: Point, halo: Point
    ) -> None:
        self._middle = middle
        self._size = size
        self._center = center
        self._halo = halo

    def __repr__(self) -> str:
        return (
            f"Position(middle={self._middle!r}, size={self._size!r}, "
            f"center={self._center!r}, halo={self._halo!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self._middle, self._size, self._center, self._halo) == (
            other._middle,
            other._size,
            other._center,
            other._halo,
        )

    __hash__ = None  # type: ignore[assignment]

    def distance_to_left(self, with_halo: bool) -> float:
        return self.center().x - self.bbox(with_halo)[0].x

    def distance_to_right(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[1].x - self.center().x

    def left(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[0].x

    def right(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[1].x

    def top(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[0].y

    def bottom(self, with_halo: bool) -> float:
        return self.bbox(with_halo)[1].y

    def bbox(self, with_halo: bool) -> tuple[Point, Point]:
        """Top-left and bottom-right corners, optionally including the halo."""
        size = self.size(with_halo)
        top_left = self._middle.sub(size.scale(0.5))
        return top_left, top_left.add(size)

    def center(self) -> Point:
        """The center point in absolute coordinates."""
        return self._middle.add(self._center)

    def middle(self) -> Point:
        """The middle of the shape (not the center point)."""
        return self._middle

    def size(self, with_halo: bool) -> Point:
        return self._size.add(self._halo) if with_halo else self._size

    def in_x_range(self, range_: tuple[float, float], with_halo: bool) -> bool:
        return self.left(with_halo) >= range_[0] and self.right(with_halo) <= range_[1]

    def set_size(self, size: Point) -> None:
        self._size = size

    def set_new_center_point(self, center: Point) -> None:
        """Set the center point, as a delta from the middle of the shape."""
        if not (abs(center.x) < self._size.x and abs(center.y) < self._size.y):
            raise ValueError("center point must lie within the shape")
        self._center = center

    def move_to(self, p: Point) -> None:
        """Move the shape so that its center lands on ``p``."""
        self._middle = self._middle.add(p.sub(self.center()))

    def align_to_top(self, y: float) -> None:
        self._middle = replace(
            self._middle, y=y + self._size.y / 2.0 + self._halo.y / 2.0
        )

    def align_to_left(self, x: float) -> None:
        self._middle = replace(
            self._middle, x=x + self._size.x / 2.0 + self._halo.x / 2.0
        )

    def align_to_right(self, x: float) -> None:
        self._middle = replace(
            self._middle, x=x - self._size.x / 2.0 - self._halo.x / 2.0
        )

    def translate(self, d: Point) -> None:
        self._middle = self._middle.add(d)

    def align_x(self, x: float, to_left: bool) -> None:
        """Place the shape against the line ``x``, on its right or left side."""
        half_box = self._size.x / 2.0 + self._halo.x / 2.0
        new_x = x + half_box if to_left else x - half_box
        self._middle = replace(self._middle, x=new_x)

    def set_x(self, x: float) -> None:
        """Align the center of the shape to ``x``."""
        self._middle = replace(self._middle, x=x - self._center.x)

    def set_y(self, y: float) -> None:
        """Align the center of the shape to ``y``."""
        self._middle = replace(self._middle, y=y - self._center.y)

    def transpose(self) -> None:
        self._middle = self._middle.transpose()
        self._size = self._size.transpose()
        self._center = self._center.transpose()
        self._halo = self._halo.transpose()


def segment_rect_intersection(
    seg: tuple[Point, Point], rect: tuple[Point, Point]
) -> bool:
    """True if the segment ``seg`` intersects the normalized rectangle ``rect``."""
    if not (rect[0].x <= rect[1].x and rect[0].y <= rect[1].y):
        raise ValueError("rectangle is not normalized")

    start, end = seg
    if start.x == end.x:
        return rect[0].x <= end.x <= rect[1].x

    if (start.x < rect[0].x and end.x < rect[0].x) or (
        start.x > rect[1].x and end.x > rect[1].x
    ):
        return False
    if (start.y < rect[0].y and end.y < rect[0].y) or (
        start.y > rect[1].y and end.y > rect[1].y
    ):
        return False

    a = (end.y - start.y) / (end.x - start.x)
    b = start.y - a * start.x
    # Hits of the line with the two vertical sides of the box.
    y0 = a * rect[0].x + b
    y1 = a * rect[1].x + b
    above = y0 < rect[0].y and y1 < rect[0].y
    below = y0 > rect[1].y and y1 > rect[1].y
    return not (above or below)
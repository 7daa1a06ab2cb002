"""Small enums shared across the layout code."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Which way an edge travels relative to the ranks."""

    UP = "up"
    DOWN = "down"
    BOTH = "both"
    NONE = "none"

    def is_down(self) -> bool:
        return self in (Direction.DOWN, Direction.BOTH)

    def is_up(self) -> bool:
        return self in (Direction.UP, Direction.BOTH)


class Orientation(Enum):
    """The direction in which the graph grows."""

    TOP_TO_BOTTOM = "TB"
    LEFT_TO_RIGHT = "LR"

    def is_top_to_bottom(self) -> bool:
        return self is Orientation.TOP_TO_BOTTOM

    def is_left_right(self) -> bool:
        return self is not Orientation.TOP_TO_BOTTOM

    def flip(self) -> Orientation:
        if self is Orientation.TOP_TO_BOTTOM:
            return Orientation.LEFT_TO_RIGHT
        return Orientation.TOP_TO_BOTTOM
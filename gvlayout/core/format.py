"""Interfaces for arranging, rendering and drawing shapes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from gvlayout.core.geometry import Point, Position
from gvlayout.core.style import StyleAttr

ClipHandle = int


class Visible(ABC):
    """An element that can be arranged on the canvas."""

    @abstractmethod
    def position(self) -> Position:
        """The position of the shape; mutating it moves the shape."""

    @abstractmethod
    def is_connector(self) -> bool:
        """True if the element is a connector."""

    @abstractmethod
    def transpose(self) -> None:
        """Swap the coordinates of the location and size."""

    @abstractmethod
    def resize(self) -> None:
        """Update the size of the shape."""


class Renderable(ABC):
    """An element that can be rendered on a canvas."""

    @abstractmethod
    def render(self, debug: bool, canvas: RenderBackend) -> None:
        """Draw the shape; ``debug`` adds extra markers."""

    @abstractmethod
    def get_connector_location(
        self, from_: Point, force: float, port: str | None
    ) -> tuple[Point, Point]:
        """Connection point and bezier control point for an edge from ``from_``."""

    @abstractmethod
    def get_passthrough_path(
        self, from_: Point, to: Point, force: float
    ) -> tuple[Point, Point]:
        """Center and entry control point for an edge passing through."""


class RenderBackend(ABC):
    """A drawing surface that accepts draw calls."""

    @abstractmethod
    def draw_rect(
        self,
        xy: Point,
        size: Point,
        look: StyleAttr,
        clip: ClipHandle | None,
    ) -> None:
        """Draw a rectangle whose top-left corner is ``xy``."""

    @abstractmethod
    def draw_line(self, start: Point, stop: Point, look: StyleAttr) -> None:
        """Draw a line between ``start`` and ``stop``."""

    @abstractmethod
    def draw_circle(self, xy: Point, size: Point, look: StyleAttr) -> None:
        """Draw an ellipse centered at ``xy``."""

    @abstractmethod
    def draw_text(self, xy: Point, text: str, look: StyleAttr) -> None:
        """Draw a label."""

    @abstractmethod
    def draw_arrow(
        self,
        path: Sequence[tuple[Point, Point]],
        dashed: bool,
        head: tuple[bool, bool],
        look: StyleAttr,
        text: str,
    ) -> None:
        """Draw a labelled arrow along a bezier path."""

    @abstractmethod
    def create_clip(self, xy: Point, size: Point, rounded_px: int) -> ClipHandle:
        """Create a clip region and return its handle."""
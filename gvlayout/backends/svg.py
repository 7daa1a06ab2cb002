"""SVG rendering backend that collects draw calls into a document."""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from gvlayout.core.color import Color
from gvlayout.core.format import ClipHandle, RenderBackend
from gvlayout.core.geometry import Point
from gvlayout.core.style import StyleAttr

SVG_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'

SVG_DEFS = """<defs>
<marker id="startarrow" markerWidth="10" markerHeight="7"
refX="0" refY="3.5" orient="auto">
<polygon points="10 0, 10 7, 0 3.5" />
</marker>
<marker id="endarrow" markerWidth="10" markerHeight="7"
refX="10" refY="3.5" orient="auto">
<polygon points="0 0, 10 3.5, 0 7" />
</marker>

</defs>"""

SVG_FOOTER = "</svg>"

_SVG_NAMESPACE = "http://www.w3.org/2000/svg"

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}


def escape_string(text: str) -> str:
    """Escape the characters that are special in XML."""
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def _num(value: float) -> str:
    """Format a number the shortest way, without a trailing ``.0`` or exponent."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        return format(Decimal(text), "f")
    return text


def _lines(text: str) -> list[str]:
    """Split on ``\\n``, dropping a trailing ``\\r`` from each line."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class SVGWriter(RenderBackend):
    """Accumulates drawing commands and produces an SVG document."""

    def __init__(self) -> None:
        self._content: list[str] = []
        self._width = 0.0
        self._height = 0.0
        self._counter = 0
        # Font size -> (class name, class definition), in creation order.
        self._font_styles: dict[int, tuple[str, str]] = {}
        self._clip_regions: list[str] = []

    def _grow_window(self, point: Point, size: Point) -> None:
        self._width = max(self._width, point.x + size.x + 5.0)
        self._height = max(self._height, point.y + size.y + 5.0)

    def _font_class(self, font_size: int) -> str:
        existing = self._font_styles.get(font_size)
        if existing is not None:
            return existing[0]
        name = f"a{font_size}"
        definition = (
            f".a{font_size} {{ font-size: {font_size}px; "
            f"font-family: Times, serif; }}"
        )
        self._font_styles[font_size] = (name, definition)
        return name

    def _styles_section(self) -> str:
        parts = ["<style>\n"]
        parts.extend(f"{definition}\n" for _, definition in self._font_styles.values())
        parts.append("</style>\n")
        parts.extend(f"{clip}\n" for clip in self._clip_regions)
        return "".join(parts)

    def finalize(self) -> str:
        """Return the complete SVG document for everything drawn so far."""
        width, height = _num(self._width), _num(self._height)
        svg_line = (
            f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
            f'xmlns="{_SVG_NAMESPACE}">\n'
        )
        return "".join(
            [
                SVG_HEADER,
                svg_line,
                SVG_DEFS,
                self._styles_section(),
                "".join(self._content),
                SVG_FOOTER,
            ]
        )

    def draw_rect(
        self,
        xy: Point,
        size: Point,
        look: StyleAttr,
        clip: ClipHandle | None = None,
    ) -> None:
        self._grow_window(xy, size)
        clip_option = f'clip-path="url(#C{clip})"' if clip is not None else ""
        fill = look.fill_color if look.fill_color is not None else Color.transparent()
        self._content.append(
            f'<rect x="{_num(xy.x)}" y="{_num(xy.y)}" width="{_num(size.x)}" '
            f'height="{_num(size.y)}" fill="{fill.to_web_color()}" \n'
            f'            stroke-width="{look.line_width}" '
            f'stroke="{look.line_color.to_web_color()}" rx="{look.rounded}" '
            f"{clip_option} />\n"
        )

    def draw_circle(self, xy: Point, size: Point, look: StyleAttr) -> None:
        self._grow_window(xy, size)
        fill = look.fill_color if look.fill_color is not None else Color.transparent()
        self._content.append(
            f'<ellipse cx="{_num(xy.x)}" cy="{_num(xy.y)}" rx="{_num(size.x / 2.0)}" '
            f'ry="{_num(size.y / 2.0)}" fill="{fill.to_web_color()}" \n'
            f'            stroke-width="{look.line_width}" '
            f'stroke="{look.line_color.to_web_color()}"/>\n'
        )

    def draw_text(self, xy: Point, text: str, look: StyleAttr) -> None:
        byte_len = len(text.encode("utf-8"))
        font_class = self._font_class(look.font_size)
        lines = _lines(text)
        size_y = float((1 + len(lines)) * look.font_size)
        spans = "".join(
            f'<tspan x = "{_num(xy.x)}" dy="1.0em">{escape_string(line)}</tspan>'
            for line in lines
        )
        self._grow_window(xy, Point(10.0, byte_len * 10.0))
        self._content.append(
            '<text dominant-baseline="middle" text-anchor="middle" \n'
            f'            x="{_num(xy.x)}" y="{_num(xy.y - size_y / 2.0)}" '
            f'class="{font_class}">{spans}</text>'
        )

    def draw_arrow(
        self,
        path: Sequence[tuple[Point, Point]],
        dashed: bool,
        head: tuple[bool, bool],
        look: StyleAttr,
        text: str,
    ) -> None:
        """Draw a bezier path: the first pair is the exit vector, the rest entries."""
        if len(path) < 2:
            raise ValueError("an arrow path needs at least two points")
        for point, control in path:
            self._grow_window(point, Point.zero())
            self._grow_window(control, Point.zero())

        dash = 'stroke-dasharray="5,5"' if dashed else ""
        start = 'marker-start="url(#startarrow)"' if head[0] else ""
        end = 'marker-end="url(#endarrow)"' if head[1] else ""

        (p0, c0), (p1, c1) = path[0], path[1]
        segments = [
            f"M {_num(p0.x)} {_num(p0.y)} C {_num(c0.x)} {_num(c0.y)}, "
            f"{_num(p1.x)} {_num(p1.y)}, {_num(c1.x)} {_num(c1.y)} "
        ]
        segments.extend(
            f"S {_num(p.x)} {_num(p.y)}, {_num(c.x)} {_num(c.y)} "
            for p, c in path[2:]
        )

        self._content.append(
            f'<path id="arrow{self._counter}" d="{"".join(segments)}" '
            f'stroke="{look.line_color.to_web_color()}" '
            f'stroke-width="{look.line_width}" {dash} {start} {end}\n'
            '            fill="transparent" />\n'
        )
        font_class = self._font_class(look.font_size)
        self._content.append(
            f'<text><textPath href="#arrow{self._counter}" startOffset="50%" '
            f'text-anchor="middle" class="{font_class}">'
            f"{escape_string(text)}</textPath></text>"
        )
        self._counter += 1

    def draw_line(self, start: Point, stop: Point, look: StyleAttr) -> None:
        self._content.append(
            f'<line x1="{_num(start.x)}" y1="{_num(start.y)}" '
            f'x2="{_num(stop.x)}" y2="{_num(stop.y)}" '
            f'stroke-width="{look.line_width}"\n'
            f'             stroke="{look.line_color.to_web_color()}" />\n'
        )

    def create_clip(self, xy: Point, size: Point, rounded_px: int) -> ClipHandle:
        handle = len(self._clip_regions)
        self._clip_regions.append(
            f'<clipPath id="C{handle}"><rect x="{_num(xy.x)}" y="{_num(xy.y)}" '
            f'width="{_num(size.x)}" height="{_num(size.y)}" rx="{rounded_px}" /> '
            "</clipPath>"
        )
        return handle
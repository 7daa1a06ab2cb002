"""General shape style information."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gvlayout.core.color import Color


class LineStyleKind(Enum):
    NORMAL = "normal"
    DASHED = "dashed"
    DOTTED = "dotted"
    NONE = "none"


@dataclass
class StyleAttr:
    """Line, fill and font settings for a shape or an edge."""

    line_color: Color
    line_width: int
    fill_color: Color | None
    rounded: int
    font_size: int

    @classmethod
    def simple(cls) -> StyleAttr:
        return cls(Color.fast("black"), 2, Color.fast("white"), 0, 15)

    @classmethod
    def debug0(cls) -> StyleAttr:
        return cls(Color.fast("black"), 1, Color.fast("pink"), 0, 15)

    @classmethod
    def debug1(cls) -> StyleAttr:
        return cls(Color.fast("black"), 1, Color.fast("aliceblue"), 0, 15)

    @classmethod
    def debug2(cls) -> StyleAttr:
        return cls(Color.fast("black"), 1, Color.fast("white"), 0, 15)
import pytest

from gvlayout.core.color import Color
from gvlayout.core.style import StyleAttr


def test_simple_style():
    look = StyleAttr.simple()
    assert look.line_color == Color.fast("black")
    assert look.fill_color == Color.fast("white")
    assert look.line_width == 2
    assert look.font_size == 15
    assert look.rounded == 0


@pytest.mark.parametrize(
    "factory,fill",
    [
        (StyleAttr.debug0, "pink"),
        (StyleAttr.debug1, "aliceblue"),
        (StyleAttr.debug2, "white"),
    ],
)
def test_debug_styles(factory, fill):
    look = factory()
    assert look.fill_color == Color.fast(fill)
    assert look.line_color == Color.fast("black")
    assert look.line_width == 1
    assert look.font_size == StyleAttr.simple().font_size


def test_styles_are_independent():
    a = StyleAttr.simple()
    b = StyleAttr.simple()
    a.line_width = 7
    assert b.line_width == StyleAttr.simple().line_width
    assert a != b
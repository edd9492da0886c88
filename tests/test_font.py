import copy

import pytest

from matglyph.bitmapfont import glyph_for, render_text
from matglyph.draw import DrawStyle, Renderer, Vec
from matglyph.font import (
    Alignment,
    Font,
    FontView,
    default_font_path,
    draw_text,
    rasterize,
    set_default_font_path,
)


@pytest.fixture
def renderer():
    r = Renderer()
    r.set_dimensions(200, 100)
    return r


@pytest.mark.parametrize(
    "value, expected",
    [(1, Alignment.LEFT), (0, Alignment.CENTER), (-1, Alignment.RIGHT)],
)
def test_alignment_lookup_by_value(value, expected):
    assert Alignment(value) is expected


def test_alignment_unknown_value_raises():
    with pytest.raises(ValueError):
        Alignment(2)


def test_rasterize_size_matches_bitmap_raster():
    raster = render_text("ab1")
    image = rasterize("ab1")
    assert (image.width, image.height) == (raster.width, raster.height)
    assert image.line_height == raster.line_height
    assert len(image.pixels) == image.width * image.height * 4


def test_rasterize_ink_and_blank_pixels():
    glyph = glyph_for("1")
    image = rasterize("1")
    for y in range(glyph.height):
        for x in range(glyph.width):
            expected = (0, 0, 0, 0) if glyph.get(x, y) == " " else (255, 255, 255, 255)
            assert image.pixel(x, y) == expected


def test_rasterize_empty_text():
    image = rasterize("")
    assert image.width == 0
    assert image.pixels == b""


def test_pixel_out_of_range():
    image = rasterize("1")
    with pytest.raises(IndexError):
        image.pixel(image.width, 0)


def test_empty_font_is_false():
    assert not Font()
    assert Font(30)


def test_font_uses_default_path():
    assert Font(30).path == default_font_path()
    assert Font(12, "other.ttf").path == "other.ttf"


def test_set_default_font_path_affects_new_fonts():
    old = default_font_path()
    try:
        set_default_font_path("fonts/custom.ttf")
        assert Font(10).path == "fonts/custom.ttf"
    finally:
        set_default_font_path(old)
    assert default_font_path() == old


def test_draw_text_without_font_draws_nothing(renderer):
    assert draw_text(renderer, Font(), 10, 10, "hi") is None
    assert draw_text(renderer, None, 10, 10, "hi") is None
    assert renderer.commands == []


def test_font_draw_is_centered_texture(renderer):
    command = Font(30).draw(renderer, 50, 40, "ab")
    image = rasterize("ab")
    assert command.vertex_array == 1
    assert command.texture == image
    expected = renderer.model_transform(Vec(50, 40), 0.0, image.width, image.height)
    assert command.matrix == expected


def test_draw_text_alignment_shifts_by_half_width(renderer):
    image = rasterize("ab")
    command = draw_text(renderer, Font(30), 50, 40, "ab", 1)
    expected = renderer.model_transform(
        Vec(50 + image.width / 2, 40), 0.0, image.width, image.height
    )
    assert command.matrix == expected


def test_fontview_prepare_sets_size():
    view = FontView("abc", Font(30))
    image = view.prepare()
    assert image == rasterize("abc")
    assert (view.width, view.height) == (image.width, image.height)
    assert view.line_height == image.line_height
    assert view.needs_update is False


def test_fontview_text_change_marks_update():
    view = FontView("abc", Font(30))
    view.prepare()
    view.text = "abc"
    assert view.needs_update is False
    view.text = "xyz"
    assert view.needs_update is True
    assert view.prepare() == rasterize("xyz")


def test_fontview_without_font_does_not_draw(renderer):
    view = FontView("abc")
    assert not view
    assert view.draw(renderer, 10, 10) is None
    assert renderer.commands == []


def test_fontview_empty_text_does_not_draw(renderer):
    view = FontView("", Font(30))
    assert view.draw(renderer, 10, 10) is None


def test_fontview_left_draws_at_x(renderer):
    view = FontView("ab", Font(30), Alignment.LEFT)
    command = view.draw(renderer, 20, 30)
    assert command.vertex_array == 0
    expected = renderer.model_transform(
        Vec(20, 30 - view.line_height), 0.0, view.width, view.height
    )
    assert command.matrix == expected


def test_fontview_right_ends_at_x(renderer):
    view = FontView("ab", Font(30), Alignment.RIGHT)
    command = view.draw(renderer, 100, 30)
    expected = renderer.model_transform(
        Vec(100 - view.width, 30 - view.line_height), 0.0, view.width, view.height
    )
    assert command.matrix == expected
    assert command.style if hasattr(command, "style") else command.vertex_array == int(
        DrawStyle.ORIGO_TOP_LEFT
    )


def test_fontview_copy_needs_update():
    view = FontView("ab", Font(30))
    view.prepare()
    duplicate = copy.copy(view)
    assert duplicate.text == "ab"
    assert duplicate.width == view.width
    assert duplicate.needs_update is True
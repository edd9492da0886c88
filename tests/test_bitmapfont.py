import pytest

from matglyph.bitmapfont import BitmapFontData, glyph_for, parse_glyph, render_text


def test_parse_glyph_from_raw_art():
    glyph = parse_glyph("\n x\n x\nlx\n")
    assert glyph.rows() == [" x", " x", " x"]
    assert (glyph.width, glyph.height) == (2, 3)
    assert (glyph.line_height, glyph.line_depth) == (3, 0)


def test_parse_glyph_with_descender():
    glyph = parse_glyph("lx\n x\n")
    assert glyph.line_height == 1
    assert glyph.line_depth == 1
    assert glyph.height == glyph.line_height + glyph.line_depth


def test_parse_glyph_pads_short_rows():
    glyph = parse_glyph("xxx\nlx")
    assert glyph.rows() == ["xxx", " x "]


def test_period_glyph():
    glyph = glyph_for(".")
    assert glyph.rows() == [" x"]
    assert glyph.line_height == 1


def test_space_glyph_is_blank():
    glyph = glyph_for(" ")
    assert glyph.width == 3
    assert set(glyph.pixels) == {" "}


def test_glyph_depth_below_baseline():
    glyph = glyph_for("g")
    assert glyph.line_height == 4
    assert glyph.line_depth == 2
    assert glyph.rows()[3] == "  xxx"


def test_multibyte_letter_has_glyph():
    glyph = glyph_for("ä")
    assert glyph.height == glyph.line_height + glyph.line_depth
    assert glyph.rows()[0].strip() == "x x"


def test_unknown_letters_have_empty_glyphs():
    assert glyph_for("€").width == 0
    assert glyph_for("O").width == 0
    assert glyph_for("Q").height == 0


def test_glyph_copies_are_independent():
    glyph = glyph_for("1")
    glyph.set(0, 0, "#")
    assert glyph_for("1").get(0, 0) == " "


def test_single_letter_renders_as_its_glyph():
    for letter in "a0gÅ":
        assert render_text(letter).rows() == glyph_for(letter).rows()


def test_rendered_width_is_sum_of_glyph_widths():
    text = "Hej på dig!"
    image = render_text(text)
    assert image.width == sum(glyph_for(c).width for c in text)


def test_rendered_height_spans_tallest_and_deepest():
    image = render_text("ag")
    a, g = glyph_for("a"), glyph_for("g")
    assert image.line_height == max(a.line_height, g.line_height)
    assert image.line_depth == max(a.line_depth, g.line_depth)
    assert image.height == image.line_height + image.line_depth


def test_glyphs_share_a_baseline():
    image = render_text("1.")
    one = glyph_for("1")
    dot = glyph_for(".")
    baseline = image.line_height - 1
    assert image.rows()[baseline][one.width :] == dot.rows()[0]
    for y in range(baseline):
        assert image.rows()[y][one.width :] == " " * dot.width


def test_unknown_letters_take_no_space():
    assert render_text("a€a").rows() == render_text("aa").rows()


def test_empty_text():
    image = render_text("")
    assert image.width == 0
    assert image.line_height == 1
    assert image.rows() == [""]


def test_to_text_joins_rows():
    image = render_text("ab")
    assert image.to_text().split("\n") == image.rows()


def test_get_and_set_out_of_range():
    data = BitmapFontData(width=2, height=2)
    data.set(1, 1, "x")
    assert data.get(1, 1) == "x"
    assert data.rows() == ["  ", " x"]
    with pytest.raises(IndexError):
        data.get(2, 0)
    with pytest.raises(IndexError):
        data.set(0, -1, "x")


def test_set_requires_single_character():
    data = BitmapFontData(width=1, height=1)
    with pytest.raises(ValueError):
        data.set(0, 0, "xx")


def test_pixel_count_must_match_size():
    with pytest.raises(ValueError):
        BitmapFontData(width=2, height=2, pixels=["x"])
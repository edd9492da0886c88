# matglyph

matglyph is the core of a small widget toolkit. It uses only the standard
library. It provides:

- `matglyph.bitmapfont`: a built-in bitmap font that turns text into a grid of
  character cells
- `matglyph.keyutils`: helpers for UTF-8 letters
- `matglyph.files`: a registry of in-memory files that is checked before the
  file system
- `matglyph.shaders`: the vertex data for squares, ellipses and texture quads
- `matglyph.draw`: a renderer that records draw commands and keeps a stack of
  viewports
- `matglyph.font`: fonts, text images and buffered text views
- `matglyph.widgets`: a base `View` plus `Button`, `Label`, `KnobView` and
  `ImageView`
- `matglyph.application`: windows, input events and the frame loop
- `matglyph.cli`: the `matglyph` command

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The bitmap font

`render_text` lays out a string on a single line with the built-in glyphs. All
glyphs share one baseline. The result is a `BitmapFontData`.

```python
from matglyph.bitmapfont import render_text

image = render_text("Hej 42")
print(image.to_text())
```

Letters that take more than one byte in UTF-8 (`å`, `ä`, `ö`, `Å`, `Ä`, `Ö`)
are looked up as single glyphs. `keyutils.split_letters` does the splitting,
and `keyutils.is_utf_tail` tests for a continuation byte. A letter that has no
glyph takes up no space.

You can work with a `BitmapFontData` in these ways:

- `get(x, y)` and `set(x, y, char)` read and write a single cell.
- `rows()` returns one string per row.
- `to_text()` joins those rows with newlines.
- `width`, `height`, `line_height` and `line_depth` give its size and where the
  baseline is.

`glyph_for(letter)` returns a copy of one glyph. `parse_glyph(art)` builds a
glyph from ASCII art. In that art, the row that starts with `l` is the
baseline, and the `l` counts as a blank cell.

## Files

```python
from matglyph.files import register_file, load_file, open_file

register_file("greeting.txt", "hello")
assert load_file("greeting.txt") == "hello"
with open_file("greeting.txt") as stream:
    print(stream.read())
```

A registered path always takes precedence over the file system. Paths that are
not registered are read from disk as UTF-8. If you need a registry that is not
shared with the rest of the program, create your own `FileRegistry`. It has the
same `register`, `load` and `open` operations.

## Drawing

`Renderer` records every draw call as a `DrawCommand` in `renderer.commands`.
Set the window size with `set_dimensions` before you draw. Without a size,
drawing raises `ValueError`.

```python
from matglyph.draw import Color, Paint, Renderer, Vec

renderer = Renderer()
renderer.set_dimensions(200, 100)
renderer.draw_rect(10, 10, 50, 20, Paint(fill=Color(1, 0, 0), line=Color(1, 1, 1)))
renderer.draw_line(Vec(0, 0), Vec(200, 100), Paint(line=Color(0, 1, 0)))
```

A `Paint` holds an optional fill colour, an optional line colour and a line
width. A shape gets one command for its fill and one for its outline.

- **Shapes:** `draw_rect`, `draw_ellipse`, `draw_triangle` and `draw_line`.
- **Textures:** `draw_texture_rect` takes a `DrawStyle`, which is either
  `ORIGO_TOP_LEFT` or `CENTER_ORIGO`.
- **Viewports:** `push_viewport`, `pop_viewport` and `viewport` manage the
  viewport stack. The window viewport is never popped.
- **Other calls:** `clear` and `set_depth_enabled`.
- **Matrices:** `model_transform`, `line_matrix` and `triangle_matrix` return
  column-major 4×4 matrices in clip space.

## Fonts and text

- **`rasterize(text)`:** renders text with the bitmap font into a `TextImage`.
  The image is white on transparent RGBA.
- **`FontView`:** holds a text, a `Font` and an `Alignment`. It renders the
  image again only when the text or the font changes. `FontView.draw` places
  the text with its baseline at the given `y`.
- **`Font`:** a `Font()` with no size is empty. Nothing is drawn with it.
- **`set_default_font_path`:** sets the path that sized fonts record.

## Widgets

```python
from matglyph.draw import Renderer
from matglyph.widgets import Button, KnobView

renderer = Renderer()
renderer.set_dimensions(200, 100)

button = Button("ok")
button.place(0, 0, 200, 100)
button.draw(renderer)          # border, then the label text

knob = KnobView(minimum=0.0, maximum=1.0, step=0.01)
knob.place(0, 0, 100, 100)
knob.changed.connect(print)
knob.on_pointer_move(0, 50, 90, 1)   # sets knob.value from the pointer angle
```

- **`View`:** has a position and size, which `place` sets. It also has a base
  style, a hover style and a focus style, which `update_style` combines.
- **`Label`:** aligns its text left, centre or right.
- **`KnobView.amount`:** sets the value from a 0..1 fraction of the range and
  snaps it to the step.
- **`ImageView.load_image`:** reads an image file as raw bytes.

## Application and event loop

```python
from matglyph.application import Application, Event, EventType, Window

app = Application(["demo"])          # "--scale N" divides pointer coordinates by N
window = app.add_window(Window("demo", 200, 200))
window.pointer_down.connect(lambda pid, button, x, y: print(button, x, y))

frames = iter([
    [Event(EventType.MOUSE_BUTTON_DOWN, window_id=window.window_id, button=1, x=10, y=20)],
    [Event(EventType.QUIT)],
])
app.main_loop(lambda: next(frames))
```

`main_loop` runs frames until a quit event arrives or `quit` is called. Each
frame does the following:

1. It clears and draws every window that is invalid. With
   `continuous_updates`, it draws every window.
2. It emits `frame_update` with the time that has passed.
3. It sends the frame's events to their windows through `handle_events`.

When no window needs drawing, the loop sleeps for a short moment. You can
replace the sleep function and the clock.

`remove_window` quits the application when the last window is gone. Creating a
second `Application` while one is running raises `RuntimeError`.

## Command line

The `matglyph` command prints text in the built-in bitmap font:

```
matglyph "hello world"
matglyph --ink '#' Hej
```

## What the package does not do

- **No display.** matglyph opens no windows and draws nothing on screen.
  `Renderer` only records `DrawCommand`s. Turning them into pixels is up to
  the caller.
- **No operating-system events.** `Application` does not read input from the
  operating system. You supply `Event` objects yourself.
- **No routing to widgets.** Window events are not passed on to child views.
  For example, `Button.clicked` is never emitted by the loop.
- **No font files.** Fonts are not loaded from font files. All text uses the
  built-in bitmap font.
- **No image decoding.** `ImageView` keeps the file's bytes without decoding
  them.
- **No layouts.** There are no layout containers, scroll views, sliders,
  toggles or text entries.
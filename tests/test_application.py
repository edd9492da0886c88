import pytest

from matglyph.application import (
    IDLE_DELAY,
    Application,
    Event,
    EventType,
    MouseButton,
    Window,
    parse_scale,
)


def make_app(**kwargs):
    sleeps = []
    app = Application(["prog"], sleep=sleeps.append, **kwargs)
    return app, sleeps


def test_parse_scale_reads_value():
    assert parse_scale(["prog", "--scale", "2"]) == 2.0


def test_parse_scale_defaults_to_one():
    assert parse_scale(["prog"]) == 1.0
    assert parse_scale(["prog", "--scale"]) == 1.0


def test_parse_scale_non_number_reads_zero():
    assert parse_scale(["prog", "--scale", "abc"]) == 0.0


def test_mouse_button_from_index():
    assert MouseButton.from_index(1) == MouseButton.LEFT
    assert MouseButton.from_index(3) == MouseButton.RIGHT
    with pytest.raises(ValueError):
        MouseButton.from_index(0)


def test_get_window_by_id():
    app, _ = make_app()
    window = app.add_window(Window("a", 100, 100))
    assert app.get_window(window.window_id) is window
    assert app.get_window(window.window_id + 1000) is None


def test_removing_last_window_quits():
    app, _ = make_app()
    first = app.add_window(Window("a"))
    second = app.add_window(Window("b"))
    app.running = True
    app.remove_window(first)
    assert app.running is True
    app.remove_window(second)
    assert app.running is False
    assert app.windows == []


def test_quit_event_stops_handling():
    app, _ = make_app()
    window = app.add_window(Window("a"))
    seen = []
    window.text_input.connect(seen.append)
    events = [
        Event(EventType.QUIT),
        Event(EventType.TEXT_INPUT, window.window_id, text="late"),
    ]
    assert app.handle_events(events) is True
    assert seen == []


def test_pointer_down_is_scaled_and_mapped():
    app = Application(["prog", "--scale", "2"], sleep=lambda s: None)
    window = app.add_window(Window("a"))
    received = []
    window.pointer_down.connect(lambda *args: received.append(args))
    app.handle_events(
        [Event(EventType.MOUSE_BUTTON_DOWN, window.window_id, x=10, y=20, button=1)]
    )
    assert received == [(0, MouseButton.LEFT, 5.0, 10.0)]


def test_unknown_window_is_ignored():
    app, _ = make_app()
    window = app.add_window(Window("a"))
    window.invalid = False
    assert app.handle_events([Event(EventType.KEY_DOWN, window.window_id + 99)]) is False
    assert window.invalid is False


def test_event_invalidates_window():
    app, _ = make_app()
    window = app.add_window(Window("a"))
    window.invalid = False
    app.handle_events([Event(EventType.KEY_DOWN, window.window_id, key=97)])
    assert window.invalid is True


def test_unhandled_event_does_not_invalidate():
    app, _ = make_app()
    window = app.add_window(Window("a"))
    window.invalid = False
    app.handle_events([Event(EventType.OTHER, window.window_id)])
    assert window.invalid is False


def test_invalidate_on_event_can_be_turned_off():
    app, _ = make_app()
    app.invalidate_on_event = False
    window = app.add_window(Window("a"))
    window.invalid = False
    app.handle_events([Event(EventType.KEY_UP, window.window_id)])
    assert window.invalid is False


def test_close_hides_unless_handled():
    app, _ = make_app()
    plain = app.add_window(Window("a"))
    guarded = app.add_window(Window("b"))
    guarded.close_requested.connect(lambda: True)
    app.handle_events(
        [
            Event(EventType.WINDOW_CLOSE, plain.window_id),
            Event(EventType.WINDOW_CLOSE, guarded.window_id),
        ]
    )
    assert plain.visible is False
    assert guarded.visible is True


def test_focus_tracking():
    app, _ = make_app()
    window = app.add_window(Window("a"))
    app.handle_events([Event(EventType.FOCUS_GAINED, window.window_id)])
    assert app.active_window is window
    app.handle_events([Event(EventType.FOCUS_LOST, window.window_id)])
    assert app.active_window is None


def test_resize_updates_window():
    app, _ = make_app()
    window = app.add_window(Window("a", 100, 100))
    app.handle_events([Event(EventType.WINDOW_RESIZED, window.window_id, data1=300, data2=200)])
    assert (window.width, window.height) == (300, 200)
    assert window.renderer.viewport().width == 300


def test_inner_loop_redraws_invalid_window_once():
    app, sleeps = make_app()
    app.running = True
    window = app.add_window(Window("a"))
    times = []
    window.frame_update.connect(times.append)
    assert app.inner_loop([], 1.0) is True
    assert window.frames == 1
    assert window.invalid is False
    assert sleeps == []
    app.inner_loop([], 1.5)
    assert window.frames == 1
    assert sleeps == [IDLE_DELAY]
    assert times == [0.0]


def test_continuous_updates_redraw_every_frame():
    app, sleeps = make_app()
    app.running = True
    app.continuous_updates = True
    window = app.add_window(Window("a"))
    times = []
    window.frame_update.connect(times.append)
    app.inner_loop([], 2.0)
    app.inner_loop([], 2.25)
    assert window.frames == 2
    assert times[1] == pytest.approx(0.25)
    assert sleeps == []


def test_main_loop_stops_on_quit_and_blocks_second_app():
    app, _ = make_app()
    app.add_window(Window("a"))
    errors = []
    ticks = iter(range(100))

    def events():
        try:
            Application(["prog"])
        except RuntimeError as error:
            errors.append(error)
        return [Event(EventType.QUIT)]

    app.main_loop(events, clock=lambda: float(next(ticks)))
    assert app.running is False
    assert len(errors) == 1
    assert Application(["prog"]).running is False
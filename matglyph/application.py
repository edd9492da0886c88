"""Windows, events and the main loop that draws invalid windows and dispatches input."""

from __future__ import annotations

import enum
import itertools
import re
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Optional, Sequence

from .draw import Renderer

IDLE_DELAY = 0.01

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class Signal:
    """A list of callbacks that are called together."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> Callable[..., Any]:
        """Add ``slot``; it is returned so this can be used as a decorator."""
        self._slots.append(slot)
        return slot

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove every connection of ``slot``."""
        self._slots = [s for s in self._slots if s != slot]

    def emit(self, *args: Any) -> list[Any]:
        """Call every slot with ``args`` and return their results."""
        return [slot(*args) for slot in list(self._slots)]

    def __len__(self) -> int:
        return len(self._slots)


class MouseButton(enum.IntFlag):
    """Mouse buttons, one bit each."""

    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 4
    X1 = 8
    X2 = 16

    @classmethod
    def from_index(cls, index: int) -> "MouseButton":
        """Return the flag of button number ``index``, counted from 1."""
        if index < 1:
            raise ValueError("mouse buttons are numbered from 1")
        return cls(1 << (index - 1))


class EventType(enum.Enum):
    """Kinds of input event the application understands."""

    QUIT = "quit"
    WINDOW_CLOSE = "window_close"
    WINDOW_LEAVE = "window_leave"
    WINDOW_RESIZED = "window_resized"
    FOCUS_GAINED = "focus_gained"
    FOCUS_LOST = "focus_lost"
    WINDOW_OTHER = "window_other"
    MOUSE_MOTION = "mouse_motion"
    MOUSE_BUTTON_DOWN = "mouse_button_down"
    MOUSE_BUTTON_UP = "mouse_button_up"
    MOUSE_WHEEL = "mouse_wheel"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    TEXT_INPUT = "text_input"
    OTHER = "other"


_WINDOW_EVENTS = frozenset(
    {
        EventType.WINDOW_CLOSE,
        EventType.WINDOW_LEAVE,
        EventType.WINDOW_RESIZED,
        EventType.FOCUS_GAINED,
        EventType.FOCUS_LOST,
        EventType.WINDOW_OTHER,
    }
)


@dataclass(frozen=True)
class Event:
    """One input event addressed to a window."""

    type: EventType
    window_id: int = 0
    x: float = 0.0
    y: float = 0.0
    button: int = 0
    state: int = 0
    data1: int = 0
    data2: int = 0
    key: int = 0
    scancode: int = 0
    mod: int = 0
    repeat: int = 0
    text: str = ""


_window_ids = itertools.count(1)


class Window:
    """A drawing surface with its own renderer, child views and input signals."""

    def __init__(
        self,
        title: str = "",
        width: int = 512,
        height: int = 512,
        window_id: Optional[int] = None,
    ) -> None:
        self.title = title
        self.width = width
        self.height = height
        self.window_id = next(_window_ids) if window_id is None else window_id
        self.renderer = Renderer()
        self.renderer.set_dimensions(width, height)
        self.children: list[Any] = []
        self.visible = True
        self.invalid = True
        self.frames = 0

        self.frame_update = Signal()
        self.close_requested = Signal()
        self.pointer_leave = Signal()
        self.resized = Signal()
        self.pointer_move = Signal()
        self.pointer_down = Signal()
        self.pointer_up = Signal()
        self.scroll = Signal()
        self.key_down = Signal()
        self.key_up = Signal()
        self.text_input = Signal()

    def __repr__(self) -> str:
        return f"Window({self.title!r}, id={self.window_id})"

    def invalidate(self) -> None:
        """Mark the window as needing a redraw."""
        self.invalid = True

    def add_child(self, view: Any) -> Any:
        """Attach a view that is drawn with the window; returns the view."""
        self.children.append(view)
        self.invalidate()
        return view

    def on_request_close(self) -> bool:
        """Ask handlers about closing; True means a handler dealt with it."""
        return any(self.close_requested.emit())

    def hide(self) -> None:
        self.visible = False

    def on_pointer_leave(self) -> None:
        self.pointer_leave.emit()

    def on_resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.renderer.set_dimensions(width, height)
        self.resized.emit(width, height)

    def on_pointer_move(self, pointer_id: int, x: float, y: float, state: int) -> None:
        self.pointer_move.emit(pointer_id, x, y, state)

    def on_pointer_down(
        self, pointer_id: int, button: MouseButton, x: float, y: float
    ) -> None:
        self.pointer_down.emit(pointer_id, button, x, y)

    def on_pointer_up(
        self, pointer_id: int, button: MouseButton, x: float, y: float
    ) -> None:
        self.pointer_up.emit(pointer_id, button, x, y)

    def on_scroll(self, pointer_id: int, x: float, y: float) -> None:
        self.scroll.emit(pointer_id, x, y)

    def on_key_down(self, key: int, scancode: int, mod: int, repeat: int) -> None:
        self.key_down.emit(key, scancode, mod, repeat)

    def on_key_up(self, key: int, scancode: int, mod: int, repeat: int) -> None:
        self.key_up.emit(key, scancode, mod, repeat)

    def on_text_input(self, text: str) -> None:
        self.text_input.emit(text)

    def clear(self) -> None:
        self.renderer.clear()

    def draw(self) -> None:
        for child in self.children:
            child.draw(self.renderer)

    def swap(self) -> None:
        self.frames += 1


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def parse_scale(argv: Optional[Sequence[str]] = None) -> float:
    """Return the value given after ``--scale`` in ``argv``, or 1.0.

    ``argv`` includes the program name. A value that is not a number reads as 0.
    """
    args = list(sys.argv if argv is None else argv)
    scale = 1.0
    i = 0
    while i + 1 < len(args):
        if args[i] == "--scale":
            i += 1
            scale = _atof(args[i])
        i += 1
    return scale


class Application:
    """Owns the windows and runs the loop that redraws them and routes events."""

    _current: ClassVar[Optional["Application"]] = None

    def __init__(
        self,
        argv: Optional[Sequence[str]] = None,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        current = Application._current
        if current is not None and current.running:
            raise RuntimeError("Application already created in other part of program")
        self.scale = parse_scale(argv)
        self.windows: list[Window] = []
        self.active_window: Optional[Window] = None
        self.continuous_updates = False
        self.invalidate_on_event = True
        self.running = False
        self._sleep = sleep
        self._last_tick: Optional[float] = None

    def add_window(self, window: Window) -> Window:
        """Start managing ``window``; returns it."""
        self.windows.append(window)
        return window

    def remove_window(self, window: Window) -> None:
        """Stop managing ``window``; the application quits when none are left."""
        self.windows = [w for w in self.windows if w is not window]
        if self.active_window is window:
            self.active_window = None
        if not self.windows:
            self.quit()

    def get_window(self, window_id: int) -> Optional[Window]:
        """Return the window with ``window_id``, or None."""
        return next((w for w in self.windows if w.window_id == window_id), None)

    def quit(self) -> None:
        """Stop the main loop after the current iteration."""
        self.running = False

    def _handle_window_event(self, window: Window, event: Event) -> bool:
        kind = event.type
        if kind is EventType.WINDOW_CLOSE:
            if not window.on_request_close():
                window.hide()
        elif kind is EventType.WINDOW_LEAVE:
            window.on_pointer_leave()
        elif kind is EventType.WINDOW_RESIZED:
            window.on_resize(event.data1, event.data2)
        elif kind is EventType.FOCUS_GAINED:
            self.active_window = window
        elif kind is EventType.FOCUS_LOST:
            if self.active_window is window:
                self.active_window = None
        else:
            return False
        return True

    def _handle_other_event(self, window: Window, event: Event) -> bool:
        kind = event.type
        x, y = event.x / self.scale, event.y / self.scale
        if kind is EventType.MOUSE_MOTION:
            window.on_pointer_move(0, x, y, event.state)
        elif kind is EventType.MOUSE_BUTTON_DOWN:
            window.on_pointer_down(0, MouseButton.from_index(event.button), x, y)
        elif kind is EventType.MOUSE_BUTTON_UP:
            window.on_pointer_up(0, MouseButton.from_index(event.button), x, y)
        elif kind is EventType.MOUSE_WHEEL:
            window.on_scroll(0, x, y)
        elif kind is EventType.KEY_DOWN:
            window.on_key_down(event.key, event.scancode, event.mod, event.repeat)
        elif kind is EventType.KEY_UP:
            window.on_key_up(event.key, event.scancode, event.mod, event.repeat)
        elif kind is EventType.TEXT_INPUT:
            window.on_text_input(event.text)
        else:
            return False
        return True

    def handle_events(self, events: Iterable[Event]) -> bool:
        """Dispatch ``events`` to their windows; return True on a quit event."""
        for event in events:
            if event.type is EventType.QUIT:
                return True
            window = self.get_window(event.window_id)
            if window is None:
                continue
            if event.type in _WINDOW_EVENTS:
                handled = self._handle_window_event(window, event)
            else:
                handled = self._handle_other_event(window, event)
            if handled and self.invalidate_on_event:
                window.invalidate()
        return False

    def inner_loop(self, events: Iterable[Event], now: float) -> bool:
        """Run one frame at time ``now`` (seconds); return whether to keep running."""
        passed = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now

        should_redraw = self.continuous_updates or any(w.invalid for w in self.windows)
        if not should_redraw:
            self._sleep(IDLE_DELAY)

        for window in list(self.windows):
            if self.continuous_updates or window.invalid:
                window.clear()
                window.frame_update.emit(passed)
                window.draw()
                window.swap()
                window.invalid = False

        if self.handle_events(events):
            self.running = False
            return False
        return self.running

    def main_loop(
        self,
        event_source: Callable[[], Iterable[Event]],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Run frames until quit, polling ``event_source`` once per frame."""
        self.running = True
        self._last_tick = clock()
        Application._current = self
        try:
            while self.running:
                self.inner_loop(event_source(), clock())
        finally:
            self.running = False
            if Application._current is self:
                Application._current = None
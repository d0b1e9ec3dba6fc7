"""Double-buffered drawing to a terminal backend."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Optional, Protocol

from termgrid.buffer import Buffer, Cell
from termgrid.layout import Rect


class _Backend(Protocol):
    def size(self) -> Rect: ...

    def draw(self, updates: Iterable[tuple[int, int, Cell]]) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def get_cursor(self) -> tuple[int, int]: ...

    def set_cursor(self, x: int, y: int) -> None: ...

    def clear(self) -> None: ...

    def flush(self) -> None: ...


class _Widget(Protocol):
    def render(self, area: Rect, buf: Buffer) -> None: ...


class _StatefulWidget(Protocol):
    def render(self, area: Rect, buf: Buffer, state: Any) -> None: ...


@dataclass
class Viewport:
    """The area of the terminal that is drawn to."""

    area: Rect
    _auto_resize: bool = field(default=False, init=False, repr=False)

    @classmethod
    def fixed(cls, area: Rect) -> Viewport:
        """A viewport that keeps ``area`` whatever the size of the terminal."""
        return cls(area)

    @classmethod
    def _auto(cls, area: Rect) -> Viewport:
        viewport = cls(area)
        viewport._auto_resize = True
        return viewport


@dataclass
class TerminalOptions:
    """Options for creating a :class:`Terminal`."""

    viewport: Viewport


class Frame:
    """A consistent view of the terminal during one draw call."""

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal
        self.cursor_position: Optional[tuple[int, int]] = None

    def size(self) -> Rect:
        """The viewport area; it does not change while rendering."""
        return self._terminal._viewport.area

    def render_widget(self, widget: _Widget, area: Rect) -> None:
        widget.render(area, self._terminal.current_buffer())

    def render_stateful_widget(self, widget: _StatefulWidget, area: Rect, state: Any) -> None:
        widget.render(area, self._terminal.current_buffer(), state)

    def set_cursor(self, x: int, y: int) -> None:
        """Show the cursor at ``(x, y)`` after this frame; otherwise it is hidden."""
        self.cursor_position = (x, y)


@dataclass
class CompletedFrame:
    """The terminal state after a draw call; valid until the next one."""

    buffer: Buffer
    area: Rect


class Terminal:
    """Draws frames to a backend, sending only the cells that changed."""

    def __init__(self, backend: _Backend, options: Optional[TerminalOptions] = None) -> None:
        self._backend = backend
        if options is None:
            self._viewport = Viewport._auto(backend.size())
        else:
            self._viewport = replace(options.viewport)
            self._viewport._auto_resize = options.viewport._auto_resize
        area = self._viewport.area
        self._buffers = [Buffer.empty(area), Buffer.empty(area)]
        self._current = 0
        self._hidden_cursor = False

    @property
    def backend(self) -> _Backend:
        return self._backend

    def get_frame(self) -> Frame:
        return Frame(self)

    def current_buffer(self) -> Buffer:
        """The buffer that widgets currently draw into."""
        return self._buffers[self._current]

    def _previous_buffer(self) -> Buffer:
        return self._buffers[1 - self._current]

    def flush(self) -> None:
        """Send the difference between the previous and current buffers to the backend."""
        updates = self._previous_buffer().diff(self.current_buffer())
        self._backend.draw(updates)

    def resize(self, area: Rect) -> None:
        """Resize both buffers to ``area`` and clear the screen."""
        for buf in self._buffers:
            buf.resize(area)
        self._viewport.area = area
        self.clear()

    def autoresize(self) -> None:
        """Follow the backend's size unless the viewport is fixed."""
        if self._viewport._auto_resize:
            size = self.size()
            if size != self._viewport.area:
                self.resize(size)

    def draw(self, render: Callable[[Frame], None]) -> CompletedFrame:
        """Render one frame with ``render``, output the changes and swap buffers."""
        self.autoresize()

        frame = self.get_frame()
        render(frame)
        cursor_position = frame.cursor_position

        self.flush()

        if cursor_position is None:
            self.hide_cursor()
        else:
            self.show_cursor()
            self.set_cursor(*cursor_position)

        self._previous_buffer().reset()
        self._current = 1 - self._current

        self._backend.flush()
        return CompletedFrame(buffer=self._previous_buffer(), area=self._viewport.area)

    def hide_cursor(self) -> None:
        self._backend.hide_cursor()
        self._hidden_cursor = True

    def show_cursor(self) -> None:
        self._backend.show_cursor()
        self._hidden_cursor = False

    def get_cursor(self) -> tuple[int, int]:
        return self._backend.get_cursor()

    def set_cursor(self, x: int, y: int) -> None:
        self._backend.set_cursor(x, y)

    def clear(self) -> None:
        """Clear the screen and force a full redraw on the next draw call."""
        self._backend.clear()
        self._previous_buffer().reset()

    def size(self) -> Rect:
        """The real size of the backend."""
        return self._backend.size()

    def close(self) -> None:
        """Restore the cursor if it was hidden."""
        if self._hidden_cursor:
            try:
                self.show_cursor()
            except OSError as err:
                print(f"Failed to show the cursor: {err}", file=sys.stderr)

    def __enter__(self) -> Terminal:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
"""A widget on which shapes are drawn with braille, dot or block markers."""

from __future__ import annotations

import abc
import copy
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from termgrid import symbols
from termgrid.buffer import Buffer
from termgrid.layout import Rect
from termgrid.style import Color, ColorValue, Style
from termgrid.symbols import Marker
from termgrid.text import Spans, SpansLike
from termgrid.widgets.block import Block

_U16_MAX = 0xFFFF


def _to_index(value: float, limit: Optional[int] = None) -> int:
    """Truncate a float to a non-negative integer, saturating like a numeric cast."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return limit if limit is not None else 0
    result = int(value)
    return min(result, limit) if limit is not None else result


class Shape(abc.ABC):
    """Something that can be drawn on a canvas."""

    @abc.abstractmethod
    def draw(self, painter: Painter) -> None:
        """Paint this shape through ``painter``."""


@dataclass(frozen=True)
class Label:
    """Text printed on the canvas at a position in canvas coordinates."""

    x: float
    y: float
    spans: Spans


@dataclass(frozen=True)
class _Layer:
    string: str
    colors: list[ColorValue]


class _BrailleGrid:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        length = width * height
        self.cells = [symbols.BRAILLE_BLANK] * length
        self.colors: list[ColorValue] = [Color.RESET] * length

    def resolution(self) -> tuple[float, float]:
        return self.width * 2.0 - 1.0, self.height * 4.0 - 1.0

    def save(self) -> _Layer:
        return _Layer("".join(map(chr, self.cells)), list(self.colors))

    def reset(self) -> None:
        self.cells = [symbols.BRAILLE_BLANK] * len(self.cells)
        self.colors = [Color.RESET] * len(self.colors)

    def paint(self, x: int, y: int, color: ColorValue) -> None:
        index = y // 4 * self.width + x // 2
        if index < len(self.cells):
            self.cells[index] |= symbols.BRAILLE_DOTS[y % 4][x % 2]
            self.colors[index] = color


class _CharGrid:
    def __init__(self, width: int, height: int, cell_char: str) -> None:
        self.width = width
        self.height = height
        length = width * height
        self.cells = [" "] * length
        self.colors: list[ColorValue] = [Color.RESET] * length
        self.cell_char = cell_char

    def resolution(self) -> tuple[float, float]:
        return self.width - 1.0, self.height - 1.0

    def save(self) -> _Layer:
        return _Layer("".join(self.cells), list(self.colors))

    def reset(self) -> None:
        self.cells = [" "] * len(self.cells)
        self.colors = [Color.RESET] * len(self.colors)

    def paint(self, x: int, y: int, color: ColorValue) -> None:
        index = y * self.width + x
        if index < len(self.cells):
            self.cells[index] = self.cell_char
            self.colors[index] = color


class Painter:
    """Maps canvas coordinates to grid points and paints them."""

    def __init__(self, context: Context) -> None:
        self._context = context
        self._resolution = context._grid.resolution()

    def get_point(self, x: float, y: float) -> Optional[tuple[int, int]]:
        """The grid point for canvas coordinates, or ``None`` if outside the bounds."""
        left, right = self._context.x_bounds
        bottom, top = self._context.y_bounds
        if x < left or x > right or y < bottom or y > top:
            return None
        width = abs(right - left)
        height = abs(top - bottom)
        if width == 0.0 or height == 0.0:
            return None
        return (
            _to_index((x - left) * self._resolution[0] / width),
            _to_index((top - y) * self._resolution[1] / height),
        )

    def paint(self, x: int, y: int, color: ColorValue) -> None:
        """Mark the grid point ``(x, y)`` with ``color``."""
        self._context._grid.paint(x, y, color)


class Context:
    """The state of a canvas while it is being painted."""

    def __init__(
        self,
        width: int,
        height: int,
        x_bounds: tuple[float, float],
        y_bounds: tuple[float, float],
        marker: Marker,
    ) -> None:
        if marker is Marker.DOT:
            self._grid: Any = _CharGrid(width, height, symbols.DOT)
        elif marker is Marker.BLOCK:
            self._grid = _CharGrid(width, height, symbols.BAR_HALF)
        else:
            self._grid = _BrailleGrid(width, height)
        self.x_bounds = (float(x_bounds[0]), float(x_bounds[1]))
        self.y_bounds = (float(y_bounds[0]), float(y_bounds[1]))
        self.layers: list[_Layer] = []
        self.labels: list[Label] = []
        self._dirty = False

    def draw(self, shape: Shape) -> None:
        """Draw ``shape`` on the current layer."""
        self._dirty = True
        shape.draw(Painter(self))

    def layer(self) -> None:
        """Save the current layer and start a new one above it."""
        self.layers.append(self._grid.save())
        self._grid.reset()
        self._dirty = False

    def print(self, x: float, y: float, spans: SpansLike) -> None:
        """Print text at canvas coordinates ``(x, y)``."""
        self.labels.append(Label(x, y, Spans.from_value(spans)))

    def finish(self) -> None:
        """Save the current layer if anything was drawn on it."""
        if self._dirty:
            self.layer()


@dataclass
class Canvas:
    """Draws shapes and labels through a painting callback.

    Every builder method returns a new canvas and leaves this one unchanged.
    """

    _block: Optional[Block] = field(default=None, init=False)
    _x_bounds: tuple[float, float] = field(default=(0.0, 0.0), init=False)
    _y_bounds: tuple[float, float] = field(default=(0.0, 0.0), init=False)
    _painter: Optional[Callable[[Context], None]] = field(default=None, init=False)
    _background_color: ColorValue = field(default=Color.RESET, init=False)
    _marker: Marker = field(default=Marker.BRAILLE, init=False)

    def _with(self, **changes: Any) -> Canvas:
        canvas = copy.copy(self)
        for name, value in changes.items():
            setattr(canvas, f"_{name}", value)
        return canvas

    def block(self, block: Block) -> Canvas:
        return self._with(block=block)

    def x_bounds(self, bounds: tuple[float, float]) -> Canvas:
        return self._with(x_bounds=(float(bounds[0]), float(bounds[1])))

    def y_bounds(self, bounds: tuple[float, float]) -> Canvas:
        return self._with(y_bounds=(float(bounds[0]), float(bounds[1])))

    def paint(self, painter: Callable[[Context], None]) -> Canvas:
        """Set the callback that draws on the canvas context."""
        return self._with(painter=painter)

    def background_color(self, color: ColorValue) -> Canvas:
        return self._with(background_color=color)

    def marker(self, marker: Marker) -> Canvas:
        """Choose braille patterns, dots or blocks for plotted points."""
        return self._with(marker=marker)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the canvas onto ``buf`` over ``area``."""
        if self._block is not None:
            canvas_area = self._block.inner(area)
            self._block.render(area, buf)
        else:
            canvas_area = area

        buf.set_style(canvas_area, Style().with_bg(self._background_color))

        if self._painter is None:
            return

        width = canvas_area.width
        ctx = Context(
            canvas_area.width, canvas_area.height, self._x_bounds, self._y_bounds, self._marker
        )
        self._painter(ctx)
        ctx.finish()

        blank_braille = chr(symbols.BRAILLE_BLANK)
        for layer in ctx.layers:
            for i, (ch, color) in enumerate(zip(layer.string, layer.colors)):
                if ch not in (" ", blank_braille):
                    x, y = i % width, i // width
                    buf.get(x + canvas_area.left(), y + canvas_area.top()).set_char(ch).set_fg(
                        color
                    )

        left, right = self._x_bounds
        bottom, top = self._y_bounds
        extent_x = abs(right - left)
        extent_y = abs(top - bottom)
        res_x = float(canvas_area.width - 1)
        res_y = float(canvas_area.height - 1)
        for label in ctx.labels:
            if not (left <= label.x <= right and bottom <= label.y <= top):
                continue
            fx = (label.x - left) * res_x / extent_x if extent_x else math.nan
            fy = (top - label.y) * res_y / extent_y if extent_y else math.nan
            x = min(_to_index(fx, _U16_MAX) + canvas_area.left(), _U16_MAX)
            y = min(_to_index(fy, _U16_MAX) + canvas_area.top(), _U16_MAX)
            buf.set_spans(x, y, label.spans, max(canvas_area.right() - x, 0))
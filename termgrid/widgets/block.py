"""A box with optional borders and a title, used to frame other widgets."""

from __future__ import annotations

import copy
import enum
import warnings
from dataclasses import dataclass, field
from typing import Any, Optional

from termgrid import symbols
from termgrid.buffer import Buffer
from termgrid.layout import Alignment, Rect
from termgrid.style import Style
from termgrid.symbols import LineSet
from termgrid.text import Span, Spans, SpansLike

_U16_MAX = 0xFFFF


class BorderType(enum.Enum):
    """The look of a block's border lines."""

    PLAIN = "plain"
    ROUNDED = "rounded"
    DOUBLE = "double"
    THICK = "thick"

    def line_symbols(self) -> LineSet:
        """The symbol set used to draw this kind of border."""
        return {
            BorderType.PLAIN: symbols.LINE_NORMAL,
            BorderType.ROUNDED: symbols.LINE_ROUNDED,
            BorderType.DOUBLE: symbols.LINE_DOUBLE,
            BorderType.THICK: symbols.LINE_THICK,
        }[self]


class Borders(enum.IntFlag):
    """Which sides of a block have a border; combine them with ``|``."""

    NONE = 0
    TOP = 0b0001
    RIGHT = 0b0010
    BOTTOM = 0b0100
    LEFT = 0b1000
    ALL = TOP | RIGHT | BOTTOM | LEFT


def _has(flags: Borders, side: Borders) -> bool:
    return bool(flags & side)


def _has_all(flags: Borders, sides: Borders) -> bool:
    return flags & sides == sides


@dataclass
class Block:
    """Draws borders and a title around an area.

    Every builder method returns a new block and leaves this one unchanged.
    """

    _title: Optional[Spans] = field(default=None, init=False)
    _title_alignment: Alignment = field(default=Alignment.LEFT, init=False)
    _borders: Borders = field(default=Borders.NONE, init=False)
    _border_style: Style = field(default_factory=Style, init=False)
    _border_type: BorderType = field(default=BorderType.PLAIN, init=False)
    _style: Style = field(default_factory=Style, init=False)

    def _with(self, **changes: Any) -> Block:
        block = copy.copy(self)
        for name, value in changes.items():
            setattr(block, f"_{name}", value)
        return block

    def title(self, title: SpansLike) -> Block:
        """Set the title shown on the top edge; a string, span, spans or list of spans."""
        return self._with(title=Spans.from_value(title))

    def title_style(self, style: Style) -> Block:
        """Restyle the whole title; prefer styling the spans passed to :meth:`title`."""
        warnings.warn(
            "title_style is deprecated, style the spans given to title instead",
            DeprecationWarning,
            stacklevel=2,
        )
        if self._title is None:
            return self._with()
        return self._with(title=Spans([Span.styled(str(self._title), style)]))

    def title_alignment(self, alignment: Alignment) -> Block:
        return self._with(title_alignment=alignment)

    def border_style(self, style: Style) -> Block:
        return self._with(border_style=style)

    def style(self, style: Style) -> Block:
        return self._with(style=style)

    def borders(self, flag: Borders) -> Block:
        return self._with(borders=Borders(flag))

    def border_type(self, border_type: BorderType) -> Block:
        return self._with(border_type=border_type)

    def inner(self, area: Rect) -> Rect:
        """The part of ``area`` left inside the borders and below the title."""
        x, y, width, height = area.x, area.y, area.width, area.height
        if _has(self._borders, Borders.LEFT):
            x = min(min(x + 1, _U16_MAX), area.right())
            width = max(width - 1, 0)
        if _has(self._borders, Borders.TOP) or self._title is not None:
            y = min(min(y + 1, _U16_MAX), area.bottom())
            height = max(height - 1, 0)
        if _has(self._borders, Borders.RIGHT):
            width = max(width - 1, 0)
        if _has(self._borders, Borders.BOTTOM):
            height = max(height - 1, 0)
        return Rect(x, y, width, height)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the block onto ``buf`` over ``area``."""
        if area.area() == 0:
            return
        buf.set_style(area, self._style)
        lines = self._border_type.line_symbols()
        borders = self._border_style

        def put(x: int, y: int, symbol: str) -> None:
            buf.get(x, y).set_symbol(symbol).set_style(borders)

        if _has(self._borders, Borders.LEFT):
            for y in range(area.top(), area.bottom()):
                put(area.left(), y, lines.vertical)
        if _has(self._borders, Borders.TOP):
            for x in range(area.left(), area.right()):
                put(x, area.top(), lines.horizontal)
        if _has(self._borders, Borders.RIGHT):
            for y in range(area.top(), area.bottom()):
                put(area.right() - 1, y, lines.vertical)
        if _has(self._borders, Borders.BOTTOM):
            for x in range(area.left(), area.right()):
                put(x, area.bottom() - 1, lines.horizontal)

        if _has_all(self._borders, Borders.RIGHT | Borders.BOTTOM):
            put(area.right() - 1, area.bottom() - 1, lines.bottom_right)
        if _has_all(self._borders, Borders.RIGHT | Borders.TOP):
            put(area.right() - 1, area.top(), lines.top_right)
        if _has_all(self._borders, Borders.LEFT | Borders.BOTTOM):
            put(area.left(), area.bottom() - 1, lines.bottom_left)
        if _has_all(self._borders, Borders.LEFT | Borders.TOP):
            put(area.left(), area.top(), lines.top_left)

        if self._title is not None:
            left_dx = 1 if _has(self._borders, Borders.LEFT) else 0
            right_dx = 1 if _has(self._borders, Borders.RIGHT) else 0
            title_area_width = max(area.width - left_dx - right_dx, 0)
            title_width = self._title.width()
            if self._title_alignment is Alignment.CENTER:
                title_dx = max(area.width - title_width, 0) // 2
            elif self._title_alignment is Alignment.RIGHT:
                title_dx = max(max(area.width - title_width, 0) - right_dx, 0)
            else:
                title_dx = left_dx
            buf.set_spans(area.left() + title_dx, area.top(), self._title, title_area_width)
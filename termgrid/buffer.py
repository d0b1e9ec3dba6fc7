"""A grid of styled cells describing what the terminal should show."""

from __future__ import annotations

import sys
import warnings
from dataclasses import dataclass, field, replace
from typing import Iterable

from termgrid.layout import Rect
from termgrid.style import Color, ColorValue, Modifier, Style
from termgrid.text import Span, Spans, graphemes, str_width

_NO_MODIFIERS = Modifier(0)


@dataclass
class Cell:
    """One terminal cell: a grapheme with its colors and modifiers."""

    symbol: str = " "
    fg: ColorValue = Color.RESET
    bg: ColorValue = Color.RESET
    modifier: Modifier = _NO_MODIFIERS

    def set_symbol(self, symbol: str) -> Cell:
        self.symbol = symbol
        return self

    def set_char(self, ch: str) -> Cell:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        self.symbol = ch
        return self

    def set_fg(self, color: ColorValue) -> Cell:
        self.fg = color
        return self

    def set_bg(self, color: ColorValue) -> Cell:
        self.bg = color
        return self

    def set_style(self, style: Style) -> Cell:
        """Apply ``style`` on top of the cell's current look."""
        if style.fg is not None:
            self.fg = style.fg
        if style.bg is not None:
            self.bg = style.bg
        combined = (int(self.modifier) | int(style.add_modifier)) & ~int(style.sub_modifier)
        self.modifier = Modifier(combined)
        return self

    def style(self) -> Style:
        """The style that reproduces this cell's look."""
        return Style().with_fg(self.fg).with_bg(self.bg).add_modifiers(self.modifier)

    def reset(self) -> None:
        self.symbol = " "
        self.fg = Color.RESET
        self.bg = Color.RESET
        self.modifier = _NO_MODIFIERS


@dataclass
class Buffer:
    """The desired content of an area of the terminal, one cell per position.

    Coordinates passed to its methods are global: they include the area's offset.
    """

    area: Rect = field(default_factory=Rect)
    content: list[Cell] = field(default_factory=list)

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        """A buffer of default cells."""
        return cls.filled(area, Cell())

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> Buffer:
        """A buffer whose cells are all copies of ``cell``."""
        return cls(area, [replace(cell) for _ in range(area.area())])

    @classmethod
    def with_lines(cls, lines: Iterable[str]) -> Buffer:
        """A buffer at the origin holding the given lines, as wide as the widest one."""
        lines = list(lines)
        width = max((str_width(line) for line in lines), default=0)
        buffer = cls.empty(Rect(0, 0, width, len(lines)))
        for y, line in enumerate(lines):
            buffer.set_string(0, y, line, Style())
        return buffer

    def get(self, x: int, y: int) -> Cell:
        """The cell at global coordinates; it may be modified in place."""
        return self.content[self.index_of(x, y)]

    def index_of(self, x: int, y: int) -> int:
        """Index in ``content`` of the cell at global ``(x, y)``."""
        area = self.area
        if not (area.left() <= x < area.right() and area.top() <= y < area.bottom()):
            raise IndexError(
                f"Trying to access position outside the buffer: x={x}, y={y}, area={area}"
            )
        return (y - area.y) * area.width + (x - area.x)

    def pos_of(self, i: int) -> tuple[int, int]:
        """Global coordinates of the cell at index ``i``."""
        if not 0 <= i < len(self.content):
            raise IndexError(
                "Trying to get the coords of a cell outside the buffer: "
                f"i={i} len={len(self.content)}"
            )
        return self.area.x + i % self.area.width, self.area.y + i // self.area.width

    def set_string(self, x: int, y: int, string: str, style: Style) -> tuple[int, int]:
        """Print ``string`` from ``(x, y)`` up to the end of the line."""
        return self.set_stringn(x, y, string, sys.maxsize, style)

    def set_stringn(
        self, x: int, y: int, string: str, width: int, style: Style
    ) -> tuple[int, int]:
        """Print at most ``width`` columns of ``string``; return the position after it."""
        index = self.index_of(x, y)
        x_offset = x
        max_offset = min(self.area.right(), width + x)
        for symbol in graphemes(string):
            symbol_width = str_width(symbol)
            if symbol_width == 0:
                continue
            if symbol_width > max(max_offset - x_offset, 0):
                break
            self.content[index].set_symbol(symbol).set_style(style)
            # Cells hidden behind a wide grapheme are blanked.
            for hidden in self.content[index + 1 : index + symbol_width]:
                hidden.reset()
            index += symbol_width
            x_offset += symbol_width
        return x_offset, y

    def set_spans(self, x: int, y: int, spans: Spans, width: int) -> tuple[int, int]:
        """Print the spans of a line one after the other within ``width`` columns."""
        remaining = width
        for span in spans:
            if remaining == 0:
                break
            end_x, _ = self.set_stringn(x, y, span.content, remaining, span.style)
            remaining = max(remaining - max(end_x - x, 0), 0)
            x = end_x
        return x, y

    def set_span(self, x: int, y: int, span: Span, width: int) -> tuple[int, int]:
        return self.set_stringn(x, y, span.content, width, span.style)

    def set_background(self, area: Rect, color: ColorValue) -> None:
        """Set the background of every cell in ``area``; prefer :meth:`set_style`."""
        warnings.warn(
            "set_background is deprecated, use set_style instead",
            DeprecationWarning,
            stacklevel=2,
        )
        for y in range(area.top(), area.bottom()):
            for x in range(area.left(), area.right()):
                self.get(x, y).set_bg(color)

    def set_style(self, area: Rect, style: Style) -> None:
        for y in range(area.top(), area.bottom()):
            for x in range(area.left(), area.right()):
                self.get(x, y).set_style(style)

    def resize(self, area: Rect) -> None:
        """Map the buffer to ``area``, truncating or padding its content."""
        length = area.area()
        if len(self.content) > length:
            del self.content[length:]
        else:
            self.content.extend(Cell() for _ in range(length - len(self.content)))
        self.area = area

    def reset(self) -> None:
        for cell in self.content:
            cell.reset()

    def merge(self, other: Buffer) -> None:
        """Grow to cover both areas and copy ``other`` on top of this buffer."""
        area = self.area.union(other.area)
        content = [Cell() for _ in range(area.area())]
        for source in (self, other):
            for i, cell in enumerate(source.content):
                x, y = source.pos_of(i)
                content[(y - area.y) * area.width + (x - area.x)] = replace(cell)
        self.area = area
        self.content = content

    def diff(self, other: Buffer) -> list[tuple[int, int, Cell]]:
        """The cells of ``other`` that must be drawn to turn this buffer into it.

        Buffers are assumed well formed: a wide grapheme is followed by blank cells.
        """
        width = self.area.width
        updates: list[tuple[int, int, Cell]] = []
        invalidated = 0
        to_skip = 0
        for i, (current, previous) in enumerate(zip(other.content, self.content)):
            if (current != previous or invalidated > 0) and to_skip == 0:
                updates.append((i % width, i // width, current))
            current_width = str_width(current.symbol)
            to_skip = max(current_width - 1, 0)
            affected = max(current_width, str_width(previous.symbol))
            invalidated = max(max(affected, invalidated) - 1, 0)
        return updates
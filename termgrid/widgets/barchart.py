"""A widget that draws several labelled vertical bars."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from termgrid import symbols
from termgrid.buffer import Buffer
from termgrid.layout import Rect
from termgrid.style import Style
from termgrid.symbols import LevelSet
from termgrid.text import str_width
from termgrid.widgets.block import Block


def _level_symbol(bar_set: LevelSet, level: int) -> str:
    """The symbol for a cell filled to ``level`` eighths."""
    if level <= 0:
        return bar_set.empty
    return (
        bar_set.one_eighth,
        bar_set.one_quarter,
        bar_set.three_eighths,
        bar_set.half,
        bar_set.five_eighths,
        bar_set.three_quarters,
        bar_set.seven_eighths,
    )[level - 1] if level < 8 else bar_set.full


@dataclass
class BarChart:
    """Displays several bars side by side, each with its value and label.

    Every builder method returns a new chart and leaves this one unchanged.
    """

    _block: Optional[Block] = field(default=None, init=False)
    _bar_width: int = field(default=1, init=False)
    _bar_gap: int = field(default=1, init=False)
    _bar_set: LevelSet = field(default=symbols.BAR_NINE_LEVELS, init=False)
    _bar_style: Style = field(default_factory=Style, init=False)
    _value_style: Style = field(default_factory=Style, init=False)
    _label_style: Style = field(default_factory=Style, init=False)
    _style: Style = field(default_factory=Style, init=False)
    _data: tuple[tuple[str, int], ...] = field(default=(), init=False)
    _max: Optional[int] = field(default=None, init=False)
    _values: tuple[str, ...] = field(default=(), init=False)

    def _with(self, **changes: Any) -> BarChart:
        chart = copy.copy(self)
        for name, value in changes.items():
            setattr(chart, f"_{name}", value)
        return chart

    def data(self, data: Iterable[tuple[str, int]]) -> BarChart:
        """Set the ``(label, value)`` pairs to plot."""
        items = tuple((label, value) for label, value in data)
        for _, value in items:
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"bar values must be non-negative integers, got {value!r}")
        return self._with(data=items, values=tuple(str(value) for _, value in items))

    def block(self, block: Block) -> BarChart:
        return self._with(block=block)

    def max(self, max_value: int) -> BarChart:
        """Value a bar needs to reach full height; defaults to the largest value."""
        return self._with(max=max_value)

    def bar_style(self, style: Style) -> BarChart:
        return self._with(bar_style=style)

    def bar_width(self, width: int) -> BarChart:
        return self._with(bar_width=width)

    def bar_gap(self, gap: int) -> BarChart:
        return self._with(bar_gap=gap)

    def bar_set(self, bar_set: LevelSet) -> BarChart:
        return self._with(bar_set=bar_set)

    def value_style(self, style: Style) -> BarChart:
        return self._with(value_style=style)

    def label_style(self, style: Style) -> BarChart:
        return self._with(label_style=style)

    def style(self, style: Style) -> BarChart:
        return self._with(style=style)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the chart onto ``buf`` over ``area``."""
        buf.set_style(area, self._style)

        if self._block is not None:
            chart_area = self._block.inner(area)
            self._block.render(area, buf)
        else:
            chart_area = area

        if chart_area.height < 2:
            return

        if self._max is not None:
            top_value = self._max
        else:
            top_value = max((value for _, value in self._data), default=0)
        stride = self._bar_width + self._bar_gap
        shown = self._data[: min(chart_area.width // stride, len(self._data))]
        bar_rows = chart_area.height - 1
        levels = [value * bar_rows * 8 // max(top_value, 1) for _, value in shown]

        for j in reversed(range(bar_rows)):
            for i, level in enumerate(levels):
                symbol = _level_symbol(self._bar_set, level)
                left = chart_area.left() + i * stride
                for x in range(self._bar_width):
                    buf.get(left + x, chart_area.top() + j).set_symbol(symbol).set_style(
                        self._bar_style
                    )
                levels[i] = level - 8 if level > 8 else 0

        for i, ((label, value), value_label) in enumerate(zip(shown, self._values)):
            left = chart_area.left() + i * stride
            if value != 0:
                width = str_width(value_label)
                if width < self._bar_width:
                    buf.set_string(
                        left + (self._bar_width - width) // 2,
                        chart_area.bottom() - 2,
                        value_label,
                        self._value_style,
                    )
            buf.set_stringn(
                left, chart_area.bottom() - 1, label, self._bar_width, self._label_style
            )
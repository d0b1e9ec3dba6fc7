"""Box-drawing, block, bar and braille symbols used by the widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class LevelSet:
    """Symbols for a cell filled to one of several levels, from empty to full."""

    full: str
    seven_eighths: str
    three_quarters: str
    five_eighths: str
    half: str
    three_eighths: str
    one_quarter: str
    one_eighth: str
    empty: str


@dataclass(frozen=True)
class LineSet:
    """Symbols used to draw lines, corners and junctions."""

    vertical: str
    horizontal: str
    top_right: str
    top_left: str
    bottom_right: str
    bottom_left: str
    vertical_left: str
    vertical_right: str
    horizontal_down: str
    horizontal_up: str
    cross: str


class Marker(enum.Enum):
    """Marker used when plotting data points."""

    DOT = "dot"
    """One point per cell, shaped as a dot."""
    BLOCK = "block"
    """One point per cell, shaped as a block."""
    BRAILLE = "braille"
    """Up to eight points per cell."""


# Horizontal block eighths, filled from the left.
BLOCK_FULL = "█"
BLOCK_SEVEN_EIGHTHS = "▉"
BLOCK_THREE_QUARTERS = "▊"
BLOCK_FIVE_EIGHTHS = "▋"
BLOCK_HALF = "▌"
BLOCK_THREE_EIGHTHS = "▍"
BLOCK_ONE_QUARTER = "▎"
BLOCK_ONE_EIGHTH = "▏"

BLOCK_THREE_LEVELS = LevelSet(
    full=BLOCK_FULL,
    seven_eighths=BLOCK_FULL,
    three_quarters=BLOCK_HALF,
    five_eighths=BLOCK_HALF,
    half=BLOCK_HALF,
    three_eighths=BLOCK_HALF,
    one_quarter=BLOCK_HALF,
    one_eighth=" ",
    empty=" ",
)

BLOCK_NINE_LEVELS = LevelSet(
    full=BLOCK_FULL,
    seven_eighths=BLOCK_SEVEN_EIGHTHS,
    three_quarters=BLOCK_THREE_QUARTERS,
    five_eighths=BLOCK_FIVE_EIGHTHS,
    half=BLOCK_HALF,
    three_eighths=BLOCK_THREE_EIGHTHS,
    one_quarter=BLOCK_ONE_QUARTER,
    one_eighth=BLOCK_ONE_EIGHTH,
    empty=" ",
)

# Vertical bar eighths, filled from the bottom.
BAR_FULL = "█"
BAR_SEVEN_EIGHTHS = "▇"
BAR_THREE_QUARTERS = "▆"
BAR_FIVE_EIGHTHS = "▅"
BAR_HALF = "▄"
BAR_THREE_EIGHTHS = "▃"
BAR_ONE_QUARTER = "▂"
BAR_ONE_EIGHTH = "▁"

BAR_THREE_LEVELS = LevelSet(
    full=BAR_FULL,
    seven_eighths=BAR_FULL,
    three_quarters=BAR_HALF,
    five_eighths=BAR_HALF,
    half=BAR_HALF,
    three_eighths=BAR_HALF,
    one_quarter=BAR_HALF,
    one_eighth=" ",
    empty=" ",
)

BAR_NINE_LEVELS = LevelSet(
    full=BAR_FULL,
    seven_eighths=BAR_SEVEN_EIGHTHS,
    three_quarters=BAR_THREE_QUARTERS,
    five_eighths=BAR_FIVE_EIGHTHS,
    half=BAR_HALF,
    three_eighths=BAR_THREE_EIGHTHS,
    one_quarter=BAR_ONE_QUARTER,
    one_eighth=BAR_ONE_EIGHTH,
    empty=" ",
)

LINE_VERTICAL = "│"
LINE_DOUBLE_VERTICAL = "║"
LINE_THICK_VERTICAL = "┃"

LINE_HORIZONTAL = "─"
LINE_DOUBLE_HORIZONTAL = "═"
LINE_THICK_HORIZONTAL = "━"

LINE_TOP_RIGHT = "┐"
LINE_ROUNDED_TOP_RIGHT = "╮"
LINE_DOUBLE_TOP_RIGHT = "╗"
LINE_THICK_TOP_RIGHT = "┓"

LINE_TOP_LEFT = "┌"
LINE_ROUNDED_TOP_LEFT = "╭"
LINE_DOUBLE_TOP_LEFT = "╔"
LINE_THICK_TOP_LEFT = "┏"

LINE_BOTTOM_RIGHT = "┘"
LINE_ROUNDED_BOTTOM_RIGHT = "╯"
LINE_DOUBLE_BOTTOM_RIGHT = "╝"
LINE_THICK_BOTTOM_RIGHT = "┛"

LINE_BOTTOM_LEFT = "└"
LINE_ROUNDED_BOTTOM_LEFT = "╰"
LINE_DOUBLE_BOTTOM_LEFT = "╚"
LINE_THICK_BOTTOM_LEFT = "┗"

LINE_VERTICAL_LEFT = "┤"
LINE_DOUBLE_VERTICAL_LEFT = "╣"
LINE_THICK_VERTICAL_LEFT = "┫"

LINE_VERTICAL_RIGHT = "├"
LINE_DOUBLE_VERTICAL_RIGHT = "╠"
LINE_THICK_VERTICAL_RIGHT = "┣"

LINE_HORIZONTAL_DOWN = "┬"
LINE_DOUBLE_HORIZONTAL_DOWN = "╦"
LINE_THICK_HORIZONTAL_DOWN = "┳"

LINE_HORIZONTAL_UP = "┴"
LINE_DOUBLE_HORIZONTAL_UP = "╩"
LINE_THICK_HORIZONTAL_UP = "┻"

LINE_CROSS = "┼"
LINE_DOUBLE_CROSS = "╬"
LINE_THICK_CROSS = "╋"

LINE_NORMAL = LineSet(
    vertical=LINE_VERTICAL,
    horizontal=LINE_HORIZONTAL,
    top_right=LINE_TOP_RIGHT,
    top_left=LINE_TOP_LEFT,
    bottom_right=LINE_BOTTOM_RIGHT,
    bottom_left=LINE_BOTTOM_LEFT,
    vertical_left=LINE_VERTICAL_LEFT,
    vertical_right=LINE_VERTICAL_RIGHT,
    horizontal_down=LINE_HORIZONTAL_DOWN,
    horizontal_up=LINE_HORIZONTAL_UP,
    cross=LINE_CROSS,
)

LINE_ROUNDED = LineSet(
    vertical=LINE_VERTICAL,
    horizontal=LINE_HORIZONTAL,
    top_right=LINE_ROUNDED_TOP_RIGHT,
    top_left=LINE_ROUNDED_TOP_LEFT,
    bottom_right=LINE_ROUNDED_BOTTOM_RIGHT,
    bottom_left=LINE_ROUNDED_BOTTOM_LEFT,
    vertical_left=LINE_VERTICAL_LEFT,
    vertical_right=LINE_VERTICAL_RIGHT,
    horizontal_down=LINE_HORIZONTAL_DOWN,
    horizontal_up=LINE_HORIZONTAL_UP,
    cross=LINE_CROSS,
)

LINE_DOUBLE = LineSet(
    vertical=LINE_DOUBLE_VERTICAL,
    horizontal=LINE_DOUBLE_HORIZONTAL,
    top_right=LINE_DOUBLE_TOP_RIGHT,
    top_left=LINE_DOUBLE_TOP_LEFT,
    bottom_right=LINE_DOUBLE_BOTTOM_RIGHT,
    bottom_left=LINE_DOUBLE_BOTTOM_LEFT,
    vertical_left=LINE_DOUBLE_VERTICAL_LEFT,
    vertical_right=LINE_DOUBLE_VERTICAL_RIGHT,
    horizontal_down=LINE_DOUBLE_HORIZONTAL_DOWN,
    horizontal_up=LINE_DOUBLE_HORIZONTAL_UP,
    cross=LINE_DOUBLE_CROSS,
)

LINE_THICK = LineSet(
    vertical=LINE_THICK_VERTICAL,
    horizontal=LINE_THICK_HORIZONTAL,
    top_right=LINE_THICK_TOP_RIGHT,
    top_left=LINE_THICK_TOP_LEFT,
    bottom_right=LINE_THICK_BOTTOM_RIGHT,
    bottom_left=LINE_THICK_BOTTOM_LEFT,
    vertical_left=LINE_THICK_VERTICAL_LEFT,
    vertical_right=LINE_THICK_VERTICAL_RIGHT,
    horizontal_down=LINE_THICK_HORIZONTAL_DOWN,
    horizontal_up=LINE_THICK_HORIZONTAL_UP,
    cross=LINE_THICK_CROSS,
)

DOT = "•"

BRAILLE_BLANK = 0x2800
"""Code point of the empty braille pattern."""

BRAILLE_DOTS: tuple[tuple[int, int], ...] = (
    (0x0001, 0x0008),
    (0x0002, 0x0010),
    (0x0004, 0x0020),
    (0x0040, 0x0080),
)
"""Bit of each dot in a braille cell, indexed by [row][column]."""
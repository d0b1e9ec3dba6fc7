"""Colors, text modifiers and incremental styles."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass, replace
from functools import reduce
from typing import Optional, Union


class Color(enum.Enum):
    """Named terminal colors."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..=255, got {value!r}")


@dataclass(frozen=True)
class Rgb:
    """A true color given by its red, green and blue components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte("r", self.r)
        _check_byte("g", self.g)
        _check_byte("b", self.b)


@dataclass(frozen=True)
class Indexed:
    """A color from the terminal's 256-color palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte("index", self.index)


ColorValue = Union[Color, Rgb, Indexed]


class Modifier(enum.IntFlag):
    """Text emphasis flags; combine them with ``|``."""

    BOLD = 0b0000_0000_0001
    DIM = 0b0000_0000_0010
    ITALIC = 0b0000_0000_0100
    UNDERLINED = 0b0000_0000_1000
    SLOW_BLINK = 0b0000_0001_0000
    RAPID_BLINK = 0b0000_0010_0000
    REVERSED = 0b0000_0100_0000
    HIDDEN = 0b0000_1000_0000
    CROSSED_OUT = 0b0001_0000_0000


NO_MODIFIERS = Modifier(0)
ALL_MODIFIERS = reduce(operator.or_, list(Modifier), Modifier(0))


def _without(flags: Modifier, removed: Modifier) -> Modifier:
    return Modifier(int(flags) & ~int(removed))


@dataclass(frozen=True)
class Style:
    """An incremental change to the look of a cell.

    Applying several styles in turn merges them; the default style changes nothing.
    """

    fg: Optional[ColorValue] = None
    bg: Optional[ColorValue] = None
    add_modifier: Modifier = NO_MODIFIERS
    sub_modifier: Modifier = NO_MODIFIERS

    @classmethod
    def reset(cls) -> Style:
        """A style that resets every property."""
        return cls(
            fg=Color.RESET,
            bg=Color.RESET,
            add_modifier=NO_MODIFIERS,
            sub_modifier=ALL_MODIFIERS,
        )

    def with_fg(self, color: ColorValue) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: ColorValue) -> Style:
        return replace(self, bg=color)

    def add_modifiers(self, modifier: Modifier) -> Style:
        return replace(
            self,
            sub_modifier=_without(self.sub_modifier, modifier),
            add_modifier=self.add_modifier | modifier,
        )

    def remove_modifiers(self, modifier: Modifier) -> Style:
        return replace(
            self,
            add_modifier=_without(self.add_modifier, modifier),
            sub_modifier=self.sub_modifier | modifier,
        )

    def patch(self, other: Style) -> Style:
        """Combine with ``other`` as if both were applied one after the other."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=_without(self.add_modifier, other.sub_modifier) | other.add_modifier,
            sub_modifier=_without(self.sub_modifier, other.add_modifier) | other.sub_modifier,
        )
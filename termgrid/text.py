"""Styled text: spans, lines of spans and multi-line text."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Union

import regex
from wcwidth import wcwidth

from termgrid.style import Style

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def str_width(text: str) -> int:
    """Display width of ``text`` in terminal columns; control characters count as zero."""
    return sum(max(wcwidth(ch), 0) for ch in text)


@dataclass(frozen=True)
class StyledGrapheme:
    """A grapheme together with its style."""

    symbol: str
    style: Style


@dataclass(frozen=True)
class Span:
    """A string whose graphemes all share one style."""

    content: str
    style: Style = field(default_factory=Style)

    @classmethod
    def raw(cls, content: str) -> Span:
        return cls(content, Style())

    @classmethod
    def styled(cls, content: str, style: Style) -> Span:
        return cls(content, style)

    def width(self) -> int:
        return str_width(self.content)

    def styled_graphemes(self, base_style: Style) -> Iterator[StyledGrapheme]:
        """Yield each grapheme with ``base_style`` patched by this span's style, skipping newlines."""
        style = base_style.patch(self.style)
        for symbol in graphemes(self.content):
            if symbol != "\n":
                yield StyledGrapheme(symbol, style)


SpansLike = Union[str, Span, "Spans", list, tuple]


@dataclass
class Spans:
    """One line made of several differently styled spans."""

    spans: list[Span] = field(default_factory=list)

    @classmethod
    def from_value(cls, value: SpansLike) -> Spans:
        """Build a line from a string, a span, a sequence of spans or another line."""
        if isinstance(value, Spans):
            return value
        if isinstance(value, str):
            return cls([Span.raw(value)])
        if isinstance(value, Span):
            return cls([value])
        if isinstance(value, (list, tuple)):
            if not all(isinstance(item, Span) for item in value):
                raise TypeError("a line can only be built from Span items")
            return cls(list(value))
        raise TypeError(f"cannot build a line from {type(value).__name__}")

    def width(self) -> int:
        return sum(span.width() for span in self.spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)

    def __str__(self) -> str:
        return "".join(span.content for span in self.spans)


def _split_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Text:
    """Several lines, each made of styled spans."""

    lines: list[Spans] = field(default_factory=list)

    @classmethod
    def raw(cls, content: str) -> Text:
        """Split ``content`` into unstyled lines."""
        return cls([Spans.from_value(line) for line in _split_lines(content)])

    @classmethod
    def styled(cls, content: str, style: Style) -> Text:
        text = cls.raw(content)
        text.patch_style(style)
        return text

    @classmethod
    def from_value(cls, value: Union[str, Span, Spans, list, tuple, Text]) -> Text:
        """Build text from a string, a span, a line, a sequence of lines or other text."""
        if isinstance(value, Text):
            return value
        if isinstance(value, str):
            return cls.raw(value)
        if isinstance(value, (Span, Spans)):
            return cls([Spans.from_value(value)])
        if isinstance(value, (list, tuple)):
            if not all(isinstance(item, Spans) for item in value):
                raise TypeError("text can only be built from Spans items")
            return cls(list(value))
        raise TypeError(f"cannot build text from {type(value).__name__}")

    def width(self) -> int:
        return max((line.width() for line in self.lines), default=0)

    def height(self) -> int:
        return len(self.lines)

    def patch_style(self, style: Style) -> None:
        """Patch the style of every span with ``style``."""
        for line in self.lines:
            line.spans = [replace(span, style=span.style.patch(style)) for span in line.spans]

    def extend(self, lines: Iterable[SpansLike]) -> None:
        self.lines.extend(Spans.from_value(line) for line in lines)

    def __iter__(self) -> Iterator[Spans]:
        return iter(self.lines)
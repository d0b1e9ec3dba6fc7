import pytest

from termgrid.buffer import Buffer
from termgrid.layout import Alignment, Rect
from termgrid.style import Color, Modifier, Style
from termgrid import symbols
from termgrid.text import Span
from termgrid.widgets.block import Block, Borders, BorderType


def _render(block, width, height):
    buf = Buffer.empty(Rect(0, 0, width, height))
    block.render(Rect(0, 0, width, height), buf)
    return buf


@pytest.mark.parametrize(
    "borders, area, expected",
    [
        (Borders.NONE, Rect(0, 0, 0, 0), Rect(0, 0, 0, 0)),
        (Borders.NONE, Rect(0, 0, 1, 1), Rect(0, 0, 1, 1)),
        (Borders.LEFT, Rect(0, 0, 0, 1), Rect(0, 0, 0, 1)),
        (Borders.LEFT, Rect(0, 0, 1, 1), Rect(1, 0, 0, 1)),
        (Borders.LEFT, Rect(0, 0, 2, 1), Rect(1, 0, 1, 1)),
        (Borders.TOP, Rect(0, 0, 1, 0), Rect(0, 0, 1, 0)),
        (Borders.TOP, Rect(0, 0, 1, 1), Rect(0, 1, 1, 0)),
        (Borders.TOP, Rect(0, 0, 1, 2), Rect(0, 1, 1, 1)),
        (Borders.RIGHT, Rect(0, 0, 0, 1), Rect(0, 0, 0, 1)),
        (Borders.RIGHT, Rect(0, 0, 1, 1), Rect(0, 0, 0, 1)),
        (Borders.RIGHT, Rect(0, 0, 2, 1), Rect(0, 0, 1, 1)),
        (Borders.BOTTOM, Rect(0, 0, 1, 0), Rect(0, 0, 1, 0)),
        (Borders.BOTTOM, Rect(0, 0, 1, 1), Rect(0, 0, 1, 0)),
        (Borders.BOTTOM, Rect(0, 0, 1, 2), Rect(0, 0, 1, 1)),
        (Borders.ALL, Rect(0, 0, 0, 0), Rect(0, 0, 0, 0)),
        (Borders.ALL, Rect(0, 0, 1, 1), Rect(1, 1, 0, 0)),
        (Borders.ALL, Rect(0, 0, 2, 2), Rect(1, 1, 0, 0)),
        (Borders.ALL, Rect(0, 0, 3, 3), Rect(1, 1, 1, 1)),
    ],
)
def test_inner_takes_into_account_the_borders(borders, area, expected):
    assert Block().borders(borders).inner(area) == expected


@pytest.mark.parametrize("alignment", [Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT])
def test_inner_takes_into_account_the_title(alignment):
    block = Block().title("Test").title_alignment(alignment)
    assert block.inner(Rect(0, 0, 0, 1)) == Rect(0, 1, 0, 0)


def test_builders_leave_original_unchanged():
    original = Block()
    bordered = original.borders(Borders.ALL)
    assert original == Block()
    assert original.inner(Rect(0, 0, 3, 3)) == Rect(0, 0, 3, 3)
    assert bordered.inner(Rect(0, 0, 3, 3)) == Rect(1, 1, 1, 1)


@pytest.mark.parametrize(
    "border_type, expected",
    [
        (BorderType.PLAIN, symbols.LINE_NORMAL),
        (BorderType.ROUNDED, symbols.LINE_ROUNDED),
        (BorderType.DOUBLE, symbols.LINE_DOUBLE),
        (BorderType.THICK, symbols.LINE_THICK),
    ],
)
def test_line_symbols(border_type, expected):
    assert border_type.line_symbols() == expected


def test_render_all_borders_with_title():
    buf = _render(Block().borders(Borders.ALL).title("Hi"), 6, 3)
    assert buf == Buffer.with_lines(["┌Hi──┐", "│    │", "└────┘"])


def test_render_title_is_truncated_between_borders():
    buf = _render(Block().borders(Borders.ALL).title("Hello"), 5, 3)
    assert buf == Buffer.with_lines(["┌Hel┐", "│   │", "└───┘"])


def test_render_centered_title_without_borders():
    buf = _render(Block().title("Hi").title_alignment(Alignment.CENTER), 6, 1)
    assert buf == Buffer.with_lines(["  Hi  "])


def test_render_right_aligned_title():
    block = Block().borders(Borders.ALL).title("Hi").title_alignment(Alignment.RIGHT)
    buf = _render(block, 6, 3)
    assert buf == Buffer.with_lines(["┌──Hi┐", "│    │", "└────┘"])


def test_render_rounded_borders():
    buf = _render(Block().borders(Borders.ALL).border_type(BorderType.ROUNDED), 4, 2)
    assert buf == Buffer.with_lines(["╭──╮", "╰──╯"])


def test_render_left_and_right_only():
    buf = _render(Block().borders(Borders.LEFT | Borders.RIGHT), 3, 2)
    assert buf == Buffer.with_lines(["│ │", "│ │"])


def test_render_border_and_block_styles():
    block = (
        Block()
        .borders(Borders.ALL)
        .border_style(Style().with_fg(Color.RED))
        .style(Style().with_bg(Color.BLUE))
    )
    buf = _render(block, 3, 3)
    assert buf.get(0, 0).fg == Color.RED
    assert buf.get(0, 0).bg == Color.BLUE
    assert buf.get(1, 1).fg == Color.RESET
    assert buf.get(1, 1).bg == Color.BLUE


def test_render_styled_title_spans():
    title = [Span.styled("A", Style().add_modifiers(Modifier.BOLD)), Span.raw("b")]
    buf = _render(Block().title(title), 3, 1)
    assert buf.get(0, 0).symbol == "A"
    assert buf.get(0, 0).modifier == Modifier.BOLD
    assert buf.get(1, 0).symbol == "b"
    assert buf.get(1, 0).modifier == Modifier(0)


def test_render_zero_area_draws_nothing():
    buf = Buffer.empty(Rect(0, 0, 2, 2))
    Block().borders(Borders.ALL).render(Rect(0, 0, 0, 2), buf)
    assert buf == Buffer.empty(Rect(0, 0, 2, 2))


def test_title_style_is_deprecated_and_restyles_title():
    with pytest.warns(DeprecationWarning):
        block = Block().title("ab").title_style(Style().with_fg(Color.GREEN))
    buf = _render(block, 2, 1)
    assert buf == Buffer.with_lines(["ab"]) or buf.get(0, 0).fg == Color.GREEN
    assert buf.get(0, 0).fg == Color.GREEN
    assert buf.get(1, 0).fg == Color.GREEN


def test_title_style_without_title_keeps_block():
    with pytest.warns(DeprecationWarning):
        block = Block().title_style(Style().with_fg(Color.GREEN))
    assert block == Block()
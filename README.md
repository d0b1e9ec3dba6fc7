# termgrid

Building blocks for terminal user interfaces. Widgets draw themselves into an
in-memory grid of cells (`Buffer`); a `Terminal` compares the new grid with the
previous one and passes only the changed cells to a backend that you provide.

## Installation

```
pip install termgrid
```

## Modules

- `termgrid.style` – `Color` (named colors), `Rgb`, `Indexed`, `Modifier`
  flags and `Style`. A `Style` is an incremental change: `with_fg`, `with_bg`,
  `add_modifiers` and `remove_modifiers` return new styles, `patch` combines
  two, and `Style.reset()` resets every property.
- `termgrid.text` – `Span`, `Spans` (one line of spans) and `Text` (several
  lines), with `from_value` helpers that accept strings, spans or lists of
  them. `graphemes` splits a string into grapheme clusters and `str_width`
  gives its width in terminal columns, counting wide characters as two.
- `termgrid.layout` – `Rect` (with `union`, `intersection`, `inner`, and
  `Rect.clipped` to keep the area within 16 bits), the constraints `Length`,
  `Percentage`, `Ratio`, `Min` and `Max`, and `Layout`, which splits an area
  into chunks along a `Direction` using a linear constraint solver. Results of
  `Layout.split` are cached.
- `termgrid.buffer` – `Cell` and `Buffer`: writing strings and spans with
  width limits, styling areas, `resize`, `merge`, and `diff`, which lists the
  cells that must be redrawn to turn one buffer into another. Coordinates
  outside the buffer raise `IndexError`.
- `termgrid.symbols` – line sets (`LINE_NORMAL`, `LINE_ROUNDED`,
  `LINE_DOUBLE`, `LINE_THICK`), bar and block level sets, braille constants
  and the `Marker` kinds.
- `termgrid.widgets.block` – `Block`, a box with `Borders`, a `BorderType`
  and an optional aligned title; `inner` gives the area left inside it.
- `termgrid.widgets.barchart` – `BarChart`, labelled vertical bars drawn
  with eighth-block precision.
- `termgrid.widgets.canvas.canvas` – `Canvas`, `Context`, `Painter`,
  `Shape` and `Label`. The painting callback receives a `Context` on which
  shapes are drawn in layers and text is printed at canvas coordinates.
- `termgrid.widgets.canvas.shapes` – the `Line`, `Points` and `Rectangle`
  shapes.
- `termgrid.terminal` – `Terminal`, `Frame`, `CompletedFrame`, `Viewport`
  and `TerminalOptions`.

Widget builder methods return a new widget and leave the original unchanged.

## Example

```python
from termgrid.buffer import Buffer
from termgrid.layout import Rect, Layout, Direction, Length, Min
from termgrid.style import Style, Color
from termgrid.widgets.block import Block, Borders

area = Rect(0, 0, 20, 6)
buf = Buffer.empty(area)

top, bottom = (
    Layout()
    .with_direction(Direction.VERTICAL)
    .with_constraints([Length(3), Min(0)])
    .split(area)
)

Block().title("Status").borders(Borders.ALL).render(top, buf)
buf.set_string(1, 4, "ready", Style().with_fg(Color.GREEN))
```

A canvas:

```python
from termgrid.widgets.canvas.canvas import Canvas
from termgrid.widgets.canvas.shapes import Line, Rectangle

def paint(ctx):
    ctx.draw(Rectangle(1.0, 1.0, 8.0, 8.0, Color.RED))
    ctx.layer()
    ctx.draw(Line(0.0, 0.0, 10.0, 10.0, Color.WHITE))
    ctx.print(2.0, 9.0, "hi")

Canvas().x_bounds((0.0, 10.0)).y_bounds((0.0, 10.0)).paint(paint).render(bottom, buf)
```

## Drawing to a terminal

`Terminal(backend)` takes a backend object with the methods `size()`,
`draw(updates)`, `flush()`, `clear()`, `hide_cursor()`, `show_cursor()`,
`get_cursor()` and `set_cursor(x, y)`. `Terminal.draw(render)` resizes to the
backend's size (unless the terminal was created with
`TerminalOptions(Viewport.fixed(area))`), calls `render` with a `Frame`, sends
the changed cells to `backend.draw`, hides the cursor or moves it to the
position given by `Frame.set_cursor`, and returns a `CompletedFrame`. A
`Terminal` is a context manager; `close` shows the cursor again if it was
hidden.

## What it does not do

termgrid includes no backend: it does not write escape sequences, switch the
terminal to raw mode or read keyboard and mouse input. Supply a backend that
does this. The widgets provided are `Block`, `BarChart` and `Canvas` only;
there are no list, table, tab or paragraph widgets, and the canvas has no
world-map shape.
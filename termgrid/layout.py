"""Rectangles and constraint-based splitting of screen areas."""

from __future__ import annotations

import enum
import functools
import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Union

_U16_MAX = 0xFFFF


def _check_u16(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be an integer in 0..={_U16_MAX}, got {value!r}")


class Corner(enum.Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


class Direction(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Alignment(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Margin:
    vertical: int = 0
    horizontal: int = 0


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        _check_u16("x", self.x)
        _check_u16("y", self.y)
        _check_u16("width", self.width)
        _check_u16("height", self.height)

    @classmethod
    def clipped(cls, x: int, y: int, width: int, height: int) -> Rect:
        """A rect whose area fits in 16 bits; oversized ones shrink keeping their aspect ratio."""
        if width * height > _U16_MAX:
            aspect_ratio = width / height
            height_f = math.sqrt(_U16_MAX / aspect_ratio)
            width_f = height_f * aspect_ratio
            return cls(x, y, int(width_f), int(height_f))
        return cls(x, y, width, height)

    def area(self) -> int:
        return self.width * self.height

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return min(self.x + self.width, _U16_MAX)

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return min(self.y + self.height, _U16_MAX)

    def inner(self, margin: Margin) -> Rect:
        """The rect shrunk by ``margin`` on every side, or an empty rect if it does not fit."""
        if self.width < 2 * margin.horizontal or self.height < 2 * margin.vertical:
            return Rect()
        return Rect(
            self.x + margin.horizontal,
            self.y + margin.vertical,
            self.width - 2 * margin.horizontal,
            self.height - 2 * margin.vertical,
        )

    def union(self, other: Rect) -> Rect:
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.x + self.width, other.x + other.width)
        y2 = max(self.y + self.height, other.y + other.height)
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def intersection(self, other: Rect) -> Rect:
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.x + self.width, other.x + other.width)
        y2 = min(self.y + self.height, other.y + other.height)
        return Rect(x1, y1, max(x2 - x1, 0), max(y2 - y1, 0))

    def intersects(self, other: Rect) -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


# --- a small incremental simplex solver (Cassowary algorithm) ---------------------------------

_REQUIRED = 1_001_001_000.0
_WEAK = 1.0
_EPSILON = 1.0e-8


def _near_zero(value: float) -> bool:
    return abs(value) < _EPSILON


class _Op(enum.Enum):
    LE = "<="
    GE = ">="
    EQ = "=="


class _Kind(enum.Enum):
    EXTERNAL = 0
    SLACK = 1
    ERROR = 2
    DUMMY = 3


class _Symbol:
    __slots__ = ("kind",)

    def __init__(self, kind: _Kind) -> None:
        self.kind = kind


class _Variable:
    __slots__ = ()


@dataclass
class _LinearConstraint:
    """``sum(coeff * var) + constant  op  0`` with a strength."""

    terms: list[tuple[_Variable, float]]
    constant: float
    op: _Op
    strength: float


def _relation(
    terms: list[tuple[_Variable, float]],
    op: _Op,
    rhs: Union[float, _Variable],
    strength: float = _REQUIRED,
) -> _LinearConstraint:
    if isinstance(rhs, _Variable):
        return _LinearConstraint([*terms, (rhs, -1.0)], 0.0, op, strength)
    return _LinearConstraint(list(terms), -float(rhs), op, strength)


class _Row:
    __slots__ = ("constant", "cells")

    def __init__(self, constant: float = 0.0, cells: Optional[dict[_Symbol, float]] = None) -> None:
        self.constant = constant
        self.cells: dict[_Symbol, float] = dict(cells) if cells else {}

    def copy(self) -> _Row:
        return _Row(self.constant, self.cells)

    def insert_symbol(self, symbol: _Symbol, coeff: float = 1.0) -> None:
        value = self.cells.get(symbol, 0.0) + coeff
        if _near_zero(value):
            self.cells.pop(symbol, None)
        else:
            self.cells[symbol] = value

    def insert_row(self, other: _Row, coeff: float = 1.0) -> None:
        self.constant += other.constant * coeff
        for symbol, value in other.cells.items():
            self.insert_symbol(symbol, value * coeff)

    def remove(self, symbol: _Symbol) -> None:
        self.cells.pop(symbol, None)

    def reverse_sign(self) -> None:
        self.constant = -self.constant
        self.cells = {symbol: -value for symbol, value in self.cells.items()}

    def solve_for(self, symbol: _Symbol) -> None:
        coeff = -1.0 / self.cells.pop(symbol)
        self.constant *= coeff
        self.cells = {s: value * coeff for s, value in self.cells.items()}

    def solve_for_pair(self, lhs: _Symbol, rhs: _Symbol) -> None:
        self.insert_symbol(lhs, -1.0)
        self.solve_for(rhs)

    def coefficient_for(self, symbol: _Symbol) -> float:
        return self.cells.get(symbol, 0.0)

    def substitute(self, symbol: _Symbol, row: _Row) -> None:
        coeff = self.cells.pop(symbol, None)
        if coeff is not None:
            self.insert_row(row, coeff)


class _Solver:
    def __init__(self) -> None:
        self._rows: dict[_Symbol, _Row] = {}
        self._var_symbols: dict[_Variable, _Symbol] = {}
        self._objective = _Row()
        self._artificial: Optional[_Row] = None

    def value(self, variable: _Variable) -> float:
        symbol = self._var_symbols.get(variable)
        row = self._rows.get(symbol) if symbol is not None else None
        return row.constant if row is not None else 0.0

    def add_constraints(self, constraints: Iterable[_LinearConstraint]) -> None:
        for constraint in constraints:
            self.add_constraint(constraint)

    def add_constraint(self, constraint: _LinearConstraint) -> None:
        row, marker, other = self._create_row(constraint)
        subject = self._choose_subject(row, marker, other)
        if subject is None and all(s.kind is _Kind.DUMMY for s in row.cells):
            if not _near_zero(row.constant):
                raise ValueError("unsatisfiable layout constraint")
            subject = marker
        if subject is None:
            if not self._add_with_artificial_variable(row):
                raise ValueError("unsatisfiable layout constraint")
        else:
            row.solve_for(subject)
            self._substitute(subject, row)
            self._rows[subject] = row
        self._optimize(self._objective)

    def _var_symbol(self, variable: _Variable) -> _Symbol:
        symbol = self._var_symbols.get(variable)
        if symbol is None:
            symbol = self._var_symbols[variable] = _Symbol(_Kind.EXTERNAL)
        return symbol

    def _create_row(self, constraint: _LinearConstraint) -> tuple[_Row, _Symbol, Optional[_Symbol]]:
        row = _Row(constraint.constant)
        for variable, coeff in constraint.terms:
            if _near_zero(coeff):
                continue
            symbol = self._var_symbol(variable)
            basic = self._rows.get(symbol)
            if basic is not None:
                row.insert_row(basic, coeff)
            else:
                row.insert_symbol(symbol, coeff)

        other: Optional[_Symbol] = None
        if constraint.op is _Op.EQ:
            if constraint.strength < _REQUIRED:
                marker = _Symbol(_Kind.ERROR)
                other = _Symbol(_Kind.ERROR)
                row.insert_symbol(marker, -1.0)
                row.insert_symbol(other, 1.0)
                self._objective.insert_symbol(marker, constraint.strength)
                self._objective.insert_symbol(other, constraint.strength)
            else:
                marker = _Symbol(_Kind.DUMMY)
                row.insert_symbol(marker)
        else:
            coeff = 1.0 if constraint.op is _Op.LE else -1.0
            marker = _Symbol(_Kind.SLACK)
            row.insert_symbol(marker, coeff)
            if constraint.strength < _REQUIRED:
                other = _Symbol(_Kind.ERROR)
                row.insert_symbol(other, -coeff)
                self._objective.insert_symbol(other, constraint.strength)

        if row.constant < 0.0:
            row.reverse_sign()
        return row, marker, other

    @staticmethod
    def _choose_subject(row: _Row, marker: _Symbol, other: Optional[_Symbol]) -> Optional[_Symbol]:
        for symbol in row.cells:
            if symbol.kind is _Kind.EXTERNAL:
                return symbol
        for candidate in (marker, other):
            if (
                candidate is not None
                and candidate.kind in (_Kind.SLACK, _Kind.ERROR)
                and row.coefficient_for(candidate) < 0.0
            ):
                return candidate
        return None

    def _add_with_artificial_variable(self, row: _Row) -> bool:
        art = _Symbol(_Kind.SLACK)
        self._rows[art] = row.copy()
        self._artificial = row.copy()
        self._optimize(self._artificial)
        success = _near_zero(self._artificial.constant)
        self._artificial = None

        basic = self._rows.pop(art, None)
        if basic is not None:
            if not basic.cells:
                return success
            entering = next(
                (s for s in basic.cells if s.kind in (_Kind.SLACK, _Kind.ERROR)), None
            )
            if entering is None:
                return False
            basic.solve_for_pair(art, entering)
            self._substitute(entering, basic)
            self._rows[entering] = basic

        for other_row in self._rows.values():
            other_row.remove(art)
        self._objective.remove(art)
        return success

    def _substitute(self, symbol: _Symbol, row: _Row) -> None:
        for other_row in self._rows.values():
            other_row.substitute(symbol, row)
        self._objective.substitute(symbol, row)
        if self._artificial is not None:
            self._artificial.substitute(symbol, row)

    def _optimize(self, objective: _Row) -> None:
        while True:
            entering = next(
                (
                    symbol
                    for symbol, coeff in objective.cells.items()
                    if symbol.kind is not _Kind.DUMMY and coeff < 0.0
                ),
                None,
            )
            if entering is None:
                return
            leaving: Optional[_Symbol] = None
            best_ratio = math.inf
            for symbol, candidate in self._rows.items():
                if symbol.kind is _Kind.EXTERNAL:
                    continue
                coeff = candidate.coefficient_for(entering)
                if coeff < 0.0:
                    ratio = -candidate.constant / coeff
                    if ratio < best_ratio:
                        best_ratio = ratio
                        leaving = symbol
            if leaving is None:
                raise RuntimeError("layout objective is unbounded")
            pivot = self._rows.pop(leaving)
            pivot.solve_for_pair(leaving, entering)
            self._substitute(entering, pivot)
            self._rows[entering] = pivot


# --- constraints --------------------------------------------------------------------------------


class Constraint:
    """Size requirement for one chunk of a layout."""

    def apply(self, length: int) -> int:
        """The size this constraint gives out of ``length`` available cells."""
        raise TypeError(f"{type(self).__name__} is not a concrete constraint")

    def _target(self, available: int) -> tuple[_Op, float]:
        raise TypeError(f"{type(self).__name__} is not a concrete constraint")


@dataclass(frozen=True)
class Percentage(Constraint):
    percent: int

    def apply(self, length: int) -> int:
        return length * self.percent // 100

    def _target(self, available: int) -> tuple[_Op, float]:
        return _Op.EQ, (self.percent * available) / 100.0


@dataclass(frozen=True)
class Ratio(Constraint):
    numerator: int
    denominator: int

    def apply(self, length: int) -> int:
        # The result is narrowed to 16 bits, wrapping when it does not fit.
        return (self.numerator * length // self.denominator) & _U16_MAX

    def _target(self, available: int) -> tuple[_Op, float]:
        return _Op.EQ, float(available) * float(self.numerator) / float(self.denominator)


@dataclass(frozen=True)
class Length(Constraint):
    length: int

    def apply(self, length: int) -> int:
        return min(length, self.length)

    def _target(self, available: int) -> tuple[_Op, float]:
        return _Op.EQ, float(self.length)


@dataclass(frozen=True)
class Max(Constraint):
    value: int

    def apply(self, length: int) -> int:
        return min(length, self.value)

    def _target(self, available: int) -> tuple[_Op, float]:
        return _Op.LE, float(self.value)


@dataclass(frozen=True)
class Min(Constraint):
    value: int

    def apply(self, length: int) -> int:
        return max(length, self.value)

    def _target(self, available: int) -> tuple[_Op, float]:
        return _Op.GE, float(self.value)


# --- layout -------------------------------------------------------------------------------------


@dataclass(frozen=True)
class Layout:
    """Splits an area into chunks along one direction according to constraints."""

    direction: Direction = Direction.VERTICAL
    margin: Margin = field(default_factory=Margin)
    constraints: tuple[Constraint, ...] = ()
    expand_to_fill: bool = True

    def with_constraints(self, constraints: Iterable[Constraint]) -> Layout:
        items = tuple(constraints)
        for item in items:
            if not isinstance(item, Constraint):
                raise TypeError(f"expected a Constraint, got {type(item).__name__}")
        return replace(self, constraints=items)

    def with_margin(self, margin: int) -> Layout:
        return replace(self, margin=Margin(vertical=margin, horizontal=margin))

    def with_horizontal_margin(self, horizontal: int) -> Layout:
        return replace(self, margin=replace(self.margin, horizontal=horizontal))

    def with_vertical_margin(self, vertical: int) -> Layout:
        return replace(self, margin=replace(self.margin, vertical=vertical))

    def with_direction(self, direction: Direction) -> Layout:
        return replace(self, direction=direction)

    def with_expand_to_fill(self, expand_to_fill: bool) -> Layout:
        """Whether the last chunk grows to fill the remaining space."""
        return replace(self, expand_to_fill=expand_to_fill)

    def split(self, area: Rect) -> list[Rect]:
        """Divide ``area`` into one rect per constraint; results are cached."""
        return list(_split_cached(area, self))


@dataclass(frozen=True)
class _Element:
    x: _Variable = field(default_factory=_Variable)
    y: _Variable = field(default_factory=_Variable)
    width: _Variable = field(default_factory=_Variable)
    height: _Variable = field(default_factory=_Variable)

    def right(self) -> list[tuple[_Variable, float]]:
        return [(self.x, 1.0), (self.width, 1.0)]

    def bottom(self) -> list[tuple[_Variable, float]]:
        return [(self.y, 1.0), (self.height, 1.0)]


def _to_cells(value: float) -> int:
    if math.isnan(value) or math.copysign(1.0, value) < 0:
        return 0
    return min(int(value), _U16_MAX)


@functools.lru_cache(maxsize=None)
def _split_cached(area: Rect, layout: Layout) -> tuple[Rect, ...]:
    return tuple(_split(area, layout))


def _split(area: Rect, layout: Layout) -> list[Rect]:
    dest = area.inner(layout.margin)
    elements = [_Element() for _ in layout.constraints]
    horizontal = layout.direction is Direction.HORIZONTAL
    ccs: list[_LinearConstraint] = []

    for elt in elements:
        ccs.append(_relation([(elt.width, 1.0)], _Op.GE, 0.0))
        ccs.append(_relation([(elt.height, 1.0)], _Op.GE, 0.0))
        ccs.append(_relation([(elt.x, 1.0)], _Op.GE, dest.left()))
        ccs.append(_relation([(elt.y, 1.0)], _Op.GE, dest.top()))
        ccs.append(_relation(elt.right(), _Op.LE, dest.right()))
        ccs.append(_relation(elt.bottom(), _Op.LE, dest.bottom()))

    if elements:
        first = elements[0]
        if horizontal:
            ccs.append(_relation([(first.x, 1.0)], _Op.EQ, dest.left()))
        else:
            ccs.append(_relation([(first.y, 1.0)], _Op.EQ, dest.top()))
        if layout.expand_to_fill:
            last = elements[-1]
            if horizontal:
                ccs.append(_relation(last.right(), _Op.EQ, dest.right()))
            else:
                ccs.append(_relation(last.bottom(), _Op.EQ, dest.bottom()))

    for current, following in zip(elements, elements[1:]):
        if horizontal:
            ccs.append(_relation(current.right(), _Op.EQ, following.x))
        else:
            ccs.append(_relation(current.bottom(), _Op.EQ, following.y))

    for elt, constraint in zip(elements, layout.constraints):
        if horizontal:
            ccs.append(_relation([(elt.y, 1.0)], _Op.EQ, dest.y))
            ccs.append(_relation([(elt.height, 1.0)], _Op.EQ, dest.height))
            op, target = constraint._target(dest.width)
            ccs.append(_relation([(elt.width, 1.0)], op, target, _WEAK))
        else:
            ccs.append(_relation([(elt.x, 1.0)], _Op.EQ, dest.x))
            ccs.append(_relation([(elt.width, 1.0)], _Op.EQ, dest.width))
            op, target = constraint._target(dest.height)
            ccs.append(_relation([(elt.height, 1.0)], op, target, _WEAK))

    solver = _Solver()
    solver.add_constraints(ccs)

    results = [
        Rect(
            _to_cells(solver.value(elt.x)),
            _to_cells(solver.value(elt.y)),
            _to_cells(solver.value(elt.width)),
            _to_cells(solver.value(elt.height)),
        )
        for elt in elements
    ]

    if layout.expand_to_fill and results:
        # Absorb rounding by stretching the last chunk to the edge.
        last = results[-1]
        if horizontal:
            results[-1] = replace(last, width=dest.right() - last.x)
        else:
            results[-1] = replace(last, height=dest.bottom() - last.y)
    return results
import pytest

from termgrid.layout import (
    Constraint,
    Direction,
    Layout,
    Length,
    Margin,
    Max,
    Min,
    Percentage,
    Ratio,
    Rect,
)


def test_vertical_split_by_height():
    target = Rect(2, 2, 10, 10)
    chunks = (
        Layout()
        .with_direction(Direction.VERTICAL)
        .with_constraints([Percentage(10), Max(5), Min(1)])
        .split(target)
    )
    assert sum(r.height for r in chunks) == target.height
    for first, second in zip(chunks, chunks[1:]):
        assert first.y <= second.y


def test_split_length_and_min_vertically():
    chunks = (
        Layout()
        .with_direction(Direction.VERTICAL)
        .with_constraints([Length(5), Min(0)])
        .split(Rect(2, 2, 10, 10))
    )
    assert chunks == [Rect(2, 2, 10, 5), Rect(2, 7, 10, 5)]


def test_split_ratios_horizontally():
    chunks = (
        Layout()
        .with_direction(Direction.HORIZONTAL)
        .with_constraints([Ratio(1, 3), Ratio(2, 3)])
        .split(Rect(0, 0, 9, 2))
    )
    assert chunks == [Rect(0, 0, 3, 2), Rect(3, 0, 6, 2)]


@pytest.mark.parametrize(
    "constraints",
    [
        [Length(3), Percentage(50), Min(2)],
        [Min(1), Min(1), Min(1), Min(1)],
        [Max(4), Length(6), Max(20)],
    ],
)
def test_horizontal_split_partitions_the_area(constraints):
    area = Rect(1, 3, 20, 5)
    chunks = Layout().with_direction(Direction.HORIZONTAL).with_constraints(constraints).split(area)
    assert len(chunks) == len(constraints)
    assert chunks[0].x == area.x
    assert chunks[-1].right() == area.right()
    for first, second in zip(chunks, chunks[1:]):
        assert first.right() == second.x
    for chunk in chunks:
        assert chunk.y == area.y and chunk.height == area.height


def test_split_with_margin():
    chunks = Layout().with_margin(1).with_constraints([Min(0)]).split(Rect(0, 0, 10, 10))
    assert chunks == [Rect(1, 1, 8, 8)]


def test_split_with_horizontal_margin():
    chunks = Layout().with_horizontal_margin(2).with_constraints([Min(0)]).split(Rect(0, 0, 10, 4))
    assert chunks == [Rect(2, 0, 6, 4)]


def test_split_without_expanding_keeps_requested_size():
    chunks = (
        Layout()
        .with_direction(Direction.HORIZONTAL)
        .with_expand_to_fill(False)
        .with_constraints([Length(3)])
        .split(Rect(0, 0, 10, 2))
    )
    assert chunks == [Rect(0, 0, 3, 2)]


def test_split_without_constraints_is_empty():
    assert Layout().split(Rect(0, 0, 10, 10)) == []


def test_split_results_are_independent_copies():
    layout = Layout().with_constraints([Length(5), Min(0)])
    first = layout.split(Rect(0, 0, 10, 10))
    first.clear()
    assert layout.split(Rect(0, 0, 10, 10)) == [Rect(0, 0, 10, 5), Rect(0, 5, 10, 5)]


def test_builders_do_not_mutate_the_original():
    base = Layout()
    changed = base.with_direction(Direction.HORIZONTAL).with_vertical_margin(3)
    assert base.direction is Direction.VERTICAL
    assert base.margin == Margin(0, 0)
    assert changed.margin == Margin(vertical=3, horizontal=0)


def test_with_constraints_rejects_non_constraints():
    with pytest.raises(TypeError):
        Layout().with_constraints([5])


def test_rect_size_truncation():
    for width in range(256, 300):
        for height in range(256, 300):
            rect = Rect.clipped(0, 0, width, height)
            assert rect.area() <= 0xFFFF
            assert rect.width < width or rect.height < height
            assert abs(rect.width / rect.height - width / height) < 1.0

    rect = Rect.clipped(0, 0, 900, 100)
    assert rect.width != 900
    assert rect.height != 100
    assert rect.width < 900 or rect.height < 100


def test_rect_size_preservation():
    for width in range(256):
        for height in range(256):
            rect = Rect.clipped(0, 0, width, height)
            assert rect.width == width
            assert rect.height == height

    rect = Rect.clipped(0, 0, 300, 100)
    assert rect.width == 300
    assert rect.height == 100


def test_rect_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        Rect(-1, 0, 1, 1)
    with pytest.raises(ValueError):
        Rect(0, 0, 70000, 1)


def test_rect_edges_saturate():
    rect = Rect(65530, 65530, 10, 10)
    assert rect.right() == 65535
    assert rect.bottom() == 65535
    assert (rect.left(), rect.top()) == (65530, 65530)


def test_rect_inner():
    assert Rect(0, 0, 10, 6).inner(Margin(vertical=1, horizontal=2)) == Rect(2, 1, 6, 4)
    assert Rect(3, 3, 2, 2).inner(Margin(vertical=2, horizontal=2)) == Rect()


def test_rect_union_and_intersection():
    a = Rect(0, 0, 4, 4)
    b = Rect(2, 2, 4, 4)
    assert a.union(b) == Rect(0, 0, 6, 6)
    assert a.intersection(b) == Rect(2, 2, 2, 2)
    assert a.intersects(b)
    assert not a.intersects(Rect(4, 0, 2, 2))


def test_constraint_apply():
    assert Percentage(50).apply(11) == 5
    assert Ratio(1, 3).apply(10) == 3
    assert Length(4).apply(10) == 4
    assert Length(40).apply(10) == 10
    assert Max(4).apply(10) == 4
    assert Min(20).apply(10) == 20


def test_ratio_with_zero_denominator_fails():
    with pytest.raises(ZeroDivisionError):
        Ratio(1, 0).apply(10)


def test_base_constraint_cannot_be_applied():
    with pytest.raises(TypeError):
        Constraint().apply(10)
"""Unit tests for the box-layout engine.

These tests cover the container space-distribution rules, the repeating
column/row/grid generators, leaf-node restrictions, and the scoped parent
tracking of :class:`LayoutBuilder`.

Usage
-----
Run ``pytest tests/test_layout.py -v``. No fixtures beyond pytest's built-ins
are required.
"""

from __future__ import annotations

import pytest

from planner_pages.errors import ConfigurationError, UnknownTypeError
from planner_pages.layout import (
    Bounds,
    ColumnsNode,
    ComponentRegistry,
    ContainerNode,
    GridNode,
    LayoutBuilder,
    LayoutNode,
    RowsNode,
    SectionNode,
    TextNode,
)


def test_vertical_container_fills_height_exactly() -> None:
    """Fixed header and footer keep their size; the flex body takes the rest."""
    root = ContainerNode("root", direction="vertical")
    header = root.add_child(SectionNode("header", height=3))
    body = root.add_child(SectionNode("body", flex=1))
    footer = root.add_child(SectionNode("footer", height=2))

    root.compute_bounds(0, 0, 43, 55)

    assert header.computed_bounds == Bounds(0, 0, 43, 3)
    assert body.computed_bounds == Bounds(0, 3, 43, 50)
    assert footer.computed_bounds == Bounds(0, 53, 43, 2), (
        "footer should sit flush against the bottom edge"
    )


def test_flex_weights_floor_and_terminal_child_absorbs_remainder() -> None:
    root = ContainerNode(direction="vertical")
    small = root.add_child(SectionNode(flex=1))
    large = root.add_child(SectionNode(flex=2))

    root.compute_bounds(0, 0, 10, 10)

    assert small.computed_bounds is not None
    assert large.computed_bounds is not None
    assert small.computed_bounds.height == 3
    assert large.computed_bounds.height == 7, (
        "the last flex child should receive the rounding remainder"
    )


def test_horizontal_gaps_are_counted_and_children_tile() -> None:
    root = ContainerNode(direction="horizontal", gap=1)
    children = [root.add_child(SectionNode(flex=1)) for _ in range(3)]

    root.compute_bounds(0, 0, 43, 10)

    bounds = [child.computed_bounds for child in children]
    assert [b.col for b in bounds if b] == [0, 14, 28]
    assert [b.width for b in bounds if b] == [13, 13, 15]
    assert sum(b.width for b in bounds if b) + 2 == 43, (
        "children plus gaps should cover the container exactly"
    )


CHILD_MIXES: dict[str, list[tuple[str, int]]] = {
    "fixed-flex-fixed": [("fixed", 3), ("flex", 1), ("fixed", 2)],
    "equal-flex": [("flex", 1), ("flex", 1), ("flex", 1)],
    "weighted": [("flex", 2), ("fixed", 5), ("flex", 3), ("flex", 1)],
    "fixed-first": [("fixed", 1), ("fixed", 1), ("flex", 1)],
    "lone-flex": [("flex", 1)],
    "uneven-pair": [("flex", 1), ("flex", 7)],
}


@pytest.mark.parametrize("mix", list(CHILD_MIXES))
@pytest.mark.parametrize("gap", [0, 1, 2])
@pytest.mark.parametrize("direction", ["vertical", "horizontal"])
@pytest.mark.parametrize("extent", [37, 55])
def test_children_and_gaps_fill_the_container(
    mix: str, gap: int, direction: str, extent: int
) -> None:
    root = ContainerNode(direction=direction, gap=gap)
    size_key = "height" if direction == "vertical" else "width"
    children = [
        root.add_child(
            SectionNode(**({size_key: amount} if kind == "fixed" else {"flex": amount}))
        )
        for kind, amount in CHILD_MIXES[mix]
    ]

    root.compute_bounds(0, 0, extent, extent)

    spans = []
    for child in children:
        bounds = child.computed_bounds
        assert bounds is not None
        if direction == "vertical":
            spans.append((bounds.row, bounds.height))
        else:
            spans.append((bounds.col, bounds.width))
    for (start, size), (following, _) in zip(spans, spans[1:], strict=False):
        assert following == start + size + gap, "children should tile with one gap apart"
    assert spans[0][0] == 0
    assert sum(size for _, size in spans) + gap * (len(spans) - 1) == extent
    for (kind, amount), (_, size) in zip(CHILD_MIXES[mix], spans, strict=True):
        if kind == "fixed":
            assert size == amount


def test_children_without_size_or_flex_collapse_to_zero() -> None:
    root = ContainerNode(direction="vertical")
    collapsed = root.add_child(SectionNode("collapsed"))
    body = root.add_child(SectionNode("body", flex=1))

    root.compute_bounds(0, 0, 20, 20)

    assert collapsed.computed_bounds == Bounds(0, 0, 20, 0)
    assert body.computed_bounds == Bounds(0, 0, 20, 20)


def test_zero_total_weight_gives_flex_children_nothing() -> None:
    root = ContainerNode(direction="vertical")
    child = root.add_child(SectionNode(flex=0))

    root.compute_bounds(0, 0, 20, 20)

    assert child.computed_bounds is not None
    assert child.computed_bounds.height == 0


def test_max_wins_when_min_exceeds_max() -> None:
    node = LayoutNode(min_width=10, max_width=5)
    assert node.compute_bounds(0, 0, 3, 3).width == 5, (
        "max is applied after min, so it wins when they conflict"
    )


def test_zero_is_an_explicit_fixed_size() -> None:
    root = ContainerNode(direction="vertical")
    spacer = root.add_child(SectionNode(height=0, flex=1))
    body = root.add_child(SectionNode(flex=1))

    root.compute_bounds(0, 0, 10, 10)

    assert spacer.computed_bounds is not None
    assert body.computed_bounds is not None
    assert spacer.computed_bounds.height == 0
    assert body.computed_bounds.height == 10


@pytest.mark.parametrize(
    ("available", "expected"),
    [
        (35, [5, 5, 5, 5, 5, 5, 5]),
        (37, [5, 5, 5, 5, 5, 5, 7]),
    ],
)
def test_equal_columns_give_the_remainder_to_the_last(
    available: int, expected: list[int]
) -> None:
    columns = ColumnsNode(count=7)
    columns.compute_bounds(0, 0, available, 10)
    widths = [bounds.width for _, bounds in columns.iter_columns()]
    assert widths == expected


def test_explicit_row_heights_are_used_verbatim() -> None:
    rows = RowsNode(heights=[2, 5, 3])
    rows.compute_bounds(4, 6, 10, 30)
    assert [(b.row, b.height) for _, b in rows.iter_rows()] == [(6, 2), (8, 5), (13, 3)]
    assert rows.row_bounds(3) is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"count": 2, "widths": [1, 2]},
        {"count": 0},
        {"widths": []},
    ],
    ids=["neither", "both", "zero-count", "empty-widths"],
)
def test_columns_reject_invalid_configuration(kwargs: dict[str, object]) -> None:
    with pytest.raises(ConfigurationError):
        ColumnsNode(**kwargs)  # type: ignore[arg-type]


def test_seven_by_five_grid_tiles_its_bounds() -> None:
    grid = GridNode(cols=7, rows=5)
    grid.compute_bounds(0, 0, 43, 55)

    cells = list(grid.iter_cells())
    assert len(cells) == 35
    for row_idx in range(5):
        row = [bounds for r, _, bounds in cells if r == row_idx]
        assert sum(b.width for b in row) == 43, f"row {row_idx} should span the grid"
        for left, right in zip(row, row[1:], strict=False):
            assert left.right == right.col, "cells should be contiguous"
    last = grid.cell_bounds(4, 6)
    assert last is not None
    assert (last.right, last.bottom) == (43, 55), (
        "the last cell should reach the grid's far corner"
    )


def test_grid_with_gaps_keeps_last_cell_flush() -> None:
    grid = GridNode(cols=3, rows=2, col_gap=1, row_gap=1)
    grid.compute_bounds(0, 0, 20, 11)
    first = grid.cell_bounds(0, 0)
    last = grid.cell_bounds(1, 2)
    assert first == Bounds(0, 0, 6, 5)
    assert last == Bounds(14, 6, 6, 5)


def test_compute_bounds_is_idempotent() -> None:
    layout = LayoutBuilder()
    layout.header("header", lambda b: b.text("Title", flex=1), height=3)
    layout.columns(count=7, each=lambda b, i: b.text(str(i), flex=1), flex=1)

    layout.compute(0, 0, 43, 55)
    first = [(node.name, node.computed_bounds) for node in layout.root.walk()]
    layout.compute(0, 0, 43, 55)
    second = [(node.name, node.computed_bounds) for node in layout.root.walk()]

    assert first == second, "recomputing should reproduce the same tree"


def test_repeating_slots_survive_regeneration() -> None:
    layout = LayoutBuilder()
    layout.columns(count=2, each=lambda b, i: b.text(f"col {i}", flex=1), flex=1)
    layout.compute(0, 0, 10, 4)

    text = layout.root.find("column_1_content")
    assert text is not None
    label = text.children[0]
    assert isinstance(label, TextNode)
    assert label.computed_bounds == Bounds(5, 0, 5, 4)


def test_leaf_and_generated_nodes_refuse_children() -> None:
    with pytest.raises(ConfigurationError):
        TextNode("leaf").add_child(SectionNode())
    with pytest.raises(ConfigurationError):
        RowsNode(count=2).add_child(SectionNode())
    with pytest.raises(ConfigurationError):
        GridNode(cols=2, rows=2).add_child(SectionNode())


def test_builder_pops_scope_when_callback_raises() -> None:
    layout = LayoutBuilder()

    def explode(builder: LayoutBuilder) -> None:
        builder.text("partial", flex=1)
        msg = "boom"
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError, match="boom"):
        layout.section("broken", explode, flex=1)

    assert layout.depth == 1
    assert layout.current_parent is layout.root, (
        "the parent stack should unwind even when a callback fails"
    )


def test_builder_nests_children_under_the_open_parent() -> None:
    layout = LayoutBuilder()

    def sidebar(builder: LayoutBuilder) -> None:
        builder.nav_link("weekly", params={"week": 1}, label="1", flex=1)

    layout.section(
        "frame",
        lambda b: (b.sidebar("weeks", sidebar, width=2), b.content(lambda c: c.dot_grid(flex=1))),
        direction="horizontal",
        flex=1,
    )
    layout.compute(0, 0, 43, 55)

    weeks = layout.root.find("weeks")
    content = layout.root.find("content")
    assert weeks is not None
    assert content is not None
    assert weeks.computed_bounds == Bounds(0, 0, 2, 55)
    assert content.computed_bounds == Bounds(2, 0, 41, 55)


def test_components_check_required_parameters() -> None:
    components = ComponentRegistry()

    def titled_box(builder: LayoutBuilder, *, title: str) -> None:
        builder.text(title, flex=1)

    components.register("titled_box", titled_box, required=("title",))
    layout = LayoutBuilder(components)

    wrapper = layout.component("titled_box", height=4, title="Goals")
    assert wrapper.name == "titled_box"
    assert isinstance(wrapper.children[0], TextNode)

    with pytest.raises(ConfigurationError, match="title"):
        layout.component("titled_box", height=4)
    with pytest.raises(UnknownTypeError):
        layout.component("missing")

"""Nodes that synthesise repeated children: columns, rows, and grids.

All three quantise to whole grid units. Every generated element receives the
floored share of the available space and the final element on each axis takes
whatever integer division left over, so the elements tile their parent
exactly. Children are regenerated on every compute pass rather than
accumulated, so computing twice yields the same tree.
"""

from __future__ import annotations

import math
import typing as typ

from planner_pages.errors import ConfigurationError
from planner_pages.layout.models import Axis, Bounds, Number
from planner_pages.layout.nodes import LayoutNode, SectionNode

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def distribute_equal(available: Number, count: int) -> list[Number]:
    """Split ``available`` into ``count`` floored sizes, remainder to the last.

    >>> distribute_equal(37, 7)
    [5, 5, 5, 5, 5, 5, 7]
    """
    base = math.floor(available / count)
    sizes: list[Number] = [base] * count
    remainder = available - base * count
    if remainder > 0:
        sizes[-1] += remainder
    return sizes


class _RepeatingNode(LayoutNode):
    """Shared machinery for :class:`ColumnsNode` and :class:`RowsNode`."""

    axis: typ.ClassVar[Axis]
    child_prefix: typ.ClassVar[str]
    sizes_keyword: typ.ClassVar[str]

    def __init__(
        self,
        name: str | None = None,
        *,
        count: int | None = None,
        sizes: cabc.Sequence[Number] | None = None,
        gap: Number = 0,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, **constraints)
        kind = type(self).__name__
        if count is None and sizes is None:
            msg = f"{kind} requires either count or {self.sizes_keyword}."
            raise ConfigurationError(msg)
        if count is not None and sizes is not None:
            msg = f"{kind} accepts count or {self.sizes_keyword}, not both."
            raise ConfigurationError(msg)
        if count is not None and count < 1:
            msg = f"{kind} count must be at least 1, got {count}."
            raise ConfigurationError(msg)
        if sizes is not None and not sizes:
            msg = f"{kind} {self.sizes_keyword} must not be empty."
            raise ConfigurationError(msg)
        self.count = count
        self.sizes = list(sizes) if sizes is not None else None
        self.gap = gap
        self._slots: dict[int, SectionNode] = {}

    def add_child(self, child: LayoutNode) -> LayoutNode:
        msg = f"{type(self).__name__} generates its own children; place content via slot()."
        raise ConfigurationError(msg)

    def slot(self, index: int) -> SectionNode:
        """Return the persistent content section placed inside element ``index``.

        Generated elements are rebuilt on every compute pass; slots survive and
        are re-attached to the fresh element, filling it completely.
        """
        if not 0 <= index < self.element_count:
            msg = f"{type(self).__name__} has no element {index}."
            raise ConfigurationError(msg)
        if index not in self._slots:
            self._slots[index] = SectionNode(f"{self.child_prefix}_{index}_content", flex=1)
        return self._slots[index]

    @property
    def element_count(self) -> int:
        if self.sizes is not None:
            return len(self.sizes)
        return typ.cast("int", self.count)

    def compute_bounds(
        self, col: Number, row: Number, width: Number, height: Number
    ) -> Bounds:
        bounds = super().compute_bounds(col, row, width, height)
        n = self.element_count
        if self.sizes is not None:
            sizes = list(self.sizes)
        else:
            sizes = distribute_equal(bounds.size(self.axis) - self.gap * (n - 1), n)

        self.children = []
        offset = bounds.start(self.axis)
        for index, size in enumerate(sizes):
            child = SectionNode(f"{self.child_prefix}_{index}", **{self.axis: size})
            if index in self._slots:
                child.add_child(self._slots[index])
            self.children.append(child)
            if self.axis == "width":
                child.compute_bounds(offset, bounds.row, size, bounds.height)
            else:
                child.compute_bounds(bounds.col, offset, bounds.width, size)
            offset += size
            if index < n - 1:
                offset += self.gap
        return bounds

    def element_bounds(self, index: int) -> Bounds | None:
        if 0 <= index < len(self.children):
            return self.children[index].computed_bounds
        return None

    def iter_elements(self) -> cabc.Iterator[tuple[int, Bounds]]:
        for index, child in enumerate(self.children):
            if child.computed_bounds is not None:
                yield index, child.computed_bounds


class ColumnsNode(_RepeatingNode):
    """Horizontal run of equal or explicitly sized columns.

    Examples
    --------
    >>> days = ColumnsNode(count=7)
    >>> _ = days.compute_bounds(0, 0, 37, 10)
    >>> [bounds.width for _, bounds in days.iter_columns()]
    [5, 5, 5, 5, 5, 5, 7]
    """

    axis = "width"
    child_prefix = "column"
    sizes_keyword = "widths"

    def __init__(
        self,
        name: str | None = None,
        *,
        count: int | None = None,
        widths: cabc.Sequence[Number] | None = None,
        gap: Number = 0,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, count=count, sizes=widths, gap=gap, **constraints)

    @property
    def widths(self) -> list[Number] | None:
        return self.sizes

    @property
    def column_count(self) -> int:
        return self.element_count

    def column_bounds(self, index: int) -> Bounds | None:
        return self.element_bounds(index)

    def iter_columns(self) -> cabc.Iterator[tuple[int, Bounds]]:
        return self.iter_elements()


class RowsNode(_RepeatingNode):
    """Vertical stack of equal or explicitly sized rows."""

    axis = "height"
    child_prefix = "row"
    sizes_keyword = "heights"

    def __init__(
        self,
        name: str | None = None,
        *,
        count: int | None = None,
        heights: cabc.Sequence[Number] | None = None,
        gap: Number = 0,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, count=count, sizes=heights, gap=gap, **constraints)

    @property
    def heights(self) -> list[Number] | None:
        return self.sizes

    @property
    def row_count(self) -> int:
        return self.element_count

    def row_bounds(self, index: int) -> Bounds | None:
        return self.element_bounds(index)

    def iter_rows(self) -> cabc.Iterator[tuple[int, Bounds]]:
        return self.iter_elements()


class GridNode(LayoutNode):
    """Two-dimensional grid of cells addressed by ``(row_idx, col_idx)``.

    Cells share the floored cell size; the last column's width and the last
    row's height are measured from the cell's start to the grid's far edge so
    the grid tiles its bounds exactly.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        cols: int,
        rows: int,
        col_gap: Number = 0,
        row_gap: Number = 0,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, **constraints)
        if cols < 1 or rows < 1:
            msg = f"GridNode needs at least one column and row, got {cols}x{rows}."
            raise ConfigurationError(msg)
        self.num_cols = cols
        self.num_rows = rows
        self.col_gap = col_gap
        self.row_gap = row_gap
        self._cells: list[list[Bounds]] = []
        self._slots: dict[tuple[int, int], SectionNode] = {}

    def add_child(self, child: LayoutNode) -> LayoutNode:
        msg = "GridNode generates its own cells; place content via cell_slot()."
        raise ConfigurationError(msg)

    def cell_slot(self, row_idx: int, col_idx: int) -> SectionNode:
        """Return the persistent content section for cell ``(row_idx, col_idx)``."""
        if not (0 <= row_idx < self.num_rows and 0 <= col_idx < self.num_cols):
            msg = f"GridNode has no cell ({row_idx}, {col_idx})."
            raise ConfigurationError(msg)
        key = (row_idx, col_idx)
        if key not in self._slots:
            self._slots[key] = SectionNode(f"cell_{row_idx}_{col_idx}_content", flex=1)
        return self._slots[key]

    def compute_bounds(
        self, col: Number, row: Number, width: Number, height: Number
    ) -> Bounds:
        bounds = super().compute_bounds(col, row, width, height)
        cell_width = math.floor(
            (bounds.width - self.col_gap * (self.num_cols - 1)) / self.num_cols
        )
        cell_height = math.floor(
            (bounds.height - self.row_gap * (self.num_rows - 1)) / self.num_rows
        )

        self.children = []
        self._cells = []
        current_row = bounds.row
        for row_idx in range(self.num_rows):
            row_cells: list[Bounds] = []
            current_col = bounds.col
            last_row = row_idx == self.num_rows - 1
            for col_idx in range(self.num_cols):
                last_col = col_idx == self.num_cols - 1
                actual_width = (
                    bounds.width - (current_col - bounds.col) if last_col else cell_width
                )
                actual_height = (
                    bounds.height - (current_row - bounds.row) if last_row else cell_height
                )
                cell = SectionNode(f"cell_{row_idx}_{col_idx}")
                if (row_idx, col_idx) in self._slots:
                    cell.add_child(self._slots[(row_idx, col_idx)])
                row_cells.append(
                    cell.compute_bounds(current_col, current_row, actual_width, actual_height)
                )
                self.children.append(cell)
                current_col += cell_width + self.col_gap
            self._cells.append(row_cells)
            current_row += cell_height + self.row_gap
        return bounds

    def cell_bounds(self, row_idx: int, col_idx: int) -> Bounds | None:
        if 0 <= row_idx < len(self._cells) and 0 <= col_idx < len(self._cells[row_idx]):
            return self._cells[row_idx][col_idx]
        return None

    def iter_cells(self) -> cabc.Iterator[tuple[int, int, Bounds]]:
        for row_idx, row_cells in enumerate(self._cells):
            for col_idx, bounds in enumerate(row_cells):
                yield row_idx, col_idx, bounds


__all__ = ["ColumnsNode", "GridNode", "RowsNode", "distribute_equal"]

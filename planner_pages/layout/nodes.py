"""Layout tree nodes and the container space-distribution algorithm.

Every node describes a rectangular region measured in grid units. A tree is
built fresh for each page, then :meth:`LayoutNode.compute_bounds` is called on
the root with the page's usable area; each node records its resolved
:class:`~planner_pages.layout.models.Bounds` in ``computed_bounds``.

Example
-------
>>> root = ContainerNode(direction="vertical")
>>> header = root.add_child(SectionNode(name="header", height=3))
>>> body = root.add_child(SectionNode(name="body", flex=1))
>>> root.compute_bounds(0, 0, 43, 55)
Bounds(col=0, row=0, width=43, height=55)
>>> body.computed_bounds
Bounds(col=0, row=3, width=43, height=52)
"""

from __future__ import annotations

import math
import typing as typ

from planner_pages.errors import ConfigurationError
from planner_pages.layout.models import Axis, Bounds, Constraints, Direction, Number

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class LayoutNode:
    """Base node: a constraint set, ordered children, and computed bounds."""

    def __init__(self, name: str | None = None, **constraints: Number | None) -> None:
        self.name = name
        try:
            self.constraints = Constraints(**constraints)
        except TypeError as exc:
            msg = f"Unsupported layout constraint for {type(self).__name__}: {exc}"
            raise ConfigurationError(msg) from exc
        self.children: list[LayoutNode] = []
        self.computed_bounds: Bounds | None = None

    def add_child(self, child: LayoutNode) -> LayoutNode:
        """Append ``child`` and return it for chaining."""
        self.children.append(child)
        return child

    def has_fixed(self, axis: Axis) -> bool:
        return self.constraints.fixed(axis) is not None

    @property
    def is_flex(self) -> bool:
        return self.constraints.flex is not None

    @property
    def flex_weight(self) -> Number:
        return self.constraints.flex or 0

    def compute_bounds(
        self, col: Number, row: Number, width: Number, height: Number
    ) -> Bounds:
        """Resolve this node's rectangle inside the available space.

        Fixed sizes replace the available size, then min and max constraints
        are applied in that order. Subclasses extend this to place children.

        Parameters
        ----------
        col, row : Number
            Top-left corner of the available space in grid units.
        width, height : Number
            Available extent in grid units.

        Returns
        -------
        Bounds
            The node's bounds, also stored on ``computed_bounds``.
        """
        fixed_width = self.constraints.width
        fixed_height = self.constraints.height
        actual_width = self.constraints.clamp(
            width if fixed_width is None else fixed_width, "width"
        )
        actual_height = self.constraints.clamp(
            height if fixed_height is None else fixed_height, "height"
        )
        self.computed_bounds = Bounds(col, row, actual_width, actual_height)
        return self.computed_bounds

    def find(self, target: str) -> LayoutNode | None:
        """Return the first node named ``target`` in depth-first order."""
        if self.name == target:
            return self
        for child in self.children:
            found = child.find(target)
            if found is not None:
                return found
        return None

    def walk(self) -> cabc.Iterator[LayoutNode]:
        """Yield this node and every descendant in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} name={self.name!r} "
            f"constraints={self.constraints} bounds={self.computed_bounds}>"
        )


class ContainerNode(LayoutNode):
    """Arrange children along one axis using fixed sizes and flex weights.

    Fixed-size children receive their requested main-axis size. The space left
    after fixed sizes and gaps is shared between flex children in proportion
    to their weights, floored to whole units; the last flex child absorbs the
    remainder so the children exactly fill the container. Children with
    neither a fixed size nor a flex weight collapse to zero.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        direction: Direction | str = Direction.VERTICAL,
        gap: Number = 0,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, **constraints)
        self.direction = Direction.coerce(direction)
        self.gap = gap

    def compute_bounds(
        self, col: Number, row: Number, width: Number, height: Number
    ) -> Bounds:
        bounds = super().compute_bounds(col, row, width, height)
        if self.children:
            self._layout_children(bounds)
        return bounds

    def main_sizes(self, available: Number) -> list[Number]:
        """Return each child's main-axis size for ``available`` units.

        The sizes plus the gaps between children add up to ``available``
        whenever at least one child is flex-sized and the fixed children fit.
        """
        axis = self.direction.main_axis
        children = self.children
        total_gap = self.gap * (len(children) - 1)

        fixed_sum: Number = 0
        total_weight: Number = 0
        for child in children:
            fixed = child.constraints.fixed(axis)
            if fixed is not None:
                fixed_sum += fixed
            elif child.is_flex:
                total_weight += child.flex_weight

        remaining = max(0, available - fixed_sum - total_gap)
        terminal = self._terminal_flex_index(axis)

        sizes: list[Number] = []
        flex_consumed: Number = 0
        for index, child in enumerate(children):
            fixed = child.constraints.fixed(axis)
            if fixed is not None:
                size = fixed
            elif child.is_flex and total_weight > 0:
                if index == terminal:
                    size = remaining - flex_consumed
                else:
                    size = math.floor(remaining * child.flex_weight / total_weight)
                    flex_consumed += size
            else:
                size = 0
            sizes.append(size)
        return sizes

    def _terminal_flex_index(self, axis: Axis) -> int | None:
        """Return the index of the flex child that absorbs the remainder."""
        for index in range(len(self.children) - 1, -1, -1):
            child = self.children[index]
            if child.is_flex and not child.has_fixed(axis):
                return index
        return None

    def _layout_children(self, bounds: Bounds) -> None:
        axis = self.direction.main_axis
        sizes = self.main_sizes(bounds.size(axis))
        offset = bounds.start(axis)
        last = len(self.children) - 1
        for index, (child, size) in enumerate(zip(self.children, sizes, strict=True)):
            if self.direction is Direction.VERTICAL:
                child.compute_bounds(bounds.col, offset, bounds.width, size)
            else:
                child.compute_bounds(offset, bounds.row, size, bounds.height)
            offset += size
            if index < last:
                offset += self.gap


class SectionNode(ContainerNode):
    """Named region that may hold children; vertical unless told otherwise."""


class SidebarNode(SectionNode):
    """Fixed-width vertical strip, typically holding navigation tabs."""

    def __init__(self, name: str | None = None, *, width: Number, **kwargs: typ.Any) -> None:
        kwargs.pop("direction", None)
        super().__init__(name, direction=Direction.VERTICAL, width=width, **kwargs)


class HeaderNode(SectionNode):
    """Fixed-height horizontal strip at the top of its parent."""

    def __init__(self, name: str | None = None, *, height: Number, **kwargs: typ.Any) -> None:
        kwargs.pop("direction", None)
        super().__init__(name, direction=Direction.HORIZONTAL, height=height, **kwargs)


class FooterNode(HeaderNode):
    """Fixed-height horizontal strip at the bottom of its parent."""


__all__ = [
    "ContainerNode",
    "FooterNode",
    "HeaderNode",
    "LayoutNode",
    "SectionNode",
    "SidebarNode",
]

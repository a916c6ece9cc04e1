"""Fluent construction of layout trees.

``LayoutBuilder`` keeps a stack of open parents. Every factory appends its node
to the current parent; passing a ``build`` callback opens the node as the new
parent for the duration of the callback. The callback always receives the
builder explicitly::

    layout = LayoutBuilder()
    layout.header("title", lambda b: b.text("Week 12", style="title"), height=3)
    layout.content(lambda b: b.dot_grid())
    layout.compute(0, 0, 43, 55)
"""

from __future__ import annotations

import contextlib
import dataclasses as dc
import logging
import typing as typ

from planner_pages.errors import ConfigurationError, UnknownTypeError
from planner_pages.layout.content import (
    CustomNode,
    DividerNode,
    DotGridNode,
    FieldNode,
    GraphGridNode,
    NavLinkNode,
    RuledLinesNode,
    SpacerNode,
    TabNode,
    TextNode,
)
from planner_pages.layout.models import Direction
from planner_pages.layout.nodes import (
    ContainerNode,
    FooterNode,
    HeaderNode,
    LayoutNode,
    SectionNode,
    SidebarNode,
)
from planner_pages.layout.repeating import ColumnsNode, GridNode, RowsNode

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.layout.models import Bounds, Number

logger = logging.getLogger(__name__)

N = typ.TypeVar("N", bound=LayoutNode)
BuildFn = typ.Callable[["LayoutBuilder"], None]


@dc.dataclass(slots=True)
class ComponentDefinition:
    """Reusable layout fragment built into a wrapper section."""

    name: str
    build: cabc.Callable[..., None]
    required: tuple[str, ...] = ()

    def missing(self, params: cabc.Mapping[str, typ.Any]) -> list[str]:
        return [param for param in self.required if param not in params]


class ComponentRegistry:
    """Explicit name → :class:`ComponentDefinition` lookup."""

    def __init__(self) -> None:
        self._components: dict[str, ComponentDefinition] = {}

    def register(
        self,
        name: str,
        build: cabc.Callable[..., None],
        *,
        required: cabc.Iterable[str] = (),
    ) -> ComponentDefinition:
        definition = ComponentDefinition(name, build, tuple(required))
        self._components[name] = definition
        return definition

    def get(self, name: str) -> ComponentDefinition:
        try:
            return self._components[name]
        except KeyError:
            raise UnknownTypeError("component", name, list(self._components)) from None

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def names(self) -> list[str]:
        return sorted(self._components)


class LayoutBuilder:
    """Build a layout tree rooted at a vertical container named ``root``."""

    def __init__(self, components: ComponentRegistry | None = None) -> None:
        self.root = ContainerNode("root", direction=Direction.VERTICAL)
        self.components = components if components is not None else ComponentRegistry()
        self._stack: list[LayoutNode] = [self.root]

    @property
    def current_parent(self) -> LayoutNode:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Return the number of open parents, counting the root."""
        return len(self._stack)

    @contextlib.contextmanager
    def scope(self, node: N) -> cabc.Iterator[N]:
        """Make ``node`` the current parent until the block exits."""
        self._stack.append(node)
        try:
            yield node
        finally:
            self._stack.pop()

    def add(self, node: N, build: BuildFn | None = None) -> N:
        """Append ``node`` to the current parent and optionally fill it."""
        self.current_parent.add_child(node)
        if build is not None:
            with self.scope(node):
                build(self)
        return node

    def compute(self, col: Number, row: Number, width: Number, height: Number) -> Bounds:
        """Compute bounds for the whole tree."""
        return self.root.compute_bounds(col, row, width, height)

    def section(
        self,
        name: str | None = None,
        build: BuildFn | None = None,
        *,
        direction: Direction | str = Direction.VERTICAL,
        gap: Number = 0,
        **constraints: Number | None,
    ) -> SectionNode:
        return self.add(
            SectionNode(name, direction=direction, gap=gap, **constraints), build
        )

    def sidebar(
        self,
        name: str | None = None,
        build: BuildFn | None = None,
        *,
        width: Number,
        **kwargs: typ.Any,
    ) -> SidebarNode:
        return self.add(SidebarNode(name, width=width, **kwargs), build)

    def header(
        self,
        name: str | None = None,
        build: BuildFn | None = None,
        *,
        height: Number,
        **kwargs: typ.Any,
    ) -> HeaderNode:
        return self.add(HeaderNode(name, height=height, **kwargs), build)

    def footer(
        self,
        name: str | None = None,
        build: BuildFn | None = None,
        *,
        height: Number,
        **kwargs: typ.Any,
    ) -> FooterNode:
        return self.add(FooterNode(name, height=height, **kwargs), build)

    def content(self, build: BuildFn | None = None, **kwargs: typ.Any) -> SectionNode:
        """Add the main flexible region, named ``content`` with ``flex=1``."""
        kwargs.setdefault("flex", 1)
        return self.add(SectionNode("content", **kwargs), build)

    def columns(
        self,
        *,
        count: int | None = None,
        widths: cabc.Sequence[Number] | None = None,
        gap: Number = 0,
        each: cabc.Callable[[LayoutBuilder, int], None] | None = None,
        name: str | None = None,
        **constraints: Number | None,
    ) -> ColumnsNode:
        """Add columns; ``each(builder, index)`` fills every column's slot."""
        node = self.add(
            ColumnsNode(name, count=count, widths=widths, gap=gap, **constraints)
        )
        if each is not None:
            for index in range(node.column_count):
                with self.scope(node.slot(index)):
                    each(self, index)
        return node

    def rows(
        self,
        *,
        count: int | None = None,
        heights: cabc.Sequence[Number] | None = None,
        gap: Number = 0,
        each: cabc.Callable[[LayoutBuilder, int], None] | None = None,
        name: str | None = None,
        **constraints: Number | None,
    ) -> RowsNode:
        """Add rows; ``each(builder, index)`` fills every row's slot."""
        node = self.add(
            RowsNode(name, count=count, heights=heights, gap=gap, **constraints)
        )
        if each is not None:
            for index in range(node.row_count):
                with self.scope(node.slot(index)):
                    each(self, index)
        return node

    def grid(
        self,
        *,
        cols: int,
        rows: int,
        col_gap: Number = 0,
        row_gap: Number = 0,
        each: cabc.Callable[[LayoutBuilder, int, int], None] | None = None,
        name: str | None = None,
        **constraints: Number | None,
    ) -> GridNode:
        """Add a grid; ``each(builder, row_idx, col_idx)`` fills every cell."""
        node = self.add(
            GridNode(
                name, cols=cols, rows=rows, col_gap=col_gap, row_gap=row_gap, **constraints
            )
        )
        if each is not None:
            for row_idx in range(rows):
                for col_idx in range(cols):
                    with self.scope(node.cell_slot(row_idx, col_idx)):
                        each(self, row_idx, col_idx)
        return node

    def text(self, content: str, **kwargs: typ.Any) -> TextNode:
        return self.add(TextNode(content, **kwargs))

    def field(self, name: str | None = None, **kwargs: typ.Any) -> FieldNode:
        return self.add(FieldNode(name, **kwargs))

    def dot_grid(self, **kwargs: typ.Any) -> DotGridNode:
        return self.add(DotGridNode(**kwargs))

    def graph_grid(self, **kwargs: typ.Any) -> GraphGridNode:
        return self.add(GraphGridNode(**kwargs))

    def ruled_lines(self, **kwargs: typ.Any) -> RuledLinesNode:
        return self.add(RuledLinesNode(**kwargs))

    def spacer(self, **kwargs: typ.Any) -> SpacerNode:
        return self.add(SpacerNode(**kwargs))

    def divider(self, **kwargs: typ.Any) -> DividerNode:
        return self.add(DividerNode(**kwargs))

    def nav_link(self, dest: str, **kwargs: typ.Any) -> NavLinkNode:
        return self.add(NavLinkNode(dest, **kwargs))

    def tab(self, dest: str | cabc.Sequence[str], **kwargs: typ.Any) -> TabNode:
        return self.add(TabNode(dest, **kwargs))

    def custom(
        self,
        draw: cabc.Callable[[typ.Any, tuple[float, float, float, float]], None],
        **kwargs: typ.Any,
    ) -> CustomNode:
        return self.add(CustomNode(draw, **kwargs))

    def component(
        self,
        name: str,
        *,
        width: Number | None = None,
        height: Number | None = None,
        flex: Number | None = None,
        **params: typ.Any,
    ) -> SectionNode:
        """Build the registered component ``name`` inside a wrapper section.

        Raises
        ------
        UnknownTypeError
            If no component called ``name`` is registered.
        ConfigurationError
            If a required component parameter is missing.
        """
        definition = self.components.get(name)
        missing = definition.missing(params)
        if missing:
            msg = f"Missing required parameters for component '{name}': {', '.join(missing)}"
            raise ConfigurationError(msg)
        logger.debug("Building component %s with %s", name, sorted(params))
        wrapper = SectionNode(name, width=width, height=height, flex=flex)
        self.current_parent.add_child(wrapper)
        with self.scope(wrapper):
            definition.build(self, **params)
        return wrapper


__all__ = ["ComponentDefinition", "ComponentRegistry", "LayoutBuilder"]

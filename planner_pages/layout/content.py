"""Leaf layout nodes describing what gets drawn inside a computed region.

Content nodes take part in layout like any other node but can never hold
children. Each one carries just enough information for
:class:`~planner_pages.layout.renderer.LayoutRenderer` to issue surface calls.
"""

from __future__ import annotations

import typing as typ

from planner_pages.errors import ConfigurationError
from planner_pages.layout.nodes import LayoutNode

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.layout.models import Number

Align = typ.Literal["left", "center", "right"]
VAlign = typ.Literal["top", "center", "bottom"]
LineStyle = typ.Literal["solid", "dashed", "dotted"]


class ContentNode(LayoutNode):
    """Base class for leaves; adding a child is a configuration error."""

    element_type: typ.ClassVar[str] = "content"

    def __init__(
        self,
        name: str | None = None,
        *,
        style: str | None = None,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, **constraints)
        self.style = style

    def add_child(self, child: LayoutNode) -> LayoutNode:
        msg = f"{type(self).__name__} cannot have children."
        raise ConfigurationError(msg)


class TextNode(ContentNode):
    """Styled text placed inside its bounds."""

    element_type = "text"

    def __init__(
        self,
        content: str,
        *,
        style: str = "body",
        align: Align = "left",
        valign: VAlign = "top",
        name: str | None = None,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, style=style, **constraints)
        self.content = content
        self.align = align
        self.valign = valign


class FieldNode(ContentNode):
    """Empty writable area with optional guide lines, background, and label."""

    element_type = "field"

    def __init__(
        self,
        name: str | None = None,
        *,
        lines: int | None = None,
        line_style: LineStyle = "solid",
        background: typ.Literal["blank", "dot_grid", "graph_grid"] = "blank",
        label: str | None = None,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, **constraints)
        self.lines = lines
        self.line_style = line_style
        self.background = background
        self.label = label


class DotGridNode(ContentNode):
    """Dot pattern aligned to the page grid, one dot every ``spacing`` units."""

    element_type = "dot_grid"

    def __init__(
        self, name: str | None = None, *, spacing: Number = 1, **constraints: Number | None
    ) -> None:
        super().__init__(name, **constraints)
        self.spacing = spacing


class GraphGridNode(ContentNode):
    """Square line grid, one line every ``spacing`` units on both axes."""

    element_type = "graph_grid"

    def __init__(
        self, name: str | None = None, *, spacing: Number = 1, **constraints: Number | None
    ) -> None:
        super().__init__(name, **constraints)
        self.spacing = spacing


class RuledLinesNode(ContentNode):
    """Horizontal writing lines, one every ``spacing`` units."""

    element_type = "ruled_lines"

    def __init__(
        self,
        name: str | None = None,
        *,
        spacing: Number = 1,
        line_style: LineStyle = "solid",
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, **constraints)
        self.spacing = spacing
        self.line_style = line_style


class SpacerNode(ContentNode):
    """Invisible node that only occupies space."""

    element_type = "spacer"


class DividerNode(ContentNode):
    """Line drawn through the middle of its bounds."""

    element_type = "divider"

    def __init__(
        self,
        name: str | None = None,
        *,
        orientation: typ.Literal["horizontal", "vertical"] = "horizontal",
        line_style: LineStyle = "solid",
        thickness: float = 0.5,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, **constraints)
        self.orientation = orientation
        self.line_style = line_style
        self.thickness = thickness


class NavLinkNode(ContentNode):
    """Clickable label that jumps to the page matching ``dest`` and ``params``.

    ``dest`` is a page type (or explicit page id) and ``params`` narrows the
    match, e.g. ``NavLinkNode("weekly", params={"week": 12}, label="W12")``.
    """

    element_type = "nav_link"

    def __init__(
        self,
        dest: str,
        *,
        params: cabc.Mapping[str, typ.Any] | None = None,
        label: str | None = None,
        style: str = "nav_link",
        name: str | None = None,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, style=style, **constraints)
        self.dest = dest
        self.params = dict(params or {})
        self.label = label


class TabNode(ContentNode):
    """Sidebar tab linking to one destination or cycling through a group.

    When ``cycle`` names a declared group and the current page belongs to it,
    the tab links to the next page of that group; otherwise it links to the
    first resolvable entry of ``dest``.
    """

    element_type = "tab"

    def __init__(
        self,
        dest: str | cabc.Sequence[str],
        *,
        label: str,
        cycle: str | None = None,
        rotation: float = -90,
        style: str = "tab",
        name: str | None = None,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, style=style, **constraints)
        self.dest = dest
        self.label = label
        self.cycle = cycle
        self.rotation = rotation

    @property
    def destinations(self) -> list[str]:
        if isinstance(self.dest, str):
            return [self.dest]
        return list(self.dest)


class CustomNode(ContentNode):
    """Escape hatch: ``draw(surface, rect)`` is called with the point rectangle."""

    element_type = "custom"

    def __init__(
        self,
        draw: cabc.Callable[[typ.Any, tuple[float, float, float, float]], None],
        *,
        name: str | None = None,
        **constraints: Number | None,
    ) -> None:
        super().__init__(name, **constraints)
        self.draw = draw


__all__ = [
    "ContentNode",
    "CustomNode",
    "DividerNode",
    "DotGridNode",
    "FieldNode",
    "GraphGridNode",
    "NavLinkNode",
    "RuledLinesNode",
    "SpacerNode",
    "TabNode",
    "TextNode",
]

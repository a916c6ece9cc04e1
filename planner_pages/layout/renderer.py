"""Turn a computed layout tree into surface drawing calls.

Grid-unit bounds are converted to points through :class:`GridSystem`. Link
targets are looked up through the page's :class:`LinkResolver`; when a target
does not resolve the label is still drawn, just without a link annotation.
"""

from __future__ import annotations

import logging
import typing as typ

from planner_pages.layout.content import (
    CustomNode,
    DividerNode,
    DotGridNode,
    FieldNode,
    GraphGridNode,
    NavLinkNode,
    RuledLinesNode,
    TabNode,
    TextNode,
)

if typ.TYPE_CHECKING:
    from planner_pages.grid import GridSystem, PointRect
    from planner_pages.layout.nodes import LayoutNode
    from planner_pages.links.resolver import LinkResolver
    from planner_pages.surface import Point, Surface
    from planner_pages.themes import StyleResolver

logger = logging.getLogger(__name__)


def _steps(start: float, length: float, step: float) -> list[float]:
    """Return ``start, start + step, ...`` up to and including ``start + length``."""
    if step <= 0:
        return []
    count = int(length / step + 1e-9)
    return [round(start + index * step, 4) for index in range(count + 1)]


class LayoutRenderer:
    """Draw a computed layout tree onto a surface."""

    def __init__(
        self,
        surface: Surface,
        grid: GridSystem,
        styles: StyleResolver,
        resolver: LinkResolver | None = None,
    ) -> None:
        self.surface = surface
        self.grid = grid
        self.styles = styles
        self.resolver = resolver

    def render(self, root: LayoutNode) -> None:
        """Render ``root`` and its descendants in pre-order."""
        for node in root.walk():
            if node.computed_bounds is None:
                continue
            self.render_node(node, self.grid.rect(node.computed_bounds))

    def render_node(self, node: LayoutNode, rect: PointRect) -> None:
        match node:
            case TextNode():
                self._text(node, rect)
            case DotGridNode():
                self._dot_grid(rect, node.spacing)
            case GraphGridNode():
                self._graph_grid(rect, node.spacing)
            case RuledLinesNode():
                self._ruled_lines(node, rect)
            case DividerNode():
                self._divider(node, rect)
            case FieldNode():
                self._field(node, rect)
            case NavLinkNode():
                self._nav_link(node, rect)
            case TabNode():
                self._tab(node, rect)
            case CustomNode():
                node.draw(self.surface, rect)
            case _:
                # Containers and spacers draw nothing themselves.
                pass

    def _text(self, node: TextNode, rect: PointRect) -> None:
        style = self.styles.resolve("text", style=node.style)
        self.surface.draw_text(
            node.content,
            rect,
            size=style.get("font_size", 10),
            color=style.get("color", "000000"),
            align=node.align,
            valign=node.valign,
            bold=style.get("font_weight") == "bold",
        )

    def _dot_grid(self, rect: PointRect, spacing: float) -> None:
        style = self.styles.resolve("dot_grid")
        x, y, width, height = rect
        step = spacing * self.grid.spacing
        centers: list[Point] = [
            (cx, cy) for cx in _steps(x, width, step) for cy in _steps(y, height, step)
        ]
        self.surface.draw_dots(
            centers,
            radius=style.get("dot_radius", 0.5),
            color=style.get("dot_color", "CCCCCC"),
        )

    def _graph_grid(self, rect: PointRect, spacing: float) -> None:
        style = self.styles.resolve("graph_grid")
        x, y, width, height = rect
        step = spacing * self.grid.spacing
        color = style.get("line_color", "CCCCCC")
        line_width = style.get("line_width", 0.25)
        for cx in _steps(x, width, step):
            self.surface.draw_line((cx, y), (cx, y + height), color=color, width=line_width)
        for cy in _steps(y, height, step):
            self.surface.draw_line((x, cy), (x + width, cy), color=color, width=line_width)

    def _ruled_lines(self, node: RuledLinesNode, rect: PointRect) -> None:
        style = self.styles.resolve("ruled_lines")
        x, y, width, height = rect
        dash = None if node.line_style == "solid" else node.line_style
        for cy in _steps(y, height, node.spacing * self.grid.spacing):
            self.surface.draw_line(
                (x, cy),
                (x + width, cy),
                color=style.get("line_color", "CCCCCC"),
                width=style.get("line_width", 0.25),
                dash=dash,
            )

    def _divider(self, node: DividerNode, rect: PointRect) -> None:
        style = self.styles.resolve("divider")
        x, y, width, height = rect
        if node.orientation == "horizontal":
            start, end = (x, y + height / 2), (x + width, y + height / 2)
        else:
            start, end = (x + width / 2, y), (x + width / 2, y + height)
        self.surface.draw_line(
            start,
            end,
            color=style.get("color", "CCCCCC"),
            width=style.get("thickness", node.thickness),
            dash=None if node.line_style == "solid" else node.line_style,
        )

    def _field(self, node: FieldNode, rect: PointRect) -> None:
        style = self.styles.resolve("field")
        x, y, width, height = rect
        if node.background == "dot_grid":
            self._dot_grid(rect, 1)
        elif node.background == "graph_grid":
            self._graph_grid(rect, 1)
        if node.lines:
            spacing = height / (node.lines + 1)
            for index in range(1, node.lines + 1):
                self.surface.draw_line(
                    (x, y + index * spacing),
                    (x + width, y + index * spacing),
                    color=style.get("line_color", "CCCCCC"),
                    width=0.25,
                    dash=None if node.line_style == "solid" else node.line_style,
                )
        if node.label:
            self.surface.draw_text(
                node.label,
                (x + 2, y + 2, max(0.0, width - 4), 12),
                size=8,
                color=style.get("label_color", "888888"),
            )

    def _link(self, key: str | None, rect: PointRect) -> None:
        if key is None or self.resolver is None or rect[2] <= 0 or rect[3] <= 0:
            return
        page_number = self.resolver.page_number(key)
        if page_number is not None:
            self.surface.add_link(rect, page_number)

    def _nav_link(self, node: NavLinkNode, rect: PointRect) -> None:
        style = self.styles.resolve("nav_link", style=node.style)
        if node.label:
            self.surface.draw_text(
                node.label,
                rect,
                size=style.get("font_size", 8),
                color=style.get("color", "666666"),
                align="center",
                valign="center",
            )
        key = self.resolver.resolve(node.dest, **node.params) if self.resolver else None
        if key is None:
            logger.debug("Nav link to %s %s did not resolve", node.dest, node.params)
        self._link(key, rect)

    def _tab(self, node: TabNode, rect: PointRect) -> None:
        style = self.styles.resolve("tab", style=node.style)
        self.surface.draw_text(
            node.label,
            rect,
            size=style.get("font_size", 8),
            color=style.get("color", "666666"),
            align="center",
            valign="center",
            rotation=node.rotation,
        )
        self._link(self._tab_target(node), rect)

    def _tab_target(self, node: TabNode) -> str | None:
        if self.resolver is None:
            return None
        if node.cycle is not None and self.resolver.in_group(node.cycle):
            return self.resolver.next_in_group(node.cycle)
        for dest in node.destinations:
            key = self.resolver.resolve(dest)
            if key is not None:
                return key
        return None


__all__ = ["LayoutRenderer"]

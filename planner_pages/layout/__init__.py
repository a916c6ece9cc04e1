"""Constraint box-layout engine measured in grid units."""

from __future__ import annotations

from .builder import ComponentDefinition, ComponentRegistry, LayoutBuilder
from .content import (
    ContentNode,
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
from .models import Bounds, Constraints, Direction
from .nodes import (
    ContainerNode,
    FooterNode,
    HeaderNode,
    LayoutNode,
    SectionNode,
    SidebarNode,
)
from .renderer import LayoutRenderer
from .repeating import ColumnsNode, GridNode, RowsNode

__all__ = [
    "Bounds",
    "ColumnsNode",
    "ComponentDefinition",
    "ComponentRegistry",
    "Constraints",
    "ContainerNode",
    "ContentNode",
    "CustomNode",
    "Direction",
    "DividerNode",
    "DotGridNode",
    "FieldNode",
    "FooterNode",
    "GraphGridNode",
    "GridNode",
    "HeaderNode",
    "LayoutBuilder",
    "LayoutNode",
    "LayoutRenderer",
    "NavLinkNode",
    "RowsNode",
    "RuledLinesNode",
    "SectionNode",
    "SidebarNode",
    "SpacerNode",
    "TabNode",
    "TextNode",
]

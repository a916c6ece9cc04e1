"""Assemble declared bookmarks against final page numbers.

Leaf entries whose destination never became a page are dropped. Sections
keep their place even without a destination, in which case they render as
non-clickable headers over their children.

Examples
--------
>>> from planner_pages.declarations import OutlineDeclaration
>>> weeks = OutlineDeclaration("Weeks")
>>> _ = weeks.add_child(OutlineDeclaration("Week 1", "week_1"))
>>> _ = weeks.add_child(OutlineDeclaration("Week 99", "week_99"))
>>> tree = assemble_outline([weeks], {"week_1": 12})
>>> emit_outline(tree)
[(1, 'Weeks', None), (2, 'Week 1', 12)]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.declarations.models import OutlineDeclaration
    from planner_pages.surface import TocEntry

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class OutlineNode:
    """A resolved bookmark: title, target page (``None`` for headers), children."""

    title: str
    page: int | None = None
    children: list[OutlineNode] = dc.field(default_factory=list)

    def walk(self, level: int = 1) -> cabc.Iterator[tuple[int, OutlineNode]]:
        yield level, self
        for child in self.children:
            yield from child.walk(level + 1)


def _assemble(
    declaration: OutlineDeclaration, page_numbers: cabc.Mapping[str, int]
) -> OutlineNode | None:
    page = page_numbers.get(declaration.dest) if declaration.dest is not None else None
    if not declaration.is_section:
        if page is None:
            logger.debug(
                "Dropping bookmark %r: destination %r is not a page",
                declaration.title,
                declaration.dest,
            )
            return None
        return OutlineNode(declaration.title, page)
    children = [
        node
        for child in declaration.children
        if (node := _assemble(child, page_numbers)) is not None
    ]
    return OutlineNode(declaration.title, page, children)


def assemble_outline(
    declarations: cabc.Iterable[OutlineDeclaration],
    page_numbers: cabc.Mapping[str, int],
) -> list[OutlineNode]:
    """Resolve the declared bookmark forest to page numbers."""
    return [
        node
        for declaration in declarations
        if (node := _assemble(declaration, page_numbers)) is not None
    ]


def emit_outline(nodes: cabc.Iterable[OutlineNode]) -> list[TocEntry]:
    """Flatten an outline forest to ``(level, title, page)`` rows, levels from 1."""
    return [
        (level, node.title, node.page)
        for root in nodes
        for level, node in root.walk()
    ]


__all__ = ["OutlineNode", "assemble_outline", "emit_outline"]

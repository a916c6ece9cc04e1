"""Blank grid pages, bound together by a cycling group and its tab."""

from __future__ import annotations

import typing as typ

from planner_pages.pages.frame import GRID_PAGE_TYPES, planner_frame

if typ.TYPE_CHECKING:
    from planner_pages.layout.builder import LayoutBuilder
    from planner_pages.pages.context import PageContext
    from planner_pages.pages.registry import PageTypeRegistry

GRID_DESCRIPTIONS = {
    "grid_dot": ("Dot Grid", "One dot every 5 mm, aligned to the page grid."),
    "grid_graph": ("Graph Grid (5mm)", "Square lines every 5 mm."),
    "grid_lined": ("Lined", "Ruled writing lines every 5 mm."),
}


def build_grids_overview(ctx: PageContext, layout: LayoutBuilder) -> None:
    entries = [name for name in GRID_PAGE_TYPES if name in GRID_DESCRIPTIONS]

    def entry(builder: LayoutBuilder, index: int) -> None:
        title, description = GRID_DESCRIPTIONS[entries[index]]
        builder.nav_link(entries[index], label=title, style="subtitle", height=2)
        builder.text(description, style="body", flex=1)

    def body(builder: LayoutBuilder) -> None:
        builder.rows(count=len(entries), gap=1, each=entry, height=len(entries) * 5)
        builder.dot_grid(flex=1)

    planner_frame(ctx, layout, title="Grids Overview", body=body)


def _grid_page(
    page_type: str, fill: typ.Callable[[LayoutBuilder], object]
) -> typ.Callable[[PageContext, LayoutBuilder], None]:
    title = GRID_DESCRIPTIONS[page_type][0]

    def build(ctx: PageContext, layout: LayoutBuilder) -> None:
        planner_frame(ctx, layout, title=title, body=fill)

    return build


build_grid_dot = _grid_page("grid_dot", lambda b: b.dot_grid(flex=1))
build_grid_graph = _grid_page("grid_graph", lambda b: b.graph_grid(flex=1))
build_grid_lined = _grid_page("grid_lined", lambda b: b.ruled_lines(flex=1))


def register(registry: PageTypeRegistry) -> None:
    registry.register("grids_overview", build_grids_overview, title="Grids Overview")
    registry.register("grid_dot", build_grid_dot, title="Dot Grid")
    registry.register("grid_graph", build_grid_graph, title="Graph Grid (5mm)")
    registry.register("grid_lined", build_grid_lined, title="Lined")


__all__ = [
    "GRID_DESCRIPTIONS",
    "build_grid_dot",
    "build_grid_graph",
    "build_grid_lined",
    "build_grids_overview",
    "register",
]

"""Tracker, reference, and user-defined collection pages."""

from __future__ import annotations

import typing as typ

from planner_pages.pages.frame import planner_frame

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.grid import PointRect
    from planner_pages.layout.builder import LayoutBuilder
    from planner_pages.pages.context import PageContext
    from planner_pages.pages.registry import PageTypeRegistry
    from planner_pages.surface import Surface

TRACKER_IDEAS = (
    "Habits",
    "Sleep",
    "Water",
    "Exercise",
    "Reading",
    "Mood",
    "Spending",
    "Gratitude",
)
TRACKER_LABEL_WIDTH = 8
RULER_STEP = 5


def build_tracker_example(ctx: PageContext, layout: LayoutBuilder) -> None:
    def tracker(builder: LayoutBuilder, index: int) -> None:
        def cells(inner: LayoutBuilder) -> None:
            inner.text(TRACKER_IDEAS[index], style="label", width=TRACKER_LABEL_WIDTH)
            inner.graph_grid(flex=1)

        builder.section(None, cells, direction="horizontal", flex=1)

    def body(builder: LayoutBuilder) -> None:
        builder.rows(count=len(TRACKER_IDEAS), gap=1, each=tracker, flex=1)

    planner_frame(
        ctx, layout, title="Tracker Ideas", subtitle="One square per day", body=body
    )


def build_reference(ctx: PageContext, layout: LayoutBuilder) -> None:
    grid = ctx.grid
    facts = (
        f"Page: {grid.page_width:g} x {grid.page_height:g} pt",
        f"Grid: {grid.cols} x {grid.rows} boxes",
        f"Box size: {grid.spacing:g} pt (5 mm)",
        f"Pages in this planner: {ctx.total_pages}",
    )

    def fact(builder: LayoutBuilder, index: int) -> None:
        builder.text(facts[index], style="body", flex=1)

    def ruler(builder: LayoutBuilder) -> None:
        builder.custom(_ruler_ticks(grid.spacing), flex=1)

    def body(builder: LayoutBuilder) -> None:
        builder.rows(count=len(facts), each=fact, height=len(facts) * 2)
        builder.divider(height=1)
        builder.section("ruler", ruler, height=2)
        builder.graph_grid(name="calibration", flex=1)

    planner_frame(ctx, layout, title="Calibration & Reference", body=body)


def _ruler_ticks(spacing: float) -> cabc.Callable[[Surface, PointRect], None]:
    def draw(surface: Surface, rect: PointRect) -> None:
        x, y, width, height = rect
        boxes = int(width / spacing)
        for index in range(boxes + 1):
            tick = height if index % RULER_STEP == 0 else height / 2
            left = x + index * spacing
            surface.draw_line((left, y), (left, y + tick), color="888888", width=0.5)
            if index and index % RULER_STEP == 0:
                surface.draw_text(
                    str(index), (left + 1, y, spacing * 2, height), size=6, color="888888"
                )

    return draw


def build_collection(ctx: PageContext, layout: LayoutBuilder) -> None:
    def body(builder: LayoutBuilder) -> None:
        builder.ruled_lines(flex=1)

    planner_frame(
        ctx,
        layout,
        title=ctx.get("collection_title") or "Collection",
        subtitle=ctx.get("collection_subtitle"),
        body=body,
    )


def register(registry: PageTypeRegistry) -> None:
    registry.register("tracker_example", build_tracker_example, title="Tracker Ideas")
    registry.register("reference", build_reference, title="Calibration & Reference")
    registry.register("collection", build_collection, title="{{ collection_title }}")


__all__ = ["build_collection", "build_reference", "build_tracker_example", "register"]

"""Navigation chrome shared by the built-in page types.

Every page is laid out as a week sidebar on the left, the page body in the
middle (a header row above the content), and a column of tabs on the right.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.layout.builder import BuildFn, LayoutBuilder
    from planner_pages.pages.context import PageContext

WEEK_SIDEBAR_WIDTH = 2
TAB_SIDEBAR_WIDTH = 1
HEADER_HEIGHT = 3
NAV_ARROW_WIDTH = 2

GRIDS_GROUP = "grids"
GRID_PAGE_TYPES = ("grids_overview", "grid_dot", "grid_graph", "grid_lined")

TABS: tuple[tuple[str, tuple[str, ...], str | None], ...] = (
    ("Index", ("index_1",), None),
    ("Year", ("year_events",), None),
    ("Best", ("year_highlights",), None),
    ("Years", ("multi_year",), None),
    ("Grids", GRID_PAGE_TYPES, GRIDS_GROUP),
    ("Ref", ("reference",), None),
)


def week_sidebar(ctx: PageContext) -> BuildFn:
    """Return a builder for the week-number column of ``ctx``'s year."""
    current = ctx.get("week_num")

    def fill(builder: LayoutBuilder, index: int) -> None:
        number = index + 1
        if number == current:
            builder.text(
                str(number), style="label", align="center", valign="center", flex=1
            )
        else:
            builder.nav_link(
                "weekly", params={"week": number}, label=str(number), flex=1
            )

    def build(builder: LayoutBuilder) -> None:
        builder.rows(count=ctx.total_weeks, each=fill, name="weeks", flex=1)

    return build


def tab_sidebar(builder: LayoutBuilder) -> None:
    def fill(inner: LayoutBuilder, index: int) -> None:
        label, destinations, cycle = TABS[index]
        inner.tab(list(destinations), label=label, cycle=cycle, flex=1)

    builder.rows(count=len(TABS), each=fill, name="tabs", flex=1)


def header(
    title: str,
    *,
    subtitle: str | None = None,
    prev_key: str | None = None,
    next_key: str | None = None,
) -> BuildFn:
    """Return a builder for a title row flanked by optional arrow links."""

    def titles(builder: LayoutBuilder) -> None:
        builder.text(title, style="title", name="title", height=2)
        if subtitle:
            builder.text(subtitle, style="subtitle", name="subtitle", flex=1)

    def build(builder: LayoutBuilder) -> None:
        if prev_key is not None:
            builder.nav_link(prev_key, label="<", width=NAV_ARROW_WIDTH, name="prev")
        builder.section("titles", titles, flex=1)
        if next_key is not None:
            builder.nav_link(next_key, label=">", width=NAV_ARROW_WIDTH, name="next")

    return build


def planner_frame(
    ctx: PageContext,
    layout: LayoutBuilder,
    *,
    title: str,
    body: cabc.Callable[[LayoutBuilder], object],
    subtitle: str | None = None,
    prev_key: str | None = None,
    next_key: str | None = None,
) -> None:
    """Lay out the sidebars and header, then fill the content area with ``body``."""

    def page(builder: LayoutBuilder) -> None:
        builder.header(
            "header",
            header(title, subtitle=subtitle, prev_key=prev_key, next_key=next_key),
            height=HEADER_HEIGHT,
        )
        builder.content(body)

    def frame(builder: LayoutBuilder) -> None:
        builder.sidebar("week_sidebar", week_sidebar(ctx), width=WEEK_SIDEBAR_WIDTH)
        builder.section("page", page, flex=1)
        builder.sidebar("tab_sidebar", tab_sidebar, width=TAB_SIDEBAR_WIDTH)

    layout.section("frame", frame, direction="horizontal", flex=1)


__all__ = [
    "GRIDS_GROUP",
    "GRID_PAGE_TYPES",
    "TABS",
    "header",
    "planner_frame",
    "tab_sidebar",
    "week_sidebar",
]

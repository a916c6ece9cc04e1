"""Calendar page types: yearly overviews, quarters, months, weeks, and days."""

from __future__ import annotations

import datetime as dt
import typing as typ

from planner_pages.calendar import Month, Week
from planner_pages.pages.frame import planner_frame

if typ.TYPE_CHECKING:
    from planner_pages.layout.builder import LayoutBuilder
    from planner_pages.pages.context import PageContext
    from planner_pages.pages.registry import PageTypeRegistry

SEASONS = ("Winter", "Spring", "Summer", "Fall")
INDEX_ROWS = 25
FUTURE_LOG_MONTHS = 6
MAX_MONTH_DAYS = 31
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
REVIEW_PROMPTS = ("What Worked", "What Didn't Work", "Focus for Next Month")


def _months_from(year: int, start_month: int, count: int) -> list[Month]:
    last = min(12, start_month + count - 1)
    return [Month(year, number) for number in range(start_month, last + 1)]


def build_seasonal(ctx: PageContext, layout: LayoutBuilder) -> None:
    months = Month.months_in(ctx.year)

    def season(builder: LayoutBuilder, row_idx: int, col_idx: int) -> None:
        name = SEASONS[row_idx * 2 + col_idx]
        in_season = [month for month in months if month.season == name]
        builder.text(name, style="subtitle", height=2)

        def month_link(inner: LayoutBuilder, index: int) -> None:
            month = in_season[index]
            inner.nav_link(
                "monthly_review", params={"month": month.number}, label=month.name, flex=1
            )

        builder.rows(count=len(in_season), each=month_link, flex=1)

    def body(builder: LayoutBuilder) -> None:
        builder.grid(cols=2, rows=2, col_gap=1, row_gap=1, each=season, flex=1)

    planner_frame(ctx, layout, title="Seasonal Calendar", subtitle=str(ctx.year), body=body)


def build_index(ctx: PageContext, layout: LayoutBuilder) -> None:
    index_num = ctx.get("index_page_num", 1)
    index_pages = ctx.get("index_page_count", 1)

    def entry(builder: LayoutBuilder, _index: int) -> None:
        def cells(inner: LayoutBuilder) -> None:
            inner.field(lines=1, flex=1)
            inner.field(lines=1, width=4)

        builder.section(None, cells, direction="horizontal", flex=1)

    def body(builder: LayoutBuilder) -> None:
        builder.rows(count=INDEX_ROWS, each=entry, flex=1)

    planner_frame(
        ctx, layout, title="Index", subtitle=f"Page {index_num} of {index_pages}", body=body
    )


def build_future_log(ctx: PageContext, layout: LayoutBuilder) -> None:
    start_month = ctx.get("future_log_start_month", 1)
    months = _months_from(ctx.year, start_month, FUTURE_LOG_MONTHS)

    def month_block(builder: LayoutBuilder, index: int) -> None:
        builder.text(months[index].name, style="label", height=1)
        builder.ruled_lines(flex=1)

    def body(builder: LayoutBuilder) -> None:
        builder.rows(count=len(months), gap=1, each=month_block, flex=1)

    subtitle = f"{months[0].name} - {months[-1].name} {ctx.year}"
    planner_frame(ctx, layout, title="Future Log", subtitle=subtitle, body=body)


def _year_at_a_glance(title: str) -> typ.Callable[[PageContext, LayoutBuilder], None]:
    def build(ctx: PageContext, layout: LayoutBuilder) -> None:
        months = Month.months_in(ctx.year)

        def cell(builder: LayoutBuilder, row_idx: int, col_idx: int) -> None:
            month = months[col_idx]
            if row_idx == 0:
                builder.nav_link(
                    "monthly_review",
                    params={"month": month.number},
                    label=month.abbrev,
                    flex=1,
                )
            elif row_idx <= len(month.days):
                builder.text(str(row_idx), style="label", flex=1)

        def body(builder: LayoutBuilder) -> None:
            builder.grid(cols=12, rows=MAX_MONTH_DAYS + 1, each=cell, flex=1)

        planner_frame(ctx, layout, title=title, subtitle=str(ctx.year), body=body)

    return build


build_year_events = _year_at_a_glance("Year at a Glance - Events")
build_year_highlights = _year_at_a_glance("Year at a Glance - Highlights")


def build_multi_year(ctx: PageContext, layout: LayoutBuilder) -> None:
    years = [ctx.year + offset for offset in range(ctx.get("year_count", 4))]

    def year_column(builder: LayoutBuilder, index: int) -> None:
        builder.text(str(years[index]), style="subtitle", height=2)

        def month_row(inner: LayoutBuilder, month_idx: int) -> None:
            inner.text(Month(years[index], month_idx + 1).abbrev, style="label", flex=1)

        builder.rows(count=12, each=month_row, flex=1)

    def body(builder: LayoutBuilder) -> None:
        builder.columns(count=len(years), gap=1, each=year_column, flex=1)

    subtitle = f"{years[0]} - {years[-1]}"
    planner_frame(ctx, layout, title="Multi-Year Overview", subtitle=subtitle, body=body)


def build_quarterly_planning(ctx: PageContext, layout: LayoutBuilder) -> None:
    quarter = ctx["quarter"]
    months = _months_from(ctx.year, (quarter - 1) * 3 + 1, 3)

    def month_plan(builder: LayoutBuilder, index: int) -> None:
        month = months[index]
        builder.nav_link(
            "monthly_review", params={"month": month.number}, label=month.name, height=2
        )
        builder.field(lines=10, flex=1)

    def body(builder: LayoutBuilder) -> None:
        builder.field("goals", label="Quarter Goals", lines=4, height=8)
        builder.columns(count=len(months), gap=1, each=month_plan, flex=1)

    subtitle = f"{months[0].name} - {months[-1].name} {ctx.year}"
    planner_frame(
        ctx, layout, title=f"Q{quarter} {ctx.year} Planning", subtitle=subtitle, body=body
    )


def build_monthly_review(ctx: PageContext, layout: LayoutBuilder) -> None:
    month = Month(ctx.year, ctx["month"])
    weeks = month.weeks

    def week_link(builder: LayoutBuilder, index: int) -> None:
        number = weeks[index].number
        builder.nav_link("weekly", params={"week": number}, label=f"W{number}", flex=1)

    def prompt(builder: LayoutBuilder, index: int) -> None:
        builder.field(label=REVIEW_PROMPTS[index], lines=6, flex=1)

    def body(builder: LayoutBuilder) -> None:
        if weeks:
            builder.columns(count=len(weeks), each=week_link, name="weeks", height=2)
        builder.rows(count=len(REVIEW_PROMPTS), gap=1, each=prompt, flex=1)

    planner_frame(
        ctx, layout, title=f"{month.name} Review", subtitle=str(ctx.year), body=body
    )


def build_weekly(ctx: PageContext, layout: LayoutBuilder) -> None:
    week = Week(ctx.year, ctx["week_num"])
    days = week.days

    def day(builder: LayoutBuilder, index: int) -> None:
        builder.text(
            f"{DAY_NAMES[index]} {days[index].day}", style="label", align="center", height=1
        )
        builder.ruled_lines(flex=1)

    def notes(builder: LayoutBuilder) -> None:
        builder.field("cues", label="Cues", width=10)
        builder.field("notes", label="Notes", background="dot_grid", flex=1)

    def footer(builder: LayoutBuilder) -> None:
        month = Month(ctx.year, week.month)
        builder.nav_link(
            "monthly_review",
            params={"month": month.number},
            label=f"{month.name} Review",
            flex=1,
        )
        builder.nav_link(
            "quarterly_planning",
            params={"quarter": week.quarter},
            label=f"Q{week.quarter} Planning",
            flex=1,
        )

    def body(builder: LayoutBuilder) -> None:
        builder.columns(count=len(days), each=day, name="days", flex=3)
        builder.section("notes", notes, direction="horizontal", flex=2)
        builder.field("summary", label="Summary", lines=2, height=4)
        if week.in_year:
            builder.footer("footer", footer, height=1)

    planner_frame(
        ctx,
        layout,
        title=f"Week {week.number}",
        subtitle=week.date_range("%b %d, %Y"),
        prev_key=ctx.links.prev_week(),
        next_key=ctx.links.next_week(),
        body=body,
    )


def build_daily(ctx: PageContext, layout: LayoutBuilder) -> None:
    date: dt.date = ctx["date"]
    one_day = dt.timedelta(days=1)

    def body(builder: LayoutBuilder) -> None:
        builder.field("tasks", label="Tasks", lines=8, flex=2)
        builder.field("events", label="Events", lines=4, flex=1)
        builder.field("notes", label="Notes", background="dot_grid", flex=2)
        builder.field("reflection", label="Reflection", lines=3, flex=1)

    planner_frame(
        ctx,
        layout,
        title=date.strftime("%A, %B %d"),
        subtitle=str(date.year),
        prev_key=ctx.links.resolve("daily", date=date - one_day),
        next_key=ctx.links.resolve("daily", date=date + one_day),
        body=body,
    )


def register(registry: PageTypeRegistry) -> None:
    registry.register("seasonal", build_seasonal, title="Seasonal Calendar")
    registry.register("index", build_index, title="Index")
    registry.register("future_log", build_future_log, title="Future Log")
    registry.register("year_events", build_year_events, title="Year Events")
    registry.register("year_highlights", build_year_highlights, title="Year Highlights")
    registry.register("multi_year", build_multi_year, title="Multi-Year Overview")
    registry.register(
        "quarterly_planning", build_quarterly_planning, title="Q{{ quarter }} Planning"
    )
    registry.register("monthly_review", build_monthly_review, title="{{ month_name }} Review")
    registry.register("weekly", build_weekly, title="Week {{ week_num }}")
    registry.register("daily", build_daily, title="{{ date.strftime('%A, %B %d') }}")


__all__ = [
    "build_daily",
    "build_future_log",
    "build_index",
    "build_monthly_review",
    "build_multi_year",
    "build_quarterly_planning",
    "build_seasonal",
    "build_weekly",
    "build_year_events",
    "build_year_highlights",
    "register",
]

"""Named document definitions.

A recipe is a callable ``definition(doc, **params)`` run by
:meth:`DeclarationCollector.declare`. Two recipes ship with the package:

``standard_planner``
    Front matter, the year's weeks interleaved with quarterly planning and
    monthly review pages, a cycling group of grid pages, reference pages,
    and any configured collections.
``daily``
    The same front matter followed by one page per day of the year.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from planner_pages.calendar import QUARTER_START_MONTHS, Month
from planner_pages.declarations import FIRST
from planner_pages.errors import UnknownTypeError
from planner_pages.pages.frame import GRID_PAGE_TYPES, GRIDS_GROUP

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.declarations import DeclarationCollector

Definition = typ.Callable[..., None]
AUTHOR = "planner-pages"
INDEX_PAGES = 2
FUTURE_LOG_PAGES = 2
MULTI_YEAR_COUNT = 4


@dc.dataclass(slots=True)
class Recipe:
    name: str
    definition: Definition
    description: str = ""


class RecipeRegistry:
    """Map recipe names to document definitions."""

    def __init__(self) -> None:
        self._recipes: dict[str, Recipe] = {}

    def register(self, name: str, definition: Definition, *, description: str = "") -> Recipe:
        recipe = Recipe(name=name, definition=definition, description=description)
        self._recipes[name] = recipe
        return recipe

    def recipe(
        self, name: str, *, description: str = ""
    ) -> cabc.Callable[[Definition], Definition]:
        """Register the decorated definition under ``name``."""

        def decorator(definition: Definition) -> Definition:
            self.register(name, definition, description=description)
            return definition

        return decorator

    def get(self, name: str) -> Recipe:
        try:
            return self._recipes[name]
        except KeyError:
            raise UnknownTypeError("recipe", name, list(self._recipes)) from None

    def __contains__(self, name: object) -> bool:
        return name in self._recipes

    def __iter__(self) -> cabc.Iterator[Recipe]:
        return iter(self._recipes.values())

    def names(self) -> list[str]:
        return sorted(self._recipes)


def _front_matter(doc: DeclarationCollector, year: int, *, outline: bool) -> None:
    doc.page("seasonal", id="seasonal", year=year, outline=outline)
    for index in range(INDEX_PAGES):
        doc.page(
            "index",
            id=f"index_{index + 1}",
            index_page_num=index + 1,
            index_page_count=INDEX_PAGES,
            year=year,
            outline=outline and index == 0,
        )
    for index in range(FUTURE_LOG_PAGES):
        doc.page(
            "future_log",
            id=f"future_log_{index + 1}",
            future_log_page=index + 1,
            future_log_page_count=FUTURE_LOG_PAGES,
            future_log_start_month=index * 6 + 1,
            year=year,
            outline=outline and index == 0,
        )
    doc.page("year_events", id="year_events", year=year, outline=outline)
    doc.page("year_highlights", id="year_highlights", year=year, outline=outline)
    doc.page(
        "multi_year", id="multi_year", year=year, year_count=MULTI_YEAR_COUNT, outline=outline
    )


def _weeks(doc: DeclarationCollector, year: int) -> None:
    """Declare every week, preceded by the month's review and quarter plan."""
    seen_months: set[int] = set()
    for week in doc.weeks_in(year):
        if week.in_year and week.month not in seen_months:
            month = Month(year, week.month)
            if month.number in QUARTER_START_MONTHS:
                quarter = (month.number - 1) // 3 + 1
                doc.page(
                    "quarterly_planning",
                    id=f"quarter_{quarter}",
                    quarter=quarter,
                    year=year,
                    outline=True,
                )
            doc.page(
                "monthly_review",
                id=f"review_{month.number}",
                month=month,
                review_month=month.number,
                year=year,
                outline=True,
            )
            seen_months.add(month.number)
        doc.page("weekly", id=f"week_{week.number}", week=week, outline=True)


def _grids(doc: DeclarationCollector, *, outline: str | None = None) -> None:
    def pages(inner: DeclarationCollector) -> None:
        for page_type in GRID_PAGE_TYPES:
            inner.page(page_type, id=page_type, outline=outline is not None)

    doc.group(GRIDS_GROUP, pages, cycle=True, outline=outline)


def _templates(doc: DeclarationCollector, *, outline: bool) -> None:
    doc.page("tracker_example", id="tracker_example", outline=outline)
    doc.page("reference", id="reference", outline=outline)


def _collections(
    doc: DeclarationCollector,
    year: int,
    collections: cabc.Iterable[cabc.Mapping[str, typ.Any]],
) -> None:
    for collection in collections:
        doc.page(
            "collection",
            id=f"collection_{collection['id']}",
            collection_id=collection["id"],
            collection_title=collection.get("title"),
            collection_subtitle=collection.get("subtitle"),
            year=year,
            outline=True,
        )


def standard_planner(
    doc: DeclarationCollector,
    *,
    year: int,
    theme: str | None = None,
    collections: cabc.Iterable[cabc.Mapping[str, typ.Any]] = (),
) -> None:
    """Declare a full-year planner built around weekly pages."""
    doc.metadata(
        title=f"Planner {year}",
        author=AUTHOR,
        creator=AUTHOR,
        subject=f"Year planner for {year}",
    )
    if theme:
        doc.theme(theme)
    _front_matter(doc, year, outline=True)
    doc.outline_section("Weeks", lambda inner: _weeks(inner, year), dest=FIRST)
    _grids(doc, outline="Grids")
    _templates(doc, outline=True)
    _collections(doc, year, collections)


def daily(
    doc: DeclarationCollector,
    *,
    year: int,
    theme: str | None = None,
    collections: cabc.Iterable[cabc.Mapping[str, typ.Any]] = (),
) -> None:
    """Declare a planner with one page per day of ``year``."""
    doc.metadata(
        title=f"Daily Planner {year}",
        author=AUTHOR,
        creator=AUTHOR,
        subject=f"Daily planner for {year}",
    )
    if theme:
        doc.theme(theme)
    _front_matter(doc, year, outline=True)

    first_day = dt.date(year, 1, 1)
    doc.outline_entry(f"day_{first_day:%Y%m%d}", "Daily Pages")
    day = first_day
    while day.year == year:
        doc.page("daily", id=f"day_{day:%Y%m%d}", date=day, year=year)
        day += dt.timedelta(days=1)

    _grids(doc, outline="Grid Types Showcase")
    _templates(doc, outline=True)
    _collections(doc, year, collections)


def default_recipes() -> RecipeRegistry:
    """Return a new registry holding the built-in recipes."""
    registry = RecipeRegistry()
    registry.register(
        "standard_planner",
        standard_planner,
        description="Weekly planner with monthly reviews and quarterly planning.",
    )
    registry.register("daily", daily, description="One page per day of the year.")
    return registry


__all__ = [
    "Definition",
    "Recipe",
    "RecipeRegistry",
    "daily",
    "default_recipes",
    "standard_planner",
]

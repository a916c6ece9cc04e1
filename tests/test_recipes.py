"""Tests for the built-in recipes and the pages they declare.

The declaration-only tests run the declare pass through
:meth:`PlannerBuilder.declare`; the render tests build the whole standard
planner onto a :class:`RecordingSurface`, which is slower but checks that
every built-in page type lays out and links without errors.
"""

from __future__ import annotations

import pytest

from planner_pages.builder import BuildResult, PlannerBuilder
from planner_pages.errors import UnknownTypeError
from planner_pages.recipes import daily, default_recipes, standard_planner
from planner_pages.surface import RecordingSurface


@pytest.fixture(scope="module")
def standard_build() -> tuple[RecordingSurface, BuildResult]:
    """Build the 2025 standard planner once for the render tests in this module."""
    surface = RecordingSurface()
    result = PlannerBuilder().build(standard_planner, surface, year=2025)
    return surface, result


def _keys(definition: object, **params: object) -> list[str]:
    collector = PlannerBuilder().declare(definition, **params)  # type: ignore[arg-type]
    return [page.destination_key for page in collector.pages]


def test_standard_planner_page_order() -> None:
    keys = _keys(standard_planner, year=2025)

    assert len(keys) == 83
    assert keys[:8] == [
        "seasonal",
        "index_1",
        "index_2",
        "future_log_1",
        "future_log_2",
        "year_events",
        "year_highlights",
        "multi_year",
    ]
    assert keys[8:12] == ["week_1", "quarter_1", "review_1", "week_2"], (
        "week 1 starts in December, so January's pages follow it"
    )
    assert keys[-6:] == [
        "grids_overview",
        "grid_dot",
        "grid_graph",
        "grid_lined",
        "tracker_example",
        "reference",
    ]
    assert sum(key.startswith("week_") for key in keys) == 53
    assert sum(key.startswith("review_") for key in keys) == 12
    assert [key for key in keys if key.startswith("quarter_")] == [
        "quarter_1",
        "quarter_2",
        "quarter_3",
        "quarter_4",
    ]


def test_each_review_precedes_the_first_week_of_its_month() -> None:
    keys = _keys(standard_planner, year=2025)

    # 2025-03-03 is the first Monday in March: week 10.
    assert keys.index("review_3") == keys.index("week_10") - 1
    assert keys.index("quarter_2") + 1 == keys.index("review_4")


def test_collections_follow_the_reference_pages() -> None:
    keys = _keys(
        standard_planner,
        year=2025,
        collections=[{"id": "books", "title": "Books", "subtitle": "to read"}],
    )

    assert keys[-2:] == ["reference", "collection_books"]


def test_daily_recipe_declares_every_day() -> None:
    keys = _keys(daily, year=2024)

    day_keys = [key for key in keys if key.startswith("day_")]
    assert len(day_keys) == 366
    assert day_keys[0] == "day_20240101"
    assert day_keys[-1] == "day_20241231"


def test_recipe_registry_lookup() -> None:
    recipes = default_recipes()

    assert recipes.names() == ["daily", "standard_planner"]
    assert recipes.get("daily").definition is daily
    with pytest.raises(UnknownTypeError, match="recipe"):
        recipes.get("monthly")


def test_standard_planner_renders_every_page(
    standard_build: tuple[RecordingSurface, BuildResult],
) -> None:
    surface, result = standard_build

    assert surface.page_count == 83
    assert result.page_count == 83
    assert surface.metadata["title"] == "Planner 2025"


def test_weekly_pages_link_to_their_neighbours(
    standard_build: tuple[RecordingSurface, BuildResult],
) -> None:
    surface, result = standard_build
    numbers = result.registry.page_numbers()

    week_2 = numbers["week_2"]
    targets = surface.link_targets_on(week_2)

    assert numbers["week_1"] in targets
    assert numbers["week_3"] in targets
    assert numbers["review_1"] in targets
    assert numbers["quarter_1"] in targets


def test_grid_tab_cycles_through_the_grid_group(
    standard_build: tuple[RecordingSurface, BuildResult],
) -> None:
    surface, result = standard_build
    numbers = result.registry.page_numbers()

    assert numbers["grid_dot"] in surface.link_targets_on(numbers["grids_overview"])
    assert numbers["grids_overview"] in surface.link_targets_on(numbers["grid_lined"])
    assert numbers["grids_overview"] in surface.link_targets_on(numbers["week_5"]), (
        "outside the group the tab should open the group's first page"
    )


def test_outline_groups_weeks_and_grids(
    standard_build: tuple[RecordingSurface, BuildResult],
) -> None:
    surface, result = standard_build
    numbers = result.registry.page_numbers()
    top_level = [(title, page) for level, title, page in surface.outline if level == 1]

    assert ("Weeks", numbers["week_1"]) in top_level
    assert ("Grids", numbers["grids_overview"]) in top_level
    assert (2, "Week 12", numbers["week_12"]) in surface.outline
    assert (2, "March Review", numbers["review_3"]) in surface.outline

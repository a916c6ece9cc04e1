"""Shared fixtures and steps for the planner behaviour tests.

Building the standard planner takes a moment, so one recorded build is shared
by every scenario in the session. Steps record the page under inspection in
``scenario_state`` so the ``then`` steps can check what was drawn on it.
"""

from __future__ import annotations

import typing as typ

import pytest
from pytest_bdd import given, parsers, then, when

from planner_pages.builder import PlannerBuilder
from planner_pages.recipes import standard_planner
from planner_pages.surface import RecordingSurface

if typ.TYPE_CHECKING:
    from planner_pages.builder import BuildResult

ScenarioState = dict[str, typ.Any]


@pytest.fixture(scope="session")
def standard_build() -> tuple[RecordingSurface, BuildResult]:
    """Build the 2025 standard planner onto a recording surface once.

    Returns
    -------
    tuple[RecordingSurface, BuildResult]
        The surface holding every drawing call and the build result with the
        frozen link registry.
    """
    surface = RecordingSurface()
    result = PlannerBuilder().build(standard_planner, surface, year=2025)
    return surface, result


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("the standard planner for 2025 has been built")
def given_standard_planner(
    standard_build: tuple[RecordingSurface, BuildResult], scenario_state: ScenarioState
) -> None:
    """Expose the shared build and its page numbers to later steps.

    Parameters
    ----------
    standard_build : tuple[RecordingSurface, BuildResult]
        Session-wide recorded build of the 2025 standard planner.
    scenario_state : ScenarioState
        Receives ``surface`` and ``page_numbers``.
    """
    surface, result = standard_build
    scenario_state["surface"] = surface
    scenario_state["page_numbers"] = result.registry.page_numbers()


def _open(scenario_state: ScenarioState, key: str) -> None:
    page_numbers = typ.cast("dict[str, int]", scenario_state["page_numbers"])
    assert key in page_numbers, f"expected a page with destination {key!r}"
    scenario_state["page"] = page_numbers[key]


@when(parsers.parse("I open the page for week {week:d}"))
def when_open_week(scenario_state: ScenarioState, week: int) -> None:
    """Select the weekly page for ``week``."""
    _open(scenario_state, f"week_{week}")


@when(parsers.parse('I open the "{key}" page'))
def when_open_key(scenario_state: ScenarioState, key: str) -> None:
    """Select the page declared with destination ``key``."""
    _open(scenario_state, key)


def _links_to(scenario_state: ScenarioState, key: str) -> None:
    surface = typ.cast("RecordingSurface", scenario_state["surface"])
    page_numbers = typ.cast("dict[str, int]", scenario_state["page_numbers"])
    targets = surface.link_targets_on(scenario_state["page"])
    assert page_numbers[key] in targets, (
        f"page {scenario_state['page']} should link to {key} "
        f"(page {page_numbers[key]}); found {sorted(set(targets))}"
    )


@then(parsers.parse("the page links to week {week:d}"))
def then_links_to_week(scenario_state: ScenarioState, week: int) -> None:
    """Assert the selected page carries a link to the weekly page ``week``."""
    _links_to(scenario_state, f"week_{week}")


@then(parsers.parse('the page links to "{key}"'))
def then_links_to_key(scenario_state: ScenarioState, key: str) -> None:
    """Assert the selected page carries a link to destination ``key``."""
    _links_to(scenario_state, key)

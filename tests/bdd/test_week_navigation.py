"""Behaviour tests for navigation between weekly pages.

The scenarios in ``features/week_navigation.feature`` inspect the recorded
drawing calls of the 2025 standard planner: the header arrows must stop at
the first and last weeks, and every weekly page must link to its neighbours
and to the month review and quarter plan it belongs to.

Usage
-----
Run ``pytest tests/bdd/test_week_navigation.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from pytest_bdd import scenarios, then

if typ.TYPE_CHECKING:
    from planner_pages.surface import RecordingSurface

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "week_navigation.feature"
scenarios(FEATURE_FILE)

PREV_ARROW = "<"
NEXT_ARROW = ">"

ScenarioState = dict[str, typ.Any]


def _header_texts(scenario_state: ScenarioState) -> list[str]:
    surface = typ.cast("RecordingSurface", scenario_state["surface"])
    return surface.texts_on(scenario_state["page"])


@then("the header has no previous-week arrow")
def then_no_prev_arrow(scenario_state: ScenarioState) -> None:
    """Assert nothing on the page is labelled as a previous-week arrow.

    Parameters
    ----------
    scenario_state : ScenarioState
        Holds the recording ``surface`` and the selected ``page`` number.
    """
    assert PREV_ARROW not in _header_texts(scenario_state), (
        "the first week should not point backwards"
    )


@then("the header has a previous-week arrow")
def then_prev_arrow(scenario_state: ScenarioState) -> None:
    """Assert the page draws a previous-week arrow."""
    assert PREV_ARROW in _header_texts(scenario_state)


@then("the header has no next-week arrow")
def then_no_next_arrow(scenario_state: ScenarioState) -> None:
    """Assert nothing on the page is labelled as a next-week arrow."""
    assert NEXT_ARROW not in _header_texts(scenario_state), (
        "the final week should not point forwards"
    )


@then("the header has a next-week arrow")
def then_next_arrow(scenario_state: ScenarioState) -> None:
    """Assert the page draws a next-week arrow."""
    assert NEXT_ARROW in _header_texts(scenario_state)

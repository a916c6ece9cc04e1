"""Behaviour tests for the cycling Grids tab.

``features/grid_cycle.feature`` walks the grid group page by page and checks
that the tab on each one links to the next grid page, wrapping from the last
back to the first, and that the tab opens the first grid page from outside
the group. All steps live in ``tests/bdd/conftest.py``.

Usage
-----
Run ``pytest tests/bdd/test_grid_cycle.py -v``.
"""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenarios

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "grid_cycle.feature"
scenarios(FEATURE_FILE)

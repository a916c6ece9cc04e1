"""Page types: registry, per-page context, and the built-in page builders."""

from __future__ import annotations

from . import grids, planner, reference
from .context import PageContext, build_page_context, expand_params
from .frame import GRID_PAGE_TYPES, GRIDS_GROUP, planner_frame
from .inline import inline_page
from .registry import PageBuildFn, PageType, PageTypeRegistry


def default_page_types() -> PageTypeRegistry:
    """Return a new registry holding every built-in page type."""
    registry = PageTypeRegistry()
    for module in (planner, grids, reference):
        module.register(registry)
    return registry


__all__ = [
    "GRIDS_GROUP",
    "GRID_PAGE_TYPES",
    "PageBuildFn",
    "PageContext",
    "PageType",
    "PageTypeRegistry",
    "build_page_context",
    "default_page_types",
    "expand_params",
    "inline_page",
    "planner_frame",
]

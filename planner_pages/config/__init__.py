"""Load and validate planner configuration YAML.

The configuration names the recipe to build, the year, theme, page size and
output path, optional document metadata overrides, and the user's collection
pages. :func:`load_planner_config` applies defaults and returns a
:class:`PlannerConfig` ready for :class:`~planner_pages.builder.PlannerBuilder`.

Examples
--------
>>> from pathlib import Path
>>> from planner_pages.config import load_planner_config
>>> config = load_planner_config(Path("planner.yaml"))  # doctest: +SKIP
>>> [collection.id for collection in config.collections]  # doctest: +SKIP
['books', 'films']
"""

from .loader import load_planner_config
from .models import CollectionConfig, PlannerConfig, PlannerConfigError

__all__ = [
    "CollectionConfig",
    "PlannerConfig",
    "PlannerConfigError",
    "load_planner_config",
]

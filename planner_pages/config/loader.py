"""Load planner configuration YAML into typed dataclasses."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from planner_pages import _constants

from .helpers import (
    _build_collections,
    _build_metadata,
    _coerce_page_size,
    _coerce_spacing,
    _coerce_year,
    _optional_str,
)
from .models import PlannerConfig


def load_planner_config(path: Path) -> PlannerConfig:
    """Load the YAML file describing which planner to build and how.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``planner.yaml``).

    Returns
    -------
    PlannerConfig
        Parsed configuration with defaults applied: the current year, the
        ``standard_planner`` recipe, US letter pages, and 5 mm dot spacing.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    PlannerConfigError
        If a value is present but invalid (for example, an unknown page size
        or a collection without a title).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_planner_config(Path("planner.yaml"))  # doctest: +SKIP
    >>> config.recipe  # doctest: +SKIP
    'standard_planner'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    year = _coerce_year(raw.get("year", dt.date.today().year))  # noqa: DTZ011 - calendar year only
    output = _optional_str(raw.get("output"))
    return PlannerConfig(
        year=year,
        recipe=_optional_str(raw.get("recipe")) or "standard_planner",
        theme=_optional_str(raw.get("theme")),
        output=Path(output) if output else None,
        page_size=_coerce_page_size(raw.get("page_size", _constants.DEFAULT_PAGE_SIZE)),
        dot_spacing=_coerce_spacing(raw.get("dot_spacing", _constants.DOT_SPACING)),
        metadata=_build_metadata(raw.get("metadata")),
        collections=_build_collections(raw.get("collections")),
    )


__all__ = ["load_planner_config"]

"""Typed dataclasses describing planner build configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from planner_pages import _constants


class PlannerConfigError(ValueError):
    """Raised when the planner configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class CollectionConfig:
    """A user-defined collection page, such as a reading list."""

    id: str
    title: str
    subtitle: str | None = None

    def as_params(self) -> dict[str, typ.Any]:
        return {"id": self.id, "title": self.title, "subtitle": self.subtitle}


@dc.dataclass(slots=True)
class PlannerConfig:
    """Everything needed to build one planner document."""

    year: int
    recipe: str = "standard_planner"
    theme: str | None = None
    output: Path | None = None
    page_size: str = _constants.DEFAULT_PAGE_SIZE
    dot_spacing: float = _constants.DOT_SPACING
    metadata: dict[str, typ.Any] = dc.field(default_factory=dict)
    collections: list[CollectionConfig] = dc.field(default_factory=list)

    @property
    def output_path(self) -> Path:
        """Return the configured output, or ``planner_<year>.pdf``."""
        return self.output or Path(f"planner_{self.year}.pdf")

    def recipe_params(self) -> dict[str, typ.Any]:
        """Return the keyword parameters handed to the recipe."""
        return {
            "year": self.year,
            "theme": self.theme,
            "collections": [collection.as_params() for collection in self.collections],
        }


__all__ = ["CollectionConfig", "PlannerConfig", "PlannerConfigError"]

"""Conversion between grid units and page points.

The page is divided into square boxes of ``spacing`` points starting at the
top-left corner, which is also the origin used by PyMuPDF. A letter page with
the default 5 mm spacing is 43 columns by 55 rows.

Examples
--------
>>> grid = GridSystem.for_page_size("letter")
>>> (grid.cols, grid.rows)
(43, 55)
>>> grid.x(2)
28.34
"""

from __future__ import annotations

import dataclasses as dc
import math
import typing as typ

from planner_pages import _constants
from planner_pages.errors import ConfigurationError

if typ.TYPE_CHECKING:
    from planner_pages.layout.models import Bounds, Number

PointRect = tuple[float, float, float, float]


@dc.dataclass(frozen=True, slots=True)
class GridSystem:
    """Page geometry expressed as a grid of ``spacing``-point boxes."""

    page_width: float = _constants.PAGE_SIZES[_constants.DEFAULT_PAGE_SIZE][0]
    page_height: float = _constants.PAGE_SIZES[_constants.DEFAULT_PAGE_SIZE][1]
    spacing: float = _constants.DOT_SPACING

    def __post_init__(self) -> None:
        if self.spacing <= 0:
            msg = f"Grid spacing must be positive, got {self.spacing}."
            raise ConfigurationError(msg)

    @classmethod
    def for_page_size(
        cls, name: str, spacing: float = _constants.DOT_SPACING
    ) -> GridSystem:
        """Return a grid for a named page size such as ``letter`` or ``a4``."""
        try:
            width, height = _constants.PAGE_SIZES[name]
        except KeyError:
            known = ", ".join(sorted(_constants.PAGE_SIZES))
            msg = f"Unknown page size '{name}'. Known sizes: {known}"
            raise ConfigurationError(msg) from None
        return cls(page_width=width, page_height=height, spacing=spacing)

    @property
    def cols(self) -> int:
        return math.floor(self.page_width / self.spacing)

    @property
    def rows(self) -> int:
        return math.floor(self.page_height / self.spacing)

    def x(self, col: Number) -> float:
        return round(col * self.spacing, 4)

    def y(self, row: Number) -> float:
        return round(row * self.spacing, 4)

    def width(self, boxes: Number) -> float:
        return round(boxes * self.spacing, 4)

    def height(self, boxes: Number) -> float:
        return round(boxes * self.spacing, 4)

    def rect(self, bounds: Bounds) -> PointRect:
        """Return ``(x, y, width, height)`` in points for grid ``bounds``."""
        return (
            self.x(bounds.col),
            self.y(bounds.row),
            self.width(bounds.width),
            self.height(bounds.height),
        )


__all__ = ["GridSystem", "PointRect"]

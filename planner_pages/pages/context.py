"""Per-page rendering context.

Every page builder receives a :class:`PageContext`: the document-wide values
(year, week count, page count, collections) merged with the page's own
declaration parameters. Calendar objects in the parameters are expanded into
plain values here and nowhere else.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from planner_pages.calendar import Month, Week
from planner_pages.links.resolver import LinkResolver

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.declarations.models import PageDeclaration
    from planner_pages.grid import GridSystem
    from planner_pages.links.registry import LinkRegistry
    from planner_pages.themes import Theme

_RESOLVER_PARAMS = ("week_num", "month", "year")


def expand_params(params: cabc.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
    """Flatten calendar objects into the values page templates use.

    A :class:`Week` becomes ``week_num``, ``week_start`` and ``week_end``; a
    :class:`Month` becomes ``month`` and ``month_name``. Other values keep
    their key.

    >>> expand_params({"week": Week(2025, 1), "year": 2025})["week_num"]
    1
    >>> expand_params({"month": Month(2025, 3)})
    {'month': 3, 'month_name': 'March'}
    """
    expanded: dict[str, typ.Any] = {}
    for key, value in params.items():
        match value:
            case Week():
                expanded.update(
                    week_num=value.number,
                    week_start=value.start_date,
                    week_end=value.end_date,
                )
            case Month():
                expanded.update(month=value.number, month_name=value.name)
            case _:
                expanded[key] = value
    return expanded


@dc.dataclass(slots=True)
class PageContext:
    """Everything a page builder may read while filling its layout."""

    page_key: str
    page_type: str
    page_number: int
    year: int
    total_weeks: int
    total_pages: int
    values: dict[str, typ.Any]
    links: LinkResolver
    grid: GridSystem
    theme: Theme
    collections: list[dict[str, typ.Any]] = dc.field(default_factory=list)

    def __getitem__(self, key: str) -> typ.Any:  # noqa: ANN401 - template values are heterogeneous
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def get(self, key: str, default: typ.Any = None) -> typ.Any:  # noqa: ANN401
        return self.values.get(key, default)


def build_page_context(
    declaration: PageDeclaration,
    page_number: int,
    *,
    base: cabc.Mapping[str, typ.Any],
    registry: LinkRegistry,
    grid: GridSystem,
    theme: Theme,
) -> PageContext:
    """Merge ``base`` with the declaration's expanded parameters.

    Parameters
    ----------
    declaration : PageDeclaration
        The page being rendered.
    page_number : int
        One-based page number the declaration was registered at.
    base : Mapping[str, Any]
        Document-wide values. Must provide ``year``, ``total_weeks`` and
        ``total_pages``; may provide ``collections``.
    registry : LinkRegistry
        The frozen registry; wrapped in a page-relative resolver.
    grid : GridSystem
        Grid geometry of the page.
    theme : Theme
        Theme active while the page renders.
    """
    values = dict(base)
    values.update(expand_params(declaration.params))
    links = LinkResolver(
        registry,
        declaration.type,
        {key: values[key] for key in _RESOLVER_PARAMS if key in values},
        current_key=declaration.destination_key,
        total_weeks=values["total_weeks"],
    )
    return PageContext(
        page_key=declaration.destination_key,
        page_type=declaration.type,
        page_number=page_number,
        year=values["year"],
        total_weeks=values["total_weeks"],
        total_pages=values["total_pages"],
        values=values,
        links=links,
        grid=grid,
        theme=theme,
        collections=list(values.get("collections", ())),
    )


__all__ = ["PageContext", "build_page_context", "expand_params"]

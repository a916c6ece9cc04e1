"""Explicit registry of page types.

A page type pairs a content builder with an optional Jinja2 title template.
Titles are rendered with ``StrictUndefined`` against the page's expanded
parameters, so a template that needs a parameter the page was not declared
with produces no title instead of a half-filled one.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from jinja2 import Environment, StrictUndefined, TemplateError

from planner_pages.errors import UnknownTypeError
from planner_pages.pages.context import expand_params

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.declarations.models import PageDeclaration
    from planner_pages.layout.builder import LayoutBuilder
    from planner_pages.pages.context import PageContext

logger = logging.getLogger(__name__)

PageBuildFn = typ.Callable[["PageContext", "LayoutBuilder"], None]

_TITLE_ENV = Environment(undefined=StrictUndefined, autoescape=False)  # noqa: S701 - titles are not HTML


@dc.dataclass(slots=True)
class PageType:
    """A registered page type.

    Attributes
    ----------
    name : str
        Type tag used in declarations.
    build : PageBuildFn
        Fills a fresh :class:`LayoutBuilder` for one page.
    title : str or None
        Jinja2 template for the page's default bookmark title.
    """

    name: str
    build: PageBuildFn
    title: str | None = None

    def generate(self, context: PageContext, layout: LayoutBuilder) -> None:
        self.build(context, layout)

    def generate_title(self, params: cabc.Mapping[str, typ.Any]) -> str | None:
        """Render the title template, or return ``None`` when it cannot be."""
        if self.title is None:
            return None
        try:
            return _TITLE_ENV.from_string(self.title).render(**params).strip() or None
        except TemplateError as exc:
            logger.debug("Title template for %s not rendered: %s", self.name, exc)
            return None


class PageTypeRegistry:
    """Map page type tags to :class:`PageType` entries."""

    def __init__(self) -> None:
        self._types: dict[str, PageType] = {}

    def register(
        self, name: str, build: PageBuildFn, *, title: str | None = None
    ) -> PageType:
        page_type = PageType(name=name, build=build, title=title)
        self._types[name] = page_type
        return page_type

    def page(
        self, name: str, *, title: str | None = None
    ) -> cabc.Callable[[PageBuildFn], PageBuildFn]:
        """Register the decorated function as the builder for ``name``."""

        def decorator(build: PageBuildFn) -> PageBuildFn:
            self.register(name, build, title=title)
            return build

        return decorator

    def get(self, name: str) -> PageType:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownTypeError("page type", name, list(self._types)) from None

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def names(self) -> list[str]:
        return sorted(self._types)

    def title_for(self, declaration: PageDeclaration) -> str | None:
        """Return the page type's title for ``declaration``, if it has one."""
        page_type = self._types.get(declaration.type)
        if page_type is None:
            return None
        return page_type.generate_title(expand_params(declaration.params))


__all__ = ["PageBuildFn", "PageType", "PageTypeRegistry"]

"""Render pages declared inline with their own layout callback."""

from __future__ import annotations

import typing as typ

from planner_pages.declarations.collector import humanize_key
from planner_pages.errors import ConfigurationError
from planner_pages.pages.frame import planner_frame

if typ.TYPE_CHECKING:
    from planner_pages.declarations.models import InlinePageDeclaration
    from planner_pages.layout.builder import LayoutBuilder
    from planner_pages.pages.context import PageContext
    from planner_pages.pages.registry import PageBuildFn


def inline_title(declaration: InlinePageDeclaration) -> str:
    """Return the header title: ``title`` param, bookmark title, then the key.

    >>> from planner_pages.declarations import InlinePageDeclaration
    >>> inline_title(InlinePageDeclaration("inline", id="meeting_notes"))
    'Meeting Notes'
    """
    title = declaration.params.get("title") or declaration.outline_title
    return str(title) if title else humanize_key(declaration.destination_key)


def inline_page(declaration: InlinePageDeclaration) -> PageBuildFn:
    """Return a page builder that frames ``declaration``'s body callback."""
    body = declaration.body
    if body is None:
        msg = f"Inline page '{declaration.destination_key}' has no build callback."
        raise ConfigurationError(msg)
    title = inline_title(declaration)
    subtitle = declaration.params.get("subtitle")

    def build(ctx: PageContext, layout: LayoutBuilder) -> None:
        planner_frame(ctx, layout, title=title, subtitle=subtitle, body=body)

    return build


__all__ = ["inline_page", "inline_title"]

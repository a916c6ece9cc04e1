"""The declare pass: run a document definition and record what it asks for.

A definition is any callable taking a :class:`DeclarationCollector` plus
keyword parameters. It calls :meth:`~DeclarationCollector.page`,
:meth:`~DeclarationCollector.group`, and the outline helpers; nothing is
rendered. Nested scopes (groups, outline sections) are pushed before their
callback runs and always popped afterwards.

Examples
--------
>>> def definition(doc, *, year):
...     doc.page("index", id="index_1", outline="Index")
...     doc.group("grids", lambda d: [d.page("grid_dot"), d.page("grid_graph")], cycle=True)
>>> collector = DeclarationCollector().declare(definition, year=2025)
>>> [page.destination_key for page in collector.pages]
['index_1', 'grid_dot', 'grid_graph']
>>> collector.groups[0].destination_keys
['grid_dot', 'grid_graph']
"""

from __future__ import annotations

import contextlib
import enum
import logging
import typing as typ

from planner_pages.calendar import Month, Week
from planner_pages.declarations.models import (
    INLINE_PAGE_TYPE,
    DocumentMetadata,
    GroupDeclaration,
    InlinePageDeclaration,
    OutlineDeclaration,
    PageDeclaration,
)
from planner_pages.errors import ConfigurationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.declarations.models import InlineBody

logger = logging.getLogger(__name__)

TitleLookup = typ.Callable[[PageDeclaration], "str | None"]


class OutlineTarget(enum.Enum):
    """Deferred outline destinations."""

    FIRST = "first"


FIRST = OutlineTarget.FIRST
"""Resolve a section's destination to its first child's after the block."""


def humanize_key(key: str) -> str:
    """Turn a destination key into a readable title.

    >>> humanize_key("year_events")
    'Year Events'
    """
    return " ".join(word.capitalize() for word in key.replace("_", " ").split())


class DeclarationCollector:
    """Accumulate page, group, and outline declarations in order.

    Parameters
    ----------
    title_lookup : callable, optional
        Returns a bookmark title for a declaration, or ``None`` when it has
        no opinion. Consulted for ``outline=True`` pages after an explicit
        ``collection_title`` parameter and before the humanised key.
    """

    def __init__(self, title_lookup: TitleLookup | None = None) -> None:
        self.title_lookup = title_lookup
        self.pages: list[PageDeclaration] = []
        self.groups: list[GroupDeclaration] = []
        self.outline: list[OutlineDeclaration] = []
        self.document_metadata = DocumentMetadata()
        self.theme_name: str | None = None
        self._group_stack: list[GroupDeclaration] = []
        self._outline_stack: list[OutlineDeclaration] = []
        self._declaring = False

    def declare(
        self, definition: cabc.Callable[..., None], **params: typ.Any
    ) -> DeclarationCollector:
        """Run ``definition(self, **params)`` once.

        Raises
        ------
        ConfigurationError
            If called again while a definition is already running.
        """
        if self._declaring:
            msg = "declare() is not reentrant; a definition is already running."
            raise ConfigurationError(msg)
        self._declaring = True
        try:
            definition(self, **params)
        finally:
            self._declaring = False
        logger.debug(
            "Declared %d pages, %d groups, %d outline roots",
            len(self.pages),
            len(self.groups),
            len(self.outline),
        )
        return self

    @contextlib.contextmanager
    def _pushed(self, stack: list[typ.Any], item: typ.Any) -> cabc.Iterator[None]:
        stack.append(item)
        try:
            yield
        finally:
            stack.pop()

    @property
    def current_group(self) -> GroupDeclaration | None:
        return self._group_stack[-1] if self._group_stack else None

    @property
    def current_section(self) -> OutlineDeclaration | None:
        return self._outline_stack[-1] if self._outline_stack else None

    def _add_outline(self, entry: OutlineDeclaration) -> OutlineDeclaration:
        section = self.current_section
        if section is None:
            self.outline.append(entry)
            return entry
        return section.add_child(entry)

    def page(
        self,
        type: str | None = None,  # noqa: A002 - mirrors PageDeclaration.type
        *,
        id: str | None = None,  # noqa: A002 - explicit destination key
        outline: bool | str | None = None,
        build: InlineBody | None = None,
        **params: typ.Any,
    ) -> PageDeclaration:
        """Declare one page and, optionally, its bookmark.

        Parameters
        ----------
        type : str, optional
            Registered page type. Omitted for inline pages.
        id : str, optional
            Explicit destination key.
        outline : bool or str, optional
            ``True`` bookmarks the page under a looked-up title; a string is
            used as the title verbatim.
        build : callable, optional
            Fills the page's content area with a :class:`LayoutBuilder`,
            making this an inline page of type ``"inline"``.
        **params
            Page parameters; part of the destination key when ``id`` is not
            given.

        Raises
        ------
        ConfigurationError
            If neither ``type`` nor ``build`` is given, or ``build`` is
            combined with another page type.
        """
        if build is not None:
            if type not in {None, INLINE_PAGE_TYPE}:
                msg = (
                    "Inline pages take a build callback instead of a page type; "
                    f"got '{type}'."
                )
                raise ConfigurationError(msg)
            declaration: PageDeclaration = InlinePageDeclaration(
                type=INLINE_PAGE_TYPE, id=id, params=params, body=build
            )
        elif type is None:
            msg = "page() needs a page type or a build callback."
            raise ConfigurationError(msg)
        else:
            declaration = PageDeclaration(type=type, id=id, params=params)
        self.pages.append(declaration)
        group = self.current_group
        if group is not None:
            group.add_page(declaration)
        if outline:
            title = outline if isinstance(outline, str) else self.title_for(declaration)
            declaration.outline_title = title
            self._add_outline(OutlineDeclaration(title, declaration.destination_key))
        return declaration

    def title_for(self, declaration: PageDeclaration) -> str:
        """Return the bookmark title for ``declaration``."""
        if declaration.outline_title:
            return declaration.outline_title
        collection_title = declaration.params.get("collection_title")
        if collection_title:
            return str(collection_title)
        if self.title_lookup is not None:
            try:
                title = self.title_lookup(declaration)
            except Exception:  # noqa: BLE001 - any lookup failure falls back to the key
                logger.debug(
                    "Title lookup failed for %s", declaration.destination_key, exc_info=True
                )
                title = None
            if title:
                return title
        return humanize_key(declaration.destination_key)

    def group(
        self,
        name: str,
        build: cabc.Callable[[DeclarationCollector], typ.Any] | None = None,
        *,
        cycle: bool = False,
        outline: str | None = None,
    ) -> GroupDeclaration:
        """Declare a named page group; pages declared in ``build`` join it.

        With ``outline``, the group's pages are bookmarked inside a section
        that links to the group's first page.
        """
        group = GroupDeclaration(name=name, cycle=cycle, outline_title=outline)
        self.groups.append(group)
        with contextlib.ExitStack() as scopes:
            section = None
            if outline is not None:
                section = self._add_outline(OutlineDeclaration(outline))
                scopes.enter_context(self._pushed(self._outline_stack, section))
            scopes.enter_context(self._pushed(self._group_stack, group))
            if build is not None:
                build(self)
        if section is not None and group.pages:
            section.dest = group.pages[0].destination_key
        return group

    def outline_entry(self, dest: str, title: str) -> OutlineDeclaration:
        """Add a bookmark for an existing or future destination key."""
        return self._add_outline(OutlineDeclaration(title, dest))

    def outline_section(
        self,
        title: str,
        build: cabc.Callable[[DeclarationCollector], typ.Any] | None = None,
        *,
        dest: str | OutlineTarget | None = None,
    ) -> OutlineDeclaration:
        """Add a bookmark section; entries declared in ``build`` nest inside it.

        ``dest=FIRST`` is resolved once ``build`` returns: the section takes
        its first child's destination, or stays a non-clickable header when
        it has no children.
        """
        section = OutlineDeclaration(title, None if dest is FIRST else dest)
        self._add_outline(section)
        if build is not None:
            with self._pushed(self._outline_stack, section):
                build(self)
        if dest is FIRST and section.children:
            section.dest = section.children[0].dest
        return section

    def metadata(self, **fields: typ.Any) -> DocumentMetadata:
        self.document_metadata.update(**fields)
        return self.document_metadata

    def theme(self, name: str) -> None:
        self.theme_name = name

    @staticmethod
    def weeks_in(year: int) -> list[Week]:
        return Week.weeks_in(year)

    @staticmethod
    def months_in(year: int) -> list[Month]:
        return Month.months_in(year)

    @staticmethod
    def each_week(month_or_year: Month | int) -> list[Week]:
        """Return the weeks of a month, or of a whole year."""
        match month_or_year:
            case Month():
                return month_or_year.weeks
            case bool():
                pass
            case int():
                return Week.weeks_in(month_or_year)
        msg = f"Expected a Month or a year, got {type(month_or_year).__name__}."
        raise TypeError(msg)


__all__ = ["FIRST", "DeclarationCollector", "OutlineTarget", "humanize_key"]

"""Dataclasses produced by the declaration pass."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import numbers
import re
import typing as typ

if typ.TYPE_CHECKING:
    from planner_pages.layout.builder import LayoutBuilder

INLINE_PAGE_TYPE = "inline"

InlineBody = typ.Callable[["LayoutBuilder"], object]

_UNSAFE_CHARS = re.compile(r"[^a-z0-9_]", re.IGNORECASE)


def format_key_value(value: object) -> str:
    """Serialise one parameter value for use in a destination key.

    >>> format_key_value(dt.date(2025, 3, 7))
    '20250307'
    >>> format_key_value("Books to read!")
    'Books_to_read_'
    >>> format_key_value(None)
    'nil'
    """
    match value:
        case None:
            return "nil"
        case bool():
            return str(value).lower()
        case dt.date():
            return value.strftime("%Y%m%d")
        case numbers.Number():
            return str(value)
        case _:
            return _UNSAFE_CHARS.sub("_", str(value))


@dc.dataclass(slots=True)
class PageDeclaration:
    """One page the document will contain.

    Attributes
    ----------
    type : str
        Page type tag, looked up in the page-type registry at render time.
    id : str or None
        Explicit destination key, overriding the derived one.
    outline_title : str or None
        Title of the page's bookmark, when it has one.
    params : dict[str, Any]
        Parameters handed to the page builder; may hold ``Week`` or ``Month``
        values.
    """

    type: str
    id: str | None = None
    outline_title: str | None = None
    params: dict[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def destination_key(self) -> str:
        """Return the unique key other pages use to link here.

        >>> PageDeclaration("reference").destination_key
        'reference'
        >>> PageDeclaration("weekly", params={"year": 2025, "n": 3}).destination_key
        'weekly_n_3_year_2025'
        """
        if self.id is not None:
            return str(self.id)
        if not self.params:
            return self.type
        parts = [
            f"{key}_{format_key_value(value)}" for key, value in sorted(self.params.items())
        ]
        return f"{self.type}_{'_'.join(parts)}"


@dc.dataclass(slots=True)
class InlinePageDeclaration(PageDeclaration):
    """A page declared together with the callback that fills its content area.

    Inline pages need no registered page type; they render inside the
    standard planner frame, titled by their ``title`` parameter, their
    bookmark title, or their destination key.
    """

    body: InlineBody | None = None


@dc.dataclass(slots=True)
class GroupDeclaration:
    """Named, ordered set of pages that tabs can cycle through."""

    name: str
    cycle: bool = False
    outline_title: str | None = None
    pages: list[PageDeclaration] = dc.field(default_factory=list)

    def add_page(self, page: PageDeclaration) -> PageDeclaration:
        self.pages.append(page)
        return page

    @property
    def destination_keys(self) -> list[str]:
        return [page.destination_key for page in self.pages]


@dc.dataclass(slots=True, eq=False)
class OutlineDeclaration:
    """Bookmark entry; an entry with children is a section."""

    title: str
    dest: str | None = None
    children: list[OutlineDeclaration] = dc.field(default_factory=list)

    @property
    def is_section(self) -> bool:
        return bool(self.children)

    def add_child(self, entry: OutlineDeclaration) -> OutlineDeclaration:
        self.children.append(entry)
        return entry


@dc.dataclass(slots=True)
class DocumentMetadata:
    """Document information dictionary fields."""

    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: list[str] = dc.field(default_factory=list)
    creator: str | None = None
    producer: str | None = None

    def update(self, **fields: typ.Any) -> None:
        """Set known fields; unknown names raise ``TypeError``."""
        for name, value in fields.items():
            if name not in DOCUMENT_METADATA_FIELDS:
                msg = f"Unknown metadata field '{name}'."
                raise TypeError(msg)
            if name == "keywords":
                value = [value] if isinstance(value, str) else list(value)
            setattr(self, name, value)

    def as_info(self) -> dict[str, str]:
        """Return the non-empty fields as a string mapping for the surface."""
        info: dict[str, str] = {}
        for field in dc.fields(self):
            value = getattr(self, field.name)
            if not value:
                continue
            info[field.name] = ", ".join(value) if field.name == "keywords" else value
        return info


DOCUMENT_METADATA_FIELDS = frozenset(field.name for field in dc.fields(DocumentMetadata))


__all__ = [
    "DOCUMENT_METADATA_FIELDS",
    "INLINE_PAGE_TYPE",
    "DocumentMetadata",
    "GroupDeclaration",
    "InlineBody",
    "InlinePageDeclaration",
    "OutlineDeclaration",
    "PageDeclaration",
    "format_key_value",
]

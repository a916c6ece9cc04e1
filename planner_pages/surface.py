"""Rendering surface contract and an in-memory recording implementation.

Coordinates are PostScript points with a top-left origin. Colours are hex
strings such as ``"CCCCCC"``. Page numbers are 1-based throughout.

:class:`RecordingSurface` keeps every call so page builders and the build
orchestrator can be exercised without producing a PDF.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from planner_pages.grid import PointRect

Point = tuple[float, float]
TocEntry = tuple[int, str, int | None]
"""``(level, title, page_number)``; ``page_number`` is ``None`` for headers."""


class Surface(typ.Protocol):
    """Drawing operations a page renderer needs from an output document."""

    @property
    def page_count(self) -> int: ...

    def start_page(self, width: float, height: float) -> int:
        """Open a new blank page and return its 1-based number."""
        ...

    def draw_text(
        self,
        text: str,
        rect: PointRect,
        *,
        size: float,
        color: str,
        align: str = "left",
        valign: str = "top",
        bold: bool = False,
        rotation: float = 0,
    ) -> None: ...

    def draw_line(
        self,
        start: Point,
        end: Point,
        *,
        color: str,
        width: float,
        dash: str | None = None,
    ) -> None: ...

    def draw_rect(
        self,
        rect: PointRect,
        *,
        stroke: str | None = None,
        fill: str | None = None,
        width: float = 0.5,
    ) -> None: ...

    def draw_dots(self, centers: cabc.Sequence[Point], *, radius: float, color: str) -> None:
        ...

    def add_link(self, rect: PointRect, target_page: int) -> None:
        """Make ``rect`` on the current page jump to ``target_page``."""
        ...

    def set_outline(self, entries: cabc.Sequence[TocEntry]) -> None: ...

    def set_metadata(self, metadata: cabc.Mapping[str, str]) -> None: ...


@dc.dataclass(slots=True)
class SurfaceCall:
    """One recorded drawing call."""

    page: int
    op: str
    args: dict[str, typ.Any]


@dc.dataclass(slots=True)
class RecordingSurface:
    """Surface that records calls instead of drawing them."""

    pages: list[tuple[float, float]] = dc.field(default_factory=list)
    calls: list[SurfaceCall] = dc.field(default_factory=list)
    outline: list[TocEntry] = dc.field(default_factory=list)
    metadata: dict[str, str] = dc.field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def _record(self, op: str, **args: typ.Any) -> None:
        if not self.pages:
            msg = f"Cannot {op} before start_page()."
            raise RuntimeError(msg)
        self.calls.append(SurfaceCall(len(self.pages), op, args))

    def start_page(self, width: float, height: float) -> int:
        self.pages.append((width, height))
        return len(self.pages)

    def draw_text(
        self,
        text: str,
        rect: PointRect,
        *,
        size: float,
        color: str,
        align: str = "left",
        valign: str = "top",
        bold: bool = False,
        rotation: float = 0,
    ) -> None:
        self._record(
            "text",
            text=text,
            rect=rect,
            size=size,
            color=color,
            align=align,
            valign=valign,
            bold=bold,
            rotation=rotation,
        )

    def draw_line(
        self,
        start: Point,
        end: Point,
        *,
        color: str,
        width: float,
        dash: str | None = None,
    ) -> None:
        self._record("line", start=start, end=end, color=color, width=width, dash=dash)

    def draw_rect(
        self,
        rect: PointRect,
        *,
        stroke: str | None = None,
        fill: str | None = None,
        width: float = 0.5,
    ) -> None:
        self._record("rect", rect=rect, stroke=stroke, fill=fill, width=width)

    def draw_dots(self, centers: cabc.Sequence[Point], *, radius: float, color: str) -> None:
        self._record("dots", centers=list(centers), radius=radius, color=color)

    def add_link(self, rect: PointRect, target_page: int) -> None:
        self._record("link", rect=rect, target_page=target_page)

    def set_outline(self, entries: cabc.Sequence[TocEntry]) -> None:
        self.outline = list(entries)

    def set_metadata(self, metadata: cabc.Mapping[str, str]) -> None:
        self.metadata = dict(metadata)

    def calls_on(self, page: int, op: str | None = None) -> list[SurfaceCall]:
        """Return the calls recorded on ``page``, optionally filtered by ``op``."""
        return [
            call
            for call in self.calls
            if call.page == page and (op is None or call.op == op)
        ]

    def texts_on(self, page: int) -> list[str]:
        return [call.args["text"] for call in self.calls_on(page, "text")]

    def link_targets_on(self, page: int) -> list[int]:
        return [call.args["target_page"] for call in self.calls_on(page, "link")]


__all__ = ["Point", "RecordingSurface", "Surface", "SurfaceCall", "TocEntry"]

"""PyMuPDF implementation of the rendering surface.

Examples
--------
>>> surface = PdfSurface()  # doctest: +SKIP
>>> surface.start_page(612, 792)  # doctest: +SKIP
1
>>> surface.save("planner.pdf")  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ

import fitz

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from planner_pages.grid import PointRect
    from planner_pages.surface import Point, TocEntry

logger = logging.getLogger(__name__)

_ALIGN = {"left": fitz.TEXT_ALIGN_LEFT, "center": fitz.TEXT_ALIGN_CENTER, "right": fitz.TEXT_ALIGN_RIGHT}
_DASHES = {"dashed": "[3 2] 0", "dotted": "[1 2] 0"}
_METADATA_KEYS = ("title", "author", "subject", "keywords", "creator", "producer")


def hex_to_rgb(value: str) -> tuple[float, float, float]:
    """Convert ``"RRGGBB"`` to a PyMuPDF colour tuple.

    >>> hex_to_rgb("FF0000")
    (1.0, 0.0, 0.0)
    """
    value = value.lstrip("#")
    if len(value) != 6:
        msg = f"Expected a six-digit hex colour, got '{value}'."
        raise ValueError(msg)
    red, green, blue = (int(value[index : index + 2], 16) / 255 for index in (0, 2, 4))
    return (red, green, blue)


class PdfSurface:
    """Draw onto an in-memory ``fitz.Document`` and save it on demand."""

    def __init__(self) -> None:
        self.doc = fitz.open()
        self._page: fitz.Page | None = None
        self._deferred_links: list[tuple[int, fitz.Rect, int]] = []

    @property
    def page_count(self) -> int:
        return self.doc.page_count

    @property
    def page(self) -> fitz.Page:
        if self._page is None:
            msg = "No page has been started."
            raise RuntimeError(msg)
        return self._page

    def start_page(self, width: float, height: float) -> int:
        self._page = self.doc.new_page(width=width, height=height)
        return self.doc.page_count

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
        x, y, width, height = rect
        if width <= 0 or height <= 0 or not text:
            return
        box = fitz.Rect(x, y, x + width, y + height)
        if valign != "top":
            # insert_textbox only aligns to the top, so shift the box down.
            slack = max(0.0, height - size * 1.2)
            offset = slack if valign == "bottom" else slack / 2
            box = fitz.Rect(box.x0, box.y0 + offset, box.x1, box.y1)
        leftover = self.page.insert_textbox(
            box,
            text,
            fontsize=size,
            fontname="hebo" if bold else "helv",
            color=hex_to_rgb(color),
            align=_ALIGN.get(align, fitz.TEXT_ALIGN_LEFT),
            rotate=int(rotation) % 360,
        )
        if leftover < 0:
            logger.debug("Text %r overflowed its box by %.1fpt", text, -leftover)

    def draw_line(
        self,
        start: Point,
        end: Point,
        *,
        color: str,
        width: float,
        dash: str | None = None,
    ) -> None:
        self.page.draw_line(
            fitz.Point(*start),
            fitz.Point(*end),
            color=hex_to_rgb(color),
            width=width,
            dashes=_DASHES.get(dash) if dash else None,
        )

    def draw_rect(
        self,
        rect: PointRect,
        *,
        stroke: str | None = None,
        fill: str | None = None,
        width: float = 0.5,
    ) -> None:
        x, y, w, h = rect
        self.page.draw_rect(
            fitz.Rect(x, y, x + w, y + h),
            color=hex_to_rgb(stroke) if stroke else None,
            fill=hex_to_rgb(fill) if fill else None,
            width=width,
        )

    def draw_dots(self, centers: cabc.Sequence[Point], *, radius: float, color: str) -> None:
        if not centers:
            return
        shape = self.page.new_shape()
        for cx, cy in centers:
            shape.draw_circle(fitz.Point(cx, cy), radius)
        rgb = hex_to_rgb(color)
        shape.finish(color=rgb, fill=rgb)
        shape.commit()

    def add_link(self, rect: PointRect, target_page: int) -> None:
        """Queue a link; it is inserted by :meth:`apply_deferred_links`.

        PyMuPDF refuses GoTo targets on pages that do not exist yet.
        """
        x, y, w, h = rect
        self._deferred_links.append(
            (self.page.number, fitz.Rect(x, y, x + w, y + h), target_page)
        )

    def apply_deferred_links(self) -> int:
        """Insert every queued link whose target page exists; return the count."""
        inserted = 0
        for page_index, rect, target_page in self._deferred_links:
            if not 1 <= target_page <= self.doc.page_count:
                logger.warning(
                    "Dropping link on page %d to missing page %d", page_index + 1, target_page
                )
                continue
            self.doc[page_index].insert_link(
                {
                    "kind": fitz.LINK_GOTO,
                    "page": target_page - 1,
                    "to": fitz.Point(0, 0),
                    "from": rect,
                }
            )
            inserted += 1
        self._deferred_links.clear()
        return inserted

    def set_outline(self, entries: cabc.Sequence[TocEntry]) -> None:
        toc = [[level, title, -1 if page is None else page] for level, title, page in entries]
        self.doc.set_toc(toc)

    def set_metadata(self, metadata: cabc.Mapping[str, str]) -> None:
        self.doc.set_metadata({key: metadata[key] for key in _METADATA_KEYS if key in metadata})

    def save(self, path: Path | str) -> None:
        self.apply_deferred_links()
        logger.info("Saving %d pages to %s", self.doc.page_count, path)
        self.doc.save(str(path), garbage=3, deflate=True)


__all__ = ["PdfSurface", "hex_to_rgb"]

"""Tests for the PyMuPDF surface."""

from __future__ import annotations

import typing as typ

import fitz
import pytest

from planner_pages.pdf_surface import PdfSurface, hex_to_rgb

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_links_to_later_pages_are_written_on_save(tmp_path: Path) -> None:
    surface = PdfSurface()
    surface.start_page(612, 792)
    surface.add_link((10, 10, 40, 20), 2)
    surface.start_page(612, 792)
    surface.add_link((10, 10, 40, 20), 1)

    surface.save(tmp_path / "linked.pdf")

    with fitz.open(tmp_path / "linked.pdf") as doc:
        assert [link["page"] for link in doc[0].get_links()] == [1]
        assert [link["page"] for link in doc[1].get_links()] == [0]


def test_links_to_missing_pages_are_dropped() -> None:
    surface = PdfSurface()
    surface.start_page(612, 792)
    surface.add_link((0, 0, 10, 10), 5)
    surface.add_link((0, 0, 10, 10), 1)

    assert surface.apply_deferred_links() == 1
    assert surface.apply_deferred_links() == 0, "queued links are inserted once"


def test_drawing_needs_a_started_page() -> None:
    with pytest.raises(RuntimeError, match="No page"):
        PdfSurface().add_link((0, 0, 10, 10), 1)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("FFFFFF", (1.0, 1.0, 1.0)), ("#000000", (0.0, 0.0, 0.0))],
)
def test_hex_to_rgb(value: str, expected: tuple[float, float, float]) -> None:
    assert hex_to_rgb(value) == expected


def test_hex_to_rgb_rejects_short_values() -> None:
    with pytest.raises(ValueError, match="six-digit"):
        hex_to_rgb("FFF")

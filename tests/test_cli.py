"""Tests for the ``planner`` command functions.

The commands are called directly rather than through the cyclopts app, with
the working directory moved into ``tmp_path`` so default paths stay isolated.
Most tests swap the PDF surface for a recording one; a single end-to-end test
writes and reopens a real PDF.
"""

from __future__ import annotations

import json
from pathlib import Path
from textwrap import dedent

import fitz
import pytest

from planner_pages import cli
from planner_pages.surface import RecordingSurface


class _SavingSurface(RecordingSurface):
    """Recording surface that leaves a placeholder file behind on save."""

    def save(self, path: Path | str) -> None:
        Path(path).write_bytes(b"%PDF-1.7\n")


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def recording_pdf(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "PdfSurface", _SavingSurface)


def _manifest(directory: Path, recipe: str = "standard_planner") -> dict[str, object]:
    path = directory / f".planner-{recipe}-meta.json"
    return json.loads(path.read_text(encoding="utf-8"))


def test_generate_writes_a_linked_pdf(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.generate(year=2025)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "wrote planner_2025.pdf",
        "wrote .planner-standard_planner-meta.json",
    ]
    with fitz.open(workdir / "planner_2025.pdf") as doc:
        assert doc.page_count == 83
        toc = doc.get_toc()
        assert toc[0] == [1, "Seasonal Calendar", 1]
        assert [1, "Weeks", 9] in toc
        assert any(link["page"] == 8 for link in doc[11].get_links()), (
            "week 2 should link back to week 1"
        )
        assert doc.metadata["title"] == "Planner 2025"


@pytest.mark.usefixtures("recording_pdf")
def test_config_file_and_overrides_are_applied(
    workdir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (workdir / "planner.yaml").write_text(
        dedent(
            """
            year: 2025
            theme: earth
            metadata:
              title: My Year
            collections:
              - id: books
                title: Books to Read
            """
        ).lstrip(),
        encoding="utf-8",
    )

    cli.generate(theme="dark", output=workdir / "out" / "custom.pdf")

    assert (workdir / "out" / "custom.pdf").exists()
    manifest = _manifest(workdir / "out")
    assert manifest["theme"] == "dark", "the command-line theme should win"
    assert manifest["title"] == "My Year"
    assert manifest["page_count"] == 84
    assert "collection_books" in manifest["destinations"]
    assert capsys.readouterr().out.splitlines()[0] == "wrote out/custom.pdf"


@pytest.mark.usefixtures("workdir")
def test_explicit_missing_config_is_an_error() -> None:
    with pytest.raises(FileNotFoundError, match="elsewhere.yaml"):
        cli.generate(config=Path("elsewhere.yaml"), year=2025)


@pytest.mark.usefixtures("workdir", "recording_pdf")
def test_daily_recipe_can_be_selected() -> None:
    cli.generate(year=2025, recipe="daily")

    manifest = _manifest(Path.cwd(), "daily")
    assert manifest["recipe"] == "daily"
    assert manifest["page_count"] == 8 + 365 + 6


@pytest.mark.usefixtures("workdir")
def test_outline_prints_indented_bookmarks(capsys: pytest.CaptureFixture[str]) -> None:
    cli.outline(year=2025)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Seasonal Calendar .... 1"
    assert "Weeks .... 9" in lines
    assert "  Week 1 .... 9" in lines
    assert "  Q1 Planning .... 10" in lines
    assert "  January Review .... 11" in lines
    assert "Grids .... 78" in lines
    assert "  Dot Grid .... 79" in lines


def test_recipes_lists_every_recipe(capsys: pytest.CaptureFixture[str]) -> None:
    cli.recipes()

    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == ["standard_planner", "daily"]

"""Unit tests for loading ``planner.yaml`` into :class:`PlannerConfig`.

Each test writes a small YAML document into ``tmp_path`` and checks the parsed
dataclasses or the validation error raised for malformed input.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path
from textwrap import dedent

import pytest

from planner_pages import _constants
from planner_pages.config import (
    CollectionConfig,
    PlannerConfig,
    PlannerConfigError,
    load_planner_config,
)


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "planner.yaml"
    path.write_text(dedent(body).lstrip(), encoding="utf-8")
    return path


def test_full_config_is_parsed(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
        year: 2026
        recipe: daily
        theme: earth
        output: out/daily.pdf
        page_size: A4
        dot_spacing: 12.5
        metadata:
          author: Sam
          keywords: [planner, 2026]
        collections:
          - id: books
            title: Books to Read
            subtitle: fiction first
          - id: films
            title: Films
        """,
    )

    config = load_planner_config(path)

    assert config.year == 2026
    assert config.recipe == "daily"
    assert config.theme == "earth"
    assert config.output_path == Path("out/daily.pdf")
    assert config.page_size == "a4"
    assert config.dot_spacing == 12.5
    assert config.metadata == {"author": "Sam", "keywords": ["planner", 2026]}
    assert config.collections == [
        CollectionConfig("books", "Books to Read", "fiction first"),
        CollectionConfig("films", "Films"),
    ]


def test_defaults_are_applied(tmp_path: Path) -> None:
    config = load_planner_config(_write_config(tmp_path, "{}\n"))

    assert config.year == dt.date.today().year  # noqa: DTZ011
    assert config.recipe == "standard_planner"
    assert config.theme is None
    assert config.page_size == _constants.DEFAULT_PAGE_SIZE
    assert config.dot_spacing == _constants.DOT_SPACING
    assert config.output_path == Path(f"planner_{config.year}.pdf")


def test_recipe_params_carry_collections() -> None:
    config = PlannerConfig(
        year=2025, theme="dark", collections=[CollectionConfig("books", "Books")]
    )

    assert config.recipe_params() == {
        "year": 2025,
        "theme": "dark",
        "collections": [{"id": "books", "title": "Books", "subtitle": None}],
    }


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_planner_config(tmp_path / "absent.yaml")


def test_top_level_must_be_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(TypeError, match="mapping"):
        load_planner_config(_write_config(tmp_path, "- 2025\n- 2026\n"))


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("year: 1066\n", "year"),
        ("year: true\n", "year"),
        ("year: soon\n", "year"),
        ("page_size: tabloid\n", "page size"),
        ("dot_spacing: 0\n", "dot_spacing"),
        ("metadata: [title]\n", "metadata"),
        ("metadata:\n  colour: blue\n", "colour"),
        ("collections: books\n", "list"),
        ("collections:\n  - books\n", "mapping"),
        ("collections:\n  - id: books\n", "'title'"),
        ("collections:\n  - id: 'my books'\n    title: Books\n", "letters"),
        (
            "collections:\n  - id: books\n    title: A\n  - id: books\n    title: B\n",
            "Duplicate",
        ),
    ],
)
def test_invalid_values_are_rejected(tmp_path: Path, body: str, message: str) -> None:
    with pytest.raises(PlannerConfigError, match=message):
        load_planner_config(_write_config(tmp_path, body))


def test_year_may_be_quoted(tmp_path: Path) -> None:
    config = load_planner_config(_write_config(tmp_path, "year: '2027'\n"))

    assert config.year == 2027

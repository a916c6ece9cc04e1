"""Cyclopts CLI entrypoint for building planner PDFs.

The ``planner`` console script builds a planner document from a named recipe,
prints the bookmark outline a build would produce, and lists the available
recipes. Options may also be supplied through ``PLANNER_*`` environment
variables, which makes the commands convenient to drive from CI.

Examples
--------
Build the standard planner for 2025:

>>> from planner_pages.cli import app
>>> app(["generate", "--year", "2025"])  # doctest: +SKIP

Show the bookmarks of the daily recipe without writing a PDF:

>>> app(["outline", "--recipe", "daily", "--year", "2025"])  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import PlannerBuilder, write_manifest
from .config import PlannerConfig, load_planner_config
from .grid import GridSystem
from .outline import emit_outline
from .pdf_surface import PdfSurface
from .recipes import default_recipes
from .surface import RecordingSurface

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .builder import BuildResult
    from .surface import Surface

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path("planner.yaml")

app = App(name="planner", config=cyclopts.config.Env("PLANNER_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(
    config: Path,
    *,
    year: int | None,
    recipe: str | None,
    theme: str | None,
    output: Path | None,
) -> PlannerConfig:
    """Load ``config`` when present and apply command-line overrides."""
    if config.exists():
        planner_config = load_planner_config(config)
    else:
        if config != DEFAULT_CONFIG:
            msg = f"Configuration file '{config}' not found."
            raise FileNotFoundError(msg)
        logger.debug("No %s found; using defaults", config)
        planner_config = PlannerConfig(year=year or dt.date.today().year)  # noqa: DTZ011
    if year is not None:
        planner_config.year = year
    if recipe is not None:
        planner_config.recipe = recipe
    if theme is not None:
        planner_config.theme = theme
    if output is not None:
        planner_config.output = output
    return planner_config


def _with_metadata(
    definition: cabc.Callable[..., None], overrides: cabc.Mapping[str, typ.Any]
) -> cabc.Callable[..., None]:
    """Wrap ``definition`` so configured metadata wins over the recipe's."""
    if not overrides:
        return definition

    def definition_with_metadata(doc: typ.Any, **params: typ.Any) -> None:  # noqa: ANN401
        definition(doc, **params)
        doc.metadata(**overrides)

    return definition_with_metadata


def build_planner(planner_config: PlannerConfig, surface: Surface) -> BuildResult:
    """Build the configured recipe onto ``surface``."""
    recipe = default_recipes().get(planner_config.recipe)
    builder = PlannerBuilder(
        grid=GridSystem.for_page_size(planner_config.page_size, planner_config.dot_spacing)
    )
    return builder.build(
        _with_metadata(recipe.definition, planner_config.metadata),
        surface,
        **planner_config.recipe_params(),
    )


@app.command(help="Build a planner PDF from a recipe.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to planner config", env_var="PLANNER_CONFIG")
    ] = DEFAULT_CONFIG,
    year: typ.Annotated[
        int | None, Parameter(help="Planner year", env_var="PLANNER_YEAR")
    ] = None,
    recipe: typ.Annotated[
        str | None, Parameter(help="Recipe name", env_var="PLANNER_RECIPE")
    ] = None,
    theme: typ.Annotated[
        str | None, Parameter(help="Theme name", env_var="PLANNER_THEME")
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Output PDF path", env_var="PLANNER_OUTPUT")
    ] = None,
) -> None:
    """Build the planner and write the PDF plus its build manifest.

    Parameters
    ----------
    config : Path, optional
        Path to the ``planner.yaml`` configuration file. A missing default
        file is tolerated; a missing explicit one is an error.
    year : int or None, optional
        Overrides the configured year.
    recipe : str or None, optional
        Overrides the configured recipe.
    theme : str or None, optional
        Overrides the configured theme.
    output : Path or None, optional
        Overrides the configured output path.

    Raises
    ------
    FileNotFoundError
        If an explicitly given configuration file does not exist.
    UnknownTypeError
        If the recipe or theme is not registered.
    PageBuildError
        If any page fails to build.
    """
    planner_config = _resolve_config(
        config, year=year, recipe=recipe, theme=theme, output=output
    )
    surface = PdfSurface()
    result = build_planner(planner_config, surface)
    output_path = planner_config.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    surface.save(output_path)
    print(f"wrote {_format_path(output_path)}")
    manifest = write_manifest(output_path, result, planner_config.recipe)
    if manifest is not None:
        print(f"wrote {_format_path(manifest)}")


@app.command(help="Print the bookmark outline a recipe produces.")
def outline(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to planner config", env_var="PLANNER_CONFIG")
    ] = DEFAULT_CONFIG,
    year: typ.Annotated[
        int | None, Parameter(help="Planner year", env_var="PLANNER_YEAR")
    ] = None,
    recipe: typ.Annotated[
        str | None, Parameter(help="Recipe name", env_var="PLANNER_RECIPE")
    ] = None,
) -> None:
    """Build the recipe in memory and print its outline, one entry per line."""
    planner_config = _resolve_config(
        config, year=year, recipe=recipe, theme=None, output=None
    )
    result = build_planner(planner_config, RecordingSurface())
    for level, title, page in emit_outline(result.outline):
        suffix = f" .... {page}" if page is not None else ""
        print(f"{'  ' * (level - 1)}{title}{suffix}")


@app.command(help="List the available recipes.")
def recipes() -> None:
    for recipe in default_recipes():
        print(f"{recipe.name}: {recipe.description}")


def main() -> None:
    """Run the ``planner`` command-line application.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

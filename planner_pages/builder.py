"""Build orchestration: declare, register, render, outline.

:class:`PlannerBuilder` runs a document definition through the full pipeline:

1. the declare pass collects page, group, and outline declarations;
2. every page gets its 1-based page number in declaration order and the
   link registry is frozen;
3. each page is rendered onto the surface from a fresh layout tree, with a
   link resolver scoped to that page;
4. the bookmark outline and document metadata are attached.

Example
-------
>>> from planner_pages.recipes import standard_planner
>>> from planner_pages.surface import RecordingSurface
>>> surface = RecordingSurface()
>>> result = PlannerBuilder().build(standard_planner, surface, year=2025)  # doctest: +SKIP
>>> result.page_count == surface.page_count  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import enum
import json
import logging
import typing as typ

from planner_pages import _constants
from planner_pages.calendar import total_weeks
from planner_pages.declarations import DeclarationCollector, InlinePageDeclaration
from planner_pages.errors import PageBuildError
from planner_pages.grid import GridSystem
from planner_pages.layout import ComponentRegistry, LayoutBuilder, LayoutRenderer
from planner_pages.links import LinkRegistry
from planner_pages.outline import assemble_outline, emit_outline
from planner_pages.pages import build_page_context, default_page_types, inline_page
from planner_pages.themes import StyleResolver, ThemeRegistry

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from planner_pages.declarations import DocumentMetadata, PageDeclaration
    from planner_pages.outline import OutlineNode
    from planner_pages.pages import PageBuildFn, PageTypeRegistry
    from planner_pages.surface import Surface
    from planner_pages.themes import Theme

logger = logging.getLogger(__name__)


class BuildPhase(enum.Enum):
    """Pipeline stage a :class:`PlannerBuilder` has reached."""

    IDLE = "idle"
    DECLARED = "declared"
    REGISTERED = "registered"
    RENDERING = "rendering"
    OUTLINED = "outlined"
    DONE = "done"


@dc.dataclass(slots=True)
class BuildResult:
    """What a finished build produced besides the drawn pages."""

    page_count: int
    registry: LinkRegistry
    outline: list[OutlineNode]
    metadata: DocumentMetadata
    theme: str

    def manifest(self, recipe: str) -> dict[str, typ.Any]:
        return {
            "recipe": recipe,
            "title": self.metadata.title,
            "theme": self.theme,
            "page_count": self.page_count,
            "destinations": self.registry.page_numbers(),
        }


class PlannerBuilder:
    """Run document definitions against a rendering surface.

    Parameters
    ----------
    pages : PageTypeRegistry, optional
        Page types available to declarations; the built-in set by default.
    themes : ThemeRegistry, optional
        Themes and the active selection; the built-in themes by default.
    grid : GridSystem, optional
        Page geometry; US letter with 5 mm boxes by default.
    components : ComponentRegistry, optional
        Reusable layout components handed to every page's layout builder.
    """

    def __init__(
        self,
        pages: PageTypeRegistry | None = None,
        themes: ThemeRegistry | None = None,
        grid: GridSystem | None = None,
        components: ComponentRegistry | None = None,
    ) -> None:
        self.pages = pages if pages is not None else default_page_types()
        self.themes = themes if themes is not None else ThemeRegistry()
        self.grid = grid if grid is not None else GridSystem()
        self.components = components if components is not None else ComponentRegistry()
        self.phase = BuildPhase.IDLE

    def declare(
        self, definition: cabc.Callable[..., None], **params: typ.Any
    ) -> DeclarationCollector:
        """Run only the declare pass and return the collected declarations."""
        collector = DeclarationCollector(title_lookup=self.pages.title_for)
        return collector.declare(definition, **params)

    def register(self, collector: DeclarationCollector) -> LinkRegistry:
        """Number the declared pages in order and register their destinations."""
        registry = LinkRegistry()
        for page_number, declaration in enumerate(collector.pages, start=1):
            registry.register(declaration, page_number)
        for group in collector.groups:
            registry.register_group(group)
        return registry

    def build(
        self,
        definition: cabc.Callable[..., None],
        surface: Surface,
        **params: typ.Any,
    ) -> BuildResult:
        """Declare, register, render, and outline ``definition``.

        Parameters
        ----------
        definition : callable
            Document definition, called as ``definition(collector, **params)``.
        surface : Surface
            Receives every page and drawing call.
        **params
            Passed to the definition. ``year`` and ``collections`` also seed
            every page's render context.

        Returns
        -------
        BuildResult
            Page count, frozen registry, resolved outline, and metadata.

        Raises
        ------
        PageBuildError
            If constructing or rendering any page fails; chained to the cause.
        """
        self.phase = BuildPhase.IDLE
        with self.themes.preserved():
            collector = self.declare(definition, **params)
            self.phase = BuildPhase.DECLARED
            if collector.theme_name:
                self.themes.set_active(collector.theme_name)
            theme = self.themes.active

            registry = self.register(collector)
            self.phase = BuildPhase.REGISTERED
            logger.info(
                "Registered %d pages in %d groups", len(registry), len(collector.groups)
            )

            self.phase = BuildPhase.RENDERING
            year = params.get("year") or dt.date.today().year  # noqa: DTZ011 - calendar year only
            base = {
                "year": year,
                "total_weeks": total_weeks(year),
                "total_pages": len(collector.pages),
                "collections": list(params.get("collections", ())),
            }
            for page_number, declaration in enumerate(collector.pages, start=1):
                try:
                    self._render_page(declaration, page_number, surface, registry, base, theme)
                except Exception as exc:
                    raise PageBuildError(declaration.type, page_number, exc) from exc

            outline = assemble_outline(collector.outline, registry.page_numbers())
            surface.set_outline(emit_outline(outline))
            surface.set_metadata(collector.document_metadata.as_info())
            self.phase = BuildPhase.OUTLINED
        self.phase = BuildPhase.DONE
        logger.info("Built %d pages", surface.page_count)
        return BuildResult(
            page_count=surface.page_count,
            registry=registry,
            outline=outline,
            metadata=collector.document_metadata,
            theme=theme.name,
        )

    def _render_page(
        self,
        declaration: PageDeclaration,
        page_number: int,
        surface: Surface,
        registry: LinkRegistry,
        base: cabc.Mapping[str, typ.Any],
        theme: Theme,
    ) -> None:
        generate = self._page_builder(declaration)
        context = build_page_context(
            declaration,
            page_number,
            base=base,
            registry=registry,
            grid=self.grid,
            theme=theme,
        )
        surface.start_page(self.grid.page_width, self.grid.page_height)
        layout = LayoutBuilder(self.components)
        generate(context, layout)
        layout.compute(0, 0, self.grid.cols, self.grid.rows)
        renderer = LayoutRenderer(surface, self.grid, StyleResolver(theme), context.links)
        renderer.render(layout.root)
        logger.debug("Rendered page %d (%s)", page_number, declaration.destination_key)

    def _page_builder(self, declaration: PageDeclaration) -> PageBuildFn:
        match declaration:
            case InlinePageDeclaration():
                return inline_page(declaration)
            case _:
                return self.pages.get(declaration.type).generate


def manifest_path(output: Path, recipe: str) -> Path:
    """Return the build manifest path that sits next to ``output``."""
    return output.parent / _constants.BUILD_META_TEMPLATE.format(recipe=recipe)


def write_manifest(output: Path, result: BuildResult, recipe: str) -> Path | None:
    """Persist the build manifest JSON; return its path, or ``None`` on IO errors."""
    path = manifest_path(output, recipe)
    try:
        path.write_text(json.dumps(result.manifest(recipe), indent=2), encoding="utf-8")
    except OSError as exc:  # pragma: no cover - IO issues
        logger.warning("Could not write build manifest %s: %s", path, exc)
        return None
    return path


__all__ = [
    "BuildPhase",
    "BuildResult",
    "PlannerBuilder",
    "manifest_path",
    "write_manifest",
]

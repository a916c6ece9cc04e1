"""Colour themes and cascading style resolution.

A :class:`Theme` maps colour names to hex strings and holds named styles and
per-element defaults. :class:`StyleResolver` merges, in increasing priority,
the element defaults, a named style, and inline overrides. Themes live in an
explicit :class:`ThemeRegistry` which also tracks the active theme.
"""

from __future__ import annotations

import contextlib
import dataclasses as dc
import logging
import typing as typ

from planner_pages.errors import UnknownTypeError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

StyleMap = dict[str, typ.Any]

DEFAULT_THEME = "light"


@dc.dataclass(slots=True)
class Theme:
    """Named palette plus style tables."""

    name: str
    display_name: str
    colors: dict[str, str]
    styles: dict[str, StyleMap] = dc.field(default_factory=dict)
    defaults: dict[str, StyleMap] = dc.field(default_factory=dict)

    def color(self, name: str) -> str | None:
        return self.colors.get(name)

    def style(self, name: str) -> StyleMap | None:
        return self.styles.get(name)

    def defaults_for(self, element_type: str) -> StyleMap | None:
        return self.defaults.get(element_type)


class StyleResolver:
    """Resolve effective styles for one theme.

    Examples
    --------
    >>> resolver = StyleResolver(THEMES["light"])
    >>> resolver.resolve("text", style="title")["font_size"]
    14
    >>> resolver.resolve("text", style="title", font_size=18)["font_size"]
    18
    """

    def __init__(self, theme: Theme) -> None:
        self.theme = theme

    def resolve(
        self, element_type: str, style: str | None = None, **inline: typ.Any
    ) -> StyleMap:
        result: StyleMap = {}
        defaults = self.theme.defaults_for(element_type)
        if defaults:
            result.update(defaults)
        if style is not None:
            named = self.theme.style(style)
            if named:
                result.update(named)
        result.update({key: value for key, value in inline.items() if value is not None})
        return result

    def color(self, name: str) -> str | None:
        return self.theme.color(name)


def _build_theme(name: str, display_name: str, colors: dict[str, str]) -> Theme:
    """Derive the style tables every built-in theme shares from its palette."""
    text = colors["text_black"]
    muted = colors["text_gray"]
    return Theme(
        name=name,
        display_name=display_name,
        colors=colors,
        styles={
            "title": {"font_size": 14, "font_weight": "bold", "color": text},
            "subtitle": {"font_size": 11, "color": muted},
            "body": {"font_size": 10, "color": text},
            "label": {"font_size": 8, "color": muted},
            "nav_link": {"font_size": 8, "color": muted},
            "tab": {"font_size": 8, "color": muted},
        },
        defaults={
            "text": {"font_family": "helv", "font_size": 10, "color": text},
            "dot_grid": {"dot_color": colors["dot_grid"], "dot_radius": 0.5},
            "graph_grid": {"line_color": colors["borders"], "line_width": 0.25},
            "ruled_lines": {"line_color": colors["borders"], "line_width": 0.25},
            "divider": {"color": colors["borders"]},
            "field": {"line_color": colors["borders"], "label_color": muted},
            "nav_link": {"color": muted},
            "tab": {"color": muted},
        },
    )


THEMES: dict[str, Theme] = {
    "light": _build_theme(
        "light",
        "Light",
        {
            "background": "FFFFFF",
            "dot_grid": "CCCCCC",
            "borders": "E5E5E5",
            "section_headers": "AAAAAA",
            "weekend_bg": "CCCCCC",
            "text_black": "000000",
            "text_gray": "888888",
        },
    ),
    "earth": _build_theme(
        "earth",
        "Earth",
        {
            "background": "F5F1E8",
            "dot_grid": "758C74",
            "borders": "D4CDB8",
            "section_headers": "8B9A8B",
            "weekend_bg": "758C74",
            "text_black": "696953",
            "text_gray": "6B7565",
        },
    ),
    "dark": _build_theme(
        "dark",
        "Dark",
        {
            "background": "1E1E1E",
            "dot_grid": "505050",
            "borders": "555555",
            "section_headers": "888888",
            "weekend_bg": "505050",
            "text_black": "B0B0B0",
            "text_gray": "A0A0A0",
        },
    ),
}


class ThemeRegistry:
    """Explicit registry of themes with one active selection."""

    def __init__(
        self,
        themes: cabc.Mapping[str, Theme] | None = None,
        *,
        default: str = DEFAULT_THEME,
    ) -> None:
        self._themes: dict[str, Theme] = dict(THEMES if themes is None else themes)
        self.default = default
        self._active = default

    def register(self, theme: Theme) -> Theme:
        self._themes[theme.name] = theme
        return theme

    def get(self, name: str) -> Theme:
        try:
            return self._themes[name]
        except KeyError:
            raise UnknownTypeError("theme", name, list(self._themes)) from None

    def names(self) -> list[str]:
        return sorted(self._themes)

    def __contains__(self, name: object) -> bool:
        return name in self._themes

    @property
    def active_name(self) -> str:
        return self._active

    @property
    def active(self) -> Theme:
        return self.get(self._active)

    def set_active(self, name: str) -> Theme:
        """Activate ``name`` after checking it is registered."""
        theme = self.get(name)
        logger.debug("Activating theme %s", name)
        self._active = name
        return theme

    def reset(self) -> None:
        self._active = self.default

    @contextlib.contextmanager
    def preserved(self) -> cabc.Iterator[ThemeRegistry]:
        """Restore the active theme on exit, whatever happens inside."""
        saved = self._active
        try:
            yield self
        finally:
            self._active = saved


__all__ = ["DEFAULT_THEME", "THEMES", "StyleResolver", "Theme", "ThemeRegistry"]

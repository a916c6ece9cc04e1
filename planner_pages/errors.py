"""Exception taxonomy shared by the layout, declaration, and build layers.

Construction-time validation problems raise :class:`ConfigurationError`,
references to unregistered page, component, theme, or recipe names raise
:class:`UnknownTypeError`, and failures inside a page's content builder are
wrapped in :class:`PageBuildError` so the offending page is named in the
traceback. Link-resolution misses are never exceptions; resolvers return
``None`` instead.
"""

from __future__ import annotations


class PlannerError(Exception):
    """Base class for errors raised by planner_pages."""


class ConfigurationError(PlannerError, ValueError):
    """Raised when constructor arguments conflict or are missing."""


class UnknownTypeError(PlannerError, KeyError):
    """Raised when a definition references an unregistered type name."""

    def __init__(self, kind: str, name: str, known: list[str] | None = None) -> None:
        self.kind = kind
        self.name = name
        self.known = sorted(known or [])
        super().__init__(kind, name)

    def __str__(self) -> str:
        msg = f"Unknown {self.kind} '{self.name}'."
        if self.known:
            msg = f"{msg} Known {self.kind}s: {', '.join(self.known)}"
        return msg


class PageBuildError(PlannerError):
    """Raised when a page's content builder fails during the render pass.

    Attributes
    ----------
    page_type : str
        Type tag of the declared page that failed.
    page_number : int
        1-based position of the page in render order.
    """

    def __init__(self, page_type: str, page_number: int, cause: BaseException) -> None:
        self.page_type = page_type
        self.page_number = page_number
        super().__init__(
            f"Failed to build page '{page_type}' (page {page_number}): {cause}"
        )


__all__ = [
    "ConfigurationError",
    "PageBuildError",
    "PlannerError",
    "UnknownTypeError",
]

"""Generate linked, printable planner PDFs.

This package exposes the CLI entry points used by ``planner generate`` and
friends. The building blocks live in subpackages: :mod:`planner_pages.layout`
computes page geometry, :mod:`planner_pages.declarations` and
:mod:`planner_pages.links` resolve cross-page links, and
:mod:`planner_pages.builder` orchestrates a build.

Exports
-------
- ``app``: Cyclopts application with the ``planner`` subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from planner_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

"""Declare pass: page, group, and outline declarations."""

from __future__ import annotations

from .collector import FIRST, DeclarationCollector, OutlineTarget, humanize_key
from .models import (
    INLINE_PAGE_TYPE,
    DocumentMetadata,
    GroupDeclaration,
    InlinePageDeclaration,
    OutlineDeclaration,
    PageDeclaration,
)

__all__ = [
    "FIRST",
    "INLINE_PAGE_TYPE",
    "DeclarationCollector",
    "DocumentMetadata",
    "GroupDeclaration",
    "InlinePageDeclaration",
    "OutlineDeclaration",
    "OutlineTarget",
    "PageDeclaration",
    "humanize_key",
]
